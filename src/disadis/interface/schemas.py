"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel

from disadis.domain.entities import DsInfo


class DatastreamProfileResponse(BaseModel):
    """Successful response from ``GET /objects/{id}/datastreams/{dsname}``."""

    label: str
    version_id: str
    version: int
    state: str
    checksum: str
    mime_type: str
    location: str
    location_type: str
    size: str

    @classmethod
    def from_info(cls, info: DsInfo) -> DatastreamProfileResponse:
        return cls(
            label=info.label,
            version_id=info.version_id,
            version=info.version,
            state=info.state,
            checksum=info.checksum,
            mime_type=info.mime_type,
            location=info.location,
            location_type=info.location_type,
            size=info.size,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
