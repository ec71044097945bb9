"""API routes: thin controllers that delegate to the Fedora port."""

from __future__ import annotations

from typing import Iterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from disadis.domain.entities import ContentInfo
from disadis.domain.ports.fedora import Fedora
from disadis.domain.stream import ContentStream
from disadis.interface.dependencies import get_fedora
from disadis.interface.schemas import DatastreamProfileResponse, ErrorResponse

router = APIRouter()

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"model": ErrorResponse, "description": "Fedora denied access"},
    404: {"model": ErrorResponse, "description": "Object or datastream not found"},
    422: {"model": ErrorResponse, "description": "Empty object id or datastream name"},
    502: {"model": ErrorResponse, "description": "Fedora could not be reached or misbehaved"},
}


def _content_headers(info: ContentInfo) -> dict[str, str]:
    # info.length is only declared, never checked against the body, so it is
    # not promised as Content-Length; the response is sent chunked instead.
    headers = {
        "Content-Encoding": info.encoding,
        "Content-Disposition": info.disposition,
        "X-Content-Md5": info.md5,
        "X-Content-Sha256": info.sha256,
    }
    return {name: value for name, value in headers.items() if value}


def _iter_then_close(stream: ContentStream) -> Iterator[bytes]:
    # also runs when a read fails mid-body, where the background task does not
    try:
        yield from stream
    finally:
        stream.close()


@router.get(
    "/objects/{object_id}/datastreams/{dsname}/content",
    response_class=StreamingResponse,
    responses=_ERROR_RESPONSES,
)
def get_content(
    object_id: str,
    dsname: str,
    fedora: Fedora = Depends(get_fedora),
) -> StreamingResponse:
    """Stream the content of a datastream."""
    stream, info = fedora.get_content(object_id, dsname)
    return StreamingResponse(
        _iter_then_close(stream),
        media_type=info.type or "application/octet-stream",
        headers=_content_headers(info),
        background=BackgroundTask(stream.close),
    )


@router.get(
    "/objects/{object_id}/datastreams/{dsname}",
    response_model=DatastreamProfileResponse,
    responses=_ERROR_RESPONSES,
)
def get_metadata(
    object_id: str,
    dsname: str,
    fedora: Fedora = Depends(get_fedora),
) -> DatastreamProfileResponse:
    """Return the Fedora profile of a datastream."""
    return DatastreamProfileResponse.from_info(fedora.get_metadata(object_id, dsname))
