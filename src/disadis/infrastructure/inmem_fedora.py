"""In-memory Fedora: implements the Fedora port for tests."""

from __future__ import annotations

from dataclasses import replace

from disadis.domain.entities import ContentInfo, DsInfo
from disadis.domain.exceptions import DatastreamNotFoundError
from disadis.domain.stream import ContentStream
from disadis.domain.value_objects import DatastreamId


class InMemoryFedora:
    """Deterministic ``Fedora`` stub serving datastreams registered with :meth:`set`.

    Nothing is shared with a real repository.  The backing dict is not
    locked; callers mixing :meth:`set` with concurrent reads must
    synchronise themselves.
    """

    def __init__(self) -> None:
        self._data: dict[DatastreamId, tuple[DsInfo, bytes]] = {}

    def set(
        self,
        object_id: str,
        dsname: str,
        info: DsInfo | None,
        content: bytes,
    ) -> None:
        """Store ``content`` under (object_id, dsname), replacing any earlier entry.

        Fields of ``info`` left empty get defaults: state ``A``, version id
        ``<dsname>.0``, location ``<id>+<dsname>+<version id>``, location type
        ``INTERNAL_ID`` and the length of ``content`` as size.
        """
        key = DatastreamId(object_id, dsname)
        info = info or DsInfo()
        version_id = info.version_id or f"{dsname}.0"
        info = replace(
            info,
            state=info.state or "A",
            version_id=version_id,
            location=info.location or f"{object_id}+{dsname}+{version_id}",
            location_type=info.location_type or "INTERNAL_ID",
            size=info.size or str(len(content)),
        )
        self._data[key] = (info, bytes(content))

    def get_content(self, object_id: str, dsname: str) -> tuple[ContentStream, ContentInfo]:
        info, content = self._lookup(object_id, dsname)
        return ContentStream.from_bytes(content), ContentInfo(type="text/plain", length=info.size)

    def get_metadata(self, object_id: str, dsname: str) -> DsInfo:
        info, _ = self._lookup(object_id, dsname)
        return info

    def _lookup(self, object_id: str, dsname: str) -> tuple[DsInfo, bytes]:
        key = DatastreamId(object_id, dsname)
        try:
            return self._data[key]
        except KeyError:
            raise DatastreamNotFoundError(
                f"No such datastream {object_id}/{dsname}"
            ) from None
