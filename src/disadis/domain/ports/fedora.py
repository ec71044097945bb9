"""Port: Fedora datastream access, defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from disadis.domain.entities import ContentInfo, DsInfo
from disadis.domain.stream import ContentStream


class Fedora(Protocol):
    """Abstract contract for reading datastreams out of a Fedora repository.

    Both operations raise ``DatastreamNotFoundError``,
    ``FedoraNotAuthorizedError`` or ``FedoraTransportError`` on failure and
    never return partial results.
    """

    def get_content(self, object_id: str, dsname: str) -> tuple[ContentStream, ContentInfo]:
        """Return the content of datastream ``dsname`` of object ``object_id``.

        The caller owns the returned stream and must close it.
        """
        ...

    def get_metadata(self, object_id: str, dsname: str) -> DsInfo:
        """Return the datastream profile of ``dsname`` on ``object_id``."""
        ...
