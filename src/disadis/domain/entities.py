"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Fedora reports this in dsChecksum when checksumming is disabled.
CHECKSUM_NONE = "none"

_VERSION_SUFFIX_RE = re.compile(r"[+-]?[0-9]+")


def normalize_checksum(raw: str) -> str:
    """Map Fedora's ``"none"`` checksum sentinel to the empty string.

    Note this cannot tell a missing checksum from one Fedora explicitly
    reported as ``none``; both come back as ``""``.
    """
    return "" if raw == CHECKSUM_NONE else raw


@dataclass(frozen=True, slots=True)
class ContentInfo:
    """Metadata taken from the HTTP headers of a content response.

    Any field may be ``""``, meaning the value was not provided.  ``md5`` and
    ``sha256`` are only filled in when Fedora redirected to a content store
    that reports checksums.  ``encoding`` is the ``Content-Encoding`` the
    body is still in; the stream is never decompressed.
    """

    type: str = ""
    length: str = ""
    disposition: str = ""
    md5: str = ""
    sha256: str = ""
    encoding: str = ""


@dataclass(frozen=True, slots=True)
class DsInfo:
    """Datastream profile as reported by Fedora."""

    label: str = ""
    version_id: str = ""
    state: str = ""
    checksum: str = ""
    mime_type: str = ""
    location: str = ""
    location_type: str = ""
    size: str = ""

    @property
    def version(self) -> int:
        """Numeric suffix of ``version_id`` (``"content.7"`` → 7), or -1."""
        _, sep, suffix = self.version_id.rpartition(".")
        if not sep or not _VERSION_SUFFIX_RE.fullmatch(suffix):
            return -1
        return int(suffix)
