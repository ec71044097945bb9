"""Domain exception hierarchy.

The Fedora adapters raise these; the dissemination layer translates them
into HTTP status codes for its own clients.
"""

from __future__ import annotations


class DisadisError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidDatastreamIdError(DisadisError, ValueError):
    """An object id or datastream name was empty."""


class InvalidFedoraUrlError(DisadisError, ValueError):
    """The configured Fedora base URL is not an http(s) URL."""


# ── Fedora responses ────────────────────────────────────────────────────────


class DatastreamNotFoundError(DisadisError):
    """The object or datastream does not exist in Fedora (404)."""


class FedoraNotAuthorizedError(DisadisError):
    """Fedora rejected the request for lack of credentials (401)."""


class FedoraTransportError(DisadisError):
    """Any other failure talking to Fedora.

    Covers unexpected status codes, network errors, and undecodable
    metadata.  ``status_code`` is set only when Fedora actually answered.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
