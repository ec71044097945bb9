"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from disadis.domain.ports.fedora import Fedora
from disadis.infrastructure.config import get_settings
from disadis.infrastructure.fedora_rest_adapter import RemoteFedora

_http_client: httpx.Client | None = None
_fedora: RemoteFedora | None = None


def startup() -> None:
    """Initialise shared resources, called from the lifespan context manager."""
    global _http_client, _fedora  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.Client(timeout=httpx.Timeout(settings.fedora_timeout))
    _fedora = RemoteFedora(
        base_url=settings.fedora_url,
        namespace=settings.fedora_namespace,
        client=_http_client,
    )


def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _fedora  # noqa: PLW0603

    if _http_client:
        _http_client.close()
        _http_client = None
    _fedora = None


def get_fedora() -> Fedora:
    """Return the shared Fedora adapter; tests override this dependency."""
    assert _fedora is not None, "startup() was not called"
    return _fedora
