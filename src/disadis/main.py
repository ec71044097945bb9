from __future__ import annotations
import logging
import uvicorn
from disadis.infrastructure.config import get_settings
from disadis.infrastructure.logging_setup import configure_logging, install_reopen_handler

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the uvicorn ASGI server."""
    settings = get_settings()
    reopener = configure_logging(settings.log_level, settings.log_file)
    install_reopen_handler(reopener)
    logger.info("-----Starting Server")
    try:
        uvicorn.run(
            "disadis.interface.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            log_config=None,
        )
    finally:
        reopener.close()


if __name__ == "__main__":
    main()
