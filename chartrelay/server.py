"""Server process lifecycle."""

import logging
from typing import Optional

import uvicorn

from chartrelay.config import Settings, settings

logger = logging.getLogger(__name__)


class RelayServer:
    """
    Owns the uvicorn server and its port binding for the life of the process.

    Created at startup by :func:`main`; uvicorn installs the SIGINT/SIGTERM
    handlers and :meth:`shutdown` asks it to exit from elsewhere.
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        self.settings = app_settings or settings
        self._server: Optional[uvicorn.Server] = None

    @property
    def base_url(self) -> str:
        host = "localhost" if self.settings.host in ("0.0.0.0", "::") else self.settings.host
        return f"http://{host}:{self.settings.port}"

    def build(self) -> uvicorn.Server:
        """Create the uvicorn server without binding the port yet."""
        config = uvicorn.Config(
            "chartrelay.main:app",
            host=self.settings.host,
            port=self.settings.port,
            log_config=None,  # keep the JSON handler installed by setup_logging
            log_level=self.settings.log_level.lower(),
        )
        self._server = uvicorn.Server(config)
        return self._server

    def announce(self) -> None:
        logger.info(f"Chart image relay running on {self.base_url}")
        logger.info(f"Static index available at {self.base_url}/index.html")
        logger.info(f"API endpoint: POST {self.base_url}/api/fetch-image")

    def run(self) -> None:
        """Bind, serve until a shutdown signal arrives, then release the port."""
        server = self._server or self.build()
        self.announce()
        try:
            server.run()
        finally:
            self._server = None
            logger.info("Chart image relay stopped")

    def shutdown(self) -> None:
        """Request a graceful exit of a running server."""
        if self._server is not None:
            self._server.should_exit = True


def main() -> None:
    """Console entry point."""
    from chartrelay.utils.logging_config import setup_logging

    setup_logging(settings.log_level)
    RelayServer(settings).run()


if __name__ == "__main__":
    main()
