"""uvicorn bootstrap for the webrelay HTTP API.

Side effects:
- Configures root logging from `WEBRELAY_LOG_LEVEL`.
- Binds `WEBRELAY_HOST:WEBRELAY_PORT` and serves until interrupted.
"""

import logging

import uvicorn

from webrelay.api.config import ServerConfig


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Run the API server with settings from the environment."""
    config = ServerConfig.from_env()
    configure_logging(config.log_level)

    if not config.api_key:
        logger.warning("WEBRELAY_API_KEY is not set; endpoints are unauthenticated")

    logger.info("Starting webrelay on %s:%s", config.host, config.port)
    uvicorn.run(
        "webrelay.api.http_api:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
