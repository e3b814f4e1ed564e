"""Server-side configuration for the HTTP adapter.

Relevant environment variables:
    - `WEBRELAY_HOST` (default `127.0.0.1`)
    - `WEBRELAY_PORT` (default `8080`)
    - `WEBRELAY_LOG_LEVEL` (default `INFO`)
    - `WEBRELAY_API_KEY`: when set, callers must send it as `X-API-Key`.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ServerConfig:
    """Bind address, log level and optional inbound API key."""

    host: str = os.getenv("WEBRELAY_HOST", "127.0.0.1").strip()
    port: int = int(os.getenv("WEBRELAY_PORT", "8080"))
    log_level: str = os.getenv("WEBRELAY_LOG_LEVEL", "INFO").strip().upper()
    api_key: str = os.getenv("WEBRELAY_API_KEY", "").strip()

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            host=os.getenv("WEBRELAY_HOST", "127.0.0.1").strip(),
            port=int(os.getenv("WEBRELAY_PORT", "8080")),
            log_level=os.getenv("WEBRELAY_LOG_LEVEL", "INFO").strip().upper(),
            api_key=os.getenv("WEBRELAY_API_KEY", "").strip(),
        )
