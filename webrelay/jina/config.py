"""Runtime configuration for the Jina AI forwarding client.

Architectural role:
    Centralizes endpoint prefixes and credential lookup for `webrelay.jina.client`.

Relevant environment variables:
    - `JINA_AI_API_KEY`: optional bearer credential for both services.
    - `JINA_READER_URL`: reader prefix (default `https://r.jina.ai/`).
    - `JINA_SEARCH_URL`: search prefix (default `https://s.jina.ai/`).
    - `JINA_TIMEOUT_SECONDS`: optional request timeout. Unset means the HTTP
      stack default (no timeout).

Determinism:
    Values are resolved from the process environment (plus `.env`) at import
    time. `JinaConfig.from_env()` re-reads the environment on demand.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_READER_URL = "https://r.jina.ai/"
DEFAULT_SEARCH_URL = "https://s.jina.ai/"


def parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Parse `JINA_TIMEOUT_SECONDS`.

    Args:
        raw: Raw environment value or `None`.

    Returns:
        Positive float seconds, or `None` when unset/blank.

    Raises:
        ValueError: If the value is not a positive number.
    """
    if raw is None or not raw.strip():
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"JINA_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class JinaConfig:
    """Forwarding client configuration.

    The API key is read once and held for the lifetime of the client that
    owns this config.
    """

    api_key: str = os.getenv("JINA_AI_API_KEY", "").strip()
    reader_url_prefix: str = os.getenv("JINA_READER_URL", DEFAULT_READER_URL).strip()
    search_url_prefix: str = os.getenv("JINA_SEARCH_URL", DEFAULT_SEARCH_URL).strip()
    timeout_seconds: Optional[float] = parse_timeout(os.getenv("JINA_TIMEOUT_SECONDS"))

    @classmethod
    def from_env(cls) -> "JinaConfig":
        """Build a config from the current process environment."""
        return cls(
            api_key=os.getenv("JINA_AI_API_KEY", "").strip(),
            reader_url_prefix=os.getenv("JINA_READER_URL", DEFAULT_READER_URL).strip(),
            search_url_prefix=os.getenv("JINA_SEARCH_URL", DEFAULT_SEARCH_URL).strip(),
            timeout_seconds=parse_timeout(os.getenv("JINA_TIMEOUT_SECONDS")),
        )
