"""Inbound credential check for the HTTP adapter.

When `WEBRELAY_API_KEY` is configured every route requires a matching
`X-API-Key` header. With no key configured the check is a no-op.
"""

import hmac
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from webrelay.api.config import ServerConfig
from webrelay.errors import AuthenticationError


@lru_cache(maxsize=1)
def get_server_config() -> ServerConfig:
    return ServerConfig.from_env()


def require_api_key(
    x_api_key: Optional[str] = Header(default=None),
    config: ServerConfig = Depends(get_server_config),
) -> None:
    """FastAPI dependency enforcing the configured server API key.

    Raises:
        AuthenticationError: If a key is configured and the header is missing
            or does not match.
    """
    if not config.api_key:
        return
    if not x_api_key or not hmac.compare_digest(x_api_key.encode(), config.api_key.encode()):
        raise AuthenticationError("unauthorized")
