"""Forwarding client for the Jina AI reader and search services.

Architectural role:
    Turns user-supplied text into a Jina target URL and relays the raw response
    body. See https://jina.ai for the services themselves.

Request flow:
    `scrape_url` / `scrape_question` -> `build_*_url` (plain concatenation) ->
    `request_with_api_key` -> one GET via `requests` -> body text.

Retry behavior:
    None. Each call is attempted once, with no timeout unless
    `JINA_TIMEOUT_SECONDS` is configured.

Failure handling model:
    Construction, transport and body-read failures raise `DispatchError` with a
    phase-specific prefix. Any HTTP response that arrives, including 4xx/5xx,
    is returned as content.

Security considerations:
    The API key is sent only as an `Authorization: Bearer` header and is never
    logged.
"""

import logging
from typing import Optional

import requests

from webrelay.errors import DispatchError
from webrelay.jina.config import DEFAULT_READER_URL, DEFAULT_SEARCH_URL, JinaConfig


logger = logging.getLogger(__name__)


def build_reader_url(url: str, prefix: str = DEFAULT_READER_URL) -> str:
    """Return the reader target for `url`. No escaping is applied."""
    return f"{prefix}{url}"


def build_search_url(question: str, prefix: str = DEFAULT_SEARCH_URL) -> str:
    """Return the search target for `question`. Spaces are kept as-is."""
    return f"{prefix}{question}"


def request_with_api_key(
    request_url: str,
    api_key: Optional[str],
    timeout: Optional[float] = None,
) -> str:
    """Issue one GET against `request_url` and return the body verbatim.

    Args:
        request_url: Fully built target URL.
        api_key: Bearer credential. Empty or `None` sends no Authorization header.
        timeout: Optional timeout in seconds passed to `requests`.

    Returns:
        Response body decoded as UTF-8 (undecodable bytes replaced).

    Raises:
        DispatchError: On request construction, transport or body-read failure.
    """
    headers = {}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"

    with requests.Session() as session:
        try:
            prepared = session.prepare_request(
                requests.Request("GET", request_url, headers=headers)
            )
        except (requests.exceptions.RequestException, ValueError) as err:
            logger.error("Could not build request for %s: %s", request_url, err)
            raise DispatchError(f"error creating request: {err}") from err

        logger.debug("GET %s (authorized=%s)", request_url, bool(api_key))

        try:
            settings = session.merge_environment_settings(prepared.url, {}, True, None, None)
            response = session.send(prepared, timeout=timeout, **settings)
        except (requests.exceptions.RequestException, UnicodeError) as err:
            logger.error("Request to %s failed: %s", request_url, err)
            raise DispatchError(f"error sending request: {err}") from err

        try:
            body = response.content
        except requests.exceptions.RequestException as err:
            logger.error("Reading response from %s failed: %s", request_url, err)
            raise DispatchError(f"error reading response body: {err}") from err
        finally:
            response.close()

    if not 200 <= response.status_code < 300:
        # Remote error pages are relayed as content.
        logger.warning(
            "Upstream %s answered HTTP %s; relaying body as content",
            request_url,
            response.status_code,
        )

    return body.decode("utf-8", errors="replace")


def scrape_url_with_api_key(url: str, api_key: Optional[str]) -> str:
    """Scrape `url` with a caller-supplied key (delegated execution)."""
    return request_with_api_key(build_reader_url(url), api_key)


def scrape_question_with_api_key(question: str, api_key: Optional[str]) -> str:
    """Search for `question` with a caller-supplied key (delegated execution)."""
    return request_with_api_key(build_search_url(question), api_key)


class JinaClient:
    """Forwarding client bound to one `JinaConfig`.

    The configuration, including the API key, is read once at construction and
    is never mutated, so one instance can serve concurrent requests.
    """

    def __init__(self, config: Optional[JinaConfig] = None) -> None:
        self.config = config or JinaConfig()

    def scrape_url(self, url: str) -> str:
        """Return the main content of a webpage as clean, LLM-friendly text."""
        return self._request(build_reader_url(url, self.config.reader_url_prefix))

    def scrape_question(self, question: str) -> str:
        """Return web search results for `question` as LLM-friendly text."""
        return self._request(build_search_url(question, self.config.search_url_prefix))

    def _request(self, request_url: str) -> str:
        return request_with_api_key(
            request_url,
            self.config.api_key,
            timeout=self.config.timeout_seconds,
        )
