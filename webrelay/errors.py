"""Exception taxonomy shared by the API and client layers.

Error handling strategy:
    - `ValidationError` -> HTTP 400 with its fixed message.
    - `AuthenticationError` -> HTTP 401.
    - `DispatchError` -> HTTP 500 carrying the wrapped failure text.

None of these are fatal to the process; the API adapter maps each one to a
JSON `{"error": ...}` response.
"""


class WebRelayError(Exception):
    """Base class for all webrelay errors."""


class ValidationError(WebRelayError):
    """A required request field is missing or empty."""


class AuthenticationError(WebRelayError):
    """The caller did not present the configured server API key."""


class DispatchError(WebRelayError):
    """Building, sending or reading the outbound request failed.

    The original exception is chained as `__cause__`.
    """
