"""
Typed exception hierarchy for GDAX client operations.

Every failure the client can attribute to the exchange, the network or the
payload derives from GdaxError, which is what the pagination engine captures
as its pending error.
"""


class GdaxError(Exception):
    """Base class for all GDAX client errors."""


class GdaxTransportError(GdaxError):
    """Connection or HTTP-level failure before a response was read."""


class GdaxAPIError(GdaxError):
    """
    Non-2xx response from the REST API.

    The string form is exactly the ``message`` field of the response body.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GdaxDecodeError(GdaxError):
    """Response or feed payload could not be decoded into the expected type."""


class GdaxAuthenticationError(GdaxError):
    """Credentials cannot be used to sign a request."""


class GdaxFeedError(GdaxError):
    """Streaming feed failure or an ``error`` message sent by the feed."""
