"""
Authenticated access to the GDAX REST API.

This module signs and sends REST requests:
- Loads credentials from the environment or a key file
- Signs every request with the GDAX HMAC-SHA256 scheme
- Turns non-2xx responses into GdaxAPIError carrying the API message
- Extracts the pagination cursor from the response headers
"""

import base64
import binascii
import hashlib
import hmac
import logging
import time
from pathlib import Path
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from src.gdax.config import Credentials, config
from src.gdax.errors import (
    GdaxAPIError,
    GdaxAuthenticationError,
    GdaxDecodeError,
    GdaxTransportError,
)
from src.gdax.pagination import Cursor

logger = logging.getLogger(__name__)

R = TypeVar("R")


class AccessInfo:
    """
    Credentials plus the HTTP client used to reach the exchange.

    An AccessInfo may be shared by any number of collections; its only
    mutable part is the httpx client, which is safe for concurrent use.
    """

    def __init__(
        self,
        credentials: Credentials,
        endpoint: str | None = None,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize access to the REST API.

        Args:
            credentials: API key, secret and passphrase
            endpoint: REST base URL (defaults to the configured endpoint)
            client: HTTP client to send requests with
            timeout: Request timeout when a client is created here

        """
        self.credentials = credentials
        self.endpoint = (endpoint or config.connection.endpoint).rstrip("/")
        self.client = client or httpx.Client(
            timeout=timeout or config.connection.timeout
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AccessInfo":
        """Create access from PUBLIC_KEY, PRIVATE_KEY and PASSPHRASE."""
        return cls(Credentials(), **kwargs)

    @classmethod
    def from_file(cls, path: str | Path, **kwargs: Any) -> "AccessInfo":
        """Create access from a JSON key file."""
        return cls(Credentials.from_file(path), **kwargs)

    def close(self) -> None:
        """Close the HTTP client and release connections."""
        self.client.close()

    def __enter__(self) -> "AccessInfo":
        """Enter context manager."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Exit context manager, closing the client."""
        self.close()

    def sign(self, timestamp: str, method: str, request_path: str, body: str) -> str:
        """
        Compute the CB-ACCESS-SIGN header value.

        Args:
            timestamp: Unix timestamp in seconds, as sent in CB-ACCESS-TIMESTAMP
            method: Upper-case HTTP method
            request_path: Path including the query string
            body: Request body, empty for GET

        Returns:
            Base64-encoded HMAC-SHA256 signature

        """
        try:
            secret = base64.b64decode(self.credentials.private_key)
        except (binascii.Error, ValueError) as e:
            raise GdaxAuthenticationError(f"Invalid API secret: {e}") from e

        prehash = f"{timestamp}{method}{request_path}{body}"
        digest = hmac.new(secret, prehash.encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def _headers(self, method: str, request_path: str, body: str) -> dict[str, str]:
        """Build the authentication headers for a request."""
        timestamp = str(int(time.time()))
        return {
            "CB-ACCESS-KEY": self.credentials.public_key,
            "CB-ACCESS-SIGN": self.sign(timestamp, method, request_path, body),
            "CB-ACCESS-TIMESTAMP": timestamp,
            "CB-ACCESS-PASSPHRASE": self.credentials.passphrase,
            "Content-Type": "application/json",
        }

    def _send(self, method: str, path: str, body: str) -> httpx.Response:
        """Sign and send a request, raising on non-2xx responses."""
        method = method.upper()
        headers = self._headers(method, path, body)
        logger.debug(f"{method} {path}")

        try:
            response = self.client.request(
                method,
                f"{self.endpoint}{path}",
                content=body.encode("utf-8") if body else None,
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise GdaxTransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning(
                f"{method} {path} returned {response.status_code}: {message}"
            )
            raise GdaxAPIError(message, status_code=response.status_code)
        return response

    def collection_request(
        self, method: str, path: str, body: str = ""
    ) -> tuple[bytes, Cursor]:
        """
        Send a request to a list endpoint.

        Args:
            method: HTTP method
            path: Request path including the query string
            body: Request body

        Returns:
            Raw response body and the cursor from the CB-BEFORE/CB-AFTER headers

        """
        response = self._send(method, path, body)
        return response.content, Cursor.from_headers(response.headers)

    def request(self, method: str, path: str, body: str, response_type: type[R]) -> R:
        """
        Send a request and decode the response body.

        Args:
            method: HTTP method
            path: Request path including the query string
            body: Request body
            response_type: Type to decode the JSON body into

        Returns:
            Decoded response

        """
        response = self._send(method, path, body)
        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise GdaxDecodeError(
                f"Invalid {getattr(response_type, '__name__', response_type)} "
                f"response: {e}"
            ) from e


def _error_message(response: httpx.Response) -> str:
    """Extract the ``message`` field of an error response."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and "message" in payload:
        return str(payload["message"])
    return response.text or response.reason_phrase
