"""
Lazy cursor pagination over the GDAX REST API.

GDAX list endpoints return a JSON array per request and advertise the
position of the next page in the ``CB-AFTER`` response header. This module
turns such an endpoint into a lazy sequence of typed records:

- Cursor holds the opaque pagination tokens and renders them as a query string
- PageableCollection fetches one page at a time, only when the current page
  has been consumed, and hands out records one by one

Errors raised while fetching are not raised from ``has_more()``. They are
kept as a pending error and raised by the following ``take_next()``. A
caller that only ever calls ``has_more()`` will therefore never see the
error and, because ``has_more()`` keeps answering True, never terminates.
Plain iteration (``for record in collection``) pairs the two calls and is
the recommended way to consume a collection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from src.gdax.errors import GdaxDecodeError, GdaxError

logger = logging.getLogger(__name__)

T = TypeVar("T")

AFTER_HEADER = "CB-AFTER"
BEFORE_HEADER = "CB-BEFORE"


class Cursor(BaseModel):
    """
    Pagination position understood by the remote API.

    Tokens are opaque strings assigned by the server. Unset fields are
    represented by an empty string (tokens) or -1 (limit).
    """

    before: str = ""
    after: str = ""
    limit: int = -1

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Cursor:
        """
        Build a cursor from response headers.

        Args:
            headers: Response header mapping (case-insensitive lookups expected)

        Returns:
            Cursor with ``before``/``after`` taken from CB-BEFORE/CB-AFTER

        """
        return cls(
            before=headers.get(BEFORE_HEADER, ""),
            after=headers.get(AFTER_HEADER, ""),
        )

    def query_string(self) -> str:
        """Render as ``before=<v>&after=<v>&limit=<n>``, omitting unset fields."""
        parts = []
        if self.before:
            parts.append(f"before={self.before}")
        if self.after:
            parts.append(f"after={self.after}")
        if self.limit != -1:
            parts.append(f"limit={self.limit}")
        return "&".join(parts)

    def __str__(self) -> str:
        """String representation."""
        return self.query_string()


class CollectionTransport(Protocol):
    """Authenticated transport a collection fetches its pages through."""

    def collection_request(
        self, method: str, path: str, body: str = ""
    ) -> tuple[bytes, Cursor]:
        """
        Send a signed request and return the raw body and the next cursor.

        Raises a GdaxError subclass on transport failure or non-2xx status.
        """
        ...


class PageableCollection(Generic[T]):
    """
    Lazy sequence of records of type T fetched page by page.

    A collection is created per query and is not safe to share between
    threads. Pages are kept in memory for the lifetime of the collection.

    Usage:
        for account in collection:
            ...

    or, explicitly:
        while collection.has_more():
            account = collection.take_next()
    """

    def __init__(
        self,
        transport: CollectionTransport,
        record_type: type[T],
        method: str,
        path: str,
        params: str = "",
        body: str = "",
        uses_cursors: bool = True,
    ) -> None:
        """
        Initialize an empty collection.

        Args:
            transport: Transport used to fetch pages
            record_type: Type every element of a page is decoded into
            method: HTTP method of the list endpoint
            path: Request path without query string
            params: Resource query parameters, already encoded
            body: Request body sent with every fetch
            uses_cursors: False for endpoints that return everything at once

        """
        self.transport = transport
        self.record_type = record_type
        self.method = method
        self.path = path
        self.params = params
        self.body = body
        self.uses_cursors = uses_cursors

        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[record_type])  # type: ignore[valid-type]
        self._cursor = Cursor()
        self._pages: list[list[T]] = []
        self._current_page = -1
        self._index_in_page = 0
        self._finished_current_page = False
        self._exhausted = False
        self._pending_error: GdaxError | None = None
        self._fetch_count = 0

    @property
    def cursor(self) -> Cursor:
        """Cursor the next fetch will send, built from the last CB-AFTER."""
        return self._cursor

    @property
    def pending_error(self) -> GdaxError | None:
        """Error captured by a failed fetch, if any."""
        return self._pending_error

    @property
    def fetch_count(self) -> int:
        """Number of network fetches performed so far."""
        return self._fetch_count

    def has_more(self) -> bool:
        """
        Check whether another record can be taken, fetching a page if needed.

        Performs at most one fetch per call. Returns True after a failed
        fetch so that the following ``take_next()`` raises the error.
        """
        if self._pending_error is not None:
            return True

        if not self._pages or self._index_in_page == len(
            self._pages[self._current_page]
        ):
            if self._exhausted or (self._pages and not self.uses_cursors):
                return False
            self._finished_current_page = True
        elif not self._finished_current_page:
            return True

        return self._fetch_page()

    def take_next(self) -> T:
        """
        Return the next buffered record.

        Raises the pending error if the last fetch failed. Must follow a
        ``has_more()`` call that returned True.
        """
        if self._pending_error is not None:
            raise self._pending_error
        if self._current_page < 0:
            raise IndexError("take_next() called before has_more()")

        record = self._pages[self._current_page][self._index_in_page]
        self._index_in_page += 1
        return record

    def __iter__(self) -> Iterator[T]:
        """Return self; the collection is its own iterator."""
        return self

    def __next__(self) -> T:
        """Fetch if needed and return the next record, raising any fetch error."""
        if not self.has_more():
            raise StopIteration
        return self.take_next()

    def _request_path(self) -> str:
        """Build the request path with resource params and cursor query."""
        query = "&".join(part for part in (self.params, str(self._cursor)) if part)
        return f"{self.path}?{query}" if query else self.path

    def _fetch_page(self) -> bool:
        """Fetch, decode and buffer the next page."""
        path = self._request_path()
        self._fetch_count += 1
        try:
            raw, cursor = self.transport.collection_request(
                self.method, path, self.body
            )
            page = self._decode(raw)
        except GdaxError as e:
            logger.debug(f"Fetch of {self.method} {path} failed: {e}")
            self._pending_error = e
            return True

        # Forward iteration only follows CB-AFTER
        self._cursor = Cursor(after=cursor.after, limit=self._cursor.limit)
        logger.debug(f"Fetched {len(page)} records from {self.method} {path}")
        if not page:
            self._exhausted = True
            return False

        self._pages.append(page)
        self._index_in_page = 0
        self._current_page += 1
        self._finished_current_page = False
        return True

    def _decode(self, raw: bytes) -> list[T]:
        """Decode a JSON array body into a page of records."""
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            raise GdaxDecodeError(
                f"Invalid {self.record_type.__name__} page: {e}"
            ) from e
