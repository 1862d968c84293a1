"""
GDAX websocket feed.

This module subscribes to the GDAX push feed and dispatches every incoming
message to a callback as a typed Pydantic model:
- Sends the subscription as soon as the connection opens
- Routes messages on their ``type`` field
- Stops with GdaxFeedError when the feed sends an ``error`` message
"""

import json
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any

from pydantic import ValidationError
from websockets.exceptions import ConnectionClosedError, WebSocketException
from websockets.sync.client import ClientConnection, connect

from src.gdax.config import config
from src.gdax.errors import GdaxDecodeError, GdaxFeedError
from src.gdax.model.feed import (
    ErrorMessage,
    FeedMessage,
    Heartbeat,
    L2Update,
    Match,
    Snapshot,
    Subscription,
    Ticker,
)

logger = logging.getLogger(__name__)

MessageHandler = Callable[[FeedMessage], None]
Connect = Callable[[str], AbstractContextManager[ClientConnection]]


class FeedHandler:
    """
    Parses raw feed messages and hands typed messages to a callback.

    Message types without a model (``subscriptions``, ``received``,
    ``last_match`` and the like) are skipped.
    """

    def __init__(self, message_handler: MessageHandler) -> None:
        """
        Initialize the feed handler.

        Args:
            message_handler: Callback receiving each typed message

        """
        self.message_handler = message_handler
        self.message_count = 0

    def handle_message(self, msg: str | bytes) -> FeedMessage | None:
        """
        Handle a raw websocket message.

        Returns the dispatched message, or None when the type is skipped.
        Raises GdaxFeedError after dispatching an error message.
        """
        try:
            data: dict[str, Any] = json.loads(msg)
        except json.JSONDecodeError as e:
            raise GdaxDecodeError(f"Invalid JSON message: {e}") from e
        if not isinstance(data, dict):
            raise GdaxDecodeError(f"Unexpected feed payload: {data!r}")

        message_type = data.get("type", "")
        match message_type:
            case "heartbeat":
                message = self._parse(Heartbeat, data)
            case "ticker":
                message = self._parse(Ticker, data)
            case "snapshot":
                message = self._parse(Snapshot, data)
            case "l2update":
                message = self._parse(L2Update, data)
            case "match":
                message = self._parse(Match, data)
            case "error":
                message = self._parse(ErrorMessage, data)
            case _:
                logger.debug(f"Skipping feed message of type {message_type!r}")
                return None

        self.message_count += 1
        self.message_handler(message)

        if isinstance(message, ErrorMessage):
            raise GdaxFeedError(message.message)
        return message

    @staticmethod
    def _parse(model: type[FeedMessage], data: dict[str, Any]) -> FeedMessage:
        """Validate a decoded message against its model."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GdaxDecodeError(f"Invalid {data.get('type')} message: {e}") from e


def feed(
    subscription: Subscription,
    message_handler: MessageHandler,
    url: str | None = None,
    connect: Connect = connect,
) -> None:
    """
    Subscribe to the feed and dispatch messages until it ends.

    This call blocks. It returns when the server closes the connection
    normally and raises GdaxFeedError when the feed reports an error or the
    connection fails.

    Args:
        subscription: Channels and products to subscribe to
        message_handler: Callback for each typed message
        url: Feed URL (defaults to the configured feed URL)
        connect: Factory opening the websocket connection

    """
    url = url or config.connection.feed_url
    handler = FeedHandler(message_handler)

    try:
        with connect(url) as websocket:
            logger.info(f"Connected to {url}")
            websocket.send(subscription.model_dump_json())
            logger.info(
                f"Subscribed to {[c.value for c in subscription.channels]} "
                f"for {subscription.product_ids}"
            )
            for msg in websocket:
                handler.handle_message(msg)
    except ConnectionClosedError as e:
        raise GdaxFeedError(f"Feed connection closed: {e}") from e
    except (WebSocketException, OSError) as e:
        raise GdaxFeedError(f"Feed connection to {url} failed: {e}") from e

    logger.info(f"Feed closed after {handler.message_count} messages")
