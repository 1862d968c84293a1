"""REST access and websocket feed connections."""

from src.gdax.connection.access import AccessInfo
from src.gdax.connection.feed import FeedHandler, feed

__all__ = [
    "AccessInfo",
    "FeedHandler",
    "feed",
]
