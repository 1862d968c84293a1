"""GDAX REST and websocket client package."""

from src.gdax.connection import AccessInfo, feed
from src.gdax.pagination import Cursor, PageableCollection
from src.gdax.service import GdaxClient

__all__ = ["AccessInfo", "Cursor", "GdaxClient", "PageableCollection", "feed"]
