"""GDAX client service layer."""

from src.gdax.service.client import GdaxClient

__all__ = ["GdaxClient"]
