#!/usr/bin/env python3
"""Print account history, then follow BTC-USD matches on the feed."""

import argparse
import logging
from uuid import UUID

from src.gdax.config import config
from src.gdax.enums import FeedChannel
from src.gdax.model.feed import FeedMessage, Match, Subscription
from src.gdax.service import GdaxClient

logger = logging.getLogger("gdax.example")


def on_message(message: FeedMessage) -> None:
    """Log every match from the feed."""
    if isinstance(message, Match):
        logger.info(f"{message.side.value} {message.size} @ {message.price}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("account_id", type=UUID)
    parser.add_argument("--keys", default="keys.json", help="JSON key file")
    parser.add_argument("--product", default="BTC-USD")
    args = parser.parse_args()

    logging.basicConfig(level=config.effective_log_level)

    with GdaxClient.from_file(args.keys) as client:
        for entry in client.get_account_history(args.account_id):
            logger.info(f"{entry.created_at} {entry.type.value} {entry.amount}")

        client.feed(
            Subscription(channels=[FeedChannel.MATCHES], product_ids=[args.product]),
            on_message,
        )


if __name__ == "__main__":
    main()
