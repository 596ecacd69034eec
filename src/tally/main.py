"""Tally entry point."""

import asyncio
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

USAGE = """Usage:
  tally bot            Run the Telegram bot (webhook if TALLY_WEBHOOK_URL is set)
  tally summary <uid>  Print today's activity summary for a user
"""


async def print_summary(uid: str, db_path: Path | None = None) -> int:
    """Print today's summary for a user from the configured store."""
    from .activity import ActivityAggregator, allocations_for, day_start_ms, format_summary
    from .log import ReverseScanner, interactions_prefix
    from .store import SQLiteKVStore, StoreConfig

    config = StoreConfig(db_path=db_path)
    assert config.db_path is not None
    store = SQLiteKVStore(config.db_path)
    store.init_db()
    try:
        aggregator = ActivityAggregator(ReverseScanner(store))
        today = datetime.now()
        totals = await aggregator.summarize(
            interactions_prefix(uid), day_start=day_start_ms(today)
        )
    finally:
        store.close()

    print(format_summary(totals, allocations_for(today.date())))
    return 0


def main() -> None:
    """Main entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(
        level=os.getenv("TALLY_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    command = sys.argv[1] if len(sys.argv) > 1 else "bot"

    if command == "bot":
        from .logging import configure_logger
        from .telegram import TelegramBot

        configure_logger(os.getenv("TALLY_LOG_DIR"))
        bot = TelegramBot()
        bot.run()
        return

    if command == "summary" and len(sys.argv) > 2:
        db_path = os.getenv("TALLY_DB_PATH")
        sys.exit(asyncio.run(print_summary(sys.argv[2], Path(db_path) if db_path else None)))

    print(USAGE)
    sys.exit(2)


if __name__ == "__main__":
    main()
