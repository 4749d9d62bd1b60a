import argparse
import asyncio
import json
import logging
import sys
import time
from typing import List, Optional

from selection.daily_message import notification_message, widget_item
from selection.engine_factory import create_engine_from_config
from services.config import enabled_categories, load_config
from services.logging import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print today's affirmations for a user")
    parser.add_argument("--user", default="anon", help="User identifier (default: anon)")
    parser.add_argument(
        "--category",
        action="append",
        dest="categories",
        help="Enabled category, repeatable (default: categories enabled in config.yml)",
    )
    parser.add_argument("--count", type=int, help="Override the number of daily picks")
    parser.add_argument("--config", help="Path to config.yml")
    parser.add_argument("--clear-cache", action="store_true", help="Drop the cached daily selection first")
    parser.add_argument("--widget", action="store_true", help="Also print the widget item of the day")
    parser.add_argument("--notification", action="store_true", help="Also print today's reminder text")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    start_time = time.perf_counter()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger(__name__)

    config = load_config(args.config)
    if args.count is not None:
        config.DAILY_PICKS_PER_DAY = args.count

    categories = set(args.categories) if args.categories else enabled_categories(config)
    engine = create_engine_from_config(config)

    if args.clear_cache:
        await engine.invalidate()
        logger.info("Cleared daily selection cache")

    selection = await engine.get_daily_selection(categories, args.user)
    if not selection:
        logger.info(f"No content available for categories: {sorted(categories)}")

    for item in selection:
        print(json.dumps(item.to_dict(), ensure_ascii=False))

    if args.widget:
        item = widget_item()
        if item is not None:
            print(json.dumps({"widget": item.to_dict()}, ensure_ascii=False))

    if args.notification:
        print(json.dumps({"notification": notification_message()}, ensure_ascii=False))

    end_time = time.perf_counter()
    logger.info(f"Total time: {end_time - start_time}")
    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
