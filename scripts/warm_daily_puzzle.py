#!/usr/bin/env python3
"""Build and cache today's puzzle ahead of the first player request."""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio
import logging
from datetime import date

from threadle.config import settings
from threadle.database import DailyPuzzleCache, RedisCacheStore
from threadle.pipeline import PuzzleBuilder
from threadle.sources import RedditContentProvider

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def check_cache(store: RedisCacheStore) -> bool:
    """Check that the cache store is reachable."""
    logger.info("Checking cache connection...")

    if await store.health_check():
        logger.info("Cache connection successful")
        return True

    logger.error("Cache connection failed")
    return False


async def warm(day: date = None) -> int:
    """Warm the cache for ``day`` (default: today, UTC)."""
    store = RedisCacheStore()
    provider = RedditContentProvider(settings) if settings.reddit_configured else None

    try:
        if not await check_cache(store):
            return 1

        daily = DailyPuzzleCache(store=store, builder=PuzzleBuilder(provider=provider))
        day = day or daily.clock()
        puzzle = await daily.get_today(day)

        if puzzle.is_fallback:
            logger.warning(f"Cached puzzle for {day} is the fallback puzzle")
        else:
            logger.info(f"Puzzle for {day} ready: {puzzle.correct_url} ({len(puzzle.records)} comments)")
        return 0

    finally:
        if provider:
            await provider.close()
        await store.close()


def main():
    """Main warm-up function."""
    day = date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else None
    return asyncio.run(warm(day))


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
