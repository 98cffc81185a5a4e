"""Per-day lifecycle of the shared puzzle."""

import logging
from datetime import date, datetime, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from ..config import settings
from ..exceptions import CacheUnavailableError
from ..models.puzzles import Puzzle
from ..pipeline.puzzle_builder import PuzzleBuilder
from ..redaction import is_consistent
from .cache import CacheStore

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class DailyPuzzleCache:
    """Serves exactly one live puzzle per UTC calendar day.

    On a miss the puzzle is built and stored under ``<prefix><YYYY-MM-DD>``
    with a lifetime longer than a day, so there is never a gap around
    midnight. Earlier days' entries are left to expire on their own.

    There is no build lock: concurrent misses on the same day may each build
    and store a puzzle, and the last write wins. Any built puzzle is valid, so
    this only costs redundant work.
    """

    def __init__(
        self,
        store: CacheStore,
        builder: PuzzleBuilder,
        ttl_seconds: int = None,
        key_prefix: str = None,
        clock: Callable[[], date] = utc_today,
    ):
        self.store = store
        self.builder = builder
        self.ttl_seconds = ttl_seconds or settings.daily_cache_ttl_seconds
        self.key_prefix = key_prefix if key_prefix is not None else settings.cache_key_prefix
        self.clock = clock

    def key_for(self, day: date) -> str:
        return f"{self.key_prefix}{day.isoformat()}"

    async def get_today(self, today: Optional[date] = None) -> Puzzle:
        """Return the puzzle for ``today`` (default: the clock's date), building it on a miss."""
        day = today or self.clock()
        cache_key = self.key_for(day)

        try:
            cached = await self.store.get(cache_key)
        except CacheUnavailableError as e:
            logger.warning(f"Cache unavailable, serving an uncached puzzle for {day}: {e}")
            return await self.builder.build()

        if cached:
            puzzle = self._deserialize(cache_key, cached)
            if puzzle is not None:
                logger.info(f"Using cached puzzle for {day}")
                await self._ensure_expiry(cache_key)
                return puzzle

        logger.info(f"Generating new puzzle for {day}")
        puzzle = await self.builder.build()
        await self._store(cache_key, puzzle)
        return puzzle

    def _deserialize(self, cache_key: str, cached: str) -> Optional[Puzzle]:
        try:
            puzzle = Puzzle.model_validate_json(cached)
        except ValidationError as e:
            logger.error(f"Discarding unreadable puzzle under {cache_key}: {e}")
            return None

        # Every marker must line up with a removed token and rebuild the original
        if not all(is_consistent(record) for record in puzzle.records):
            logger.error(f"Discarding inconsistent puzzle under {cache_key}")
            return None
        return puzzle

    async def _ensure_expiry(self, cache_key: str) -> None:
        """Re-apply the lifetime of an entry left without one by a failed expire."""
        try:
            if await self.store.ttl(cache_key) == -1:
                await self.store.expire(cache_key, self.ttl_seconds)
                logger.warning(f"Restored missing expiry on {cache_key}")
        except CacheUnavailableError as e:
            logger.warning(f"Could not check expiry of {cache_key}: {e}")

    async def _store(self, cache_key: str, puzzle: Puzzle) -> None:
        try:
            await self.store.set(cache_key, puzzle.model_dump_json())
            await self.store.expire(cache_key, self.ttl_seconds)
            logger.info(f"Puzzle cached under {cache_key} for {self.ttl_seconds} seconds")
        except CacheUnavailableError as e:
            logger.warning(f"Failed to cache puzzle under {cache_key}: {e}")
