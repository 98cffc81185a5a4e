"""Builds a puzzle from live threads, falling back to static content."""

import asyncio
import logging
import random
from typing import List, Optional, Sequence

from ..config import Settings, settings as default_settings
from ..exceptions import UpstreamUnavailableError
from ..models.puzzles import Puzzle
from ..models.sources import SourceItem
from ..redaction import RedactionEngine
from ..sources.base import ContentProvider
from .fallback import fallback_puzzle

logger = logging.getLogger(__name__)

REDDIT_BASE_URL = "https://www.reddit.com"


class PuzzleBuilder:
    """Turns a random recent thread into a puzzle of redacted replies.

    ``build`` never raises: any failure along the way, including a missing
    provider or a provider call exceeding its timeout, yields the fallback
    puzzle. The distinct cause is logged.
    """

    def __init__(
        self,
        provider: Optional[ContentProvider],
        engine: RedactionEngine = None,
        config: Settings = None,
        rng: random.Random = None,
    ):
        self.provider = provider
        self.engine = engine or RedactionEngine()
        self.config = config or default_settings
        self.rng = rng or random.Random()

        self.stats = {
            "total_builds": 0,
            "live_builds": 0,
            "fallback_builds": 0,
        }

    async def build(self) -> Puzzle:
        """Build a puzzle, returning the fallback puzzle on any failure."""
        self.stats["total_builds"] += 1

        try:
            puzzle = await self._build_live()
        except UpstreamUnavailableError as e:
            logger.warning(f"Upstream unavailable, using fallback puzzle: {e}")
            return self._fallback()
        except asyncio.TimeoutError:
            logger.warning(
                f"Content provider timed out after {self.config.provider_timeout_seconds}s, using fallback puzzle"
            )
            return self._fallback()
        except Exception as e:
            logger.error(f"Unexpected error building puzzle, using fallback puzzle: {e}", exc_info=True)
            return self._fallback()

        self.stats["live_builds"] += 1
        logger.info("Puzzle generated successfully")
        return puzzle

    async def _build_live(self) -> Puzzle:
        if self.provider is None:
            raise UpstreamUnavailableError("No content provider configured")

        category = self.rng.choice(self.config.puzzle_subreddits)
        logger.info(f"Generating puzzle from r/{category}")

        items = await self._call(self.provider.list_recent_items(category, self.config.recent_items_limit))
        logger.info(f"Fetched {len(items)} posts from r/{category}")
        if not items:
            raise UpstreamUnavailableError(f"No posts found in r/{category}")

        item = self.select_item(items)
        logger.info(f"Selected: {item.title[:50]} ({item.reply_count} comments)")

        replies = await self._call(self.provider.list_replies(item.id, self.config.replies_limit))
        bodies = [reply.body for reply in replies if reply.body]
        logger.info(f"Found {len(bodies)} comments for post {item.id}")
        if not bodies:
            raise UpstreamUnavailableError(f"No comments found for post {item.id}")

        records = self.engine.redact_all(bodies[:self.config.comments_per_puzzle])
        return Puzzle(
            records=records,
            correct_url=self.permalink_url(item.permalink),
            source_category=category,
        )

    def select_item(self, items: Sequence[SourceItem]) -> SourceItem:
        """Pick the first thread with enough replies, else the first thread."""
        for item in items:
            if item.reply_count is not None and item.reply_count >= self.config.min_reply_count:
                return item
        return items[0]

    @staticmethod
    def permalink_url(permalink: str) -> str:
        if permalink.startswith("http://") or permalink.startswith("https://"):
            return permalink
        return f"{REDDIT_BASE_URL}{permalink}"

    async def _call(self, awaitable) -> List:
        return await asyncio.wait_for(awaitable, timeout=self.config.provider_timeout_seconds)

    def _fallback(self) -> Puzzle:
        self.stats["fallback_builds"] += 1
        return fallback_puzzle()
