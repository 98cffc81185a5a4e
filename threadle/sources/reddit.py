"""Reddit content provider built on asyncpraw."""

import logging
from typing import List, Optional

import asyncpraw

from ..config import Settings, settings as default_settings
from ..exceptions import UpstreamUnavailableError
from ..models.sources import SourceItem, SourceReply
from .base import ContentProvider

logger = logging.getLogger(__name__)

REMOVED_BODIES = {"[deleted]", "[removed]"}


class RedditContentProvider(ContentProvider):
    """Read-only access to subreddit listings and comment trees."""

    def __init__(self, config: Settings = None):
        """
        Initialize the provider with configuration.

        Args:
            config: Application settings carrying the Reddit API credentials
        """
        self.config = config or default_settings
        self._reddit: Optional[asyncpraw.Reddit] = None

    def _client(self) -> asyncpraw.Reddit:
        if not self._reddit:
            if not self.config.reddit_configured:
                raise UpstreamUnavailableError("Missing Reddit API credentials")

            logger.info("Initializing Reddit client")
            self._reddit = asyncpraw.Reddit(
                client_id=self.config.reddit_client_id,
                client_secret=self.config.reddit_client_secret,
                user_agent=self.config.reddit_user_agent,
            )
            self._reddit.read_only = True

        return self._reddit

    async def list_recent_items(self, category: str, limit: int) -> List[SourceItem]:
        try:
            subreddit = await self._client().subreddit(category)
            items = []
            async for submission in subreddit.new(limit=limit):
                items.append(SourceItem(
                    id=submission.id,
                    title=submission.title or "",
                    reply_count=submission.num_comments,
                    permalink=submission.permalink,
                ))
            return items
        except Exception as e:
            raise UpstreamUnavailableError(f"Failed to list r/{category}: {e}") from e

    async def list_replies(self, item_id: str, limit: int) -> List[SourceReply]:
        try:
            submission = await self._client().submission(id=item_id)
            comments = submission.comments
            await comments.replace_more(limit=0)

            # Top-level comments only; CommentForest is indexed, not async-iterable
            replies = []
            for comment in comments:
                body = getattr(comment, "body", None)
                if body and body not in REMOVED_BODIES:
                    replies.append(SourceReply(body=body))
                if len(replies) >= limit:
                    break
            return replies
        except Exception as e:
            raise UpstreamUnavailableError(f"Failed to fetch replies for {item_id}: {e}") from e

    async def close(self) -> None:
        """Close the Reddit session."""
        if self._reddit:
            logger.info("Closing Reddit client")
            await self._reddit.close()
            self._reddit = None
