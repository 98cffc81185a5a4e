"""Interface to the upstream source of threads and replies."""

from abc import ABC, abstractmethod
from typing import List

from ..models.sources import SourceItem, SourceReply


class ContentProvider(ABC):
    """Supplies recent threads and their replies to the puzzle builder.

    Implementations may raise any exception or return empty lists; the
    builder treats both as the source being unavailable.
    """

    @abstractmethod
    async def list_recent_items(self, category: str, limit: int) -> List[SourceItem]:
        """Return up to ``limit`` recent threads from ``category``, newest first."""

    @abstractmethod
    async def list_replies(self, item_id: str, limit: int) -> List[SourceReply]:
        """Return up to ``limit`` top-level replies to the thread ``item_id``."""

    async def close(self) -> None:
        """Release any resources held by the provider."""
