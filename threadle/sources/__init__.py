"""Upstream content sources for puzzle construction."""

from .base import ContentProvider
from .reddit import RedditContentProvider

__all__ = ["ContentProvider", "RedditContentProvider"]
