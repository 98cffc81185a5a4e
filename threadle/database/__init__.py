"""Cache layer for the Threadle puzzle service."""

from .cache import CacheStore, RedisCacheStore
from .daily import DailyPuzzleCache, utc_today

__all__ = ["CacheStore", "RedisCacheStore", "DailyPuzzleCache", "utc_today"]
