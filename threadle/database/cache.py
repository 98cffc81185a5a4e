"""Key-value cache store used to share the daily puzzle."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..config import settings
from ..exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)


class CacheStore(ABC):
    """Minimal async get/set/expire store.

    Every method raises ``CacheUnavailableError`` when the backing service
    cannot be reached; an absent key is not an error.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get a value, or None if the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: str) -> bool:
        """Store a value atomically under ``key``."""

    @abstractmethod
    async def expire(self, key: str, seconds: int) -> bool:
        """Set the time-to-live of ``key``."""

    @abstractmethod
    async def ttl(self, key: str) -> int:
        """Seconds left before ``key`` expires; -1 if it never does, -2 if absent."""

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        """Release any connection held by the store."""


class RedisCacheStore(CacheStore):
    """Redis-backed cache store."""

    def __init__(self, redis_url: str = None):
        """Initialize Redis connection."""
        self.redis_url = redis_url or settings.redis_url
        self.redis_client = redis.from_url(self.redis_url, decode_responses=True)

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.redis_client.get(key)
        except (RedisError, OSError) as e:
            logger.error(f"Error getting cache key {key}: {e}")
            raise CacheUnavailableError(f"Cache get failed for {key}") from e

    async def set(self, key: str, value: str) -> bool:
        try:
            return bool(await self.redis_client.set(key, value))
        except (RedisError, OSError) as e:
            logger.error(f"Error setting cache key {key}: {e}")
            raise CacheUnavailableError(f"Cache set failed for {key}") from e

    async def expire(self, key: str, seconds: int) -> bool:
        try:
            return bool(await self.redis_client.expire(key, seconds))
        except (RedisError, OSError) as e:
            logger.error(f"Error setting TTL for cache key {key}: {e}")
            raise CacheUnavailableError(f"Cache expire failed for {key}") from e

    async def ttl(self, key: str) -> int:
        try:
            return await self.redis_client.ttl(key)
        except (RedisError, OSError) as e:
            logger.error(f"Error reading TTL for cache key {key}: {e}")
            raise CacheUnavailableError(f"Cache ttl failed for {key}") from e

    async def health_check(self) -> bool:
        """Check if Redis connection is healthy."""
        try:
            await self.redis_client.ping()
            return True
        except (RedisError, OSError) as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        try:
            await self.redis_client.aclose()
        except (RedisError, OSError) as e:
            logger.error(f"Error closing Redis connection: {e}")
