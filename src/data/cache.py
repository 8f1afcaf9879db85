"""Redis cache for third-party lookups.

RentCast bills per request, so a prospect looked up twice in a day should
only cost one call. Redis being down only costs the cache, never the lookup.
"""

import functools
import hashlib
import json
import logging
from typing import Any, Callable

import redis.asyncio as redis
from redis.exceptions import RedisError

from src.config import settings

logger = logging.getLogger(__name__)

KEY_NAMESPACE = "rentaldesk"

_redis_client: redis.Redis | None = None


async def get_redis() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(settings.redis_url, decode_responses=True)
    return _redis_client


def _cache_key(prefix: str, *args: Any, **kwargs: Any) -> str:
    """Stable key for a call: namespace, prefix and a digest of the arguments."""
    payload = {
        "args": [str(a) for a in args],
        "kwargs": {k: str(v) for k, v in kwargs.items()},
    }
    digest = hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()
    return f"{KEY_NAMESPACE}:{prefix}:{digest[:16]}"


async def _read(key: str) -> Any | None:
    try:
        r = await get_redis()
        raw = await r.get(key)
    except (RedisError, OSError):
        logger.warning("Redis unavailable, skipping cache for %s", key)
        return None
    if raw is None:
        return None
    logger.debug("Cache hit: %s", key)
    return json.loads(raw)


async def _write(key: str, value: Any, ttl_seconds: int) -> None:
    try:
        r = await get_redis()
        await r.setex(key, ttl_seconds, json.dumps(value, default=str))
    except (RedisError, OSError):
        logger.warning("Failed to write cache for %s", key)


def cached(prefix: str, ttl_seconds: int | None = None):
    """Cache an async method's JSON-able return value in Redis.

    The first positional argument (self) is left out of the key. Exceptions
    from the wrapped call propagate and nothing is stored.

    Args:
        prefix: Key prefix, usually the data source name (e.g. "rentcast")
        ttl_seconds: Time-to-live; defaults to settings.cache_ttl_seconds
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            key = _cache_key(prefix, *args[1:], **kwargs)
            hit = await _read(key)
            if hit is not None:
                return hit

            result = await func(*args, **kwargs)
            await _write(key, result, ttl_seconds or settings.cache_ttl_seconds)
            return result
        return wrapper
    return decorator
