"""Redis client for the locale caches shared across workers."""

import os
import redis
import logging

logger = logging.getLogger(__name__)

# Redis connection (lazy initialization)
_redis_client = None


def get_redis():
    """Get or create Redis connection."""
    global _redis_client

    if _redis_client is not None:
        return _redis_client

    redis_url = os.environ.get('REDIS_URL')

    if not redis_url:
        return None

    try:
        _redis_client = redis.from_url(redis_url, decode_responses=True)
        # Test connection
        _redis_client.ping()
        logger.info("Redis connected successfully")
        return _redis_client
    except redis.RedisError as e:
        logger.error(f"Redis connection failed: {e}")
        return None


def reset_redis():
    """Drop the cached connection so the next call reconnects."""
    global _redis_client
    _redis_client = None
