"""Shared key/value cache used for the locale mappings.

Values are stored in Redis as JSON when ``REDIS_URL`` is configured. Without
Redis the cache lives in this process only. Callers must treat a miss
(``None``) as "reload from the database", never as an error.
"""

import json
import logging
import redis

from translatable.services.redis_client import get_redis

logger = logging.getLogger(__name__)


class SharedCache:
    """Minimal get/put/forget cache."""

    def __init__(self, prefix: str = 'translatable:'):
        self.prefix = prefix
        self._local = {}

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str):
        """Return the cached value or None on a miss."""
        r = get_redis()
        if not r:
            raw = self._local.get(self._key(key))
        else:
            try:
                raw = r.get(self._key(key))
            except redis.RedisError as e:
                logger.error(f"Redis cache get error for {key}: {e}")
                return None
        return json.loads(raw) if raw is not None else None

    def put(self, key: str, value) -> bool:
        r = get_redis()
        if not r:
            # Stored as JSON text, like the Redis entries
            self._local[self._key(key)] = json.dumps(value)
            return True

        try:
            r.set(self._key(key), json.dumps(value))
            return True
        except redis.RedisError as e:
            logger.error(f"Redis cache put error for {key}: {e}")
            return False

    def forget(self, key: str) -> bool:
        self._local.pop(self._key(key), None)

        r = get_redis()
        if not r:
            return True

        try:
            r.delete(self._key(key))
            return True
        except redis.RedisError as e:
            logger.error(f"Redis cache forget error for {key}: {e}")
            return False
