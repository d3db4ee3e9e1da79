"""Redis key-value store.

Holds the persisted storefront snapshots:
- cart snapshot (JSON array of line items)
- theme preference ("dark" / "light")

Keys never expire; the snapshot is overwritten after every cart mutation.
Connection and command failures surface as StorageError so callers can treat
persistence as best-effort.
"""

import logging

import redis

from istore.stores.base import StorageError

logger = logging.getLogger("uvicorn.error")


class RedisStore:
    """Key-value store backed by a Redis server."""

    def __init__(self, client: redis.Redis) -> None:
        self._redis = client

    @classmethod
    def from_url(cls, url: str) -> "RedisStore":
        """Connect to Redis and validate connectivity early.

        Raises:
            StorageError: If the server cannot be reached.
        """
        client = redis.Redis.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        try:
            client.ping()
        except redis.RedisError as e:
            client.close()
            raise StorageError(f"Redis unavailable: {e}") from e
        logger.info("Redis connected")
        return cls(client)

    def get(self, key: str) -> str | None:
        try:
            return self._redis.get(key)
        except redis.RedisError as e:
            raise StorageError(f"Redis GET {key} failed: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self._redis.set(key, value)
        except redis.RedisError as e:
            raise StorageError(f"Redis SET {key} failed: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self._redis.delete(key)
        except redis.RedisError as e:
            raise StorageError(f"Redis DEL {key} failed: {e}") from e

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._redis.close()
