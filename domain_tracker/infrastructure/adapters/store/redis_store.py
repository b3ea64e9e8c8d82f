"""Record store backed by a Redis hash."""

from __future__ import annotations

import json
import logging

import redis.asyncio as redis

from ....application.exceptions import StoreUnavailableError
from ....domain.entities import DomainRecord
from ....domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class RedisRecordStore:
    """
    Record store keeping every record as one field of a Redis hash.

    Implements the RecordStore port. Field name is the domain, value the
    record's JSON representation; HSET and HDEL are atomic per field.
    """

    def __init__(self, redis_client: redis.Redis, key: str = "domain_tracker:records") -> None:
        """
        Initialize the store.

        Args:
            redis_client: Async Redis client.
            key: Name of the hash holding the records.
        """
        self.redis = redis_client
        self.key = key

    @classmethod
    def from_url(cls, url: str, key: str = "domain_tracker:records") -> RedisRecordStore:
        """Create a store with a client connected to ``url``."""
        return cls(redis.from_url(url, decode_responses=True), key)

    async def get(self, domain: str) -> DomainRecord | None:
        try:
            raw = await self.redis.hget(self.key, domain)
        except redis.RedisError as e:
            raise self._unavailable("read", e) from e
        return self._deserialize(raw) if raw else None

    async def list(self) -> list[DomainRecord]:
        try:
            raw_records = await self.redis.hgetall(self.key)
        except redis.RedisError as e:
            raise self._unavailable("list", e) from e
        return [self._deserialize(raw) for raw in raw_records.values()]

    async def put(self, record: DomainRecord) -> None:
        try:
            await self.redis.hset(self.key, record.domain, json.dumps(record.to_dict()))
        except redis.RedisError as e:
            raise self._unavailable("write", e) from e

    async def delete(self, domain: str) -> None:
        try:
            await self.redis.hdel(self.key, domain)
        except redis.RedisError as e:
            raise self._unavailable("delete", e) from e

    async def close(self) -> None:
        """Release the client's connections."""
        await self.redis.aclose()

    def _deserialize(self, raw: str | bytes) -> DomainRecord:
        try:
            return DomainRecord.from_dict(json.loads(raw))
        except (ValueError, ValidationError) as e:
            msg = f"Corrupt record in Redis hash {self.key}: {e}"
            logger.exception(msg)
            raise StoreUnavailableError(msg) from e

    def _unavailable(self, operation: str, error: Exception) -> StoreUnavailableError:
        msg = f"Redis {operation} on {self.key} failed: {error}"
        logger.exception(msg)
        return StoreUnavailableError(msg)
