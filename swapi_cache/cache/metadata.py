from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta

from swapi_cache.errors import SerializationError, StorageError

from .backends.base import StorageBackend
from .key_builder import CacheKeyBuilder

logger = logging.getLogger(__name__)


class CacheMetadataStore:
    """Write timestamps kept beside each payload under ``<key>_metadata``."""

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend

    async def record_write(self, key: str, now: datetime) -> None:
        record = json.dumps({"timestamp": now.isoformat()}, separators=(",", ":"))
        await self.backend.put(CacheKeyBuilder.metadata_key(key), record.encode("utf-8"))

    async def stored_at(self, key: str) -> datetime | None:
        raw = await self.backend.get(CacheKeyBuilder.metadata_key(key))
        if raw is None:
            return None
        return parse_timestamp(raw)

    async def is_fresh(self, key: str, now: datetime, ttl: float) -> bool:
        try:
            stored = await self.stored_at(key)
        except (StorageError, SerializationError) as exc:
            logger.debug("cache metadata unusable for %s: %s", key, exc)
            return False
        if stored is None:
            return False
        try:
            age = now - stored
        except TypeError:
            # naive vs aware timestamps
            logger.debug("cache metadata timestamp for %s is not comparable", key)
            return False
        return age <= timedelta(seconds=ttl)

    async def remove(self, key: str) -> None:
        await self.backend.remove(CacheKeyBuilder.metadata_key(key))


def parse_timestamp(raw: bytes) -> datetime:
    try:
        record = json.loads(raw)
        return datetime.fromisoformat(record["timestamp"])
    except (ValueError, TypeError, KeyError) as exc:
        raise SerializationError(f"malformed cache metadata: {exc}") from exc
