from __future__ import annotations

import logging
import re

from redis.asyncio import Redis
from redis.exceptions import RedisError

from swapi_cache.config import DEFAULT_KEY_PREFIX
from swapi_cache.errors import StorageReadError, StorageWriteError

from .base import encode_key

logger = logging.getLogger(__name__)

_GLOB_CHARS = re.compile(r"([*?\[\]\\])")


class RedisBackend:
    def __init__(
        self,
        redis_client: Redis,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        *,
        owns_client: bool = False,
    ) -> None:
        self.redis = redis_client
        self.key_prefix = key_prefix
        self._owns_client = owns_client

    def _cache_key(self, key: str) -> str:
        return f"{self.key_prefix}{encode_key(key)}"

    def _match_pattern(self) -> str:
        return _GLOB_CHARS.sub(r"\\\1", self.key_prefix) + "*"

    async def put(self, key: str, data: bytes) -> None:
        try:
            await self.redis.set(self._cache_key(key), data)
        except RedisError as exc:
            raise StorageWriteError(f"redis set failed: {exc}", key=key) from exc

    async def get(self, key: str) -> bytes | None:
        try:
            raw = await self.redis.get(self._cache_key(key))
        except RedisError as exc:
            raise StorageReadError(f"redis get failed: {exc}", key=key) from exc

        if raw is None:
            return None
        if isinstance(raw, str):
            return raw.encode("utf-8")
        return bytes(raw)

    async def exists(self, key: str) -> bool:
        try:
            return bool(await self.redis.exists(self._cache_key(key)))
        except RedisError as exc:
            logger.warning("cache redis exists failed: %s", exc)
            return False

    async def remove(self, key: str) -> None:
        try:
            await self.redis.delete(self._cache_key(key))
        except RedisError as exc:
            raise StorageWriteError(f"redis delete failed: {exc}", key=key) from exc

    async def clear(self) -> None:
        failed: list[str] = []
        cursor = 0
        while True:
            try:
                cursor, keys = await self.redis.scan(cursor=cursor, match=self._match_pattern())
            except RedisError as exc:
                raise StorageWriteError(f"redis scan failed: {exc}") from exc
            for key in keys:
                try:
                    await self.redis.delete(key)
                except RedisError as exc:
                    logger.warning("cache clear could not remove %s: %s", key, exc)
                    failed.append(key.decode("utf-8") if isinstance(key, bytes) else str(key))
            if cursor == 0:
                break
        if failed:
            raise StorageWriteError(f"cannot remove {len(failed)} redis key(s)", failed_keys=failed)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.redis.aclose()
