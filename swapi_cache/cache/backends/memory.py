from __future__ import annotations

import asyncio


class InMemoryBackend:
    """Process-lifetime payload store. Freshness lives in the metadata records, not here."""

    def __init__(self) -> None:
        self._cache: dict[str, bytes] = {}
        self._lock = asyncio.Lock()

    async def put(self, key: str, data: bytes) -> None:
        async with self._lock:
            self._cache[key] = bytes(data)

    async def get(self, key: str) -> bytes | None:
        async with self._lock:
            return self._cache.get(key)

    async def exists(self, key: str) -> bool:
        async with self._lock:
            return key in self._cache

    async def remove(self, key: str) -> None:
        async with self._lock:
            self._cache.pop(key, None)

    async def clear(self) -> None:
        async with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
