from __future__ import annotations

from typing import Protocol, runtime_checkable
from urllib.parse import quote


@runtime_checkable
class StorageBackend(Protocol):
    async def put(self, key: str, data: bytes) -> None: ...

    async def get(self, key: str) -> bytes | None: ...

    async def exists(self, key: str) -> bool: ...

    async def remove(self, key: str) -> None: ...

    async def clear(self) -> None: ...


def encode_key(key: str) -> str:
    """Percent-encode every character outside ``[A-Za-z0-9_.~-]``.

    ``/`` and ``%`` are encoded too, so the mapping is injective and a key
    can never name a location outside the backend's namespace.
    """
    encoded = quote(key, safe="")
    # "." and ".." are still meaningful path segments on their own.
    if encoded in {".", ".."}:
        encoded = encoded.replace(".", "%2E")
    return encoded

