from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from swapi_cache.config import DEFAULT_CACHE_NAME
from swapi_cache.errors import BackendInitError, StorageReadError, StorageWriteError

from .base import encode_key

logger = logging.getLogger(__name__)

FILE_SUFFIX = ".json"
_TEMP_PREFIX = ".tmp-"


def default_cache_root() -> Path:
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".cache"


class FileSystemBackend:
    """One file per key under ``<root>/<cache_name>``.

    Writes land in a temp file in the same directory and are moved into place
    with ``os.replace``, so readers see either the old or the new payload.
    """

    def __init__(self, cache_name: str = DEFAULT_CACHE_NAME, root: str | Path | None = None) -> None:
        base = Path(root) if root is not None else default_cache_root()
        self.cache_dir = base / encode_key(cache_name)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BackendInitError(f"cannot create cache directory {self.cache_dir}: {exc}") from exc
        if not os.access(self.cache_dir, os.W_OK):
            raise BackendInitError(f"cache directory {self.cache_dir} is not writable")

    def path_for(self, key: str) -> Path:
        return self.cache_dir / f"{encode_key(key)}{FILE_SUFFIX}"

    async def put(self, key: str, data: bytes) -> None:
        target = self.path_for(key)
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.cache_dir, prefix=_TEMP_PREFIX, suffix=FILE_SUFFIX)
            os.close(fd)
            async with aiofiles.open(tmp_name, "wb") as handle:
                await handle.write(data)
            await aiofiles.os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    await aiofiles.os.remove(tmp_name)
            raise StorageWriteError(f"cannot write {target}: {exc}", key=key) from exc

    async def get(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            async with aiofiles.open(path, "rb") as handle:
                return await handle.read()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageReadError(f"cannot read {path}: {exc}", key=key) from exc

    async def exists(self, key: str) -> bool:
        return await aiofiles.os.path.isfile(self.path_for(key))

    async def remove(self, key: str) -> None:
        path = self.path_for(key)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StorageWriteError(f"cannot remove {path}: {exc}", key=key) from exc

    async def clear(self) -> None:
        try:
            names = await aiofiles.os.listdir(self.cache_dir)
        except OSError as exc:
            raise StorageWriteError(f"cannot list {self.cache_dir}: {exc}") from exc

        failed: list[str] = []
        for name in names:
            try:
                await aiofiles.os.remove(self.cache_dir / name)
            except FileNotFoundError:
                continue
            except OSError as exc:
                logger.warning("cache clear could not remove %s: %s", name, exc)
                failed.append(name)
        if failed:
            raise StorageWriteError(
                f"cannot remove {len(failed)} cache file(s) from {self.cache_dir}",
                failed_keys=failed,
            )
