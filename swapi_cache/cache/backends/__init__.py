from .base import StorageBackend, encode_key
from .filesystem import FileSystemBackend
from .memory import InMemoryBackend
from .redis import RedisBackend

__all__ = [
    "FileSystemBackend",
    "InMemoryBackend",
    "RedisBackend",
    "StorageBackend",
    "encode_key",
]
