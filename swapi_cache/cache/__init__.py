from .backends import FileSystemBackend, InMemoryBackend, RedisBackend, StorageBackend
from .hooks import CacheHooks
from .key_builder import DEFAULT_LIMIT, DEFAULT_PAGE, CacheKeyBuilder
from .metadata import CacheMetadataStore
from .metrics import CacheMetricsProtocol, NoopCacheMetrics, PrometheusCacheMetrics
from .client import CachedSwapiClient

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "CacheHooks",
    "CacheKeyBuilder",
    "CacheMetadataStore",
    "CacheMetricsProtocol",
    "CachedSwapiClient",
    "FileSystemBackend",
    "InMemoryBackend",
    "NoopCacheMetrics",
    "PrometheusCacheMetrics",
    "RedisBackend",
    "StorageBackend",
]
