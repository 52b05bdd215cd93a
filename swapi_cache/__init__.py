"""Read-through caching client for the SWAPI catalog."""

from swapi_cache.cache import (
    CachedSwapiClient,
    CacheHooks,
    CacheKeyBuilder,
    CacheMetadataStore,
    FileSystemBackend,
    InMemoryBackend,
    NoopCacheMetrics,
    PrometheusCacheMetrics,
    RedisBackend,
    StorageBackend,
)
from swapi_cache.config import CachePolicy, Settings, configure_logging, get_settings, load_yaml_config
from swapi_cache.errors import (
    BackendInitError,
    SerializationError,
    ServerError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    SwapiCacheError,
    TransportError,
)
from swapi_cache.factory import (
    create_cached_client,
    create_filesystem_cached_client,
    create_memory_cached_client,
    create_redis_cached_client,
    create_standard_client,
)
from swapi_cache.models import (
    ApiResult,
    ListItem,
    ListResponse,
    PersonResponse,
    PlanetResponse,
    ResourceKind,
    StarshipResponse,
)
from swapi_cache.remote import RemoteService, SwapiHttpClient

__version__ = "0.1.0"

__all__ = [
    "ApiResult",
    "BackendInitError",
    "CacheHooks",
    "CacheKeyBuilder",
    "CacheMetadataStore",
    "CachePolicy",
    "CachedSwapiClient",
    "FileSystemBackend",
    "InMemoryBackend",
    "ListItem",
    "ListResponse",
    "NoopCacheMetrics",
    "PersonResponse",
    "PlanetResponse",
    "PrometheusCacheMetrics",
    "RedisBackend",
    "RemoteService",
    "ResourceKind",
    "SerializationError",
    "ServerError",
    "Settings",
    "StarshipResponse",
    "StorageBackend",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "SwapiCacheError",
    "SwapiHttpClient",
    "TransportError",
    "configure_logging",
    "create_cached_client",
    "create_filesystem_cached_client",
    "create_memory_cached_client",
    "create_redis_cached_client",
    "create_standard_client",
    "get_settings",
    "load_yaml_config",
]
