from __future__ import annotations

import logging
from pathlib import Path

import httpx
from redis.asyncio import Redis

from swapi_cache.cache import (
    CachedSwapiClient,
    CacheHooks,
    CacheMetricsProtocol,
    FileSystemBackend,
    InMemoryBackend,
    NoopCacheMetrics,
    PrometheusCacheMetrics,
    RedisBackend,
    StorageBackend,
)
from swapi_cache.cache.client import Clock
from swapi_cache.config import (
    DEFAULT_CACHE_NAME,
    DEFAULT_CACHE_TTL,
    DEFAULT_KEY_PREFIX,
    CachePolicy,
    Settings,
    configure_logging,
    get_settings,
)
from swapi_cache.remote import RemoteService, SwapiHttpClient

logger = logging.getLogger(__name__)


def create_standard_client(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> SwapiHttpClient:
    settings = settings or get_settings()
    return SwapiHttpClient(http_client, base_url=settings.base_url, timeout=settings.timeout)


def _build(
    backend: StorageBackend,
    policy: CachePolicy,
    remote: RemoteService | None,
    hooks: CacheHooks | None,
    metrics: CacheMetricsProtocol | None,
    clock: Clock | None,
) -> CachedSwapiClient:
    return CachedSwapiClient(
        remote if remote is not None else create_standard_client(),
        backend,
        policy,
        hooks=hooks,
        metrics=metrics,
        clock=clock,
    )


def create_filesystem_cached_client(
    ttl: float = DEFAULT_CACHE_TTL,
    cache_name: str = DEFAULT_CACHE_NAME,
    enabled: bool = True,
    *,
    root: str | Path | None = None,
    remote: RemoteService | None = None,
    hooks: CacheHooks | None = None,
    metrics: CacheMetricsProtocol | None = None,
    clock: Clock | None = None,
) -> CachedSwapiClient:
    backend = FileSystemBackend(cache_name=cache_name, root=root)
    policy = CachePolicy(ttl_seconds=ttl, enabled=enabled)
    return _build(backend, policy, remote, hooks, metrics, clock)


def create_redis_cached_client(
    redis_client: Redis,
    ttl: float = DEFAULT_CACHE_TTL,
    key_prefix: str = DEFAULT_KEY_PREFIX,
    enabled: bool = True,
    *,
    remote: RemoteService | None = None,
    hooks: CacheHooks | None = None,
    metrics: CacheMetricsProtocol | None = None,
    clock: Clock | None = None,
) -> CachedSwapiClient:
    backend = RedisBackend(redis_client, key_prefix=key_prefix)
    policy = CachePolicy(ttl_seconds=ttl, enabled=enabled)
    return _build(backend, policy, remote, hooks, metrics, clock)


def create_memory_cached_client(
    ttl: float = DEFAULT_CACHE_TTL,
    enabled: bool = True,
    *,
    remote: RemoteService | None = None,
    hooks: CacheHooks | None = None,
    metrics: CacheMetricsProtocol | None = None,
    clock: Clock | None = None,
) -> CachedSwapiClient:
    policy = CachePolicy(ttl_seconds=ttl, enabled=enabled)
    return _build(InMemoryBackend(), policy, remote, hooks, metrics, clock)


def create_cached_client(
    settings: Settings | None = None,
    *,
    remote: RemoteService | None = None,
    redis_client: Redis | None = None,
    hooks: CacheHooks | None = None,
    prometheus: bool = False,
    clock: Clock | None = None,
) -> CachedSwapiClient:
    """Build a cached client with the backend named in ``settings``."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    remote = remote if remote is not None else create_standard_client(settings)
    metrics: CacheMetricsProtocol = (
        PrometheusCacheMetrics(cache_type=settings.cache_backend) if prometheus else NoopCacheMetrics()
    )

    if settings.cache_backend == "memory":
        backend: StorageBackend = InMemoryBackend()
    elif settings.cache_backend == "filesystem":
        backend = FileSystemBackend(cache_name=settings.cache_name, root=settings.cache_root)
    elif settings.cache_backend == "redis":
        owns_client = redis_client is None
        if redis_client is None:
            redis_client = Redis.from_url(settings.redis_url)
        backend = RedisBackend(redis_client, key_prefix=settings.cache_key_prefix, owns_client=owns_client)
    else:
        raise ValueError(f"Unsupported cache backend: {settings.cache_backend}")

    logger.info(
        "swapi cache ready: backend=%s ttl=%ss enabled=%s",
        settings.cache_backend,
        settings.cache_ttl,
        settings.cache_enabled,
    )
    return CachedSwapiClient(
        remote,
        backend,
        settings.cache_policy(),
        hooks=hooks,
        metrics=metrics,
        clock=clock,
    )
