from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from swapi_cache.config import CachePolicy
from swapi_cache.errors import SerializationError, StorageError
from swapi_cache.models import ApiResult, ListResponse, ResourceKind, SwapiModel, detail_model_for
from swapi_cache.remote.base import CatalogOperations, RemoteService

from .backends.base import StorageBackend
from .hooks import CacheHooks
from .key_builder import CacheKeyBuilder, describe_detail, describe_list
from .metadata import CacheMetadataStore
from .metrics import CacheMetricsProtocol, NoopCacheMetrics

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def encode_payload(payload: SwapiModel) -> bytes:
    try:
        return payload.model_dump_json(by_alias=True).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot serialize {type(payload).__name__}: {exc}") from exc


def decode_payload(model: type[SwapiModel], raw: bytes) -> SwapiModel:
    try:
        payload = model.model_validate_json(raw)
    except (ValidationError, ValueError) as exc:
        raise SerializationError(f"cached payload is not a valid {model.__name__}: {exc}") from exc

    field = model.envelope_field
    if field is not None and (field not in payload.model_fields_set or getattr(payload, field) is None):
        raise SerializationError(f"cached payload has no {field!r}, expected a {model.__name__}")
    return payload


class CachedSwapiClient(CatalogOperations):
    """Read-through cache in front of any ``RemoteService``.

    Fresh entries are served from ``backend``; anything else goes to
    ``remote`` and successful results are written back. Storage and
    serialization problems never reach the caller: they are logged, counted
    and reported to ``hooks.on_degraded``, and the call falls back to the
    remote service.
    """

    def __init__(
        self,
        remote: RemoteService,
        backend: StorageBackend,
        policy: CachePolicy | None = None,
        *,
        hooks: CacheHooks | None = None,
        metrics: CacheMetricsProtocol | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.remote = remote
        self.backend = backend
        self.policy = policy or CachePolicy()
        self.hooks = hooks or CacheHooks()
        self.metrics = metrics or NoopCacheMetrics()
        self.metadata = CacheMetadataStore(backend)
        self.key_builder = CacheKeyBuilder()
        self._clock = clock or utc_now
        self._pending_writes: set[asyncio.Task[None]] = set()

    async def list_resource(
        self,
        kind: ResourceKind,
        page: int | None = None,
        limit: int | None = None,
    ) -> ApiResult:
        kind = ResourceKind(kind)
        if not self.policy.enabled:
            return await self.remote.list_resource(kind, page, limit)

        return await self._read_through(
            kind=kind,
            key=self.key_builder.list_key(kind, page, limit),
            model=ListResponse,
            endpoint=describe_list(kind, page, limit),
            fetch=lambda: self.remote.list_resource(kind, page, limit),
        )

    async def get_resource(self, kind: ResourceKind, entity_id: str) -> ApiResult:
        kind = ResourceKind(kind)
        if not self.policy.enabled:
            return await self.remote.get_resource(kind, entity_id)

        return await self._read_through(
            kind=kind,
            key=self.key_builder.detail_key(kind, entity_id),
            model=detail_model_for(kind),
            endpoint=describe_detail(kind, entity_id),
            fetch=lambda: self.remote.get_resource(kind, entity_id),
        )

    async def invalidate(self, key: str) -> None:
        await self.backend.remove(key)
        await self.metadata.remove(key)

    async def invalidate_resource(self, kind: ResourceKind, entity_id: str) -> None:
        await self.invalidate(self.key_builder.detail_key(ResourceKind(kind), entity_id))

    async def invalidate_list(self, kind: ResourceKind, page: int | None = None, limit: int | None = None) -> None:
        await self.invalidate(self.key_builder.list_key(ResourceKind(kind), page, limit))

    async def clear(self) -> None:
        await self.backend.clear()

    async def wait_for_pending_writes(self) -> None:
        if self._pending_writes:
            await asyncio.gather(*self._pending_writes, return_exceptions=True)

    async def aclose(self) -> None:
        """Drain pending writes, then release the remote client and the backend."""
        await self.wait_for_pending_writes()
        for resource in (self.remote, self.backend):
            close = getattr(resource, "aclose", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> CachedSwapiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _read_through(
        self,
        *,
        kind: ResourceKind,
        key: str,
        model: type[SwapiModel],
        endpoint: str,
        fetch: Callable[[], Awaitable[ApiResult]],
    ) -> ApiResult:
        cached = await self._read_cached(key, model, endpoint)
        if cached is not None:
            logger.debug("cache hit for %s (%s)", endpoint, key)
            self.metrics.hit(resource=kind.value)
            self.hooks.hit(endpoint)
            return ApiResult.success(kind, cached)

        logger.debug("cache miss for %s (%s)", endpoint, key)
        self.metrics.miss(resource=kind.value)
        self.hooks.miss(endpoint)

        result = await fetch()
        if result.ok and result.payload is not None:
            await self._schedule_write(key, result.payload, kind, endpoint)
        return result

    async def _read_cached(self, key: str, model: type[SwapiModel], endpoint: str) -> SwapiModel | None:
        if not await self.metadata.is_fresh(key, self._clock(), self.policy.ttl_seconds):
            return None

        try:
            raw = await self.backend.get(key)
        except StorageError as exc:
            self._degraded(endpoint, exc, operation="get")
            return None
        if raw is None:
            return None

        try:
            return decode_payload(model, raw)
        except SerializationError as exc:
            self._degraded(endpoint, exc, operation="decode")
            return None

    async def _schedule_write(self, key: str, payload: SwapiModel, kind: ResourceKind, endpoint: str) -> None:
        # Shielded so a caller that stops awaiting doesn't leave a half-written entry.
        task = asyncio.create_task(self._write_through(key, payload, kind, endpoint))
        self._pending_writes.add(task)
        task.add_done_callback(self._pending_writes.discard)
        await asyncio.shield(task)

    async def _write_through(self, key: str, payload: SwapiModel, kind: ResourceKind, endpoint: str) -> None:
        try:
            data = encode_payload(payload)
            await self.backend.put(key, data)
            await self.metadata.record_write(key, self._clock())
        except (StorageError, SerializationError) as exc:
            self._degraded(endpoint, exc, operation="set")
            return
        self.metrics.write(resource=kind.value)

    def _degraded(self, endpoint: str, error: Exception, *, operation: str) -> None:
        logger.warning("cache %s failed for %s: %s", operation, endpoint, error)
        self.metrics.error(operation=operation)
        self.hooks.degraded(endpoint, error)

