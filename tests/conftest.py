from __future__ import annotations

import fnmatch
from collections import Counter
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from redis.exceptions import ResponseError

from swapi_cache.cache import InMemoryBackend
from swapi_cache.errors import StorageReadError, StorageWriteError, TransportError
from swapi_cache.models import (
    ApiResult,
    ListResponse,
    PersonResponse,
    ResourceKind,
    detail_model_for,
)


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 4, 8, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


class FakeRemoteService:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ResourceKind, Any]] = []
        self.overrides: dict[tuple[str, ResourceKind, Any], ApiResult] = {}
        self.raise_error: Exception | None = None

    async def list_resource(self, kind: ResourceKind, page: int | None = None, limit: int | None = None) -> ApiResult:
        call = ("list", kind, (page, limit))
        self.calls.append(call)
        if self.raise_error is not None:
            raise self.raise_error
        if call in self.overrides:
            return self.overrides[call]
        payload = ListResponse(
            message="ok",
            total_records=82,
            total_pages=9,
            results=[{"uid": str(i), "name": f"{kind.value}-{i}", "url": f"https://example/{i}"} for i in range(2)],
        )
        return ApiResult.success(kind, payload)

    async def get_resource(self, kind: ResourceKind, entity_id: str) -> ApiResult:
        call = ("get", kind, entity_id)
        self.calls.append(call)
        if self.raise_error is not None:
            raise self.raise_error
        if call in self.overrides:
            return self.overrides[call]
        model = detail_model_for(kind)
        payload = model.model_validate(
            {
                "message": "ok",
                "result": {
                    "properties": {"name": f"{kind.value} #{entity_id}", "created": "2025-04-08T00:00:00Z"},
                    "description": "A thing",
                    "_id": f"5f63a36eee9fd7000499be4{entity_id}",
                    "uid": entity_id,
                    "__v": len(self.calls),
                },
            }
        )
        return ApiResult.success(kind, payload)


class RecordingBackend(InMemoryBackend):
    """In-memory backend that counts calls and can be told to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.counts: Counter[str] = Counter()
        self.fail_reads = False
        self.fail_writes = False

    async def put(self, key: str, data: bytes) -> None:
        self.counts["put"] += 1
        if self.fail_writes:
            raise StorageWriteError("disk full", key=key)
        await super().put(key, data)

    async def get(self, key: str) -> bytes | None:
        self.counts["get"] += 1
        if self.fail_reads:
            raise StorageReadError("io error", key=key)
        return await super().get(key)

    async def exists(self, key: str) -> bool:
        self.counts["exists"] += 1
        return await super().exists(key)

    async def remove(self, key: str) -> None:
        self.counts["remove"] += 1
        await super().remove(key)

    async def clear(self) -> None:
        self.counts["clear"] += 1
        await super().clear()


class FakeRedis:
    def __init__(self) -> None:
        self.store: dict[str, bytes] = {}
        self.undeletable: set[str] = set()

    async def get(self, key: str):
        return self.store.get(key)

    async def set(self, key: str, value: bytes):
        self.store[key] = value
        return True

    async def exists(self, *keys: str) -> int:
        return sum(1 for key in keys if key in self.store)

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if key in self.undeletable:
                raise ResponseError(f"cannot delete {key}")
            if self.store.pop(key, None) is not None:
                removed += 1
        return removed

    async def scan(self, cursor: int = 0, match: str | None = None, count: int | None = None):
        keys = [key for key in self.store if match is None or fnmatch.fnmatchcase(key, match)]
        return 0, keys


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def remote() -> FakeRemoteService:
    return FakeRemoteService()


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def person_payload() -> PersonResponse:
    return PersonResponse.model_validate(
        {
            "message": "ok",
            "result": {
                "properties": {"name": "Luke Skywalker", "height": "172", "mass": "77"},
                "description": "A person within the Star Wars universe",
                "_id": "5f63a36eee9fd7000499be42",
                "uid": "1",
                "__v": 0,
            },
        }
    )


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError("connection reset")
