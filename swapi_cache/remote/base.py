from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from swapi_cache.models import ApiResult, ResourceKind


@runtime_checkable
class RemoteService(Protocol):
    """The catalog operations a client (cached or not) exposes.

    Transport failures raise ``TransportError``. Non-success statuses come
    back as an ``ApiResult`` whose ``ok`` is false.
    """

    async def list_resource(
        self,
        kind: ResourceKind,
        page: int | None = None,
        limit: int | None = None,
    ) -> ApiResult: ...

    async def get_resource(self, kind: ResourceKind, entity_id: str) -> ApiResult: ...


class CatalogOperations(ABC):
    """Named per-resource operations on top of the two generic calls."""

    @abstractmethod
    async def list_resource(
        self,
        kind: ResourceKind,
        page: int | None = None,
        limit: int | None = None,
    ) -> ApiResult:
        raise NotImplementedError

    @abstractmethod
    async def get_resource(self, kind: ResourceKind, entity_id: str) -> ApiResult:
        raise NotImplementedError

    async def list_people(self, page: int | None = None, limit: int | None = None) -> ApiResult:
        return await self.list_resource(ResourceKind.PEOPLE, page, limit)

    async def get_person(self, entity_id: str) -> ApiResult:
        return await self.get_resource(ResourceKind.PEOPLE, entity_id)

    async def list_planets(self, page: int | None = None, limit: int | None = None) -> ApiResult:
        return await self.list_resource(ResourceKind.PLANETS, page, limit)

    async def get_planet(self, entity_id: str) -> ApiResult:
        return await self.get_resource(ResourceKind.PLANETS, entity_id)

    async def list_starships(self, page: int | None = None, limit: int | None = None) -> ApiResult:
        return await self.list_resource(ResourceKind.STARSHIPS, page, limit)

    async def get_starship(self, entity_id: str) -> ApiResult:
        return await self.get_resource(ResourceKind.STARSHIPS, entity_id)
