from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from swapi_cache.cache.key_builder import DEFAULT_LIMIT, DEFAULT_PAGE
from swapi_cache.config import DEFAULT_BASE_URL
from swapi_cache.errors import SerializationError, TransportError
from swapi_cache.models import ApiResult, ListResponse, ResourceKind, SwapiModel, detail_model_for

from .base import CatalogOperations

logger = logging.getLogger(__name__)


class SwapiHttpClient(CatalogOperations):
    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)
        self.base_url = base_url.rstrip("/")

    async def list_resource(
        self,
        kind: ResourceKind,
        page: int | None = None,
        limit: int | None = None,
    ) -> ApiResult:
        kind = ResourceKind(kind)
        params = {
            "page": DEFAULT_PAGE if page is None else page,
            "limit": DEFAULT_LIMIT if limit is None else limit,
        }
        return await self._request(kind, f"/{kind.value}", ListResponse, params)

    async def get_resource(self, kind: ResourceKind, entity_id: str) -> ApiResult:
        kind = ResourceKind(kind)
        path = f"/{kind.value}/{quote(str(entity_id), safe='')}"
        return await self._request(kind, path, detail_model_for(kind))

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> SwapiHttpClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _request(
        self,
        kind: ResourceKind,
        path: str,
        model: type[SwapiModel],
        params: dict[str, Any] | None = None,
    ) -> ApiResult:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise self.map_error(exc) from exc

        if response.status_code != 200:
            logger.info("swapi %s returned status %s", path, response.status_code)
            return ApiResult(kind=kind, status_code=response.status_code, error=self._error_body(response))

        try:
            payload = model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise SerializationError(f"unexpected response body from {path}: {exc}") from exc
        return ApiResult.success(kind, payload)

    def map_error(self, error: httpx.HTTPError) -> TransportError:
        if isinstance(error, httpx.TimeoutException):
            return TransportError(message=f"Request timed out: {error}")
        return TransportError(message=f"Request failed: {error}")

    def _error_body(self, response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {"message": response.text}
        if isinstance(body, dict):
            return body
        return {"message": body}
