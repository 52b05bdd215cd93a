from __future__ import annotations

from swapi_cache.models import ResourceKind

# Must match the defaults the remote API applies to unspecified query params.
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

METADATA_SUFFIX = "_metadata"


def _kind_name(kind: ResourceKind | str) -> str:
    return kind.value if isinstance(kind, ResourceKind) else str(kind)


class CacheKeyBuilder:
    @staticmethod
    def list_key(kind: ResourceKind | str, page: int | None = None, limit: int | None = None) -> str:
        page = DEFAULT_PAGE if page is None else page
        limit = DEFAULT_LIMIT if limit is None else limit
        return f"{_kind_name(kind)}_page{page}_limit{limit}"

    @staticmethod
    def detail_key(kind: ResourceKind | str, entity_id: str) -> str:
        return f"{_kind_name(kind)}_{entity_id}"

    @staticmethod
    def metadata_key(key: str) -> str:
        return f"{key}{METADATA_SUFFIX}"


def describe_list(kind: ResourceKind | str, page: int | None = None, limit: int | None = None) -> str:
    page = DEFAULT_PAGE if page is None else page
    limit = DEFAULT_LIMIT if limit is None else limit
    return f"GET /{_kind_name(kind)}?page={page}&limit={limit}"


def describe_detail(kind: ResourceKind | str, entity_id: str) -> str:
    return f"GET /{_kind_name(kind)}/{entity_id}"
