from __future__ import annotations

import itertools

import pytest

from swapi_cache.cache import DEFAULT_LIMIT, DEFAULT_PAGE, CacheKeyBuilder
from swapi_cache.cache.key_builder import describe_detail, describe_list
from swapi_cache.models import ResourceKind


def test_list_key_format():
    assert CacheKeyBuilder.list_key(ResourceKind.PLANETS, 2, 25) == "planets_page2_limit25"


def test_detail_key_format():
    assert CacheKeyBuilder.detail_key(ResourceKind.PEOPLE, "1") == "people_1"


def test_list_key_defaults_match_explicit_values():
    assert DEFAULT_PAGE == 1
    assert DEFAULT_LIMIT == 10
    assert CacheKeyBuilder.list_key(ResourceKind.PLANETS) == CacheKeyBuilder.list_key(ResourceKind.PLANETS, 1, 10)
    assert CacheKeyBuilder.list_key(ResourceKind.PLANETS, None, 10) == "planets_page1_limit10"
    assert CacheKeyBuilder.list_key(ResourceKind.PLANETS, 1, None) == "planets_page1_limit10"


def test_accepts_plain_strings_for_kind():
    assert CacheKeyBuilder.list_key("starships", 3, 5) == CacheKeyBuilder.list_key(ResourceKind.STARSHIPS, 3, 5)


def test_list_keys_are_deterministic_and_distinct():
    kinds = list(ResourceKind)
    pages = range(1, 6)
    limits = (1, 5, 10, 50, 100)

    keys = {}
    for kind, page, limit in itertools.product(kinds, pages, limits):
        key = CacheKeyBuilder.list_key(kind, page, limit)
        assert key == CacheKeyBuilder.list_key(kind, page, limit)
        keys[key] = (kind, page, limit)

    assert len(keys) == len(kinds) * len(pages) * len(limits)


def test_page_and_limit_digits_do_not_alias():
    assert CacheKeyBuilder.list_key(ResourceKind.PEOPLE, 1, 10) != CacheKeyBuilder.list_key(ResourceKind.PEOPLE, 11, 0)
    assert CacheKeyBuilder.list_key(ResourceKind.PEOPLE, 12, 3) != CacheKeyBuilder.list_key(ResourceKind.PEOPLE, 1, 23)


@pytest.mark.parametrize("entity_id", ["1", "10", "42", "abc"])
def test_detail_keys_differ_across_kinds(entity_id):
    keys = {CacheKeyBuilder.detail_key(kind, entity_id) for kind in ResourceKind}
    assert len(keys) == len(ResourceKind)


def test_list_and_detail_shapes_differ():
    list_keys = {CacheKeyBuilder.list_key(kind, p, l) for kind in ResourceKind for p in range(1, 4) for l in (10, 20)}
    detail_keys = {CacheKeyBuilder.detail_key(kind, str(i)) for kind in ResourceKind for i in range(1, 100)}
    assert list_keys.isdisjoint(detail_keys)


def test_metadata_key_suffix():
    assert CacheKeyBuilder.metadata_key("people_1") == "people_1_metadata"


def test_endpoint_descriptors():
    assert describe_detail(ResourceKind.PEOPLE, "1") == "GET /people/1"
    assert describe_list(ResourceKind.PLANETS) == "GET /planets?page=1&limit=10"
