from __future__ import annotations

from typing import Protocol

from prometheus_client import CollectorRegistry, Counter

PROMETHEUS_REGISTRY = CollectorRegistry()


def get_prometheus_registry() -> CollectorRegistry:
    return PROMETHEUS_REGISTRY


swapi_cache_hit_metric = Counter(
    "swapi_cache_hit_total",
    "Total cache hits",
    ["resource", "cache_type"],
    registry=get_prometheus_registry(),
)

swapi_cache_miss_metric = Counter(
    "swapi_cache_miss_total",
    "Total cache misses",
    ["resource", "cache_type"],
    registry=get_prometheus_registry(),
)

swapi_cache_write_metric = Counter(
    "swapi_cache_write_total",
    "Total cache writes",
    ["resource", "cache_type"],
    registry=get_prometheus_registry(),
)

swapi_cache_error_metric = Counter(
    "swapi_cache_error_total",
    "Total cache errors",
    ["operation", "cache_type"],
    registry=get_prometheus_registry(),
)


class CacheMetricsProtocol(Protocol):
    def hit(self, *, resource: str) -> None: ...

    def miss(self, *, resource: str) -> None: ...

    def write(self, *, resource: str) -> None: ...

    def error(self, *, operation: str) -> None: ...


class NoopCacheMetrics:
    def hit(self, *, resource: str) -> None:
        return None

    def miss(self, *, resource: str) -> None:
        return None

    def write(self, *, resource: str) -> None:
        return None

    def error(self, *, operation: str) -> None:
        return None


class PrometheusCacheMetrics:
    def __init__(self, cache_type: str = "default") -> None:
        self.cache_type = cache_type

    def hit(self, *, resource: str) -> None:
        swapi_cache_hit_metric.labels(resource=resource, cache_type=self.cache_type).inc()

    def miss(self, *, resource: str) -> None:
        swapi_cache_miss_metric.labels(resource=resource, cache_type=self.cache_type).inc()

    def write(self, *, resource: str) -> None:
        swapi_cache_write_metric.labels(resource=resource, cache_type=self.cache_type).inc()

    def error(self, *, operation: str) -> None:
        swapi_cache_error_metric.labels(operation=operation, cache_type=self.cache_type).inc()
