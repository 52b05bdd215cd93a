from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

EventHook = Callable[[str], None]
DegradedHook = Callable[[str, Exception], None]


@dataclass(frozen=True)
class CacheHooks:
    """Optional observers for cache traffic.

    Each hook receives an endpoint descriptor such as ``"GET /people/1"``.
    ``on_degraded`` additionally receives the internal error that turned a
    cache read or write into a no-op. Hooks run synchronously; anything they
    raise is logged and dropped.
    """

    on_hit: EventHook | None = None
    on_miss: EventHook | None = None
    on_degraded: DegradedHook | None = None

    def hit(self, endpoint: str) -> None:
        self._call(self.on_hit, endpoint)

    def miss(self, endpoint: str) -> None:
        self._call(self.on_miss, endpoint)

    def degraded(self, endpoint: str, error: Exception) -> None:
        self._call(self.on_degraded, endpoint, error)

    @staticmethod
    def _call(hook: Callable[..., None] | None, *args: object) -> None:
        if hook is None:
            return
        try:
            hook(*args)
        except Exception:
            logger.exception("cache hook failed", extra={"hook": getattr(hook, "__name__", repr(hook))})
