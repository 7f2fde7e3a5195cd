"""Lazy: a call-by-need deferred value.

The wrapped computation runs at most once, on the first ``force()``; the
result is cached and every later access (direct or through ``chain``/``map``)
reads the cache. Construction never evaluates anything.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, cast

from monadkit.errors import CyclicEvaluationError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class Lazy[A]:
    """A memoized thunk.

    Cache population is guarded by a one-time lock so concurrent first access
    still evaluates the computation once. Pass ``thread_safe=False`` to skip
    the lock for strictly single-threaded use.

    If the computation raises, the error propagates from ``force()`` and
    nothing is cached; the next ``force()`` runs the computation again.
    """

    __slots__ = ("_computation", "_evaluating", "_lock", "_value")

    def __init__(
        self, computation: Callable[[], A], *, thread_safe: bool = True
    ) -> None:
        self._computation: Callable[[], A] | None = computation
        self._value: A = _UNSET
        self._evaluating = False
        # Re-entrant so a self-forcing computation is reported, not deadlocked.
        self._lock = threading.RLock() if thread_safe else None

    @classmethod
    def pure(cls, value: A) -> Lazy[A]:
        """Wrap an already computed value."""
        return cls(lambda: value)

    @property
    def is_forced(self) -> bool:
        return self._value is not _UNSET

    @property
    def thread_safe(self) -> bool:
        return self._lock is not None

    def force(self) -> A:
        """Return the value, evaluating the computation on first use only."""
        value = self._value
        if value is not _UNSET:
            return cast("A", value)
        if self._lock is None:
            return self._evaluate()
        with self._lock:
            if self._value is not _UNSET:
                return self._value
            return self._evaluate()

    def _evaluate(self) -> A:
        if self._evaluating:
            raise CyclicEvaluationError(
                "Lazy value was forced during its own evaluation",
                hint="The wrapped computation must not depend on its own result.",
            )
        computation = self._computation
        if computation is None:  # pragma: no cover - cleared only after caching
            return self._value
        self._evaluating = True
        try:
            value = computation()
        finally:
            self._evaluating = False
        self._value = value
        # The closure is no longer needed once the value is cached.
        self._computation = None
        logger.debug("Lazy value evaluated: %s", type(value).__name__)
        return value

    def chain[B](self, f: Callable[[Callable[[], A]], Lazy[B]]) -> Lazy[B]:
        """Pass ``f`` a by-name reference to this value, not the value itself.

        ``f`` receives a zero-argument callable routed through this
        container's cache and decides whether and when to call it. It must
        return a new ``Lazy``.
        """
        return f(self.force)

    flat_map = chain

    def map[B](self, f: Callable[[A], B]) -> Lazy[B]:
        """Return a ``Lazy`` that applies ``f`` once both are forced."""
        return Lazy(lambda: f(self.force()), thread_safe=self.thread_safe)

    def __repr__(self) -> str:
        if self.is_forced:
            return f"Lazy({self._value!r})"
        return "Lazy(<pending>)"


def flatten[A](nested: Lazy[Lazy[A]]) -> Lazy[A]:
    """Collapse ``Lazy[Lazy[A]]`` without forcing either level up front."""
    return Lazy(lambda: nested.force().force(), thread_safe=nested.thread_safe)


__all__ = ["Lazy", "flatten"]
