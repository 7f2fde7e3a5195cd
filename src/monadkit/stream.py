"""Lazily evaluated, singly linked streams.

A stream is either ``EMPTY`` or a cell holding an eager head and a ``Lazy``
tail. Tails are computed on first access and memoized, so a stream can be
infinite and re-traversal never re-runs a generator or mapping function:

    naturals = LazyStream.from_seed(1, lambda n: n + 1)
    naturals.map(lambda n: n * 2).take_as_list(3)  # [2, 4, 6]

Operations that would need the whole stream (``foreach``, iteration,
``filter`` with no further matches) do not terminate on an infinite stream;
bound it with ``take`` first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from monadkit.errors import EmptyStreamError
from monadkit.lazy import Lazy

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


class LazyStream[A]:
    """A cons cell with a call-by-need tail."""

    __slots__ = ("_head", "_tail")

    def __init__(self, head: A, tail: Callable[[], LazyStream[A]]) -> None:
        self._head = head
        self._tail: Lazy[LazyStream[A]] | None = Lazy(tail)

    # --- Construction ---

    @staticmethod
    def from_seed[T](start: T, generator: Callable[[T], T]) -> LazyStream[T]:
        """Return the potentially infinite stream ``start, g(start), g(g(start)), ...``."""
        return LazyStream(
            start, lambda: LazyStream.from_seed(generator(start), generator)
        )

    @staticmethod
    def of[T](*items: T) -> LazyStream[T]:
        """Build a finite stream from the given items."""
        stream: LazyStream[T] = EMPTY
        for item in reversed(items):
            stream = stream.prepend(item)
        return stream

    # --- Access ---

    @property
    def is_empty(self) -> bool:
        return self._tail is None

    @property
    def head(self) -> A:
        if self._tail is None:
            raise EmptyStreamError(
                "head of empty stream", hint="Check is_empty before reading head."
            )
        return self._head

    @property
    def tail(self) -> LazyStream[A]:
        if self._tail is None:
            raise EmptyStreamError(
                "tail of empty stream", hint="Check is_empty before reading tail."
            )
        return self._tail.force()

    def __iter__(self) -> Iterator[A]:
        current = self
        while not current.is_empty:
            yield current._head
            current = current.tail

    def foreach(self, f: Callable[[A], Any]) -> None:
        for item in self:
            f(item)

    # --- Combinators ---

    def prepend(self, element: A) -> LazyStream[A]:
        return LazyStream(element, lambda: self)

    def concat(self, other: LazyStream[A]) -> LazyStream[A]:
        """Append ``other`` after this stream without forcing any tail."""
        return self._append(lambda: other)

    __add__ = concat

    def _append(self, rest: Callable[[], LazyStream[A]]) -> LazyStream[A]:
        if self.is_empty:
            return rest()
        return LazyStream(self._head, lambda: self.tail._append(rest))

    def map[B](self, f: Callable[[A], B]) -> LazyStream[B]:
        if self.is_empty:
            return EMPTY
        return LazyStream(f(self._head), lambda: self.tail.map(f))

    def flat_map[B](self, f: Callable[[A], LazyStream[B]]) -> LazyStream[B]:
        # Skip runs of empty results iteratively rather than recursing per element.
        current = self
        while not current.is_empty:
            produced = f(current._head)
            if not produced.is_empty:
                source = current
                rest = Lazy(lambda: source.tail.flat_map(f))
                return produced._append(rest.force)
            current = current.tail
        return EMPTY

    def filter(self, predicate: Callable[[A], bool]) -> LazyStream[A]:
        """Scan only as far as the next matching element."""
        current = self
        while not current.is_empty:
            if predicate(current._head):
                source = current
                return LazyStream(
                    source._head, lambda: source.tail.filter(predicate)
                )
            current = current.tail
        return EMPTY

    def take(self, n: int) -> LazyStream[A]:
        """Return a stream of at most the first ``n`` elements."""
        if n < 0:
            raise ValueError(f"take() count must be >= 0, got {n}")
        if n == 0 or self.is_empty:
            return EMPTY
        if n == 1:
            return LazyStream(self._head, lambda: EMPTY)
        return LazyStream(self._head, lambda: self.tail.take(n - 1))

    def take_as_list(self, n: int) -> list[A]:
        return list(self.take(n))

    def __repr__(self) -> str:
        if self.is_empty:
            return "LazyStream()"
        shown: list[str] = []
        current: LazyStream[A] = self
        while not current.is_empty:
            shown.append(repr(current._head))
            tail = current._tail
            if tail is None or not tail.is_forced:
                shown.append("...")
                break
            current = tail.force()
        return f"LazyStream({', '.join(shown)})"


def _empty() -> LazyStream[Any]:
    stream: LazyStream[Any] = object.__new__(LazyStream)
    stream._head = None
    stream._tail = None
    return stream


EMPTY: LazyStream[Any] = _empty()

__all__ = ["EMPTY", "LazyStream"]
