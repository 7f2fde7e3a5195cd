"""Attempt: an error-capturing Result monad.

A computation is run once and its outcome is classified as either
``Success(value)`` or ``Failure(error)``. Exceptions raised while constructing
or chaining become data instead of propagating, so a pipeline of dependent
steps can be written without try/except at every stage:

    result = attempt(lambda: int(raw)).chain(lambda n: attempt(lambda: 100 // n))

The union is closed: every ``Attempt`` is exactly one of the two variants,
which makes ``match`` statements over it exhaustive.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _capture(exc: Exception) -> Failure:
    logger.debug("Captured %s in attempt: %s", type(exc).__name__, exc)
    return Failure(exc)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A computation that completed normally."""

    value: T

    def chain[U](self, f: Callable[[T], Attempt[U]]) -> Attempt[U]:
        """Run the dependent step ``f`` on the held value.

        An exception raised by ``f`` is returned as a ``Failure``.
        """
        try:
            return f(self.value)
        except Exception as exc:
            return _capture(exc)

    flat_map = chain

    def map[U](self, f: Callable[[T], U]) -> Attempt[U]:
        """Apply a plain function to the held value."""
        return self.chain(lambda x: unit(f(x)))

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: Any) -> T:
        del default
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """A computation that raised; holds the captured exception."""

    error: Exception

    def chain(self, f: Callable[[Any], Attempt[Any]]) -> Failure:
        """Short-circuit: return this failure without calling ``f``."""
        del f
        return self

    flat_map = chain

    def map(self, f: Callable[[Any], Any]) -> Failure:
        del f
        return self

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self) -> NoReturn:
        """Re-raise the captured error."""
        raise self.error

    def get_or_else[D](self, default: D) -> D:
        return default


Attempt = Success[T] | Failure


def attempt[A](computation: Callable[[], A]) -> Attempt[A]:
    """Evaluate ``computation`` once and classify the outcome.

    Never raises for an ``Exception``; ``BaseException`` subclasses such as
    ``KeyboardInterrupt`` still propagate.
    """
    try:
        value = computation()
    except Exception as exc:
        return _capture(exc)
    return Success(value)


def unit[A](value: A) -> Attempt[A]:
    """Wrap an already computed value (the monadic ``unit``)."""
    return Success(value)


def flatten[A](nested: Attempt[Attempt[A]]) -> Attempt[A]:
    """Collapse one level of nesting: ``nested.chain(identity)``."""
    return nested.chain(lambda inner: inner)


__all__ = ["Attempt", "Failure", "Success", "attempt", "flatten", "unit"]
