"""Exception hierarchy for monadkit."""

from __future__ import annotations


class MonadKitError(Exception):
    """Base exception for all monadkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(MonadKitError):
    """Configuration validation or resolution failed."""


class EmptyStreamError(MonadKitError):
    """An element was requested from an empty stream."""


class CyclicEvaluationError(MonadKitError):
    """A deferred computation forced its own value while being evaluated."""
