"""monadkit: small monadic containers with call-by-need semantics.

Public API:
    - attempt(), unit(): build an Attempt (Success | Failure)
    - Lazy: memoized deferred value
    - LazyStream: lazily evaluated, possibly infinite stream
    - Config: settings for the runnable demos (``python -m monadkit``)
"""

from __future__ import annotations

import logging

from monadkit.attempt import Attempt, Failure, Success, attempt, unit
from monadkit.config import Config
from monadkit.errors import (
    ConfigurationError,
    CyclicEvaluationError,
    EmptyStreamError,
    MonadKitError,
)
from monadkit.lazy import Lazy
from monadkit.stream import EMPTY, LazyStream

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("monadkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("monadkit").addHandler(logging.NullHandler())

__all__ = [
    "EMPTY",
    "Attempt",
    "Config",
    "ConfigurationError",
    "CyclicEvaluationError",
    "EmptyStreamError",
    "Failure",
    "Lazy",
    "LazyStream",
    "MonadKitError",
    "Success",
    "attempt",
    "unit",
]
