"""Runnable walkthroughs of the Attempt, Lazy and LazyStream containers.

Each demo takes a ``Config`` and prints to stdout; none of them raise.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import TYPE_CHECKING

from monadkit.attempt import Attempt, Failure, Success, attempt, unit
from monadkit.lazy import Lazy
from monadkit.stream import LazyStream

if TYPE_CHECKING:
    from collections.abc import Callable

    from monadkit.config import Config

logger = logging.getLogger(__name__)


# --- Presentation ---


def print_section(title: str) -> None:
    """Print a named section heading."""
    print(f"\n{title}")
    print("-" * len(title))


def print_kv_rows(rows: list[tuple[str, object]]) -> None:
    """Print compact key/value rows using a uniform bullet style."""
    for key, value in rows:
        lines = str(value).splitlines() or [""]
        print(f"- {key}: {lines[0]}")
        for cont in lines[1:]:
            print(f"  {' ' * len(key)}  {cont}")


# --- Demos ---


def demo_attempt(config: Config) -> None:
    """Capture an exception as data and short-circuit on it."""
    del config
    print_section("Attempt: errors as values")

    def explode() -> int:
        raise RuntimeError("My own monad, yes!")

    failed = attempt(explode)
    calls: list[int] = []

    def step(x: int) -> Attempt[int]:
        calls.append(x)
        return attempt(lambda: x + 1)

    doubled = Success(5).chain(lambda x: attempt(lambda: x * 2))
    print_kv_rows(
        [
            ("attempt(raise)", failed),
            ("failure.chain(step)", failed.chain(step)),
            ("step invoked", bool(calls)),
            ("Success(5).chain(x * 2)", doubled),
            ("Success(5).map(1 // 0)", Success(5).map(lambda x: x // 0)),
        ]
    )


def demo_laws(config: Config) -> None:
    """Check the three monad laws on a few sample values."""
    del config
    print_section("Attempt: monad laws")

    def f(x: int) -> Attempt[int]:
        return attempt(lambda: 10 // x)

    def g(x: int) -> Attempt[int]:
        return unit(x + 1)

    samples: list[Attempt[int]] = [Success(0), Success(5), Failure(ValueError("x"))]
    left = all(unit(v).chain(f) == f(v) for v in (1, 2, 5))
    right = all(r.chain(unit) == r for r in samples)
    assoc = all(
        _same_outcome(r.chain(f).chain(g), r.chain(lambda x: f(x).chain(g)))
        for r in samples
    )
    print_kv_rows(
        [
            ("left identity", "holds" if left else "VIOLATED"),
            ("right identity", "holds" if right else "VIOLATED"),
            ("associativity", "holds" if assoc else "VIOLATED"),
        ]
    )


def _same_outcome(a: Attempt[int], b: Attempt[int]) -> bool:
    match a, b:
        case Success(x), Success(y):
            return x == y
        case Failure(e1), Failure(e2):
            return type(e1) is type(e2) and e1.args == e2.args
        case _:
            return False


def demo_lazy(config: Config) -> None:
    """Show that a Lazy computation runs once, at first force."""
    print_section("Lazy: call by need")

    def expensive() -> int:
        print("  Today I don't feel like doing anything")
        return 42

    lazy_instance = Lazy(expensive, thread_safe=config.thread_safe)
    first = lazy_instance.chain(lambda x: Lazy(lambda: 10 * x()))
    second = lazy_instance.chain(lambda x: Lazy(lambda: 10 * x()))
    print_kv_rows([("after construction", lazy_instance)])
    print_kv_rows([("first.force()", first.force())])
    print_kv_rows([("second.force()", second.force())])
    print_kv_rows([("after forcing", lazy_instance)])


def demo_call_by_need(config: Config) -> None:
    """Evaluate a by-name argument at most once and skip unused conditions."""
    print_section("Lazy: by-name arguments")

    def retrieve_magic_value() -> int:
        print("  waiting")
        time.sleep(config.magic_delay_s)
        return 42

    def by_name_method(n: Callable[[], int]) -> int:
        t = Lazy(n, thread_safe=config.thread_safe)
        return t.force() + t.force() + t.force() + 1

    print_kv_rows([("by_name_method(magic)", by_name_method(retrieve_magic_value))])

    def side_effect_condition() -> bool:
        print("  Boo")
        return True

    lazy_condition = Lazy(side_effect_condition, thread_safe=config.thread_safe)
    simple_condition = False
    verdict = "yes" if simple_condition and lazy_condition.force() else "no"
    print_kv_rows(
        [("simple and lazy", verdict), ("condition evaluated", lazy_condition.is_forced)]
    )


def demo_stream(config: Config) -> None:
    """Work with an infinite stream of naturals."""
    print_section("LazyStream: infinite sequences")
    n = config.stream_preview
    naturals = LazyStream.from_seed(1, lambda x: x + 1)
    print_kv_rows(
        [
            (f"first {n} naturals", naturals.take_as_list(n)),
            (f"first {n} evens", naturals.map(lambda x: x * 2).take_as_list(n)),
            (
                "pairs",
                naturals.flat_map(lambda x: LazyStream.of(x, x + 1)).take_as_list(n),
            ),
            (
                "20 < x < 30",
                naturals.filter(lambda x: x < 30)
                .filter(lambda x: x > 20)
                .take_as_list(5),
            ),
            ("forced so far", naturals),
        ]
    )


@dataclass(frozen=True)
class Demo:
    """A named, runnable demo."""

    name: str
    description: str
    run: Callable[[Config], None]


DEMOS: dict[str, Demo] = {
    d.name: d
    for d in (
        Demo("attempt", "errors captured as Success/Failure values", demo_attempt),
        Demo("laws", "left/right identity and associativity", demo_laws),
        Demo("lazy", "memoized deferred values", demo_lazy),
        Demo("call-by-need", "by-name arguments evaluated once", demo_call_by_need),
        Demo("stream", "lazily evaluated infinite streams", demo_stream),
    )
}


def run_demos(names: list[str], config: Config) -> None:
    """Run the named demos in order."""
    for name in names:
        logger.debug("Running demo %s", name)
        DEMOS[name].run(config)


__all__ = ["DEMOS", "Demo", "run_demos"]
