"""Configuration boundary tests: defaults, validation and env resolution."""

from __future__ import annotations

import logging

import pytest

from monadkit.config import Config, load_env
from monadkit.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    cfg = Config()
    assert cfg.thread_safe is True
    assert cfg.magic_delay_s == 1.0
    assert cfg.stream_preview == 10
    assert cfg.log_level == "WARNING"
    assert cfg.logging_level == logging.WARNING


def test_config_is_frozen() -> None:
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.stream_preview = 3  # type: ignore[misc]


def test_log_level_is_normalized() -> None:
    assert Config(log_level=" debug ").log_level == "DEBUG"


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"magic_delay_s": -1.0}, "magic_delay_s"),
        ({"stream_preview": 0}, "stream_preview"),
        ({"log_level": "LOUD"}, "log_level"),
    ],
)
def test_invalid_values_raise_with_hint(kwargs: dict[str, object], message: str) -> None:
    with pytest.raises(ConfigurationError, match=message) as exc:
        Config(**kwargs)  # type: ignore[arg-type]
    assert exc.value.hint is not None


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_THREAD_SAFE", "false")
    monkeypatch.setenv("MONADKIT_MAGIC_DELAY_S", "0.25")
    monkeypatch.setenv("MONADKIT_STREAM_PREVIEW", "3")
    monkeypatch.setenv("MONADKIT_LOG_LEVEL", "info")
    monkeypatch.setenv("MONADKIT_UNKNOWN_FIELD", "ignored")

    cfg = Config.from_env()

    assert cfg == Config(
        thread_safe=False, magic_delay_s=0.25, stream_preview=3, log_level="INFO"
    )


def test_overrides_take_precedence_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_STREAM_PREVIEW", "3")

    cfg = Config.from_env({"stream_preview": 7})

    assert cfg.stream_preview == 7


def test_from_env_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_STREAM_PREVIEW", "not-a-number")

    with pytest.raises(ConfigurationError, match="stream_preview") as exc:
        Config.from_env()
    assert exc.value.hint == "Check the MONADKIT_STREAM_PREVIEW environment variable."


def test_from_env_loads_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    monkeypatch.setattr(
        "monadkit.config.load_dotenv", lambda *_a, **_k: calls.append(1) or False
    )

    Config.from_env()

    assert calls == [1]


def test_load_env_strips_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_LOG_LEVEL", "error")
    monkeypatch.setenv("OTHER_LOG_LEVEL", "debug")

    assert load_env() == {"log_level": "error"}
