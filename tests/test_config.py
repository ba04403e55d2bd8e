import logging

import pytest

from unit_ext import config
from unit_ext.config import Settings, parse_log_level
from unit_ext.result import Err, Ok


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "load_dotenv", lambda: False)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (" warning ", logging.WARNING)],
)
def test_parse_log_level(name: str, expected: int) -> None:
    assert parse_log_level(name) == Ok(expected)


def test_parse_log_level_unknown() -> None:
    match parse_log_level("loud"):
        case Err(e):
            assert "loud" in str(e)
        case Ok(level):
            pytest.fail(f"Expected Err, got Ok({level})")


def test_from_env_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UNIT_EXT_LOG_LEVEL", raising=False)
    assert Settings.from_env() == Ok(Settings(log_level=logging.WARNING))


def test_from_env_reads_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNIT_EXT_LOG_LEVEL", "debug")
    assert Settings.from_env() == Ok(Settings(log_level=logging.DEBUG))


def test_from_env_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNIT_EXT_LOG_LEVEL", "chatty")
    result = Settings.from_env()
    assert isinstance(result, Err)
    assert isinstance(result.error, ValueError)
