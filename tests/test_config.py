import pytest
from pydantic import ValidationError

from fitplan.config import Config, _bool


def test_bool_env_parsing(monkeypatch) -> None:
    monkeypatch.setenv("FF_SAMPLE", "Yes")
    assert _bool("FF_SAMPLE", False) is True
    monkeypatch.setenv("FF_SAMPLE", "0")
    assert _bool("FF_SAMPLE", True) is False
    monkeypatch.delenv("FF_SAMPLE")
    assert _bool("FF_SAMPLE", True) is True


def test_log_level_normalized() -> None:
    assert Config(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_log_level_rejects_unknown() -> None:
    with pytest.raises(ValidationError):
        Config(LOG_LEVEL="chatty")


def test_cors_origins_split() -> None:
    cfg = Config(CORS_ORIGINS="https://a.example, https://b.example,")
    assert cfg.cors_origins == ["https://a.example", "https://b.example"]


def test_feature_flag_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FF_MEAL_OPTIONS", "false")
    assert Config().FF_MEAL_OPTIONS is False
