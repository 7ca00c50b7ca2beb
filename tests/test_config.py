"""
Tests for environment configuration.
"""

import tempfile
from pathlib import Path

import pytest

from subseek import config as config_module
from subseek.config import Config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
    for name in ("SUBSEEK_SUBTITLES_CODEPAGE", "SUBSEEK_TEMP_DIR", "SUBSEEK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Config.from_env()
    assert config.subtitles_codepage is None
    assert config.temp_dir == Path(tempfile.gettempdir())
    assert config.log_level == "WARNING"
    assert not config.has_forced_codepage()


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SUBSEEK_SUBTITLES_CODEPAGE", "Windows-1251")
    monkeypatch.setenv("SUBSEEK_TEMP_DIR", str(tmp_path))
    monkeypatch.setenv("SUBSEEK_LOG_LEVEL", "debug")
    config = Config.from_env()
    assert config.subtitles_codepage == "Windows-1251"
    assert config.temp_dir == tmp_path
    assert config.log_level == "DEBUG"
    assert config.has_forced_codepage()


def test_blank_codepage_is_not_forced(monkeypatch):
    monkeypatch.setenv("SUBSEEK_SUBTITLES_CODEPAGE", "")
    assert not Config.from_env().has_forced_codepage()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("SUBSEEK_LOG_LEVEL", "loud")
    with pytest.raises(ValueError, match="SUBSEEK_LOG_LEVEL"):
        Config.from_env()
