"""
Тесты для Config — настройки из переменных окружения
"""

import logging

import pytest

from src.core.config import LOG_FORMAT, Config, setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("EXTRA_PRINT", "LOG_LEVEL", "VECTORS_PATH"):
        monkeypatch.delenv(key, raising=False)


class TestConfigFromEnv:
    """Config.from_env()"""

    def test_defaults(self):
        config = Config.from_env()
        assert config == Config()
        assert config.EXTRA_PRINT is False
        assert config.LOG_LEVEL == "INFO"
        assert config.VECTORS_PATH is None

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", " on "])
    def test_extra_print_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("EXTRA_PRINT", raw)
        assert Config.from_env().EXTRA_PRINT is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", ""])
    def test_extra_print_falsy(self, monkeypatch, raw):
        monkeypatch.setenv("EXTRA_PRINT", raw)
        assert Config.from_env().EXTRA_PRINT is False

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " debug ")
        assert Config.from_env().LOG_LEVEL == "DEBUG"

    def test_vectors_path(self, monkeypatch):
        monkeypatch.setenv("VECTORS_PATH", "/tmp/vectors.json")
        assert Config.from_env().VECTORS_PATH == "/tmp/vectors.json"

    def test_empty_vectors_path_is_none(self, monkeypatch):
        monkeypatch.setenv("VECTORS_PATH", "")
        assert Config.from_env().VECTORS_PATH is None

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Config().LOG_LEVEL = "DEBUG"


class TestConfigValidate:
    """Config.validate()"""

    def test_valid_levels(self):
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            Config(LOG_LEVEL=level).validate()

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Config(LOG_LEVEL="VERBOSE").validate()


class TestSetupLogging:
    """setup_logging()"""

    def test_configures_root_logger(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        setup_logging("debug")

        assert len(calls) == 1
        assert calls[0]["level"] == logging.DEBUG
        assert calls[0]["format"] == LOG_FORMAT
        assert isinstance(calls[0]["handlers"][0], logging.StreamHandler)

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        setup_logging("nonsense")

        assert calls[0]["level"] == logging.INFO
