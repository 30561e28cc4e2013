"""
Config — настройки прогона из переменных окружения

Загружает .env (python-dotenv), затем читает:
- EXTRA_PRINT: вывод промежуточных значений и времени вызовов (не влияет на результат)
- LOG_LEVEL: уровень логирования (default: INFO)
- VECTORS_PATH: путь к каталогу векторов (default: contracts/vectors/magic_numbers.json)
"""

import logging
import os
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Config:
    """Настройки прогона, загруженные из окружения.

    Создаётся через Config.from_env(); значения по умолчанию безопасны
    для запуска без .env файла.
    """

    EXTRA_PRINT: bool = False
    LOG_LEVEL: str = "INFO"
    VECTORS_PATH: str | None = None

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            EXTRA_PRINT=_env_flag("EXTRA_PRINT"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            VECTORS_PATH=os.getenv("VECTORS_PATH") or None,
        )

    def validate(self) -> None:
        if self.LOG_LEVEL not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {_LOG_LEVELS}, got {self.LOG_LEVEL!r}")


def setup_logging(level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
