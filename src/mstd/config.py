"""
Config — константы и runtime-конфигурация mstd

Константы задаются на уровне модуля (Final), runtime-параметры читаются из
environment (с поддержкой .env из рабочего каталога через python-dotenv).

Environment:
    MSTD_LOG_LEVEL: уровень логирования (default: WARNING)
    MSTD_ANNOUNCE_LOADS: печатать ли подтверждение загрузки модулей (default: true)
"""

import os
from typing import Dict, Final

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, field_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Фиксированное число итераций Newton's method для sqrt()
# Это контракт, а не порог сходимости: early-exit отсутствует
SQRT_ITERATIONS: Final[int] = 10

# Подтверждения загрузки модулей (через print collaborator)
LOAD_MESSAGES: Final[dict[str, str]] = {
    "math": "Math library loaded successfully",
    "string": "String library loaded successfully",
    "array": "Array library loaded successfully",
    "core": "Core library loaded successfully",
}

ENV_LOG_LEVEL: Final[str] = "MSTD_LOG_LEVEL"
ENV_ANNOUNCE_LOADS: Final[str] = "MSTD_ANNOUNCE_LOADS"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
)


# =============================================================================
# LIBRARY CONFIG
# =============================================================================


class LibraryConfig(BaseModel):
    """
    Runtime-конфигурация библиотеки.

    Immutable модель (frozen=True): изменение конфигурации = новый экземпляр.
    """

    log_level: str = Field(default="WARNING", description="Уровень логирования")
    announce_loads: bool = Field(
        default=True, description="Печатать подтверждение загрузки модулей"
    )

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Проверка, что уровень логирования известен модулю logging."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v!r}")
        return level


def _read_environment() -> Dict[str, str]:
    """
    Переменные из .env текущего рабочего каталога, перекрытые os.environ.

    .env ищется от cwd хоста (usecwd=True), а не от установленного пакета.
    os.environ не модифицируется.
    """
    dotenv_path = find_dotenv(usecwd=True)
    file_values = dotenv_values(dotenv_path) if dotenv_path else {}

    values = {key: value for key, value in file_values.items() if value is not None}
    values.update(os.environ)
    return values


def load_config() -> LibraryConfig:
    """
    Загрузка конфигурации из environment (и .env, если он есть).

    Returns:
        LibraryConfig с значениями из environment или defaults
    """
    env = _read_environment()

    log_level = env.get(ENV_LOG_LEVEL, "WARNING")
    announce_raw = env.get(ENV_ANNOUNCE_LOADS, "true")

    return LibraryConfig(
        log_level=log_level,
        announce_loads=announce_raw.strip().lower() in _TRUE_VALUES,
    )
