"""Logging setup для mstd."""

import logging

from mstd.config import load_config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """
    Настройка логирования пакета mstd.

    Добавляет StreamHandler к логгеру "mstd" (один раз) и выставляет уровень.
    Root logger не трогается: библиотека не должна перенастраивать хост.

    Args:
        level: Уровень логирования (int или имя уровня); None → MSTD_LOG_LEVEL

    Returns:
        Логгер пакета "mstd"
    """
    if level is None:
        level = load_config().log_level

    logger = logging.getLogger("mstd")
    logger.setLevel(level)

    if not any(getattr(h, "_mstd_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mstd_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
