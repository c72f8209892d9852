"""Настройка журналирования (loguru)."""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Заменить стандартный обработчик loguru.

    Включает журнал пакета core (по умолчанию он отключён).

    Args:
        level: Уровень вывода в stderr.
        log_file: Путь к файлу журнала (опционально, с ротацией).
    """
    logger.enable("core")
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {message}")
    if log_file is not None:
        logger.add(str(log_file), level="DEBUG", rotation="5 MB", retention=10, backtrace=False, diagnose=False)
