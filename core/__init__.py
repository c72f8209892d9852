"""Ядро расчёта несущей способности мелкого фундамента (IS 6403).

Модули:
- models: Типы данных (SoilProfile, FoundationGeometry, LoadState, Results, ...)
- helpers: Эксцентриситет и поправка на УГВ
- is6403: Коэффициенты, несущая способность, осадка
- calculator: Организатор алгоритма расчёта
- sensitivity: Анализ чувствительности
- config: Исходные данные в формате TOML

Использование:
    from core.models import SoilProfile, FoundationGeometry, LoadState
    from core.calculator import evaluate
"""

from loguru import logger


from . import helpers, is6403
from .calculator import evaluate, evaluate_input
from .errors import InvalidConfigurationError
from .models import (
    DesignInput,
    EnvironmentalInput,
    FoundationGeometry,
    FoundationShape,
    LoadState,
    Results,
    SoilProfile,
    SoilType,
    Status,
)

__all__ = [
    "helpers",
    "is6403",
    "evaluate",
    "evaluate_input",
    "InvalidConfigurationError",
    "SoilType",
    "FoundationShape",
    "Status",
    "SoilProfile",
    "FoundationGeometry",
    "LoadState",
    "EnvironmentalInput",
    "DesignInput",
    "Results",
]

# Журнал ядра выключен, пока приложение не вызовет configure_logging
logger.disable("core")
