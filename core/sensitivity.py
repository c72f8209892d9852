"""Анализ чувствительности: повторный расчёт при варьировании одного параметра."""

from collections.abc import Iterable

import numpy as np
import pandas as pd
from loguru import logger
from pydantic import BaseModel, Field

from core.calculator import evaluate_input
from core.models import DesignInput, Status

_SECTIONS = ("soil", "foundation", "load", "environment")

# Ширины по умолчанию: 1.0 … 6.0 м с шагом 0.5 м
DEFAULT_WIDTHS = tuple(float(b) for b in np.linspace(1.0, 6.0, 11))


class SweepPoint(BaseModel):
    """Точка кривой чувствительности."""

    value: float = Field(description="Значение варьируемого параметра")
    recommended_sbc: float = Field(description="Рекомендуемое давление, кПа")
    settlement: float = Field(description="Осадка, мм")
    status: Status


def with_parameter(data: DesignInput, parameter: str, value: float) -> DesignInput:
    """Копия исходных данных с заменой одного параметра.

    Args:
        data: Исходные данные.
        parameter: Путь вида "раздел.поле", например "foundation.B".
        value: Новое значение.
    """
    section, _, field = parameter.partition(".")
    if section not in _SECTIONS or not field:
        raise ValueError(f"Неизвестный параметр: {parameter!r}")

    part = getattr(data, section)
    if field not in type(part).model_fields:
        raise ValueError(f"Неизвестный параметр: {parameter!r}")

    # Через model_validate, чтобы сработало приведение типов
    updated = type(part).model_validate(part.model_dump() | {field: value})
    return data.model_copy(update={section: updated})


def sweep(data: DesignInput, parameter: str, values: Iterable[float]) -> list[SweepPoint]:
    """Расчёт для каждого значения параметра (каждая точка — с нуля)."""
    points = []
    for value in values:
        res = evaluate_input(with_parameter(data, parameter, value))
        points.append(
            SweepPoint(
                value=float(value),
                recommended_sbc=res.recommended_sbc,
                settlement=res.settlement,
                status=res.status,
            )
        )
    logger.debug("Чувствительность по {}: {} точек", parameter, len(points))
    return points


def width_sweep(data: DesignInput, widths: Iterable[float] | None = None) -> list[SweepPoint]:
    """Рекомендуемое давление и осадка в зависимости от ширины B."""
    return sweep(data, "foundation.B", DEFAULT_WIDTHS if widths is None else widths)


def sweep_table(points: list[SweepPoint], parameter: str = "value") -> pd.DataFrame:
    """Таблица результатов анализа чувствительности."""
    return pd.DataFrame(
        [
            {
                parameter: p.value,
                "SBC, кПа": round(p.recommended_sbc, 2),
                "s, мм": round(p.settlement, 2),
                "Состояние": p.status.value,
            }
            for p in points
        ]
    )
