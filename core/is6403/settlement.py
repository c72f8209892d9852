"""Оценка осадки (упругое решение или эмпирическая зависимость)."""

from core.models import SoilProfile, SoilType

POISSON_RATIO = 0.3
INFLUENCE_FACTOR = 0.82
SETTLEMENT_LIMIT = 25.0  # мм, предельная осадка

# Эмпирическая осадка s = qs / q_ref · s_ref, мм
_EMPIRICAL_CLAY = (50.0, 25.0)
_EMPIRICAL_OTHER = (100.0, 15.0)


def elastic_settlement(qs: float, B: float, Es: float) -> float:
    """Упругая осадка s = qs·B·(1 - μ²)·I / Es, мм.

    Args:
        qs: Допускаемое давление, кПа.
        B: Ширина фундамента, м.
        Es: Модуль деформации, кПа.
    """
    return qs * B * (1.0 - POISSON_RATIO**2) * INFLUENCE_FACTOR / Es * 1000.0


def empirical_settlement(qs: float, soil_type: SoilType) -> float:
    """Эмпирическая осадка, пропорциональная qs, мм."""
    q_ref, s_ref = _EMPIRICAL_CLAY if soil_type is SoilType.CLAY else _EMPIRICAL_OTHER
    return qs / q_ref * s_ref


def settlement(qs: float, B: float, soil: SoilProfile) -> tuple[float, str]:
    """Осадка и метод её оценки.

    Упругий метод применяется, если задан положительный модуль Es,
    иначе — эмпирическая зависимость по типу грунта.

    Returns:
        (s, мм; "elastic" | "empirical")
    """
    if soil.Es is not None and soil.Es > 0:
        return elastic_settlement(qs, B, soil.Es), "elastic"
    return empirical_settlement(qs, soil.type), "empirical"
