"""Общие вспомогательные функции: эксцентриситет и поправка на УГВ."""

import numpy as np

from core.models import WaterTableZone

MIN_EFFECTIVE_DIMENSION = 0.1  # м, нижняя граница приведённых размеров
ECCENTRICITY_LIMIT = 1.0 / 6.0  # правило ядра сечения
W_PRIME_SUBMERGED = 0.5


# =============================================================================
# Эксцентриситет и приведённые размеры
# =============================================================================


def eccentricities(V: float, Mx: float, My: float) -> tuple[float, float]:
    """Эксцентриситеты ex = |My/V|, ey = |Mx/V|, м.

    При V = 0 эксцентриситеты принимаются равными нулю.
    """
    if V == 0:
        return 0.0, 0.0
    return abs(My / V), abs(Mx / V)


def effective_dimensions(B: float, L: float, ex: float, ey: float) -> tuple[float, float]:
    """Приведённые размеры B' = B - 2ex, L' = L - 2ey (не менее 0.1 м)."""
    B_prime = max(B - 2.0 * ex, MIN_EFFECTIVE_DIMENSION)
    L_prime = max(L - 2.0 * ey, MIN_EFFECTIVE_DIMENSION)
    return B_prime, L_prime


def _relative_eccentricity(e: float, dimension: float) -> float:
    if dimension == 0:
        return np.inf if e > 0 else 0.0
    return e / dimension


def is_high_eccentricity(ex: float, ey: float, B: float, L: float) -> bool:
    """Выход равнодействующей за ядро сечения: ex/B > 1/6 или ey/L > 1/6."""
    return bool(
        _relative_eccentricity(ex, B) > ECCENTRICITY_LIMIT
        or _relative_eccentricity(ey, L) > ECCENTRICITY_LIMIT
    )


# =============================================================================
# Поправка на уровень грунтовых вод (IS 6403)
# =============================================================================


def surcharge_pressure(gamma: float, gamma_sub: float, Df: float, Dw: float | None) -> float:
    """Пригрузка на уровне подошвы q, кПа.

    При УГВ выше подошвы (Dw ≤ Df) грунт ниже УГВ учитывается во взвешенном состоянии:
        q = γ·Dw + γsub·(Df - Dw)
    """
    if Dw is not None and Dw <= Df:
        return gamma * Dw + gamma_sub * (Df - Dw)
    return gamma * Df


def water_table_factor(Df: float, B: float, Dw: float | None) -> float:
    """Поправочный коэффициент W' к третьему слагаемому (собственный вес).

    W' = 0.5                          при Dw ≤ Df
    W' = 1.0                          при Dw ≥ Df + B или без УГВ
    W' = 0.5·(1 + (Dw - Df)/B)        между ними
    """
    if Dw is None:
        return 1.0
    if Dw <= Df:
        return W_PRIME_SUBMERGED
    if Dw >= Df + B:
        return 1.0
    return W_PRIME_SUBMERGED * (1.0 + (Dw - Df) / B)


def water_table_zone(Df: float, B: float, Dw: float | None) -> WaterTableZone:
    """Положение УГВ относительно подошвы (для отчёта)."""
    if Dw is None:
        return "none"
    if Dw <= Df:
        return "surcharge"
    if Dw >= Df + B:
        return "dry"
    return "self_weight"
