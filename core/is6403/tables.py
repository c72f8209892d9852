"""Таблицы и коэффициенты IS 6403:1981.

Источники:
- IS 6403:1981 (Code of practice for determination of bearing capacity of shallow foundations)
- IS 1904 / IS 8009 (ориентировочные давления по SPT)
"""

from functools import lru_cache
from typing import assert_never

import numpy as np

from core.models import FoundationShape, SoilType

# --- Константы ---

NC_CLAY = 5.14  # Nc для φ = 0
PHI_EPSILON = 0.001  # °, подставляется вместо φ = 0 в iγ


def _tan_45_half_phi(phi_deg: float) -> float:
    return float(np.tan(np.radians(45.0 + phi_deg / 2.0)))


# --- Коэффициенты несущей способности ---


@lru_cache(maxsize=256)
def bearing_capacity_factors(phi_deg: float) -> tuple[float, float, float]:
    """Коэффициенты несущей способности Nc, Nq, Nγ.

    Nq = e^(π·tanφ) · tan²(45° + φ/2)
    Nc = (Nq - 1) / tanφ
    Nγ = 2·(Nq + 1)·tanφ

    Для φ = 0 общая формула неустойчива, принимаются Nc = 5.14, Nq = 1, Nγ = 0.

    Returns:
        (Nc, Nq, Nγ)
    """
    if phi_deg <= 0:
        return NC_CLAY, 1.0, 0.0

    phi_rad = np.radians(phi_deg)
    tan_phi = np.tan(phi_rad)

    n_q = np.exp(np.pi * tan_phi) * np.tan(np.pi / 4.0 + phi_rad / 2.0) ** 2
    n_c = (n_q - 1.0) / tan_phi
    n_gamma = 2.0 * (n_q + 1.0) * tan_phi

    return float(n_c), float(n_q), float(n_gamma)


# --- Коэффициенты формы ---


def shape_factors(
    shape: FoundationShape, B_prime: float, L_prime: float, phi_deg: float
) -> tuple[float, float, float]:
    """Коэффициенты формы sc, sq, sγ.

    Квадрат и прямоугольник — по отношению B'/L'; для квадрата sγ = 0.8.
    Круг — постоянные значения 1.3, 1.2, 0.6.

    Returns:
        (sc, sq, sγ)
    """
    ratio = B_prime / L_prime

    if shape is FoundationShape.STRIP:
        return 1.0, 1.0, 1.0
    if shape is FoundationShape.SQUARE:
        if phi_deg > 0:
            s_c = 1.0 + 0.2 * ratio
            s_q = 1.0 + 0.2 * ratio * _tan_45_half_phi(phi_deg)
        else:
            s_c, s_q = 1.3, 1.0
        return s_c, s_q, 0.8
    if shape is FoundationShape.RECTANGULAR:
        s_c = 1.0 + 0.2 * ratio
        s_q = 1.0 + 0.2 * ratio * _tan_45_half_phi(phi_deg)
        s_gamma = 1.0 - 0.4 * ratio
        return s_c, s_q, s_gamma
    if shape is FoundationShape.CIRCULAR:
        return 1.3, 1.2, 0.6
    assert_never(shape)


# --- Коэффициенты глубины ---


def _depth_ratio(Df: float, B: float) -> float:
    # B = 0: Df/B → +∞ (k = π/2); при Df ≤ 0 принимается k = 0
    if B == 0:
        return np.inf if Df > 0 else 0.0
    return Df / B


def depth_factors(Df: float, B: float, phi_deg: float) -> tuple[float, float, float]:
    """Коэффициенты глубины dc, dq, dγ.

    k = Df/B                при Df/B ≤ 1
    k = arctan(Df/B)        при Df/B > 1
    dc = 1 + 0.2·k·tan(45° + φ/2)
    dq = 1 + 0.1·k·tan(45° + φ/2)
    dγ = 1.0

    Returns:
        (dc, dq, dγ)
    """
    ratio = _depth_ratio(Df, B)
    k = ratio if ratio <= 1.0 else float(np.arctan(ratio))

    tan_term = _tan_45_half_phi(phi_deg)
    d_c = 1.0 + 0.2 * k * tan_term
    d_q = 1.0 + 0.1 * k * tan_term

    return d_c, d_q, 1.0


# --- Коэффициенты наклона нагрузки ---


def load_inclination(V: float, H: float) -> float:
    """Угол наклона равнодействующей α = arctan(H/V), °. При V ≤ 0 — 0."""
    if V > 0:
        return float(np.degrees(np.arctan(H / V)))
    return 0.0


def inclination_factors(alpha_deg: float, phi_deg: float) -> tuple[float, float, float]:
    """Коэффициенты наклона ic, iq, iγ.

    ic = iq = (1 - α/90)²
    iγ = (1 - α/φ)²

    При φ = 0 в знаменатель iγ подставляется φ = 0.001° (численная защита,
    а не физический вывод).

    Returns:
        (ic, iq, iγ)
    """
    phi = PHI_EPSILON if phi_deg == 0 else phi_deg
    i_c = (1.0 - alpha_deg / 90.0) ** 2
    i_gamma = (1.0 - alpha_deg / phi) ** 2
    return i_c, i_c, i_gamma


# --- Допускаемое давление по SPT ---

# (верхняя граница N (не включая), p0, наклон, N0): qa = p0 + наклон·(N - N0)
_SPT_TABLE: dict[SoilType, tuple[tuple[float, float, float, float], ...]] = {
    SoilType.SAND: (
        (10.0, 50.0, 5.0, 5.0),
        (30.0, 100.0, 10.0, 10.0),
        (np.inf, 300.0, 0.0, 0.0),
    ),
    SoilType.CLAY: (
        (4.0, 50.0, 0.0, 0.0),
        (8.0, 80.0, 0.0, 0.0),
        (15.0, 100.0, 0.0, 0.0),
        (np.inf, 200.0, 0.0, 0.0),
    ),
    SoilType.C_PHI: (
        (np.inf, 100.0, 10.0, 0.0),
    ),
    SoilType.ROCK: (
        (np.inf, 500.0, 0.0, 0.0),
    ),
}

SPT_DEFAULT = 150.0  # кПа, для прочих грунтов


def allowable_pressure_spt(soil_type: SoilType, N: float) -> float:
    """Ориентировочное допускаемое давление по числу ударов SPT, кПа.

    Кусочно-линейная таблица для каждого типа грунта; для типов вне таблицы —
    постоянное значение 150 кПа.
    """
    rows = _SPT_TABLE.get(soil_type)
    if rows is None:
        return SPT_DEFAULT

    for upper, p0, slope, n0 in rows:
        if N < upper:
            return float(p0 + slope * (N - n0))

    return float(rows[-1][1])
