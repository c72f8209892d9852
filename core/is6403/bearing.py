"""Несущая способность по IS 6403 (общее уравнение с поправками)."""

from dataclasses import dataclass

from core.is6403.tables import allowable_pressure_spt
from core.models import SoilProfile


@dataclass(frozen=True)
class Capacities:
    term1: float
    term2: float
    term3: float
    qu: float
    qnu: float
    qns: float
    qs: float


def bearing_terms(
    c: float,
    q: float,
    gamma_eff: float,
    B_prime: float,
    N: tuple[float, float, float],
    s: tuple[float, float, float],
    d: tuple[float, float, float],
    i: tuple[float, float, float],
) -> tuple[float, float, float]:
    """Три слагаемых общего уравнения, кПа.

    term1 = c·Nc·sc·dc·ic
    term2 = q·Nq·sq·dq·iq
    term3 = 0.5·γeff·B'·Nγ·sγ·dγ·iγ

    Args:
        c: Сцепление, кПа.
        q: Пригрузка на уровне подошвы, кПа.
        gamma_eff: Удельный вес с учётом W', кН/м³.
        B_prime: Приведённая ширина, м.
        N: (Nc, Nq, Nγ).
        s: (sc, sq, sγ).
        d: (dc, dq, dγ).
        i: (ic, iq, iγ).
    """
    n_c, n_q, n_gamma = N
    s_c, s_q, s_gamma = s
    d_c, d_q, d_gamma = d
    i_c, i_q, i_gamma = i

    term1 = c * n_c * s_c * d_c * i_c
    term2 = q * n_q * s_q * d_q * i_q
    term3 = 0.5 * gamma_eff * B_prime * n_gamma * s_gamma * d_gamma * i_gamma
    return term1, term2, term3


def capacities(terms: tuple[float, float, float], q: float, FOS: float) -> Capacities:
    """Предельное, чистое предельное, чистое допускаемое и допускаемое давления.

    qu = term1 + term2 + term3
    qnu = qu - q
    qns = qnu / FOS
    qs = qns + q

    FOS проверяется вызывающей стороной (core.calculator).
    """
    term1, term2, term3 = terms
    qu = term1 + term2 + term3
    qnu = qu - q
    qns = qnu / FOS
    qs = qns + q
    return Capacities(term1=term1, term2=term2, term3=term3, qu=qu, qnu=qnu, qns=qns, qs=qs)


def spt_check(soil: SoilProfile) -> float | None:
    """Допускаемое давление по SPT или None, если N не задано."""
    if soil.spt_n is None:
        return None
    return allowable_pressure_spt(soil.type, soil.spt_n)


def recommended_pressure(qs: float, qa_spt: float | None) -> tuple[float, str]:
    """Рекомендуемое расчётное давление и определяющий механизм.

    Returns:
        (давление, "shear" | "spt")
    """
    if qa_spt is not None and qa_spt < qs:
        return qa_spt, "spt"
    return qs, "shear"
