"""Калькулятор несущей способности мелкого фундамента."""

import math

from loguru import logger

from core import is6403
from core.errors import InvalidConfigurationError
from core.helpers import (
    effective_dimensions,
    eccentricities,
    is_high_eccentricity,
    surcharge_pressure,
    water_table_factor,
    water_table_zone,
)
from core.models import (
    DesignInput,
    FoundationGeometry,
    LoadState,
    Results,
    SoilProfile,
    Status,
)


def classify_status(settlement: float, eccentricity_check: bool) -> Status:
    """Итоговое состояние: осадка > 25 мм важнее эксцентриситета."""
    if settlement > is6403.SETTLEMENT_LIMIT:
        return Status.SETTLEMENT_GOVERNING
    if eccentricity_check:
        return Status.HIGH_ECCENTRICITY
    return Status.SAFE


def evaluate(
    soil: SoilProfile,
    foundation: FoundationGeometry,
    load: LoadState,
    water_table_depth: float | None,
    safety_factor: float,
) -> Results:
    """Основной пайплайн расчёта.

    Args:
        soil: Грунт под подошвой.
        foundation: Геометрия фундамента.
        load: Нагрузки.
        water_table_depth: Глубина УГВ от поверхности, м (None — без поправки).
        safety_factor: Коэффициент запаса FOS (> 0).

    Returns:
        Results со всеми промежуточными и итоговыми величинами.

    Raises:
        InvalidConfigurationError: FOS ≤ 0.
    """
    if not (math.isfinite(safety_factor) and safety_factor > 0):
        logger.warning("Недопустимый коэффициент запаса FOS = {}", safety_factor)
        raise InvalidConfigurationError(f"Коэффициент запаса должен быть > 0, получено {safety_factor}")

    B, L, Df = foundation.B, foundation.L_design, foundation.Df
    phi = soil.phi
    Dw = water_table_depth

    # 1. Эксцентриситет и приведённые размеры
    ex, ey = eccentricities(load.V, load.Mx, load.My)
    B_prime, L_prime = effective_dimensions(B, L, ex, ey)
    eccentricity_check = is_high_eccentricity(ex, ey, B, L)

    # 2. Поправка на УГВ
    q = surcharge_pressure(soil.gamma, soil.gamma_sub, Df, Dw)
    W_prime = water_table_factor(Df, B, Dw)
    gamma_eff = soil.gamma * W_prime

    logger.debug(
        "ex={:.3f}, ey={:.3f}, B'={:.3f}, L'={:.3f}, q={:.2f}, W'={:.3f}",
        ex, ey, B_prime, L_prime, q, W_prime,
    )

    # 3. Коэффициенты несущей способности
    N = is6403.bearing_capacity_factors(phi)

    # 4. Коэффициенты формы, глубины, наклона
    s = is6403.shape_factors(foundation.shape, B_prime, L_prime, phi)
    d = is6403.depth_factors(Df, B, phi)
    alpha = is6403.load_inclination(load.V, load.H)
    i = is6403.inclination_factors(alpha, phi)

    # 5–6. Слагаемые и давления
    terms = is6403.bearing_terms(soil.c, q, gamma_eff, B_prime, N, s, d, i)
    cap = is6403.capacities(terms, q, safety_factor)

    qa_spt = is6403.spt_check(soil)
    recommended_sbc, governing = is6403.recommended_pressure(cap.qs, qa_spt)

    # 7. Осадка
    s_mm, method = is6403.settlement(cap.qs, B, soil)

    # 8. Состояние
    status = classify_status(s_mm, eccentricity_check)

    logger.debug(
        "qu={:.2f}, qs={:.2f}, qa_spt={}, s={:.2f} мм ({}), {}",
        cap.qu, cap.qs, qa_spt, s_mm, method, status.value,
    )

    return Results(
        soil_type=soil.type,
        cohesion=soil.c,
        friction_angle=phi,
        unit_weight=soil.gamma,
        foundation_shape=foundation.shape,
        B=B,
        L=L,
        Df=Df,
        FOS=safety_factor,
        ex=ex,
        ey=ey,
        B_prime=B_prime,
        L_prime=L_prime,
        eccentricity_check=eccentricity_check,
        alpha=alpha,
        q_surcharge=q,
        W_prime=W_prime,
        gamma_eff=gamma_eff,
        water_table_zone=water_table_zone(Df, B, Dw),
        Nc=N[0],
        Nq=N[1],
        N_gamma=N[2],
        sc=s[0],
        sq=s[1],
        s_gamma=s[2],
        dc=d[0],
        dq=d[1],
        d_gamma=d[2],
        ic=i[0],
        iq=i[1],
        i_gamma=i[2],
        term1=cap.term1,
        term2=cap.term2,
        term3=cap.term3,
        qu=cap.qu,
        qnu=cap.qnu,
        qns=cap.qns,
        qs=cap.qs,
        qa_spt=qa_spt,
        recommended_sbc=recommended_sbc,
        governing=governing,
        settlement=s_mm,
        settlement_method=method,
        status=status,
    )


def evaluate_input(data: DesignInput) -> Results:
    """Расчёт по полному набору исходных данных."""
    return evaluate(
        data.soil,
        data.foundation,
        data.load,
        data.environment.water_table_depth,
        data.environment.safety_factor,
    )
