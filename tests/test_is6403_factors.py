import math

import pytest

from core.is6403.tables import (
    NC_CLAY,
    PHI_EPSILON,
    bearing_capacity_factors,
    depth_factors,
    inclination_factors,
    load_inclination,
    shape_factors,
)
from core.models import FoundationShape


def test_bearing_factors_phi_zero_are_constants():
    assert bearing_capacity_factors(0.0) == (NC_CLAY, 1.0, 0.0)


def test_bearing_factors_phi_30_match_closed_form():
    tan_phi = math.tan(math.radians(30.0))
    n_q = math.exp(math.pi * tan_phi) * math.tan(math.radians(60.0)) ** 2
    n_c, n_q_got, n_gamma = bearing_capacity_factors(30.0)

    assert n_q_got == pytest.approx(n_q)
    assert n_c == pytest.approx((n_q - 1.0) / tan_phi)
    assert n_gamma == pytest.approx(2.0 * (n_q + 1.0) * tan_phi)
    # Табличные значения IS 6403 для φ = 30°
    assert n_q_got == pytest.approx(18.40, abs=0.01)
    assert n_c == pytest.approx(30.14, abs=0.01)
    assert n_gamma == pytest.approx(22.40, abs=0.01)


def test_shape_factors_strip_and_circular_are_fixed():
    assert shape_factors(FoundationShape.STRIP, 1.0, 10.0, 30.0) == (1.0, 1.0, 1.0)
    assert shape_factors(FoundationShape.CIRCULAR, 2.0, 2.0, 30.0) == (1.3, 1.2, 0.6)


def test_shape_factors_square():
    s_c, s_q, s_gamma = shape_factors(FoundationShape.SQUARE, 2.0, 2.0, 30.0)
    assert s_c == pytest.approx(1.2)
    assert s_q == pytest.approx(1.0 + 0.2 * math.tan(math.radians(60.0)))
    assert s_gamma == 0.8


def test_shape_factors_square_phi_zero():
    assert shape_factors(FoundationShape.SQUARE, 2.0, 2.0, 0.0) == (1.3, 1.0, 0.8)


def test_shape_factors_rectangular_use_ratio():
    s_c, s_q, s_gamma = shape_factors(FoundationShape.RECTANGULAR, 2.0, 4.0, 30.0)
    assert s_c == pytest.approx(1.1)
    assert s_q == pytest.approx(1.0 + 0.1 * math.tan(math.radians(60.0)))
    assert s_gamma == pytest.approx(0.8)


@pytest.mark.parametrize(
    ("Df", "B", "k"),
    [
        (1.0, 2.0, 0.5),
        (2.0, 2.0, 1.0),
        (4.0, 2.0, math.atan(2.0)),
    ],
)
def test_depth_factors_clip_to_arctan(Df, B, k):
    d_c, d_q, d_gamma = depth_factors(Df, B, 0.0)
    # φ = 0 => tan(45°) = 1
    assert d_c == pytest.approx(1.0 + 0.2 * k)
    assert d_q == pytest.approx(1.0 + 0.1 * k)
    assert d_gamma == 1.0


def test_depth_factors_zero_width_takes_arctan_limit():
    tan_term = math.tan(math.radians(60.0))
    d_c, d_q, _ = depth_factors(1.5, 0.0, 30.0)
    assert d_c == pytest.approx(1.0 + 0.2 * (math.pi / 2.0) * tan_term)
    assert d_q == pytest.approx(1.0 + 0.1 * (math.pi / 2.0) * tan_term)
    # Непрерывность при B → 0
    assert d_c == pytest.approx(depth_factors(1.5, 1e-6, 30.0)[0], rel=1e-5)


def test_depth_factors_zero_width_and_depth():
    assert depth_factors(0.0, 0.0, 30.0) == (1.0, 1.0, 1.0)


def test_depth_factors_negative_width_divides():
    # Df/B = -0.5 ≤ 1 => k = -0.5
    d_c, _, _ = depth_factors(1.0, -2.0, 0.0)
    assert d_c == pytest.approx(1.0 - 0.2 * 0.5)


def test_load_inclination():
    assert load_inclination(100.0, 100.0) == pytest.approx(45.0)
    assert load_inclination(0.0, 50.0) == 0.0
    assert load_inclination(100.0, 0.0) == 0.0


def test_inclination_factors():
    i_c, i_q, i_gamma = inclination_factors(45.0, 30.0)
    assert i_c == pytest.approx(0.25)
    assert i_q == i_c
    assert i_gamma == pytest.approx(0.25)


def test_inclination_factor_gamma_guarded_for_phi_zero():
    _, _, i_gamma = inclination_factors(10.0, 0.0)
    assert math.isfinite(i_gamma)
    assert i_gamma == pytest.approx((1.0 - 10.0 / PHI_EPSILON) ** 2)
    assert inclination_factors(0.0, 0.0) == (1.0, 1.0, 1.0)
