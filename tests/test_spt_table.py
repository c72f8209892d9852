import pytest

from core.is6403.tables import SPT_DEFAULT, allowable_pressure_spt
from core.models import SoilType


@pytest.mark.parametrize(
    ("N", "expected"),
    [
        (0, 25.0),
        (5, 50.0),
        (9, 70.0),
        (10, 100.0),
        (15, 150.0),
        (29, 290.0),
        (30, 300.0),
        (60, 300.0),
    ],
)
def test_sand_breakpoints(N, expected):
    assert allowable_pressure_spt(SoilType.SAND, N) == expected


@pytest.mark.parametrize(
    ("N", "expected"),
    [
        (0, 50.0),
        (3, 50.0),
        (4, 80.0),
        (7, 80.0),
        (8, 100.0),
        (14, 100.0),
        (15, 200.0),
        (40, 200.0),
    ],
)
def test_clay_steps(N, expected):
    assert allowable_pressure_spt(SoilType.CLAY, N) == expected


def test_c_phi_is_linear():
    assert allowable_pressure_spt(SoilType.C_PHI, 0) == 100.0
    assert allowable_pressure_spt(SoilType.C_PHI, 12) == 220.0


def test_rock_and_default():
    assert allowable_pressure_spt(SoilType.ROCK, 50) == 500.0
    assert allowable_pressure_spt(SoilType.OTHER, 20) == SPT_DEFAULT == 150.0
