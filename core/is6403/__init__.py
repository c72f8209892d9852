"""Методика расчёта мелкого фундамента по IS 6403:1981.

Модуль реализует:
- коэффициенты несущей способности, формы, глубины и наклона нагрузки
- общее уравнение несущей способности и допускаемые давления
- проверку по SPT
- оценку осадки

Использование:
    from core.is6403 import (
        bearing_capacity_factors,
        bearing_terms,
        capacities,
        settlement,
    )
"""

from .bearing import Capacities, bearing_terms, capacities, recommended_pressure, spt_check
from .settlement import (
    SETTLEMENT_LIMIT,
    elastic_settlement,
    empirical_settlement,
    settlement,
)
from .tables import (
    allowable_pressure_spt,
    bearing_capacity_factors,
    depth_factors,
    inclination_factors,
    load_inclination,
    shape_factors,
)

__all__ = [
    # Коэффициенты
    "bearing_capacity_factors",
    "shape_factors",
    "depth_factors",
    "load_inclination",
    "inclination_factors",
    "allowable_pressure_spt",
    # Несущая способность
    "Capacities",
    "bearing_terms",
    "capacities",
    "spt_check",
    "recommended_pressure",
    # Осадка
    "SETTLEMENT_LIMIT",
    "elastic_settlement",
    "empirical_settlement",
    "settlement",
]
