"""Модели данных для расчёта несущей способности мелкого фундамента."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field


# --- Классификаторы ---


class SoilType(str, Enum):
    """Тип грунта основания."""

    SAND = "Cohesionless (Sand)"
    CLAY = "Cohesive (Clay)"
    C_PHI = "c-φ Soil"
    ROCK = "Rock"
    OTHER = "Other"


class FoundationShape(str, Enum):
    """Форма подошвы фундамента."""

    STRIP = "Strip/Continuous"
    SQUARE = "Square"
    RECTANGULAR = "Rectangular"
    CIRCULAR = "Circular"


class Status(str, Enum):
    """Итоговое состояние проверки."""

    SAFE = "SAFE"
    SETTLEMENT_GOVERNING = "SETTLEMENT GOVERNING"
    HIGH_ECCENTRICITY = "HIGH ECCENTRICITY"


WaterTableZone = Literal["none", "surcharge", "self_weight", "dry"]


# --- Грунт ---


class SoilProfile(BaseModel):
    """Грунт под подошвой."""

    model_config = ConfigDict(frozen=True)

    type: SoilType = SoilType.SAND
    c: float = Field(default=0.0, description="Сцепление, кПа")
    phi: float = Field(default=0.0, description="Угол внутреннего трения, °")
    gamma: float = Field(description="Удельный вес, кН/м³")
    gamma_sub: float = Field(description="Удельный вес во взвешенном состоянии, кН/м³")
    # None — не задано; 0 — заданное значение
    spt_n: int | None = Field(default=None, description="Число ударов SPT N")
    Es: float | None = Field(default=None, description="Модуль деформации, кПа")


# --- Фундамент ---


class FoundationGeometry(BaseModel):
    """Геометрия фундамента."""

    model_config = ConfigDict(frozen=True)

    shape: FoundationShape = FoundationShape.SQUARE
    B: float = Field(description="Ширина (диаметр), м")
    L: float | None = Field(default=None, description="Длина, м (для квадрата и круга не используется)")
    Df: float = Field(description="Глубина заложения, м")

    @computed_field
    @property
    def L_design(self) -> float:
        """Расчётная длина: для квадрата и круга L = B."""
        if self.shape in (FoundationShape.SQUARE, FoundationShape.CIRCULAR) or self.L is None:
            return self.B
        return self.L


# --- Нагрузки ---


class LoadState(BaseModel):
    """Нагрузки на уровне подошвы."""

    model_config = ConfigDict(frozen=True)

    V: float = Field(description="Вертикальная нагрузка, кН")
    H: float = Field(default=0.0, description="Горизонтальная нагрузка, кН")
    Mx: float = Field(default=0.0, description="Момент относительно оси X, кН·м")
    My: float = Field(default=0.0, description="Момент относительно оси Y, кН·м")


class EnvironmentalInput(BaseModel):
    """Уровень грунтовых вод и коэффициент запаса."""

    model_config = ConfigDict(frozen=True)

    water_table_depth: float | None = Field(
        default=None, description="Глубина УГВ от поверхности, м (None — без поправки)"
    )
    safety_factor: float = Field(default=3.0, description="Коэффициент запаса FOS")


class DesignInput(BaseModel):
    """Полный набор исходных данных одного расчёта."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    soil: SoilProfile
    foundation: FoundationGeometry
    load: LoadState
    environment: EnvironmentalInput = Field(default_factory=EnvironmentalInput)


# --- Результаты ---


class Results(BaseModel):
    """Результаты расчёта (все промежуточные и итоговые величины)."""

    model_config = ConfigDict(frozen=True)

    # Исходные данные
    soil_type: SoilType
    cohesion: float
    friction_angle: float
    unit_weight: float
    foundation_shape: FoundationShape
    B: float
    L: float
    Df: float
    FOS: float

    # Эксцентриситет и приведённые размеры
    ex: float
    ey: float
    B_prime: float
    L_prime: float
    eccentricity_check: bool
    alpha: float = Field(description="Угол наклона нагрузки, °")

    # УГВ
    q_surcharge: float = Field(description="Пригрузка на уровне подошвы, кПа")
    W_prime: float
    gamma_eff: float
    water_table_zone: WaterTableZone

    # Коэффициенты
    Nc: float
    Nq: float
    N_gamma: float
    sc: float
    sq: float
    s_gamma: float
    dc: float
    dq: float
    d_gamma: float
    ic: float
    iq: float
    i_gamma: float

    # Несущая способность, кПа
    term1: float
    term2: float
    term3: float
    qu: float
    qnu: float
    qns: float
    qs: float
    qa_spt: float | None
    recommended_sbc: float
    governing: Literal["shear", "spt"]

    # Осадка, мм
    settlement: float
    settlement_method: Literal["elastic", "empirical"]

    status: Status
