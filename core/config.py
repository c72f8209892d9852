"""Загрузка и выгрузка исходных данных в формате TOML."""

import tomllib
from pathlib import Path

import tomli_w

from core.models import (
    DesignInput,
    EnvironmentalInput,
    FoundationGeometry,
    LoadState,
    SoilProfile,
)


def parse_input(data: dict) -> tuple[DesignInput, dict]:
    """Преобразовать словарь TOML в модели.

    Returns:
        (DesignInput, параметры анализа чувствительности из [sweep])
    """
    soil = SoilProfile(**data["soil"])
    foundation = FoundationGeometry(**data["foundation"])
    load = LoadState(**data["load"])
    environment = EnvironmentalInput(**data.get("environment", {}))

    sweep_data = data.get("sweep", {})
    sweep = {
        "parameter": sweep_data.get("parameter", "foundation.B"),
        "start": sweep_data.get("start", 1.0),
        "stop": sweep_data.get("stop", 6.0),
        "num": sweep_data.get("num", 11),
    } if sweep_data else {}

    design = DesignInput(
        name=data.get("project", {}).get("name", ""),
        soil=soil,
        foundation=foundation,
        load=load,
        environment=environment,
    )
    return design, sweep


def load_input(path: str | Path) -> tuple[DesignInput, dict]:
    """Загрузить исходные данные из TOML-файла."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return parse_input(data)


def _drop_none(values: dict) -> dict:
    # TOML не поддерживает null
    return {k: v for k, v in values.items() if v is not None}


def dump_input(design: DesignInput, sweep: dict | None = None) -> str:
    """Выгрузить исходные данные в TOML-строку."""
    soil = _drop_none(design.soil.model_dump(mode="json"))
    foundation = _drop_none(design.foundation.model_dump(mode="json", exclude={"L_design"}))

    doc = {
        "project": {"name": design.name},
        "soil": soil,
        "foundation": foundation,
        "load": design.load.model_dump(mode="json"),
        "environment": _drop_none(design.environment.model_dump(mode="json")),
    }
    if sweep:
        doc["sweep"] = sweep
    return tomli_w.dumps(doc)
