import tomllib

import pytest
from pydantic import ValidationError

from core.config import dump_input, load_input, parse_input
from core.models import FoundationShape, SoilType

_INPUT = """
[project]
name = "Тест"

[soil]
type = "Cohesive (Clay)"
c = 40.0
phi = 0.0
gamma = 18.0
gamma_sub = 8.0
spt_n = 0

[foundation]
shape = "Rectangular"
B = 2.0
L = 3.0
Df = 1.0

[load]
V = 800.0
My = 40.0

[environment]
safety_factor = 2.5
"""


def test_load_input_reads_all_sections(tmp_path):
    path = tmp_path / "input.toml"
    path.write_text(_INPUT, encoding="utf-8")

    design, sweep = load_input(path)

    assert design.name == "Тест"
    assert design.soil.type is SoilType.CLAY
    assert design.soil.spt_n == 0
    assert design.soil.Es is None
    assert design.foundation.shape is FoundationShape.RECTANGULAR
    assert design.load.H == 0.0
    assert design.load.My == 40.0
    assert design.environment.water_table_depth is None
    assert design.environment.safety_factor == 2.5
    assert sweep == {}


def test_sweep_section_defaults():
    data = tomllib.loads(_INPUT + '\n[sweep]\nparameter = "soil.c"\n')
    _, sweep = parse_input(data)
    assert sweep == {"parameter": "soil.c", "start": 1.0, "stop": 6.0, "num": 11}


def test_dump_input_is_readable_back():
    design, _ = parse_input(tomllib.loads(_INPUT))
    text = dump_input(design)
    again, _ = parse_input(tomllib.loads(text))
    assert again == design
    assert "L_design" not in text


def test_invalid_soil_type_is_reported():
    data = tomllib.loads(_INPUT.replace("Cohesive (Clay)", "Peat"))
    with pytest.raises(ValidationError):
        parse_input(data)
