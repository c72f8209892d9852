import sys

import numpy as np
from loguru import logger
from pydantic import ValidationError

from core.calculator import evaluate_input
from core.config import load_input
from core.errors import InvalidConfigurationError
from core.logging import configure_logging
from core.sensitivity import sweep, sweep_table


def main(input_file: str = "input.toml"):
    """Загрузка → расчёт → вывод."""
    configure_logging()

    try:
        design, sweep_params = load_input(input_file)
        result = evaluate_input(design)
    except (ValidationError, InvalidConfigurationError) as e:
        logger.error("Ошибка исходных данных: {}", e)
        sys.exit(1)

    if design.name:
        print(f"Проект: {design.name}")
    print(f"Грунт: {result.soil_type.value}, фундамент: {result.foundation_shape.value}")
    print(f"B' = {result.B_prime:.2f} м, L' = {result.L_prime:.2f} м, W' = {result.W_prime:.3f}")
    print(f"Nc = {result.Nc:.2f}, Nq = {result.Nq:.2f}, Nγ = {result.N_gamma:.2f}")
    print(f"qu = {result.qu:.2f} кПа, qnu = {result.qnu:.2f} кПа")
    print(f"qns = {result.qns:.2f} кПа, qs = {result.qs:.2f} кПа")
    if result.qa_spt is not None:
        print(f"qa (SPT) = {result.qa_spt:.2f} кПа")
    print(f"Рекомендуемое давление = {result.recommended_sbc:.2f} кПа ({result.governing})")
    print(f"Осадка = {result.settlement:.2f} мм ({result.settlement_method})")
    print(f"Состояние: {result.status.value}")

    if sweep_params:
        values = np.linspace(sweep_params["start"], sweep_params["stop"], sweep_params["num"])
        try:
            points = sweep(design, sweep_params["parameter"], values)
        except ValueError as e:
            logger.error("Ошибка анализа чувствительности: {}", e)
            sys.exit(1)
        print()
        print(sweep_table(points, sweep_params["parameter"]).to_string(index=False))

    return result


if __name__ == "__main__":
    input_file = sys.argv[1] if len(sys.argv) > 1 else "input.toml"
    main(input_file)
