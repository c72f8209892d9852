"""Исключения расчётного ядра."""


class InvalidConfigurationError(ValueError):
    """Недопустимые исходные данные, при которых расчёт не выполняется.

    Единственный случай — коэффициент запаса FOS ≤ 0 (используется как делитель).
    """
