"""
Numerical Safeguards — защитные примитивы для геометрии антенн

Модуль обеспечивает численную устойчивость вычисления boresight:
- Проверка NaN/Inf на входе (невалидные координаты и азимуты отвергаются)
- Clamp для множителей уверенности
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в формулу (ValueError до вычислений)
2. Все операции детерминированы и воспроизводимы
"""

import math

# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение валидным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение (int или float)

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value является NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value}")


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Сначала применяется нижняя граница, затем верхняя: при
    min_value > max_value результат равен max_value.

    Examples:
        >>> clamp(1.0125, 0.1, 1.0)
        1.0
        >>> clamp(-3.0, 0.1, 1.0)
        0.1
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном (замкнутом) диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    validate_finite(value, name)

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
