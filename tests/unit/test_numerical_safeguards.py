"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Clamp
3. Валидацию параметров
"""


import pytest

from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    validate_finite,
    validate_in_range,
    validate_positive,
)

# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e10)
        assert is_valid_float(359)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_finite_passes(self) -> None:
        """Конечные значения проходят"""
        validate_finite(0, "azimuth")
        validate_finite(-720.5, "azimuth")

    def test_nan_raises_with_name(self) -> None:
        """NaN вызывает ошибку с именем параметра"""
        with pytest.raises(ValueError, match="azimuth must be a valid number"):
            validate_finite(float("nan"), "azimuth")

    def test_inf_raises(self) -> None:
        """Inf вызывает ошибку"""
        with pytest.raises(ValueError, match="x1"):
            validate_finite(float("-inf"), "x1")


# =============================================================================
# ТЕСТЫ CLAMP
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_value_within_range_unchanged(self) -> None:
        """Значение в диапазоне не меняется"""
        assert clamp(0.5, 0.1, 1.0) == 0.5

    def test_value_above_max_clamped(self) -> None:
        """Значение выше максимума ограничено"""
        assert clamp(1.0125, 0.1, 1.0) == 1.0

    def test_value_below_min_clamped(self) -> None:
        """Значение ниже минимума ограничено"""
        assert clamp(-3.0, 0.1, 1.0) == 0.1

    def test_open_bounds(self) -> None:
        """Границы опциональны"""
        assert clamp(5.0) == 5.0
        assert clamp(5.0, min_value=10.0) == 10.0
        assert clamp(5.0, max_value=1.0) == 1.0

    def test_max_wins_on_inverted_bounds(self) -> None:
        """При min > max результат равен max"""
        assert clamp(0.5, 2.0, 1.0) == 1.0


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidatePositive:
    """Тесты для validate_positive"""

    def test_positive_passes(self) -> None:
        """Положительные значения проходят"""
        validate_positive(5000, "break_even_distance")
        validate_positive(1e-9, "distance_factor")

    def test_zero_raises(self) -> None:
        """Ноль вызывает ошибку"""
        with pytest.raises(ValueError, match="must be positive"):
            validate_positive(0, "break_even_distance")

    def test_negative_raises(self) -> None:
        """Отрицательные значения вызывают ошибку"""
        with pytest.raises(ValueError, match="must be positive"):
            validate_positive(-1.05, "distance_factor")

    def test_nan_raises(self) -> None:
        """NaN вызывает ошибку"""
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_positive(float("nan"), "break_even_distance")


class TestValidateInRange:
    """Тесты для validate_in_range"""

    def test_inside_range_passes(self) -> None:
        """Значения внутри диапазона проходят"""
        validate_in_range(0.1, "max_entropy_allowed", 0.0, 1.0)
        validate_in_range(0.0, "max_entropy_allowed", 0.0, 1.0)
        validate_in_range(1.0, "max_entropy_allowed", 0.0, 1.0)

    def test_below_min_raises(self) -> None:
        """Ниже минимума"""
        with pytest.raises(ValueError, match=">= 0.0"):
            validate_in_range(-0.1, "max_entropy_allowed", 0.0, 1.0)

    def test_above_max_raises(self) -> None:
        """Выше максимума"""
        with pytest.raises(ValueError, match="<= 1.0"):
            validate_in_range(1.5, "max_entropy_allowed", 0.0, 1.0)

    def test_inf_raises(self) -> None:
        """Inf вызывает ошибку"""
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_in_range(float("inf"), "max_entropy_allowed")
