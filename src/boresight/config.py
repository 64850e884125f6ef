"""
Boresight Config — настроечные константы формулы boresight

Константы подобраны эмпирически и не выводятся из физической модели.
Значения по умолчанию менять нельзя: от них зависит совместимость результатов.

    BREAK_EVEN_DISTANCE  = 5000  # точка безубыточности entropy (≈99% entropy на ~21.5 км)
    MAX_ENTROPY_ALLOWED  = 0.1   # нижняя граница множителя уверенности
    DISTANCE_FACTOR      = 1.05  # степень (break_even / distance) в кривой заострения
"""

from dataclasses import dataclass
from typing import Final

from src.core.math.numerical_safeguards import validate_in_range, validate_positive

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Расстояние (в единицах координат), на котором entropy начинает снижать уверенность
BREAK_EVEN_DISTANCE: Final[int] = 5000

# Минимальный множитель уверенности: entropy никогда не обнуляет результат
MAX_ENTROPY_ALLOWED: Final[float] = 0.1

# Показатель степени для (break_even / distance) в кривой заострения
DISTANCE_FACTOR: Final[float] = 1.05

# Основание логарифма отклонения: log(D) / log(360)
LOG_BASE_DEGREES: Final[int] = 360

# Масштаб кубического члена entropy: 1000³
ENTROPY_CUBIC_SCALE: Final[int] = 1000**3


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BoresightConfig:
    """Конфигурация расчёта boresight.

    Immutable: загружается один раз и не меняется во время работы.
    """

    break_even_distance: float = BREAK_EVEN_DISTANCE
    max_entropy_allowed: float = MAX_ENTROPY_ALLOWED
    distance_factor: float = DISTANCE_FACTOR

    def __post_init__(self) -> None:
        validate_positive(self.break_even_distance, "break_even_distance")
        validate_positive(self.distance_factor, "distance_factor")
        validate_in_range(self.max_entropy_allowed, "max_entropy_allowed", 0.0, 1.0)
        if self.max_entropy_allowed == 0.0:
            raise ValueError("max_entropy_allowed must be > 0, got 0.0")


DEFAULT_CONFIG: Final[BoresightConfig] = BoresightConfig()
