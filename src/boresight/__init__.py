"""Boresight — фактор взаимной направленности двух антенн.

Компоненты:
- DistanceEntropy: множитель уверенности по расстоянию
- QuadrantPower: показатель заострения по квадрантам смещений азимутов
- BoresightCombiner: итоговый фактор в [-1, 1]
"""

from .combiner import (
    BoresightBreakdown,
    BoresightCombiner,
    adjusted_factor,
    antenna_boresight_factor,
    base_factor,
    combine,
    log_guarded_deviation,
)
from .config import (
    BREAK_EVEN_DISTANCE,
    DEFAULT_CONFIG,
    DISTANCE_FACTOR,
    ENTROPY_CUBIC_SCALE,
    LOG_BASE_DEGREES,
    MAX_ENTROPY_ALLOWED,
    BoresightConfig,
)
from .distance_entropy import distance_entropy
from .exceptions import (
    BoresightDomainError,
    QuadrantClassificationError,
    SharpeningOverflowError,
    UndefinedSharpeningExponentError,
)
from .quadrant_power import (
    QUADRANT_BOUNDS,
    SHARPENING_EXPONENTS,
    QuadrantCode,
    classify_offset,
    quadrant_exponent,
    sharpening_exponent,
)

__all__ = [
    # Combiner
    "BoresightBreakdown",
    "BoresightCombiner",
    "adjusted_factor",
    "antenna_boresight_factor",
    "base_factor",
    "combine",
    "log_guarded_deviation",
    # Config
    "BREAK_EVEN_DISTANCE",
    "DEFAULT_CONFIG",
    "DISTANCE_FACTOR",
    "ENTROPY_CUBIC_SCALE",
    "LOG_BASE_DEGREES",
    "MAX_ENTROPY_ALLOWED",
    "BoresightConfig",
    # Distance Entropy
    "distance_entropy",
    # Exceptions
    "BoresightDomainError",
    "QuadrantClassificationError",
    "SharpeningOverflowError",
    "UndefinedSharpeningExponentError",
    # Quadrant Power
    "QUADRANT_BOUNDS",
    "SHARPENING_EXPONENTS",
    "QuadrantCode",
    "classify_offset",
    "quadrant_exponent",
    "sharpening_exponent",
]
