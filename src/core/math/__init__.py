"""
Core math modules для расчёта boresight

Геометрические примитивы и численные защиты, не зависящие от формулы
boresight: пеленги, свёртка углов, проверки NaN/Inf.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    validate_finite,
    validate_in_range,
    validate_positive,
)

# Geometry
from src.core.math.geometry import (
    PairwiseGeometry,
    bearing_forward,
    compute_pairwise_geometry,
    reverse_bearing,
)

# Angular Fold
from src.core.math.angular_fold import fold_angle, signed_offset

__all__ = [
    # Numerical Safeguards — Functions
    "clamp",
    "is_valid_float",
    "validate_finite",
    "validate_in_range",
    "validate_positive",
    # Geometry — Types
    "PairwiseGeometry",
    # Geometry — Functions
    "bearing_forward",
    "compute_pairwise_geometry",
    "reverse_bearing",
    # Angular Fold — Functions
    "fold_angle",
    "signed_offset",
]
