"""
Distance Entropy — снижение уверенности в boresight с ростом расстояния

На малых расстояниях азимутам доверяем полностью (множитель 1). С ростом
расстояния реальная неточность азимута делает суждение менее надёжным, и
множитель кубически убывает, но не ниже max_entropy_allowed.

ФОРМУЛА (кривая подобрана эмпирически, форму менять нельзя):

    raw = 1 - ( ( (B + d³) / B - B³ / B ) / 1000³ ) / 2
    multiplier = clamp(raw, max_entropy_allowed, 1)

    где B = break_even_distance, d = distance

При d ≈ B множитель ≈ 1; при B = 5000 нижняя граница 0.1 достигается
примерно на 20.9 тыс. единиц.
"""

from src.boresight.config import DEFAULT_CONFIG, ENTROPY_CUBIC_SCALE, BoresightConfig
from src.core.math.numerical_safeguards import clamp, validate_finite


def distance_entropy(
    distance: float,
    enabled: bool = True,
    config: BoresightConfig = DEFAULT_CONFIG,
) -> float:
    """
    Множитель уверенности для расстояния между антеннами.

    Args:
        distance: Расстояние между позициями (>= 0)
        enabled: Если False, множитель всегда 1 (без затухания)
        config: Конфигурация (break_even_distance, max_entropy_allowed)

    Returns:
        Множитель в [max_entropy_allowed, 1]

    Raises:
        ValueError: Если distance NaN/Inf или отрицательное

    Examples:
        >>> distance_entropy(100.0)
        1.0
        >>> distance_entropy(100000.0)
        0.1
        >>> distance_entropy(100000.0, enabled=False)
        1.0
    """
    if not enabled:
        return 1.0

    validate_finite(distance, "distance")
    if distance < 0:
        raise ValueError(f"distance must be non-negative, got {distance}")

    b = config.break_even_distance
    raw = 1 - ((((b + distance**3) / b) - (b**3 / b)) / ENTROPY_CUBIC_SCALE) / 2

    return clamp(raw, config.max_entropy_allowed, 1.0)
