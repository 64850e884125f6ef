"""
Geometry — взаимное расположение двух антенн на плоскости

Модуль вычисляет производные величины пары позиций:
- Вектор смещения (dX, dY) = P1 - P2
- Евклидово расстояние между позициями
- Пеленг от антенны 1 на антенну 2 и обратный пеленг

СИСТЕМА ОТСЧЁТА:
    0° совпадает с осью +Y, угол растёт по часовой стрелке.
    Это задаётся порядком аргументов atan2(dX, dY) (а не привычным
    atan2(dY, dX)); порядок менять нельзя, от него зависят результаты.

ФОРМУЛЫ:
    distance        = sqrt(dX² + dY²)
    bearing_forward = 0                                        если distance == 0
                    = trunc(180 + atan2(dX, dY) * 180 / π) mod 360   иначе
    bearing_reverse = (bearing_forward + 180) mod 360
"""

import math
from typing import NamedTuple

from src.core.math.numerical_safeguards import validate_finite


# =============================================================================
# RESULT
# =============================================================================


class PairwiseGeometry(NamedTuple):
    """Геометрия пары антенн (производная от позиций, без азимутов)."""

    dx: int
    dy: int
    distance: float
    bearing_forward: int  # Пеленг 1 → 2, целые градусы [0, 360)
    bearing_reverse: int  # Пеленг 2 → 1, целые градусы [0, 360)

    @property
    def is_colocated(self) -> bool:
        """Антенны в одной точке (distance == 0)."""
        return self.distance == 0


# =============================================================================
# BEARINGS
# =============================================================================


def bearing_forward(dx: int, dy: int) -> int:
    """
    Пеленг от антенны 1 на антенну 2 в целых градусах.

    Дробная часть отбрасывается (усечение к нулю) до взятия остатка,
    поэтому результат всегда целый и лежит в [0, 360).

    Args:
        dx: X1 - X2
        dy: Y1 - Y2

    Returns:
        Пеленг в градусах; 0 для совпадающих позиций

    Examples:
        >>> bearing_forward(0, -100)  # антенна 2 строго "севернее"
        0
        >>> bearing_forward(-100, 0)  # антенна 2 строго "восточнее"
        90
    """
    if dx == 0 and dy == 0:
        return 0

    angle = 180 + math.atan2(dx, dy) * 180 / math.pi
    return int(angle) % 360


def reverse_bearing(bearing: int) -> int:
    """
    Обратный пеленг (bearing + 180) mod 360.

    Examples:
        >>> reverse_bearing(0)
        180
        >>> reverse_bearing(270)
        90
    """
    return (bearing + 180) % 360


# =============================================================================
# PAIRWISE GEOMETRY
# =============================================================================


def compute_pairwise_geometry(x1: int, y1: int, x2: int, y2: int) -> PairwiseGeometry:
    """
    Вычисление геометрии пары позиций.

    Args:
        x1, y1: Позиция антенны 1
        x2, y2: Позиция антенны 2

    Returns:
        PairwiseGeometry с дельтами, расстоянием и пеленгами

    Raises:
        ValueError: Если какая-либо координата NaN/Inf
    """
    for name, value in (("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)):
        validate_finite(value, name)

    dx = x1 - x2
    dy = y1 - y2
    distance = math.sqrt(dx**2 + dy**2)

    forward = 0 if distance == 0 else bearing_forward(dx, dy)

    return PairwiseGeometry(
        dx=dx,
        dy=dy,
        distance=distance,
        bearing_forward=forward,
        bearing_reverse=reverse_bearing(forward),
    )
