"""
Angular Fold — кратчайшее угловое расстояние между двумя курсами

Свёртка абсолютной разности углов к кратчайшей дуге:

    raw    = |a - b|
    folded = |raw - (raw mod 180) * 2|

Для курсов в [0, 360) результат всегда в [0, 180]. Вне этого диапазона
входы не нормализуются: raw == 360 даёт 360.

Также модуль даёт знаковое смещение азимута относительно пеленга,
приведённое к [0, 360) (используется для классификации квадранта).
"""

from src.core.math.numerical_safeguards import validate_finite


def fold_angle(a: float, b: float) -> float:
    """
    Кратчайшее угловое расстояние между курсами a и b.

    Args:
        a: Первый курс (градусы)
        b: Второй курс (градусы)

    Returns:
        Отклонение в градусах, [0, 180] для входов в [0, 360)

    Raises:
        ValueError: Если a или b NaN/Inf

    Examples:
        >>> fold_angle(0, 90)
        90
        >>> fold_angle(10, 350)
        20
        >>> fold_angle(0, 180)
        180
    """
    validate_finite(a, "a")
    validate_finite(b, "b")

    raw = abs(a - b)
    return abs(raw - (raw % 180) * 2)


def signed_offset(azimuth: float, bearing: float) -> float:
    """
    Смещение азимута от пеленга по часовой стрелке, [0, 360).

    (azimuth - bearing + 360) mod 360

    Examples:
        >>> signed_offset(10, 0)
        10
        >>> signed_offset(350, 0)
        350
        >>> signed_offset(0, 180)
        180
    """
    validate_finite(azimuth, "azimuth")
    validate_finite(bearing, "bearing")

    return (azimuth - bearing + 360) % 360
