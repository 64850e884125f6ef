"""
Boresight Combiner — итоговый фактор взаимной направленности двух антенн

Результат в [-1, 1]:
    +1: обе антенны смотрят точно друг на друга
    -1: обе антенны смотрят точно друг от друга
     0: антенны смотрят в одном направлении (общий азимут)
    > 0: лучи антенн где-то пересекутся
    < 0: лучи антенн никогда не пересекутся

Порядок расчёта:
1. Geometry: дельты, расстояние, прямой и обратный пеленг
2. Азимуты усекаются до целых градусов; A2 по умолчанию = обратный пеленг
   (антенна 2 смотрит на антенну 1)
3. AngularFold: отклонение каждого азимута от своего пеленга, [0, 180]
4. QuadrantPower: показатель заострения по квадрантам смещений
5. DistanceEntropy: множитель уверенности по расстоянию
6. Base и adjusted факторы каждой антенны, итоговая свёртка

ФОРМУЛЫ:
    base     = 1                                   если distance == 0
             = 1 - deviation / 180                 иначе
    D        = int(deviation), 0 → 1
    adjusted = base * (1 - (log(D) / log(360)) ^ (P * (B / distance) ^ 1.05))
    boresight = 2 * (entropy * (adjusted_1 + adjusted_2) / 2) - 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. distance == 0 → кривая заострения не вычисляется (adjusted = base = 1),
   деления на ноль нет
2. Результат никогда не NaN: неопределённость → BoresightDomainError
3. Расчёт чистый: нет состояния между вызовами, безопасен для параллельного вызова
"""

import logging
import math
from typing import Any, Mapping, NamedTuple, Optional

from src.boresight.config import DEFAULT_CONFIG, LOG_BASE_DEGREES, BoresightConfig
from src.boresight.distance_entropy import distance_entropy
from src.boresight.exceptions import SharpeningOverflowError
from src.boresight.quadrant_power import (
    QuadrantCode,
    classify_offset,
    quadrant_exponent,
)
from src.core.contracts import validate_boresight_input
from src.core.domain.antenna import AntennaState, BoresightInput
from src.core.math.angular_fold import fold_angle, signed_offset
from src.core.math.geometry import PairwiseGeometry, compute_pairwise_geometry
from src.core.math.numerical_safeguards import validate_finite

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class BoresightBreakdown(NamedTuple):
    """Все промежуточные величины одного расчёта boresight."""

    geometry: PairwiseGeometry
    azimuth_1: int
    azimuth_2: int  # После подстановки значения по умолчанию
    deviation_1: float
    deviation_2: float
    offset_1: float
    offset_2: float
    quadrant_1: QuadrantCode
    quadrant_2: QuadrantCode
    exponent: int
    entropy_multiplier: float
    base_1: float
    base_2: float
    adjusted_1: float
    adjusted_2: float
    boresight: float


# =============================================================================
# PRIMITIVES
# =============================================================================


def base_factor(deviation: float, distance: float) -> float:
    """
    Базовый фактор направленности антенны.

    Examples:
        >>> base_factor(0, 100.0)
        1.0
        >>> base_factor(90, 100.0)
        0.5
        >>> base_factor(180, 0.0)
        1.0
    """
    if distance == 0:
        return 1.0
    return 1 - deviation / 180


def log_guarded_deviation(deviation: float) -> int:
    """
    Отклонение для логарифма: целая часть, 0 заменяется на 1.

    Examples:
        >>> log_guarded_deviation(0)
        1
        >>> log_guarded_deviation(0.6)
        1
        >>> log_guarded_deviation(45.9)
        45
    """
    return int(deviation) or 1


def adjusted_factor(
    base: float,
    deviation: float,
    exponent: int,
    distance: float,
    config: BoresightConfig = DEFAULT_CONFIG,
) -> float:
    """
    Заострённый фактор направленности антенны.

    Кривая тянет adjusted к base при точном наведении (D == 1) и на малых
    расстояниях; на больших расстояниях изменяет base мягче.

    Args:
        base: Базовый фактор антенны
        deviation: Отклонение азимута от пеленга (градусы)
        exponent: Показатель заострения из таблицы квадрантов
        distance: Расстояние между антеннами
        config: Конфигурация (break_even_distance, distance_factor)

    Returns:
        Скорректированный фактор; base при distance == 0

    Raises:
        SharpeningOverflowError: Если степень переполняет float
    """
    if distance == 0:
        return base

    ratio = math.log(log_guarded_deviation(deviation)) / math.log(LOG_BASE_DEGREES)
    try:
        power = exponent * math.pow(
            config.break_even_distance / distance, config.distance_factor
        )
        return base * (1 - math.pow(ratio, power))
    except OverflowError as e:
        logger.warning("Sharpening overflow for deviation %r", deviation)
        raise SharpeningOverflowError(
            f"Sharpening overflow: deviation={deviation!r}, exponent={exponent}, "
            f"distance={distance!r}"
        ) from e


def combine(adjusted_1: float, adjusted_2: float, entropy_multiplier: float) -> float:
    """
    Свёртка двух факторов в шкалу [-1, 1].

    Examples:
        >>> combine(1.0, 1.0, 1.0)
        1.0
        >>> combine(0.0, 0.0, 1.0)
        -1.0
        >>> combine(1.0, 0.0, 1.0)
        0.0
    """
    return 2 * ((entropy_multiplier * (adjusted_1 + adjusted_2)) / 2) - 1


# =============================================================================
# COMBINER
# =============================================================================


class BoresightCombiner:
    """Расчёт boresight фактора пары антенн.

    Объект не хранит состояния между вызовами, кроме неизменяемой
    конфигурации; один экземпляр можно использовать из нескольких потоков.
    """

    def __init__(self, config: Optional[BoresightConfig] = None):
        """
        Args:
            config: Конфигурация (default: BoresightConfig())
        """
        self.config = config or BoresightConfig()

    def breakdown(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        a1: int,
        a2: Optional[int] = None,
        entropy_enabled: bool = True,
    ) -> BoresightBreakdown:
        """Полный расчёт boresight со всеми промежуточными величинами.

        Азимуты приводятся к целым градусам отбрасыванием дробной части
        (89.5 → 89, -0.5 → 0), как целочисленные параметры A1/A2.

        Args:
            x1, y1: Позиция антенны 1
            x2, y2: Позиция антенны 2
            a1: Азимут антенны 1 (градусы)
            a2: Азимут антенны 2 (default: обратный пеленг на антенну 1)
            entropy_enabled: Включить distance entropy (default: True)

        Returns:
            BoresightBreakdown

        Raises:
            ValueError: Если какой-либо вход NaN/Inf
            BoresightDomainError: Если результат не определён
        """
        validate_finite(a1, "a1")
        a1 = int(a1)
        if a2 is not None:
            validate_finite(a2, "a2")
            a2 = int(a2)

        geometry = compute_pairwise_geometry(x1, y1, x2, y2)
        if a2 is None:
            a2 = geometry.bearing_reverse

        deviation_1 = fold_angle(geometry.bearing_forward, a1)
        deviation_2 = fold_angle(geometry.bearing_reverse, a2)

        offset_1 = signed_offset(a1, geometry.bearing_forward)
        offset_2 = signed_offset(a2, geometry.bearing_reverse)
        quadrant_1 = classify_offset(offset_1)
        quadrant_2 = classify_offset(offset_2)
        exponent = quadrant_exponent(quadrant_1, quadrant_2)

        entropy = distance_entropy(geometry.distance, entropy_enabled, self.config)

        base_1 = base_factor(deviation_1, geometry.distance)
        base_2 = base_factor(deviation_2, geometry.distance)

        if geometry.is_colocated:
            logger.debug("Antennas are co-located, sharpening curve skipped")

        adjusted_1 = adjusted_factor(
            base_1, deviation_1, exponent, geometry.distance, self.config
        )
        adjusted_2 = adjusted_factor(
            base_2, deviation_2, exponent, geometry.distance, self.config
        )

        boresight = combine(adjusted_1, adjusted_2, entropy)

        logger.debug(
            "Boresight %.6f: distance=%.3f bearing=%d/%d deviation=%s/%s "
            "exponent=%d entropy=%.6f",
            boresight,
            geometry.distance,
            geometry.bearing_forward,
            geometry.bearing_reverse,
            deviation_1,
            deviation_2,
            exponent,
            entropy,
        )

        return BoresightBreakdown(
            geometry=geometry,
            azimuth_1=a1,
            azimuth_2=a2,
            deviation_1=deviation_1,
            deviation_2=deviation_2,
            offset_1=offset_1,
            offset_2=offset_2,
            quadrant_1=quadrant_1,
            quadrant_2=quadrant_2,
            exponent=exponent,
            entropy_multiplier=entropy,
            base_1=base_1,
            base_2=base_2,
            adjusted_1=adjusted_1,
            adjusted_2=adjusted_2,
            boresight=boresight,
        )

    def evaluate(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        a1: int,
        a2: Optional[int] = None,
        entropy_enabled: bool = True,
    ) -> float:
        """Boresight фактор в [-1, 1] (см. breakdown)."""
        return self.breakdown(x1, y1, x2, y2, a1, a2, entropy_enabled).boresight

    def evaluate_antennas(
        self,
        antenna_1: AntennaState,
        antenna_2: AntennaState,
        entropy_enabled: bool = True,
    ) -> float:
        """
        Boresight фактор для пары AntennaState.

        Raises:
            ValueError: Если у антенны 1 нет азимута
        """
        if antenna_1.azimuth_deg is None:
            raise ValueError("antenna_1 must have an azimuth")

        return self.evaluate(
            antenna_1.position.x,
            antenna_1.position.y,
            antenna_2.position.x,
            antenna_2.position.y,
            antenna_1.azimuth_deg,
            antenna_2.azimuth_deg,
            entropy_enabled,
        )

    def evaluate_input(self, data: BoresightInput) -> float:
        """Boresight фактор для записи BoresightInput."""
        antenna_1, antenna_2 = data.antennas()
        return self.evaluate_antennas(antenna_1, antenna_2, data.entropy_enabled)

    def evaluate_record(self, data: Mapping[str, Any]) -> float:
        """
        Boresight фактор для JSON-записи входов.

        Запись проверяется по схеме boresight_input.json до построения модели.

        Raises:
            jsonschema.ValidationError: Если запись не соответствует схеме
        """
        validate_boresight_input(dict(data))
        return self.evaluate_input(BoresightInput(**data))


# =============================================================================
# FUNCTIONAL API
# =============================================================================

_DEFAULT_COMBINER = BoresightCombiner()


def antenna_boresight_factor(
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    a1: int,
    a2: Optional[int] = None,
    entropy_enabled: bool = True,
) -> float:
    """
    Boresight фактор двух антенн с конфигурацией по умолчанию.

    Args:
        x1, y1: Позиция антенны 1
        x2, y2: Позиция антенны 2
        a1: Азимут антенны 1 (градусы)
        a2: Азимут антенны 2 (default: пеленг от антенны 2 на антенну 1)
        entropy_enabled: Включить distance entropy (default: True)

    Returns:
        Фактор в [-1, 1]

    Raises:
        ValueError: Если какой-либо вход NaN/Inf
        BoresightDomainError: Если результат не определён

    Examples:
        >>> antenna_boresight_factor(0, 0, 0, 100, 0, 180, entropy_enabled=False)
        1.0
        >>> antenna_boresight_factor(0, 0, 0, 100, 180, 0, entropy_enabled=False)
        -1.0
        >>> antenna_boresight_factor(0, 0, 0, 100, 0, 0)
        0.0
    """
    return _DEFAULT_COMBINER.evaluate(x1, y1, x2, y2, a1, a2, entropy_enabled)
