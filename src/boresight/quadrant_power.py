"""
Quadrant Power — показатель заострения по квадрантам отклонения азимутов

Заострение boresight зависит не только от величины отклонения азимута,
но и от стороны, в которую антенна отклонена от пеленга.

Смещение каждой антенны (azimuth - bearing + 360) mod 360 относится к
одному из четырёх квадрантов (включающие границы, первое совпадение):

    | смещение | код |
    |----------|-----|
    | 0–89     | 1   |
    | 90–180   | 2   |
    | 180–270  | 4   |
    | 271–360  | 8   |

Сумма кодов двух антенн выбирает показатель степени:

    | сумма   | показатель |
    |---------|------------|
    | 9       | 32         |
    | 2, 16   | 16         |
    | 5, 10   | 8          |
    | 3, 12   | 4          |
    | 6       | 2          |
    | 4, 8    | 1          |

Для целых смещений классификация всегда определена. Дробные смещения в
(89, 90) и (270, 271) не попадают ни в один квадрант; в расчёте boresight
азимуты усекаются до целых градусов, и такие смещения не возникают.
"""

import logging
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping

from src.boresight.exceptions import (
    QuadrantClassificationError,
    UndefinedSharpeningExponentError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class QuadrantCode(IntEnum):
    """Код квадранта смещения азимута (битовые значения, сумма однозначна)."""

    Q1 = 1  # 0–89
    Q2 = 2  # 90–180
    Q3 = 4  # 180–270
    Q4 = 8  # 271–360


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# Включающие границы квадрантов, порядок проверки важен (180 → Q2)
QUADRANT_BOUNDS: Final[tuple[tuple[int, int, QuadrantCode], ...]] = (
    (0, 89, QuadrantCode.Q1),
    (90, 180, QuadrantCode.Q2),
    (180, 270, QuadrantCode.Q3),
    (271, 360, QuadrantCode.Q4),
)

SHARPENING_EXPONENTS: Final[Mapping[int, int]] = MappingProxyType(
    {
        QuadrantCode.Q1 + QuadrantCode.Q4: 32,  # 9
        QuadrantCode.Q1 + QuadrantCode.Q1: 16,  # 2
        QuadrantCode.Q4 + QuadrantCode.Q4: 16,  # 16
        QuadrantCode.Q1 + QuadrantCode.Q3: 8,  # 5
        QuadrantCode.Q4 + QuadrantCode.Q2: 8,  # 10
        QuadrantCode.Q1 + QuadrantCode.Q2: 4,  # 3
        QuadrantCode.Q4 + QuadrantCode.Q3: 4,  # 12
        QuadrantCode.Q2 + QuadrantCode.Q3: 2,  # 6
        QuadrantCode.Q2 + QuadrantCode.Q2: 1,  # 4
        QuadrantCode.Q3 + QuadrantCode.Q3: 1,  # 8
    }
)


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify_offset(offset: float) -> QuadrantCode:
    """
    Квадрант смещения азимута от пеленга.

    Args:
        offset: Смещение в градусах, обычно [0, 360)

    Returns:
        QuadrantCode

    Raises:
        QuadrantClassificationError: Если смещение в зазоре между квадрантами
            или вне [0, 360]

    Examples:
        >>> classify_offset(0)
        <QuadrantCode.Q1: 1>
        >>> classify_offset(180)
        <QuadrantCode.Q2: 2>
        >>> classify_offset(270)
        <QuadrantCode.Q3: 4>
    """
    for low, high, code in QUADRANT_BOUNDS:
        if low <= offset <= high:
            return code

    logger.warning("Azimuth offset %r falls between quadrants", offset)
    raise QuadrantClassificationError(offset)


def sharpening_exponent(quadrant_sum: int) -> int:
    """
    Показатель заострения для суммы кодов квадрантов.

    Raises:
        UndefinedSharpeningExponentError: Если суммы нет в таблице
            (7, 11, 13, 14, 15 и любые другие)
    """
    try:
        return SHARPENING_EXPONENTS[quadrant_sum]
    except KeyError:
        logger.warning("No sharpening exponent for quadrant sum %r", quadrant_sum)
        raise UndefinedSharpeningExponentError(quadrant_sum) from None


def quadrant_exponent(code_1: QuadrantCode, code_2: QuadrantCode) -> int:
    """
    Показатель заострения для пары кодов квадрантов.

    Examples:
        >>> quadrant_exponent(QuadrantCode.Q1, QuadrantCode.Q4)
        32
    """
    return sharpening_exponent(int(code_1) + int(code_2))
