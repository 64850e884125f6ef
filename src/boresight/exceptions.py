"""
Boresight Exceptions

Формула не возвращает NaN: любое неопределённое состояние расчёта
выражается исключением из иерархии BoresightDomainError.
"""


class BoresightDomainError(Exception):
    """Результат boresight не определён для данных входов."""

    pass


class QuadrantClassificationError(BoresightDomainError):
    """
    Смещение азимута не попадает ни в один квадрант.

    Границы квадрантов включающие: 0–89, 90–180, 180–270, 271–360.
    Между 89 и 90, а также между 270 и 271 остаются зазоры; в них
    попадают только дробные смещения.
    """

    def __init__(self, offset: float):
        self.offset = offset
        super().__init__(f"Azimuth offset {offset!r} falls in no quadrant")


class UndefinedSharpeningExponentError(BoresightDomainError):
    """Сумма кодов квадрантов не имеет показателя заострения в таблице."""

    def __init__(self, quadrant_sum: int):
        self.quadrant_sum = quadrant_sum
        super().__init__(f"No sharpening exponent defined for quadrant sum {quadrant_sum}")


class SharpeningOverflowError(BoresightDomainError):
    """
    Кривая заострения переполнила float.

    Возможно только при азимутах вне [0, 360), когда отклонение > 360
    и основание степени log(D) / log(360) больше 1.
    """

    pass
