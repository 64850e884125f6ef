"""
Antenna — модели позиции и состояния направленной антенны

Immutable Pydantic модели, описывающие входы расчёта boresight:
- Position: целочисленные координаты на плоскости (общая единица, например метры)
- AntennaState: позиция + азимут (целые градусы по часовой стрелке от оси +Y)
- BoresightInput: плоская запись входов (X1, Y1, X2, Y2, A1, A2, E)

Азимуты целые, как и координаты: дробные значения и NaN/Inf отвергаются
валидацией int. Азимуты не нормализуются и не ограничиваются [0, 360):
значения вне диапазона допустимы и дают искажённый, но определённый результат.
"""

from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# POSITION
# =============================================================================


class Position(BaseModel):
    """Позиция антенны на плоскости."""

    x: int = Field(..., description="Координата X")
    y: int = Field(..., description="Координата Y")

    model_config = {"frozen": True}  # Immutable


# =============================================================================
# ANTENNA STATE
# =============================================================================


class AntennaState(BaseModel):
    """
    Состояние антенны: позиция и азимут.

    azimuth_deg может отсутствовать только у второй антенны пары:
    тогда антенна считается направленной точно на первую.
    """

    position: Position = Field(..., description="Позиция антенны")
    azimuth_deg: Optional[int] = Field(
        None, description="Азимут в целых градусах (None = обратный пеленг на антенну 1)"
    )

    model_config = {"frozen": True}


# =============================================================================
# BOUNDARY RECORD
# =============================================================================


class BoresightInput(BaseModel):
    """
    Плоская запись входов расчёта boresight.

    Имена полей соответствуют внешнему интерфейсу функции:
    X1, Y1, X2, Y2, A1, A2 (optional), E (optional).
    """

    x1: int = Field(..., description="Позиция 1, X")
    y1: int = Field(..., description="Позиция 1, Y")
    x2: int = Field(..., description="Позиция 2, X")
    y2: int = Field(..., description="Позиция 2, Y")
    a1: int = Field(..., description="Азимут антенны 1 (целые градусы)")
    a2: Optional[int] = Field(
        None, description="Азимут антенны 2 (default: пеленг на позицию 1)"
    )
    entropy_enabled: bool = Field(True, description="Включить distance entropy")

    model_config = {"frozen": True}

    def antennas(self) -> tuple[AntennaState, AntennaState]:
        """Разложение записи на пару AntennaState."""
        return (
            AntennaState(position=Position(x=self.x1, y=self.y1), azimuth_deg=self.a1),
            AntennaState(position=Position(x=self.x2, y=self.y2), azimuth_deg=self.a2),
        )
