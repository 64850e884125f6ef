"""
Domain models and value objects.

Contains the antenna entities the boresight evaluation consumes.
"""

from src.core.domain.antenna import AntennaState, BoresightInput, Position

__all__ = [
    "AntennaState",
    "BoresightInput",
    "Position",
]
