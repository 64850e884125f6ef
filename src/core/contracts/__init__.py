"""
Contract Validation Module

Модуль для валидации JSON контрактов расчёта boresight.
"""

from .validators import (
    BoresightInputValidator,
    ContractValidator,
    SchemaLoader,
    validate_boresight_input,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BoresightInputValidator",
    # Functions
    "validate_boresight_input",
]
