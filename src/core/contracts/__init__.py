"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений BigInt.
"""

from .validators import (
    BigIntegerValidator,
    ContractValidator,
    DecimalLiteralValidator,
    SchemaLoader,
    validate_big_integer,
    validate_decimal_literal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    "DecimalLiteralValidator",
    # Functions
    "validate_big_integer",
    "validate_decimal_literal",
]
