"""
BigInt — целые числа произвольной точности

Знаковое целое на 32-битных limbs: арифметика, деление Knuth Algorithm D,
побитовые операции через дополнительный код, сдвиги, сравнение и
десятичная конверсия.
"""

# Value type
from src.core.bigint.big_integer import (
    BigInt,
    DivModResult,
    compare,
    to_string,
)

# Errors
from src.core.bigint.errors import (
    BigIntError,
    DivisionByZero,
    ParseError,
)

# Limb constants
from src.core.bigint.limbs import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
)

# Decimal conversion
from src.core.bigint.conversion import (
    DECIMAL_RADIX,
    parse_decimal,
    render_decimal,
)

__all__ = [
    # Value type
    "BigInt",
    "DivModResult",
    "compare",
    "to_string",
    # Errors
    "BigIntError",
    "DivisionByZero",
    "ParseError",
    # Limb constants
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # Decimal conversion
    "DECIMAL_RADIX",
    "parse_decimal",
    "render_decimal",
]
