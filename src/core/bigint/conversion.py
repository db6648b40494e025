"""
Conversion — Десятичные строки и нативные int

Парсинг: необязательный ведущий '-', затем одна или более цифр 0-9.
Значение накапливается по цифрам: value = value * 10 + digit.

Рендеринг: повторное simple_division(10), остатки собираются как цифры,
затем добавляется '-' и порядок разворачивается. Ноль → "0".

Только десятичная система счисления.
"""

import logging
from typing import Final

from src.core.bigint.division import simple_division
from src.core.bigint.errors import ParseError
from src.core.bigint.limbs import (
    LIMB_BITS,
    LIMB_MASK,
    is_zero_magnitude,
    mul_small,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Основание десятичной системы
DECIMAL_RADIX: Final[int] = 10

# Единственный допустимый префикс знака
MINUS_SIGN: Final[str] = "-"


# =============================================================================
# ДЕСЯТИЧНЫЙ ПАРСИНГ
# =============================================================================


def parse_decimal(text: str) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки в (sign, magnitude).

    Args:
        text: Строка формата ^-?[0-9]+$

    Returns:
        (sign, magnitude); "-0" даёт неотрицательный ноль

    Raises:
        ParseError: Пустая строка, одинокий '-', любой символ кроме цифр
            (в том числе '+', пробелы и Unicode-цифры)

    Examples:
        >>> parse_decimal("-42")
        (True, [42])
        >>> parse_decimal("4294967296")
        (False, [0, 1])
    """
    negative = text.startswith(MINUS_SIGN)
    start = 1 if negative else 0

    if start == len(text):
        logger.debug("Rejected decimal literal without digits: %r", text)
        raise ParseError(text, start, "expected at least one digit")

    magnitude = [0]
    for position in range(start, len(text)):
        char = text[position]
        if not "0" <= char <= "9":
            logger.debug("Rejected decimal literal %r at position %d", text, position)
            raise ParseError(text, position, f"unexpected character {char!r}")
        magnitude = mul_small(magnitude, DECIMAL_RADIX, ord(char) - ord("0"))

    return negative and not is_zero_magnitude(magnitude), magnitude


# =============================================================================
# ДЕСЯТИЧНЫЙ РЕНДЕРИНГ
# =============================================================================


def render_decimal(sign: bool, magnitude: list[int]) -> str:
    """
    Рендеринг (sign, magnitude) в десятичную строку.

    Без ведущих нулей; ноль рендерится как "0" независимо от sign.
    """
    if is_zero_magnitude(magnitude):
        return "0"

    digits: list[str] = []
    current = magnitude
    while not is_zero_magnitude(current):
        current, digit = simple_division(current, DECIMAL_RADIX)
        digits.append(chr(ord("0") + digit))

    if sign:
        digits.append(MINUS_SIGN)

    return "".join(reversed(digits))


# =============================================================================
# НАТИВНЫЕ INT
# =============================================================================


def from_native(value: int) -> tuple[bool, list[int]]:
    """
    Нативный int → (sign, magnitude).

    Магнитуда берётся от abs(value), поэтому минимальные значения
    фиксированной ширины (например -2^31) не требуют особого случая.
    """
    remaining = abs(value)
    magnitude: list[int] = []
    while remaining:
        magnitude.append(remaining & LIMB_MASK)
        remaining >>= LIMB_BITS

    return value < 0, magnitude or [0]


def to_native(sign: bool, magnitude: list[int]) -> int:
    """(sign, magnitude) → нативный int."""
    value = 0
    for limb in reversed(magnitude):
        value = (value << LIMB_BITS) | limb
    return -value if sign else value
