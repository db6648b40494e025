"""
Division — Деление магнитуд

Два алгоритма:
- simple_division: делитель помещается в один limb (быстрый путь)
- knuth_division: многолимбовый делитель, Knuth Algorithm D

Algorithm D (TAOCP vol. 2, 4.3.1):
    1. Нормализация: f = BASE // (top + 1), оба операнда умножаются на f,
       старший limb делителя становится >= BASE / 2
    2. Пробная цифра qt: окно из 3 limbs делимого / 2 старших limbs делителя,
       ограниченное сверху LIMB_MASK
    3. Коррекция: пока qt * divisor больше окна делимого, qt уменьшается
       (при нормализованном делителе не более двух раз)
    4. Вычитание qt * divisor из окна in place с заёмом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пробная цифра никогда не меньше истинной: коррекция только вниз
2. После difference окно делимого меньше нормализованного делителя
3. Остаток здесь не вычисляется: он восстанавливается как a - (a // b) * b
"""

import logging

from src.core.bigint.errors import DivisionByZero
from src.core.bigint.limbs import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    is_zero_magnitude,
    mul_small,
    trim,
)

logger = logging.getLogger(__name__)


# =============================================================================
# БЫСТРЫЙ ПУТЬ: ДЕЛИТЕЛЬ ИЗ ОДНОГО LIMB
# =============================================================================


def simple_division(magnitude: list[int], divisor: int) -> tuple[list[int], int]:
    """
    Деление магнитуды на один limb.

    Длинное деление от старшего limb к младшему; остаток carry всегда
    лежит в [0, divisor).

    Args:
        magnitude: Делимое
        divisor: Делитель в [0, LIMB_BASE)

    Returns:
        (quotient, remainder): trimmed частное и остаток

    Raises:
        DivisionByZero: Если divisor == 0
        ValueError: Если divisor не помещается в один limb

    Examples:
        >>> simple_division([123], 10)
        ([12], 3)
        >>> simple_division([0, 1], 2)
        ([2147483648], 0)
    """
    if divisor == 0:
        raise DivisionByZero("Division by zero")
    if not 0 < divisor < LIMB_BASE:
        raise ValueError(f"divisor must fit in one limb, got {divisor}")

    quotient = [0] * len(magnitude)
    carry = 0
    for i in range(len(magnitude) - 1, -1, -1):
        acc = (carry << LIMB_BITS) | magnitude[i]
        quotient[i], carry = divmod(acc, divisor)

    return trim(quotient), carry


# =============================================================================
# ALGORITHM D: ВСПОМОГАТЕЛЬНЫЕ ШАГИ
# =============================================================================


def normalize(
    dividend: list[int], divisor: list[int]
) -> tuple[list[int], list[int]]:
    """
    Нормализация операндов для Algorithm D.

    f = BASE // (divisor[-1] + 1). Делитель после умножения сохраняет длину m,
    делимое дополняется нулями до длины n + 1 (окно для первой цифры).

    Returns:
        (normalized_dividend, normalized_divisor)
    """
    factor = LIMB_BASE // (divisor[-1] + 1)

    remainder = mul_small(dividend, factor)
    remainder.extend([0] * (len(dividend) + 1 - len(remainder)))

    return remainder, mul_small(divisor, factor)


def trial(remainder: list[int], k: int, m: int, d2: int) -> int:
    """
    Пробная цифра частного для позиции k.

    Окно remainder[k+m], remainder[k+m-1], remainder[k+m-2] как 96-битное
    число делится на d2 (два старших limb делителя), результат ограничен
    LIMB_MASK.
    """
    km = k + m
    r3 = (
        (remainder[km] << (2 * LIMB_BITS))
        | (remainder[km - 1] << LIMB_BITS)
        | remainder[km - 2]
    )
    return min(r3 // d2, LIMB_MASK)


def smaller(remainder: list[int], dq: list[int], k: int, m: int) -> bool:
    """
    Окно remainder[k..k+m] строго меньше dq[0..m]?

    Сравнение от старшего limb к младшему.
    """
    for i in range(m, -1, -1):
        if remainder[i + k] != dq[i]:
            return remainder[i + k] < dq[i]
    return False


def difference(remainder: list[int], dq: list[int], k: int, m: int) -> None:
    """
    Вычитание dq из окна remainder[k..k+m] in place с заёмом.

    Precondition: окно >= dq (гарантируется коррекцией через smaller).
    """
    borrow = 0
    for i in range(m + 1):
        acc = remainder[i + k] - dq[i] - borrow
        if acc < 0:
            acc += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        remainder[i + k] = acc


def _window_product(divisor: list[int], qt: int, m: int) -> list[int]:
    dq = mul_small(divisor, qt)
    dq.extend([0] * (m + 1 - len(dq)))
    return dq


# =============================================================================
# ALGORITHM D
# =============================================================================


def knuth_division(dividend: list[int], divisor: list[int]) -> list[int]:
    """
    Частное магнитуд для многолимбового делителя (Knuth Algorithm D).

    Args:
        dividend: Делимое (trimmed), длина n
        divisor: Делитель (trimmed), длина m >= 2

    Returns:
        Trimmed частное; [0] если n < m

    Raises:
        DivisionByZero: Если делитель равен нулю
        ValueError: Если делитель помещается в один limb (нужен simple_division)
    """
    if is_zero_magnitude(divisor):
        raise DivisionByZero("Division by zero")
    m = len(divisor)
    if m < 2:
        raise ValueError("knuth_division requires a divisor of at least 2 limbs")

    n = len(dividend)
    if n < m:
        return [0]

    remainder, norm_divisor = normalize(dividend, divisor)
    d2 = (norm_divisor[m - 1] << LIMB_BITS) | norm_divisor[m - 2]

    quotient = [0] * (n - m + 1)
    for k in range(n - m, -1, -1):
        qt = trial(remainder, k, m, d2)
        dq = _window_product(norm_divisor, qt, m)

        corrections = 0
        while smaller(remainder, dq, k, m):
            qt -= 1
            corrections += 1
            dq = _window_product(norm_divisor, qt, m)

        if corrections:
            logger.debug(
                "Quotient digit at position %d corrected %d time(s) to %d",
                k,
                corrections,
                qt,
            )

        difference(remainder, dq, k, m)
        quotient[k] = qt

    return trim(quotient)
