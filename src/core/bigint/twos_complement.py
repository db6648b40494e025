"""
Two's Complement — Побитовые операции и сдвиги над sign-magnitude

У sign-magnitude нет нативного побитового представления, поэтому AND/OR/XOR
и арифметический сдвиг вправо выполняются над производным представлением
в дополнительном коде бесконечной точности:

- неотрицательное значение: limbs магнитуды как есть (бесконечное
  расширение нулями)
- отрицательное значение: ~magnitude + 1 с дополнительным limb из единиц
  (бесконечное расширение единицами)

Старший limb представления отрицательного значения — limb расширения знака
LIMB_MASK; bitwise дополняет оба операнда ещё одним limb расширения (0 или
LIMB_MASK), поэтому знак результата виден в его старшем limb.

Функции принимают и возвращают пары (sign, magnitude); магнитуда
результата всегда trimmed, ноль всегда неотрицательный.
"""

import operator
from typing import Callable

from src.core.bigint.limbs import (
    LIMB_BITS,
    LIMB_MASK,
    complement_limbs,
    increment_limbs,
    is_zero_magnitude,
    trim,
)

LimbOp = Callable[[int, int], int]
SignOp = Callable[[bool, bool], bool]


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def to_twos_complement(sign: bool, magnitude: list[int]) -> list[int]:
    """
    Sign-magnitude → дополнительный код.

    Для отрицательных: инверсия каждого limb, limb расширения LIMB_MASK,
    затем +1. Перенос никогда не выходит за limb расширения, так как
    старший limb ненулевой магнитуды ненулевой.

    Examples:
        >>> to_twos_complement(False, [5])
        [5]
        >>> to_twos_complement(True, [1])
        [4294967295, 4294967295]
    """
    if not sign:
        return list(magnitude)

    return increment_limbs(complement_limbs(magnitude) + [LIMB_MASK])


def from_twos_complement(negative: bool, limbs: list[int]) -> tuple[bool, list[int]]:
    """
    Дополнительный код → sign-magnitude (complementation).

    Args:
        negative: Признак отрицательного шаблона (бесконечное расширение единицами)
        limbs: Шаблон limbs

    Returns:
        (sign, magnitude): sign == True только для ненулевого результата
    """
    if not negative:
        return False, trim(list(limbs))

    magnitude = trim(increment_limbs(complement_limbs(limbs)))
    return not is_zero_magnitude(magnitude), magnitude


def _sign_extension(sign: bool) -> int:
    return LIMB_MASK if sign else 0


# =============================================================================
# ОБОБЩЁННАЯ ПОБИТОВАЯ ОПЕРАЦИЯ
# =============================================================================


def bitwise(
    a_sign: bool,
    a_magnitude: list[int],
    b_sign: bool,
    b_magnitude: list[int],
    limb_op: LimbOp,
    sign_op: SignOp,
) -> tuple[bool, list[int]]:
    """
    Побитовая операция над двумя значениями в дополнительном коде.

    Алгоритм:
        1. Оба операнда → дополнительный код
        2. Оба дополняются своим limb расширения знака до ширины
           max(len) + 1, так что старший limb каждого равен 0 или MASK
        3. limb_op применяется по limbs, без trim
        4. Знак = sign_op(a_sign, b_sign), он же старший limb результата
        5. Обратно в sign-magnitude (trim только после этого)

    Без дополнительного limb знака неотрицательный операнд с установленным
    старшим битом неотличим от отрицательного: -1 ^ (2^64 - 1) дал бы 0.

    Args:
        limb_op: Операция над парой limbs (например operator.and_)
        sign_op: Операция над знаками (отрицателен ли результат)
    """
    first = to_twos_complement(a_sign, a_magnitude)
    second = to_twos_complement(b_sign, b_magnitude)

    width = max(len(first), len(second)) + 1
    first.extend([_sign_extension(a_sign)] * (width - len(first)))
    second.extend([_sign_extension(b_sign)] * (width - len(second)))

    pattern = [limb_op(x, y) for x, y in zip(first, second)]
    negative = sign_op(a_sign, b_sign)

    return from_twos_complement(negative, pattern)


def bitwise_and(
    a_sign: bool, a_magnitude: list[int], b_sign: bool, b_magnitude: list[int]
) -> tuple[bool, list[int]]:
    """AND: результат отрицателен, если оба операнда отрицательны."""
    return bitwise(
        a_sign, a_magnitude, b_sign, b_magnitude, operator.and_, lambda x, y: x and y
    )


def bitwise_or(
    a_sign: bool, a_magnitude: list[int], b_sign: bool, b_magnitude: list[int]
) -> tuple[bool, list[int]]:
    """OR: результат отрицателен, если хотя бы один операнд отрицателен."""
    return bitwise(
        a_sign, a_magnitude, b_sign, b_magnitude, operator.or_, lambda x, y: x or y
    )


def bitwise_xor(
    a_sign: bool, a_magnitude: list[int], b_sign: bool, b_magnitude: list[int]
) -> tuple[bool, list[int]]:
    """XOR: результат отрицателен, если отрицателен ровно один операнд."""
    return bitwise(
        a_sign, a_magnitude, b_sign, b_magnitude, operator.xor, lambda x, y: x != y
    )


# =============================================================================
# СДВИГИ
# =============================================================================


def shift_left(magnitude: list[int], shift: int) -> list[int]:
    """
    Сдвиг магнитуды влево на shift >= 0 бит.

    shift // 32 нулевых limbs добавляются снизу, затем сдвиг внутри limb
    с переносом вытесненных битов в следующий limb; финальный перенос
    становится новым старшим limb.

    Examples:
        >>> shift_left([1], 64)
        [0, 0, 1]
    """
    limb_shift, bit_shift = divmod(shift, LIMB_BITS)

    result = [0] * limb_shift
    carry = 0
    for limb in magnitude:
        result.append(((limb << bit_shift) & LIMB_MASK) | carry)
        carry = limb >> (LIMB_BITS - bit_shift)
    result.append(carry)

    return trim(result)


def _shift_down(limbs: list[int], shift: int, fill: int) -> list[int]:
    """Логический сдвиг вниз с заполнением старших бит limb-ом fill."""
    limb_shift, bit_shift = divmod(shift, LIMB_BITS)

    source = limbs[limb_shift:] or [fill]
    extended = source + [fill]

    return [
        ((extended[i] >> bit_shift) | (extended[i + 1] << (LIMB_BITS - bit_shift)))
        & LIMB_MASK
        for i in range(len(source))
    ]


def shift_right(sign: bool, magnitude: list[int], shift: int) -> tuple[bool, list[int]]:
    """
    Арифметический сдвиг вправо на shift >= 0 бит.

    Неотрицательные значения: младшие limbs отбрасываются, оставшиеся
    сдвигаются вниз с переносом из следующего limb.
    Отрицательные значения: сдвиг выполняется в дополнительном коде с
    расширением единицами, что эквивалентно округлению к минус бесконечности.

    Examples:
        >>> shift_right(True, [17], 1)
        (True, [9])
        >>> shift_right(True, [5], 100)
        (True, [1])
    """
    if not sign:
        return False, trim(_shift_down(magnitude, shift, 0))

    pattern = to_twos_complement(True, magnitude)
    return from_twos_complement(True, _shift_down(pattern, shift, LIMB_MASK))
