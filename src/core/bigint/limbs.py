"""
Limbs — Примитивы арифметики над магнитудами

Магнитуда — little-endian список 32-битных limbs (индекс 0 = младший limb).
Модуль работает только с беззнаковыми магнитудами; знак хранится в BigInt.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb лежит в диапазоне [0, LIMB_BASE)
2. После trim нет старших нулевых limbs (ноль представлен как [0])
3. Переносы и заёмы считаются в широком аккумуляторе и маскируются в 32 бита
4. Функции не мутируют аргументы, кроме явно помеченных "in place"
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ LIMB
# =============================================================================

# Ширина limb в битах
LIMB_BITS: Final[int] = 32

# Основание системы счисления магнитуды (2^32)
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска младших 32 бит (максимальное значение limb)
LIMB_MASK: Final[int] = LIMB_BASE - 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim(magnitude: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs (in place) до минимальной длины 1.

    Args:
        magnitude: Магнитуда (мутируется)

    Returns:
        Та же магнитуда, для удобства цепочек вызовов

    Examples:
        >>> trim([5, 0, 0])
        [5]
        >>> trim([0, 0])
        [0]
    """
    while len(magnitude) > 1 and magnitude[-1] == 0:
        magnitude.pop()
    return magnitude


def is_zero_magnitude(magnitude: list[int]) -> bool:
    """Ровно один limb, равный нулю."""
    return len(magnitude) == 1 and magnitude[0] == 0


def compare_magnitudes(a: list[int], b: list[int]) -> int:
    """
    Сравнение двух trimmed магнитуд.

    Сначала сравниваются длины (более длинная магнитуда больше),
    затем limbs от старшего к младшему.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def complement_limbs(limbs: list[int]) -> list[int]:
    """Побитовая инверсия каждого limb (новый список)."""
    return [limb ^ LIMB_MASK for limb in limbs]


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Сложение магнитуд с переносом.

    Аккумулятор: a_i + b_i + carry (до 33 бит), limb = младшие 32 бита,
    carry = бит 32. Финальный перенос расширяет результат на один limb.

    Examples:
        >>> add_magnitudes([0xFFFFFFFF], [1])
        [0, 1]
    """
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = 0
    for i, limb in enumerate(a):
        acc = limb + (b[i] if i < len(b) else 0) + carry
        result.append(acc & LIMB_MASK)
        carry = acc >> LIMB_BITS

    if carry:
        result.append(carry)

    return result


def sub_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Вычитание магнитуд с заёмом: a - b.

    Precondition: a >= b (по compare_magnitudes). Вызывающая сторона
    отвечает за выбор порядка операндов и знака результата.

    Returns:
        Trimmed разность

    Raises:
        ValueError: Если a < b (заём вышел за старший limb)
    """
    result: list[int] = []
    borrow = 0
    for i, limb in enumerate(a):
        acc = limb - (b[i] if i < len(b) else 0) - borrow
        if acc < 0:
            acc += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(acc)

    if borrow or len(b) > len(a):
        raise ValueError("sub_magnitudes requires a >= b")

    return trim(result)


def increment_limbs(limbs: list[int]) -> list[int]:
    """
    Прибавление единицы к последовательности limbs (новый список).

    Перенос из старшего limb расширяет последовательность.
    """
    result = list(limbs)
    for i, limb in enumerate(result):
        if limb != LIMB_MASK:
            result[i] = limb + 1
            return result
        result[i] = 0

    result.append(1)
    return result


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Школьное умножение O(n·m).

    Для каждой пары (i, j): acc = partial[i+j] + a_i * b_j + carry.
    Максимум аккумулятора: (2^32-1) + (2^32-1)^2 + (2^32-1) = 2^64 - 1,
    младшие 32 бита записываются в i+j, старшие уходят в carry.

    Результат заранее имеет длину len(a) + len(b), затем trim.

    Examples:
        >>> mul_magnitudes([0xFFFFFFFF], [0xFFFFFFFF])
        [1, 4294967294]
    """
    result = [0] * (len(a) + len(b))

    for i, a_limb in enumerate(a):
        if a_limb == 0:
            continue
        carry = 0
        for j, b_limb in enumerate(b):
            acc = result[i + j] + a_limb * b_limb + carry
            result[i + j] = acc & LIMB_MASK
            carry = acc >> LIMB_BITS
        # Строки 0..i-1 не доходят до позиции i + len(b)
        result[i + len(b)] = carry

    return trim(result)


def mul_small(magnitude: list[int], factor: int, addend: int = 0) -> list[int]:
    """
    Умножение магнитуды на один limb с прибавлением limb: m * factor + addend.

    Быстрый путь для нормализации делителя (Algorithm D) и для
    десятичного парсинга (value * 10 + digit).

    Args:
        magnitude: Магнитуда
        factor: Множитель в [0, LIMB_BASE)
        addend: Слагаемое в [0, LIMB_BASE)

    Returns:
        Trimmed результат
    """
    result: list[int] = []
    carry = addend
    for limb in magnitude:
        acc = limb * factor + carry
        result.append(acc & LIMB_MASK)
        carry = acc >> LIMB_BITS

    if carry:
        result.append(carry)

    return trim(result)
