"""
Тесты для модуля Limbs — примитивы арифметики над магнитудами

Проверяет:
1. trim и канонический ноль
2. Сравнение магнитуд
3. Сложение/вычитание с переносом и заёмом через границу limb
4. Школьное умножение и умножение на один limb
"""

import random

import pytest

from src.core.bigint.conversion import from_native, to_native
from src.core.bigint.limbs import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    add_magnitudes,
    compare_magnitudes,
    complement_limbs,
    increment_limbs,
    is_zero_magnitude,
    mul_magnitudes,
    mul_small,
    sub_magnitudes,
    trim,
)

SEED = 0xB16


def mag(value: int) -> list[int]:
    """Магнитуда неотрицательного нативного int."""
    return from_native(value)[1]


def val(magnitude: list[int]) -> int:
    return to_native(False, magnitude)


# =============================================================================
# ТЕСТЫ: Константы и нормализация
# =============================================================================


class TestLimbConstants:
    """Параметры limb."""

    def test_limb_parameters(self) -> None:
        assert LIMB_BITS == 32
        assert LIMB_BASE == 2**32
        assert LIMB_MASK == 0xFFFFFFFF


class TestTrim:
    """Тесты trim"""

    def test_removes_high_zero_limbs(self) -> None:
        assert trim([5, 0, 0]) == [5]

    def test_keeps_single_zero(self) -> None:
        """Ноль сохраняет ровно один limb"""
        assert trim([0, 0, 0]) == [0]
        assert trim([0]) == [0]

    def test_keeps_inner_zeros(self) -> None:
        assert trim([0, 0, 7, 0]) == [0, 0, 7]

    def test_mutates_in_place(self) -> None:
        limbs = [1, 0]
        result = trim(limbs)
        assert result is limbs
        assert limbs == [1]

    def test_is_zero_magnitude(self) -> None:
        assert is_zero_magnitude([0])
        assert not is_zero_magnitude([1])
        assert not is_zero_magnitude([0, 1])


class TestCompareMagnitudes:
    """Тесты compare_magnitudes"""

    def test_longer_wins(self) -> None:
        assert compare_magnitudes([0, 1], [LIMB_MASK]) == 1
        assert compare_magnitudes([LIMB_MASK], [0, 1]) == -1

    def test_most_significant_limb_decides(self) -> None:
        assert compare_magnitudes([LIMB_MASK, 1], [0, 2]) == -1
        assert compare_magnitudes([0, 2], [LIMB_MASK, 1]) == 1

    def test_equal(self) -> None:
        assert compare_magnitudes([3, 4, 5], [3, 4, 5]) == 0
        assert compare_magnitudes([0], [0]) == 0


# =============================================================================
# ТЕСТЫ: Сложение и вычитание
# =============================================================================


class TestAddMagnitudes:
    """Тесты add_magnitudes"""

    def test_carry_extends_length(self) -> None:
        """Перенос из старшего limb добавляет новый limb"""
        assert add_magnitudes([LIMB_MASK], [1]) == [0, 1]
        assert add_magnitudes([LIMB_MASK, LIMB_MASK], [1]) == [0, 0, 1]

    def test_operand_order_irrelevant(self) -> None:
        assert add_magnitudes([1], [2, 3]) == add_magnitudes([2, 3], [1]) == [3, 3]

    def test_does_not_mutate_operands(self) -> None:
        a, b = [LIMB_MASK], [1]
        add_magnitudes(a, b)
        assert a == [LIMB_MASK]
        assert b == [1]

    def test_random_against_native(self) -> None:
        rng = random.Random(SEED)
        for _ in range(200):
            x = rng.getrandbits(rng.randint(1, 200))
            y = rng.getrandbits(rng.randint(1, 200))
            assert val(add_magnitudes(mag(x), mag(y))) == x + y


class TestSubMagnitudes:
    """Тесты sub_magnitudes"""

    def test_borrow_across_limbs(self) -> None:
        assert sub_magnitudes([0, 0, 1], [1]) == [LIMB_MASK, LIMB_MASK]

    def test_result_trimmed(self) -> None:
        assert sub_magnitudes([5, 1], [5, 1]) == [0]
        assert sub_magnitudes([0, 1], [1]) == [LIMB_MASK]

    def test_smaller_minuend_raises(self) -> None:
        with pytest.raises(ValueError, match="requires a >= b"):
            sub_magnitudes([1], [2])
        with pytest.raises(ValueError, match="requires a >= b"):
            sub_magnitudes([1], [0, 1])

    def test_random_against_native(self) -> None:
        rng = random.Random(SEED + 1)
        for _ in range(200):
            x = rng.getrandbits(rng.randint(1, 200))
            y = rng.getrandbits(rng.randint(1, 200))
            big, small = max(x, y), min(x, y)
            assert val(sub_magnitudes(mag(big), mag(small))) == big - small


class TestIncrementAndComplement:
    """Тесты increment_limbs и complement_limbs"""

    def test_increment_simple(self) -> None:
        assert increment_limbs([5]) == [6]

    def test_increment_carries(self) -> None:
        assert increment_limbs([LIMB_MASK, 7]) == [0, 8]

    def test_increment_extends(self) -> None:
        assert increment_limbs([LIMB_MASK, LIMB_MASK]) == [0, 0, 1]

    def test_complement(self) -> None:
        assert complement_limbs([0, LIMB_MASK, 1]) == [LIMB_MASK, 0, LIMB_MASK - 1]


# =============================================================================
# ТЕСТЫ: Умножение
# =============================================================================


class TestMulMagnitudes:
    """Тесты mul_magnitudes"""

    def test_max_limb_square(self) -> None:
        """(2^32-1)^2 = 0xFFFFFFFE_00000001"""
        assert mul_magnitudes([LIMB_MASK], [LIMB_MASK]) == [1, LIMB_MASK - 1]

    def test_multiply_by_zero(self) -> None:
        assert mul_magnitudes([1, 2, 3], [0]) == [0]
        assert mul_magnitudes([0], [1, 2, 3]) == [0]

    def test_all_ones_operands(self) -> None:
        """Аккумулятор достигает 2^64 - 1 без потерь"""
        x = (1 << 128) - 1
        assert val(mul_magnitudes(mag(x), mag(x))) == x * x

    def test_random_against_native(self) -> None:
        rng = random.Random(SEED + 2)
        for _ in range(200):
            x = rng.getrandbits(rng.randint(1, 300))
            y = rng.getrandbits(rng.randint(1, 300))
            assert val(mul_magnitudes(mag(x), mag(y))) == x * y


class TestMulSmall:
    """Тесты mul_small"""

    def test_multiply_add(self) -> None:
        assert mul_small([12], 10, 3) == [123]

    def test_carry_extends(self) -> None:
        assert mul_small([LIMB_MASK], 2) == [LIMB_MASK - 1, 1]

    def test_zero_factor(self) -> None:
        assert mul_small([1, 2], 0) == [0]

    @pytest.mark.parametrize("factor", [1, 2, 10, 0x80000000, LIMB_MASK])
    def test_against_native(self, factor: int) -> None:
        x = 0x1234_5678_9ABC_DEF0_1357_9BDF
        assert val(mul_small(mag(x), factor, 7)) == x * factor + 7
