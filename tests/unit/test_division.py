"""
Тесты для модуля Division — деление магнитуд

Проверяет:
1. Быстрый путь simple_division (делитель из одного limb)
2. Шаги Algorithm D: normalize, trial, smaller, difference
3. knuth_division против нативного int, включая случаи коррекции цифры
4. Деление на ноль
"""

import logging
import random

import pytest

from src.core.bigint.conversion import from_native, to_native
from src.core.bigint.division import (
    difference,
    knuth_division,
    normalize,
    simple_division,
    smaller,
    trial,
)
from src.core.bigint.errors import DivisionByZero
from src.core.bigint.limbs import LIMB_BASE, LIMB_MASK

SEED = 0xD1F


def mag(value: int) -> list[int]:
    return from_native(value)[1]


def val(magnitude: list[int]) -> int:
    return to_native(False, magnitude)


# =============================================================================
# ТЕСТЫ: Быстрый путь
# =============================================================================


class TestSimpleDivision:
    """Тесты simple_division"""

    def test_single_limb(self) -> None:
        assert simple_division([123], 10) == ([12], 3)

    def test_multi_limb_dividend(self) -> None:
        quotient, remainder = simple_division([0, 1], 2)
        assert quotient == [0x80000000]
        assert remainder == 0

    def test_remainder_within_divisor(self) -> None:
        """Остаток всегда в [0, divisor)"""
        rng = random.Random(SEED)
        for _ in range(200):
            x = rng.getrandbits(rng.randint(1, 256))
            d = rng.randint(1, LIMB_MASK)
            quotient, remainder = simple_division(mag(x), d)
            assert 0 <= remainder < d
            assert val(quotient) == x // d
            assert remainder == x % d

    def test_quotient_trimmed(self) -> None:
        assert simple_division([5, 1], LIMB_MASK) == ([1], 6)

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(DivisionByZero, match="Division by zero"):
            simple_division([5], 0)

    def test_divisor_out_of_limb_range(self) -> None:
        with pytest.raises(ValueError, match="fit in one limb"):
            simple_division([5], LIMB_BASE)

    def test_does_not_mutate_dividend(self) -> None:
        dividend = [7, 9]
        simple_division(dividend, 3)
        assert dividend == [7, 9]


# =============================================================================
# ТЕСТЫ: Шаги Algorithm D
# =============================================================================


class TestNormalize:
    """Тесты normalize"""

    def test_divisor_top_limb_at_least_half_base(self) -> None:
        rng = random.Random(SEED + 1)
        for _ in range(100):
            divisor = mag(rng.getrandbits(rng.randint(33, 200)) | (1 << 32))
            dividend = mag(rng.getrandbits(rng.randint(33, 300)))
            remainder, norm_divisor = normalize(dividend, divisor)
            assert len(norm_divisor) == len(divisor)
            assert norm_divisor[-1] >= LIMB_BASE // 2
            assert len(remainder) == len(dividend) + 1

    def test_scales_both_operands_by_same_factor(self) -> None:
        dividend, divisor = mag(10**30), mag(3 << 40)
        remainder, norm_divisor = normalize(dividend, divisor)
        factor = val(norm_divisor) // val(divisor)
        assert val(norm_divisor) == val(divisor) * factor
        assert val(remainder) == val(dividend) * factor


class TestTrial:
    """Тесты trial"""

    def test_clamped_to_limb_max(self) -> None:
        remainder = [0, LIMB_MASK, LIMB_MASK]
        d2 = (0x80000000 << 32) | 0
        assert trial(remainder, 0, 2, d2) == LIMB_MASK

    def test_window_divided_by_divisor_head(self) -> None:
        # (3 * 2^64 + 5) // 2^63 = 6
        remainder = [5, 0, 3]
        d2 = 0x80000000 << 32
        assert trial(remainder, 0, 2, d2) == 6


class TestSmallerAndDifference:
    """Тесты smaller и difference"""

    def test_smaller_compares_window_from_top(self) -> None:
        remainder = [9, 1, 2, 3]
        assert smaller(remainder, [1, 2, 4], 1, 2)
        assert not smaller(remainder, [1, 2, 3], 1, 2)
        assert not smaller(remainder, [0, 2, 3], 1, 2)

    def test_difference_with_borrow_in_place(self) -> None:
        remainder = [7, 0, 0, 1]
        difference(remainder, [1, 0, 0], 1, 2)
        assert remainder == [7, LIMB_MASK, LIMB_MASK, 0]


# =============================================================================
# ТЕСТЫ: Algorithm D
# =============================================================================


class TestKnuthDivision:
    """Тесты knuth_division против нативного int"""

    def test_dividend_shorter_than_divisor(self) -> None:
        assert knuth_division([5], [0, 1]) == [0]

    def test_equal_operands(self) -> None:
        x = mag(0x1234_5678_9ABC_DEF0)
        assert knuth_division(x, x) == [1]

    def test_single_limb_divisor_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 2 limbs"):
            knuth_division([5, 5], [7])

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(DivisionByZero):
            knuth_division([5, 5], [0])

    def test_random_against_native(self) -> None:
        rng = random.Random(SEED + 2)
        for _ in range(300):
            y = rng.getrandbits(rng.randint(33, 256)) | (1 << 32)
            x = rng.getrandbits(rng.randint(1, 512))
            assert val(knuth_division(mag(x), mag(y))) == x // y

    @pytest.mark.parametrize(
        "x, y",
        [
            # Пробная цифра переоценивается: требуется коррекция
            ((1 << 128) - 1, (1 << 64) + (1 << 32) - 1),
            ((1 << 96), (1 << 64) - 1),
            (0x7FFF_FFFF_8000_0000_0000_0000_0000_0000, 0x8000_0000_FFFF_FFFF),
            ((1 << 192) - 1, (1 << 96) + 1),
            (0xFFFF_FFFF_FFFF_FFFF_FFFF_FFFF, 0xFFFF_FFFF_0000_0000_0000_0001),
        ],
    )
    def test_boundary_patterns(self, x: int, y: int) -> None:
        assert val(knuth_division(mag(x), mag(y))) == x // y

    def test_all_ones_patterns(self) -> None:
        """Делимые и делители из единиц — худший случай пробной цифры"""
        for x_bits in range(64, 300, 37):
            for y_bits in range(33, x_bits, 29):
                x = (1 << x_bits) - 1
                y = (1 << y_bits) - 1
                assert val(knuth_division(mag(x), mag(y))) == x // y

    def test_correction_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Коррекция пробной цифры пишется в debug-лог"""
        rng = random.Random(SEED + 3)
        with caplog.at_level(logging.DEBUG, logger="src.core.bigint.division"):
            for _ in range(300):
                y = rng.getrandbits(rng.randint(33, 128)) | (1 << 32)
                x = rng.getrandbits(rng.randint(128, 256))
                knuth_division(mag(x), mag(y))
        for record in caplog.records:
            assert "corrected" in record.getMessage()
