"""
BigInt — Знаковое целое произвольной точности

Представление sign-magnitude:
- sign: True для отрицательных значений
- magnitude: little-endian список 32-битных limbs

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Magnitude всегда trimmed: нет старших нулевых limbs, ноль — это [0]
2. Ноль никогда не бывает отрицательным
3. Каждый limb — беззнаковое 32-битное значение
4. Экземпляры не разделяют список limbs: копирование дублирует magnitude

Составные операторы (+=, -=, *=, //=, %=, &=, |=, ^=, <<=, >>=) являются
первичными: они реализуют алгоритмы и мутируют получателя in place.
Бинарные операторы копируют левый операнд и применяют составной оператор.
Поэтому BigInt изменяем и не хешируется (как list).

ДЕЛЕНИЕ:
    // и / — деление с усечением к нулю (не floor, в отличие от int)
    %     — a - (a // b) * b, знак остатка совпадает со знаком делимого
    >>    — арифметический сдвиг (округление к минус бесконечности)
"""

from typing import NamedTuple, Union

from src.core.bigint.conversion import (
    from_native,
    parse_decimal,
    render_decimal,
    to_native,
)
from src.core.bigint.division import knuth_division, simple_division
from src.core.bigint.errors import DivisionByZero
from src.core.bigint.limbs import (
    LIMB_MASK,
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    mul_magnitudes,
    sub_magnitudes,
    trim,
)
from src.core.bigint.twos_complement import (
    bitwise_and,
    bitwise_or,
    bitwise_xor,
    shift_left,
    shift_right,
)
from src.core.domain.limb_snapshot import LimbSnapshot

Operand = Union["BigInt", int]


class DivModResult(NamedTuple):
    """Результат divmod: частное с усечением к нулю и остаток."""

    quotient: "BigInt"
    remainder: "BigInt"


# =============================================================================
# BIGINT
# =============================================================================


class BigInt:
    """
    Знаковое целое произвольной точности.

    Конструирование:
        BigInt()           → 0
        BigInt(-7)         → из нативного int любого размера
        BigInt("-123")     → из десятичной строки (ParseError при ошибке)
        BigInt(other)      → независимая копия

    Examples:
        >>> str(BigInt("123456789012345678901234567890") + 1)
        '123456789012345678901234567891'
        >>> BigInt(-17) // 5, BigInt(-17) % 5
        (BigInt('-3'), BigInt('-2'))
    """

    def __init__(self, value: Union["BigInt", int, str] = 0):
        if isinstance(value, BigInt):
            self._sign = value._sign
            self._magnitude = list(value._magnitude)
        elif isinstance(value, int):
            self._sign, self._magnitude = from_native(value)
        elif isinstance(value, str):
            self._sign, self._magnitude = parse_decimal(value)
        else:
            raise TypeError(
                f"BigInt() argument must be BigInt, int or str, "
                f"got {type(value).__name__}"
            )

    @classmethod
    def from_limbs(cls, sign: bool, limbs: list[int]) -> "BigInt":
        """
        Конструирование из сырых limbs.

        Старшие нулевые limbs отбрасываются, отрицательный ноль
        нормализуется.

        Args:
            sign: True для отрицательного значения
            limbs: Little-endian limbs, каждый в [0, 2^32)

        Raises:
            ValueError: Если limbs пуст или содержит значение вне диапазона
        """
        if not limbs:
            raise ValueError("limbs must not be empty")
        for index, limb in enumerate(limbs):
            if not 0 <= limb <= LIMB_MASK:
                raise ValueError(
                    f"limbs[{index}] = {limb} is not a 32-bit unsigned value"
                )

        result = cls()
        result._sign = bool(sign)
        result._magnitude = list(limbs)
        result._normalize()
        return result

    @classmethod
    def from_snapshot(cls, snapshot: LimbSnapshot) -> "BigInt":
        """Восстановление значения из LimbSnapshot."""
        return cls.from_limbs(snapshot.sign, snapshot.limbs)

    def to_snapshot(self) -> LimbSnapshot:
        """Снимок (sign, limbs) для сериализации."""
        return LimbSnapshot(sign=self._sign, limbs=list(self._magnitude))

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> bool:
        """True для отрицательных значений."""
        return self._sign

    @property
    def limbs(self) -> list[int]:
        """Копия магнитуды (little-endian limbs)."""
        return list(self._magnitude)

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._magnitude)

    def is_simple(self) -> bool:
        """Магнитуда помещается в один limb."""
        return len(self._magnitude) == 1

    def copy(self) -> "BigInt":
        return BigInt(self)

    def _normalize(self) -> None:
        trim(self._magnitude)
        if is_zero_magnitude(self._magnitude):
            self._sign = False

    def __copy__(self) -> "BigInt":
        return BigInt(self)

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return BigInt(self)

    # -------------------------------------------------------------------------
    # Составные операторы (первичные)
    # -------------------------------------------------------------------------

    def _accumulate(self, sign: bool, magnitude: list[int]) -> None:
        """self += (sign, magnitude)."""
        if self._sign == sign:
            self._magnitude = add_magnitudes(self._magnitude, magnitude)
        elif compare_magnitudes(self._magnitude, magnitude) >= 0:
            self._magnitude = sub_magnitudes(self._magnitude, magnitude)
        else:
            self._magnitude = sub_magnitudes(magnitude, self._magnitude)
            self._sign = sign
        self._normalize()

    def __iadd__(self, other: Operand) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._accumulate(rhs._sign, rhs._magnitude)
        return self

    def __isub__(self, other: Operand) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._accumulate(not rhs._sign, rhs._magnitude)
        return self

    def __imul__(self, other: Operand) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        sign = self._sign != rhs._sign
        self._magnitude = mul_magnitudes(self._magnitude, rhs._magnitude)
        self._sign = sign
        self._normalize()
        return self

    def _quotient_magnitude(self, divisor: "BigInt") -> list[int]:
        if divisor.is_zero():
            raise DivisionByZero("Division by zero")
        if len(self._magnitude) < len(divisor._magnitude):
            return [0]
        if divisor.is_simple():
            quotient, _ = simple_division(self._magnitude, divisor._magnitude[0])
            return quotient
        return knuth_division(self._magnitude, divisor._magnitude)

    def __ifloordiv__(self, other: Operand) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        sign = self._sign != rhs._sign
        self._magnitude = self._quotient_magnitude(rhs)
        self._sign = sign
        self._normalize()
        return self

    __itruediv__ = __ifloordiv__

    def __imod__(self, other: Operand) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        product = (self // rhs) * rhs
        self -= product
        return self

    def _apply_bitwise(self, other: Operand, operation) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._sign, self._magnitude = operation(
            self._sign, self._magnitude, rhs._sign, rhs._magnitude
        )
        return self

    def __iand__(self, other: Operand) -> "BigInt":
        return self._apply_bitwise(other, bitwise_and)

    def __ior__(self, other: Operand) -> "BigInt":
        return self._apply_bitwise(other, bitwise_or)

    def __ixor__(self, other: Operand) -> "BigInt":
        return self._apply_bitwise(other, bitwise_xor)

    def __ilshift__(self, other: Operand) -> "BigInt":
        amount = _shift_amount(other)
        if amount is None:
            return NotImplemented
        if amount < 0:
            return self.__irshift__(-amount)
        self._magnitude = shift_left(self._magnitude, amount)
        self._normalize()
        return self

    def __irshift__(self, other: Operand) -> "BigInt":
        amount = _shift_amount(other)
        if amount is None:
            return NotImplemented
        if amount < 0:
            return self.__ilshift__(-amount)
        self._sign, self._magnitude = shift_right(self._sign, self._magnitude, amount)
        return self

    def increment(self) -> "BigInt":
        """Префиксный ++: self += 1, возвращает self."""
        self._accumulate(False, [1])
        return self

    def decrement(self) -> "BigInt":
        """Префиксный --: self -= 1, возвращает self."""
        self._accumulate(True, [1])
        return self

    def post_increment(self) -> "BigInt":
        """Постфиксный ++: self += 1, возвращает копию прежнего значения."""
        previous = BigInt(self)
        self._accumulate(False, [1])
        return previous

    def post_decrement(self) -> "BigInt":
        """Постфиксный --: self -= 1, возвращает копию прежнего значения."""
        previous = BigInt(self)
        self._accumulate(True, [1])
        return previous

    # -------------------------------------------------------------------------
    # Бинарные операторы: копия + составной оператор
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "BigInt":
        return BigInt(self).__iadd__(other)

    def __sub__(self, other: Operand) -> "BigInt":
        return BigInt(self).__isub__(other)

    def __mul__(self, other: Operand) -> "BigInt":
        return BigInt(self).__imul__(other)

    def __floordiv__(self, other: Operand) -> "BigInt":
        return BigInt(self).__ifloordiv__(other)

    __truediv__ = __floordiv__

    def __mod__(self, other: Operand) -> "BigInt":
        return BigInt(self).__imod__(other)

    def __divmod__(self, other: Operand) -> DivModResult:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        quotient = self // rhs
        return DivModResult(quotient, self - quotient * rhs)

    def __and__(self, other: Operand) -> "BigInt":
        return BigInt(self).__iand__(other)

    def __or__(self, other: Operand) -> "BigInt":
        return BigInt(self).__ior__(other)

    def __xor__(self, other: Operand) -> "BigInt":
        return BigInt(self).__ixor__(other)

    def __lshift__(self, other: Operand) -> "BigInt":
        return BigInt(self).__ilshift__(other)

    def __rshift__(self, other: Operand) -> "BigInt":
        return BigInt(self).__irshift__(other)

    # Отражённые операторы: левый операнд — нативный int

    def __radd__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__iadd__(self)

    def __rsub__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__isub__(self)

    def __rmul__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__imul__(self)

    def __rfloordiv__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__ifloordiv__(self)

    __rtruediv__ = __rfloordiv__

    def __rmod__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__imod__(self)

    def __rdivmod__(self, other: int) -> DivModResult:
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__divmod__(self)

    def __rand__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__iand__(self)

    def __ror__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__ior__(self)

    def __rxor__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__ixor__(self)

    def __rlshift__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__ilshift__(self)

    def __rrshift__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__irshift__(self)

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigInt":
        return BigInt(self)

    def __neg__(self) -> "BigInt":
        result = BigInt(self)
        result._sign = not result._sign
        result._normalize()
        return result

    def __abs__(self) -> "BigInt":
        result = BigInt(self)
        result._sign = False
        return result

    def __invert__(self) -> "BigInt":
        """~x == -(x + 1)."""
        return -(self + 1)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return compare(self, rhs) == 0

    def __ne__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return compare(self, rhs) != 0

    def __lt__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return compare(self, rhs) < 0

    def __le__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return compare(self, rhs) <= 0

    def __gt__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return compare(self, rhs) > 0

    def __ge__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return compare(self, rhs) >= 0

    # Изменяемый тип: составные операторы мутируют значение
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return to_native(self._sign, self._magnitude)

    __index__ = __int__

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return render_decimal(self._sign, self._magnitude)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"


# =============================================================================
# ФУНКЦИИ МОДУЛЯ
# =============================================================================


def _coerce(value: object) -> BigInt | None:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt(value)
    return None


def _shift_amount(value: object) -> int | None:
    if isinstance(value, BigInt):
        return int(value)
    if isinstance(value, int):
        return value
    return None


def compare(a: BigInt, b: BigInt) -> int:
    """
    Полный порядок над знаковыми значениями.

    Алгоритм:
        1. Ноль равен нулю независимо от знака
        2. Отрицательное меньше неотрицательного
        3. При одинаковых знаках сравниваются магнитуды (длина, затем limbs
           от старшего к младшему); для отрицательных результат инвертируется

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if a.is_zero() and b.is_zero():
        return 0
    if a.sign != b.sign:
        return -1 if a.sign else 1

    order = compare_magnitudes(a._magnitude, b._magnitude)
    return -order if a.sign else order


def to_string(value: BigInt) -> str:
    """Десятичное представление: необязательный '-', без ведущих нулей."""
    return str(value)
