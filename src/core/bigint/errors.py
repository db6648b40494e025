"""
Errors — Таксономия ошибок BigInt

Две ошибки видны вызывающей стороне:
- DivisionByZero: деление или остаток по нулевому делителю
- ParseError: некорректная десятичная строка

Переполнение внутри limb ошибкой не является и наружу не выходит.
"""


class BigIntError(Exception):
    """Базовый класс ошибок BigInt."""

    pass


class DivisionByZero(BigIntError, ZeroDivisionError):
    """
    Деление на ноль.

    Поднимается операциями //, /, %, divmod и быстрым путём деления на один
    limb. Наследует ZeroDivisionError, чтобы код, ожидающий встроенную
    семантику int, продолжал работать.
    """

    pass


class ParseError(BigIntError, ValueError):
    """
    Ошибка разбора десятичной строки.

    Допустимый формат: ^-?[0-9]+$. Любой другой символ (включая пробелы,
    '+' и '-' не в первой позиции) приводит к ParseError.
    """

    def __init__(self, text: str, position: int, reason: str):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(
            f"Parsing error at position {position} in {text!r}: {reason}"
        )
