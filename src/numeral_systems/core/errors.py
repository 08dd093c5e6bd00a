"""
Errors — Таксономия ошибок конвертера систем счисления

Все ошибки наследуются от NumeralSystemError (подкласс ValueError), поэтому
код, который ловит ValueError для некорректных значений, продолжает работать.

- InvalidAlphabet: пустой алфавит, повторяющиеся или некорректные символы
- InvalidDigit:    символ вне алфавита при decode
- EmptyInput:      пустая натуральная часть при base >= 2
- OutOfRange:      значение вне диапазона safe integers
"""

from typing import Any


class NumeralSystemError(ValueError):
    """Базовая ошибка для всех операций с системами счисления."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidAlphabet(NumeralSystemError):
    """
    Алфавит не может задавать систему счисления.

    Причины: пустой алфавит, повторяющийся символ, элемент не является
    одиночным символом (code point).
    """

    def __init__(self, alphabet: Any, reason: str):
        self.alphabet = alphabet
        self.reason = reason
        super().__init__(f"invalid system [{alphabet!r}]: {reason}")


class InvalidDigit(NumeralSystemError):
    """Символ входной строки отсутствует в алфавите."""

    def __init__(self, symbol: str, position: int, text: Any):
        self.symbol = symbol
        self.position = position
        self.text = text
        super().__init__(
            f"invalid digit {symbol!r} at position {position} in {text!r}"
        )


class EmptyInput(NumeralSystemError):
    """Пустая натуральная часть не может быть декодирована при base >= 2."""

    def __init__(self, base: int):
        self.base = base
        super().__init__(f"cannot decode empty string with base {base} > 1")


class OutOfRange(NumeralSystemError):
    """Значение не является целым числом в диапазоне safe integers."""

    def __init__(self, value: Any, min_value: int, max_value: int):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"{value!r} is outside safe integers range [{min_value}, {max_value}]"
        )
