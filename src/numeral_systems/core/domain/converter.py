"""
Converter — Кодирование и декодирование целых чисел в произвольной системе счисления

Converter строится один раз для алфавита и переиспользуется для encode/decode.
Хранит две производные структуры:
- digit array: кортеж символов (индекс → символ), digit_array[0] — нулевая цифра
- value map:   словарь символ → индекс, точная инверсия digit array

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Состояние неизменяемо после конструктора (безопасно для общего доступа)
2. encode никогда не выдаёт ведущих нулей, кроме единственной нулевой цифры для 0
3. Пустая строка — результат encode только для base == 1 и value == 0
4. decode разбирает знак ровно один раз, по первому символу, до интерпретации цифр
5. decode никогда не возвращает отрицательный ноль
6. Результат вне [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER] → OutOfRange, без усечения

ЗНАКИ:
    Знак — литеральный ASCII "+" или "-", независимо от алфавита. Если алфавит
    сам содержит "+" или "-", первый символ всё равно считается знаком,
    а остаток декодируется как цифры. Для алфавита "-+" (0 = "-", 1 = "+"):
        "++-+"  → +("+-+")  == 0b101  == 5
        "+++-+" → +("++-+") == 0b1101 == 13
        "-++-+" → -("++-+") == -13
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final

from numeral_systems.core.domain.alphabet import parse_alphabet, split_symbols
from numeral_systems.core.errors import EmptyInput, InvalidDigit, OutOfRange
from numeral_systems.core.math.safe_integers import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    check_safe_integer,
    exceeds_safe_magnitude,
)
from numeral_systems.utils.logging import get_logger

logger = get_logger("converter")

# =============================================================================
# ЗНАКИ
# =============================================================================

SIGN_PLUS: Final[str] = "+"
SIGN_MINUS: Final[str] = "-"


# =============================================================================
# CONVERTER
# =============================================================================


class Converter:
    """
    Конвертер между целыми числами и строками в системе счисления,
    заданной произвольным непустым алфавитом.

    Examples:
        >>> Converter("01").encode(13)
        '1101'
        >>> Converter("0123456789").decode("-0007")
        -7
        >>> Converter("|").encode(3)
        '|||'
    """

    __slots__ = ("_digit_array", "_value_map")

    def __init__(self, alphabet: str | Sequence[str]):
        """
        Args:
            alphabet: Цифры в порядке возрастания, например "01" или "0123456789".
                Длина алфавита — основание системы, первый символ — нулевая цифра.

        Raises:
            InvalidAlphabet: Если алфавит пуст или содержит повторы
        """
        self._digit_array: tuple[str, ...] = parse_alphabet(alphabet)
        self._value_map: Mapping[str, int] = MappingProxyType(
            {symbol: index for index, symbol in enumerate(self._digit_array)}
        )
        logger.debug(
            "Converter created: base=%d zero_digit=%r",
            len(self._digit_array),
            self._digit_array[0],
        )

    def __repr__(self) -> str:
        return f"Converter({''.join(self._digit_array)!r})"

    @property
    def base(self) -> int:
        """Основание системы счисления (длина алфавита)."""
        return len(self._digit_array)

    @property
    def digits(self) -> list[str]:
        """Копия списка цифр; изменение копии не затрагивает конвертер."""
        return list(self._digit_array)

    # -------------------------------------------------------------------------
    # Натуральные числа (без знака)
    # -------------------------------------------------------------------------

    def _encode_natural(self, n: int) -> list[str]:
        # n >= 0 и уже проверено check_safe_integer
        if self.base == 1:
            return [self._digit_array[0]] * n

        values = []
        while n >= self.base:
            n, remainder = divmod(n, self.base)
            values.append(remainder)
        values.append(n)

        return [self._digit_array[value] for value in reversed(values)]

    def _decode_natural(
        self, symbols: list[str], text: str | Sequence[str], offset: int = 0
    ) -> int:
        # offset: число снятых знаковых символов; позиции в ошибках считаются по исходному text
        if self.base == 1:
            zero_digit = self._digit_array[0]
            for position, symbol in enumerate(symbols):
                if symbol != zero_digit:
                    raise InvalidDigit(symbol, offset + position, text)
            return len(symbols)

        if not symbols:
            raise EmptyInput(self.base)

        # Сначала все символы: InvalidDigit приоритетнее OutOfRange
        values = []
        for position, symbol in enumerate(symbols):
            value = self._value_map.get(symbol)
            if value is None:
                raise InvalidDigit(symbol, offset + position, text)
            values.append(value)

        result = 0
        for value in values:
            result = result * self.base + value
            if exceeds_safe_magnitude(result):
                raise OutOfRange(text, MIN_SAFE_INTEGER, MAX_SAFE_INTEGER)

        return result

    # -------------------------------------------------------------------------
    # Публичный API
    # -------------------------------------------------------------------------

    def encode(self, value: int) -> str:
        """
        Кодирование целого числа цифрами этого конвертера.

        Неотрицательные числа кодируются без знака, отрицательные получают
        префикс "-".

        Args:
            value: Целое число в [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER]

        Returns:
            Строка, представляющая value в данной системе счисления

        Raises:
            TypeError: Если value не число
            OutOfRange: Если value не целое или вне диапазона safe integers
        """
        n = check_safe_integer(value)

        if n >= 0:
            return "".join(self._encode_natural(n))

        return SIGN_MINUS + "".join(self._encode_natural(-n))

    def decode(self, text: str | Sequence[str]) -> int:
        """
        Декодирование строки цифр в целое число.

        Строка может начинаться со знака "+" или "-"; без знака число
        считается положительным. Знак разбирается до цифр, поэтому при
        алфавите "-+" строка "+++-+" читается как "+(++-+)".

        Args:
            text: Строка или последовательность символов

        Returns:
            Целое число, представленное строкой

        Raises:
            InvalidDigit: Если символ (после снятия знака) не входит в алфавит
            EmptyInput: Если натуральная часть пуста при base >= 2
            OutOfRange: Если результат вне диапазона safe integers
        """
        if isinstance(text, (bytes, bytearray)) or not isinstance(text, (str, Sequence)):
            raise TypeError(
                f"expected a string or a sequence of symbols, got {type(text).__name__}"
            )

        symbols = split_symbols(text)

        if symbols and symbols[0] == SIGN_PLUS:
            result = self._decode_natural(symbols[1:], text, offset=1)
        elif symbols and symbols[0] == SIGN_MINUS:
            result = -self._decode_natural(symbols[1:], text, offset=1)
        else:
            result = self._decode_natural(symbols, text)

        if not MIN_SAFE_INTEGER <= result <= MAX_SAFE_INTEGER:
            raise OutOfRange(result, MIN_SAFE_INTEGER, MAX_SAFE_INTEGER)

        return result


# =============================================================================
# ONE-SHOT ФУНКЦИИ
# =============================================================================


def encode(alphabet: str | Sequence[str], value: int) -> str:
    """Эквивалентно Converter(alphabet).encode(value)."""
    return Converter(alphabet).encode(value)


def decode(alphabet: str | Sequence[str], text: str | Sequence[str]) -> int:
    """Эквивалентно Converter(alphabet).decode(text)."""
    return Converter(alphabet).decode(text)
