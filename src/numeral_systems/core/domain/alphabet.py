"""
Alphabet — Разбор и валидация алфавита системы счисления

Алфавит — упорядоченная последовательность уникальных символов (Unicode
code points). Первый символ — нулевая цифра, длина алфавита — основание.
Строка разбивается на code points, а не на байты, поэтому пиктограммы
(например, "👍") считаются одной цифрой.
"""

from collections.abc import Sequence

from numeral_systems.core.errors import InvalidAlphabet


def split_symbols(text: str | Sequence[str]) -> list[str]:
    """
    Разбиение входа на список символов.

    Строка разбивается на code points; любая другая последовательность
    копируется как есть (элементы уже являются символами).
    """
    return list(text)


def parse_alphabet(alphabet: str | Sequence[str]) -> tuple[str, ...]:
    """
    Разбор и валидация алфавита.

    Args:
        alphabet: Строка цифр в порядке возрастания ("01", "0123456789")
            или последовательность односимвольных строк

    Returns:
        Кортеж символов; индекс символа равен значению цифры

    Raises:
        InvalidAlphabet: Если алфавит пуст, содержит повторы или элемент,
            не являющийся одиночным символом
    """
    if isinstance(alphabet, (bytes, bytearray)) or not isinstance(alphabet, Sequence):
        raise InvalidAlphabet(alphabet, "expected a string or a sequence of symbols")

    symbols = split_symbols(alphabet)

    if len(symbols) < 1:
        raise InvalidAlphabet(alphabet, "alphabet is empty")

    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidAlphabet(alphabet, f"{symbol!r} is not a single symbol")

    if len(set(symbols)) != len(symbols):
        raise InvalidAlphabet(alphabet, "alphabet contains duplicate symbols")

    return tuple(symbols)
