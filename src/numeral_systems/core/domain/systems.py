"""
Systems — Предопределённые алфавиты систем счисления

Статические данные конфигурации; каждая строка — допустимый алфавит для Converter.
"""

from typing import Final

DECIMAL: Final[str] = "0123456789"
BINARY: Final[str] = "01"
BINARY_EMOJI: Final[str] = "👎👍"
UNARY_VERTICAL_BAR: Final[str] = "|"
HEXA_LOWER: Final[str] = "0123456789abcdef"
HEXA_UPPER: Final[str] = "0123456789ABCDEF"
OCTAL: Final[str] = "01234567"

# https://en.wikipedia.org/wiki/Base62
BASE62: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

# https://en.wikipedia.org/wiki/Base64 (порядок цифр без padding "=")
BASE64: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# Имя системы в реестре → алфавит
BUILTIN_SYSTEMS: Final[dict[str, str]] = {
    "binary": BINARY,
    "octal": OCTAL,
    "decimal": DECIMAL,
    "hexa_lower": HEXA_LOWER,
    "hexa_upper": HEXA_UPPER,
    "base62": BASE62,
    "base64": BASE64,
    "binary_emoji": BINARY_EMOJI,
    "unary_vertical_bar": UNARY_VERTICAL_BAR,
}
