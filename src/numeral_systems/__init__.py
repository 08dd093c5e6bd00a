"""
numeral_systems — обратимое преобразование целых чисел в строки
в произвольных системах счисления.

    >>> from numeral_systems import Converter, systems
    >>> Converter(systems.BINARY).encode(-13)
    '-1101'
"""

from numeral_systems.core.domain import systems
from numeral_systems.core.domain.converter import Converter, decode, encode
from numeral_systems.core.domain.definition import NumeralSystem
from numeral_systems.core.errors import (
    EmptyInput,
    InvalidAlphabet,
    InvalidDigit,
    NumeralSystemError,
    OutOfRange,
)
from numeral_systems.core.math.safe_integers import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from numeral_systems.registry import NumeralSystemRegistry, default_registry

__version__ = "1.0.0"

__all__ = [
    # Converter
    "Converter",
    "encode",
    "decode",
    # Errors
    "NumeralSystemError",
    "InvalidAlphabet",
    "InvalidDigit",
    "EmptyInput",
    "OutOfRange",
    # Range
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Named systems
    "NumeralSystem",
    "NumeralSystemRegistry",
    "default_registry",
    "systems",
]
