"""
Domain models and value objects.

Contains the Converter, alphabet parsing, predefined systems and NumeralSystem.
"""

from numeral_systems.core.domain import systems
from numeral_systems.core.domain.alphabet import parse_alphabet, split_symbols
from numeral_systems.core.domain.converter import (
    SIGN_MINUS,
    SIGN_PLUS,
    Converter,
    decode,
    encode,
)
from numeral_systems.core.domain.definition import NumeralSystem

__all__ = [
    # Alphabet
    "parse_alphabet",
    "split_symbols",
    # Converter
    "SIGN_MINUS",
    "SIGN_PLUS",
    "Converter",
    "encode",
    "decode",
    # Definition model
    "NumeralSystem",
    # Predefined alphabets
    "systems",
]
