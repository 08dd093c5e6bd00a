"""
Core math modules для numeral_systems

Границы и проверки диапазона safe integers.
"""

from numeral_systems.core.math.safe_integers import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    check_safe_integer,
    exceeds_safe_magnitude,
    is_safe_integer,
)

__all__ = [
    # Constants
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Functions
    "check_safe_integer",
    "exceeds_safe_magnitude",
    "is_safe_integer",
]
