"""
Safe Integers — Границы и проверки целочисленного диапазона

Конвертер работает только с целыми числами, точно представимыми в IEEE 754
double: [-(2**53 - 1), 2**53 - 1]. Python int не ограничен по размеру,
но граница соблюдается намеренно: значения за её пределами отклоняются,
а не кодируются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Диапазон симметричен: MIN_SAFE_INTEGER == -MAX_SAFE_INTEGER
2. bool не считается целым числом (True/False отклоняются)
3. float и Fraction принимаются только если конечны и точно целочисленны (3.0 → 3)
4. Значение вне диапазона → OutOfRange, никогда не усечение
"""

import math
from numbers import Integral, Real
from typing import Any, Final

from numeral_systems.core.errors import OutOfRange

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

# Number.MAX_SAFE_INTEGER: наибольшее n, для которого n и n + 1 различимы в double
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Симметричная нижняя граница
MIN_SAFE_INTEGER: Final[int] = -MAX_SAFE_INTEGER


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_safe_integer(value: Any) -> bool:
    """
    Проверка, является ли значение целым числом в диапазоне safe integers.

    Args:
        value: Проверяемое значение (любого типа)

    Returns:
        True если value целое (int или целочисленный float), не bool,
        и MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER

    Examples:
        >>> is_safe_integer(42)
        True
        >>> is_safe_integer(2**53)
        False
        >>> is_safe_integer(1.5)
        False
        >>> is_safe_integer(True)
        False
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, Integral):
        return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
        return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER

    if isinstance(value, Real):
        # Fraction и прочие Real: целочисленность без округления через float
        try:
            if value != math.floor(value):
                return False
        except (ValueError, OverflowError):
            return False
        return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER

    return False


def check_safe_integer(value: Any) -> int:
    """
    Валидация и нормализация значения к int в диапазоне safe integers.

    Args:
        value: Проверяемое значение

    Returns:
        value как int (целочисленный float приводится к int, -0.0 → 0)

    Raises:
        TypeError: Если value не число (str, None, bool, ...)
        OutOfRange: Если value не целое или вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"expected an integer, got {type(value).__name__}: {value!r}"
        )

    if not is_safe_integer(value):
        raise OutOfRange(value, MIN_SAFE_INTEGER, MAX_SAFE_INTEGER)

    return int(value)


def exceeds_safe_magnitude(magnitude: int) -> bool:
    """
    Проверка, что натуральная величина не может дать safe integer ни с каким знаком.

    Диапазон симметричен, поэтому достаточно сравнить с MAX_SAFE_INTEGER.
    """
    return magnitude > MAX_SAFE_INTEGER
