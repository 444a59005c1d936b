"""
Standardize numeric inputs for the float and integer conversion scales.

Values from the Python stdlib and third-party libraries (Decimal, Fraction, NumPy scalars)
are normalized to plain Python float or int before any scaling happens, so each scale
only ever works with its native representation.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed float conversion."""

    def __float__(self) -> float: ...


@runtime_checkable
class SupportsIndex(Protocol):
    """Protocol for lossless integer conversion (NumPy integers and alike)."""

    def __index__(self) -> int: ...


def std_float(value) -> float:
    """
    Convert a numeric value to a Python float.

    Parameters
    ----------
    value : various
        Python int or float, or any type implementing __float__ (Decimal, Fraction,
        NumPy floating scalars). Python ints beyond the float range become inf.

    Returns
    -------
    float
        Special values (inf, -inf, nan) pass through unchanged.

    Raises
    ------
    TypeError
        If value is None, a bool, or does not support float conversion.

    Examples
    --------
    >>> std_float(3)
    3.0
    >>> from decimal import Decimal
    >>> std_float(Decimal("2.5"))
    2.5
    >>> std_float(float("nan"))
    nan
    """
    if value is None:
        raise TypeError("value must not be None")

    # bool is an int subclass, reject to catch bugs early
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if type(value) is float:
        return value

    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return float("inf") if value > 0 else float("-inf")

    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except OverflowError:
            # Fraction with a huge numerator, keep IEEE-754 saturation
            return float("inf") if value > 0 else float("-inf")
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or a type implementing __float__ (Decimal, Fraction, numpy floats)"
    )


def std_int(value) -> int:
    """
    Convert an integer-valued number to a Python int without any loss.

    Parameters
    ----------
    value : various
        Python int; types implementing __index__ (NumPy integers);
        integer-valued Decimal or Fraction (Decimal('42.0') -> 42).

    Returns
    -------
    int
        Exact value with arbitrary precision.

    Raises
    ------
    TypeError
        If value is None, a bool, a float, a Decimal/Fraction with a fractional part,
        or any other type. Floats are rejected because integer scales never round input.

    Examples
    --------
    >>> std_int(42)
    42
    >>> from decimal import Decimal
    >>> std_int(Decimal("1e3"))
    1000
    >>> from fractions import Fraction
    >>> std_int(Fraction(84, 2))
    42
    """
    if value is None:
        raise TypeError("value must not be None")

    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if type(value) is int:
        return value

    if isinstance(value, SupportsIndex):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Integer-valued Decimal/Fraction are exact integers, anything else would need rounding
    type_name = type(value).__name__
    if type_name in ("Decimal", "Fraction") and hasattr(value, "__int__"):
        try:
            as_int = int(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise TypeError(f"cannot convert {fmt_value(value)} to int: {e}") from e
        if value == as_int:
            return as_int
        raise TypeError(f"integer scales require an integer value, got {fmt_value(value)}")

    raise TypeError(
        f"unsupported integer type: {fmt_type(value)}. "
        f"Expected int, a type implementing __index__, or an integer-valued Decimal or Fraction"
    )
