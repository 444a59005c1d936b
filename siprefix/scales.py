"""
Conversion scales: factor tables and strategy dispatch per numeric representation.

A scale maps an exponent delta (source - target) to a Resolution, the triple of
delta, power-of-ten factor and application strategy, and applies it to values:

    FLOAT   IEEE-754 binary64, never raises, overflow saturates to ±inf, NaN propagates
    INT32   32-bit signed range, truncation toward zero, factor ceiling 10⁹
    INT64   64-bit signed range, truncation toward zero, factor ceiling 10¹⁸
    BIGINT  Python int, exact, truncation toward zero, no ceiling

The strategy depends only on the sign of the delta:

    delta < 0   DIVIDE_TRUNCATE   value / factor, fractional part discarded
    delta = 0   IDENTITY          value unchanged, factor never consulted
    delta > 0   MULTIPLY_CHECKED  value * factor, bounded scales raise on overflow

Truncation toward zero is the only rounding mode of the integer scales.

All tables are built once at import and are never mutated, so scales and
resolutions can be shared freely between threads.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import StrEnum, unique
from typing import Any, Callable, Generic, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ConversionOverflowError, ConversionRangeError
from .numeric import SupportsIndex, std_float, std_int
from .prefixes import MAX_EXPONENT, MIN_EXPONENT, SiPrefix, exponent_delta
from .tools import fmt_type, fmt_value

__all__ = [
    "Strategy",
    "Numeric",
    "Resolution",
    "Scale",
    "FloatScale",
    "BoundedIntScale",
    "BigIntScale",
    "FLOAT",
    "INT32",
    "INT64",
    "BIGINT",
    "strategy_for",
    "scale_for",
]

# @formatter:off

MAX_DELTA = MAX_EXPONENT - MIN_EXPONENT     # 60

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1

# Largest power of ten representable by the width
INT32_MAX_EXPONENT = 9
INT64_MAX_EXPONENT = 18

# 10⁻⁶⁰ ... 10⁶⁰, each the binary64 nearest to the decimal literal, index = delta + MAX_DELTA
_FLOAT_FACTORS = tuple(float(f"1e{exp}") for exp in range(-MAX_DELTA, MAX_DELTA + 1))

# 10¹ ... 10⁶⁰, magnitude only, index = |delta| - 1
_INT_FACTORS = tuple(10 ** exp for exp in range(1, MAX_DELTA + 1))

# @formatter:on

N = TypeVar("N", int, float)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Strategy(StrEnum):
    """How a resolved factor is applied to a value, selected by the sign of the exponent delta."""
    DIVIDE_TRUNCATE = "divide_truncate"
    IDENTITY = "identity"
    MULTIPLY_CHECKED = "multiply_checked"


_STRATEGY_BY_SIGN = (Strategy.DIVIDE_TRUNCATE, Strategy.IDENTITY, Strategy.MULTIPLY_CHECKED)


@unique
class Numeric(StrEnum):
    """
    Numeric representations a conversion can run in.

    Attributes:
        AUTO (str)   : BIGINT for integer values, FLOAT for everything else
        FLOAT (str)  : IEEE-754 double precision
        INT32 (str)  : 32-bit signed integer range
        INT64 (str)  : 64-bit signed integer range
        BIGINT (str) : Arbitrary-precision integer
    """
    AUTO = "auto"
    FLOAT = "float"
    INT32 = "int32"
    INT64 = "int64"
    BIGINT = "bigint"


@dataclass(frozen=True)
class Resolution(Generic[N]):
    """
    A resolved conversion: exponent delta, scale factor and strategy for one scale.

    Created by Scale.resolve() and cached by fixed converters; apply() only runs the strategy.
    """

    delta: int
    factor: N
    strategy: Strategy
    scale: "Scale[N]" = field(repr=False, compare=False)
    _operator: Callable[[N, N], N] = field(repr=False, compare=False)

    def apply(self, value: Any) -> N:
        """Coerce value to the scale's representation and apply the strategy."""
        return self._operator(self.scale.coerce(value), self.factor)


class Scale(ABC, Generic[N]):
    """
    Factor resolver and conversion engine for one numeric representation.

    Subclasses provide value coercion, the factor lookup and the strategy table.
    """

    numeric: Numeric

    def __init__(self, numeric: Numeric, operators: dict[Strategy, Callable[[N, N], N]]):
        self.numeric = numeric
        self._operators = operators

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.numeric.value!r})"

    @abstractmethod
    def coerce(self, value: Any) -> N:
        """Normalize value to this scale's representation, raising TypeError on absent or invalid input."""
        raise NotImplementedError

    @abstractmethod
    def factor(self, delta: int) -> N:
        """Power-of-ten factor for the magnitude of delta."""
        raise NotImplementedError

    def resolve(self, delta: int) -> Resolution[N]:
        """
        Resolve factor and strategy for an exponent delta in [-60, 60].

        Raises:
            TypeError: If delta is not an int.
            ValueError: If delta is outside the range spanned by SI prefixes.
            ConversionRangeError: Bounded scales only, if the factor exceeds the width ceiling.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise TypeError(f"exponent delta must be an int, got {fmt_type(delta)}")
        if not -MAX_DELTA <= delta <= MAX_DELTA:
            raise ValueError(f"exponent delta must be in [{-MAX_DELTA}, {MAX_DELTA}], got {fmt_value(delta)}")

        strategy = strategy_for(delta)
        return Resolution(
            delta=delta,
            factor=self.factor(delta),
            strategy=strategy,
            scale=self,
            _operator=self._operators[strategy],
        )

    def convert(self, source: SiPrefix | str | int, target: SiPrefix | str | int, value: Any) -> N:
        """
        Convert value expressed with the source prefix to the target prefix.

        Prefixes may be SiPrefix members, symbols, names or exponents, see as_prefix().
        Factor and operator are looked up directly, no Resolution is built per call.

        Examples:
            >>> INT64.convert(SiPrefix.KILO, SiPrefix.UNIT, 3)
            3000
            >>> FLOAT.convert("k", "", 2.5)
            2500.0
        """
        delta = exponent_delta(source, target)
        value = self.coerce(value)
        return self._operators[strategy_for(delta)](value, self.factor(delta))


class FloatScale(Scale[float]):
    """
    IEEE-754 double precision scale.

    Every conversion is factor * value with the factor from a dense 121-entry table,
    so downscaling multiplies by 10⁻ᵏ rather than dividing by 10ᵏ. Overflow gives ±inf,
    underflow gives ±0.0 and NaN propagates; no arithmetic error is ever raised.
    """

    def __init__(self):
        super().__init__(Numeric.FLOAT, {
            Strategy.DIVIDE_TRUNCATE: operator.mul,
            Strategy.IDENTITY: _identity,
            Strategy.MULTIPLY_CHECKED: operator.mul,
        })

    def coerce(self, value: Any) -> float:
        return std_float(value)

    def factor(self, delta: int) -> float:
        return _FLOAT_FACTORS[delta + MAX_DELTA]


class BoundedIntScale(Scale[int]):
    """
    Fixed-width signed integer scale emulating 32-bit or 64-bit machine integers.

    Inputs outside the width and products that do not fit raise ConversionOverflowError;
    factors beyond 10^max_exponent raise ConversionRangeError, also when scaling down.
    """

    def __init__(self, numeric: Numeric, bits: int, max_exponent: int):
        super().__init__(numeric, {
            Strategy.DIVIDE_TRUNCATE: _divide_truncate,
            Strategy.IDENTITY: _identity,
            Strategy.MULTIPLY_CHECKED: self._multiply_checked,
        })
        self.bits = bits
        self.min_value = -(2 ** (bits - 1))
        self.max_value = 2 ** (bits - 1) - 1
        self.max_exponent = max_exponent
        self._factors = _INT_FACTORS[:max_exponent]

    def coerce(self, value: Any) -> int:
        value = std_int(value)
        if not self.min_value <= value <= self.max_value:
            raise ConversionOverflowError(value, None, self.bits)
        return value

    def factor(self, delta: int) -> int:
        if delta == 0:
            return 1
        index = abs(delta) - 1
        if index >= len(self._factors):
            raise ConversionRangeError(delta, self.max_exponent, self.bits)
        return self._factors[index]

    def _multiply_checked(self, value: int, factor: int) -> int:
        product = value * factor
        if not self.min_value <= product <= self.max_value:
            raise ConversionOverflowError(value, factor, self.bits)
        return product


class BigIntScale(Scale[int]):
    """
    Arbitrary-precision integer scale.

    Downscaling is exact division discarding the remainder (truncation toward zero),
    upscaling is plain multiplication; neither can fail.
    """

    def __init__(self):
        super().__init__(Numeric.BIGINT, {
            Strategy.DIVIDE_TRUNCATE: _divide_truncate,
            Strategy.IDENTITY: _identity,
            Strategy.MULTIPLY_CHECKED: operator.mul,
        })

    def coerce(self, value: Any) -> int:
        return std_int(value)

    def factor(self, delta: int) -> int:
        if delta == 0:
            return 1
        return _INT_FACTORS[abs(delta) - 1]


# Methods --------------------------------------------------------------------------------------------------------------

def strategy_for(delta: int) -> Strategy:
    """
    Application strategy for an exponent delta, by its sign only.

    Examples:
        >>> strategy_for(-3)
        <Strategy.DIVIDE_TRUNCATE: 'divide_truncate'>
        >>> strategy_for(0)
        <Strategy.IDENTITY: 'identity'>
    """
    return _STRATEGY_BY_SIGN[(delta > 0) - (delta < 0) + 1]


def scale_for(numeric: "Numeric | str | Scale", value: Any = None) -> Scale:
    """
    Scale for a representation selector.

    Numeric.AUTO picks BIGINT for int values (and types implementing __index__) and
    FLOAT for anything else, so the value decides; bools and None are left for the
    scale's coerce() to reject.

    Raises:
        ValueError: If numeric is a string naming no representation.
        TypeError: If numeric is neither a Numeric, a str nor a Scale.
    """
    if isinstance(numeric, Scale):
        return numeric

    if not isinstance(numeric, str):
        raise TypeError(f"numeric must be a Numeric, str or Scale, got {fmt_type(numeric)}")

    try:
        numeric = Numeric(numeric)
    except ValueError:
        raise ValueError(
            f"Invalid numeric representation: {fmt_value(numeric)}, "
            f"expected one of {tuple(n.value for n in Numeric)}"
        ) from None

    if numeric is Numeric.AUTO:
        is_integer = isinstance(value, (int, SupportsIndex))
        return BIGINT if is_integer else FLOAT

    return _SCALES[numeric]


# Private Methods ------------------------------------------------------------------------------------------------------

def _identity(value: N, factor: N) -> N:
    return value


def _divide_truncate(value: int, factor: int) -> int:
    """Integer division rounding toward zero, unlike floor division for negative values."""
    quotient = abs(value) // factor
    return quotient if value >= 0 else -quotient


# Scales ---------------------------------------------------------------------------------------------------------------

FLOAT = FloatScale()
INT32 = BoundedIntScale(Numeric.INT32, bits=32, max_exponent=INT32_MAX_EXPONENT)
INT64 = BoundedIntScale(Numeric.INT64, bits=64, max_exponent=INT64_MAX_EXPONENT)
BIGINT = BigIntScale()

_SCALES = {
    Numeric.FLOAT: FLOAT,
    Numeric.INT32: INT32,
    Numeric.INT64: INT64,
    Numeric.BIGINT: BIGINT,
}
