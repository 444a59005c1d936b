"""
Arithmetic errors raised by the bounded-integer conversion paths.

Precondition failures (absent or wrongly typed prefixes and values) use the builtin
TypeError and ValueError. The classes here cover failures of the conversion itself:

    ConversionError             base class, an ArithmeticError
    ├── ConversionRangeError    required scale factor exceeds the width ceiling
    └── ConversionOverflowError scaled value does not fit the width, also an OverflowError

Floating-point and arbitrary-precision conversions never raise these.
"""

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value

__all__ = [
    "ConversionError",
    "ConversionRangeError",
    "ConversionOverflowError",
]


# Classes --------------------------------------------------------------------------------------------------------------

class ConversionError(ArithmeticError):
    """Base class for conversion failures of bounded-width integer scales."""


class ConversionRangeError(ConversionError):
    """
    The scale factor 10^|delta| is beyond the largest power of ten the width can hold.

    Attributes:
        delta: Exponent difference source - target that was requested.
        max_exponent: Largest supported |delta| for the width (9 for int32, 18 for int64).
        bits: Integer width in bits.
    """

    def __init__(self, delta: int, max_exponent: int, bits: int):
        self.delta = delta
        self.max_exponent = max_exponent
        self.bits = bits
        super().__init__(
            f"required conversion factor 10^{abs(delta)} exceeds supported range "
            f"for int{bits} (max 10^{max_exponent}), exponent delta was {delta}"
        )


class ConversionOverflowError(ConversionError, OverflowError):
    """
    A value or a scaled product lies outside the representable range of the width.

    Attributes:
        value: The input value.
        factor: The scale factor applied, or None if the input itself was out of range.
        bits: Integer width in bits.
    """

    def __init__(self, value: int, factor: int | None, bits: int):
        self.value = value
        self.factor = factor
        self.bits = bits
        if factor is None:
            message = f"value {fmt_value(value)} out of range for int{bits}"
        else:
            message = f"int{bits} overflow: {fmt_value(value)} * {factor} is out of range"
        super().__init__(message)
