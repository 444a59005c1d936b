#
# SI Prefix Converters
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .prefixes import SiPrefix, as_prefix
from .scales import BIGINT, FLOAT, INT32, INT64, Numeric, Resolution, Scale, scale_for

__all__ = [
    "convert",
    "builder",
    "BuilderChoice",
    "ConverterBuilder",
    "PrefixConverter",
    "FixedSourceConverter",
    "FixedTargetConverter",
    "FixedConverter",
]

N = TypeVar("N", int, float)

PrefixLike = SiPrefix | str | int


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PrefixConverter(Generic[N]):
    """
    Base of reusable converters with one or both prefixes bound at construction.

    Converters are immutable and callable; convert() is an alias of __call__.
    The scale may be given as a Scale or as a Numeric name other than AUTO.
    """

    scale: Scale[N]

    def __post_init__(self):
        scale = self.scale
        if not isinstance(scale, Scale):
            if scale == Numeric.AUTO:
                raise ValueError("fixed converters need an explicit numeric representation, not 'auto'")
            scale = scale_for(scale)
        object.__setattr__(self, "scale", scale)

    @property
    def numeric(self) -> Numeric:
        return self.scale.numeric


@dataclass(frozen=True)
class FixedSourceConverter(PrefixConverter[N]):
    """
    Converter with a fixed source prefix; called with (target, value).

    Delta, factor and strategy are resolved on every call.

    Examples:
        >>> from_kilo = FixedSourceConverter(FLOAT, SiPrefix.KILO)
        >>> from_kilo(SiPrefix.UNIT, 2.5)
        2500.0
    """

    source: SiPrefix

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "source", as_prefix(self.source))

    def __call__(self, target: PrefixLike, value: Any) -> N:
        return self.scale.convert(self.source, target, value)

    def convert(self, target: PrefixLike, value: Any) -> N:
        return self(target, value)


@dataclass(frozen=True)
class FixedTargetConverter(PrefixConverter[N]):
    """
    Converter with a fixed target prefix; called with (source, value).

    Delta, factor and strategy are resolved on every call.

    Examples:
        >>> to_milli = FixedTargetConverter(INT64, SiPrefix.MILLI)
        >>> to_milli(SiPrefix.UNIT, 1234)
        1234000
    """

    target: SiPrefix

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "target", as_prefix(self.target))

    def __call__(self, source: PrefixLike, value: Any) -> N:
        return self.scale.convert(source, self.target, value)

    def convert(self, source: PrefixLike, value: Any) -> N:
        return self(source, value)


@dataclass(frozen=True)
class FixedConverter(PrefixConverter[N]):
    """
    Converter with both prefixes fixed; called with the value only.

    Delta, factor and strategy are resolved once at construction and cached in
    the resolution, so a call only coerces the value and applies the strategy.
    Bounded scales fail at construction if the factor exceeds the width ceiling.

    Examples:
        >>> km_to_m = FixedConverter(INT64, SiPrefix.KILO, SiPrefix.UNIT)
        >>> km_to_m(12)
        12000
        >>> km_to_m.resolution.factor
        1000
    """

    source: SiPrefix
    target: SiPrefix
    resolution: Resolution[N] = field(init=False, repr=False)

    def __post_init__(self):
        super().__post_init__()
        source = as_prefix(self.source)
        target = as_prefix(self.target)
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "resolution", self.scale.resolve(source.exponent - target.exponent))

    def __call__(self, value: Any) -> N:
        return self.resolution.apply(value)

    def convert(self, value: Any) -> N:
        return self.resolution.apply(value)


@dataclass(frozen=True)
class ConverterBuilder(Generic[N]):
    """Factory of fixed converters for one scale."""

    scale: Scale[N]

    def fixed_source_converter(self, source: PrefixLike) -> FixedSourceConverter[N]:
        """Converter remembering the source prefix, see FixedSourceConverter."""
        return FixedSourceConverter(self.scale, source)

    def fixed_target_converter(self, target: PrefixLike) -> FixedTargetConverter[N]:
        """Converter remembering the target prefix, see FixedTargetConverter."""
        return FixedTargetConverter(self.scale, target)

    def fixed_converter(self, source: PrefixLike, target: PrefixLike) -> FixedConverter[N]:
        """Converter with precomputed factor and strategy, see FixedConverter."""
        return FixedConverter(self.scale, source, target)


class BuilderChoice:
    """
    Entry point of the builder API, selects the numeric representation.

    Examples:
        >>> to_milli = builder().for_int64().fixed_target_converter(SiPrefix.MILLI)
        >>> to_milli(SiPrefix.UNIT, 1234)
        1234000
    """

    _builders = {scale.numeric: ConverterBuilder(scale) for scale in (FLOAT, INT32, INT64, BIGINT)}

    def for_float(self) -> ConverterBuilder[float]:
        return self._builders[Numeric.FLOAT]

    def for_int32(self) -> ConverterBuilder[int]:
        return self._builders[Numeric.INT32]

    def for_int64(self) -> ConverterBuilder[int]:
        return self._builders[Numeric.INT64]

    def for_bigint(self) -> ConverterBuilder[int]:
        return self._builders[Numeric.BIGINT]

    def for_numeric(self, numeric: Numeric | str) -> ConverterBuilder:
        """
        Builder for a representation given by name, e.g. 'int64'.

        Raises:
            ValueError: If numeric is 'auto' or names no representation.
        """
        if numeric == Numeric.AUTO:
            raise ValueError("builder needs an explicit numeric representation, not 'auto'")
        return self._builders[scale_for(numeric).numeric]


_builder_choice = BuilderChoice()


# Methods --------------------------------------------------------------------------------------------------------------

def builder() -> BuilderChoice:
    """Start the builder API: builder().for_float().fixed_converter(SiPrefix.KILO, SiPrefix.UNIT)."""
    return _builder_choice


def convert(
        source: PrefixLike,
        target: PrefixLike,
        value: Any,
        numeric: Numeric | str | Scale = Numeric.AUTO,
) -> Any:
    """
    Convert value expressed with the source prefix to the target prefix.

    Args:
        source: Prefix the value is currently expressed in, as SiPrefix, symbol, name or exponent.
        target: Prefix to convert to.
        value: The number to convert.
        numeric: Representation to compute in. AUTO (default) uses BIGINT for ints and
                 FLOAT for other values; pass "int32" or "int64" for fixed-width semantics.

    Returns:
        The converted value, float for FLOAT and int for the integer representations.
        Integer downscaling truncates toward zero.

    Raises:
        TypeError: If a prefix or the value is None or of an unsupported type.
        ValueError: If a prefix string or exponent names no SI prefix.
        ConversionRangeError: INT32/INT64 only, if the factor exceeds 10⁹ / 10¹⁸.
        ConversionOverflowError: INT32/INT64 only, if the value or the result does not fit.

        Both conversion errors derive from ConversionError; catch that to handle either.
        An upscale such as UNIT -> DECI of 10**18 on INT64 is an overflow, not a range error,
        since the factor 10 itself is within range.

    Examples:
        >>> convert(SiPrefix.KILO, SiPrefix.UNIT, 2.5)
        2500.0
        >>> convert("n", "m", 3_000_000)
        3
        >>> convert(SiPrefix.DECI, SiPrefix.UNIT, -15, numeric="int64")
        -1
    """
    return scale_for(numeric, value).convert(source, target, value)
