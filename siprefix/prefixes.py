#
# SI Prefixes and Exponent Arithmetic
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .tools import fmt_type, fmt_value


# @formatter:off

class PrefixConf:
    """Alternative spellings accepted by as_prefix(), mapped to canonical symbols."""
    ALIASES = {
        "u": "µ",   # ASCII fallback for micro
        "μ": "µ",   # Greek small mu (U+03BC) -> micro sign (U+00B5)
    }


si_symbols = FrozenBiMap({
    -30: "q", -27: "r", -24: "y", -21: "z", -18: "a", -15: "f",
    -12: "p", -9: "n", -6: "µ", -3: "m", -2: "c", -1: "d", 0: "",
    1: "da", 2: "h", 3: "k", 6: "M", 9: "G", 12: "T",
    15: "P", 18: "E", 21: "Z", 24: "Y", 27: "R", 30: "Q",
})

valid_exponents = tuple(si_symbols.keys())
valid_symbols = tuple(sorted(si_symbols.values()))

MIN_EXPONENT = min(valid_exponents)
MAX_EXPONENT = max(valid_exponents)
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class SiPrefix(Enum):
    """
    SI prefixes from quecto (10⁻³⁰) to quetta (10³⁰).

    The member value is the decimal exponent; UNIT stands for the absence of a prefix (10⁰ = 1).

    Examples:
        >>> SiPrefix.KILO.exponent
        3
        >>> SiPrefix.MICRO.symbol
        'µ'
        >>> SiPrefix.from_symbol("da")
        <SiPrefix.DECA: 1>
    """
    QUECTO = -30
    RONTO = -27
    YOCTO = -24
    ZEPTO = -21
    ATTO = -18
    FEMTO = -15
    PICO = -12
    NANO = -9
    MICRO = -6
    MILLI = -3
    CENTI = -2
    DECI = -1
    UNIT = 0
    DECA = 1
    HECTO = 2
    KILO = 3
    MEGA = 6
    GIGA = 9
    TERA = 12
    PETA = 15
    EXA = 18
    ZETTA = 21
    YOTTA = 24
    RONNA = 27
    QUETTA = 30

    @property
    def exponent(self) -> int:
        """Decimal exponent of the prefix, e.g. 3 for kilo."""
        return self.value

    @property
    def symbol(self) -> str:
        """Unit symbol prefix, e.g. 'k' for kilo; empty string for UNIT."""
        return si_symbols[self.value]

    @property
    def factor(self) -> int | float:
        """
        The multiplier 10^exponent.

        Exact int for non-negative exponents, float otherwise.
        """
        return 10 ** self.value

    @classmethod
    def from_exponent(cls, exponent: int) -> Self:
        """
        Prefix for a decimal exponent.

        Raises:
            TypeError: If exponent is not an int.
            ValueError: If no named prefix has this exponent.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be an int, got {fmt_type(exponent)}")
        if exponent not in si_symbols:
            raise ValueError(
                f"Invalid exponent integer value: {exponent}, expected one of {valid_exponents}"
            )
        return cls(exponent)

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        """
        Prefix for a unit symbol prefix like 'k', 'µ' or 'da'. Aliases from PrefixConf are accepted.

        Raises:
            TypeError: If symbol is not a str.
            ValueError: If symbol is not a known SI prefix symbol.
        """
        if not isinstance(symbol, str):
            raise TypeError(f"symbol must be a str, got {fmt_type(symbol)}")
        symbol = PrefixConf.ALIASES.get(symbol, symbol)
        if not si_symbols.has_value(symbol):
            raise ValueError(
                f"Invalid SI prefix symbol: '{symbol}', expected one of {valid_symbols}"
            )
        return cls(si_symbols.get_key(symbol))

    def __str__(self) -> str:
        return self.name.lower()


# Methods --------------------------------------------------------------------------------------------------------------

def as_prefix(obj: SiPrefix | str | int) -> SiPrefix:
    """
    Coerce a prefix given by member, symbol, name or exponent to an SiPrefix.

    Strings are matched as symbols first (case-sensitive, 'm' is milli and 'M' is mega),
    then as member names (case-insensitive, 'kilo' or 'KILO').

    Raises:
        TypeError: If obj is None, a bool or of an unsupported type.
        ValueError: If obj is a string or int naming no SI prefix.

    Examples:
        >>> as_prefix("k")
        <SiPrefix.KILO: 3>
        >>> as_prefix("mega")
        <SiPrefix.MEGA: 6>
        >>> as_prefix(-9)
        <SiPrefix.NANO: -9>
    """
    if type(obj) is SiPrefix:
        return obj

    if obj is None:
        raise TypeError("SI prefix must not be None")

    if isinstance(obj, str):
        symbol = PrefixConf.ALIASES.get(obj, obj)
        if si_symbols.has_value(symbol):
            return SiPrefix(si_symbols.get_key(symbol))
        try:
            return SiPrefix[obj.upper()]
        except KeyError:
            raise ValueError(
                f"Invalid SI prefix: {fmt_value(obj)}, expected a symbol from {valid_symbols} "
                f"or a prefix name like 'kilo'"
            ) from None

    if isinstance(obj, int) and not isinstance(obj, bool):
        return SiPrefix.from_exponent(obj)

    raise TypeError(f"SI prefix must be an SiPrefix, str or int, got {fmt_type(obj)}")


def exponent_delta(source: SiPrefix | str | int, target: SiPrefix | str | int) -> int:
    """
    Exponent difference source - target, in [-60, 60].

    A positive delta scales the value up (e.g. kilo -> unit is +3), a negative one scales it down.

    Examples:
        >>> exponent_delta(SiPrefix.KILO, SiPrefix.MILLI)
        6
        >>> exponent_delta("n", "m")
        -6
    """
    return as_prefix(source).value - as_prefix(target).value
