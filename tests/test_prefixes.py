#
# SI Prefix - Prefix Table Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from siprefix.prefixes import (
    MAX_EXPONENT, MIN_EXPONENT, PrefixConf, SiPrefix, as_prefix, exponent_delta, si_symbols, valid_exponents,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSiPrefix:

    def test_members(self):
        assert len(SiPrefix) == 25
        assert [p.exponent for p in SiPrefix] == sorted(valid_exponents)
        assert SiPrefix.QUECTO.exponent == MIN_EXPONENT == -30
        assert SiPrefix.QUETTA.exponent == MAX_EXPONENT == 30

    def test_every_member_has_a_symbol(self, any_prefix):
        assert si_symbols.get_key(any_prefix.symbol) == any_prefix.exponent

    @pytest.mark.parametrize(
        "prefix, symbol",
        [
            pytest.param(SiPrefix.QUECTO, "q", id="quecto"),
            pytest.param(SiPrefix.MICRO, "µ", id="micro"),
            pytest.param(SiPrefix.UNIT, "", id="unit"),
            pytest.param(SiPrefix.DECA, "da", id="deca"),
            pytest.param(SiPrefix.MEGA, "M", id="mega"),
            pytest.param(SiPrefix.QUETTA, "Q", id="quetta"),
        ],
    )
    def test_symbol(self, prefix, symbol):
        assert prefix.symbol == symbol

    def test_factor(self):
        assert SiPrefix.KILO.factor == 1000
        assert isinstance(SiPrefix.KILO.factor, int)
        assert SiPrefix.UNIT.factor == 1
        assert SiPrefix.MILLI.factor == pytest.approx(1e-3)
        assert SiPrefix.QUETTA.factor == 10 ** 30

    def test_str(self):
        assert str(SiPrefix.KILO) == "kilo"

    def test_from_exponent(self):
        assert SiPrefix.from_exponent(-9) is SiPrefix.NANO
        with pytest.raises(ValueError, match="Invalid exponent integer value: 4"):
            SiPrefix.from_exponent(4)
        with pytest.raises(TypeError, match="exponent must be an int"):
            SiPrefix.from_exponent(3.0)
        with pytest.raises(TypeError):
            SiPrefix.from_exponent(True)

    def test_from_symbol(self):
        assert SiPrefix.from_symbol("k") is SiPrefix.KILO
        assert SiPrefix.from_symbol("") is SiPrefix.UNIT
        assert SiPrefix.from_symbol("u") is SiPrefix.MICRO
        assert SiPrefix.from_symbol("μ") is SiPrefix.MICRO
        with pytest.raises(ValueError, match="Invalid SI prefix symbol: 'K'"):
            SiPrefix.from_symbol("K")
        with pytest.raises(TypeError, match="symbol must be a str"):
            SiPrefix.from_symbol(None)

    def test_aliases_point_to_symbols(self):
        for canonical in PrefixConf.ALIASES.values():
            assert si_symbols.has_value(canonical)


class TestAsPrefix:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(SiPrefix.GIGA, SiPrefix.GIGA, id="member"),
            pytest.param("m", SiPrefix.MILLI, id="symbol-milli"),
            pytest.param("M", SiPrefix.MEGA, id="symbol-mega"),
            pytest.param("da", SiPrefix.DECA, id="symbol-deca"),
            pytest.param("", SiPrefix.UNIT, id="symbol-unit"),
            pytest.param("u", SiPrefix.MICRO, id="alias-u"),
            pytest.param("kilo", SiPrefix.KILO, id="name-lower"),
            pytest.param("RONNA", SiPrefix.RONNA, id="name-upper"),
            pytest.param("Unit", SiPrefix.UNIT, id="name-mixed"),
            pytest.param(-2, SiPrefix.CENTI, id="exponent"),
            pytest.param(0, SiPrefix.UNIT, id="exponent-zero"),
        ],
    )
    def test_accepted(self, obj, expected):
        assert as_prefix(obj) is expected

    def test_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            as_prefix(None)

    @pytest.mark.parametrize(
        "obj",
        [
            pytest.param(True, id="bool"),
            pytest.param(3.0, id="float"),
            pytest.param(["k"], id="list"),
        ],
    )
    def test_wrong_type(self, obj):
        with pytest.raises(TypeError, match="SI prefix must be an SiPrefix, str or int"):
            as_prefix(obj)

    @pytest.mark.parametrize(
        "obj",
        [
            pytest.param("kilogram", id="unknown-name"),
            pytest.param("x", id="unknown-symbol"),
            pytest.param(5, id="unnamed-exponent"),
            pytest.param(33, id="out-of-range-exponent"),
        ],
    )
    def test_unknown(self, obj):
        with pytest.raises(ValueError):
            as_prefix(obj)


class TestExponentDelta:

    @pytest.mark.parametrize(
        "source, target, expected",
        [
            pytest.param(SiPrefix.KILO, SiPrefix.MILLI, 6, id="kilo-milli"),
            pytest.param(SiPrefix.NANO, SiPrefix.MILLI, -6, id="nano-milli"),
            pytest.param(SiPrefix.DECA, SiPrefix.DECI, 2, id="deca-deci"),
            pytest.param(SiPrefix.QUETTA, SiPrefix.QUECTO, 60, id="max"),
            pytest.param(SiPrefix.QUECTO, SiPrefix.QUETTA, -60, id="min"),
            pytest.param("k", "kilo", 0, id="same"),
        ],
    )
    def test_delta(self, source, target, expected):
        assert exponent_delta(source, target) == expected

    def test_antisymmetric(self, any_prefix):
        for other in SiPrefix:
            assert exponent_delta(any_prefix, other) == -exponent_delta(other, any_prefix)

    def test_absent_prefix(self):
        with pytest.raises(TypeError):
            exponent_delta(None, SiPrefix.UNIT)
        with pytest.raises(TypeError):
            exponent_delta(SiPrefix.UNIT, None)
