#
# Bytesize - Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize import units
from bytesize.errors import ParseError, UnknownUnitError
from bytesize.size import ByteSize
from bytesize.units import (
    B, KB, MB, GB, TB, PB, EB, ZB, YB, RB, QB,
    KiB, MiB, GiB, TiB, PiB, EiB, ZiB, YiB, RiB, QiB,
    BINARY_UNITS, DECIMAL_UNITS, VALID_UNITS,
    UnitFamily,
    display_name, is_valid_unit, lookup, resolve, unit_of, units_descending,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnitConstants:

    @pytest.mark.parametrize(
        "unit, expected",
        [
            pytest.param(B, 1, id="B"),
            pytest.param(KB, 10 ** 3, id="KB"),
            pytest.param(MB, 10 ** 6, id="MB"),
            pytest.param(GB, 10 ** 9, id="GB"),
            pytest.param(TB, 10 ** 12, id="TB"),
            pytest.param(PB, 10 ** 15, id="PB"),
            pytest.param(EB, 10 ** 18, id="EB"),
            pytest.param(ZB, 10 ** 21, id="ZB"),
            pytest.param(YB, 10 ** 24, id="YB"),
            pytest.param(RB, 10 ** 27, id="RB"),
            pytest.param(QB, 10 ** 30, id="QB"),
            pytest.param(KiB, 2 ** 10, id="KiB"),
            pytest.param(MiB, 2 ** 20, id="MiB"),
            pytest.param(GiB, 2 ** 30, id="GiB"),
            pytest.param(TiB, 2 ** 40, id="TiB"),
            pytest.param(PiB, 2 ** 50, id="PiB"),
            pytest.param(EiB, 2 ** 60, id="EiB"),
            pytest.param(ZiB, 2 ** 70, id="ZiB"),
            pytest.param(YiB, 2 ** 80, id="YiB"),
            pytest.param(RiB, 2 ** 90, id="RiB"),
            pytest.param(QiB, 2 ** 100, id="QiB"),
        ],
    )
    def test_magnitude(self, unit, expected):
        assert isinstance(unit, ByteSize)
        assert int(unit) == expected

    def test_high_word_units(self):
        assert (ZiB.lo, ZiB.hi) == (0, 1 << 6)
        assert (QiB.lo, QiB.hi) == (0, 1 << 36)
        assert QB.hi > 0 and EB.hi == 0

    def test_sentinels(self):
        assert units.NONE.is_zero
        assert units.ONE == B

    def test_registered_units(self, registered_units):
        assert len(registered_units) == 21
        assert all(u.family is UnitFamily.DECIMAL for u in DECIMAL_UNITS)
        assert all(u.family is UnitFamily.BINARY for u in BINARY_UNITS)


class TestLookup:

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("b", B, id="b"),
            pytest.param("byte", B, id="byte"),
            pytest.param("bytes", B, id="bytes"),
            pytest.param("kb", KB, id="kb"),
            pytest.param("kilobyte", KB, id="kilobyte"),
            pytest.param("kilobytes", KB, id="kilobytes"),
            pytest.param("MiB", MiB, id="MiB"),
            pytest.param("mebibytes", MiB, id="mebibytes"),
            pytest.param("QB", QB, id="QB"),
            pytest.param("quettabytes", QB, id="quettabytes"),
            pytest.param("RIB", RiB, id="RIB"),
            pytest.param("ronnibyte", RiB, id="ronnibyte"),
            pytest.param(" KiB\t", KiB, id="surrounding-whitespace"),
            pytest.param("MEGABYTE", MB, id="upper-case"),
            pytest.param("GigaByte", GB, id="mixed-case"),
        ],
    )
    def test_resolve(self, text, expected):
        assert resolve(text) == expected
        assert is_valid_unit(text)

    def test_every_valid_unit_resolves(self, registered_units):
        assert len(VALID_UNITS) == 3 * len(registered_units)
        for name in VALID_UNITS:
            assert name == name.lower()
            assert lookup(name).size == resolve(name.upper())

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("", id="empty"),
            pytest.param("   ", id="whitespace"),
            pytest.param("x", id="letter"),
            pytest.param("xb", id="unknown-prefix"),
            pytest.param("k", id="prefix-only"),
            pytest.param("ki", id="binary-prefix-only"),
            pytest.param("kilobit", id="bits"),
            pytest.param("kb2", id="trailing-digit"),
            pytest.param("gigabytee", id="misspelled"),
            pytest.param("kibibyteses", id="double-plural"),
            pytest.param("byte\u017f", id="long-s-not-folded"),
            pytest.param("kilobyte\u017f", id="long-s-plural"),
        ],
    )
    def test_unknown(self, text):
        assert not is_valid_unit(text)
        with pytest.raises(UnknownUnitError) as excinfo:
            resolve(text)
        assert excinfo.value.unit == text
        assert isinstance(excinfo.value, ParseError)

    def test_lookup_unit(self):
        unit = lookup("gibibytes")
        assert unit.size == GiB
        assert (unit.short, unit.long, unit.family) == ("GiB", "Gibibyte", UnitFamily.BINARY)
        assert unit.names == ("gib", "gibibyte", "gibibytes")

    def test_type(self):
        with pytest.raises(TypeError):
            lookup(None)
        assert not is_valid_unit(b"kb")

    def test_unit_of(self):
        assert unit_of(KB).long == "Kilobyte"
        assert unit_of(ByteSize(lo=1024)).short == "KiB"
        assert unit_of(ByteSize(lo=12345, hi=67890)) is None


class TestDisplayName:

    @pytest.mark.parametrize(
        "size, family, long_names, plural, expected",
        [
            pytest.param(KB, UnitFamily.DECIMAL, False, False, "KB", id="short"),
            pytest.param(KB, UnitFamily.DECIMAL, True, False, "Kilobyte", id="long"),
            pytest.param(KB, UnitFamily.DECIMAL, True, True, "Kilobytes", id="long-plural"),
            pytest.param(MiB, UnitFamily.BINARY, False, True, "MiB", id="short-never-plural"),
            pytest.param(QiB, UnitFamily.BINARY, True, False, "Quettibyte", id="quettibyte"),
            pytest.param(B, UnitFamily.DECIMAL, True, True, "Bytes", id="bytes-decimal"),
            pytest.param(B, UnitFamily.BINARY, False, False, "B", id="byte-binary"),
            pytest.param(GiB, "binary", True, True, "Gibibytes", id="family-as-str"),
        ],
    )
    def test_display_name(self, size, family, long_names, plural, expected):
        assert display_name(size, family, long_names=long_names, plural=plural) == expected

    @pytest.mark.parametrize(
        "size, family",
        [
            pytest.param(KiB, UnitFamily.DECIMAL, id="binary-unit-in-decimal"),
            pytest.param(KB, UnitFamily.BINARY, id="decimal-unit-in-binary"),
            pytest.param(ByteSize(lo=3), UnitFamily.DECIMAL, id="not-a-unit"),
            pytest.param(KB, "hex", id="unknown-family"),
        ],
    )
    def test_invalid(self, size, family):
        with pytest.raises(ValueError):
            display_name(size, family)

    def test_name_tables_are_bidirectional(self):
        assert units.SHORT_DECIMAL.get_key("MB") == MB
        assert units.LONG_BINARY.get_key("Byte") == B
        assert len(units.SHORT_BINARY) == len(BINARY_UNITS) + 1


class TestUnitsDescending:

    @pytest.mark.parametrize(
        "family, largest, count",
        [
            pytest.param(UnitFamily.DECIMAL, QB, 11, id="decimal"),
            pytest.param(UnitFamily.BINARY, QiB, 11, id="binary"),
        ],
    )
    def test_ladder(self, family, largest, count):
        ladder = units_descending(family)
        assert len(ladder) == count
        assert ladder[0] == largest
        assert ladder[-1] == B
        assert all(a > b for a, b in zip(ladder, ladder[1:]))
