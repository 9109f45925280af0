#
# Bytesize Units Registry
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from types import MappingProxyType

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import BiDirectionalMap
from .errors import UnknownUnitError, short_repr
from .size import ByteSize


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class UnitFamily(StrEnum):
    """
    Unit families for byte sizes.

    Attributes:
        DECIMAL (str) : SI units, powers of 1000 - KB, MB, ..., QB
        BINARY (str)  : IEC units, powers of 1024 - KiB, MiB, ..., QiB
    """
    DECIMAL = "decimal"
    BINARY = "binary"


@dataclass(frozen=True)
class Unit:
    """A registered unit: exact magnitude, display names and family."""

    size: ByteSize
    short: str
    long: str
    family: UnitFamily

    @property
    def names(self) -> tuple[str, str, str]:
        """Lookup keys: short code, long singular and long plural, lower-cased."""
        long = self.long.lower()
        return self.short.lower(), long, f"{long}s"


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
NONE = ByteSize()
ONE = ByteSize(lo=1)

B  = ONE
KB = B.mul64(1000)   # 10**3
MB = KB.mul64(1000)  # 10**6
GB = MB.mul64(1000)  # 10**9
TB = GB.mul64(1000)  # 10**12
PB = TB.mul64(1000)  # 10**15
EB = PB.mul64(1000)  # 10**18
ZB = EB.mul64(1000)  # 10**21
YB = ZB.mul64(1000)  # 10**24
RB = YB.mul64(1000)  # 10**27
QB = RB.mul64(1000)  # 10**30

KiB = ByteSize(lo=1024)
MiB = ByteSize(lo=1024 ** 2)
GiB = ByteSize(lo=1024 ** 3)
TiB = ByteSize(lo=1024 ** 4)
PiB = ByteSize(lo=1024 ** 5)
EiB = ByteSize(lo=1024 ** 6)
# 2**70 and up do not fit the low word; 2**(64 + n) is (1 << n) in the high word
ZiB = ByteSize(hi=1 << 6)   # 2**70
YiB = ByteSize(hi=1 << 16)  # 2**80
RiB = ByteSize(hi=1 << 26)  # 2**90
QiB = ByteSize(hi=1 << 36)  # 2**100

DECIMAL_UNITS = (
    Unit(B,  "B",  "Byte",       UnitFamily.DECIMAL),
    Unit(KB, "KB", "Kilobyte",   UnitFamily.DECIMAL),
    Unit(MB, "MB", "Megabyte",   UnitFamily.DECIMAL),
    Unit(GB, "GB", "Gigabyte",   UnitFamily.DECIMAL),
    Unit(TB, "TB", "Terabyte",   UnitFamily.DECIMAL),
    Unit(PB, "PB", "Petabyte",   UnitFamily.DECIMAL),
    Unit(EB, "EB", "Exabyte",    UnitFamily.DECIMAL),
    Unit(ZB, "ZB", "Zettabyte",  UnitFamily.DECIMAL),
    Unit(YB, "YB", "Yottabyte",  UnitFamily.DECIMAL),
    Unit(RB, "RB", "Ronnabyte",  UnitFamily.DECIMAL),
    Unit(QB, "QB", "Quettabyte", UnitFamily.DECIMAL),
)

BINARY_UNITS = (
    Unit(KiB, "KiB", "Kibibyte",   UnitFamily.BINARY),
    Unit(MiB, "MiB", "Mebibyte",   UnitFamily.BINARY),
    Unit(GiB, "GiB", "Gibibyte",   UnitFamily.BINARY),
    Unit(TiB, "TiB", "Tebibyte",   UnitFamily.BINARY),
    Unit(PiB, "PiB", "Pebibyte",   UnitFamily.BINARY),
    Unit(EiB, "EiB", "Exbibyte",   UnitFamily.BINARY),
    Unit(ZiB, "ZiB", "Zebibyte",   UnitFamily.BINARY),
    Unit(YiB, "YiB", "Yobibyte",   UnitFamily.BINARY),
    Unit(RiB, "RiB", "Ronnibyte",  UnitFamily.BINARY),
    Unit(QiB, "QiB", "Quettibyte", UnitFamily.BINARY),
)
# @formatter:on

# The byte unit is registered once, as decimal, but both families display and select it
_BYTE = DECIMAL_UNITS[0]

SHORT_DECIMAL = BiDirectionalMap({u.size: u.short for u in DECIMAL_UNITS})
LONG_DECIMAL = BiDirectionalMap({u.size: u.long for u in DECIMAL_UNITS})
SHORT_BINARY = BiDirectionalMap({u.size: u.short for u in (_BYTE, *BINARY_UNITS)})
LONG_BINARY = BiDirectionalMap({u.size: u.long for u in (_BYTE, *BINARY_UNITS)})

_NAME_TABLES = MappingProxyType({
    (UnitFamily.DECIMAL, False): SHORT_DECIMAL,
    (UnitFamily.DECIMAL, True): LONG_DECIMAL,
    (UnitFamily.BINARY, False): SHORT_BINARY,
    (UnitFamily.BINARY, True): LONG_BINARY,
})

_LADDERS = MappingProxyType({
    UnitFamily.DECIMAL: tuple(u.size for u in reversed(DECIMAL_UNITS)),
    UnitFamily.BINARY: (*(u.size for u in reversed(BINARY_UNITS)), B),
})

_UNITS_BY_NAME = MappingProxyType({
    name: unit for unit in (*DECIMAL_UNITS, *BINARY_UNITS) for name in unit.names
})

_UNITS_BY_SIZE = MappingProxyType({
    unit.size: unit for unit in (*DECIMAL_UNITS, *BINARY_UNITS)
})

VALID_UNITS = tuple(_UNITS_BY_NAME)


# Methods --------------------------------------------------------------------------------------------------------------

def lookup(text: str) -> Unit:
    """
    Find the registered unit for a short code, long singular or long plural name.

    Surrounding whitespace is ignored and matching is case-insensitive, but otherwise
    exact: no prefix or fuzzy matching.

    Raises:
        TypeError: If text is not a str.
        UnknownUnitError: If no unit has this name.

    Examples:
        >>> lookup(" KiB ").long
        'Kibibyte'
        >>> lookup("megabytes").size == MB
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"unit text must be str, got {type(text).__name__}")
    key = text.strip().lower()
    try:
        return _UNITS_BY_NAME[key]
    except KeyError:
        raise UnknownUnitError(f"unknown unit: {short_repr(text)}", text=text, unit=text) from None


def resolve(text: str) -> ByteSize:
    """Magnitude of the unit named by text. Raises UnknownUnitError for unrecognized names."""
    return lookup(text).size


def is_valid_unit(text: str) -> bool:
    """True if text names a registered unit, with the same normalization as resolve()."""
    if not isinstance(text, str):
        return False
    return text.strip().lower() in _UNITS_BY_NAME


def unit_of(size: ByteSize) -> Unit | None:
    """Registered unit with exactly this magnitude, or None."""
    return _UNITS_BY_SIZE.get(size)


def display_name(
        size: ByteSize,
        family: UnitFamily | str,
        long_names: bool = False,
        plural: bool = False,
) -> str:
    """
    Display name of a unit within a family.

    Long names take an 's' when plural is True; short codes never change.
    The byte unit is named in both families.

    Raises:
        ValueError: If family is unknown or size is not a unit of this family.

    Examples:
        >>> display_name(KB, UnitFamily.DECIMAL)
        'KB'
        >>> display_name(GiB, "binary", long_names=True, plural=True)
        'Gibibytes'
    """
    table = _NAME_TABLES[(UnitFamily(family), bool(long_names))]
    try:
        name = table[size]
    except KeyError:
        raise ValueError(f"no {UnitFamily(family)} unit with magnitude {int(size)} bytes") from None
    if long_names and plural:
        return f"{name}s"
    return name


def units_descending(family: UnitFamily | str) -> tuple[ByteSize, ...]:
    """Unit ladder of a family from the largest (QB or QiB) down to B."""
    return _LADDERS[UnitFamily(family)]


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Decimal ladder must be consecutive powers of 1000 and binary of 1024, all within 128 bits.
if [int(u.size) for u in DECIMAL_UNITS] != [1000 ** n for n in range(len(DECIMAL_UNITS))]:
    raise AssertionError("Configuration Error: decimal units must be consecutive powers of 1000.")

if [int(u.size) for u in BINARY_UNITS] != [1024 ** n for n in range(1, len(BINARY_UNITS) + 1)]:
    raise AssertionError("Configuration Error: binary units must be consecutive powers of 1024.")

# Lookup names must not collide across units.
if len(_UNITS_BY_NAME) != 3 * (len(DECIMAL_UNITS) + len(BINARY_UNITS)):
    raise AssertionError("Configuration Error: unit lookup names must be unique.")
