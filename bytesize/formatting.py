"""
Render ByteSize values as human-readable strings.

The display value is an exact decimal quotient of two 128-bit integers, so huge
sizes format correctly at any practical precision, e.g. 2**100 bytes is
'1.27 QB' and not a float rounding artifact.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import decimal
from dataclasses import dataclass, replace as dataclasses_replace
from decimal import Decimal
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import (
    EmptyFormatTemplateError,
    FormatConfigError,
    FormatError,
    InvalidForcedUnitError,
    InvalidFormatTemplateError,
)
from .size import ByteSize
from .uint128 import Ordering, Uint128
from .units import B, UnitFamily, display_name, unit_of, units_descending


class FormatConf:
    """Formatting defaults."""
    TEMPLATE = "{value:.2f} {unit}"
    LONG_NAMES = False
    DECIMAL = True
    # Significant digits of the display quotient; 2**128 has 39 digits
    QUOTIENT_PRECISION = 80


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatConfig:
    """
    Display options for a ByteSize.

    All options are validated at construction; any invalid option raises a FormatError
    subclass, or a single FormatConfigError listing every problem if there are several.

    Attributes:
        template (str)          : str.format() template with 'value' (a Decimal) and 'unit' (a str) fields.
        forced_unit (ByteSize)  : Display in this unit instead of the best-fit unit. Must be a registered
                                  unit and fixes `decimal` to that unit's family.
        long_names (bool)       : 'Megabytes' instead of 'MB'.
        decimal (bool)          : Decimal family (KB, MB, ...) if True, binary family (KiB, MiB, ...) if False.

    Examples:
        >>> FormatConfig(long_names=True).with_forced_unit(MiB).decimal
        False
    """

    template: str = FormatConf.TEMPLATE
    forced_unit: ByteSize | None = None
    long_names: bool = FormatConf.LONG_NAMES
    decimal: bool = FormatConf.DECIMAL

    def __post_init__(self):
        errors = []

        if not isinstance(self.template, str):
            raise TypeError(f"template must be str, got {type(self.template).__name__}")
        if not self.template:
            errors.append(EmptyFormatTemplateError("format template cannot be empty"))
        else:
            try:
                self.template.format(value=Decimal(1), unit="B")
            except (KeyError, IndexError, ValueError, TypeError, AttributeError) as exc:
                errors.append(InvalidFormatTemplateError(
                    f"format template {self.template!r} does not render with 'value' and 'unit': {exc!r}"
                ))

        if self.forced_unit is not None:
            if not isinstance(self.forced_unit, Uint128):
                raise TypeError(f"forced_unit must be ByteSize or None, got {type(self.forced_unit).__name__}")
            unit = unit_of(self.forced_unit)
            if unit is None:
                errors.append(InvalidForcedUnitError(
                    f"invalid forced unit: {int(self.forced_unit)} bytes is not a registered unit",
                    unit=self.forced_unit,
                ))
            else:
                object.__setattr__(self, 'forced_unit', unit.size)
                object.__setattr__(self, 'decimal', unit.family is UnitFamily.DECIMAL)

        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise FormatConfigError(errors)

        object.__setattr__(self, 'long_names', bool(self.long_names))
        object.__setattr__(self, 'decimal', bool(self.decimal))

    @property
    def family(self) -> UnitFamily:
        return UnitFamily.DECIMAL if self.decimal else UnitFamily.BINARY

    def with_template(self, template: str) -> Self:
        return dataclasses_replace(self, template=template)

    def with_forced_unit(self, unit: ByteSize | None) -> Self:
        return dataclasses_replace(self, forced_unit=unit)

    def with_long_names(self, long_names: bool = True) -> Self:
        return dataclasses_replace(self, long_names=long_names)

    def with_decimal(self, decimal: bool = True) -> Self:
        """Select the unit family; a forced unit keeps its own family."""
        return dataclasses_replace(self, decimal=decimal)


# Methods --------------------------------------------------------------------------------------------------------------

def best_unit(size: Uint128, family: UnitFamily | str) -> ByteSize:
    """
    Largest unit of the family whose magnitude does not exceed size; B for sizes below every unit.

    Examples:
        >>> best_unit(ByteSize(lo=999), UnitFamily.DECIMAL) == B
        True
        >>> best_unit(ByteSize(lo=1024), UnitFamily.BINARY) == KiB
        True
    """
    for unit in units_descending(family):
        if size.cmp(unit) is not Ordering.LESS:
            return unit
    return B


def quotient(size: Uint128, unit: Uint128) -> Decimal:
    """Exact-enough size / unit as a Decimal, independent of the caller's decimal context."""
    with _display_context():
        return Decimal(int(size)) / Decimal(int(unit))


def format_size(size: Uint128, config: FormatConfig | None = None) -> str:
    """
    Render size as a string under config.

    Args:
        size: Byte count, a ByteSize or any Uint128.
        config: Display options, FormatConfig() if None.

    Returns:
        str: The template rendered with the display value and unit name.

    Raises:
        TypeError: If size is not a Uint128 or config is not a FormatConfig.
        FormatError: If the template fails on this value.

    Examples:
        >>> format_size(ByteSize(lo=1_000_000))
        '1.00 MB'
        >>> format_size(GiB, FormatConfig(forced_unit=GB))
        '1.07 GB'
        >>> format_size(ByteSize(lo=2), FormatConfig(long_names=True))
        '2.00 Bytes'
    """
    if not isinstance(size, Uint128):
        raise TypeError(f"size must be ByteSize, got {type(size).__name__}")
    if config is None:
        config = FormatConfig()
    elif not isinstance(config, FormatConfig):
        raise TypeError(f"config must be FormatConfig, got {type(config).__name__}")

    family = config.family
    unit = config.forced_unit if config.forced_unit is not None else best_unit(size, family)
    value = quotient(size, unit)
    # Quotient is exactly 1 only when size equals the unit
    name = display_name(unit, family, long_names=config.long_names, plural=size != unit)

    try:
        # Decimal.__format__ rounds with the active context
        with _display_context():
            return config.template.format(value=value, unit=name)
    except (KeyError, IndexError, ValueError, TypeError, AttributeError) as exc:
        raise FormatError(f"format template {config.template!r} failed for {int(size)} bytes: {exc!r}") from exc


# Private Methods ------------------------------------------------------------------------------------------------------

def _display_context():
    return decimal.localcontext(
        decimal.Context(prec=FormatConf.QUOTIENT_PRECISION, rounding=decimal.ROUND_HALF_EVEN)
    )
