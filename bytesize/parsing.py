"""
Parse human-readable byte sizes into exact ByteSize values.

Accepted grammar, case-insensitive, whitespace anywhere is ignored:

    <integer>[.<fraction>] <unit>

Units are short codes ("kb", "KiB"), long names ("kilobyte") or long plurals
("kibibytes"); see bytesize.units.VALID_UNITS. The number is read as an exact
decimal and multiplied by the unit magnitude in arbitrary precision, so
"0.1 QB" is exactly 10**29 bytes. Sub-byte remainders are truncated.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import decimal
from decimal import Decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import (
    EmptyInputError,
    MalformedNumberError,
    NegativeValueError,
    ParseOverflowError,
    UnknownUnitError,
    short_repr,
)
from .size import ByteSize
from .uint128 import MAX_UINT128, WORD_BITS
from .units import resolve

_NUMBER_CHARS = frozenset("0123456789.-")

# Any number of 10**39 or more overflows, since every unit is at least one byte
_MAX_WHOLE_DIGITS = len(str(MAX_UINT128))


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> ByteSize:
    """
    Convert a string like "10 MB", "5.5 GiB" or "100 kilobytes" to a ByteSize.

    Args:
        text: Size string, number first then unit.

    Returns:
        ByteSize: Exact byte count, fractional bytes truncated toward zero.

    Raises:
        TypeError: If text is not a str.
        EmptyInputError: Input is empty or whitespace only.
        MalformedNumberError: Number is missing, has several decimal points or is not a decimal literal.
        NegativeValueError: Number is below zero.
        UnknownUnitError: Unit is not registered (including a missing unit).
        ParseOverflowError: Result exceeds 2**128 - 1 bytes.

    Examples:
        >>> int(parse("10 MB"))
        10000000
        >>> int(parse("1.5 KB"))
        1500
        >>> int(parse("  2   kibibytes "))
        2048
        >>> int(parse("0.00001 KB"))
        0
    """
    if not isinstance(text, str):
        raise TypeError(f"size text must be str, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise EmptyInputError("empty size string", text=text)

    number_text, unit_text = _split_number_unit(stripped, text)
    number = _parse_number(number_text, text)
    try:
        unit = resolve(unit_text)
    except UnknownUnitError as exc:
        raise UnknownUnitError(
            f"unknown unit {short_repr(unit_text)} in {short_repr(stripped)}", text=text, unit=unit_text
        ) from exc

    if number and number.adjusted() >= _MAX_WHOLE_DIGITS:
        raise _overflow(stripped, text)

    # Exact rational product; floor division truncates toward zero for non-negative operands
    numerator, denominator = number.as_integer_ratio()
    product = numerator * int(unit) // denominator
    if product.bit_length() > 2 * WORD_BITS:
        raise _overflow(stripped, text)
    return ByteSize.from_int(product)


# Private Methods ------------------------------------------------------------------------------------------------------

def _split_number_unit(stripped: str, text: str) -> tuple[str, str]:
    """Single pass: skip whitespace, collect digits, '.' and '-' as number, anything else as unit."""
    number_chars = []
    unit_chars = []
    found_point = False
    for char in stripped:
        if char.isspace():
            continue
        if char in _NUMBER_CHARS:
            if char == ".":
                if found_point:
                    raise MalformedNumberError(
                        f"invalid number: multiple decimal points in {short_repr(stripped)}", text=text
                    )
                found_point = True
            number_chars.append(char)
        else:
            unit_chars.append(char)
    return "".join(number_chars), "".join(unit_chars)


def _parse_number(number_text: str, text: str) -> Decimal:
    """
    Read the number buffer as an exact Decimal.

    Decimal keeps every digit of the literal whatever the context precision, and has no
    limit on the length of the string it converts.
    """
    if not number_text:
        raise MalformedNumberError(f"invalid number: no digits in {short_repr(text.strip())}", text=text)
    # Trap explicitly; a caller's context may have InvalidOperation disabled
    with decimal.localcontext(decimal.Context(traps=[decimal.InvalidOperation])):
        try:
            number = Decimal(number_text)
        except decimal.InvalidOperation:
            raise MalformedNumberError(f"invalid number: {short_repr(number_text)}", text=text) from None
    if number < 0:
        raise NegativeValueError(f"negative value: {short_repr(number_text)}", text=text)
    return number


def _overflow(stripped: str, text: str) -> ParseOverflowError:
    return ParseOverflowError(f"size {short_repr(stripped)} exceeds 2**128 - 1 bytes", text=text)
