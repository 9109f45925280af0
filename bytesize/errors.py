"""
Exceptions raised by wide arithmetic, parsing and formatting.

All of them derive from ByteSizeError, which is a ValueError, so callers that
only care about "bad input" can keep catching ValueError.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import reprlib

_repr = reprlib.Repr()
_repr.maxstring = 60


# Classes --------------------------------------------------------------------------------------------------------------

class ByteSizeError(ValueError):
    """Base class for every error raised by this package."""


class Uint128OverflowError(ByteSizeError, OverflowError):
    """True result of a checked 128-bit operation exceeds 2**128 - 1."""


# Parsing ---

class ParseError(ByteSizeError):
    """
    A string could not be converted to a byte size.

    Attributes:
        text: The original input, before any trimming.
    """

    def __init__(self, message: str, *, text: str | None = None):
        super().__init__(message)
        self.text = text


class EmptyInputError(ParseError):
    """Input is empty or whitespace only."""


class MalformedNumberError(ParseError):
    """Numeric part is missing, has several decimal points, or is not a decimal literal."""


class NegativeValueError(ParseError):
    """Numeric part carries a minus sign."""


class UnknownUnitError(ParseError):
    """Unit text matches no registered short or long unit name."""

    def __init__(self, message: str, *, text: str | None = None, unit: str = ""):
        super().__init__(message, text=text)
        self.unit = unit


class ParseOverflowError(ParseError, OverflowError):
    """Parsed size exceeds 2**128 - 1 bytes."""


# Formatting ---

class FormatError(ByteSizeError):
    """A byte size could not be rendered under the requested configuration."""


class EmptyFormatTemplateError(FormatError):
    """Display template is an empty string."""


class InvalidFormatTemplateError(FormatError):
    """Display template does not render with 'value' and 'unit' fields."""


class InvalidForcedUnitError(FormatError):
    """Forced unit matches no registered unit magnitude."""

    def __init__(self, message: str, *, unit=None):
        super().__init__(message)
        self.unit = unit


class FormatConfigError(FormatError):
    """
    Several format options are invalid at once.

    Attributes:
        errors: Individual FormatError-s, in the order they were detected.
    """

    def __init__(self, errors):
        self.errors = tuple(errors)
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(f"{len(self.errors)} invalid format options: {details}")


# Methods --------------------------------------------------------------------------------------------------------------

def short_repr(text: str) -> str:
    """repr() of user input for error messages, with the middle of long strings elided."""
    return _repr.repr(text)
