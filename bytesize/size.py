#
# Bytesize - ByteSize Value Type
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .uint128 import Uint128

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

class ByteSize(Uint128):
    """
    A count of bytes, up to 2**128 - 1, as a Uint128 newtype.

    Adds no state to Uint128; arithmetic on a ByteSize returns a ByteSize.

    Examples:
        >>> str(ByteSize(lo=123_456_789))
        '123.46 MB'
        >>> ByteSize.from_text("5.5 GiB") == ByteSize.from_int(5_905_580_032)
        True
        >>> ByteSize(lo=1_234_567_890).format(forced_unit=MiB)
        '1177.38 MiB'
    """

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Build from a human-readable string such as '10 MB' or '2 kibibytes'."""
        from .parsing import parse

        size = parse(text)
        return size if type(size) is cls else cls(lo=size.lo, hi=size.hi)

    def format(self, config=None, **options) -> str:
        """
        Render as a human-readable string.

        Args:
            config: A FormatConfig; defaults to FormatConfig() when omitted.
            **options: FormatConfig fields (template, forced_unit, long_names, decimal),
                       used to build the config when it is not given. Mutually exclusive with config.

        Raises:
            FormatError: If an option is invalid.
        """
        from .formatting import FormatConfig, format_size

        if config is not None and options:
            raise TypeError("Cannot specify both 'config' and format options.")
        if config is None:
            config = FormatConfig(**options)
        return format_size(self, config)

    def to_display_string(self) -> str:
        """Render with the default configuration; never raises."""
        try:
            return self.format()
        except Exception:
            logger.exception("Default formatting failed for %r", self)
            return f"{int(self)} B"

    def __str__(self) -> str:
        return self.to_display_string()
