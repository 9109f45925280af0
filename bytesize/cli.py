"""
Bytesize CLI Tools

Usage:
    bytesize "5.5 GiB" 100kb
    bytesize 1234567890B --unit MiB
    bytesize "2 QiB" --binary --long
    bytesize "1.5 KB" --bytes
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import sys
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ByteSizeError, ParseError
from .formatting import FormatConf, FormatConfig
from .parsing import parse
from .size import ByteSize
from .units import lookup

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def byte_size(text: str) -> ByteSize:
    """
    argparse ``type=`` callable for byte-size options.

    Examples:
        >>> parser = argparse.ArgumentParser()
        >>> _ = parser.add_argument("--limit", type=byte_size)
        >>> int(parser.parse_args(["--limit", "2 KiB"]).limit)
        2048
    """
    try:
        return parse(text)
    except ParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytesize",
        description="Convert human-readable byte sizes, e.g. '5.5 GiB' or '100 kilobytes'.",
    )
    parser.add_argument("sizes", nargs="+", metavar="SIZE", help="Size to convert, number followed by unit")
    parser.add_argument(
        "--binary", action="store_true", help="Use binary units (KiB, MiB, ...) instead of decimal (KB, MB, ...)"
    )
    parser.add_argument("--long", action="store_true", help="Use long unit names (Megabytes instead of MB)")
    parser.add_argument("--unit", help="Display in this unit instead of the best fit, e.g. MiB or gigabytes")
    parser.add_argument(
        "--template", default=FormatConf.TEMPLATE,
        help=f"str.format() template with 'value' and 'unit' fields (default: {FormatConf.TEMPLATE!r})"
    )
    parser.add_argument("--bytes", action="store_true", help="Print the exact byte count instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = FormatConfig(
            template=args.template,
            forced_unit=lookup(args.unit).size if args.unit else None,
            long_names=args.long,
            decimal=not args.binary,
        )
        for text in args.sizes:
            size = parse(text)
            logger.debug("Parsed %r as %d bytes", text, int(size))
            print(int(size) if args.bytes else size.format(config))
    except ByteSizeError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
