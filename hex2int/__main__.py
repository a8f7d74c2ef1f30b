"""
hex2int - CLI entry point.

Usage:
    echo '{"hex": "ff7f"}' | python -m hex2int [-t <TYPE>] [-d]
    python -m hex2int -l

Arguments:
    -t, --type      Integer type to convert to (default: u64_le)
    -l, --list      List supported integer types
    -d, --debug     Log requests and decoded bytes to stderr
    -h, --help      Show this help message
"""

import argparse
import logging
import sys

from .cli import QUOTED_TYPES, run
from .conversions import IntType

logger = logging.getLogger(__name__)


def int_type_arg(value: str) -> IntType:
    """argparse type converter for integer type labels."""
    try:
        return IntType.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def list_types() -> None:
    for int_type in IntType:
        suffix = " (string)" if int_type in QUOTED_TYPES else ""
        print(f"{int_type.label}{suffix}")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog='hex2int',
        description='Convert a hex string read as JSON from stdin to a fixed-width integer',
    )
    parser.add_argument(
        '-t', '--type', type=int_type_arg, default=IntType.U64_LE,
        help='Integer type, e.g. i8, u16_be, i64_le (default: u64_le)',
    )
    parser.add_argument('-l', '--list', action='store_true', help='List supported types')
    parser.add_argument('-d', '--debug', action='store_true', help='Enable debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(message)s',
    )

    if args.list:
        list_types()
        sys.exit(0)

    logger.debug(f"Serving one request as {args.type.label}")
    sys.exit(run(args.type))


if __name__ == '__main__':
    main()
