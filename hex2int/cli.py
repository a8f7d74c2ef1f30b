"""
JSON-over-stdio adapters for the conversions.

Each adapter reads one JSON object such as {"hex": "ff7f"} from stdin and
writes either {"value": ...} or {"error": "..."} to stdout, pretty-printed.
Failures are reported in the JSON body only; the exit status stays 0.
"""

import json
import logging
import sys
from typing import Optional, TextIO

from .conversions import CONVERTERS, IntType
from .errors import ConversionError

logger = logging.getLogger(__name__)

# Emitted as decimal strings, the values can exceed what JSON consumers
# represent exactly as numbers.
QUOTED_TYPES = {IntType.U64_BE, IntType.U64_LE}


class RequestError(ValueError):
    """The input is not a JSON object with a string "hex" field."""


class _JsonObject(dict):
    """Decoded JSON object that remembers keys seen more than once."""

    def __init__(self, pairs):
        super().__init__(pairs)
        seen = set()
        self.duplicates = set()
        for key, _ in pairs:
            if key in seen:
                self.duplicates.add(key)
            seen.add(key)


def parse_request(text: str) -> str:
    """Extract the hex string from a JSON request.

    Accepts {"hex": "..."} or the one-element array form ["..."].
    """
    try:
        request = json.loads(text, object_pairs_hook=_JsonObject)
    except json.JSONDecodeError as e:
        raise RequestError(str(e)) from e
    if isinstance(request, list):
        if len(request) != 1:
            raise RequestError(
                f"invalid length {len(request)}, expected an array with 1 element"
            )
        hex_str = request[0]
    elif isinstance(request, dict):
        if 'hex' not in request:
            raise RequestError("missing field `hex`")
        if 'hex' in request.duplicates:
            raise RequestError("duplicate field `hex`")
        hex_str = request['hex']
    else:
        raise RequestError(f"invalid type: expected an object, got {type(request).__name__}")
    if not isinstance(hex_str, str):
        raise RequestError(
            f"invalid type for field `hex`: expected a string, got {type(hex_str).__name__}"
        )
    return hex_str


def render(payload: dict) -> str:
    """Pretty-print a response object (two-space indent, no trailing newline)."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def respond(text: str, int_type: IntType) -> dict:
    """Build the response object for one request."""
    try:
        hex_str = parse_request(text)
    except RequestError as e:
        logger.debug("Rejected request: %s", e)
        return {'error': f"Failed to parse input JSON: {e}"}

    logger.debug("Converting %r as %s", hex_str, int_type.label)
    try:
        value = CONVERTERS[int_type](hex_str)
    except ConversionError as e:
        logger.debug("Conversion failed: %s", e)
        return {'error': f"Conversion error: {e}"}

    logger.debug("Converted %s -> %d", hex_str, value)
    if int_type in QUOTED_TYPES:
        return {'value': str(value)}
    return {'value': value}


def run(int_type: IntType, stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None) -> int:
    """Serve a single request and return the process exit status."""
    if stdin is None:
        text = sys.stdin.buffer.read().decode('utf-8')
    else:
        text = stdin.read()

    output = render(respond(text, int_type))

    if stdout is None:
        sys.stdout.buffer.write(output.encode('utf-8'))
        sys.stdout.buffer.flush()
    else:
        stdout.write(output)
        stdout.flush()
    return 0


def _configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(level=level, format='%(message)s')


def main_i16_le() -> None:
    """hex2i16le: 16-bit signed little-endian, value as a JSON number."""
    _configure_logging()
    sys.exit(run(IntType.I16_LE))


def main_u64_le() -> None:
    """hex2u64le: 64-bit unsigned little-endian, value as a decimal string."""
    _configure_logging()
    sys.exit(run(IntType.U64_LE))
