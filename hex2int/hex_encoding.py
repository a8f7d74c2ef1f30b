"""Hex decoding utilities."""

from .errors import IncorrectLength, InvalidHex

HEX_DIGITS = frozenset(b'0123456789abcdefABCDEF')


def hex_to_byte(hex_str: str) -> bytearray:
    """Convert hex string to byte array.

    Works on the UTF-8 encoding of hex_str: the byte count is checked for
    parity first, then each byte is checked, so "abz" fails on length and
    "xbcd" on 'x'. Positions are byte offsets. Unlike bytes.fromhex(),
    whitespace is rejected.
    """
    raw = hex_str.encode('utf-8')
    if len(raw) % 2 != 0:
        raise InvalidHex("Odd number of digits")
    for position, byte in enumerate(raw):
        if byte not in HEX_DIGITS:
            raise InvalidHex(f"Invalid character {chr(byte)!r} at position {position}")
    return bytearray(bytes.fromhex(hex_str))


def decode_and_validate(hex_str: str, expected_len: int) -> bytes:
    """Decode hex_str and check that it holds exactly expected_len bytes."""
    data = hex_to_byte(hex_str)
    if len(data) != expected_len:
        raise IncorrectLength(expected=expected_len, found=len(data))
    return bytes(data)
