"""
Fixed-width integer conversions from hex strings.

Every entry point decodes its input with decode_and_validate() and then
reinterprets the bytes as a two's-complement (signed) or plain (unsigned)
integer in the byte order named by the function suffix:

>>> hex_to_i16_be('8000')
-32768
>>> hex_to_i16_le('0080')
-32768
>>> hex_to_u64_be('ffffffffffffffff')
18446744073709551615
"""

import enum
from typing import Union

from .errors import ConversionFailed
from .hex_encoding import decode_and_validate


class IntType(enum.Enum):
    """Conversion targets: (width in bytes, signed, byte order)."""
    I8 = (1, True, 'big')
    U8 = (1, False, 'big')
    I16_BE = (2, True, 'big')
    I16_LE = (2, True, 'little')
    U16_BE = (2, False, 'big')
    U16_LE = (2, False, 'little')
    I32_BE = (4, True, 'big')
    I32_LE = (4, True, 'little')
    U32_BE = (4, False, 'big')
    U32_LE = (4, False, 'little')
    I64_BE = (8, True, 'big')
    I64_LE = (8, True, 'little')
    U64_BE = (8, False, 'big')
    U64_LE = (8, False, 'little')
    I128_BE = (16, True, 'big')
    I128_LE = (16, True, 'little')
    U128_BE = (16, False, 'big')
    U128_LE = (16, False, 'little')

    def __init__(self, width: int, signed: bool, byteorder: str):
        self.width = width
        self.signed = signed
        self.byteorder = byteorder

    @property
    def label(self) -> str:
        """Lowercase name used on the command line, e.g. 'u64_le'."""
        return self.name.lower()

    @property
    def bits(self) -> int:
        return self.width * 8

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @classmethod
    def parse(cls, name: str) -> 'IntType':
        """Look up a type by its label (case-insensitive)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown integer type: {name}") from None


def hex_to_int(hex_str: str, int_type: Union[IntType, str]) -> int:
    """Convert hex_str to an integer of the given type."""
    if not isinstance(int_type, IntType):
        int_type = IntType.parse(int_type)
    data = decode_and_validate(hex_str, int_type.width)
    return _reinterpret(data, int_type)


def _reinterpret(data: bytes, int_type: IntType) -> int:
    if len(data) != int_type.width:
        raise ConversionFailed()
    value = int.from_bytes(data, int_type.byteorder, signed=int_type.signed)
    if not int_type.min_value <= value <= int_type.max_value:
        raise ConversionFailed()
    return value


def hex_to_i8(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I8)


def hex_to_u8(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U8)


def hex_to_i16_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I16_BE)


def hex_to_i16_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I16_LE)


def hex_to_u16_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U16_BE)


def hex_to_u16_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U16_LE)


def hex_to_i32_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I32_BE)


def hex_to_i32_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I32_LE)


def hex_to_u32_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U32_BE)


def hex_to_u32_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U32_LE)


def hex_to_i64_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I64_BE)


def hex_to_i64_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I64_LE)


def hex_to_u64_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U64_BE)


def hex_to_u64_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U64_LE)


def hex_to_i128_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I128_BE)


def hex_to_i128_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.I128_LE)


def hex_to_u128_be(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U128_BE)


def hex_to_u128_le(hex_str: str) -> int:
    return hex_to_int(hex_str, IntType.U128_LE)


CONVERTERS = {
    IntType.I8: hex_to_i8,
    IntType.U8: hex_to_u8,
    IntType.I16_BE: hex_to_i16_be,
    IntType.I16_LE: hex_to_i16_le,
    IntType.U16_BE: hex_to_u16_be,
    IntType.U16_LE: hex_to_u16_le,
    IntType.I32_BE: hex_to_i32_be,
    IntType.I32_LE: hex_to_i32_le,
    IntType.U32_BE: hex_to_u32_be,
    IntType.U32_LE: hex_to_u32_le,
    IntType.I64_BE: hex_to_i64_be,
    IntType.I64_LE: hex_to_i64_le,
    IntType.U64_BE: hex_to_u64_be,
    IntType.U64_LE: hex_to_u64_le,
    IntType.I128_BE: hex_to_i128_be,
    IntType.I128_LE: hex_to_i128_le,
    IntType.U128_BE: hex_to_u128_be,
    IntType.U128_LE: hex_to_u128_le,
}
