"""Hex string to fixed-width integer conversions."""

from .conversions import (
    CONVERTERS,
    IntType,
    hex_to_i8,
    hex_to_i16_be,
    hex_to_i16_le,
    hex_to_i32_be,
    hex_to_i32_le,
    hex_to_i64_be,
    hex_to_i64_le,
    hex_to_i128_be,
    hex_to_i128_le,
    hex_to_int,
    hex_to_u8,
    hex_to_u16_be,
    hex_to_u16_le,
    hex_to_u32_be,
    hex_to_u32_le,
    hex_to_u64_be,
    hex_to_u64_le,
    hex_to_u128_be,
    hex_to_u128_le,
)
from .errors import ConversionError, ConversionFailed, IncorrectLength, InvalidHex
from .hex_encoding import decode_and_validate

__version__ = '0.1.0'
