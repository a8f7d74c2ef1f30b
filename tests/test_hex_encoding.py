import pytest

from hex2int.errors import ConversionError, IncorrectLength, InvalidHex
from hex2int.hex_encoding import decode_and_validate, hex_to_byte


def test_hex_to_byte_accepts_mixed_case():
    assert hex_to_byte('DeadBEEF') == bytearray(b'\xde\xad\xbe\xef')


def test_hex_to_byte_empty():
    assert hex_to_byte('') == bytearray()


@pytest.mark.parametrize('hex_str', ['abc', 'abz', 'é0', '0', 'x'])
def test_odd_number_of_digits_checked_first(hex_str):
    with pytest.raises(InvalidHex) as exc:
        hex_to_byte(hex_str)
    assert exc.value.detail == 'Odd number of digits'
    assert str(exc.value) == 'Invalid hexadecimal string: Odd number of digits'


@pytest.mark.parametrize('hex_str, char, position', [
    ('gg', 'g', 0),
    ('nothex', 'n', 0),
    ('0x10', 'x', 1),
    ('00 111', ' ', 2),
    ('abzz', 'z', 2),
    ('é', '\xc3', 0),
    ('00éab', '\xc3', 2),
])
def test_invalid_character_position_is_a_byte_offset(hex_str, char, position):
    with pytest.raises(InvalidHex) as exc:
        hex_to_byte(hex_str)
    assert exc.value.detail == f"Invalid character {char!r} at position {position}"


def test_decode_and_validate_returns_bytes():
    data = decode_and_validate('0102', 2)
    assert data == b'\x01\x02'
    assert isinstance(data, bytes)


@pytest.mark.parametrize('hex_str, expected, found', [
    ('0000', 1, 2),
    ('00', 2, 1),
    ('', 4, 0),
])
def test_decode_and_validate_length_mismatch(hex_str, expected, found):
    with pytest.raises(IncorrectLength) as exc:
        decode_and_validate(hex_str, expected)
    assert (exc.value.expected, exc.value.found) == (expected, found)
    assert str(exc.value) == (
        f"Incorrect hexadecimal string length: expected {expected}, got {found}"
    )


def test_errors_share_a_base_class():
    with pytest.raises(ConversionError):
        decode_and_validate('zz', 1)
    with pytest.raises(ValueError):
        decode_and_validate('00', 2)
