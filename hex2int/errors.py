"""Errors raised by the hex to integer conversions."""


class ConversionError(ValueError):
    """Base class for all conversion failures."""


class InvalidHex(ConversionError):
    """Input is not a sequence of hex digit pairs."""

    def __init__(self, detail: str):
        super().__init__(f"Invalid hexadecimal string: {detail}")
        self.detail = detail


class IncorrectLength(ConversionError):
    """Decoded byte count differs from the width of the target type."""

    def __init__(self, expected: int, found: int):
        super().__init__(
            f"Incorrect hexadecimal string length: expected {expected}, got {found}"
        )
        self.expected = expected
        self.found = found


class ConversionFailed(ConversionError):
    """Validated bytes could not be reinterpreted as the target type."""

    def __init__(self):
        super().__init__("Failed to convert bytes to target integer type")
