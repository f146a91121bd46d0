"""Conversion errors, one kind per direction.

Both are terminal: the only recovery is different input. No partial
result ever accompanies an error.
"""

from __future__ import annotations

from typing import Any


class NumeralError(ValueError):
    """Base class for conversion failures."""

    code: str = "NUMERAL_ERROR"

    def __init__(self, message: str, *, value: Any) -> None:
        super().__init__(message)
        self.value = value


class DecodeError(NumeralError):
    """The string is not a canonical Roman numeral in 1..3999.

    Empty input, non-canonical repetition, wrong ordering, unknown
    characters and trailing garbage all land here without distinction.
    ``remainder`` holds whatever the place scan left unconsumed.
    """

    code = "INVALID_NUMERAL"

    def __init__(self, numeral: str, *, remainder: str = "") -> None:
        super().__init__(f"'{numeral}' is not a canonical Roman numeral", value=numeral)
        self.remainder = remainder


class EncodeError(NumeralError):
    """The integer has no Roman representation (zero, negative, or above 3999)."""

    code = "OUT_OF_RANGE"

    def __init__(self, value: int, *, minimum: int, maximum: int) -> None:
        super().__init__(f"{value} not in range {minimum}..{maximum}", value=value)
        self.minimum = minimum
        self.maximum = maximum
