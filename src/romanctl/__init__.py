"""romanctl — canonical Roman numeral conversion."""

from romanctl.domain.errors import DecodeError, EncodeError, NumeralError
from romanctl.domain.numerals import decode, encode, is_canonical

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "EncodeError",
    "NumeralError",
    "__version__",
    "decode",
    "encode",
    "is_canonical",
]
