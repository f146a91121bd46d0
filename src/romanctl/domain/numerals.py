"""Decode and encode canonical Roman numerals.

Both directions walk the symbol table one decimal place at a time and
consume at most one cluster per place. A conversion succeeds only when the
input is fully consumed and the result is non-trivial, which keeps
``decode(encode(n)) == n`` and ``encode(decode(s)) == s`` over the whole
valid domain.
"""

from __future__ import annotations

from romanctl.domain.errors import DecodeError, EncodeError
from romanctl.domain.symbols import MAX_VALUE, MIN_VALUE, SYMBOL_TABLE


def decode(numeral: str) -> int:
    """Return the integer value of a canonical Roman numeral.

    Matching is by prefix against the unconsumed remainder, so clusters
    are tried in descending order and the first hit wins for each place.

    Raises:
        DecodeError: *numeral* is empty, non-canonical, or leaves
            characters unconsumed.
        TypeError: *numeral* is not a string.

    Examples:
        >>> decode("MMMCMXCIX")
        3999
        >>> decode("XLII")
        42
    """
    if not isinstance(numeral, str):
        raise TypeError(f"expected str, got {type(numeral).__name__}")

    remainder = numeral
    total = 0
    for group in SYMBOL_TABLE:
        for cluster in group.clusters:
            if remainder.startswith(cluster.symbol):
                total += cluster.value
                remainder = remainder[len(cluster.symbol) :]
                break

    if remainder or total == 0:
        raise DecodeError(numeral, remainder=remainder)
    return total


def encode(value: int) -> str:
    """Return the canonical Roman numeral for *value*.

    Raises:
        EncodeError: *value* is outside 1..3999.
        TypeError: *value* is not an int (``bool`` is rejected too).

    Examples:
        >>> encode(3888)
        'MMMDCCCLXXXVIII'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")

    remainder = value
    parts: list[str] = []
    for group in SYMBOL_TABLE:
        for cluster in group.clusters:
            if cluster.value <= remainder:
                parts.append(cluster.symbol)
                remainder -= cluster.value
                break

    if remainder != 0 or not parts:
        raise EncodeError(value, minimum=MIN_VALUE, maximum=MAX_VALUE)
    return "".join(parts)


def is_canonical(numeral: str) -> bool:
    """Check whether *numeral* decodes cleanly."""
    try:
        decode(numeral)
    except DecodeError:
        return False
    return True
