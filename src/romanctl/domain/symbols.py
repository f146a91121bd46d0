"""Symbol table for canonical Roman numerals.

Four decimal-place groups (thousands, hundreds, tens, units), each listing
its symbol clusters from largest to smallest value. A digit of zero at a
place is represented by selecting no cluster from that group.

INVARIANT: The table is immutable. Both the decoder and the encoder read it;
nothing writes to it.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import NamedTuple

MIN_VALUE = 1
MAX_VALUE = 3999


class Place(StrEnum):
    """Decimal places, most significant first."""

    THOUSANDS = "thousands"
    HUNDREDS = "hundreds"
    TENS = "tens"
    UNITS = "units"


class Cluster(NamedTuple):
    """One symbol cluster and the digit value it stands for at its place."""

    symbol: str
    value: int


class PlaceGroup(NamedTuple):
    """All clusters for one decimal place, in descending value order."""

    place: Place
    clusters: tuple[Cluster, ...]


def _group(place: Place, *pairs: tuple[str, int]) -> PlaceGroup:
    return PlaceGroup(place, tuple(Cluster(symbol, value) for symbol, value in pairs))


SYMBOL_TABLE: tuple[PlaceGroup, ...] = (
    _group(
        Place.THOUSANDS,
        ("MMM", 3000),
        ("MM", 2000),
        ("M", 1000),
    ),
    _group(
        Place.HUNDREDS,
        ("CM", 900),
        ("DCCC", 800),
        ("DCC", 700),
        ("DC", 600),
        ("D", 500),
        ("CD", 400),
        ("CCC", 300),
        ("CC", 200),
        ("C", 100),
    ),
    _group(
        Place.TENS,
        ("XC", 90),
        ("LXXX", 80),
        ("LXX", 70),
        ("LX", 60),
        ("L", 50),
        ("XL", 40),
        ("XXX", 30),
        ("XX", 20),
        ("X", 10),
    ),
    _group(
        Place.UNITS,
        ("IX", 9),
        ("VIII", 8),
        ("VII", 7),
        ("VI", 6),
        ("V", 5),
        ("IV", 4),
        ("III", 3),
        ("II", 2),
        ("I", 1),
    ),
)


def iter_clusters() -> Iterator[tuple[Place, Cluster]]:
    """Yield ``(place, cluster)`` for every table entry in table order.

    Examples:
        >>> next(iter_clusters())
        (<Place.THOUSANDS: 'thousands'>, Cluster(symbol='MMM', value=3000))
    """
    for group in SYMBOL_TABLE:
        for cluster in group.clusters:
            yield group.place, cluster
