"""Primitive kinds delivered by a source extract enumerator.

A primitive is one of four variants: a way, an individually encoded
point, a densely encoded point, or a relation. Consumers dispatch on
the concrete type; kinds they do not recognize are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

TagPairs = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class Way:
    """An ordered list of point references plus tags.

    Attributes:
        id: Way identifier
        refs: Referenced point ids, in order
        tags: Key/value pairs, in source order
    """

    id: int
    refs: Tuple[int, ...] = field(default_factory=tuple)
    tags: TagPairs = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Point:
    """An individually encoded point with double-precision coordinates."""

    id: int
    lon: float
    lat: float


@dataclass(frozen=True, slots=True)
class DensePoint:
    """A point decoded from a dense (delta-encoded) block.

    Semantically the same as Point.
    """

    id: int
    lon: float
    lat: float


@dataclass(frozen=True, slots=True)
class Relation:
    """A grouping primitive. Not modeled by the graph."""

    id: int


Primitive = Union[Way, Point, DensePoint, Relation]
