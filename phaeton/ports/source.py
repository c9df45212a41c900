"""Source ports - Abstractions over a tag-annotated map extract.

The enumerator works in two passes. Pass 1 scans every way, applies the
predicate and records the point ids referenced by accepted ways. Pass 2
visits each accepted way and each recorded point once. Relations may be
visited too. Order across primitive kinds is unspecified.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol, Sequence, Tuple, Union

if TYPE_CHECKING:
    from ..domain.primitives import Primitive

# Receives the way's tags as (key, value) pairs in source order
WayPredicate = Callable[[Sequence[Tuple[str, str]]], bool]
PrimitiveVisitor = Callable[["Primitive"], None]


class SourceEnumeratorPort(Protocol):
    """Port for two-pass, predicate-filtered enumeration of an extract.

    Implementations:
    - adapters/source/osmium_reader.py (OsmiumSourceEnumerator)
    - adapters/source/memory_source.py (InMemorySourceEnumerator)
    """

    def enumerate(self, predicate: WayPredicate, visitor: PrimitiveVisitor) -> None:
        """Run both passes, calling ``visitor`` for every delivered primitive.

        Args:
            predicate: Decides whether a way belongs to the network.
            visitor: Called once per accepted way and dependent point.

        Raises:
            SourceError: If the extract cannot be decoded. Primitives
                already delivered stay delivered.
        """
        ...


class SourceOpenerPort(Protocol):
    """Port for opening an extract file."""

    def open(self, path: Union[str, Path]) -> SourceEnumeratorPort:
        """Open the extract at ``path``.

        Raises:
            SourceError: If the file is missing or unreadable.
        """
        ...
