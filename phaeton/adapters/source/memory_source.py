"""In-memory source enumerator.

Runs the same two-pass contract as a file-backed enumerator over a
sequence of primitives. Useful for synthetic extracts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Set

from ...domain.primitives import DensePoint, Point, Way
from ...ports.source import PrimitiveVisitor, WayPredicate


@dataclass
class InMemorySourceEnumerator:
    """Two-pass enumerator over an in-memory list of primitives.

    Attributes:
        primitives: Primitives in "file" order
    """

    primitives: Sequence[Any] = field(default_factory=list)

    def enumerate(self, predicate: WayPredicate, visitor: PrimitiveVisitor) -> None:
        # Pass 1: dependent point ids of accepted ways
        needed: Set[int] = set()
        for primitive in self.primitives:
            if isinstance(primitive, Way) and predicate(primitive.tags):
                needed.update(primitive.refs)

        # Pass 2: replay
        for primitive in self.primitives:
            if isinstance(primitive, Way):
                if predicate(primitive.tags):
                    visitor(primitive)
            elif isinstance(primitive, (Point, DensePoint)):
                if primitive.id in needed:
                    visitor(primitive)
            else:
                visitor(primitive)
