"""Graph construction from source primitives.

``apply_primitive`` maps one primitive to at most one graph mutation:

- Way: append (or replace by id) an Edge and store its tags
- Point / DensePoint: insert a Vertex with single-precision coordinates
- Relation and unknown kinds: ignored
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..domain.models import Edge, Graph, Tag, Vertex
from ..domain.primitives import DensePoint, Point, Relation, Way
from ..ports.source import SourceEnumeratorPort, WayPredicate
from .filter import is_road_way

logger = logging.getLogger(__name__)


def apply_primitive(graph: Graph, primitive: Any) -> bool:
    """Apply a single primitive to the graph.

    Returns:
        True if the graph was mutated.
    """
    if isinstance(primitive, Way):
        edge = Edge(id=primitive.id, vertices=tuple(primitive.refs))
        tags = [Tag(key=key, value=value) for key, value in primitive.tags]
        graph.add_edge(edge, tags)
        return True

    if isinstance(primitive, (Point, DensePoint)):
        graph.add_vertex(Vertex(id=primitive.id, lon=primitive.lon, lat=primitive.lat))
        return True

    if isinstance(primitive, Relation):
        return False

    # Kinds a newer enumerator might introduce
    return False


@dataclass(frozen=True, slots=True)
class IngestReport:
    """Counts of primitives seen during one ingestion.

    Attributes:
        ways: Ways applied as edges
        points: Points applied as vertices (either encoding)
        replaced_edges: Ways whose id was already present
        skipped: Relations and unknown kinds
    """

    ways: int = 0
    points: int = 0
    replaced_edges: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.ways + self.points + self.skipped


@dataclass
class GraphBuilder:
    """Visitor populating a graph from an enumerator.

    Repeated ``ingest`` calls accumulate into the same graph. An error
    raised by the enumerator aborts ingestion; whatever was applied
    before stays in the graph.

    Attributes:
        graph: The graph to populate (exclusively owned by the caller)
        progress_every: Log progress every N primitives (0 disables)
    """

    graph: Graph
    progress_every: int = 0

    _ways: int = field(default=0, init=False, repr=False)
    _points: int = field(default=0, init=False, repr=False)
    _replaced: int = field(default=0, init=False, repr=False)
    _skipped: int = field(default=0, init=False, repr=False)

    def __call__(self, primitive: Any) -> None:
        if isinstance(primitive, Way):
            if primitive.id in self.graph.metadata:
                self._replaced += 1
            apply_primitive(self.graph, primitive)
            self._ways += 1
        elif apply_primitive(self.graph, primitive):
            self._points += 1
        else:
            self._skipped += 1

        seen = self._ways + self._points + self._skipped
        if self.progress_every and seen % self.progress_every == 0:
            logger.info(
                "Ingestion progress",
                extra={"primitives": seen, "ways": self._ways, "points": self._points},
            )

    def report(self) -> IngestReport:
        return IngestReport(
            ways=self._ways,
            points=self._points,
            replaced_edges=self._replaced,
            skipped=self._skipped,
        )

    def ingest(
        self,
        enumerator: SourceEnumeratorPort,
        predicate: WayPredicate = is_road_way,
    ) -> IngestReport:
        """Run the enumerator's two passes with this builder as visitor.

        Returns:
            Counts for this call only.

        Raises:
            SourceError: Propagated unchanged from the enumerator.
        """
        before = self.report()
        enumerator.enumerate(predicate, self)
        after = self.report()

        report = IngestReport(
            ways=after.ways - before.ways,
            points=after.points - before.points,
            replaced_edges=after.replaced_edges - before.replaced_edges,
            skipped=after.skipped - before.skipped,
        )
        logger.debug(
            "Primitives applied",
            extra={
                "ways": report.ways,
                "points": report.points,
                "replaced_edges": report.replaced_edges,
                "skipped": report.skipped,
            },
        )
        return report
