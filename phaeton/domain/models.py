"""Graph data model for the road network.

Vertices, edges and tags are frozen dataclasses with slots. The Graph is
the mutable aggregate root; it is exclusively owned by its caller and
carries no internal synchronization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

import numpy as np


def to_float32(value: float) -> float:
    """Narrow a coordinate to the nearest 32-bit float value.

    The result is a Python float holding exactly the single-precision
    value, so it survives a float32 encode/decode unchanged.
    """
    return float(np.float32(value))


@dataclass(frozen=True, slots=True)
class Vertex:
    """A graph vertex representing a geometric point.

    Coordinates use the WGS 84 datum (EPSG:4326) and are stored with
    single precision.

    Attributes:
        id: Graph identifier, used for relational joins
        lon: Geographic longitude
        lat: Geographic latitude
    """

    id: int
    lon: float
    lat: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lon", to_float32(self.lon))
        object.__setattr__(self, "lat", to_float32(self.lat))


@dataclass(frozen=True, slots=True)
class Edge:
    """A graph edge, one continuous way segment.

    Attributes:
        id: Identifier taken from the source way
        vertices: Vertex ids in traversal order
    """

    id: int
    vertices: Tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Tag:
    """A key/value metadata item copied verbatim from the source way."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Junction:
    """A link between two or more edges.

    Reserved for routing-graph construction. Ingestion never fills it
    and snapshots do not carry it.

    Attributes:
        id: Graph identifier
        edges: Ids of the connected edges
    """

    id: int
    edges: Tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Entity counts of a graph."""

    vertices: int
    edges: int
    tagged_edges: int


@dataclass
class Graph:
    """Core graph data structure.

    Attributes:
        vertices: Vertex id -> Vertex
        edges: Edges in ingestion order
        metadata: Edge id -> the edge's own tags

    A repeated edge id replaces the earlier edge in place, keeping the
    position of the first occurrence, so ``edges`` and ``metadata``
    always hold one entry per id.
    """

    vertices: Dict[int, Vertex] = field(default_factory=dict)
    edges: List[Edge] = field(default_factory=list)
    metadata: Dict[int, List[Tag]] = field(default_factory=dict)

    _edge_positions: Dict[int, int] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.reindex()

    def add_vertex(self, vertex: Vertex) -> None:
        """Insert a vertex, overwriting any vertex with the same id."""
        self.vertices[vertex.id] = vertex

    def add_edge(self, edge: Edge, tags: Iterable[Tag] = ()) -> bool:
        """Insert an edge and its tags.

        Returns:
            True if the edge was appended, False if it replaced an
            existing edge with the same id.
        """
        self.metadata[edge.id] = list(tags)

        position = self._edge_positions.get(edge.id)
        if position is not None:
            self.edges[position] = edge
            return False

        self._edge_positions[edge.id] = len(self.edges)
        self.edges.append(edge)
        return True

    def reindex(self) -> None:
        """Rebuild the edge id index from ``edges``.

        When the sequence already holds duplicate ids (a snapshot from
        another producer), the index points at the last one.
        """
        self._edge_positions = {edge.id: pos for pos, edge in enumerate(self.edges)}

    def replace_with(self, other: Graph) -> None:
        """Replace vertices, edges and metadata wholesale with ``other``'s."""
        self.vertices = other.vertices
        self.edges = other.edges
        self.metadata = other.metadata
        self.reindex()

    def summary(self) -> GraphSummary:
        return GraphSummary(
            vertices=len(self.vertices),
            edges=len(self.edges),
            tagged_edges=len(self.metadata),
        )

    @property
    def is_empty(self) -> bool:
        """Check if the graph holds no vertices, edges or metadata."""
        return not (self.vertices or self.edges or self.metadata)
