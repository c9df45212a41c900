"""Domain layer - Graph model, source primitives and errors.

This module contains the graph data model, the primitive kinds produced
by a source extract, and the typed errors used throughout the package.
No I/O happens here.
"""

from .errors import (
    ConfigurationError,
    PhaetonError,
    SnapshotDecodeError,
    SnapshotError,
    SnapshotReadError,
    SnapshotWriteError,
    SourceError,
    UsageError,
)
from .models import Edge, Graph, GraphSummary, Junction, Tag, Vertex, to_float32
from .primitives import DensePoint, Point, Primitive, Relation, Way

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "Tag",
    "Junction",
    "Graph",
    "GraphSummary",
    "to_float32",
    # Primitives
    "Way",
    "Point",
    "DensePoint",
    "Relation",
    "Primitive",
    # Errors
    "PhaetonError",
    "UsageError",
    "SourceError",
    "SnapshotError",
    "SnapshotReadError",
    "SnapshotWriteError",
    "SnapshotDecodeError",
    "ConfigurationError",
]
