"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters: where primitives come from (a source extract) and where
graphs are persisted (snapshots).
"""

from .snapshot import SnapshotRepositoryPort
from .source import (
    PrimitiveVisitor,
    SourceEnumeratorPort,
    SourceOpenerPort,
    WayPredicate,
)

__all__ = [
    # Source
    "WayPredicate",
    "PrimitiveVisitor",
    "SourceEnumeratorPort",
    "SourceOpenerPort",
    # Snapshot
    "SnapshotRepositoryPort",
]
