"""Snapshot port - Graph persistence abstraction."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import Graph


class SnapshotRepositoryPort(Protocol):
    """Port for saving and loading graph snapshots.

    Implementation: adapters/snapshot/msgpack_repository.py

    For any graph G, loading what ``save`` wrote yields a graph
    content-equal to G.
    """

    def save(self, graph: Graph, path: Optional[Union[str, Path]] = None) -> Path:
        """Serialize the graph to ``path``.

        Returns:
            The path that was written.

        Raises:
            SnapshotWriteError: On filesystem failure.
        """
        ...

    def load(self, path: Optional[Union[str, Path]] = None) -> Graph:
        """Read a snapshot and build a new Graph from it.

        Raises:
            SnapshotReadError: On filesystem failure.
            SnapshotDecodeError: If the content is corrupt or mistyped.
        """
        ...

    def load_into(self, graph: Graph, path: Optional[Union[str, Path]] = None) -> Graph:
        """Replace ``graph``'s vertices, edges and metadata with a snapshot's.

        Returns:
            The same ``graph`` instance.
        """
        ...
