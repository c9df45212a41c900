"""Graph service - Ingestion and persistence orchestrator.

Wires a source opener, the ingestion filter, the graph builder and a
snapshot repository together. All calls run synchronously on the
calling thread.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..config import IngestConfig, get_config
from ..domain.models import Graph
from ..graph.builder import GraphBuilder, IngestReport
from ..graph.filter import tag_key_predicate
from ..ports.snapshot import SnapshotRepositoryPort
from ..ports.source import SourceOpenerPort, WayPredicate


@dataclass
class GraphService:
    """Main service for building and persisting road-network graphs.

    Attributes:
        source_opener: Opens extract files as two-pass enumerators
        snapshot_repository: Saves and loads graph snapshots
        config: Ingestion configuration (filter key, progress logging)
    """

    source_opener: SourceOpenerPort
    snapshot_repository: SnapshotRepositoryPort
    config: IngestConfig = field(default_factory=lambda: get_config().ingest)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def predicate(self) -> WayPredicate:
        return tag_key_predicate(self.config.filter_key)

    def ingest(
        self,
        path: Union[str, Path],
        graph: Optional[Graph] = None,
    ) -> Graph:
        """Read an extract into a graph.

        Args:
            path: Extract file.
            graph: Graph to accumulate into (a new one if omitted).

        Returns:
            The populated graph.

        Raises:
            SourceError: If the extract cannot be opened or decoded. The
                graph keeps whatever was applied before the failure.
        """
        graph = graph if graph is not None else Graph()
        self._logger.info(
            "Starting ingestion",
            extra={"path": str(path), "filter_key": self.config.filter_key},
        )

        enumerator = self.source_opener.open(path)
        builder = GraphBuilder(graph, progress_every=self.config.progress_every)
        report = builder.ingest(enumerator, self.predicate)

        self._log_report(path, graph, report)
        return graph

    def _log_report(self, path: Union[str, Path], graph: Graph, report: IngestReport) -> None:
        summary = graph.summary()
        self._logger.info(
            "Ingestion complete",
            extra={
                "path": str(path),
                "ways": report.ways,
                "points": report.points,
                "replaced_edges": report.replaced_edges,
                "vertices": summary.vertices,
                "edges": summary.edges,
            },
        )

    def save(self, graph: Graph, path: Optional[Union[str, Path]] = None) -> Path:
        """Write a snapshot of the graph."""
        return self.snapshot_repository.save(graph, path)

    def load(
        self,
        path: Optional[Union[str, Path]] = None,
        graph: Optional[Graph] = None,
    ) -> Graph:
        """Load a snapshot, replacing ``graph``'s contents when given."""
        if graph is None:
            return self.snapshot_repository.load(path)
        return self.snapshot_repository.load_into(graph, path)

    def build(
        self,
        extract_path: Union[str, Path],
        snapshot_path: Optional[Union[str, Path]] = None,
    ) -> Graph:
        """Ingest an extract and, if ``snapshot_path`` is given, save it."""
        graph = self.ingest(extract_path)
        if snapshot_path is not None:
            self.save(graph, snapshot_path)
        return graph
