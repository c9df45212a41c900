"""Msgpack graph snapshot repository.

A snapshot is a single self-describing msgpack document:

    {
        "vertices": {id: {"lon": float32, "lat": float32}, ...},
        "edges":    [{"id": int, "vertices": [int, ...]}, ...],
        "metadata": {edge_id: [{"key": str, "value": str}, ...], ...},
    }

Floats are packed with single precision, which is exact for vertex
coordinates. The document carries no version tag. On load the content
is validated against pydantic records before any Graph is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import msgpack
from pydantic import BaseModel, ConfigDict, ValidationError

from ...config import SnapshotConfig, get_config
from ...domain.errors import SnapshotDecodeError, SnapshotReadError, SnapshotWriteError
from ...domain.models import Edge, Graph, Tag, Vertex


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


class VertexRecord(_Record):
    lon: float
    lat: float


class EdgeRecord(_Record):
    id: int
    vertices: List[int]


class TagRecord(_Record):
    key: str
    value: str


class SnapshotDocument(_Record):
    """Schema of the whole snapshot document."""

    vertices: Dict[int, VertexRecord]
    edges: List[EdgeRecord]
    metadata: Dict[int, List[TagRecord]]


def encode_graph(graph: Graph) -> Dict[str, Any]:
    """Convert a graph into the plain snapshot document."""
    return {
        "vertices": {
            vid: {"lon": vertex.lon, "lat": vertex.lat}
            for vid, vertex in graph.vertices.items()
        },
        "edges": [{"id": edge.id, "vertices": list(edge.vertices)} for edge in graph.edges],
        "metadata": {
            eid: [{"key": tag.key, "value": tag.value} for tag in tags]
            for eid, tags in graph.metadata.items()
        },
    }


def decode_graph(document: SnapshotDocument) -> Graph:
    """Build a graph from a validated snapshot document."""
    return Graph(
        vertices={
            vid: Vertex(id=vid, lon=record.lon, lat=record.lat)
            for vid, record in document.vertices.items()
        },
        edges=[Edge(id=record.id, vertices=tuple(record.vertices)) for record in document.edges],
        metadata={
            eid: [Tag(key=record.key, value=record.value) for record in records]
            for eid, records in document.metadata.items()
        },
    )


@dataclass
class MsgpackSnapshotRepository:
    """Snapshot repository writing msgpack files.

    This adapter implements SnapshotRepositoryPort.

    Attributes:
        config: Snapshot configuration (default location)
    """

    config: SnapshotConfig = field(default_factory=lambda: get_config().snapshot)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _resolve(self, path: Optional[Union[str, Path]]) -> Path:
        return Path(path) if path is not None else self.config.default_path

    def save(self, graph: Graph, path: Optional[Union[str, Path]] = None) -> Path:
        """Serialize the graph to a msgpack file.

        Args:
            graph: Graph to write. It is not modified.
            path: Target file (defaults to the configured snapshot path).

        Returns:
            The path that was written.

        Raises:
            SnapshotWriteError: If the graph cannot be encoded or the file
                cannot be written.
        """
        target = self._resolve(path)

        try:
            # Unencodable content (lone surrogates, ints beyond 64 bits) fails here
            payload = msgpack.packb(encode_graph(graph), use_single_float=True)
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("wb") as f:
                f.write(payload)
        except (OSError, TypeError, ValueError, OverflowError) as e:
            raise SnapshotWriteError(
                f"Failed to write snapshot {target}",
                path=str(target),
                cause=e,
            )

        summary = graph.summary()
        self._logger.info(
            "Snapshot saved",
            extra={
                "path": str(target),
                "bytes": len(payload),
                "vertices": summary.vertices,
                "edges": summary.edges,
            },
        )
        return target

    def load(self, path: Optional[Union[str, Path]] = None) -> Graph:
        """Read a msgpack snapshot into a new Graph.

        Args:
            path: Snapshot file (defaults to the configured snapshot path).

        Returns:
            A graph content-equal to the one that was saved.

        Raises:
            SnapshotReadError: If the file cannot be read.
            SnapshotDecodeError: If the content is corrupt or mistyped.
        """
        source = self._resolve(path)

        try:
            with source.open("rb") as f:
                payload = f.read()
        except OSError as e:
            raise SnapshotReadError(
                f"Failed to read snapshot {source}",
                path=str(source),
                cause=e,
            )

        try:
            raw = msgpack.unpackb(payload, raw=False, strict_map_key=False)
        except (ValueError, TypeError, msgpack.exceptions.UnpackException) as e:
            raise SnapshotDecodeError(
                f"Snapshot is not a valid msgpack document: {source}",
                path=str(source),
                cause=e,
            )

        try:
            document = SnapshotDocument.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            raise SnapshotDecodeError(
                f"Snapshot has an unexpected shape: {source}",
                path=str(source),
                cause=e,
                detail=".".join(str(part) for part in first["loc"]),
            )

        graph = decode_graph(document)
        summary = graph.summary()
        self._logger.info(
            "Snapshot loaded",
            extra={
                "path": str(source),
                "vertices": summary.vertices,
                "edges": summary.edges,
            },
        )
        return graph

    def load_into(self, graph: Graph, path: Optional[Union[str, Path]] = None) -> Graph:
        """Replace the graph's contents with a snapshot's.

        The graph is left untouched if loading fails.

        Returns:
            The same ``graph`` instance.
        """
        graph.replace_with(self.load(path))
        return graph
