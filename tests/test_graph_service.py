"""Tests for the graph service orchestration."""

from unittest.mock import MagicMock

import pytest

from phaeton.adapters.snapshot import MsgpackSnapshotRepository
from phaeton.adapters.source import InMemorySourceEnumerator
from phaeton.config import IngestConfig, SnapshotConfig
from phaeton.domain.errors import SourceError
from phaeton.domain.models import Edge, Graph, Tag, Vertex
from phaeton.domain.primitives import Point, Way
from phaeton.services import GraphService

PRIMITIVES = [
    Point(id=1, lon=-157.8583, lat=21.3069),
    Point(id=2, lon=-157.8590, lat=21.3075),
    Point(id=3, lon=-157.8600, lat=21.3080),
    Way(id=100, refs=(1, 2), tags=(("highway", "residential"),)),
    Way(id=200, refs=(2, 3), tags=(("railway", "rail"),)),
]


@pytest.fixture
def opener():
    mock = MagicMock()
    mock.open.return_value = InMemorySourceEnumerator(PRIMITIVES)
    return mock


@pytest.fixture
def service(opener, tmp_path):
    return GraphService(
        source_opener=opener,
        snapshot_repository=MsgpackSnapshotRepository(SnapshotConfig(data_dir=tmp_path)),
        config=IngestConfig(progress_every=0),
    )


def test_ingest_builds_new_graph(service, opener):
    graph = service.ingest("honolulu.osm.pbf")

    opener.open.assert_called_once_with("honolulu.osm.pbf")
    assert graph.edges == [Edge(id=100, vertices=(1, 2))]
    assert set(graph.vertices) == {1, 2}


def test_ingest_accumulates_into_given_graph(service):
    graph = Graph()
    graph.add_vertex(Vertex(id=42, lon=0.0, lat=0.0))

    result = service.ingest("honolulu.osm.pbf", graph)

    assert result is graph
    assert {1, 2, 42} <= set(graph.vertices)


def test_filter_key_from_config(opener, tmp_path):
    service = GraphService(
        source_opener=opener,
        snapshot_repository=MsgpackSnapshotRepository(SnapshotConfig(data_dir=tmp_path)),
        config=IngestConfig(filter_key="railway", progress_every=0),
    )

    graph = service.ingest("honolulu.osm.pbf")

    assert [edge.id for edge in graph.edges] == [200]
    assert graph.metadata == {200: [Tag("railway", "rail")]}
    assert set(graph.vertices) == {2, 3}


def test_open_failure_propagates(opener, service):
    opener.open.side_effect = SourceError("Extract file not found", path="nope.osm.pbf")

    with pytest.raises(SourceError):
        service.ingest("nope.osm.pbf")


def test_build_saves_snapshot(service, tmp_path):
    target = tmp_path / "out" / "honolulu.msgpack"

    graph = service.build("honolulu.osm.pbf", target)

    assert target.exists()
    assert service.load(target) == graph


def test_build_without_snapshot_writes_nothing(service, tmp_path):
    service.build("honolulu.osm.pbf")
    assert list(tmp_path.iterdir()) == []


def test_load_into_existing_graph(service, tmp_path):
    saved = service.ingest("honolulu.osm.pbf")
    service.save(saved)

    target = Graph()
    target.add_vertex(Vertex(id=99, lon=0.0, lat=0.0))
    loaded = service.load(graph=target)

    assert loaded is target
    assert target == saved


def test_ingest_logs_summary(service, caplog):
    with caplog.at_level("INFO", logger="phaeton.services.graph_service"):
        service.ingest("honolulu.osm.pbf")

    done = [r for r in caplog.records if r.getMessage() == "Ingestion complete"]
    assert len(done) == 1
    assert done[0].edges == 1
    assert done[0].vertices == 2
