"""Tests for the graph data model."""

import struct

from phaeton.domain.models import Edge, Graph, Junction, Tag, Vertex, to_float32


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def test_to_float32_matches_ieee_single_precision():
    for value in (0.1, -157.858_312_345, 21.306_944_444, 179.999_999_9, -90.0):
        assert to_float32(value) == _f32(value)


def test_vertex_narrows_coordinates():
    vertex = Vertex(id=1, lon=-157.858_312_345, lat=21.306_944_444)

    assert vertex.lon == _f32(-157.858_312_345)
    assert vertex.lat == _f32(21.306_944_444)
    assert vertex.lon != -157.858_312_345


def test_add_vertex_last_write_wins():
    graph = Graph()
    graph.add_vertex(Vertex(id=1, lon=1.0, lat=2.0))
    graph.add_vertex(Vertex(id=1, lon=3.0, lat=4.0))

    assert graph.vertices == {1: Vertex(id=1, lon=3.0, lat=4.0)}


def test_add_edge_appends_new_ids_in_order():
    graph = Graph()
    assert graph.add_edge(Edge(id=10, vertices=(1, 2)), [Tag("highway", "primary")])
    assert graph.add_edge(Edge(id=5, vertices=(2, 3)))

    assert [edge.id for edge in graph.edges] == [10, 5]
    assert graph.metadata == {10: [Tag("highway", "primary")], 5: []}


def test_add_edge_replaces_repeated_id_in_place():
    graph = Graph()
    graph.add_edge(Edge(id=1, vertices=(1, 2)), [Tag("highway", "primary")])
    graph.add_edge(Edge(id=2, vertices=(2, 3)), [Tag("highway", "service")])

    appended = graph.add_edge(Edge(id=1, vertices=(7, 8, 9)), [Tag("highway", "trunk")])

    assert appended is False
    assert graph.edges == [Edge(id=1, vertices=(7, 8, 9)), Edge(id=2, vertices=(2, 3))]
    assert graph.metadata[1] == [Tag("highway", "trunk")]
    assert len(graph.edges) == len(graph.metadata)


def test_replace_with_swaps_all_fields_and_reindexes():
    graph = Graph()
    graph.add_edge(Edge(id=1, vertices=(1, 2)))

    other = Graph(edges=[Edge(id=9, vertices=(4, 5))], metadata={9: []})
    graph.replace_with(other)

    assert graph.vertices == {}
    assert graph.edges == [Edge(id=9, vertices=(4, 5))]

    graph.add_edge(Edge(id=9, vertices=(6,)))
    assert graph.edges == [Edge(id=9, vertices=(6,))]


def test_graph_equality_ignores_index():
    left = Graph()
    left.add_edge(Edge(id=1, vertices=(1, 2)), [Tag("highway", "path")])

    right = Graph(edges=[Edge(id=1, vertices=(1, 2))], metadata={1: [Tag("highway", "path")]})

    assert left == right


def test_summary_and_is_empty():
    graph = Graph()
    assert graph.is_empty
    assert graph.summary().vertices == 0

    graph.add_vertex(Vertex(id=1, lon=0.0, lat=0.0))
    graph.add_edge(Edge(id=3, vertices=(1,)), [Tag("highway", "footway")])

    summary = graph.summary()
    assert not graph.is_empty
    assert (summary.vertices, summary.edges, summary.tagged_edges) == (1, 1, 1)


def test_junction_is_a_plain_record():
    junction = Junction(id=4, edges=(1, 2, 3))
    assert junction.edges == (1, 2, 3)
    assert not hasattr(Graph(), "junctions")
