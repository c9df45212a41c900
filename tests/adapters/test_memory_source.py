"""Tests for the in-memory two-pass enumerator."""

from phaeton.adapters.source import InMemorySourceEnumerator
from phaeton.domain.primitives import DensePoint, Point, Relation, Way
from phaeton.graph.filter import is_road_way


def _collect(enumerator, predicate=is_road_way):
    seen = []
    enumerator.enumerate(predicate, seen.append)
    return seen


def test_only_dependent_points_are_visited():
    road = Way(id=1, refs=(10, 11), tags=(("highway", "primary"),))
    building = Way(id=2, refs=(12,), tags=(("building", "yes"),))
    extract = InMemorySourceEnumerator(
        [
            Point(id=10, lon=0.0, lat=0.0),
            DensePoint(id=11, lon=1.0, lat=1.0),
            Point(id=12, lon=2.0, lat=2.0),
            road,
            building,
        ]
    )

    seen = _collect(extract)

    assert road in seen
    assert building not in seen
    assert {p.id for p in seen if isinstance(p, (Point, DensePoint))} == {10, 11}


def test_points_listed_after_ways_are_still_delivered():
    extract = InMemorySourceEnumerator(
        [Way(id=1, refs=(5,), tags=(("highway", "path"),)), Point(id=5, lon=3.0, lat=4.0)]
    )

    assert Point(id=5, lon=3.0, lat=4.0) in _collect(extract)


def test_relations_pass_through():
    extract = InMemorySourceEnumerator([Relation(id=3)])
    assert _collect(extract) == [Relation(id=3)]


def test_predicate_receives_tag_pairs():
    calls = []

    def predicate(tags):
        calls.append(tags)
        return False

    InMemorySourceEnumerator([Way(id=1, refs=(), tags=(("a", "b"),))]).enumerate(
        predicate, lambda primitive: None
    )

    # Once per pass
    assert calls == [(("a", "b"),), (("a", "b"),)]
