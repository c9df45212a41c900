"""Ingestion filter for road-network ways."""

from typing import Sequence, Tuple

from ..ports.source import WayPredicate

ROAD_TAG_KEY = "highway"


def is_road_way(tags: Sequence[Tuple[str, str]]) -> bool:
    """Return True if any tag has the key ``highway``.

    The value is not inspected: ``highway=construction`` qualifies too.
    """
    return any(key == ROAD_TAG_KEY for key, _ in tags)


def tag_key_predicate(key: str) -> WayPredicate:
    """Build a predicate accepting ways that carry a tag with ``key``."""
    if key == ROAD_TAG_KEY:
        return is_road_way

    def predicate(tags: Sequence[Tuple[str, str]]) -> bool:
        return any(tag_key == key for tag_key, _ in tags)

    return predicate
