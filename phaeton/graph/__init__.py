"""Graph construction from enumerated extract primitives.

This subpackage holds the ingestion filter deciding which ways belong
to the road network and the builder that turns primitives into the
in-memory graph.
"""

from .builder import GraphBuilder, IngestReport, apply_primitive
from .filter import ROAD_TAG_KEY, is_road_way, tag_key_predicate

__all__ = [
    "GraphBuilder",
    "IngestReport",
    "apply_primitive",
    "ROAD_TAG_KEY",
    "is_road_way",
    "tag_key_predicate",
]
