"""Source adapters - Implementations of the source ports.

Available implementations:
- OsmiumExtractReader / OsmiumSourceEnumerator: OSM files via pyosmium
- InMemorySourceEnumerator: Primitives held in memory
"""

from .memory_source import InMemorySourceEnumerator
from .osmium_reader import OsmiumExtractReader, OsmiumSourceEnumerator

__all__ = [
    "InMemorySourceEnumerator",
    "OsmiumExtractReader",
    "OsmiumSourceEnumerator",
]
