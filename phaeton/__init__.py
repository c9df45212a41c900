"""Top-level package for phaeton.

phaeton loads an OpenStreetMap road-network extract into an in-memory
graph of vertices, edges and edge tags, and persists that graph as a
compact binary snapshot. Routing on top of the graph is future work.
"""

__version__ = "0.1.0"
