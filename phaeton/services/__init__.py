"""Services layer - Application orchestration.

Available services:
- GraphService: Extract ingestion and snapshot persistence
"""

from .graph_service import GraphService

__all__ = ["GraphService"]
