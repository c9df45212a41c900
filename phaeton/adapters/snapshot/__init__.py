"""Snapshot adapters - Implementations of the SnapshotRepositoryPort.

Available implementations:
- MsgpackSnapshotRepository: Graph snapshots as msgpack documents
"""

from .msgpack_repository import MsgpackSnapshotRepository

__all__ = ["MsgpackSnapshotRepository"]
