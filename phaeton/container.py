"""Dependency injection container.

Maps each port to a factory. Instances are built lazily on first
``resolve`` and shared unless registered with ``singleton=False``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, get_config

Factory = Callable[[], Any]


@dataclass
class Container:
    """Port-to-adapter bindings for one phaeton process.

    Usage:
        container = Container.create_default()
        service = container.resolve(GraphService)

        # Swap the extract reader in tests
        container.register(SourceOpenerPort, lambda: FakeOpener())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type, Tuple[Factory, bool]] = field(default_factory=dict, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type, factory: Factory, singleton: bool = True) -> None:
        """Bind ``port_type`` to ``factory``, dropping any cached instance."""
        with self._lock:
            self._bindings[port_type] = (factory, singleton)
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type) -> Any:
        """Return the instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            if port_type not in self._bindings:
                raise KeyError(f"Type not registered: {port_type}")

            factory, singleton = self._bindings[port_type]
            if not singleton:
                return factory()
            if port_type not in self._instances:
                self._instances[port_type] = factory()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the pyosmium reader, the msgpack repository and GraphService."""
        from .adapters.snapshot import MsgpackSnapshotRepository
        from .adapters.source import OsmiumExtractReader
        from .ports.snapshot import SnapshotRepositoryPort
        from .ports.source import SourceOpenerPort
        from .services import GraphService

        config = config or get_config()
        container = cls(config=config)

        container.register(SourceOpenerPort, OsmiumExtractReader)
        container.register(
            SnapshotRepositoryPort,
            lambda: MsgpackSnapshotRepository(config.snapshot),
        )
        container.register(
            GraphService,
            lambda: GraphService(
                source_opener=container.resolve(SourceOpenerPort),
                snapshot_repository=container.resolve(SnapshotRepositoryPort),
                config=config.ingest,
            ),
        )
        return container
