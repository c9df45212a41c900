"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PHAETON_INGEST_FILTER_KEY=highway
- PHAETON_INGEST_PROGRESS_EVERY=0
- PHAETON_SNAPSHOT_DATA_DIR=/path/to/data
- PHAETON_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class IngestConfig(BaseSettings):
    """Extract ingestion configuration.

    Environment variables prefixed with PHAETON_INGEST_.
    """

    model_config = SettingsConfigDict(env_prefix="PHAETON_INGEST_")

    # Ways carrying this tag key (any value) belong to the road network
    filter_key: str = "highway"
    # Log a progress line every N visited primitives; 0 disables
    progress_every: int = Field(default=1_000_000, ge=0)

    @field_validator("filter_key")
    @classmethod
    def _filter_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("filter_key must not be blank")
        return value


class SnapshotConfig(BaseSettings):
    """Graph snapshot configuration.

    Environment variables prefixed with PHAETON_SNAPSHOT_.
    """

    model_config = SettingsConfigDict(env_prefix="PHAETON_SNAPSHOT_")

    data_dir: Path = Field(default_factory=Path.cwd)
    default_file: str = "graph.msgpack"

    @property
    def default_path(self) -> Path:
        """Full path to the default snapshot file."""
        return self.data_dir / self.default_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PHAETON_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PHAETON_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.ingest.filter_key)
        print(config.snapshot.default_path)

    Environment variables prefixed with PHAETON_.
    """

    model_config = SettingsConfigDict(env_prefix="PHAETON_")

    ingest: IngestConfig = Field(default_factory=IngestConfig)
    snapshot: SnapshotConfig = Field(default_factory=SnapshotConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.

    Raises:
        ConfigurationError: If an environment override is invalid.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigurationError(
            f"Invalid setting: {first['msg']}",
            setting_name=".".join(str(part) for part in first["loc"]),
            expected_type=first["type"],
            cause=e,
        )


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
