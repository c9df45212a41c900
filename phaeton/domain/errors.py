"""Typed domain errors for phaeton.

Every failure is a single fatal signal for the operation in progress.
All errors inherit from PhaetonError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PhaetonError(Exception):
    """Base error for the phaeton domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UsageError(PhaetonError):
    """Missing or invalid command-line argument.

    Detected before any ingestion is attempted.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class SourceError(PhaetonError):
    """The source extract is missing, unreadable, or not a valid extract.

    Raised by the source enumerator when opening the file or while
    decoding it. Ingestion propagates it unchanged.

    Attributes:
        path: Path to the extract file
    """

    path: Optional[str] = None


@dataclass
class SnapshotError(PhaetonError):
    """Graph snapshot persistence error.

    Attributes:
        path: Path to the snapshot file
    """

    path: Optional[str] = None


@dataclass
class SnapshotWriteError(SnapshotError):
    """Filesystem failure while writing a snapshot."""


@dataclass
class SnapshotReadError(SnapshotError):
    """Filesystem failure while reading a snapshot."""


@dataclass
class SnapshotDecodeError(SnapshotError):
    """Snapshot content is corrupt, truncated or of the wrong shape.

    Attributes:
        detail: Location of the problem inside the document, if known
    """

    detail: Optional[str] = None


@dataclass
class ConfigurationError(PhaetonError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
