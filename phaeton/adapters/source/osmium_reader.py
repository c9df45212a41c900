"""OSM extract enumerator backed by pyosmium.

Uses two-pass streaming to bound memory usage:
1. First pass: scan ways, collect point ids of accepted ways
2. Second pass: replay accepted ways, needed points and relations

pyosmium decodes both individually and densely encoded PBF nodes into
the same node callback, so every point is delivered as a Point.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Set, Tuple, Union

import osmium

from ...domain.errors import SourceError
from ...domain.primitives import Point, Relation, Way
from ...ports.source import PrimitiveVisitor, WayPredicate

logger = logging.getLogger(__name__)


def _tag_pairs(obj) -> Tuple[Tuple[str, str], ...]:
    return tuple((tag.k, tag.v) for tag in obj.tags)


class _Pass(osmium.SimpleHandler):
    """Handler base that remembers failures raised by caller code.

    pyosmium lets callback exceptions escape through ``apply_file``, where
    they look like decoder errors. ``failure`` tells the two apart.
    """

    def __init__(self):
        super().__init__()
        self.failure: Optional[Exception] = None

    def _call(self, fn: Callable[[Any], Any], arg: Any) -> Any:
        try:
            return fn(arg)
        except Exception as e:
            self.failure = e
            raise


class _WayScanner(_Pass):
    """First-pass handler: accept ways and collect needed point ids."""

    def __init__(self, predicate: WayPredicate):
        super().__init__()
        self.predicate = predicate
        self.needed_points: Set[int] = set()
        self.scanned = 0
        self.accepted = 0

    def way(self, w):
        self.scanned += 1
        if not self._call(self.predicate, _tag_pairs(w)):
            return
        self.accepted += 1
        self.needed_points.update(n.ref for n in w.nodes)


class _Replayer(_Pass):
    """Second-pass handler: deliver accepted ways and their points."""

    def __init__(
        self,
        path: Path,
        predicate: WayPredicate,
        needed_points: Set[int],
        visitor: PrimitiveVisitor,
    ):
        super().__init__()
        self.path = path
        self.predicate = predicate
        self.needed_points = needed_points
        self.visitor = visitor

    def node(self, n):
        if n.id not in self.needed_points:
            return
        if not n.location.valid():
            raise SourceError(
                f"Point {n.id} has no valid location",
                path=str(self.path),
            )
        self._call(self.visitor, Point(id=n.id, lon=n.location.lon, lat=n.location.lat))

    def way(self, w):
        tags = _tag_pairs(w)
        if not self._call(self.predicate, tags):
            return
        self._call(self.visitor, Way(id=w.id, refs=tuple(n.ref for n in w.nodes), tags=tags))

    def relation(self, r):
        self._call(self.visitor, Relation(id=r.id))


@dataclass
class OsmiumSourceEnumerator:
    """Two-pass enumerator over an OSM file (.osm.pbf or .osm).

    Attributes:
        path: Extract file to read on each pass
    """

    path: Path
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def enumerate(self, predicate: WayPredicate, visitor: PrimitiveVisitor) -> None:
        """Run both passes over the file.

        Exceptions raised by ``predicate`` or ``visitor`` propagate unchanged.

        Raises:
            SourceError: If pyosmium cannot decode the file, or a needed
                point carries no valid location.
        """
        scanner = _WayScanner(predicate)
        self._apply(scanner, "scan")
        self._logger.info(
            "Way scan complete",
            extra={
                "path": str(self.path),
                "ways_scanned": scanner.scanned,
                "ways_accepted": scanner.accepted,
                "points_needed": len(scanner.needed_points),
            },
        )

        replayer = _Replayer(self.path, predicate, scanner.needed_points, visitor)
        self._apply(replayer, "replay")

    def _apply(self, handler: _Pass, stage: str) -> None:
        try:
            handler.apply_file(str(self.path))
        except (RuntimeError, OSError) as e:
            if handler.failure is not None:
                raise handler.failure
            # libosmium reports open, decompression and format failures this way
            raise SourceError(
                f"Failed to read extract during {stage}",
                path=str(self.path),
                cause=e,
            )
        if handler.failure is not None:
            raise handler.failure


@dataclass
class OsmiumExtractReader:
    """Opens OSM extract files as two-pass enumerators."""

    def open(self, path: Union[str, Path]) -> OsmiumSourceEnumerator:
        """Open the extract at ``path``.

        Raises:
            SourceError: If the file is missing or unreadable.
        """
        extract_path = Path(path)
        if not extract_path.is_file():
            raise SourceError(
                f"Extract file not found: {extract_path}",
                path=str(extract_path),
            )
        if not os.access(extract_path, os.R_OK):
            raise SourceError(
                f"Extract file is not readable: {extract_path}",
                path=str(extract_path),
            )

        logger.debug("Opening extract", extra={"path": str(extract_path)})
        return OsmiumSourceEnumerator(path=extract_path)
