"""Incremental loading of analysis artifacts from a set of roots."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from .freshness import KnownAt, KnownTimestamps, Pinned, freshness_of, needs_load
from .listing import DirectoryListing
from .models import Analysis, Unit
from .roots import RootEnumerator
from .storage import ArtifactError, read_analysis


logger = logging.getLogger(__name__)

Lister = Callable[[Path], DirectoryListing]
Decoder = Callable[[Path], Analysis]
ErrorSink = Callable[[Path, Exception], None]


def read_incremental(
    roots: RootEnumerator,
    known_timestamps: KnownTimestamps,
    *,
    lister: Lister = DirectoryListing.from_path,
    decoder: Decoder = read_analysis,
    on_error: ErrorSink | None = None,
    max_workers: int | None = None,
) -> list[Unit]:
    """Load every artifact under ``roots`` that is unseen or has changed.

    ``known_timestamps`` is only read. Listing and decode failures are logged,
    reported to ``on_error`` and skipped; the units that did load are always
    returned.
    """

    def visit(root: Path) -> list[Unit]:
        started = time.perf_counter()

        try:
            listing = lister(root)
        except OSError as exc:
            logger.warning("Cannot list analysis root %s: %s", root, exc)
            _report(on_error, root, exc)
            return []

        stale: list[tuple[Path, float]] = []
        for entry in listing.files:
            logger.debug("Considering %s in %s", entry, root)
            if entry.modified is None:
                continue
            path = root / entry.name
            if needs_load(freshness_of(known_timestamps, path), entry.modified):
                stale.append((path, entry.modified))

        result = _load_all(stale, decoder, on_error, max_workers)

        elapsed = time.perf_counter() - started
        logger.debug("Read %d units from %s in %.3fs", len(result), root, elapsed)
        return result

    return roots.iter_paths(visit)


def read(roots: RootEnumerator, **kwargs) -> list[Unit]:
    """Load every artifact under ``roots`` regardless of prior knowledge."""
    return read_incremental(roots, {}, **kwargs)


def updated_timestamps(
    known: KnownTimestamps, units: Iterable[Unit]
) -> dict[Path, KnownAt | Pinned]:
    """Return a new snapshot recording the timestamps of ``units``.

    Pinned paths stay pinned.
    """
    snapshot: dict[Path, KnownAt | Pinned] = dict(known)
    for unit in units:
        if isinstance(snapshot.get(unit.path), Pinned):
            continue
        snapshot[unit.path] = KnownAt(unit.timestamp)
    return snapshot


def _load_all(
    stale: list[tuple[Path, float]],
    decoder: Decoder,
    on_error: ErrorSink | None,
    max_workers: int | None,
) -> list[Unit]:
    def load(item: tuple[Path, float]) -> Unit | None:
        path, modified = item
        return _load_unit(path, modified, decoder, on_error)

    if max_workers is not None and max_workers > 1 and len(stale) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            loaded = list(executor.map(load, stale))
    else:
        loaded = [load(item) for item in stale]

    return [unit for unit in loaded if unit is not None]


def _load_unit(
    path: Path,
    modified: float,
    decoder: Decoder,
    on_error: ErrorSink | None,
) -> Unit | None:
    logger.debug("Loading analysis %s", path)
    try:
        analysis = decoder(path)
    except (ArtifactError, OSError) as exc:
        logger.warning("Skipping analysis artifact (%s)", exc)
        _report(on_error, path, exc)
        return None
    return Unit(analysis=analysis, timestamp=modified, path=path)


def _report(on_error: ErrorSink | None, path: Path, exc: Exception) -> None:
    if on_error is not None:
        on_error(path, exc)
