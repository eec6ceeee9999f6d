"""Strategies for enumerating the directories that hold analysis artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Protocol

from .models import Unit


Visitor = Callable[[Path], list[Unit]]

ANALYSIS_SUBDIR = Path("deps") / "save-analysis"


class Target(Enum):
    RELEASE = "release"
    DEBUG = "debug"

    def __str__(self) -> str:
        return self.value


class RootEnumerator(Protocol):
    def iter_paths(self, visitor: Visitor) -> list[Unit]:
        """Call ``visitor`` once per root and concatenate the results."""
        ...


def _visit_all(paths: Iterable[Path], visitor: Visitor) -> list[Unit]:
    results: list[Unit] = []
    for path in paths:
        results.extend(visitor(path))
    return results


@dataclass(frozen=True)
class StaticRoots:
    paths: tuple[Path, ...]

    @classmethod
    def of(cls, *paths: str | Path) -> "StaticRoots":
        return cls(paths=tuple(Path(path) for path in paths))

    def iter_paths(self, visitor: Visitor) -> list[Unit]:
        return _visit_all(self.paths, visitor)


@dataclass(frozen=True)
class BuildTargetRoots:
    """Roots for one build directory plus any prebuilt library roots.

    The build root is ``<build_dir>/<target>/deps/save-analysis``; library
    roots are visited after it, in the order given.
    """

    build_dir: Path
    target: Target = Target.DEBUG
    library_roots: tuple[Path, ...] = ()

    def analysis_dir(self) -> Path:
        return self.build_dir / str(self.target) / ANALYSIS_SUBDIR

    def roots(self) -> list[Path]:
        return [self.analysis_dir(), *self.library_roots]

    def iter_paths(self, visitor: Visitor) -> list[Unit]:
        return _visit_all(self.roots(), visitor)
