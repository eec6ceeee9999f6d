"""Freshness policy deciding which artifacts must be (re)loaded."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Union


@dataclass(frozen=True)
class Unseen:
    """No prior knowledge of the artifact; always load."""


@dataclass(frozen=True)
class KnownAt:
    """Loaded before at ``timestamp``; reload only when strictly newer."""

    timestamp: float


@dataclass(frozen=True)
class Pinned:
    """Never reload, whatever the artifact's modification time."""


Freshness = Union[Unseen, KnownAt, Pinned]
KnownTimestamps = Mapping[Path, Union[KnownAt, Pinned]]

UNSEEN = Unseen()
PINNED = Pinned()


def freshness_of(known: KnownTimestamps, path: Path) -> Freshness:
    return known.get(path, UNSEEN)


def needs_load(state: Freshness, observed: float) -> bool:
    if isinstance(state, Unseen):
        return True
    if isinstance(state, KnownAt):
        return observed > state.timestamp
    if isinstance(state, Pinned):
        return False
    raise TypeError(f"Unknown freshness state: {state!r}")
