"""Incremental loading of compiler analysis data."""

from .freshness import PINNED, UNSEEN, KnownAt, Pinned, Unseen
from .listing import DirectoryListing, ListingEntry, ListingKind
from .loader import read, read_incremental, updated_timestamps
from .models import Analysis, DefKind, Namespace, NamespaceError, Unit, namespace
from .roots import BuildTargetRoots, RootEnumerator, StaticRoots, Target
from .storage import ArtifactError, MalformedArtifact, UnreadableArtifact, read_analysis

__all__ = [
    "Analysis",
    "ArtifactError",
    "BuildTargetRoots",
    "DefKind",
    "DirectoryListing",
    "KnownAt",
    "ListingEntry",
    "ListingKind",
    "MalformedArtifact",
    "Namespace",
    "NamespaceError",
    "PINNED",
    "Pinned",
    "RootEnumerator",
    "StaticRoots",
    "Target",
    "UNSEEN",
    "Unit",
    "Unseen",
    "UnreadableArtifact",
    "namespace",
    "read",
    "read_analysis",
    "read_incremental",
    "updated_timestamps",
]
