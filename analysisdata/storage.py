"""JSON decode helpers for on-disk analysis artifacts."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .models import Analysis


class ArtifactError(RuntimeError):
    def __init__(self, path: str | Path | None, reason: str) -> None:
        super().__init__(f"{path}: {reason}" if path else reason)
        self.path = Path(path) if path else None
        self.reason = reason


class UnreadableArtifact(ArtifactError):
    """The artifact could not be read from disk."""


class MalformedArtifact(ArtifactError):
    """The artifact was read but is not a valid analysis document."""


def decode_analysis(data: bytes | str, path: str | Path | None = None) -> Analysis:
    try:
        return Analysis.model_validate_json(data)
    except ValidationError as exc:
        raise MalformedArtifact(path, _summarize(exc)) from exc


def read_analysis(path: str | Path) -> Analysis:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise UnreadableArtifact(path, exc.strerror or str(exc)) from exc
    return decode_analysis(data, path=path)


def save_analysis(analysis: Analysis, path: str | Path) -> None:
    data = analysis.model_dump_json(by_alias=True, indent=2)
    Path(path).write_text(data, encoding="utf-8")


def _summarize(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<document>"
    suffix = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{location}: {first.get('msg', 'invalid')}{suffix}"
