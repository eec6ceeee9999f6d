"""Command-line entry point for loading analysis data from a build directory."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .loader import read
from .models import Unit
from .roots import BuildTargetRoots, Target


@dataclass(frozen=True)
class LoaderConfig:
    build_dir: Path
    target: Target = Target.DEBUG
    library_roots: tuple[Path, ...] = ()
    max_workers: int | None = None
    log_level: str = "WARNING"


def resolve_loader_config(args: argparse.Namespace | None = None) -> LoaderConfig:
    build_dir = getattr(args, "build_dir", None) or os.getenv(
        "ANALYSISDATA_BUILD_DIR", "target"
    )
    target_name = getattr(args, "target", None) or os.getenv(
        "ANALYSISDATA_TARGET", "debug"
    )
    try:
        target = Target(target_name.lower())
    except ValueError as exc:
        raise ValueError(f"Unknown build target: {target_name}") from exc

    max_workers = getattr(args, "max_workers", None)
    if max_workers is None and os.getenv("ANALYSISDATA_MAX_WORKERS"):
        max_workers = int(os.environ["ANALYSISDATA_MAX_WORKERS"])

    if getattr(args, "verbose", False):
        log_level = "DEBUG"
    else:
        log_level = os.getenv("ANALYSISDATA_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log level: {log_level}")

    roots = getattr(args, "root", None) or []
    return LoaderConfig(
        build_dir=Path(build_dir),
        target=target,
        library_roots=tuple(Path(root) for root in roots),
        max_workers=max_workers,
        log_level=log_level,
    )


def load_from_config(config: LoaderConfig) -> list[Unit]:
    roots = BuildTargetRoots(
        build_dir=config.build_dir,
        target=config.target,
        library_roots=config.library_roots,
    )
    return read(roots, max_workers=config.max_workers)


def describe_unit(unit: Unit) -> str:
    analysis = unit.analysis
    name = analysis.prelude.crate_name if analysis.prelude else "?"
    return (
        f"{unit.path}\t{name}\t"
        f"defs={len(analysis.defs)} refs={len(analysis.refs)} "
        f"imports={len(analysis.imports)} macro_refs={len(analysis.macro_refs)}"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load analysis data for a build")
    parser.add_argument("--build-dir", help="Build output directory")
    parser.add_argument(
        "--target",
        choices=[target.value for target in Target],
        help="Build target whose analysis is loaded",
    )
    parser.add_argument(
        "--root",
        action="append",
        help="Additional analysis root (repeatable)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Decode artifacts on a thread pool of this size",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    try:
        config = resolve_loader_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    units = load_from_config(config)
    for unit in units:
        print(describe_unit(unit))
    print(f"{len(units)} units")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
