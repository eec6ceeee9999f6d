from __future__ import annotations

from pathlib import Path

from analysisdata.roots import BuildTargetRoots, StaticRoots, Target


def test_target_string_form():
    assert str(Target.DEBUG) == "debug"
    assert str(Target.RELEASE) == "release"


def test_static_roots_visit_in_order():
    roots = StaticRoots.of("one", Path("two"))
    seen: list[Path] = []

    def visitor(path: Path) -> list:
        seen.append(path)
        return [path.name]

    result = roots.iter_paths(visitor)

    assert seen == [Path("one"), Path("two")]
    assert result == ["one", "two"]


def test_build_target_roots_layout():
    roots = BuildTargetRoots(
        build_dir=Path("target"),
        target=Target.RELEASE,
        library_roots=(Path("/sysroot/analysis"),),
    )
    seen: list[Path] = []

    def visitor(path: Path) -> list:
        seen.append(path)
        return [str(path)]

    result = roots.iter_paths(visitor)

    expected = [
        Path("target") / "release" / "deps" / "save-analysis",
        Path("/sysroot/analysis"),
    ]
    assert seen == expected
    assert result == [str(path) for path in expected]
