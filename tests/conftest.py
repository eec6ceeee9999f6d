from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Callable

import pytest


def _span(line: int = 1) -> dict[str, Any]:
    return {
        "file_name": "src/lib.rs",
        "byte_start": 0,
        "byte_end": 10,
        "line_start": line,
        "line_end": line,
        "column_start": 1,
        "column_end": 11,
    }


SAMPLE_DOCUMENT: dict[str, Any] = {
    "kind": "Json",
    "prelude": {
        "crate_name": "sample",
        "crate_root": "src",
        "external_crates": [
            {"name": "std", "num": 1, "file_name": "/rustlib/std/lib.rs"},
        ],
        "span": _span(),
    },
    "imports": [
        {
            "kind": "Use",
            "ref_id": {"krate": 1, "index": 40},
            "span": _span(2),
            "name": "HashMap",
            "value": "std::collections::HashMap",
        },
        {
            "kind": "GlobUse",
            "ref_id": None,
            "span": _span(3),
            "name": "*",
            "value": "std::io",
        },
    ],
    "defs": [
        {
            "kind": "Struct",
            "id": {"krate": 0, "index": 1},
            "span": _span(5),
            "name": "Foo",
            "qualname": "::Foo",
            "parent": None,
            "children": [{"krate": 0, "index": 2}],
            "value": "Foo { bar }",
            "docs": "A foo.",
            "sig": {
                "span": _span(5),
                "text": "struct Foo { bar: u32 }",
                "ident_start": 7,
                "ident_end": 10,
                "defs": [{"id": {"krate": 0, "index": 2}, "start": 13, "end": 16}],
                "refs": [],
            },
        },
        {
            "kind": "Field",
            "id": {"krate": 0, "index": 2},
            "span": _span(6),
            "name": "bar",
            "qualname": "::Foo::bar",
            "parent": {"krate": 0, "index": 1},
            "value": "u32",
            "docs": "",
        },
    ],
    "refs": [
        {
            "kind": "Type",
            "span": _span(9),
            "ref_id": {"krate": 0, "index": 1},
        },
    ],
    "macro_refs": [
        {
            "span": _span(10),
            "qualname": "std::println",
            "callee_span": _span(1),
        },
    ],
}


def sample_document(**overrides: Any) -> dict[str, Any]:
    document = copy.deepcopy(SAMPLE_DOCUMENT)
    document.update(overrides)
    return document


@pytest.fixture
def write_artifact() -> Callable[..., Path]:
    """Write an analysis artifact and pin its modification time."""

    def _write(
        directory: Path,
        name: str,
        mtime: float = 100.0,
        document: dict[str, Any] | None = None,
        raw: bytes | None = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        if raw is not None:
            path.write_bytes(raw)
        else:
            payload = document if document is not None else sample_document()
            path.write_text(json.dumps(payload), encoding="utf-8")
        os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def document() -> dict[str, Any]:
    return sample_document()
