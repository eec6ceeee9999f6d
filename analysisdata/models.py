"""Data models for loaded analysis records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NamespaceError(AssertionError):
    """Raised when a namespace is requested for a kind that has none."""


class Format(str, Enum):
    CSV = "Csv"
    JSON = "Json"
    JSON_API = "JsonApi"


class Namespace(str, Enum):
    TYPE = "t"
    VALUE = "v"
    MACRO = "m"


class DefKind(str, Enum):
    ENUM = "Enum"
    TUPLE = "Tuple"
    STRUCT = "Struct"
    TRAIT = "Trait"
    FUNCTION = "Function"
    METHOD = "Method"
    MACRO = "Macro"
    MOD = "Mod"
    TYPE = "Type"
    LOCAL = "Local"
    STATIC = "Static"
    CONST = "Const"
    FIELD = "Field"
    IMPORT = "Import"

    def name_space(self) -> Namespace:
        """Return the namespace of this kind, failing hard for imports."""
        result = namespace(self)
        if result is None:
            raise NamespaceError(f"No namespace for {self.value!r} definitions")
        return result


class RefKind(str, Enum):
    FUNCTION = "Function"
    MOD = "Mod"
    TYPE = "Type"
    VARIABLE = "Variable"


class ImportKind(str, Enum):
    EXTERN_CRATE = "ExternCrate"
    USE = "Use"
    GLOB_USE = "GlobUse"


TYPE_KINDS = frozenset(
    {DefKind.ENUM, DefKind.TUPLE, DefKind.STRUCT, DefKind.TYPE, DefKind.TRAIT}
)
VALUE_KINDS = frozenset(
    {
        DefKind.FUNCTION,
        DefKind.METHOD,
        DefKind.MOD,
        DefKind.LOCAL,
        DefKind.STATIC,
        DefKind.CONST,
        DefKind.FIELD,
    }
)


def namespace(kind: DefKind) -> Namespace | None:
    """Classify a definition kind; imports have no namespace and yield None."""
    if kind in TYPE_KINDS:
        return Namespace.TYPE
    if kind in VALUE_KINDS:
        return Namespace.VALUE
    if kind is DefKind.MACRO:
        return Namespace.MACRO
    return None


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class CompilerId(_Record):
    # Weak reference: only meaningful against an index built by the caller.
    unit: int = Field(
        validation_alias=AliasChoices("unit", "krate"),
        serialization_alias="krate",
    )
    index: int


class SpanData(_Record):
    file_name: Path
    byte_start: int
    byte_end: int
    # 1-based.
    line_start: int
    line_end: int
    # 1-based, character offset.
    column_start: int
    column_end: int


class ExternalCrateData(_Record):
    name: str
    num: int
    file_name: str


class CratePreludeData(_Record):
    crate_name: str
    crate_root: str
    external_crates: tuple[ExternalCrateData, ...]
    span: SpanData


class SigElement(_Record):
    id: CompilerId
    start: int
    end: int


class Signature(_Record):
    span: SpanData
    text: str
    ident_start: int
    ident_end: int
    defs: tuple[SigElement, ...]
    refs: tuple[SigElement, ...]


class Def(_Record):
    kind: DefKind
    id: CompilerId
    span: SpanData
    name: str
    qualname: str
    parent: CompilerId | None = None
    children: tuple[CompilerId, ...] | None = None
    value: str
    docs: str
    sig: Signature | None = None


class Ref(_Record):
    kind: RefKind
    span: SpanData
    ref_id: CompilerId


class MacroRef(_Record):
    span: SpanData
    qualname: str
    callee_span: SpanData


class Import(_Record):
    kind: ImportKind
    ref_id: CompilerId | None = None
    span: SpanData
    name: str
    value: str


class Analysis(_Record):
    kind: Format
    prelude: CratePreludeData | None = None
    imports: tuple[Import, ...]
    defs: tuple[Def, ...]
    refs: tuple[Ref, ...]
    macro_refs: tuple[MacroRef, ...]


@dataclass(frozen=True)
class Unit:
    analysis: Analysis
    timestamp: float
    path: Path
