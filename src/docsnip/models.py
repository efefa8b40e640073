"""Domain models shared across docsnip layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

from .constants import (
    DEFAULT_ALIAS,
    DEFAULT_GATE_FUNCTION,
    DEFAULT_LANGUAGE,
    DEFAULT_NAMESPACE,
)


class DeclarationKind(StrEnum):
    CALL = "call"
    FLAG = "flag"


class ParseState(StrEnum):
    IDLE = "idle"
    ARMED = "armed"
    AWAITING_DESCRIPTION_START = "awaiting_description_start"
    COLLECTING = "collecting"


class DropReason(StrEnum):
    SUPERSEDED = "superseded"
    END_OF_DOCUMENT = "end_of_document"


@dataclass(frozen=True)
class DocumentGrammar:
    """Names that tie the line grammar to one documented library."""

    namespace: str = DEFAULT_NAMESPACE
    gate_line: str = f"{DEFAULT_NAMESPACE}.{DEFAULT_GATE_FUNCTION}"
    alias: str = DEFAULT_ALIAS
    language: str = DEFAULT_LANGUAGE

    @classmethod
    def for_namespace(
        cls,
        namespace: str,
        *,
        gate_line: str | None = None,
        alias: str = DEFAULT_ALIAS,
        language: str = DEFAULT_LANGUAGE,
    ) -> DocumentGrammar:
        return cls(
            namespace=namespace,
            gate_line=gate_line or f"{namespace}.{DEFAULT_GATE_FUNCTION}",
            alias=alias,
            language=language,
        )


DEFAULT_GRAMMAR = DocumentGrammar()


@dataclass(frozen=True)
class RawDeclaration:
    name: str
    kind: DeclarationKind
    arguments: tuple[str, ...]
    line_number: int


@dataclass(frozen=True)
class DroppedDeclaration:
    declaration: RawDeclaration
    reason: DropReason


@dataclass(frozen=True)
class Placeholder:
    index: int
    hint: str | None = None  # None marks the cursor rest

    @property
    def is_cursor_rest(self) -> bool:
        return self.hint is None


class SnippetRecord(BaseModel):
    key: str
    prefix: str
    body: str
    description: str

    def to_snippet_fields(self) -> dict[str, str]:
        """Fields in the order the editor's snippet schema lists them."""
        return self.model_dump(mode="json", exclude={"key"})


class SnippetDocument(BaseModel):
    # Insertion order is document order.
    records: dict[str, SnippetRecord] = {}

    def __len__(self) -> int:
        return len(self.records)

    def to_payload(self) -> dict[str, dict[str, str]]:
        return {key: record.to_snippet_fields() for key, record in self.records.items()}


@dataclass(frozen=True)
class ParseResult:
    document: SnippetDocument
    gate_found: bool
    line_count: int
    dropped: list[DroppedDeclaration] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return len(self.document)


@dataclass(frozen=True)
class ResolvedPaths:
    source_arg_raw: str
    source_path_abs: Path
    dest_arg_raw: str
    dest_path_abs: Path
    log_arg_raw: str | None
    log_path_abs: Path | None
