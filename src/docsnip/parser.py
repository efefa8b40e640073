"""Single-pass state machine over the reference document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import UnterminatedDeclarationError
from .grammar import (
    extract_argument_names,
    is_comment_block_open,
    is_gate_line,
    is_terminator,
    match_call_start,
    match_description_start,
    match_flag_start,
    split_lines,
)
from .logging_utils import log_event
from .models import (
    DEFAULT_GRAMMAR,
    DeclarationKind,
    DocumentGrammar,
    DroppedDeclaration,
    DropReason,
    ParseResult,
    ParseState,
    RawDeclaration,
    SnippetDocument,
    SnippetRecord,
)
from .snippet_body import build_snippet_record

logger = logging.getLogger(__name__)


def parse_document(
    text: str,
    *,
    grammar: DocumentGrammar = DEFAULT_GRAMMAR,
    strict: bool = False,
) -> ParseResult:
    """Parse a whole reference document into snippet records.

    Lines before the gate line are ignored. A declaration that is superseded
    by another one, or still open at the end of the document, is dropped; with
    ``strict`` the first such drop raises UnterminatedDeclarationError.
    """
    lines = split_lines(text)
    scan = _DocumentScan(grammar=grammar, strict=strict)
    for line_number, line in enumerate(lines, start=1):
        scan.feed(line, line_number)
    scan.finish(line_count=len(lines))

    return ParseResult(
        document=SnippetDocument(records=scan.records),
        gate_found=scan.state is not ParseState.IDLE,
        line_count=len(lines),
        dropped=scan.dropped,
    )


def match_declaration(
    line: str, line_number: int, grammar: DocumentGrammar
) -> RawDeclaration | None:
    call = match_call_start(line, grammar)
    if call is not None:
        name, raw_arguments = call
        return RawDeclaration(
            name=name,
            kind=DeclarationKind.CALL,
            arguments=extract_argument_names(raw_arguments),
            line_number=line_number,
        )

    flag_name = match_flag_start(line, grammar)
    if flag_name is not None:
        return RawDeclaration(
            name=flag_name,
            kind=DeclarationKind.FLAG,
            arguments=(),
            line_number=line_number,
        )

    return None


@dataclass
class _DocumentScan:
    grammar: DocumentGrammar
    strict: bool
    state: ParseState = ParseState.IDLE
    pending: RawDeclaration | None = None
    description: str = ""
    records: dict[str, SnippetRecord] = field(default_factory=dict)
    dropped: list[DroppedDeclaration] = field(default_factory=list)

    def feed(self, line: str, line_number: int) -> None:
        if self.state is ParseState.IDLE:
            if not is_gate_line(line, self.grammar):
                return
            self.state = ParseState.ARMED
            log_event(
                "gate_found",
                logger=logger,
                line_number=line_number,
                gate_line=self.grammar.gate_line,
            )
            # The gate line is also a declaration in its own right.

        declaration = match_declaration(line, line_number, self.grammar)
        if declaration is not None:
            self._begin(declaration)
            return

        pending = self.pending
        if pending is None:
            return

        if self.state is ParseState.AWAITING_DESCRIPTION_START:
            self._try_start_description(pending, line)
        elif self.state is ParseState.COLLECTING:
            if is_terminator(line):
                self._emit(pending)
            else:
                self._append(line.strip())

    def finish(self, *, line_count: int) -> None:
        if self.pending is not None:
            self._drop(self.pending, DropReason.END_OF_DOCUMENT)
        if self.state is ParseState.IDLE:
            log_event(
                "gate_missing",
                level=logging.WARNING,
                logger=logger,
                gate_line=self.grammar.gate_line,
                line_count=line_count,
            )

    def _begin(self, declaration: RawDeclaration) -> None:
        if self.pending is not None:
            self._drop(self.pending, DropReason.SUPERSEDED)
        self.pending = declaration
        self.description = ""
        self.state = ParseState.AWAITING_DESCRIPTION_START

    def _try_start_description(self, pending: RawDeclaration, line: str) -> None:
        if pending.kind is DeclarationKind.CALL:
            first_fragment = match_description_start(line, pending.name)
            if first_fragment is None:
                return
            self.description = first_fragment
        elif not is_comment_block_open(line):
            return
        self.state = ParseState.COLLECTING

    def _append(self, fragment: str) -> None:
        if self.description:
            self.description = f"{self.description} {fragment}"
        else:
            self.description = fragment

    def _emit(self, pending: RawDeclaration) -> None:
        record = build_snippet_record(pending, self.description, self.grammar)
        if record.key in self.records:
            log_event(
                "duplicate_snippet_key",
                level=logging.WARNING,
                logger=logger,
                key=record.key,
                line_number=pending.line_number,
            )
        self.records[record.key] = record
        self._reset()

    def _drop(self, pending: RawDeclaration, reason: DropReason) -> None:
        dropped = DroppedDeclaration(declaration=pending, reason=reason)
        log_event(
            "declaration_dropped",
            level=logging.WARNING,
            logger=logger,
            name=dropped.declaration.name,
            kind=dropped.declaration.kind,
            line_number=dropped.declaration.line_number,
            reason=reason,
        )
        if self.strict:
            raise UnterminatedDeclarationError(dropped)
        self.dropped.append(dropped)
        self._reset()

    def _reset(self) -> None:
        self.pending = None
        self.description = ""
        self.state = ParseState.ARMED
