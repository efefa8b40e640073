"""User-facing text rendering."""

from __future__ import annotations

from pathlib import Path

from .constants import ERROR_PREFIX, WARNING_PREFIX
from .models import DocumentGrammar, DroppedDeclaration, ParseResult


def render_error(message: str) -> str:
    return f"{ERROR_PREFIX} {message}"


def render_warning(message: str) -> str:
    return f"{WARNING_PREFIX} {message}"


def render_dropped_declaration(dropped: DroppedDeclaration) -> str:
    declaration = dropped.declaration
    return render_warning(
        f"Dropped {declaration.kind} '{declaration.name}' "
        f"(line {declaration.line_number}): {dropped.reason}"
    )


def render_result_lines(
    *, result: ParseResult, grammar: DocumentGrammar, dest_path_abs: Path
) -> list[str]:
    lines: list[str] = []
    if not result.gate_found:
        lines.append(
            render_warning(
                f"Gate line not found: {grammar.gate_line} "
                f"(scanned {result.line_count} lines, no snippets generated)"
            )
        )
    lines.extend(render_dropped_declaration(dropped) for dropped in result.dropped)

    noun = "snippet" if result.record_count == 1 else "snippets"
    lines.append(f"Wrote {result.record_count} {noun} to {dest_path_abs}")
    return lines
