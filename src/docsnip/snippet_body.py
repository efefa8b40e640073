"""Snippet record synthesis.

Placeholders are built as plain data first and rendered into the editor's
``${n:hint}`` template syntax in a separate step.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import ARGUMENT_SEPARATOR, CURSOR_REST_MARKER, PARAGRAPH_BREAK
from .models import (
    DeclarationKind,
    DocumentGrammar,
    Placeholder,
    RawDeclaration,
    SnippetRecord,
)


def build_placeholders(arguments: Sequence[str]) -> list[Placeholder]:
    """Number the arguments from 1 and close with the cursor rest.

    The cursor rest always carries the highest index.
    """
    placeholders = [
        Placeholder(index=index, hint=name)
        for index, name in enumerate(arguments, start=1)
    ]
    placeholders.append(Placeholder(index=len(placeholders) + 1))
    return placeholders


def render_placeholder(placeholder: Placeholder) -> str:
    if placeholder.is_cursor_rest:
        return CURSOR_REST_MARKER
    return f"${{{placeholder.index}:{placeholder.hint}}}"


def render_body(
    qualified_name: str,
    kind: DeclarationKind,
    placeholders: Sequence[Placeholder],
) -> str:
    argument_parts = [
        render_placeholder(p) for p in placeholders if not p.is_cursor_rest
    ]
    cursor_rest = "".join(
        render_placeholder(p) for p in placeholders if p.is_cursor_rest
    )
    if kind is DeclarationKind.FLAG:
        return f"{qualified_name}{cursor_rest}"
    return f"{qualified_name}({ARGUMENT_SEPARATOR.join(argument_parts)}){cursor_rest}"


def normalize_description(text: str) -> str:
    """Close a collected description for embedding in the snippet document.

    Trailing whitespace collapses into the paragraph break and double quotes
    become single quotes. Nothing else is escaped.
    """
    closed = f"{text.rstrip()}{PARAGRAPH_BREAK}"
    return closed.replace('"', "'")


def build_snippet_record(
    declaration: RawDeclaration,
    description: str,
    grammar: DocumentGrammar,
) -> SnippetRecord:
    qualified_name = f"{grammar.alias}.{declaration.name}"
    placeholders = build_placeholders(declaration.arguments)
    return SnippetRecord(
        key=f"{declaration.name} {grammar.language}",
        prefix=qualified_name,
        body=render_body(qualified_name, declaration.kind, placeholders),
        description=normalize_description(description),
    )
