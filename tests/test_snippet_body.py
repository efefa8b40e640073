from __future__ import annotations

from docsnip.models import (
    DEFAULT_GRAMMAR,
    DeclarationKind,
    DocumentGrammar,
    Placeholder,
    RawDeclaration,
)
from docsnip.snippet_body import (
    build_placeholders,
    build_snippet_record,
    normalize_description,
    render_body,
    render_placeholder,
)


def test_build_placeholders_numbers_from_one_and_ends_with_cursor_rest() -> None:
    placeholders = build_placeholders(("take", "pitch"))
    assert placeholders == [
        Placeholder(index=1, hint="take"),
        Placeholder(index=2, hint="pitch"),
        Placeholder(index=3),
    ]
    assert placeholders[-1].is_cursor_rest
    assert max(p.index for p in placeholders) == placeholders[-1].index


def test_build_placeholders_without_arguments_has_only_cursor_rest() -> None:
    assert build_placeholders(()) == [Placeholder(index=1)]


def test_render_placeholder() -> None:
    assert render_placeholder(Placeholder(index=2, hint="pitch")) == "${2:pitch}"
    assert render_placeholder(Placeholder(index=4)) == "$0"


def test_render_body_for_call() -> None:
    body = render_body(
        "mu.InsertNote", DeclarationKind.CALL, build_placeholders(("take", "chan"))
    )
    assert body == "mu.InsertNote(${1:take}, ${2:chan})$0"


def test_render_body_for_call_without_arguments() -> None:
    assert render_body("mu.Reset", DeclarationKind.CALL, build_placeholders(())) == (
        "mu.Reset()$0"
    )


def test_render_body_for_flag_has_no_parentheses() -> None:
    assert render_body("mu.StrictMode", DeclarationKind.FLAG, build_placeholders(())) == (
        "mu.StrictMode$0"
    )


def test_normalize_description_collapses_trailing_whitespace_and_swaps_quotes() -> None:
    assert normalize_description('Use "fast" mode.   ') == "Use 'fast' mode.\n\n"


def test_normalize_description_of_empty_text() -> None:
    assert normalize_description("") == "\n\n"


def test_build_snippet_record_uses_grammar_alias_and_language() -> None:
    declaration = RawDeclaration(
        name="InsertNote",
        kind=DeclarationKind.CALL,
        arguments=("take", "pitch", "chan"),
        line_number=1,
    )

    record = build_snippet_record(declaration, "Inserts a note.", DEFAULT_GRAMMAR)
    assert record.key == "InsertNote lua"
    assert record.prefix == "mu.InsertNote"
    assert record.body == "mu.InsertNote(${1:take}, ${2:pitch}, ${3:chan})$0"
    assert record.description == "Inserts a note.\n\n"

    other = build_snippet_record(
        declaration,
        "Inserts a note.",
        DocumentGrammar.for_namespace("MIDIUtils", alias="midi", language="luau"),
    )
    assert other.key == "InsertNote luau"
    assert other.prefix == "midi.InsertNote"
    assert other.body.startswith("midi.InsertNote(")
