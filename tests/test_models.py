from __future__ import annotations

from docsnip.models import SnippetDocument, SnippetRecord


def _record(name: str) -> SnippetRecord:
    return SnippetRecord(
        key=f"{name} lua",
        prefix=f"mu.{name}",
        body=f"mu.{name}$0",
        description="Text.\n\n",
    )


def test_snippet_record_fields_exclude_key_and_keep_schema_order() -> None:
    fields = _record("StrictMode").to_snippet_fields()
    assert list(fields) == ["prefix", "body", "description"]
    assert fields["prefix"] == "mu.StrictMode"


def test_snippet_document_payload_keeps_insertion_order() -> None:
    document = SnippetDocument(
        records={"B lua": _record("B"), "A lua": _record("A")}
    )
    payload = document.to_payload()
    assert list(payload) == ["B lua", "A lua"]
    assert payload["A lua"]["body"] == "mu.A$0"
    assert len(document) == 2
