"""Reading the reference document and writing the snippet document."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .constants import OUTPUT_ENCODING, OUTPUT_INDENT, SOURCE_ENCODING
from .errors import SinkUnwritableError, SourceUnavailableError
from .logging_utils import log_event
from .models import DEFAULT_GRAMMAR, DocumentGrammar, ParseResult, SnippetDocument
from .parser import parse_document

logger = logging.getLogger(__name__)


def serialize_snippet_document(document: SnippetDocument) -> str:
    """Render the document as the editor's user-snippet JSON.

    Output depends only on the records, so unchanged input gives
    byte-identical output.
    """
    text = json.dumps(document.to_payload(), ensure_ascii=False, indent=OUTPUT_INDENT)
    return f"{text}\n"


def read_source_document(source_path_abs: Path) -> str:
    if not source_path_abs.exists():
        raise SourceUnavailableError(f"Source document does not exist: {source_path_abs}")
    if not source_path_abs.is_file():
        raise SourceUnavailableError(f"Source document is not a file: {source_path_abs}")
    try:
        return source_path_abs.read_text(encoding=SOURCE_ENCODING, errors="replace")
    except OSError as exc:
        raise SourceUnavailableError(
            f"Failed to read source document: {source_path_abs}"
        ) from exc


def write_snippet_document(dest_path_abs: Path, text: str) -> None:
    if dest_path_abs.is_dir():
        raise SinkUnwritableError(f"Destination is a directory: {dest_path_abs}")
    try:
        dest_path_abs.parent.mkdir(parents=True, exist_ok=True)
        dest_path_abs.write_text(text, encoding=OUTPUT_ENCODING)
    except OSError as exc:
        raise SinkUnwritableError(
            f"Failed to write snippet document: {dest_path_abs}"
        ) from exc


def convert_file(
    *,
    source_path_abs: Path,
    dest_path_abs: Path,
    grammar: DocumentGrammar = DEFAULT_GRAMMAR,
    strict: bool = False,
) -> ParseResult:
    """Read, parse, serialize and write in one go.

    Nothing is written if reading or parsing fails.
    """
    log_event(
        "convert_start",
        logger=logger,
        source_file=source_path_abs,
        dest_file=dest_path_abs,
        namespace=grammar.namespace,
        strict=strict,
    )
    source_text = read_source_document(source_path_abs)
    result = parse_document(source_text, grammar=grammar, strict=strict)
    write_snippet_document(dest_path_abs, serialize_snippet_document(result.document))
    log_event(
        "convert_done",
        logger=logger,
        dest_file=dest_path_abs,
        record_count=result.record_count,
        dropped_count=len(result.dropped),
    )
    return result
