from __future__ import annotations

import logging
from pathlib import Path

from docsnip.logging_utils import StructuredTextFormatter, log_event, setup_logging
from docsnip.parser import parse_document


def _flush_root_handlers() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_structured_formatter_orders_known_event_keys() -> None:
    record = logging.LogRecord(
        name="docsnip.parser",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg='{"event": "declaration_dropped", "reason": "superseded", "name": "Open"}',
        args=(),
        exc_info=None,
    )

    lines = StructuredTextFormatter().format(record).splitlines()
    assert lines[0] == "=== declaration_dropped ==="
    assert lines[2] == "level: WARNING"
    assert lines[3:] == ["name: Open", "reason: superseded"]


def test_structured_formatter_wraps_plain_messages() -> None:
    record = logging.LogRecord(
        name="docsnip.cli",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="two\nlines",
        args=(),
        exc_info=None,
    )

    text = StructuredTextFormatter().format(record)
    assert text.startswith("=== docsnip.cli ===\n")
    assert "message: two\\nlines" in text


def test_setup_logging_writes_events_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "run.log"
    setup_logging(log_file)

    log_event("convert_done", record_count=3, dropped_count=0, dest_file=tmp_path)
    _flush_root_handlers()

    text = log_file.read_text(encoding="utf-8")
    assert "=== convert_done ===" in text
    assert "record_count: 3" in text
    assert f"dest_file: {tmp_path}" in text


def test_parser_logs_dropped_declarations_and_missing_gate(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    setup_logging(log_file)

    parse_document("MIDIUtils.SetOnError(fn)\nMIDIUtils.Next(a)\n")
    parse_document("no gate here\n")
    _flush_root_handlers()

    text = log_file.read_text(encoding="utf-8")
    assert "=== declaration_dropped ===" in text
    assert "reason: superseded" in text
    assert "reason: end_of_document" in text
    assert "=== gate_missing ===" in text


def test_setup_logging_without_file_silences_logging() -> None:
    setup_logging(None)
    assert logging.getLogger("docsnip.parser").isEnabledFor(logging.CRITICAL) is False
