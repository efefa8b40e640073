"""Pytest configuration and fixtures for docsnip tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

REFERENCE_TEXT = "\n".join(
    (
        "MIDIUtils Readme",
        "",
        "Load the library and bind it to mu before calling anything below.",
        "MIDIUtils.Preamble(x)",
        "Preamble: mentioned in the prose, not a documented function.",
        "Arguments:",
        "",
        "MIDIUtils.SetOnError(fn)",
        "",
        "SetOnError: Set a function to be called on error.",
        "Arguments:",
        "  fn: function",
        "",
        "MIDIUtils.InsertNote(take, pitch = 60, chan)",
        "",
        "InsertNote: Inserts a note.",
        "Arguments:",
        "",
        "MIDIUtils.GetNote(take {MediaItem_Take}, idx {number})",
        'GetNote: Gets the note at "idx".',
        "  Returns several values.",
        "Return Value:",
        "",
        "MIDIUtils.ENFORCE_ARGS = true",
        "--[[",
        "  Turns on strict checks.",
        "--]]",
        "",
    )
)


@pytest.fixture
def reference_text() -> str:
    return REFERENCE_TEXT


@pytest.fixture
def reference_file(tmp_path: Path) -> Path:
    path = tmp_path / "Readme.txt"
    path.write_text(REFERENCE_TEXT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() so one test's log file never leaks into the next."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    logging.disable(logging.NOTSET)
