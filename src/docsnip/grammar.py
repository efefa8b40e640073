"""Line recognizers for the reference document grammar.

Each rule of the informal grammar lives behind its own function so it can be
tested in isolation. None of them keep state; the parser decides which rule
applies in which state.
"""

from __future__ import annotations

import re
from functools import lru_cache

from .constants import ARGUMENT_SEPARATOR, COMMENT_BLOCK_OPEN, TERMINATOR_MARKERS
from .models import DocumentGrammar

_LINE_BREAK_RE = re.compile(r"\r?\n")
_TYPE_ANNOTATION_RE = re.compile(r"\{.*?\}")
_DEFAULT_VALUE_RE = re.compile(r"\s*=[^,]*")
_ARGUMENT_NAME_RE = re.compile(r"[A-Za-z0-9_.]+")


def split_lines(text: str) -> list[str]:
    return _LINE_BREAK_RE.split(text)


def is_gate_line(line: str, grammar: DocumentGrammar) -> bool:
    return line == grammar.gate_line


def match_call_start(line: str, grammar: DocumentGrammar) -> tuple[str, str] | None:
    """Return ``(name, raw_arguments)`` for a ``ns.Name(args)`` line.

    The argument text ends at the first ``)`` on the line, so signatures that
    wrap onto a second line are cut short.
    """
    match = _call_pattern(grammar.namespace).match(line)
    if match is None:
        return None
    return match.group(1), match.group(2)


def match_flag_start(line: str, grammar: DocumentGrammar) -> str | None:
    match = _flag_pattern(grammar.namespace).match(line)
    if match is None:
        return None
    return match.group(1)


def extract_argument_names(raw_arguments: str) -> tuple[str, ...]:
    """Reduce a raw argument list to its bare names, in order.

    ``{type}`` annotations and ``= default`` clauses are removed first. A
    piece that has no identifier left contributes nothing.
    """
    stripped = _TYPE_ANNOTATION_RE.sub("", raw_arguments)
    stripped = _DEFAULT_VALUE_RE.sub("", stripped)

    names: list[str] = []
    for piece in stripped.split(ARGUMENT_SEPARATOR):
        match = _ARGUMENT_NAME_RE.search(piece)
        if match is not None:
            names.append(match.group(0))
    return tuple(names)


def match_description_start(line: str, name: str) -> str | None:
    """Return the trimmed text after ``name:`` if the line echoes the name."""
    match = _description_pattern(name).search(line)
    if match is None:
        return None
    return match.group(1).strip()


def is_comment_block_open(line: str) -> bool:
    return COMMENT_BLOCK_OPEN in line


def is_terminator(line: str) -> bool:
    return any(marker in line for marker in TERMINATOR_MARKERS)


@lru_cache(maxsize=8)
def _call_pattern(namespace: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(namespace)}\.([A-Za-z_][A-Za-z0-9_]*)\((.*?)\)")


@lru_cache(maxsize=8)
def _flag_pattern(namespace: str) -> re.Pattern[str]:
    return re.compile(
        rf"^{re.escape(namespace)}\.([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(?:true|false)"
    )


@lru_cache(maxsize=256)
def _description_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![A-Za-z0-9_]){re.escape(name)}:\s*(.*)$")
