"""CLI entry and startup wiring."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .constants import APP_NAME, DEFAULT_ALIAS, DEFAULT_LANGUAGE, DEFAULT_NAMESPACE
from .errors import DocsnipError, StartupValidationError
from .logging_utils import log_event, setup_logging
from .models import DocumentGrammar
from .path_mapping import resolve_startup_paths
from .presenters import render_error, render_result_lines
from .snippet_gateway import convert_file


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    app_root_abs = Path(__file__).resolve().parent

    try:
        resolved_paths = resolve_startup_paths(
            source_arg_raw=args.source,
            dest_arg_raw=args.dest,
            log_arg_raw=args.log,
            app_root_abs=app_root_abs,
        )
        _setup_logging(resolved_paths.log_path_abs)
    except DocsnipError as exc:
        print(render_error(str(exc)))
        return 1

    grammar = DocumentGrammar.for_namespace(
        args.namespace,
        gate_line=args.gate,
        alias=args.alias,
        language=args.language,
    )

    try:
        result = convert_file(
            source_path_abs=resolved_paths.source_path_abs,
            dest_path_abs=resolved_paths.dest_path_abs,
            grammar=grammar,
            strict=args.strict,
        )
    except DocsnipError as exc:
        log_event(
            "convert_error",
            level=logging.ERROR,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        print(render_error(str(exc)))
        return 1

    for line in render_result_lines(
        result=result,
        grammar=grammar,
        dest_path_abs=resolved_paths.dest_path_abs,
    ):
        print(line)
    return 0


def _setup_logging(log_path_abs: Path | None) -> None:
    try:
        setup_logging(log_path_abs)
    except OSError as exc:
        raise StartupValidationError(f"Failed to open log file: {log_path_abs}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate editor snippets from a plain-text API reference.",
    )
    parser.add_argument(
        "--source",
        required=True,
        help="Reference document path (absolute, or mapped with ~ / @).",
    )
    parser.add_argument(
        "--dest",
        required=True,
        help="Snippet document path to write (absolute, or mapped with ~ / @).",
    )
    parser.add_argument(
        "--log",
        required=False,
        help="Optional log file path (absolute, or mapped with ~ / @).",
    )
    parser.add_argument(
        "--namespace",
        default=DEFAULT_NAMESPACE,
        help=f"Library table that prefixes declarations (default: {DEFAULT_NAMESPACE}).",
    )
    parser.add_argument(
        "--gate",
        default=None,
        help="Exact line that starts the reference section "
        "(default: <namespace>.SetOnError(fn)).",
    )
    parser.add_argument(
        "--alias",
        default=DEFAULT_ALIAS,
        help=f"Name the library is bound to in user code (default: {DEFAULT_ALIAS}).",
    )
    parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        help=f"Language tag appended to snippet keys (default: {DEFAULT_LANGUAGE}).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on declarations that never reach a terminator instead of dropping them.",
    )
    return parser
