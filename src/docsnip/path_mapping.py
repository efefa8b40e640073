"""Path mapping and startup validation."""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

from .errors import PathMappingError, StartupValidationError
from .models import ResolvedPaths

_WINDOWS_DRIVE_RELATIVE_RE = re.compile(r"^[A-Za-z]:[^/\\]")


def resolve_startup_paths(
    *,
    source_arg_raw: str,
    dest_arg_raw: str,
    log_arg_raw: str | None,
    app_root_abs: Path,
) -> ResolvedPaths:
    if not app_root_abs.is_absolute():
        raise StartupValidationError("App root must be an absolute path.")

    source_path_abs = map_path_argument(
        raw_path=source_arg_raw,
        app_root_abs=app_root_abs,
        argument_name="--source",
    )
    dest_path_abs = map_path_argument(
        raw_path=dest_arg_raw,
        app_root_abs=app_root_abs,
        argument_name="--dest",
    )
    log_path_abs = (
        map_path_argument(
            raw_path=log_arg_raw,
            app_root_abs=app_root_abs,
            argument_name="--log",
        )
        if log_arg_raw is not None
        else None
    )

    _validate_distinct(source_path_abs, dest_path_abs, "--source", "--dest")
    _validate_not_directory(dest_path_abs, "--dest")
    if log_path_abs is not None:
        _validate_distinct(source_path_abs, log_path_abs, "--source", "--log")
        _validate_distinct(dest_path_abs, log_path_abs, "--dest", "--log")
        _validate_not_directory(log_path_abs, "--log")

    return ResolvedPaths(
        source_arg_raw=source_arg_raw,
        source_path_abs=source_path_abs,
        dest_arg_raw=dest_arg_raw,
        dest_path_abs=dest_path_abs,
        log_arg_raw=log_arg_raw,
        log_path_abs=log_path_abs,
    )


def map_path_argument(
    *,
    raw_path: str | None,
    app_root_abs: Path,
    argument_name: str,
) -> Path:
    if raw_path is None:
        raise PathMappingError(f"{argument_name} path is missing.")

    normalized_input = unicodedata.normalize("NFC", raw_path)
    if "\0" in normalized_input:
        raise PathMappingError(f"{argument_name} contains NUL (\\0).")
    if _is_windows_rooted_not_fully_qualified(normalized_input):
        raise PathMappingError(
            f"{argument_name} uses an unsupported Windows rooted-not-qualified path."
        )

    mapped = _map_special_prefixes(normalized_input, app_root_abs, argument_name)
    if not mapped.is_absolute():
        raise PathMappingError(
            f"{argument_name} must be absolute or start with '~' or '@'."
        )

    return mapped.resolve(strict=False)


def _map_special_prefixes(path_text: str, app_root_abs: Path, argument_name: str) -> Path:
    if path_text.startswith("~"):
        try:
            return Path(path_text).expanduser()
        except RuntimeError as exc:
            raise PathMappingError(
                f"Failed to expand user home in path for {argument_name}: {path_text}"
            ) from exc
    if path_text.startswith("@"):
        return _map_app_root_path(path_text, app_root_abs)
    return Path(path_text)


def _map_app_root_path(path_text: str, app_root_abs: Path) -> Path:
    remainder = path_text[1:].lstrip("/\\")
    if remainder == "":
        return app_root_abs

    segments = [segment for segment in re.split(r"[\\/]+", remainder) if segment]
    return app_root_abs.joinpath(*segments)


def _is_windows_rooted_not_fully_qualified(path_text: str) -> bool:
    if path_text.startswith("\\") and not path_text.startswith("\\\\"):
        return True
    return _WINDOWS_DRIVE_RELATIVE_RE.match(path_text) is not None


def _validate_distinct(first: Path, second: Path, first_name: str, second_name: str) -> None:
    if first == second:
        raise StartupValidationError(
            f"{first_name} and {second_name} must not be the same file: {first}"
        )


def _validate_not_directory(path_abs: Path, argument_name: str) -> None:
    if path_abs.is_dir():
        raise StartupValidationError(f"{argument_name} must be a file path: {path_abs}")
