"""Structured logging for docsnip runs."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

_EVENT_KEY_ORDER: dict[str, list[str]] = {
    "convert_start": ["ts_utc", "level", "source_file", "dest_file", "namespace", "strict"],
    "convert_done": ["ts_utc", "level", "dest_file", "record_count", "dropped_count"],
    "convert_error": ["ts_utc", "level", "error_type", "error"],
    "gate_found": ["ts_utc", "level", "line_number", "gate_line"],
    "gate_missing": ["ts_utc", "level", "gate_line", "line_count"],
    "declaration_dropped": ["ts_utc", "level", "name", "kind", "line_number", "reason"],
    "duplicate_snippet_key": ["ts_utc", "level", "key", "line_number"],
}
_DEFAULT_KEY_ORDER = ["ts_utc", "level", "message"]


def _to_log_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


class StructuredTextFormatter(logging.Formatter):
    """Format log records as ``=== event ===`` blocks of ``key: value`` lines."""

    @staticmethod
    def _format_value(value: Any) -> str:
        return str(value).replace("\n", "\\n")

    @staticmethod
    def _ordered_keys(event_name: str, data: dict[str, Any]) -> list[str]:
        preferred = _EVENT_KEY_ORDER.get(event_name, _DEFAULT_KEY_ORDER)
        preferred_present = [k for k in preferred if data.get(k) is not None]
        remaining = sorted(
            k for k in data.keys() if k not in preferred and data[k] is not None
        )
        return preferred_present + remaining

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
        }

        message = record.getMessage()
        parsed = None
        if message.startswith("{") and message.endswith("}"):
            try:
                parsed = json.loads(message)
            except json.JSONDecodeError:
                parsed = None

        if isinstance(parsed, dict):
            base.update(parsed)
        else:
            base["event"] = record.name
            base["message"] = message

        event_name = str(base.pop("event", record.name))
        lines = [f"=== {event_name} ==="]
        for key in self._ordered_keys(event_name, base):
            lines.append(f"{key}: {self._format_value(base[key])}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        return "\n".join(lines) + "\n"


def log_event(
    event: str,
    *,
    level: int = logging.INFO,
    logger: logging.Logger | None = None,
    **fields: Any,
) -> None:
    """Emit one structured event as a JSON payload."""
    payload = {"event": event}
    payload.update({key: _to_log_safe(value) for key, value in fields.items()})
    target = logger if logger is not None else logging.getLogger()
    target.log(level, json.dumps(payload, ensure_ascii=False))


def setup_logging(log_file: Path | None = None) -> None:
    """Log to ``log_file`` when given; otherwise silence logging entirely."""
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
        handler.setFormatter(StructuredTextFormatter())
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
