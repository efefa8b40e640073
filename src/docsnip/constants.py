"""Literal constants used by docsnip."""

DEFAULT_NAMESPACE = "MIDIUtils"
DEFAULT_GATE_FUNCTION = "SetOnError(fn)"
DEFAULT_ALIAS = "mu"
DEFAULT_LANGUAGE = "lua"

COMMENT_BLOCK_OPEN = "--[["
COMMENT_BLOCK_CLOSE = "--]]"
TERMINATOR_MARKERS = (
    "Arguments:",
    "Return Value:",
    COMMENT_BLOCK_CLOSE,
)

# Appended to every description; rendered by the editor as a paragraph break.
PARAGRAPH_BREAK = "\n\n"

ARGUMENT_SEPARATOR = ", "
CURSOR_REST_MARKER = "$0"

OUTPUT_INDENT = "\t"
SOURCE_ENCODING = "utf-8"
OUTPUT_ENCODING = "utf-8"

APP_NAME = "docsnip"
WARNING_PREFIX = "WARNING:"
ERROR_PREFIX = "ERROR:"
