"""Typed exceptions for docsnip."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import DroppedDeclaration


class DocsnipError(Exception):
    """Base exception for docsnip failures."""


class PathMappingError(DocsnipError):
    """Raised when a path argument cannot be safely mapped."""


class StartupValidationError(DocsnipError):
    """Raised when startup arguments are invalid."""


class SourceUnavailableError(DocsnipError):
    """Raised when the reference document cannot be read."""


class SinkUnwritableError(DocsnipError):
    """Raised when the snippet document cannot be written."""


class UnterminatedDeclarationError(DocsnipError):
    """Raised in strict mode when a declaration never reaches a terminator."""

    def __init__(self, dropped: DroppedDeclaration) -> None:
        declaration = dropped.declaration
        super().__init__(
            f"Declaration '{declaration.name}' at line {declaration.line_number} "
            f"has no terminator ({dropped.reason})."
        )
        self.dropped = dropped
