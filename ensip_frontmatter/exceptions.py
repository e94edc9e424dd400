"""Exception hierarchy for ENSIP frontmatter validation.

Every error carries a machine-readable ``error_code``, a ``details`` dict and a
``user_message`` suitable for showing to a document author. ``TracedError``
additionally locates the failure inside the original document.
"""

from __future__ import annotations

from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError as PydanticValidationError


class FrontmatterError(Exception):
    """Base class for all frontmatter validation errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.user_message = user_message or message

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a dict for structured reporting."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
        }


class MissingFrontmatterError(FrontmatterError):
    """Raised when a document does not start with a YAML frontmatter block."""

    def __init__(self, message: str = "No frontmatter found", document_path: str | None = None):
        details = {"document_path": document_path} if document_path else {}
        super().__init__(
            message=message,
            error_code="FRONTMATTER_MISSING",
            details=details,
            user_message="The document must start with a YAML frontmatter block",
        )
        self.document_path = document_path


class TracedError(FrontmatterError):
    """A parse or schema failure positioned within the original document.

    Lines and columns are 1-based. ``cause`` is the underlying YAML or
    Pydantic error.
    """

    def __init__(
        self,
        cause: Exception,
        file_path: str,
        line: int,
        column: int,
        end_column: int,
    ):
        self.cause = cause
        self.file_path = file_path
        self.line = line
        self.column = column
        self.end_column = end_column
        self.issues = _schema_issues(cause)

        if isinstance(cause, yaml.YAMLError):
            error_code = "FRONTMATTER_PARSE_ERROR"
            summary = "Invalid YAML in frontmatter"
        elif isinstance(cause, PydanticValidationError):
            error_code = "FRONTMATTER_SCHEMA_ERROR"
            summary = f"Frontmatter does not match schema ({len(self.issues)} issue(s))"
        else:
            error_code = "FRONTMATTER_ERROR"
            summary = "Frontmatter error"

        super().__init__(
            message=f"{self.location}: {summary}: {cause}",
            error_code=error_code,
            details={
                "file_path": file_path,
                "line": line,
                "column": column,
                "end_column": end_column,
                "issues": self.issues,
            },
            user_message=f"{summary} at {self.location}",
        )

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"


def _schema_issues(cause: Exception) -> list[dict[str, Any]]:
    if not isinstance(cause, PydanticValidationError):
        return []
    return [
        {
            "loc": ".".join(str(part) for part in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in cause.errors()
    ]
