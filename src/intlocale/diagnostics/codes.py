"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization matching the pipeline stage that failed.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        SCAN: Lexical malformation (charset, length, delimiter misuse)
        PARSE: Grammar violation (slot order, duplicates, dangling singleton)
        MERGE: Invalid or unrecognized constructor option
    """

    SCAN = "scan"
    PARSE = "parse"
    MERGE = "merge"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Scan errors (lexical)
        2000-2999: Parse errors (grammar)
        3000-3999: Merge errors (constructor options)
    """

    # Scan errors (1000-1999)
    EMPTY_TAG = 1001
    EMPTY_SUBTAG = 1002
    INVALID_SUBTAG = 1003
    TAG_TOO_LONG = 1004

    # Parse errors (2000-2999)
    UNEXPECTED_SUBTAG = 2001
    MISSING_LANGUAGE = 2002
    DUPLICATE_VARIANT = 2003
    MISSING_SINGLETON_VALUE = 2004
    DUPLICATE_SINGLETON = 2005

    # Merge errors (3000-3999)
    INVALID_OVERRIDE = 3001
    UNKNOWN_OPTION = 3002
    DUPLICATE_OPTION = 3003

    @property
    def category(self) -> ErrorCategory:
        """Pipeline stage this code belongs to."""
        if self.value < 2000:
            return ErrorCategory.SCAN
        if self.value < 3000:
            return ErrorCategory.PARSE
        return ErrorCategory.MERGE


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of the offending text inside a language tag.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside the tag (None when not tied to a position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        subtag: The offending subtag or option value
        expected: Grammar slot or option that was expected
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    subtag: str | None = None
    expected: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNEXPECTED_SUBTAG]: Unexpected subtag 'US' (expected variant)
              --> offset 6..8
              = subtag: US
              = expected: variant
              = help: A tag carries at most one region subtag
              = note: see https://www.rfc-editor.org/rfc/rfc5646#section-2.1

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
