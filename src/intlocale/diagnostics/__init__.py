"""Diagnostic system for language tag and locale errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    DuplicateOptionError,
    DuplicateSingletonError,
    DuplicateVariantError,
    EmptySubtagError,
    EmptyTagError,
    InvalidOverrideError,
    InvalidSubtagError,
    LocaleError,
    MergeError,
    MissingLanguageError,
    MissingSingletonValueError,
    ParseError,
    ScanError,
    TagTooLongError,
    UnexpectedSubtagError,
    UnknownOptionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateOptionError",
    "DuplicateSingletonError",
    "DuplicateVariantError",
    "EmptySubtagError",
    "EmptyTagError",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidOverrideError",
    "InvalidSubtagError",
    "LocaleError",
    "MergeError",
    "MissingLanguageError",
    "MissingSingletonValueError",
    "OutputFormat",
    "ParseError",
    "ScanError",
    "SourceSpan",
    "TagTooLongError",
    "UnexpectedSubtagError",
    "UnknownOptionError",
]
