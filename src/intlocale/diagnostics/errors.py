"""Locale exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
Every exception stores a Diagnostic and exposes the offending subtag,
position, or option as plain attributes.

Hierarchy:
    LocaleError
    ├── ScanError            lexical malformation
    │   ├── EmptyTagError
    │   ├── EmptySubtagError
    │   ├── InvalidSubtagError
    │   └── TagTooLongError
    ├── ParseError           grammar violation
    │   ├── UnexpectedSubtagError
    │   ├── MissingLanguageError
    │   ├── DuplicateVariantError
    │   ├── MissingSingletonValueError
    │   └── DuplicateSingletonError
    └── MergeError           constructor option rejected
        ├── InvalidOverrideError
        ├── UnknownOptionError
        └── DuplicateOptionError

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory
from .templates import ErrorTemplate

__all__ = [
    "DuplicateOptionError",
    "DuplicateSingletonError",
    "DuplicateVariantError",
    "EmptySubtagError",
    "EmptyTagError",
    "InvalidOverrideError",
    "InvalidSubtagError",
    "LocaleError",
    "MergeError",
    "MissingLanguageError",
    "MissingSingletonValueError",
    "ParseError",
    "ScanError",
    "TagTooLongError",
    "UnexpectedSubtagError",
    "UnknownOptionError",
]


class LocaleError(Exception):
    """Base exception for all language tag and locale errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Pipeline stage that raised this error, when a diagnostic is attached."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category


# ============================================================================
# SCAN ERRORS
# ============================================================================


class ScanError(LocaleError):
    """Lexical malformation in the raw tag string.

    Always terminal for the current parse attempt.
    """


class EmptyTagError(ScanError):
    """Input string is empty."""

    def __init__(self) -> None:
        super().__init__(ErrorTemplate.empty_tag())
        self.position = 0


class EmptySubtagError(ScanError):
    """Leading, trailing, or consecutive '-' delimiters.

    Attributes:
        position: Character offset where the empty subtag sits
    """

    def __init__(self, *, position: int) -> None:
        super().__init__(ErrorTemplate.empty_subtag(position))
        self.position = position


class InvalidSubtagError(ScanError):
    """Subtag longer than 8 characters or containing non-ASCII-alphanumerics.

    Attributes:
        token: The offending subtag
        position: Character offset of the subtag
    """

    def __init__(self, *, token: str, position: int) -> None:
        super().__init__(ErrorTemplate.invalid_subtag(token, position))
        self.token = token
        self.position = position


class TagTooLongError(ScanError):
    """Input longer than MAX_TAG_LENGTH.

    Attributes:
        length: Actual input length
        limit: Accepted maximum
    """

    def __init__(self, *, length: int, limit: int) -> None:
        super().__init__(ErrorTemplate.tag_too_long(length, limit))
        self.length = length
        self.limit = limit


# ============================================================================
# PARSE ERRORS
# ============================================================================


class ParseError(LocaleError):
    """Grammar violation in a lexically valid tag.

    No partial tag is ever produced when this is raised.
    """


class UnexpectedSubtagError(ParseError):
    """Subtag fits neither the current grammar slot nor any later one.

    Attributes:
        token: The offending subtag
        expected_slot: Slot the parser was ready to fill
        position: Character offset of the subtag (None if not from source text)
    """

    def __init__(self, *, token: str, expected_slot: str, position: int | None = None) -> None:
        super().__init__(ErrorTemplate.unexpected_subtag(token, expected_slot, position))
        self.token = token
        self.expected_slot = expected_slot
        self.position = position


class MissingLanguageError(ParseError):
    """Tag does not start with a language subtag (and is not private use).

    Attributes:
        token: First subtag of the input, if any
        position: Character offset of that subtag
    """

    def __init__(self, *, token: str | None = None, position: int | None = None) -> None:
        super().__init__(ErrorTemplate.missing_language(token, position))
        self.token = token
        self.position = position


class DuplicateVariantError(ParseError):
    """Variant repeated (case-insensitive comparison).

    Attributes:
        token: The repeated variant as written
        position: Character offset of the repetition
    """

    def __init__(self, *, token: str, position: int | None = None) -> None:
        super().__init__(ErrorTemplate.duplicate_variant(token, position))
        self.token = token
        self.position = position


class MissingSingletonValueError(ParseError):
    """Singleton followed by no value subtags before the next singleton or end.

    Attributes:
        singleton: The dangling singleton
        position: Character offset of the singleton
    """

    def __init__(self, *, singleton: str, position: int | None = None) -> None:
        super().__init__(ErrorTemplate.missing_singleton_value(singleton, position))
        self.singleton = singleton
        self.position = position


class DuplicateSingletonError(ParseError):
    """Extension singleton introduced twice.

    Attributes:
        singleton: The repeated singleton
        position: Character offset of the repetition
    """

    def __init__(self, *, singleton: str, position: int | None = None) -> None:
        super().__init__(ErrorTemplate.duplicate_singleton(singleton, position))
        self.singleton = singleton
        self.position = position


# ============================================================================
# MERGE ERRORS
# ============================================================================


class MergeError(LocaleError):
    """Constructor option rejected.

    Raised without mutating the base tag.
    """


class InvalidOverrideError(MergeError):
    """Script or region override fails the grammar slot shape check.

    Attributes:
        field: Overridden field name ("script" or "region")
        value: The rejected value
    """

    def __init__(self, *, field: str, value: object, reason: str | None = None) -> None:
        super().__init__(ErrorTemplate.invalid_override(field, value, reason))
        self.field = field
        self.value = value


class UnknownOptionError(MergeError):
    """Hour cycle or calendar value outside the recognized enumeration.

    Attributes:
        option: Option name ("hour_cycle" or "calendar")
        value: The rejected value
    """

    def __init__(self, *, option: str, value: object) -> None:
        super().__init__(ErrorTemplate.unknown_option(option, value))
        self.option = option
        self.value = value


class DuplicateOptionError(MergeError):
    """Same option kind supplied more than once.

    Attributes:
        option: The repeated option name
    """

    def __init__(self, *, option: str) -> None:
        super().__init__(ErrorTemplate.duplicate_option(option))
        self.option = option
