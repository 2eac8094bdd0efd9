"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent, and documents every error case
    in one place.
    """

    _RFC_BASE = "https://www.rfc-editor.org/rfc/rfc5646"
    _ECMA_BASE = "https://tc39.es/ecma402"

    # ------------------------------------------------------------------------
    # Scan errors
    # ------------------------------------------------------------------------

    @staticmethod
    def empty_tag() -> Diagnostic:
        """Input string is empty.

        Returns:
            Diagnostic for EMPTY_TAG
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_TAG,
            message="Language tag is empty",
            span=SourceSpan(0, 0),
            hint="Use 'und' for an undetermined language",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.1",
        )

    @staticmethod
    def empty_subtag(position: int) -> Diagnostic:
        """Leading, trailing, or doubled '-' delimiter.

        Args:
            position: Character offset where the empty subtag starts

        Returns:
            Diagnostic for EMPTY_SUBTAG
        """
        msg = f"Empty subtag at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SUBTAG,
            message=msg,
            span=SourceSpan(position, position),
            hint="Subtags are separated by exactly one '-'",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.1",
        )

    @staticmethod
    def invalid_subtag(token: str, position: int) -> Diagnostic:
        """Subtag with bad length or characters outside ASCII alphanumerics.

        Args:
            token: The offending subtag text
            position: Character offset of the subtag

        Returns:
            Diagnostic for INVALID_SUBTAG
        """
        msg = f"Invalid subtag '{token}' at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SUBTAG,
            message=msg,
            span=SourceSpan(position, position + len(token)),
            hint="Subtags are 1-8 ASCII letters or digits",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.1",
            subtag=token,
        )

    @staticmethod
    def tag_too_long(length: int, limit: int) -> Diagnostic:
        """Input exceeds the accepted tag length.

        Args:
            length: Actual input length
            limit: Maximum accepted length

        Returns:
            Diagnostic for TAG_TOO_LONG
        """
        msg = f"Language tag length {length} exceeds maximum of {limit}"
        return Diagnostic(
            code=DiagnosticCode.TAG_TOO_LONG,
            message=msg,
            hint="Real language tags are rarely longer than a few dozen characters",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-4.4.1",
        )

    # ------------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------------

    @staticmethod
    def unexpected_subtag(
        token: str, expected_slot: str, position: int | None = None
    ) -> Diagnostic:
        """Subtag does not fit the current grammar slot or any later one.

        Args:
            token: The offending subtag text
            expected_slot: The slot the parser was ready to fill
            position: Character offset of the subtag, if known

        Returns:
            Diagnostic for UNEXPECTED_SUBTAG
        """
        msg = f"Unexpected subtag '{token}' (expected {expected_slot})"
        span = SourceSpan(position, position + len(token)) if position is not None else None
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_SUBTAG,
            message=msg,
            span=span,
            hint="Subtags must appear in order: language, script, region, variants, extensions",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.1",
            subtag=token,
            expected=expected_slot,
        )

    @staticmethod
    def missing_language(token: str | None = None, position: int | None = None) -> Diagnostic:
        """Tag does not begin with a language subtag.

        Args:
            token: The first subtag, if any
            position: Character offset of that subtag, if known

        Returns:
            Diagnostic for MISSING_LANGUAGE
        """
        if token is None:
            msg = "Language tag has no language subtag"
            span = None
        else:
            msg = f"Language tag starts with '{token}' instead of a language subtag"
            start = position if position is not None else 0
            span = SourceSpan(start, start + len(token))
        return Diagnostic(
            code=DiagnosticCode.MISSING_LANGUAGE,
            message=msg,
            span=span,
            hint="Start the tag with a 2-8 letter language subtag, or use 'x-' for private use",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.2.1",
            subtag=token,
            expected="language",
        )

    @staticmethod
    def duplicate_variant(token: str, position: int | None = None) -> Diagnostic:
        """Same variant appears twice (compared case-insensitively).

        Args:
            token: The repeated variant
            position: Character offset of the repetition, if known

        Returns:
            Diagnostic for DUPLICATE_VARIANT
        """
        msg = f"Duplicate variant subtag '{token}'"
        span = SourceSpan(position, position + len(token)) if position is not None else None
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_VARIANT,
            message=msg,
            span=span,
            hint="Each variant may appear only once",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.2.5",
            subtag=token,
        )

    @staticmethod
    def missing_singleton_value(singleton: str, position: int | None = None) -> Diagnostic:
        """Extension or private-use singleton with no following subtags.

        Args:
            singleton: The dangling singleton
            position: Character offset of the singleton, if known

        Returns:
            Diagnostic for MISSING_SINGLETON_VALUE
        """
        msg = f"Singleton '{singleton}' is not followed by any subtag"
        span = SourceSpan(position, position + len(singleton)) if position is not None else None
        return Diagnostic(
            code=DiagnosticCode.MISSING_SINGLETON_VALUE,
            message=msg,
            span=span,
            hint="Extensions need at least one 2-8 character subtag after the singleton",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.2.6",
            subtag=singleton,
        )

    @staticmethod
    def duplicate_singleton(singleton: str, position: int | None = None) -> Diagnostic:
        """Same extension singleton introduced twice.

        Args:
            singleton: The repeated singleton
            position: Character offset of the repetition, if known

        Returns:
            Diagnostic for DUPLICATE_SINGLETON
        """
        msg = f"Duplicate extension singleton '{singleton}'"
        span = SourceSpan(position, position + len(singleton)) if position is not None else None
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_SINGLETON,
            message=msg,
            span=span,
            hint="Merge the subtags into a single extension sequence",
            help_url=f"{ErrorTemplate._RFC_BASE}#section-2.2.6",
            subtag=singleton,
        )

    # ------------------------------------------------------------------------
    # Merge errors
    # ------------------------------------------------------------------------

    @staticmethod
    def invalid_override(field: str, value: object, reason: str | None = None) -> Diagnostic:
        """Option override fails the grammar slot shape check.

        Args:
            field: The overridden field (script, region)
            value: The rejected value
            reason: Extra explanation, if the shape is not the problem

        Returns:
            Diagnostic for INVALID_OVERRIDE
        """
        msg = f"Invalid {field} override {value!r}"
        if reason:
            msg = f"{msg}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OVERRIDE,
            message=msg,
            hint=f"The {field} option must be a well-formed {field} subtag",
            help_url=f"{ErrorTemplate._ECMA_BASE}/#sec-intl-locale-constructor",
            subtag=str(value),
            expected=field,
        )

    @staticmethod
    def unknown_option(option: str, value: object) -> Diagnostic:
        """Option value not in the recognized enumeration.

        Args:
            option: The option name (hour_cycle, calendar)
            value: The rejected value

        Returns:
            Diagnostic for UNKNOWN_OPTION
        """
        msg = f"Unknown {option} value {value!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_OPTION,
            message=msg,
            hint=f"See the Unicode locale extension registry for valid {option} values",
            help_url=f"{ErrorTemplate._ECMA_BASE}/#sec-intl-locale-constructor",
            subtag=str(value),
            expected=option,
        )

    @staticmethod
    def duplicate_option(option: str) -> Diagnostic:
        """Same option kind supplied more than once.

        Args:
            option: The repeated option name

        Returns:
            Diagnostic for DUPLICATE_OPTION
        """
        msg = f"Option '{option}' given more than once"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_OPTION,
            message=msg,
            hint="Pass each option kind at most once",
            help_url=f"{ErrorTemplate._ECMA_BASE}/#sec-intl-locale-constructor",
            expected=option,
        )
