"""Lexical scanner for BCP-47 language tags.

Splits a raw tag on '-' into positioned tokens, enforcing only the lexical
rules shared by every subtag: 1-8 ASCII alphanumerics, single delimiters,
no empty input. Token meaning is assigned later by the parser.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from intlocale.constants import MAX_SUBTAG_LENGTH, MAX_TAG_LENGTH, SUBTAG_SEPARATOR
from intlocale.core.subtags import is_subtag_token
from intlocale.diagnostics import (
    EmptySubtagError,
    EmptyTagError,
    InvalidSubtagError,
    TagTooLongError,
)

__all__ = ["Token", "scan"]


@dataclass(frozen=True, slots=True)
class Token:
    """A single subtag with its location in the source tag.

    Attributes:
        value: Subtag text exactly as written (case preserved)
        index: Zero-based subtag index within the tag
        offset: Character offset of the first character in the tag
    """

    value: str
    index: int
    offset: int

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    @property
    def end(self) -> int:
        """Character offset one past the last character."""
        return self.offset + len(self.value)


def scan(raw: str) -> tuple[Token, ...]:
    """Tokenize a raw language tag.

    Args:
        raw: Tag text, e.g. "en-US" or "zh-Hant-TW"

    Returns:
        Tuple of tokens in source order (never empty)

    Raises:
        TypeError: If raw is not a string
        EmptyTagError: If raw is empty
        TagTooLongError: If raw exceeds MAX_TAG_LENGTH characters
        EmptySubtagError: On a leading, trailing, or doubled delimiter
        InvalidSubtagError: On a subtag that is too long or contains
            characters outside ASCII letters and digits

    Example:
        >>> [t.value for t in scan("sr-Latn-RS")]
        ['sr', 'Latn', 'RS']
        >>> scan("en--US")
        Traceback (most recent call last):
        ...
        intlocale.diagnostics.errors.EmptySubtagError: ...
    """
    if not isinstance(raw, str):
        msg = f"Language tag must be str, got {type(raw).__name__}"
        raise TypeError(msg)
    if not raw:
        raise EmptyTagError
    if len(raw) > MAX_TAG_LENGTH:
        raise TagTooLongError(length=len(raw), limit=MAX_TAG_LENGTH)

    tokens: list[Token] = []
    offset = 0
    for index, value in enumerate(raw.split(SUBTAG_SEPARATOR)):
        if not value:
            raise EmptySubtagError(position=offset)
        if len(value) > MAX_SUBTAG_LENGTH or not is_subtag_token(value):
            raise InvalidSubtagError(token=value, position=offset)
        tokens.append(Token(value, index, offset))
        offset += len(value) + len(SUBTAG_SEPARATOR)
    return tuple(tokens)
