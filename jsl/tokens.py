"""Token kinds, source positions and tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of lexical tokens."""

    UNSPECIFIED = auto()
    END_OF_FILE = auto()
    ERROR = auto()
    INTEGER = auto()
    SEMICOLON = auto()
    IDENTIFIER = auto()
    PRINT = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    BANG = auto()
    BANG_EQUAL = auto()
    GREATER = auto()
    LESS = auto()
    GREATER_EQUAL = auto()
    LESS_EQUAL = auto()
    BAR = auto()
    BAR_BAR = auto()
    AMPERSAND = auto()
    AMPERSAND_AMPERSAND = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    IF = auto()
    ELSE = auto()
    VAR = auto()


KEYWORDS: dict[str, TokenType] = {
    "print": TokenType.PRINT,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "var": TokenType.VAR,
}


def identifier_or_keyword(text: str) -> TokenType:
    """Return the keyword token type for ``text``, or IDENTIFIER."""
    return KEYWORDS.get(text, TokenType.IDENTIFIER)


@dataclass(frozen=True)
class SourcePosition:
    """A location in a source file: the file name and a 1-based line."""

    file_name: str | None = None
    line: int = 0


@dataclass(frozen=True)
class Token:
    """A lexical token with its kind, position and text."""

    type: TokenType = TokenType.UNSPECIFIED
    position: SourcePosition = field(default_factory=SourcePosition)
    text: str = ""