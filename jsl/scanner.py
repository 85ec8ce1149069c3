"""Turns source text into a stream of tokens."""

from __future__ import annotations

from typing import Callable, Iterator

from jsl.tokens import SourcePosition, Token, TokenType, identifier_or_keyword

_END = "\0"

_SINGLE: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACKET,
    "}": TokenType.RIGHT_BRACKET,
    ";": TokenType.SEMICOLON,
}

# first char -> (second char, two-char type, one-char type)
_PAIRED: dict[str, tuple[str, TokenType, TokenType]] = {
    "=": ("=", TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "!": ("=", TokenType.BANG_EQUAL, TokenType.BANG),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER),
    "<": ("=", TokenType.LESS_EQUAL, TokenType.LESS),
    "|": ("|", TokenType.BAR_BAR, TokenType.BAR),
    "&": ("&", TokenType.AMPERSAND_AMPERSAND, TokenType.AMPERSAND),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_identifier_char(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch) or ch == "_"


class Scanner:
    """Produces tokens from source text one at a time."""

    def __init__(self, source: str, file_name: str | None) -> None:
        self._source = source
        self._file_name = file_name
        self._start = 0
        self._current = 0
        self._line = 1

    @property
    def file_name(self) -> str | None:
        return self._file_name

    def next_token(self) -> Token:
        """Return the next token; END_OF_FILE once the input is exhausted."""
        self._skip_whitespace()
        self._start = self._current

        if self._at_end():
            return self._make_token(TokenType.END_OF_FILE)

        ch = self._advance()

        if ch in _SINGLE:
            return self._make_token(_SINGLE[ch])
        if ch in _PAIRED:
            second, double, single = _PAIRED[ch]
            return self._make_token(double if self._match(second) else single)
        if _is_digit(ch):
            self._advance_while(_is_digit)
            return self._make_token(TokenType.INTEGER)
        if _is_alpha(ch) or ch == "_":
            self._advance_while(_is_identifier_char)
            return self._make_token(identifier_or_keyword(self._lexeme()))
        return Token(TokenType.ERROR, self._position(), "unknown character")

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with a single END_OF_FILE."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END_OF_FILE:
                return

    def _skip_whitespace(self) -> None:
        while True:
            ch = self._peek()
            if ch == "\n":
                self._line += 1
                self._advance()
            elif ch in " \t\r" and not self._at_end():
                self._advance()
            elif ch == "/" and self._peek(1) == "/":
                self._advance_while(lambda c: c != "\n")
            else:
                return

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        index = self._current + offset
        return self._source[index] if index < len(self._source) else _END

    def _advance(self) -> str:
        if self._at_end():
            raise AssertionError("attempt to advance while being at the end of the input")
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _advance_while(self, predicate: Callable[[str], bool]) -> None:
        while not self._at_end() and predicate(self._peek()):
            self._advance()

    def _match(self, expected: str) -> bool:
        if self._at_end() or self._peek() != expected:
            return False
        self._advance()
        return True

    def _lexeme(self) -> str:
        return self._source[self._start:self._current]

    def _position(self) -> SourcePosition:
        return SourcePosition(self._file_name, self._line)

    def _make_token(self, kind: TokenType) -> Token:
        return Token(kind, self._position(), self._lexeme())