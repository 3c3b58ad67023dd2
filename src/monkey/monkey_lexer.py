"""
Lexical analyzer for the Monkey programming language.

This module turns raw source text into a stream of tokens, one token per call:

Classes:
    CharacterStream: Source text read one character at a time, tracking line and column.
    SourceExhaustedError: Raised when a CharacterStream is read past its end.
    Token: Immutable token with a kind, literal text, and source location.
    Lexer: Pulls characters from a CharacterStream and produces Tokens on demand.

Features:
    - Skips whitespace (space, tab, newline, carriage return)
    - Recognizes identifiers and the keywords ``fn let true false if else return``
    - Recognizes decimal integer literals (range checking is left to the parser)
    - Uses a single character of lookahead to split ``=``/``==`` and ``!``/``!=``
    - Never raises on bad input: unknown characters become ``ILLEGAL`` tokens

Example:
    >>> lexer = Lexer(CharacterStream("let x = 5;"))
    >>> lexer.next_token()
    Token(LET, 'let')

Exports:
    - CharacterStream
    - SourceExhaustedError
    - Token
    - Lexer
    - tokenize
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from monkey.monkey_constants import (
    TokenKind,
    lookup_ident,
    single_char_tokens,
    two_char_tokens,
)


class SourceExhaustedError(Exception):
    """Raised when a ``CharacterStream`` is read after its last character."""


class CharacterStream:
    """
    Monkey source text read one character at a time.

    ``line`` and ``column`` always describe the next unread character, so the
    lexer can stamp a token with its position before consuming it.

    Attributes:
        source (str): The full program text.
        position (int): Index of the next unread character.
        line (int): 1-based line of the next unread character.
        column (int): 1-based column of the next unread character.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1

    def next(self) -> str:
        """Consumes one character, moving to a fresh line after ``\\n``."""
        if self.end_of_file():
            raise SourceExhaustedError(
                f"no character left to read at line {self.line}, column {self.column}"
            )
        char = self.source[self.position]
        self.position += 1
        if char == "\n":
            self.line, self.column = self.line + 1, 1
        else:
            self.column += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character ``offset`` places ahead, or ``""`` when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Two tokens are equal when their kind and literal match; the source
    location is carried for diagnostics only.

    Attributes:
        kind (TokenKind): The token's category.
        literal (str): The exact source text of the token (``""`` for EOF).
        line (int): 1-based line of the token's first character.
        col (int): 1-based column of the token's first character.
    """

    kind: TokenKind
    literal: str
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.literal!r})"


def is_letter(ch: str) -> bool:
    return ch == "_" or "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Lexical analyzer for the Monkey language.

    The Lexer reads a CharacterStream lazily; every call to ``next_token``
    consumes exactly the characters of one token (plus any whitespace before
    it). Once the input is exhausted it keeps returning EOF.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    @classmethod
    def from_source(cls, source: str) -> "Lexer":
        return cls(CharacterStream(source))

    def peek(self, offset: int = 0) -> str:
        return self.stream.peek(offset)

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in " \t\r\n":
            self.advance()

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consumes the maximal run of characters accepted by ``predicate``."""
        text = ""
        while not self.stream.end_of_file() and predicate(self.peek()):
            text += self.advance()
        return text

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream."""
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(TokenKind.EOF, "", line, col)

        ch = self.peek()

        # 1. Identifier or keyword
        if is_letter(ch):
            ident = self.read_while(lambda c: is_letter(c) or is_digit(c))
            return Token(lookup_ident(ident), ident, line, col)

        # 2. Integer literal
        if is_digit(ch):
            return Token(TokenKind.INT, self.read_while(is_digit), line, col)

        # 3. Two-character operators need one character of lookahead
        pair = ch + self.peek(1)
        if pair in two_char_tokens:
            self.advance()
            self.advance()
            return Token(two_char_tokens[pair], pair, line, col)

        # 4. Single-character operators and punctuation
        self.advance()
        if ch in single_char_tokens:
            return Token(single_char_tokens[ch], ch, line, col)

        # 5. Unknown character
        return Token(TokenKind.ILLEGAL, ch, line, col)


def tokenize(source: str) -> list[Token]:
    """Scans ``source`` completely and returns every token, ending with EOF."""
    lexer = Lexer(CharacterStream(source))
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.kind == TokenKind.EOF:
            break
    return tokens


__all__ = ["CharacterStream", "Lexer", "SourceExhaustedError", "Token", "tokenize"]
