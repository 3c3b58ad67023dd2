"""
Token vocabulary for the Monkey language.

This module is the single source of truth for every lexical category the
scanner can produce and the parser can dispatch on.

Contents:
    TokenKind: Closed enumeration of token kinds. Each member's value is the
        display name used in parser diagnostics (e.g. ``")"`` or ``"IDENT"``).
    keywords: Maps reserved words to their keyword kind.
    single_char_tokens: Maps one-character operators and punctuation to kinds.
    two_char_tokens: Maps two-character operators (``==``, ``!=``) to kinds.
    lookup_ident: Classifies identifier text as a keyword or a plain IDENT.

Example:
    >>> lookup_ident("fn")
    <TokenKind.FUNCTION: 'FUNCTION'>
    >>> lookup_ident("fnord")
    <TokenKind.IDENT: 'IDENT'>
"""

from enum import Enum


class TokenKind(str, Enum):
    """Every token kind recognized by the Monkey scanner."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers + literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:
        return self.value


keywords: dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}

single_char_tokens: dict[str, TokenKind] = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

two_char_tokens: dict[str, TokenKind] = {
    "==": TokenKind.EQ,
    "!=": TokenKind.NOT_EQ,
}


def lookup_ident(ident: str) -> TokenKind:
    """Return the keyword kind for ``ident``, or ``TokenKind.IDENT``."""
    return keywords.get(ident, TokenKind.IDENT)


__all__ = [
    "TokenKind",
    "keywords",
    "lookup_ident",
    "single_char_tokens",
    "two_char_tokens",
]
