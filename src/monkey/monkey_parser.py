"""
Monkey Language Parser

Parses a Monkey token stream into an abstract syntax tree (AST).

This module implements a Pratt (operator-precedence) recursive-descent parser.
It pulls tokens from a ``Lexer`` on demand and keeps exactly two of them in view:
the current token and one token of lookahead ("peek"). Statements are dispatched
on the current token's kind; expressions are assembled by prefix and infix rules
looked up in per-parser tables keyed by ``TokenKind``.

Supported Constructs
--------------------
- Statements:
    * ``let <ident> = <expr>;``
    * ``return <expr>;`` and bare ``return;``
    * Expression statements, with an optional trailing ``;``
- Expressions:
    * Identifiers, 64-bit integer literals, ``true`` / ``false``
    * Prefix ``!`` and ``-``
    * Infix ``+ - * / < > == !=`` with standard precedence, left-associative
    * Parenthesized groups
    * ``if (<cond>) { ... } else { ... }``
    * ``fn(<params>) { ... }``

Parser Behavior
---------------
- Never raises on malformed input. Each problem is recorded as a ``Diagnostic``
  and the failing rule returns ``None``; ``parse_program`` drops that statement
  and carries on with the next token.
- Diagnostics are formatted to text only when ``errors()`` is called.

Entry Points
------------
- ``Parser(lexer).parse_program()``: Parse a full program.
- ``parse(source)``: Convenience wrapper returning ``(Program, list[str])``.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from monkey.monkey_ast import (
    BlockStatement,
    Boolean,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.monkey_constants import TokenKind
from monkey.monkey_diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from monkey.monkey_lexer import Lexer, Token

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -X or !X
    CALL = 7  # reserved: myFunction(X)


PRECEDENCES: dict[TokenKind, Precedence] = {
    TokenKind.EQ: Precedence.EQUALS,
    TokenKind.NOT_EQ: Precedence.EQUALS,
    TokenKind.LT: Precedence.LESSGREATER,
    TokenKind.GT: Precedence.LESSGREATER,
    TokenKind.PLUS: Precedence.SUM,
    TokenKind.MINUS: Precedence.SUM,
    TokenKind.SLASH: Precedence.PRODUCT,
    TokenKind.ASTERISK: Precedence.PRODUCT,
}

PrefixParseFn = Callable[[], "Expression | None"]
InfixParseFn = Callable[[Expression], "Expression | None"]


class Parser:
    """
    Monkey Parser Class

    Attributes
    ----------
    lexer : Lexer
        Token source; called exactly once per token consumed.
    current_token : Token
        The token under examination.
    peek_token : Token
        The token after ``current_token``.
    diagnostics : DiagnosticCollector
        Where parse problems are recorded. Pass one in to share it across parses.
    prefix_parse_fns : dict[TokenKind, PrefixParseFn]
        Rules for tokens that can start an expression.
    infix_parse_fns : dict[TokenKind, InfixParseFn]
        Rules for tokens that can continue an expression given its left side.
    """

    def __init__(
        self, lexer: Lexer, diagnostics: DiagnosticCollector | None = None
    ) -> None:
        self.lexer = lexer
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticCollector()

        self.prefix_parse_fns: dict[TokenKind, PrefixParseFn] = {
            TokenKind.IDENT: self.parse_identifier,
            TokenKind.INT: self.parse_integer_literal,
            TokenKind.BANG: self.parse_prefix_expression,
            TokenKind.MINUS: self.parse_prefix_expression,
            TokenKind.TRUE: self.parse_boolean,
            TokenKind.FALSE: self.parse_boolean,
            TokenKind.LPAREN: self.parse_grouped_expression,
            TokenKind.IF: self.parse_if_expression,
            TokenKind.FUNCTION: self.parse_function_literal,
        }
        self.infix_parse_fns: dict[TokenKind, InfixParseFn] = {
            kind: self.parse_infix_expression for kind in PRECEDENCES
        }

        # Fill the two-token window: current and peek
        self.current_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

    # Token window

    def next_token(self) -> None:
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def current_is(self, kind: TokenKind) -> bool:
        return self.current_token.kind == kind

    def peek_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind == kind

    def expect_peek(self, kind: TokenKind) -> bool:
        """Advance if the peek token is ``kind``; otherwise record a mismatch."""
        if self.peek_is(kind):
            self.next_token()
            return True
        self.peek_error(kind)
        return False

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.kind, Precedence.LOWEST)

    def current_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.current_token.kind, Precedence.LOWEST)

    # Diagnostics

    def errors(self) -> list[str]:
        return self.diagnostics.messages()

    def peek_error(self, kind: TokenKind) -> None:
        tok = self.peek_token
        self.diagnostics.add(
            Diagnostic(
                DiagnosticKind.PEEK_MISMATCH,
                actual=tok.kind,
                expected=kind,
                literal=tok.literal,
                line=tok.line,
                col=tok.col,
            )
        )

    def no_prefix_parse_fn_error(self, tok: Token) -> None:
        self.diagnostics.add(
            Diagnostic(
                DiagnosticKind.NO_PREFIX_RULE,
                actual=tok.kind,
                literal=tok.literal,
                line=tok.line,
                col=tok.col,
            )
        )

    # Statements

    def parse_program(self) -> Program:
        """Parse statements until EOF. Failed statements are left out."""
        statements: list[Statement] = []
        while not self.current_is(TokenKind.EOF):
            statement = self.parse_statement()
            if statement is not None:
                statements.append(statement)
            self.next_token()
        return Program(tuple(statements))

    def parse_statement(self) -> Statement | None:
        if self.current_is(TokenKind.LET):
            return self.parse_let_statement()
        if self.current_is(TokenKind.RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement | None:
        token = self.current_token

        if not self.expect_peek(TokenKind.IDENT):
            return None
        name = Identifier(self.current_token, self.current_token.literal)

        if not self.expect_peek(TokenKind.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        if self.peek_is(TokenKind.SEMICOLON):
            self.next_token()
        return LetStatement(token, name, value)

    def parse_return_statement(self) -> ReturnStatement | None:
        token = self.current_token
        self.next_token()

        if self.current_is(TokenKind.SEMICOLON):
            return ReturnStatement(token)

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        if self.peek_is(TokenKind.SEMICOLON):
            self.next_token()
        return ReturnStatement(token, value)

    def parse_expression_statement(self) -> ExpressionStatement | None:
        token = self.current_token
        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None

        if self.peek_is(TokenKind.SEMICOLON):
            self.next_token()
        return ExpressionStatement(token, expression)

    def parse_block_statement(self) -> BlockStatement | None:
        """Parse ``{ ... }``; the caller has already made ``{`` current."""
        token = self.current_token
        statements: list[Statement] = []
        self.next_token()

        while not self.current_is(TokenKind.RBRACE):
            if self.current_is(TokenKind.EOF):
                # Unclosed block: report it the way a missing ``}`` would look
                self.diagnostics.add(
                    Diagnostic(
                        DiagnosticKind.PEEK_MISMATCH,
                        actual=TokenKind.EOF,
                        expected=TokenKind.RBRACE,
                        line=self.current_token.line,
                        col=self.current_token.col,
                    )
                )
                return None
            statement = self.parse_statement()
            if statement is not None:
                statements.append(statement)
            self.next_token()
        return BlockStatement(token, tuple(statements))

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Expression | None:
        prefix = self.prefix_parse_fns.get(self.current_token.kind)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.current_token)
            return None

        left = prefix()
        while (
            left is not None
            and not self.peek_is(TokenKind.SEMICOLON)
            and precedence < self.peek_precedence()
        ):
            infix = self.infix_parse_fns.get(self.peek_token.kind)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)
        return left

    def parse_identifier(self) -> Expression:
        return Identifier(self.current_token, self.current_token.literal)

    def parse_integer_literal(self) -> Expression | None:
        tok = self.current_token
        value: int | None
        try:
            value = int(tok.literal, 10)
        except ValueError:
            value = None
        if value is None or not INT64_MIN <= value <= INT64_MAX:
            self.diagnostics.add(
                Diagnostic(
                    DiagnosticKind.INVALID_INTEGER,
                    actual=tok.kind,
                    literal=tok.literal,
                    line=tok.line,
                    col=tok.col,
                )
            )
            return None
        return IntegerLiteral(tok, value)

    def parse_boolean(self) -> Expression:
        return Boolean(self.current_token, self.current_is(TokenKind.TRUE))

    def parse_prefix_expression(self) -> Expression | None:
        token = self.current_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return PrefixExpression(token, token.literal, right)

    def parse_infix_expression(self, left: Expression) -> Expression | None:
        token = self.current_token
        precedence = self.current_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(token, left, token.literal, right)

    def parse_grouped_expression(self) -> Expression | None:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None
        if not self.expect_peek(TokenKind.RPAREN):
            return None
        return expression

    def parse_if_expression(self) -> Expression | None:
        token = self.current_token

        if not self.expect_peek(TokenKind.LPAREN):
            return None
        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        if condition is None:
            return None

        if not self.expect_peek(TokenKind.RPAREN):
            return None
        if not self.expect_peek(TokenKind.LBRACE):
            return None
        consequence = self.parse_block_statement()
        if consequence is None:
            return None

        alternative = None
        if self.peek_is(TokenKind.ELSE):
            self.next_token()
            if not self.expect_peek(TokenKind.LBRACE):
                return None
            alternative = self.parse_block_statement()
            if alternative is None:
                return None

        return IfExpression(token, condition, consequence, alternative)

    def parse_function_literal(self) -> Expression | None:
        token = self.current_token

        if not self.expect_peek(TokenKind.LPAREN):
            return None
        parameters = self.parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(TokenKind.LBRACE):
            return None
        body = self.parse_block_statement()
        if body is None:
            return None

        return FunctionLiteral(token, tuple(parameters), body)

    def parse_function_parameters(self) -> list[Identifier] | None:
        """Parse ``a, b, c)``; the caller has already made ``(`` current."""
        identifiers: list[Identifier] = []

        if self.peek_is(TokenKind.RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(TokenKind.IDENT):
            return None
        identifiers.append(Identifier(self.current_token, self.current_token.literal))

        while self.peek_is(TokenKind.COMMA):
            self.next_token()
            if not self.expect_peek(TokenKind.IDENT):
                return None
            identifiers.append(Identifier(self.current_token, self.current_token.literal))

        if not self.expect_peek(TokenKind.RPAREN):
            return None
        return identifiers


def parse(source: str) -> tuple[Program, list[str]]:
    """Parse ``source`` and return the program with any diagnostics as text."""
    parser = Parser(Lexer.from_source(source))
    program = parser.parse_program()
    return program, parser.errors()


__all__ = ["PRECEDENCES", "Parser", "Precedence", "parse"]
