"""
Defines the abstract syntax tree (AST) node structure for the Monkey programming language.

Classes:
    Node: Base of every node. Exposes ``token_literal()``, the canonical string
        rendering (``str(node)``) and ``to_dict()`` for JSON output.
    Statement / Expression: The two node categories.

    Program: Root of the tree, an ordered tuple of top-level statements.
    LetStatement, ReturnStatement, ExpressionStatement, BlockStatement
    Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression,
    IfExpression, FunctionLiteral

Each variant keeps the token it started from for diagnostics. Parenthesized
groups have no node of their own: they only shape the tree.

Rendering:
    Expressions render fully parenthesized (``(a + (b * c))``) so precedence can be
    checked from the string alone. A program renders as the plain concatenation of
    its statements, with no separators. Inside a block every statement ends in
    ``;`` and statements are separated by a space, so a rendered block parses back
    to the same block.

Usage:
    Nodes are frozen dataclasses and child sequences are tuples, so a tree
    cannot change once ``Parser.parse_program()`` returns. Nodes own their
    children outright: the tree has no back-references and no shared subtrees.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from monkey.monkey_lexer import Token


class Node:
    token: Token

    def token_literal(self) -> str:
        return self.token.literal

    def to_dict(self) -> dict[str, Any]:
        """Converts the node and all descendants into plain dicts and lists."""
        out: dict[str, Any] = {
            "node": type(self).__name__,
            "literal": self.token_literal(),
        }
        for f in fields(self):  # type: ignore[arg-type]
            if f.name == "token":
                continue
            out[f.name] = _to_plain(getattr(self, f.name))
        return out


def _to_plain(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


class Statement(Node):
    pass


class Expression(Node):
    pass


@dataclass(frozen=True)
class Program(Node):
    statements: tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


# Expressions


@dataclass(frozen=True)
class Identifier(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    token: Token
    value: int

    def __str__(self) -> str:
        return self.token.literal


@dataclass(frozen=True)
class Boolean(Expression):
    token: Token
    value: bool

    def __str__(self) -> str:
        return self.token.literal


@dataclass(frozen=True)
class PrefixExpression(Expression):
    token: Token
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    token: Token
    left: Expression
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


# Statements


@dataclass(frozen=True)
class LetStatement(Statement):
    token: Token
    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"


@dataclass(frozen=True)
class ReturnStatement(Statement):
    token: Token
    return_value: Expression | None = None

    def __str__(self) -> str:
        if self.return_value is None:
            return f"{self.token_literal()};"
        return f"{self.token_literal()} {self.return_value};"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    token: Token
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


@dataclass(frozen=True)
class BlockStatement(Statement):
    token: Token
    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return " ".join(_terminated(s) for s in self.statements)


def _terminated(statement: Statement) -> str:
    text = str(statement)
    return text if text.endswith(";") else text + ";"


# Compound expressions (contain blocks)


@dataclass(frozen=True)
class IfExpression(Expression):
    token: Token
    condition: Expression
    consequence: BlockStatement
    alternative: BlockStatement | None = None

    def __str__(self) -> str:
        out = f"if ({self.condition}) {{ {self.consequence} }}"
        if self.alternative is not None:
            out += f" else {{ {self.alternative} }}"
        return out


@dataclass(frozen=True)
class FunctionLiteral(Expression):
    token: Token
    parameters: tuple[Identifier, ...]
    body: BlockStatement

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {{ {self.body} }}"


__all__ = [
    "BlockStatement",
    "Boolean",
    "Expression",
    "ExpressionStatement",
    "FunctionLiteral",
    "Identifier",
    "IfExpression",
    "InfixExpression",
    "IntegerLiteral",
    "LetStatement",
    "Node",
    "PrefixExpression",
    "Program",
    "ReturnStatement",
    "Statement",
]
