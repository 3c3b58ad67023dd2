import dataclasses
import json

import pytest

from monkey.monkey_ast import (
    BlockStatement,
    Boolean,
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
)
from monkey.monkey_constants import TokenKind
from monkey.monkey_lexer import Token


def ident(name: str) -> Identifier:
    return Identifier(Token(TokenKind.IDENT, name), name)


def integer(value: int) -> IntegerLiteral:
    return IntegerLiteral(Token(TokenKind.INT, str(value)), value)


def test_let_statement_string() -> None:
    program = Program(
        (
            LetStatement(
                Token(TokenKind.LET, "let"),
                ident("myVar"),
                ident("anotherVar"),
            ),
        )
    )
    assert str(program) == "let myVar = anotherVar;"


def test_return_statement_string() -> None:
    stmt = ReturnStatement(Token(TokenKind.RETURN, "return"), integer(5))
    assert str(stmt) == "return 5;"
    assert str(ReturnStatement(Token(TokenKind.RETURN, "return"))) == "return;"


def test_program_concatenates_without_separators() -> None:
    program = Program(
        (
            ExpressionStatement(Token(TokenKind.IDENT, "a"), ident("a")),
            ExpressionStatement(Token(TokenKind.INT, "1"), integer(1)),
        )
    )
    assert str(program) == "a1"


def test_prefix_and_infix_are_fully_parenthesized() -> None:
    minus = PrefixExpression(Token(TokenKind.MINUS, "-"), "-", ident("a"))
    product = InfixExpression(Token(TokenKind.ASTERISK, "*"), minus, "*", ident("b"))
    assert str(minus) == "(-a)"
    assert str(product) == "((-a) * b)"


def test_boolean_renders_literal() -> None:
    assert str(Boolean(Token(TokenKind.TRUE, "true"), True)) == "true"
    assert str(Boolean(Token(TokenKind.FALSE, "false"), False)) == "false"


def test_if_expression_string() -> None:
    cond = InfixExpression(Token(TokenKind.LT, "<"), ident("x"), "<", ident("y"))
    consequence = BlockStatement(
        Token(TokenKind.LBRACE, "{"),
        (ExpressionStatement(Token(TokenKind.IDENT, "x"), ident("x")),),
    )
    alternative = BlockStatement(
        Token(TokenKind.LBRACE, "{"),
        (ExpressionStatement(Token(TokenKind.IDENT, "y"), ident("y")),),
    )
    node = IfExpression(Token(TokenKind.IF, "if"), cond, consequence)
    assert str(node) == "if ((x < y)) { x; }"
    node = IfExpression(Token(TokenKind.IF, "if"), cond, consequence, alternative)
    assert str(node) == "if ((x < y)) { x; } else { y; }"


def test_function_literal_string() -> None:
    body = BlockStatement(
        Token(TokenKind.LBRACE, "{"),
        (
            ExpressionStatement(
                Token(TokenKind.IDENT, "x"),
                InfixExpression(Token(TokenKind.PLUS, "+"), ident("x"), "+", ident("y")),
            ),
        ),
    )
    node = FunctionLiteral(Token(TokenKind.FUNCTION, "fn"), (ident("x"), ident("y")), body)
    assert str(node) == "fn(x, y) { (x + y); }"


def test_token_literal() -> None:
    assert ident("foo").token_literal() == "foo"
    assert integer(5).token_literal() == "5"
    assert Program().token_literal() == ""
    stmt = ReturnStatement(Token(TokenKind.RETURN, "return"), integer(1))
    assert Program((stmt,)).token_literal() == "return"


def test_structural_equality_ignores_positions() -> None:
    a = Identifier(Token(TokenKind.IDENT, "x", 1, 1), "x")
    b = Identifier(Token(TokenKind.IDENT, "x", 3, 9), "x")
    assert a == b
    assert a != ident("y")
    assert a != "x"


def test_to_dict_is_json_serializable() -> None:
    let = LetStatement(
        Token(TokenKind.LET, "let"),
        ident("x"),
        InfixExpression(Token(TokenKind.PLUS, "+"), integer(1), "+", integer(2)),
    )
    d = Program((let,)).to_dict()
    assert d["node"] == "Program"
    assert d["literal"] == "let"
    stmt = d["statements"][0]
    assert stmt["node"] == "LetStatement"
    assert stmt["name"] == {"node": "Identifier", "literal": "x", "value": "x"}
    assert stmt["value"]["operator"] == "+"
    assert stmt["value"]["left"]["value"] == 1
    json.dumps(d)


def test_to_dict_optional_children() -> None:
    block = BlockStatement(Token(TokenKind.LBRACE, "{"))
    node = IfExpression(Token(TokenKind.IF, "if"), ident("c"), block)
    d = node.to_dict()
    assert d["alternative"] is None
    assert d["consequence"]["statements"] == []


def test_block_separates_statements() -> None:
    block = BlockStatement(
        Token(TokenKind.LBRACE, "{"),
        (
            ExpressionStatement(Token(TokenKind.IDENT, "a"), ident("a")),
            LetStatement(Token(TokenKind.LET, "let"), ident("b"), integer(1)),
            ReturnStatement(Token(TokenKind.RETURN, "return")),
            ExpressionStatement(Token(TokenKind.IDENT, "c"), ident("c")),
        ),
    )
    assert str(block) == "a; let b = 1; return; c;"


def test_empty_block_string() -> None:
    body = BlockStatement(Token(TokenKind.LBRACE, "{"))
    node = FunctionLiteral(Token(TokenKind.FUNCTION, "fn"), (), body)
    assert str(node) == "fn() {  }"


def test_nodes_are_frozen() -> None:
    node = ident("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = "y"  # type: ignore[misc]
    program = Program((ExpressionStatement(Token(TokenKind.IDENT, "x"), node),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        program.statements = ()  # type: ignore[misc]
    assert isinstance(program.statements, tuple)
