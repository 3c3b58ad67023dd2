import builtins
from collections.abc import Iterator

import pytest

from monkey.monkey_repl import eval_source, open_braces, start_repl


def feed(monkeypatch: pytest.MonkeyPatch, *lines: str) -> None:
    calls: Iterator[str] = iter(lines)

    def fake_input(_: str) -> str:
        try:
            return next(calls)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.mark.parametrize("command", ["quit", "exit"])  # type: ignore[misc]
def test_repl_quit(
    command: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, command)
    start_repl()
    out = capsys.readouterr().out
    assert "Monkey programming language REPL:" in out
    assert "Exiting Monkey REPL" in out


def test_repl_eof_exits(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch)
    start_repl()
    assert "Exiting Monkey REPL" in capsys.readouterr().out


def test_repl_prints_rendering(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "", "   ", "a + b * c", "quit")
    start_repl()
    assert "(a + (b * c))" in capsys.readouterr().out


def test_repl_prints_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "let x 5;", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[error] >>>" in out
    assert "\texpected next token to be =, got INT instead" in out


def test_repl_accumulates_open_blocks(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "fn(x) {", "x * 2", "}", "quit")
    start_repl()
    assert "fn(x) { (x * 2); }" in capsys.readouterr().out


def test_repl_verbose_toggle(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "verbose-mode", "x;", "verbose-mode", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[mode] >>> Verbose mode ON" in out
    assert "[tokens] >>> Token(IDENT, 'x') Token(SEMICOLON, ';') Token(EOF, '')" in out
    assert "[mode] >>> Verbose mode OFF" in out


def test_eval_source_result(capsys: pytest.CaptureFixture[str]) -> None:
    assert eval_source("let a = -1;")
    assert capsys.readouterr().out.strip() == "let a = (-1);"
    assert not eval_source("(")
    assert "no prefix parse function for EOF found" in capsys.readouterr().out


def test_open_braces() -> None:
    assert open_braces("fn() {") == 1
    assert open_braces("{ } }") == -1
    assert open_braces("x") == 0
