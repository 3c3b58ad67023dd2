"""
Structured parser diagnostics for the Monkey language.

The parser never raises on malformed input. Every problem it finds is stored
as a ``Diagnostic`` record in a ``DiagnosticCollector``; text is produced only
when a caller asks for ``message`` (or ``str()``), so tools can inspect the
expected/actual kinds and source position without re-parsing strings.

Classes:
    DiagnosticKind: The categories of problem the parser can report.
    Diagnostic: One immutable diagnostic record.
    DiagnosticCollector: Append-only accumulator shared by one or more parses.

Message shapes:
    PEEK_MISMATCH      expected next token to be <expected>, got <actual> instead
    NO_PREFIX_RULE     no prefix parse function for <actual> found
    INVALID_INTEGER    could not parse "<literal>" as integer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from monkey.monkey_constants import TokenKind


class DiagnosticKind(Enum):
    PEEK_MISMATCH = "peek_mismatch"
    NO_PREFIX_RULE = "no_prefix_rule"
    INVALID_INTEGER = "invalid_integer"


@dataclass(frozen=True)
class Diagnostic:
    """A single parser diagnostic.

    Attributes:
        kind (DiagnosticKind): What went wrong.
        actual (TokenKind): Kind of the offending token.
        expected (TokenKind | None): Kind the parser required (PEEK_MISMATCH only).
        literal (str): Source text of the offending token.
        line (int): 1-based line of the offending token (0 when unknown).
        col (int): 1-based column of the offending token (0 when unknown).
    """

    kind: DiagnosticKind
    actual: TokenKind
    expected: TokenKind | None = None
    literal: str = ""
    line: int = 0
    col: int = 0

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.PEEK_MISMATCH:
            return f"expected next token to be {self.expected}, got {self.actual} instead"
        if self.kind is DiagnosticKind.NO_PREFIX_RULE:
            return f"no prefix parse function for {self.actual} found"
        return f'could not parse "{self.literal}" as integer'

    def location(self) -> str:
        return f"{self.line}:{self.col}"

    def __str__(self) -> str:
        return self.message


class DiagnosticCollector:
    """Accumulates diagnostics in the order they were recorded."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def has_errors(self) -> bool:
        return bool(self._diagnostics)

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def messages(self) -> list[str]:
        return [d.message for d in self._diagnostics]

    def format_all(self, with_location: bool = False) -> str:
        """Format all diagnostics as a newline-separated string."""
        if with_location:
            return "\n".join(f"{d.location()}: {d.message}" for d in self._diagnostics)
        return "\n".join(self.messages())

    def __len__(self) -> int:
        return len(self._diagnostics)


__all__ = ["Diagnostic", "DiagnosticCollector", "DiagnosticKind"]
