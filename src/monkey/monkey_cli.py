"""
Monkey CLI Entrypoint.

This module provides the command-line interface for the Monkey front end. It
scans and parses source code and reports either the resulting tree or the
parser's diagnostics.

Features:
    - Read source from `.mk` / `.monkey` files or inline strings.
    - Print the canonical (fully parenthesized) rendering of the program.
    - Dump the token stream or a JSON form of the AST instead.
    - Launch an interactive REPL.

Example usage:
    monkey program.mk
    monkey -s "let x = 1 + 2 * 3;"
    monkey -s "fn(a, b) { a + b }" --json
    monkey --repl --verbose

Exit status is 0 for a clean parse and 1 when any diagnostic was recorded.
"""

import argparse
import json
import sys

from monkey.monkey_diagnostics import DiagnosticCollector
from monkey.monkey_lexer import CharacterStream, Lexer, tokenize
from monkey.monkey_parser import Parser

SOURCE_SUFFIXES = (".mk", ".monkey")


def run_monkey(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    as_json: bool = False,
) -> int:
    """
    Run the Monkey front end on a file or string and print the result.

    Args:
        source (str): Monkey source code or a path to a `.mk` / `.monkey` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        tokens (bool): If True, prints the token stream instead of the tree.
        as_json (bool): If True, prints the AST as JSON instead of its rendering.

    Returns:
        int: Process exit status; 1 if the parser reported diagnostics.

    Raises:
        ValueError: If `is_string` is False and the path has an unknown suffix.
    """
    if not is_string and not source.endswith(SOURCE_SUFFIXES):
        raise ValueError("Only .mk or .monkey files are supported.")
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    if tokens:
        for tok in tokenize(source):
            print(f"{tok.line}:{tok.col}\t{tok.kind}\t{tok.literal!r}")
        return 0

    diagnostics = DiagnosticCollector()
    program = Parser(Lexer(CharacterStream(source)), diagnostics).parse_program()

    if diagnostics.has_errors():
        print("[error] >>>", file=sys.stderr)
        print(diagnostics.format_all(with_location=True), file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(program.to_dict(), indent=2))
    else:
        print(program)
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the Monkey CLI.

    Launches the REPL if no source is given or `--repl` is passed; otherwise
    parses the source and exits with the status from `run_monkey`.
    """
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print the token stream and stop"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose REPL mode (if --repl)"
    )

    args = parser.parse_args(argv)

    if args.repl or args.source is None:
        from monkey.monkey_repl import start_repl

        start_repl(verbose=args.verbose)
        return 0

    return run_monkey(
        source=args.source,
        is_string=args.string,
        tokens=args.tokens,
        as_json=args.as_json,
    )


if __name__ == "__main__":
    sys.exit(main())
