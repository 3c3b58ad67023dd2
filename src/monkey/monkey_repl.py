"""
Interactive read-parse-print loop for the Monkey language.

Each entry is scanned and parsed; the REPL prints the canonical rendering of the
resulting program, or the parser's diagnostics when there are any. Nothing is
evaluated.

Commands:
    quit / exit     Leave the REPL.
    verbose-mode    Toggle printing of the token stream before each parse.

Input spanning several lines is accumulated while ``{`` outnumber ``}``.
"""

from monkey.monkey_lexer import tokenize
from monkey.monkey_parser import parse

PROMPT = ">> "
CONTINUATION_PROMPT = ".. "
BANNER = "Monkey programming language REPL:"


def print_parser_errors(errors: list[str]) -> None:
    print("[error] >>>")
    for msg in errors:
        print(f"\t{msg}")


def open_braces(src: str) -> int:
    return src.count("{") - src.count("}")


def eval_source(src: str, verbose: bool = False) -> bool:
    """Parse one REPL entry and print the outcome. Returns True on a clean parse."""
    if verbose:
        tokens = " ".join(repr(tok) for tok in tokenize(src))
        print(f"[tokens] >>> {tokens}")

    program, errors = parse(src)
    if errors:
        print_parser_errors(errors)
        return False

    rendered = str(program)
    if rendered:
        print(rendered)
    return True


def start_repl(verbose: bool = False) -> None:
    print(BANNER)
    while True:
        try:
            src = input(PROMPT)
            if src.strip() in ("quit", "exit"):
                print("Exiting Monkey REPL.")
                break

            lines = [src]
            while open_braces("\n".join(lines)) > 0:
                lines.append(input(CONTINUATION_PROMPT))
            src = "\n".join(lines).strip()

            if not src:
                continue
            if src == "verbose-mode":
                verbose = not verbose
                print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
                continue

            eval_source(src, verbose=verbose)

        except (KeyboardInterrupt, EOFError):
            print("\nExiting Monkey REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
