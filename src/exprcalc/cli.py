"""Command line entry point: one-shot evaluation or the interactive menu."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from exprcalc import __version__
from exprcalc.config import LOG_LEVELS, Settings, load_settings
from exprcalc.exceptions import ConfigurationError
from exprcalc.session import Session, format_result

logger = logging.getLogger(__name__)

RULE = "-" * 80

MENU = f"""
{RULE}
Arithmetic Expression Evaluator
{RULE}

1 - Enter Expression
2 - History
3 - User Manual
4 - Quit

{RULE}
"""

USER_MANUAL = f"""
User Manual:
{RULE}

Welcome to the Arithmetic Expression Evaluator.
This program evaluates arithmetic expressions involving
basic operators such as +, -, *, /, %, and ^ (exponentiation).

Menu Options:
1 - Enter Expression: Allows you to input an arithmetic expression.
2 - History: Displays the history of evaluated expressions and their results.
3 - User Manual: Shows this user manual.
4 - Quit: Exits the program.

Entering Expressions:
Enter any arithmetic expression using numbers and operators.
For example: '3 + 4 * 2', '2 ^ 3', '(4 + 5) / 2'.
The program supports parentheses for grouping.
Note that ^ groups left to right: '2 ^ 3 ^ 2' is 64.

History:
After evaluating expressions, you can view their history
along with the results by selecting the 'History' option.

{RULE}
"""


class Menu:
    """The numbered menu loop over a :class:`Session`."""

    def __init__(self, session: Session, stdin: TextIO, stdout: TextIO) -> None:
        self.session = session
        self.stdin = stdin
        self.stdout = stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_line(self) -> str | None:
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def enter_expression(self) -> bool:
        self._write(f"\n{RULE}\n\nEnter an arithmetic expression: ")
        expression = self._read_line()
        if expression is None:
            return False
        evaluation = self.session.evaluate(expression)
        self._write(f"\nResult: {format_result(evaluation, self.session.settings.precision)}\n")
        return True

    def show_history(self) -> None:
        self._write(f"\n{RULE}\n")
        history = self.session.history
        if not history:
            self._write("\nNo previous instances.\n")
            return
        self._write("\nHistory:\n")
        for entry in history:
            self._write(f"\n{entry}\n")

    def show_manual(self) -> None:
        self._write(USER_MANUAL)

    def quit(self) -> None:
        self._write(f"\n{RULE}\n\nProgram has ended.\n\n{RULE}\n")

    def run(self) -> int:
        """Loop until option 4 or end of input."""
        while True:
            self._write(MENU)
            self._write("\nSelect an option: ")
            choice = self._read_line()
            if choice is None:
                self.quit()
                return 0

            choice = choice.strip()
            logger.debug("Menu choice %r", choice)

            if choice == "1":
                if not self.enter_expression():
                    self.quit()
                    return 0
            elif choice == "2":
                self.show_history()
            elif choice == "3":
                self.show_manual()
            elif choice == "4":
                self.quit()
                return 0
            else:
                self._write(f"\n{RULE}\n\nInvalid option. Please try again.\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate arithmetic expressions with + - * / % ^ and parentheses.",
        epilog="Without expressions an interactive menu is started.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        metavar="EXPR",
        help="expression to evaluate, e.g. '(3 + 4) * 2'",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        help="significant digits of printed results (env EXPRCALC_PRECISION)",
    )
    parser.add_argument(
        "--history-limit",
        type=int,
        help="maximum number of history entries, 0 for no limit (env EXPRCALC_HISTORY_LIMIT)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (env EXPRCALC_LOG_LEVEL)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    return load_settings().with_overrides(
        log_level=args.log_level,
        precision=args.precision,
        history_limit=args.history_limit,
    )


def run_expressions(session: Session, expressions: Sequence[str], stdout: TextIO) -> int:
    """Print one formatted result per expression; 1 if any failed."""
    status = 0
    for expression in expressions:
        evaluation = session.evaluate(expression)
        stdout.write(f"{format_result(evaluation, session.settings.precision)}\n")
        if not evaluation.ok:
            status = 1
    return status


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        settings = resolve_settings(args)
    except ConfigurationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    logger.debug("Starting with %s", settings)

    session = Session(settings)
    if args.expressions:
        return run_expressions(session, args.expressions, stdout)
    return Menu(session, stdin, stdout).run()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
