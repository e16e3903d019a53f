# cli.py

"""
Command-line front end: a one-shot evaluator and an interactive loop.

Each expression line is lexed, parsed, evaluated and rendered in turn. Output
is the canonical infix form, the tree diagram and then either the result or an
error message. Errors end only the current line.
"""

import argparse
import logging
import os
import sys
from typing import Callable, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .config import CalculatorSettings, load_settings
from .errors import CalculatorError, EvalError
from .evaluator import evaluate
from .parser import parse
from .renderer import render_infix, render_tree

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------------------------
# Help Handler
# ---------------------------

class HelpHandler:
    """
    Prints usage instructions for the calculator.
    """
    HELP_TEXT = """
Integer Expression Calculator Help
----------------------------------
Supported operations (64-bit signed integers):
  - Addition:           1 + 2
  - Subtraction:        3 - 4
  - Multiplication:     5 * 6
  - Division:           7 / 2      (truncates toward zero)
  - Remainder:          7 % 2      (sign follows the dividend)
  - Parentheses:        (1 + 2) * 3
  - Negation:           -5, --3

For each expression the calculator prints the simplified expression,
its syntax tree and the result.

Special commands:
  - help      : Show this help message
  - {exits} : Exit the calculator
"""

    @staticmethod
    def help_text(exit_commands: List[str]) -> str:
        return HelpHandler.HELP_TEXT.format(exits='/'.join(exit_commands)).strip()


# ---------------------------
# Line processing
# ---------------------------

def process_expression(line: str, settings: CalculatorSettings) -> Tuple[bool, str]:
    """
    Run one expression through the whole pipeline.

    Returns (ok, output). Lex and parse failures produce only the error line;
    evaluation failures still show the rendered expression above the error.
    """
    try:
        ast = parse(line, max_depth=settings.max_depth)
    except CalculatorError as e:
        logger.info("Rejected %r: %s", line, e)
        return False, f"Error: {e}"

    blocks = [render_infix(ast)]
    if settings.show_tree:
        blocks.append(render_tree(ast))
    try:
        result = evaluate(ast)
    except EvalError as e:
        blocks.append(f"Error: {e}")
        return False, "\n".join(blocks)
    blocks.append(f"Result: {result}")
    return True, "\n".join(blocks)


# ---------------------------
# CLI Handler (REPL)
# ---------------------------

class CLIHandler:
    """
    Handles the REPL loop and user interaction.
    """

    def __init__(self, settings: Optional[CalculatorSettings] = None,
                 read_line: Optional[Callable[[str], str]] = None):
        self.settings = settings or CalculatorSettings()
        self.read_line = read_line or self._default_reader()
        self.running = True

    def _default_reader(self) -> Callable[[str], str]:
        """
        Uses prompt_toolkit with a persistent history when attached to a
        terminal and a history file is configured, plain input() otherwise.
        """
        history_file = self.settings.history_file
        if history_file and sys.stdin.isatty():
            session = PromptSession(history=FileHistory(os.path.expanduser(history_file)))
            return session.prompt
        return input

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """
        Evaluates a single stripped, non-empty line. Returns (ok, output).
        """
        if line == 'help':
            return True, HelpHandler.help_text(self.settings.exit_commands)
        return process_expression(line, self.settings)

    def run(self):
        """
        Main REPL loop.
        """
        while self.running:
            try:
                line = self.read_line(self.settings.prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break

            line = line.strip()
            if not line:
                continue

            if line in self.settings.exit_commands:
                self.running = False
                print("Goodbye!")
                break

            try:
                _, output = self.evaluate_line(line)
            except Exception as e:
                logger.exception("Unexpected failure on %r", line)
                output = f"Unexpected error: {e}"
            print(output)
            print()


# ---------------------------
# Main Entry Point
# ---------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate integer arithmetic expressions and show their syntax tree.",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate once. Starts the interactive loop when omitted.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Maximum expression nesting depth (default: 100, at most 200).",
    )
    parser.add_argument(
        "--no-tree",
        action="store_true",
        help="Do not print the syntax tree.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to a .env file with EXPRCALC_* settings.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the calculator application.
    """
    args = build_arg_parser().parse_args(argv)
    try:
        settings = load_settings(
            env_file=args.env_file,
            max_depth=args.max_depth,
            show_tree=False if args.no_tree else None,
            log_level=args.log_level,
        )
    except CalculatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    if args.expression:
        ok, output = process_expression(" ".join(args.expression), settings)
        print(output)
        return 0 if ok else 1

    print("Welcome to the Integer Expression Calculator!")
    print(f"Type 'help' for instructions, or '{settings.exit_commands[0]}' to quit.")
    CLIHandler(settings).run()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
