#!/usr/bin/env python3
"""
slang command line interface

Usage:
    slang -e EXPRESSION [arguments...]   evaluate one expression and print it
    slang FILE [arguments...]            run a program file
    slang [arguments...]                 start the REPL

Program arguments are visible to slang code as *ARGV* and *NARG*.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from slang import __version__
from slang import config
from slang.errors import SlangError
from slang.interpreter import Interpreter
from slang.reader.parser import parse
from slang.types.values import to_repr

logger = logging.getLogger(__name__)

PROMPT = "slang> "
REPL_EXIT = "(exit)"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slang",
        description="A small Lisp-family interpreter",
    )
    parser.add_argument("-e", "--eval", dest="expression", help="Evaluate expression and print")
    parser.add_argument("--no-prelude", action="store_true", help="Do not load the prelude")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="Abort any top-level evaluation after this many steps")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("file", nargs="?", help="Program file to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Program arguments")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_evaluate_print(interp: Interpreter, source: str, out: TextIO, err: Optional[TextIO] = None) -> bool:
    """Evaluate `source`, print the result or the error; return success."""
    try:
        result = interp.eval(source)
    except SlangError as exc:
        print(f"Error: {exc}", file=err or out)
        return False
    print(to_repr(result), file=out)
    return True


def run_file(interp: Interpreter, path: Path) -> int:
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logger.debug("Running %s", path)
    try:
        # Parse everything first: a syntax error anywhere runs nothing.
        for expr in parse(source):
            print(to_repr(interp.evaluate(expr)))
    except SlangError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def run_repl(interp: Interpreter, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return 0
        line = line.strip()
        if line == REPL_EXIT:
            return 0
        if line:
            read_evaluate_print(interp, line, out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # With -e there is no program file; every positional is a program argument.
    program_args = list(args.args)
    if args.expression is not None and args.file is not None:
        program_args.insert(0, args.file)

    interp = Interpreter(
        prelude=None if args.no_prelude else "auto",
        argv=program_args,
        max_steps=args.max_steps,
    )

    if args.expression is not None:
        return 0 if read_evaluate_print(interp, args.expression, sys.stdout, sys.stderr) else 1
    if args.file is not None:
        return run_file(interp, Path(args.file))
    return run_repl(interp)


if __name__ == "__main__":
    sys.exit(main())
