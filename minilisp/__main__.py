"""
Command line entry point for minilisp.

    minilisp                 start the interactive REPL
    minilisp program.lisp    evaluate every expression in program.lisp
    minilisp -p program.lisp ... and print each result
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from minilisp import config
from minilisp.interpreter import Interpreter
from minilisp.printer import print_value
from minilisp.reader.parser import parse_all
from minilisp.repl import Repl

logger = logging.getLogger("minilisp")

parser = argparse.ArgumentParser(
    prog="minilisp",
    description="A minimal Lisp interpreter.",
)
parser.add_argument("program", nargs="?", help="source file to run; omit for the REPL.")
parser.add_argument("-p", "--print", dest="print_results", action="store_true", help="Print the result of every top-level expression.")
parser.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level for diagnostics (default: $MINILISP_LOG_LEVEL or WARNING).")
parser.add_argument("--recursion-limit", type=int, help="Python recursion limit, which bounds Lisp call depth.")


def run_script(path: Path, print_results: bool = False, out=None) -> int:
    out = out if out is not None else sys.stdout
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"minilisp: cannot read {path}: {e.strerror}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"minilisp: cannot decode {path}: {e.reason}", file=sys.stderr)
        return 1
    interp = Interpreter()
    try:
        for expr in parse_all(source):
            result = interp.evaluate(expr)
            if print_results:
                print_value(result, file=out)
    except RecursionError:
        logger.error("recursion too deep while running %s", path)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parser.parse_args(argv)
    try:
        config.configure_logging(args.log_level)
        config.apply_recursion_limit(args.recursion_limit)
    except (ValueError, RecursionError) as e:
        print(f"minilisp: {e}", file=sys.stderr)
        return 1
    if args.program:
        return run_script(Path(args.program), args.print_results)
    Repl().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
