from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .evaluator import interpret
from .parser import ParseError, parse_source
from .runtime import Failure
from .tree import pretty

logger = logging.getLogger(__name__)

def run(src: str, out: Optional[TextIO]=None, grammar_path: Optional[str]=None) -> None:
    script = parse_source(src, grammar_path=grammar_path)
    interpret(script, out)

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing file => read its contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    try:
        is_file = candidate.is_file()
    except OSError:
        # too long or otherwise unusable as a path
        is_file = False

    if is_file:
        return candidate.read_text(encoding="utf-8")

    return arg

def _build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="smalljs", description="Run a smalljs script")
    ap.add_argument("source", nargs="?", default="-", help="Path to a script, literal source, or '-' for stdin")
    ap.add_argument("-g", "--grammar", default=None, help="Path to an alternative grammar.lark")
    ap.add_argument("--ast", action="store_true", help="Print the lowered AST instead of running")
    ap.add_argument("--trace", action="store_true", help="Log evaluator and print tracing to stderr")
    return ap

def main(argv: Optional[List[str]]=None) -> None:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    source = _load_source(args.source)

    try:
        if args.ast:
            script = parse_source(source, grammar_path=args.grammar)
            sys.stdout.write(pretty(script))
            return

        run(source, grammar_path=args.grammar)
    except (ParseError, Failure) as err:
        logger.debug("aborting: %s", err)
        sys.stderr.write(f"error: {err}\n")
        raise SystemExit(1) from None

if __name__ == "__main__":
    main()
