from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from lark import Lark, UnexpectedInput

from .lower import lower
from .tree import Script

GRAMMAR_PATH = Path(__file__).resolve().with_name("grammar.lark")


class ParseError(Exception):
    """Source text the grammar rejects; carries the offending position."""

    def __init__(self, message: str, line: Optional[int]=None, column: Optional[int]=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message

        if self.column is None:
            return f"{self.message} (line {self.line})"

        return f"{self.message} (line {self.line}, col {self.column})"


def _read_grammar(grammar_path: Optional[str]) -> str:
    if grammar_path:
        p = Path(grammar_path)
        if p.exists():
            return p.read_text(encoding="utf-8")

        raise FileNotFoundError(f"grammar file not found: {grammar_path}")

    return GRAMMAR_PATH.read_text(encoding="utf-8")

@lru_cache(maxsize=None)
def make_parser(grammar_path: Optional[str]=None) -> Lark:
    g = _read_grammar(grammar_path)

    return Lark(
        g,
        parser="earley",
        lexer="basic",
        start="start",
        maybe_placeholders=False,
        propagate_positions=True,
    )

def parse_source(src: str, grammar_path: Optional[str]=None) -> Script:
    parser = make_parser(grammar_path)

    try:
        tree = parser.parse(src)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", None)
        column = getattr(exc, "column", None)

        if line is not None and line < 1:
            line, column = None, None

        raise ParseError(_describe(exc), line=line, column=column) from exc

    return Script(body=lower(tree), source=src)

def _describe(exc: UnexpectedInput) -> str:
    token = getattr(exc, "token", None)

    if token is not None:
        if getattr(token, "type", None) in ("$END", "<EOF>"):
            return "unexpected end of input"
        return f"unexpected token {token.value!r}"

    char = getattr(exc, "char", None)
    if char is not None:
        return f"unexpected character {char!r}"

    return "syntax error"
