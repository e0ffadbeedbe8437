"""smalljs: a tree-walking interpreter for a small JavaScript-like language."""

from .evaluator import interpret, visit
from .parser import ParseError, parse_source
from .runner import run
from .types import UNDEFINED, Failure, JSObject

__all__ = [
    "UNDEFINED",
    "Failure",
    "JSObject",
    "ParseError",
    "interpret",
    "parse_source",
    "run",
    "visit",
]
