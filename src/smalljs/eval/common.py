from __future__ import annotations

from typing import Callable, Iterable, List

from ..runtime import Failure, JSObject, JSValue, is_undefined
from ..tree import Expr
from ..types import render

EvalFunc = Callable[[Expr, JSObject], JSValue]

def eval_args(args: Iterable[Expr], env: JSObject, eval_func: EvalFunc) -> List[JSValue]:
    return [eval_func(arg, env) for arg in args]

def expect_object(value: JSValue, context: str) -> JSObject:
    if isinstance(value, JSObject):
        return value

    raise Failure(f"{render(value)} is not an object ({context})")

def stringify(value: JSValue) -> str:
    if isinstance(value, str):
        return value

    if is_undefined(value):
        return "undefined"

    return repr(value)
