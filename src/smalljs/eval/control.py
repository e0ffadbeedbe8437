from __future__ import annotations

from ..runtime import Failure, JSObject, JSValue, ReturnSignal
from ..tree import If, Return
from ..types import render
from .common import EvalFunc

def eval_return(node: Return, env: JSObject, eval_func: EvalFunc) -> JSValue:
    value = eval_func(node.expr, env)

    raise ReturnSignal(value)

def eval_if(node: If, env: JSObject, eval_func: EvalFunc) -> JSValue:
    value = eval_func(node.condition, env)

    # 1 and 0 are the only booleans; no truthiness coercion
    if not isinstance(value, int) or isinstance(value, bool) or value not in (0, 1):
        raise Failure(f"invalid boolean value {render(value)}")

    if value == 1:
        return eval_func(node.true_block, env)

    return eval_func(node.false_block, env)
