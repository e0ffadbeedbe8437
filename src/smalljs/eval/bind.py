from __future__ import annotations

from ..runtime import UNDEFINED, Failure, JSObject, JSValue, is_undefined
from ..tree import LocalVarAccess, LocalVarAssignment
from .common import EvalFunc

def eval_local_var_access(node: LocalVarAccess, env: JSObject) -> JSValue:
    return env.lookup(node.name)

def eval_local_var_assignment(node: LocalVarAssignment, env: JSObject, eval_func: EvalFunc) -> JSValue:
    # A declaration may only shadow a name that currently reads as undefined.
    if node.declaration and not is_undefined(env.lookup(node.name)):
        raise Failure(f"{node.name} already defined")

    value = eval_func(node.expr, env)
    env.register(node.name, value)

    return UNDEFINED
