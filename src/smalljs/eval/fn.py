from __future__ import annotations

from typing import List

from ..runtime import UNDEFINED, Failure, JSObject, JSValue, ReturnSignal, new_env, new_function
from ..tree import Fun, FunCall
from ..types import render
from .common import EvalFunc, eval_args

def eval_fun(node: Fun, env: JSObject, eval_func: EvalFunc) -> JSObject:
    """Build a closure over `env`, the frame active where the function is defined."""
    function_name = node.name if node.name is not None else "lambda"
    params = node.params
    body = node.body

    def invoker(_self: JSObject, receiver: JSValue, args: List[JSValue]) -> JSValue:
        if len(args) != len(params):
            raise Failure(
                f"invalid number of arguments: {function_name} expects {len(params)}; got {len(args)}"
            )

        local_env = new_env(env)
        local_env.register("this", receiver)

        for name, value in zip(params, args):
            local_env.register(name, value)

        try:
            return eval_func(body, local_env)
        except ReturnSignal as signal:
            return signal.value

    function = new_function(function_name, invoker)

    if node.name is not None:
        env.register(node.name, function)

    return function

def eval_fun_call(node: FunCall, env: JSObject, eval_func: EvalFunc) -> JSValue:
    callee = eval_func(node.qualifier, env)

    if not isinstance(callee, JSObject) or not callee.is_callable():
        raise Failure(f"type error: {render(callee)} is not a function")

    values = eval_args(node.args, env, eval_func)

    return callee.invoke(UNDEFINED, values)
