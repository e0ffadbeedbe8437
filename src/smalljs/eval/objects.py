from __future__ import annotations

from ..runtime import Failure, JSObject, JSValue, is_undefined, new_object
from ..tree import Expr, FieldAccess, FieldAssignment, MethodCall, New
from .common import EvalFunc, eval_args, expect_object

def eval_new(node: New, env: JSObject, eval_func: EvalFunc) -> JSObject:
    """Build an object literal; initializers run in source order."""
    obj = new_object(None)

    for key, init in node.init.items():
        obj.register(key, eval_func(init, env))

    obj.register("this", obj)

    return obj

def eval_field_access(node: FieldAccess, env: JSObject, eval_func: EvalFunc) -> JSValue:
    value = eval_func(node.receiver, env)

    # field access on a primitive yields the primitive itself
    if not isinstance(value, JSObject):
        return value

    return value.lookup(node.name)

def eval_field_assignment(node: FieldAssignment, env: JSObject, eval_func: EvalFunc) -> Expr:
    value = eval_func(node.receiver, env)
    obj = expect_object(value, f"cannot assign field '{node.name}'")
    obj.register(node.name, eval_func(node.expr, env))

    # the result is the receiver node, not the stored value
    return node.receiver

def eval_method_call(node: MethodCall, env: JSObject, eval_func: EvalFunc) -> JSValue:
    value = eval_func(node.receiver, env)
    obj = expect_object(value, f"cannot call method '{node.name}'")
    method = obj.lookup(node.name)

    if is_undefined(method):
        raise Failure(f"{obj!r} doesn't have a method called {node.name}")

    if not isinstance(method, JSObject) or not method.is_callable():
        raise Failure(f"{node.name} is not a method")

    values = eval_args(node.args, env, eval_func)

    return method.invoke(obj, values)
