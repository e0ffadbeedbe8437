from __future__ import annotations

import importlib
from typing import Callable, Dict, List, Optional, TextIO

from .types import (
    UNDEFINED,
    Failure,
    Invoker,
    JSObject,
    JSUndefined,
    JSValue,
    ReturnSignal,
    is_undefined,
)

BuiltinFn = Callable[[TextIO, List[JSValue]], JSValue]

class Builtins:
    functions: Dict[str, BuiltinFn] = {}

_STDLIB_INITIALIZED = False

def init_stdlib() -> None:
    """Load the stdlib module (idempotent) so its register_builtin hooks run."""
    global _STDLIB_INITIALIZED

    if _STDLIB_INITIALIZED:
        return

    importlib.import_module("smalljs.stdlib")
    _STDLIB_INITIALIZED = True

def register_builtin(name: str):
    def dec(fn: BuiltinFn) -> BuiltinFn:
        Builtins.functions[name] = fn
        return fn

    return dec

# ---------- Environment chain ----------

def new_env(parent: Optional[JSObject]) -> JSObject:
    return JSObject("env", parent=parent)

def new_object(parent: Optional[JSObject]=None) -> JSObject:
    return JSObject("object", parent=parent)

def new_function(name: str, invoker: Invoker) -> JSObject:
    return JSObject(name, invoker=invoker)

def install_builtins(global_env: JSObject, out: TextIO) -> None:
    init_stdlib()

    for name, fn in Builtins.functions.items():
        global_env.register(name, new_function(name, _builtin_invoker(fn, out)))

def _builtin_invoker(fn: BuiltinFn, out: TextIO) -> Invoker:
    # builtins ignore both the receiver and the arity
    def invoker(_self: JSObject, _receiver: JSValue, args: List[JSValue]) -> JSValue:
        return fn(out, args)

    return invoker

__all__ = [
    "UNDEFINED",
    "Builtins",
    "BuiltinFn",
    "Failure",
    "Invoker",
    "JSObject",
    "JSUndefined",
    "JSValue",
    "ReturnSignal",
    "init_stdlib",
    "install_builtins",
    "is_undefined",
    "new_env",
    "new_function",
    "new_object",
    "register_builtin",
]
