from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from typing_extensions import assert_never

from .runtime import (
    UNDEFINED,
    Failure,
    JSObject,
    JSValue,
    ReturnSignal,
    install_builtins,
    new_env,
)
from .tree import (
    Block,
    Expr,
    FieldAccess,
    FieldAssignment,
    Fun,
    FunCall,
    If,
    Literal,
    LocalVarAccess,
    LocalVarAssignment,
    MethodCall,
    New,
    Return,
    Script,
    node_line,
)

from .eval.bind import eval_local_var_access, eval_local_var_assignment
from .eval.control import eval_if, eval_return
from .eval.fn import eval_fun, eval_fun_call
from .eval.objects import eval_field_access, eval_field_assignment, eval_method_call, eval_new

logger = logging.getLogger(__name__)

# Each script call level costs roughly a dozen Python frames.
RECURSION_LIMIT = 10000


def _maybe_attach_location(exc: Failure, node: Expr) -> None:
    if exc.line is not None:
        return

    exc.line = node_line(node)

# ---------------- Public API ----------------

def make_global_env(out: TextIO) -> JSObject:
    global_env = new_env(None)
    global_env.register("global", global_env)
    install_builtins(global_env, out)

    return global_env

def interpret(script: Script, out: Optional[TextIO]=None) -> None:
    """Run a parsed script against a fresh global environment."""
    if out is None:
        out = sys.stdout

    if sys.getrecursionlimit() < RECURSION_LIMIT:
        sys.setrecursionlimit(RECURSION_LIMIT)

    global_env = make_global_env(out)
    logger.debug("interpreting %d top-level instruction(s)", len(script.body.instrs))

    try:
        visit(script.body, global_env)
    except ReturnSignal:
        raise Failure("return outside of a function") from None

    logger.debug("script finished")

# ---------------- Core evaluator ----------------

def visit(node: Expr, env: JSObject) -> JSValue:
    try:
        match node:
            case Block(instrs=instrs):
                for instr in instrs:
                    visit(instr, env)
                return UNDEFINED
            case Literal(value=value):
                return value
            case FunCall():
                return eval_fun_call(node, env, visit)
            case LocalVarAccess():
                return eval_local_var_access(node, env)
            case LocalVarAssignment():
                return eval_local_var_assignment(node, env, visit)
            case Fun():
                return eval_fun(node, env, visit)
            case Return():
                return eval_return(node, env, visit)
            case If():
                return eval_if(node, env, visit)
            case New():
                return eval_new(node, env, visit)
            case FieldAccess():
                return eval_field_access(node, env, visit)
            case FieldAssignment():
                return eval_field_assignment(node, env, visit)  # type: ignore[return-value]
            case MethodCall():
                return eval_method_call(node, env, visit)
            case _:
                assert_never(node)
    except Failure as e:
        _maybe_attach_location(e, node)
        raise
