"""Lowering pass: lark parse tree -> evaluator AST.

Operators become calls to the builtin bound under the operator's name, so
`a + b` lowers to `FunCall(LocalVarAccess("+"), (a, b))`.
"""
from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

from lark import Token, Transformer, Tree
from lark.visitors import Discard, v_args

from .types import UNDEFINED
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
)

_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', '0': '\0'}
_ESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)

def _line(meta: Any) -> int:
    return getattr(meta, "line", None) or 0

def _unquote(raw: str) -> str:
    body = raw[1:-1]
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)

def _operator_call(op: str, args: Tuple[Expr, ...], line: int) -> FunCall:
    return FunCall(LocalVarAccess(op, line), args, line)


class Lower(Transformer):
    # ---- statements ----
    @v_args(meta=True)
    def start(self, meta, c: List[Expr]) -> Block:
        return Block(tuple(c), _line(meta) or 1)

    @v_args(meta=True)
    def block(self, meta, c: List[Expr]) -> Block:
        return Block(tuple(c), _line(meta))

    @v_args(meta=True)
    def expr_stmt(self, meta, c: List[Expr]) -> Expr:
        return c[0]

    def empty_stmt(self, c):
        return Discard

    @v_args(meta=True)
    def var_decl(self, meta, c: List[Any]) -> LocalVarAssignment:
        name, *rest = c
        line = _line(meta)
        expr = rest[0] if rest else Literal(UNDEFINED, line)

        return LocalVarAssignment(str(name), expr, True, line)

    @v_args(meta=True)
    def return_stmt(self, meta, c: List[Expr]) -> Return:
        line = _line(meta)
        expr = c[0] if c else Literal(UNDEFINED, line)

        return Return(expr, line)

    @v_args(meta=True)
    def if_stmt(self, meta, c: List[Any]) -> If:
        line = _line(meta)
        cond, true_block, *rest = c
        false_block = rest[0] if rest else Block((), line)

        if isinstance(false_block, If):
            # `else if` chains nest the inner If in a block of its own
            false_block = Block((false_block,), false_block.line)

        return If(cond, true_block, false_block, line)

    @v_args(meta=True)
    def fun_stmt(self, meta, c: List[Any]) -> Fun:
        name, params, body = c
        return Fun(str(name), params, body, _line(meta))

    @v_args(meta=True)
    def fun(self, meta, c: List[Any]) -> Fun:
        name: Optional[str] = None

        if c and isinstance(c[0], Token):
            name = str(c[0])
            c = c[1:]
        params, body = c

        return Fun(name, params, body, _line(meta))

    def params(self, c: List[Token]) -> Tuple[str, ...]:
        return tuple(str(tok) for tok in c)

    def arguments(self, c: List[Expr]) -> Tuple[Expr, ...]:
        return tuple(c)

    # ---- assignment ----
    @v_args(meta=True)
    def var_assign(self, meta, c: List[Any]) -> LocalVarAssignment:
        name, expr = c
        return LocalVarAssignment(str(name), expr, False, _line(meta))

    @v_args(meta=True)
    def field_assign(self, meta, c: List[Any]) -> FieldAssignment:
        receiver, name, expr = c
        return FieldAssignment(receiver, str(name), expr, _line(meta))

    # ---- operators ----
    @v_args(meta=True)
    def binop(self, meta, c: List[Any]) -> FunCall:
        lhs, op, rhs = c
        return _operator_call(str(op), (lhs, rhs), _line(meta))

    @v_args(meta=True)
    def neg(self, meta, c: List[Any]) -> FunCall:
        _minus, operand = c
        line = _line(meta)
        return _operator_call("-", (Literal(0, line), operand), line)

    # ---- postfix chains ----
    @v_args(meta=True)
    def field(self, meta, c: List[Any]) -> FieldAccess:
        receiver, name = c
        return FieldAccess(receiver, str(name), _line(meta))

    @v_args(meta=True)
    def call(self, meta, c: List[Any]) -> FunCall:
        qualifier, args = c
        return FunCall(qualifier, args, _line(meta))

    @v_args(meta=True)
    def method_call(self, meta, c: List[Any]) -> MethodCall:
        receiver, name, args = c
        return MethodCall(receiver, str(name), args, _line(meta))

    # ---- primaries ----
    @v_args(meta=True)
    def number(self, meta, c: List[Token]) -> Literal:
        return Literal(int(c[0]), _line(meta))

    @v_args(meta=True)
    def string(self, meta, c: List[Token]) -> Literal:
        return Literal(_unquote(str(c[0])), _line(meta))

    @v_args(meta=True)
    def var(self, meta, c: List[Token]) -> LocalVarAccess:
        return LocalVarAccess(str(c[0]), _line(meta))

    @v_args(meta=True)
    def object(self, meta, c: List[Tuple[str, Expr]]) -> New:
        return New(dict(c), _line(meta))

    def member(self, c: List[Any]) -> Tuple[str, Expr]:
        key, value = c

        if key.type == 'STRING':
            return (_unquote(str(key)), value)
        return (str(key), value)


def lower(tree: Tree) -> Block:
    """Lower a `start` parse tree to the top-level Block."""
    block = Lower().transform(tree)

    if not isinstance(block, Block):
        raise TypeError(f"lowering produced {type(block).__name__}, expected Block")

    return block
