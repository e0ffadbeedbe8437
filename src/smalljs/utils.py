from __future__ import annotations

import operator
from typing import Callable, List, Tuple

from .types import JSObject, JSValue

def js_equals(lhs: JSValue, rhs: JSValue) -> bool:
    match (lhs, rhs):
        case (JSObject(), JSObject()):
            return lhs is rhs
        case _:
            return type(lhs) is type(rhs) and lhs == rhs

def js_compare(op: Callable[[JSValue, JSValue], bool], lhs: JSValue, rhs: JSValue) -> bool:
    # Only like-typed primitives are ordered; everything else is a host fault.
    if isinstance(lhs, JSObject) or isinstance(rhs, JSObject) or type(lhs) is not type(rhs):
        raise TypeError(
            f"'{_op_symbol(op)}' not supported between instances of "
            f"'{type(lhs).__name__}' and '{type(rhs).__name__}'"
        )

    return op(lhs, rhs)

def int_operands(symbol: str, args: List[JSValue]) -> Tuple[int, int]:
    lhs, rhs = args[0], args[1]

    for value in (lhs, rhs):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"operator {symbol} expects integers; got {type(value).__name__}")

    return lhs, rhs

def to_js_bool(flag: bool) -> int:
    return 1 if flag else 0

_SYMBOLS = {
    operator.lt: "<",
    operator.le: "<=",
    operator.gt: ">",
    operator.ge: ">=",
}

def _op_symbol(op: Callable[[JSValue, JSValue], bool]) -> str:
    return _SYMBOLS.get(op, getattr(op, "__name__", "?"))

def trunc_div(lhs: int, rhs: int) -> int:
    """Integer quotient rounded toward zero; a zero divisor raises ZeroDivisionError."""
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient

def trunc_mod(lhs: int, rhs: int) -> int:
    # remainder takes the sign of the dividend
    return lhs - rhs * trunc_div(lhs, rhs)
