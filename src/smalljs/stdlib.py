"""Builtin functions (print, operators) installed into the global environment."""

from __future__ import annotations

import logging
import operator
from typing import List, TextIO

from .runtime import UNDEFINED, JSValue, register_builtin
from .eval.common import stringify
from .utils import int_operands, js_compare, js_equals, to_js_bool, trunc_div, trunc_mod

logger = logging.getLogger(__name__)

@register_builtin("print")
def std_print(out: TextIO, args: List[JSValue]) -> JSValue:
    logger.debug("print called with %r", args)
    out.write(" ".join(stringify(arg) for arg in args) + "\n")
    return UNDEFINED

# `/` and `%` truncate toward zero; a zero divisor raises ZeroDivisionError
# rather than a Failure.

@register_builtin("+")
def std_add(_out: TextIO, args: List[JSValue]) -> JSValue:
    lhs, rhs = int_operands("+", args)
    return lhs + rhs

@register_builtin("-")
def std_sub(_out: TextIO, args: List[JSValue]) -> JSValue:
    lhs, rhs = int_operands("-", args)
    return lhs - rhs

@register_builtin("/")
def std_div(_out: TextIO, args: List[JSValue]) -> JSValue:
    lhs, rhs = int_operands("/", args)
    return trunc_div(lhs, rhs)

@register_builtin("*")
def std_mul(_out: TextIO, args: List[JSValue]) -> JSValue:
    lhs, rhs = int_operands("*", args)
    return lhs * rhs

@register_builtin("%")
def std_mod(_out: TextIO, args: List[JSValue]) -> JSValue:
    lhs, rhs = int_operands("%", args)
    return trunc_mod(lhs, rhs)

@register_builtin("==")
def std_eq(_out: TextIO, args: List[JSValue]) -> JSValue:
    return to_js_bool(js_equals(args[0], args[1]))

@register_builtin("!=")
def std_ne(_out: TextIO, args: List[JSValue]) -> JSValue:
    return to_js_bool(not js_equals(args[0], args[1]))

@register_builtin("<")
def std_lt(_out: TextIO, args: List[JSValue]) -> JSValue:
    return to_js_bool(js_compare(operator.lt, args[0], args[1]))

@register_builtin("<=")
def std_le(_out: TextIO, args: List[JSValue]) -> JSValue:
    return to_js_bool(js_compare(operator.le, args[0], args[1]))

@register_builtin(">")
def std_gt(_out: TextIO, args: List[JSValue]) -> JSValue:
    return to_js_bool(js_compare(operator.gt, args[0], args[1]))

@register_builtin(">=")
def std_ge(_out: TextIO, args: List[JSValue]) -> JSValue:
    return to_js_bool(js_compare(operator.ge, args[0], args[1]))
