from __future__ import annotations

import logging

import pytest

from smalljs.tree import FunCall, Literal, LocalVarAccess
from tests.support.harness import (
    UNDEFINED,
    run_program,
    run_runtime_case,
    visit,
)

SCENARIOS = [
    pytest.param(
        "print(1 + 2, 7 - 10, 6 * 7, 7 / 2, 7 % 3);",
        ["3 -3 42 3 1"],
        None,
        id="integer-arithmetic",
    ),
    pytest.param(
        "print(1 + 2 * 3, (1 + 2) * 3, 10 - 3 - 2);",
        ["7 9 5"],
        None,
        id="precedence-and-associativity",
    ),
    pytest.param(
        "print((0 - 7) / 2, (0 - 7) % 3, 7 / (0 - 2), 7 % (0 - 3));",
        ["-3 -1 -3 1"],
        None,
        id="division-truncates-toward-zero",
    ),
    pytest.param(
        "print(-5 + 2, -(1 + 1));",
        ["-3 -2"],
        None,
        id="unary-minus",
    ),
    pytest.param(
        "print(1 == 1, 1 != 1, 1 < 2, 2 <= 1, 3 > 2, 2 >= 2);",
        ["1 0 1 0 1 1"],
        None,
        id="comparisons-yield-integers",
    ),
    pytest.param(
        'print("a" == "a", "a" == "b", 1 == "1", "abc" < "abd");',
        ["1 0 0 1"],
        None,
        id="string-comparisons",
    ),
    pytest.param(
        "print(nope == nothing, nope != 0);",
        ["1 1"],
        None,
        id="undefined-equality",
    ),
    pytest.param(
        "var a = {}; var b = {}; print(a == a, a == b, a != b);",
        ["1 0 1"],
        None,
        id="object-identity-equality",
    ),
    pytest.param(
        'print("a", "b");',
        ["a b"],
        None,
        id="print-joins-with-space",
    ),
    pytest.param(
        "print();",
        [""],
        None,
        id="print-no-arguments",
    ),
    pytest.param(
        'print(1, "two", nope); print(3);',
        ["1 two undefined", "3"],
        None,
        id="print-one-line-per-call",
    ),
    pytest.param(
        "print(1 / 0);",
        None,
        ZeroDivisionError,
        id="division-by-zero-host-fault",
    ),
    pytest.param(
        "print(1 % 0);",
        None,
        ZeroDivisionError,
        id="modulo-by-zero-host-fault",
    ),
    pytest.param(
        'print("a" + 1);',
        None,
        TypeError,
        id="arithmetic-on-string-host-fault",
    ),
    pytest.param(
        'print(1 < "a");',
        None,
        TypeError,
        id="mixed-ordering-host-fault",
    ),
    pytest.param(
        "print({} < {});",
        None,
        TypeError,
        id="object-ordering-host-fault",
    ),
]


@pytest.mark.parametrize("source, expectation, expected_exc", SCENARIOS)
def test_operators(source: str, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc)


def test_equality_yields_integer_one(global_env) -> None:
    node = FunCall(LocalVarAccess("=="), (Literal(1), Literal(1)))
    result = visit(node, global_env)

    assert result == 1
    assert type(result) is int


def test_builtins_ignore_receiver(global_env, out) -> None:
    plus = global_env.lookup("+")
    printer = global_env.lookup("print")

    assert plus.invoke("ignored", [2, 3]) == 5
    assert printer.invoke(global_env, ["x", 1]) is UNDEFINED
    assert out.getvalue() == "x 1\n"


def test_print_traces_arguments(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="smalljs.stdlib")

    assert run_program('print("a", 2);') == ["a 2"]
    assert "print called with ['a', 2]" in caplog.text
