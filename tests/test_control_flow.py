from __future__ import annotations

from textwrap import dedent

import pytest

from smalljs.tree import Block, If, Literal, Return
from tests.support.harness import (
    UNDEFINED,
    Failure,
    ReturnSignal,
    run_runtime_case,
    visit,
)

SCENARIOS = [
    pytest.param(
        'if (1) { print("yes"); } else { print("no"); }',
        ["yes"],
        None,
        id="if-true-branch",
    ),
    pytest.param(
        'if (0) { print("yes"); } else { print("no"); }',
        ["no"],
        None,
        id="if-false-branch",
    ),
    pytest.param(
        'if (0) { print("yes"); } print("after");',
        ["after"],
        None,
        id="if-without-else",
    ),
    pytest.param(
        dedent(
            """\
            function sign(x) {
              if (x < 0) { return "neg"; } else if (x == 0) { return "zero"; } else { return "pos"; }
            }
            print(sign(0 - 5), sign(0), sign(5));
        """
        ),
        ["neg zero pos"],
        None,
        id="else-if-chain",
    ),
    pytest.param(
        dedent(
            """\
            function f() {
              print("a");
              return 1;
              print("b");
            }
            f();
        """
        ),
        ["a"],
        None,
        id="return-skips-rest-of-body",
    ),
    pytest.param(
        dedent(
            """\
            function find(x) {
              if (x > 1) {
                if (x > 2) { return "big"; }
                return "medium";
              }
              return "small";
            }
            print(find(3), find(2), find(1));
        """
        ),
        ["big medium small"],
        None,
        id="return-from-nested-blocks",
    ),
    pytest.param(
        dedent(
            """\
            function outer() {
              var inner = function() { return 1; };
              inner();
              return 2;
            }
            print(outer());
        """
        ),
        ["2"],
        None,
        id="return-unwinds-one-invocation",
    ),
    pytest.param(
        "function f() { return; } print(f());",
        ["undefined"],
        None,
        id="bare-return-undefined",
    ),
    pytest.param(
        "function f() { return 5 }  print(f())",
        ["5"],
        None,
        id="optional-trailing-semicolons",
    ),
    pytest.param(
        "if (2) { print(1); }",
        None,
        Failure,
        id="if-integer-not-boolean-error",
    ),
    pytest.param(
        'if ("1") { print(1); }',
        None,
        Failure,
        id="if-string-condition-error",
    ),
    pytest.param(
        "if (nope) { print(1); }",
        None,
        Failure,
        id="if-undefined-condition-error",
    ),
    pytest.param(
        "if ({}) { print(1); }",
        None,
        Failure,
        id="if-object-condition-error",
    ),
    pytest.param(
        "return 1;",
        None,
        Failure,
        id="top-level-return-error",
    ),
]


@pytest.mark.parametrize("source, expectation, expected_exc", SCENARIOS)
def test_control_flow(source: str, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc)


def test_return_signal_passes_through_block_and_if(global_env) -> None:
    node = Block((
        If(Literal(1), Block((Return(Literal(7)),)), Block(())),
        Literal("unreached"),
    ))

    with pytest.raises(ReturnSignal) as exc_info:
        visit(node, global_env)

    assert exc_info.value.value == 7


@pytest.mark.parametrize("flag", [1, 0])
def test_if_result_is_undefined(global_env, flag) -> None:
    node = If(Literal(flag), Block((Literal("t"),)), Block((Literal("f"),)))

    assert visit(node, global_env) is UNDEFINED
