"""AST node classes consumed by the evaluator.

Nodes are immutable; the lowering pass builds them once and the evaluator only
reads them.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple, Union
from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from .types import JSValue


@dataclass(frozen=True)
class Block:
    instrs: Tuple['Expr', ...]
    line: int = 0

@dataclass(frozen=True)
class Literal:
    value: 'JSValue'
    line: int = 0

@dataclass(frozen=True)
class FunCall:
    qualifier: 'Expr'
    args: Tuple['Expr', ...]
    line: int = 0

@dataclass(frozen=True)
class LocalVarAccess:
    name: str
    line: int = 0

@dataclass(frozen=True)
class LocalVarAssignment:
    name: str
    expr: 'Expr'
    declaration: bool
    line: int = 0

@dataclass(frozen=True)
class Fun:
    name: Optional[str]
    params: Tuple[str, ...]
    body: Block
    line: int = 0

@dataclass(frozen=True)
class Return:
    expr: 'Expr'
    line: int = 0

@dataclass(frozen=True)
class If:
    condition: 'Expr'
    true_block: Block
    false_block: Block
    line: int = 0

@dataclass(frozen=True)
class New:
    init: Mapping[str, 'Expr'] = field(default_factory=dict)
    line: int = 0

@dataclass(frozen=True)
class FieldAccess:
    receiver: 'Expr'
    name: str
    line: int = 0

@dataclass(frozen=True)
class FieldAssignment:
    receiver: 'Expr'
    name: str
    expr: 'Expr'
    line: int = 0

@dataclass(frozen=True)
class MethodCall:
    receiver: 'Expr'
    name: str
    args: Tuple['Expr', ...]
    line: int = 0


Expr: TypeAlias = Union[
    Block,
    Literal,
    FunCall,
    LocalVarAccess,
    LocalVarAssignment,
    Fun,
    Return,
    If,
    New,
    FieldAccess,
    FieldAssignment,
    MethodCall,
]

EXPR_TYPES: Tuple[type, ...] = (
    Block,
    Literal,
    FunCall,
    LocalVarAccess,
    LocalVarAssignment,
    Fun,
    Return,
    If,
    New,
    FieldAccess,
    FieldAssignment,
    MethodCall,
)


@dataclass(frozen=True)
class Script:
    """A parsed program: the top-level block plus the text it came from."""
    body: Block
    source: Optional[str] = None


def is_expr(node: Any) -> bool:
    return isinstance(node, EXPR_TYPES)

def node_line(node: Any) -> Optional[int]:
    line = getattr(node, "line", None)

    if not line:
        return None

    return line

def pretty(node: Any, indent: str = '  ') -> str:
    """Return an indented, one-node-per-line rendering of an AST."""
    def _pretty(n: Any, label: str, level: int) -> str:
        prefix = f"{indent * level}{label}"

        if isinstance(n, Script):
            return _pretty(n.body, label, level)

        if not is_expr(n):
            return f"{prefix}{n!r}\n"

        lines = [f"{prefix}{type(n).__name__}\n"]

        for f in fields(n):
            if f.name == 'line':
                continue
            value = getattr(n, f.name)

            if isinstance(value, tuple) and all(is_expr(v) for v in value) and value:
                lines.append(f"{indent * (level + 1)}{f.name}:\n")
                for child in value:
                    lines.append(_pretty(child, "", level + 2))
            elif isinstance(value, Mapping):
                lines.append(f"{indent * (level + 1)}{f.name}:\n")
                for key, child in value.items():
                    lines.append(_pretty(child, f"{key} = ", level + 2))
            elif is_expr(value):
                lines.append(_pretty(value, f"{f.name} = ", level + 1))
            else:
                lines.append(f"{indent * (level + 1)}{f.name} = {value!r}\n")

        return ''.join(lines)

    return _pretty(node, "", 0)
