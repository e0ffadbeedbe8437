from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Union
from typing_extensions import Protocol, TypeAlias, TypeGuard

# ---------- Value Model ----------

@dataclass(frozen=True)
class JSUndefined:
    def __repr__(self) -> str:
        return "undefined"

UNDEFINED = JSUndefined()

class Invoker(Protocol):
    def __call__(self, self_object: 'JSObject', receiver: 'JSValue', args: List['JSValue']) -> 'JSValue': ...

class JSObject:
    """Record, function and environment frame share this one shape.

    Records come from `New` and have neither parent nor invoker, functions carry
    an invoker, environment frames carry a parent link.
    """

    def __init__(self, name: str, parent: Optional['JSObject']=None, invoker: Optional[Invoker]=None):
        self.name = name
        self.parent = parent
        self.invoker = invoker
        self.fields: Dict[str, JSValue] = {}

    def register(self, name: str, value: 'JSValue') -> None:
        self.fields[name] = value

    def lookup(self, name: str) -> 'JSValue':
        obj: Optional[JSObject] = self

        while obj is not None:
            if name in obj.fields:
                return obj.fields[name]
            obj = obj.parent

        return UNDEFINED

    def is_callable(self) -> bool:
        return self.invoker is not None

    def invoke(self, receiver: 'JSValue', args: List['JSValue']) -> 'JSValue':
        if self.invoker is None:
            raise Failure(f"type error: {self!r} is not a function")

        return self.invoker(self, receiver, args)

    def __repr__(self) -> str:
        return render(self)

JSValue: TypeAlias = Union[JSUndefined, int, str, JSObject]

def is_undefined(value: object) -> TypeGuard[JSUndefined]:
    return isinstance(value, JSUndefined)

def render(value: JSValue, seen: Optional[Set[int]]=None) -> str:
    """Debug form of a value; strings are quoted and cycles print as `...`."""
    if isinstance(value, str):
        return f'"{value}"'

    if not isinstance(value, JSObject):
        return repr(value)

    if seen is None:
        seen = set()

    if id(value) in seen:
        return "..."

    if value.invoker is not None and not value.fields:
        return f"<function {value.name}>"

    if not value.fields:
        return "{}"

    seen.add(id(value))
    try:
        pairs = [f"{k}: {render(v, seen)}" for k, v in value.fields.items()]
    finally:
        seen.discard(id(value))

    return "{ " + ", ".join(pairs) + " }"

# ---------- Exceptions ----------

class Failure(Exception):
    """The one language-level failure kind; ends evaluation of the script."""
    line: Optional[int]

    def __init__(self, message: str, line: Optional[int]=None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message

        return f"{self.message} (line {self.line})"

class ReturnSignal(Exception):
    """Internal control-flow exception used to implement `return`."""
    def __init__(self, value: JSValue):
        self.value = value
