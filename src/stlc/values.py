from __future__ import annotations
import abc
import dataclasses
from typing import Callable

from stlc import abstract_syntax as ast
from stlc.environment import Env


class Value(abc.ABC):
    pass


@dataclasses.dataclass(frozen=True)
class IntValue(Value):
    value: int

    def __str__(self):
        return str(self.value)


# compared by identity: the captured environment may contain the closure itself
@dataclasses.dataclass(eq=False)
class Closure(Value):
    env: Env[Value]
    param: str
    body: ast.Expression

    def __str__(self):
        return f"<closure λ {self.param}>"

    __repr__ = __str__


@dataclasses.dataclass(eq=False)
class NativeFunction(Value):
    """A function provided by the host program, e.g. a builtin."""

    fn: Callable[[Value], Value]
    name: str = "<native>"

    def __call__(self, arg: Value) -> Value:
        return self.fn(arg)

    def __str__(self):
        return f"<native {self.name}>"
