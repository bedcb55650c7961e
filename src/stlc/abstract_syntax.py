from __future__ import annotations

import abc
import dataclasses


class Type(abc.ABC):
    def __str__(self):
        return f"{self.__class__.__name__}"


@dataclasses.dataclass(frozen=True)
class Int(Type):
    def __str__(self):
        return "Int"


@dataclasses.dataclass(frozen=True)
class Arrow(Type):
    param: Type
    result: Type

    def __str__(self):
        return f"({self.param} -> {self.result})"


def types_equal(a: Type, b: Type) -> bool:
    match a, b:
        case Int(), Int():
            return True
        case Arrow(p1, r1), Arrow(p2, r2):
            return types_equal(p1, p2) and types_equal(r1, r2)
        case Int() | Arrow(), Int() | Arrow():
            return False
        case _:
            raise NotImplementedError((a, b))


class Expression(abc.ABC):
    pass


@dataclasses.dataclass(frozen=True)
class IntLiteral(Expression):
    value: int

    def __str__(self):
        return str(self.value)


@dataclasses.dataclass(frozen=True)
class Variable(Expression):
    name: str

    def __str__(self):
        return self.name


@dataclasses.dataclass(frozen=True)
class Abstraction(Expression):
    param: str
    param_type: Type
    body: Expression

    def __str__(self):
        return f"(λ ({self.param} : {self.param_type}) {self.body})"


@dataclasses.dataclass(frozen=True)
class Application(Expression):
    function: Expression
    argument: Expression

    def __str__(self):
        return f"({self.function} {self.argument})"
