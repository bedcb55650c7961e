from __future__ import annotations
import abc
import enum
from typing import TypeVar, Generic, Iterator, Optional

T = TypeVar("T")


class Scoping(enum.Enum):
    # bind mutates the environment in place, every alias sees the binding
    SHARED = "shared"
    # bind returns a child environment, the parent is left untouched
    LEXICAL = "lexical"


class Env(abc.ABC, Generic[T]):
    scoping: Scoping

    @abc.abstractmethod
    def bind(self, var: str, val: T) -> Env[T]:
        """Introduce a binding and return the environment in which it is visible.
        Depending on the scoping discipline this is either `self` or a new child."""

    @abc.abstractmethod
    def lookup(self, var: str) -> T:
        pass

    @abc.abstractmethod
    def items(self) -> Iterator[tuple[str, T]]:
        pass

    def get(self, var: str, default: Optional[T] = None) -> Optional[T]:
        try:
            return self.lookup(var)
        except LookupError:
            return default

    def __contains__(self, var: str) -> bool:
        try:
            self.lookup(var)
        except LookupError:
            return False
        return True

    def __getitem__(self, var: str) -> T:
        return self.lookup(var)


class SharedEnv(Env[T]):
    scoping = Scoping.SHARED

    def __init__(self, bindings: Optional[dict[str, T]] = None):
        self.bindings: dict[str, T] = dict(bindings or {})

    def bind(self, var: str, val: T) -> Env[T]:
        self.bindings[var] = val
        return self

    def lookup(self, var: str) -> T:
        return self.bindings[var]

    def items(self):
        yield from self.bindings.items()

    def __repr__(self):
        return f"SharedEnv({', '.join(self.bindings)})"


class EmptyEnv(Env[T]):
    scoping = Scoping.LEXICAL

    def bind(self, var: str, val: T) -> Env[T]:
        return Entry(var, val, self)

    def lookup(self, var: str) -> T:
        raise LookupError(var)

    def items(self):
        return
        yield ()

    def __repr__(self):
        return "()"


class Entry(Env[T]):
    scoping = Scoping.LEXICAL

    def __init__(self, var: str, val: T, nxt: Env[T]):
        self.var = var
        self.val = val
        self.nxt = nxt

    def bind(self, var: str, val: T) -> Env[T]:
        return Entry(var, val, self)

    def lookup(self, var: str) -> T:
        if self.var == var:
            return self.val
        return self.nxt.lookup(var)

    def items(self):
        seen = set()
        env = self
        while isinstance(env, Entry):
            if env.var not in seen:
                seen.add(env.var)
                yield env.var, env.val
            env = env.nxt

    def __repr__(self):
        return f"(({self.var} : {self.val}) . {self.nxt})"


def empty_env(scoping: Scoping = Scoping.SHARED) -> Env:
    match scoping:
        case Scoping.SHARED:
            return SharedEnv()
        case Scoping.LEXICAL:
            return EmptyEnv()
        case _:
            raise NotImplementedError(scoping)
