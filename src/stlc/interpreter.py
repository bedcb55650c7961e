from __future__ import annotations
import logging
from typing import Optional, TypeAlias

from stlc import abstract_syntax as ast
from stlc.environment import Env, Scoping, empty_env
from stlc.errors import TypingError
from stlc.values import Value, IntValue, Closure, NativeFunction

logger = logging.getLogger(__name__)

VEnv: TypeAlias = Env[Value]


def interpret(expr: ast.Expression, env: VEnv) -> Optional[Value]:
    match expr:
        case ast.IntLiteral(val):
            return IntValue(val)
        case ast.Variable(var):
            # unbound variables evaluate to no value at all; only the
            # type checker treats them as an error
            return env.get(var)
        case ast.Abstraction(var, _, body):
            return Closure(env, var, body)
        case ast.Application(fun, arg):
            # the argument is evaluated before the function
            a = interpret(arg, env)
            f = interpret(fun, env)
            return apply(f, a)
        case _:
            raise NotImplementedError(expr)


def apply(fun: Optional[Value], arg: Optional[Value]) -> Optional[Value]:
    match fun:
        case Closure(env, var, body):
            logger.debug("apply %s to %s", fun, arg)
            return interpret(body, env.bind(var, arg))
        case NativeFunction():
            logger.debug("apply %s to %s", fun, arg)
            return fun(arg)
        case _:
            raise TypingError(f"not callable: {fun}")


def empty_venv(scoping: Scoping = Scoping.SHARED) -> VEnv:
    return empty_env(scoping)
