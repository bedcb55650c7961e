from __future__ import annotations
import logging
from typing import TypeAlias

from stlc import abstract_syntax as ast
from stlc.abstract_syntax import Type, Int, Arrow, types_equal
from stlc.environment import Env, Scoping, empty_env
from stlc.errors import TypingError

logger = logging.getLogger(__name__)

TEnv: TypeAlias = Env[Type]


def check(ty: Type, expr: ast.Expression, tenv: TEnv):
    texp = infer(expr, tenv)
    if not types_equal(texp, ty):
        raise TypingError(f"expected {expr} to have type {ty}, got {texp}")


def infer(expr: ast.Expression, tenv: TEnv) -> Type:
    match expr:
        case ast.IntLiteral():
            return Int()
        case ast.Variable(var):
            try:
                return tenv.lookup(var)
            except LookupError:
                raise TypingError(f"unbound variable {var}") from None
        case ast.Abstraction(var, targ, body):
            logger.debug("abstraction %s : %s", var, targ)
            tenv_ = tenv.bind(var, targ)
            try:
                tret = infer(body, tenv_)
            except TypingError as e:
                raise TypingError(f"ill-typed body in {expr}") from e
            return Arrow(targ, tret)
        case ast.Application(fun, arg):
            tfun = infer(fun, tenv)
            targ = infer(arg, tenv)
            match tfun:
                case Arrow(tparam, tret) if types_equal(tparam, targ):
                    return tret
                case Arrow(tparam, _):
                    raise TypingError(
                        f"expected argument of type {tparam}, got {targ} in {expr}"
                    )
                case _:
                    raise TypingError(f"not a function: {fun} : {tfun}")
        case _:
            raise NotImplementedError(expr)


def empty_tenv(scoping: Scoping = Scoping.SHARED) -> TEnv:
    return empty_env(scoping)
