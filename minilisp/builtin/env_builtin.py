"""Built-in procedures for the minilisp global environment.

Each procedure takes the evaluated argument list (a Lisp list) and the
calling environment, and reads its operands through the soft accessors, so a
missing argument shows up as Nil rather than an exception.
"""
from __future__ import annotations

from minilisp import LispValue
from minilisp import primitives
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.values import head, tail, cadr, cons, eq, make_builtin, make_symbol


# -------------------------------
# Arithmetic
# -------------------------------
def prim_add(args: LispValue, env: Environment) -> LispValue:
    return primitives.add(head(args), cadr(args))


def prim_sub(args: LispValue, env: Environment) -> LispValue:
    return primitives.sub(head(args), cadr(args))


def prim_mul(args: LispValue, env: Environment) -> LispValue:
    return primitives.mul(head(args), cadr(args))


def prim_div(args: LispValue, env: Environment) -> LispValue:
    return primitives.divide(head(args), cadr(args))


def prim_mod(args: LispValue, env: Environment) -> LispValue:
    return primitives.mod(head(args), cadr(args))


# -------------------------------
# Comparison
# -------------------------------
def prim_lt(args: LispValue, env: Environment) -> LispValue:
    return primitives.lt(head(args), cadr(args))


def prim_gt(args: LispValue, env: Environment) -> LispValue:
    return primitives.gt(head(args), cadr(args))


def prim_lte(args: LispValue, env: Environment) -> LispValue:
    return primitives.lte(head(args), cadr(args))


def prim_gte(args: LispValue, env: Environment) -> LispValue:
    return primitives.gte(head(args), cadr(args))


def prim_eq(args: LispValue, env: Environment) -> LispValue:
    return primitives.truth() if eq(head(args), cadr(args)) else Nil


def prim_not(args: LispValue, env: Environment) -> LispValue:
    return primitives.not_(head(args))


# -------------------------------
# List operations
# -------------------------------
def prim_cons(args: LispValue, env: Environment) -> LispValue:
    return cons(head(args), cadr(args))


def prim_car(args: LispValue, env: Environment) -> LispValue:
    return head(head(args))


def prim_cdr(args: LispValue, env: Environment) -> LispValue:
    return tail(head(args))


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "+": prim_add,
    "-": prim_sub,
    "*": prim_mul,
    "/": prim_div,
    "%": prim_mod,
    "<": prim_lt,
    ">": prim_gt,
    "<=": prim_lte,
    ">=": prim_gte,
    "eq": prim_eq,
    "not": prim_not,
    "cons": prim_cons,
    "car": prim_car,
    "cdr": prim_cdr,
}

ALIASES = {
    "add": prim_add,
    "sub": prim_sub,
    "mul": prim_mul,
    "div": prim_div,
    "mod": prim_mod,
}


def register(env: Environment) -> Environment:
    """Bind every builtin, then the word aliases, into `env`."""
    for table in (BUILTINS, ALIASES):
        for name, fn in table.items():
            env.bind(make_symbol(name), make_builtin(name, fn))
    return env


def make_global_environment() -> Environment:
    """A fresh root environment holding only the builtin procedures."""
    return register(Environment())
