"""Constructors, predicates, accessors and list helpers for minilisp values.

Every datum is one of: Nil, a Number (float), a Symbol, a String (str), a
Pair, a Closure or a Builtin. Constructors always allocate a new object,
except `nil()` which returns the shared empty list.

The structural accessors follow a soft-failure policy: taking the head or
tail of something that is not a Pair is logged and answered with Nil, so an
evaluation over malformed code keeps going.
"""

from __future__ import annotations

import logging
from typing import Iterator

from minilisp import LispValue
from minilisp.types.builtin import Builtin, BuiltinFn
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, NilType
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


# -------------------------------
# Constructors
# -------------------------------
def nil() -> NilType:
    return Nil


def make_number(value: float) -> float:
    return float(value)


def make_symbol(name: str) -> Symbol:
    return Symbol(name)


def make_string(text: str) -> str:
    return str(text)


def cons(head: LispValue, tail: LispValue) -> Pair:
    return Pair(head, tail)


def make_closure(params: LispValue, body: LispValue, env: Environment) -> Closure:
    return Closure(params, body, env)


def make_builtin(name: str, fn: BuiltinFn) -> Builtin:
    return Builtin(name, fn)


# -------------------------------
# Predicates
# -------------------------------
def is_nil(value: LispValue) -> bool:
    return value is Nil


def is_number(value: LispValue) -> bool:
    return isinstance(value, float)


def is_symbol(value: LispValue) -> bool:
    return isinstance(value, Symbol)


def is_string(value: LispValue) -> bool:
    return isinstance(value, str)


def is_pair(value: LispValue) -> bool:
    return isinstance(value, Pair)


def is_list(value: LispValue) -> bool:
    """Pair or Nil; says nothing about how the chain ends."""
    return value is Nil or isinstance(value, Pair)


def is_truthy(value: LispValue) -> bool:
    return value is not Nil


def is_closure(value: LispValue) -> bool:
    return isinstance(value, Closure)


def is_builtin(value: LispValue) -> bool:
    return isinstance(value, Builtin)


# -------------------------------
# Accessors
# -------------------------------
def head(value: LispValue) -> LispValue:
    if not isinstance(value, Pair):
        logger.error("car called on non-cons cell: %r", value)
        return Nil
    return value.head


def tail(value: LispValue) -> LispValue:
    if not isinstance(value, Pair):
        logger.error("cdr called on non-cons cell: %r", value)
        return Nil
    return value.tail


def cadr(value: LispValue) -> LispValue:
    return head(tail(value))


def caddr(value: LispValue) -> LispValue:
    return head(tail(tail(value)))


def cadddr(value: LispValue) -> LispValue:
    return head(tail(tail(tail(value))))


# -------------------------------
# Equality
# -------------------------------
def eq(a: LispValue, b: LispValue) -> bool:
    """Value equality for atoms, identity for everything else.

    Numbers compare exactly (no tolerance), Symbols and Strings by text, and
    two Pairs only if they are the same Pair.
    """
    if a is Nil and b is Nil:
        return True
    if a is Nil or b is Nil:
        return False
    if type(a) is not type(b):
        return False
    if isinstance(a, (float, str, Symbol)):
        return a == b
    return a is b


# -------------------------------
# List helpers
# -------------------------------
def make_list(*items: LispValue) -> LispValue:
    result: LispValue = Nil
    for item in reversed(items):
        result = Pair(item, result)
    return result


def iter_list(lst: LispValue) -> Iterator[LispValue]:
    """Yield the heads of a pair chain; any non-pair tail ends the walk."""
    while isinstance(lst, Pair):
        yield lst.head
        lst = lst.tail


def append(first: LispValue, second: LispValue) -> LispValue:
    """A copy of `first` whose final tail is `second` (which is shared, not copied)."""
    items = list(iter_list(first))
    result = second
    for item in reversed(items):
        result = Pair(item, result)
    return result


def length(lst: LispValue) -> int:
    """Number of pairs in the chain."""
    return sum(1 for _ in iter_list(lst))
