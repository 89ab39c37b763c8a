"""Sentinel error values.

minilisp has no exception types of its own. A primitive that cannot produce a
result returns one of the Symbols below instead, and evaluation carries on.
A program sees them as ordinary symbols; `is_sentinel` exists for tooling
(the REPL, tests) that wants to tell them apart by text.
"""

from __future__ import annotations

from minilisp import LispValue
from minilisp.types.symbol import Symbol

NOT_A_NUMBER = "ERROR:NOT_A_NUMBER"
DIVISION_BY_ZERO = "ERROR:DIVISION_BY_ZERO"
NOT_A_FUNCTION = "ERROR:NOT_A_FUNCTION"
UNDEFINED = "UNDEFINED"

SENTINELS = frozenset({NOT_A_NUMBER, DIVISION_BY_ZERO, NOT_A_FUNCTION, UNDEFINED})


def not_a_number() -> Symbol:
    return Symbol(NOT_A_NUMBER)


def division_by_zero() -> Symbol:
    return Symbol(DIVISION_BY_ZERO)


def not_a_function() -> Symbol:
    return Symbol(NOT_A_FUNCTION)


def undefined() -> Symbol:
    return Symbol(UNDEFINED)


def is_sentinel(value: LispValue) -> bool:
    return isinstance(value, Symbol) and value.id in SENTINELS
