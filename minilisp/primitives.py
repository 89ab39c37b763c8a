"""Two-operand arithmetic and comparison primitives.

None of these raise. A non-Number operand gives the NOT_A_NUMBER sentinel and
a zero divisor gives DIVISION_BY_ZERO; comparisons answer the Symbol T or Nil.
"""
from __future__ import annotations

import math

from minilisp import LispValue
from minilisp.errors import not_a_number, division_by_zero
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol
from minilisp.values import is_number, make_number, make_symbol

TRUE = "T"


def truth() -> Symbol:
    return make_symbol(TRUE)


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    return make_number(a + b)


def sub(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    return make_number(a - b)


def mul(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    return make_number(a * b)


def divide(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    if b == 0:
        return division_by_zero()
    return make_number(a / b)


def mod(a: LispValue, b: LispValue) -> LispValue:
    """Integer remainder after truncating both operands toward zero.

    The sign of a non-zero result follows the dividend, as in C.
    """
    if not is_number(a) or not is_number(b):
        return not_a_number()
    if b == 0:
        return division_by_zero()
    if not (math.isfinite(a) and math.isfinite(b)):
        return make_number(math.nan)
    dividend, divisor = int(a), int(b)
    if divisor == 0:
        return division_by_zero()
    return make_number(math.fmod(dividend, divisor))


# -------------------------------
# Comparison
# -------------------------------
def lt(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    return truth() if a < b else Nil


def gt(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    return truth() if a > b else Nil


def lte(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    return truth() if a <= b else Nil


def gte(a: LispValue, b: LispValue) -> LispValue:
    if not is_number(a) or not is_number(b):
        return not_a_number()
    return truth() if a >= b else Nil


# -------------------------------
# Boolean logic
# -------------------------------
def not_(value: LispValue) -> LispValue:
    return truth() if value is Nil else Nil
