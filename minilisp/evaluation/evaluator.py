"""Core evaluator for the minilisp interpreter.

A plain recursive-descent interpreter: dispatch is on the shape of the
expression, with special forms looked up by their head Symbol before falling
back to procedure application. Python's call stack is the only evaluation
state, so Lisp recursion depth is bounded by the interpreter's recursion
limit.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.types.environment import Environment
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol
from minilisp.values import iter_list, make_list


def evaluate_operands(operands: SExpression, env: Environment) -> LispValue:
    """Evaluate each element of a list left to right into a new list."""
    return make_list(*[evaluate(operand, env) for operand in iter_list(operands)])


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(head=Symbol() as keyword) if keyword in SPECIAL_FORMS:
            return SPECIAL_FORMS[keyword](expr.tail, env, evaluate)

        case Pair():
            proc = evaluate(expr.head, env)
            args = evaluate_operands(expr.tail, env)
            return apply(proc, args, env, evaluate)

    # --- Nil, numbers, strings and procedure values evaluate to themselves ---
    return expr
