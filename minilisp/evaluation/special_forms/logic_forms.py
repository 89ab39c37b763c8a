from minilisp import SExpression
from minilisp.primitives import truth
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.values import head, cadr, is_truthy


def and_form(operands: SExpression, env: Environment, evaluate_fn) -> SExpression:
    """Short-circuiting logical AND of two operands.

    (and a b) is Nil without evaluating b when a is Nil; otherwise it is the
    value of b itself, not a canonical truth value.
    """
    if not is_truthy(evaluate_fn(head(operands), env)):
        return Nil
    return evaluate_fn(cadr(operands), env)


def or_form(operands: SExpression, env: Environment, evaluate_fn) -> SExpression:
    """Short-circuiting logical OR of two operands.

    (or a b) is the Symbol T, not a's value, as soon as a is true; otherwise
    it is the value of b.
    """
    if is_truthy(evaluate_fn(head(operands), env)):
        return truth()
    return evaluate_fn(cadr(operands), env)
