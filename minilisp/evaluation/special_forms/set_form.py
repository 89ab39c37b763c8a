from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.values import head, cadr


def set_form(
    operands: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set name expr): bind the value of expr to name in the current frame.

    A new binding is always added, so setting a name twice in one frame
    shadows the first binding rather than replacing it.
    """
    name = head(operands)
    value = evaluate_fn(cadr(operands), env)
    return env.bind(name, value)
