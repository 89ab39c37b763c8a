from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.types.environment import Environment
from minilisp.values import head


def quote_form(
    operands: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote x) returns x as data, unevaluated."""
    return head(operands)
