from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.values import head, cadr, make_closure


def lambda_form(
    operands: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda params body): a single body expression, closed over env
    return make_closure(head(operands), cadr(operands), env)
