from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.values import head, tail, cadr, is_nil, is_truthy


def cond_form(
    operands: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(cond (test expr) ...): the expr of the first clause whose test is true.

    Clauses after the first true test are not evaluated. Nil when none match.
    """
    clauses = operands
    while not is_nil(clauses):
        clause = head(clauses)
        if is_truthy(evaluate_fn(head(clause), env)):
            return evaluate_fn(cadr(clause), env)
        clauses = tail(clauses)
    return Nil
