from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.values import head, cadr, caddr, is_truthy


def if_form(
    operands: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    test = evaluate_fn(head(operands), env)
    # Anything but Nil is true, including 0 and ""
    if is_truthy(test):
        return evaluate_fn(cadr(operands), env)
    return evaluate_fn(caddr(operands), env)
