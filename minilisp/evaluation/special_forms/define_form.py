from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.values import head, cadr, caddr, make_closure


def define_form(
    operands: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name params body)
    Builds a closure over the current environment and binds it to name, so the
    body can refer to name recursively. Returns the closure.
    """
    name = head(operands)
    closure = make_closure(cadr(operands), caddr(operands), env)
    return env.bind(name, closure)
