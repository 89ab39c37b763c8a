"""Application engine for minilisp.

Builtins are called with the evaluated argument list and the caller's
environment. Closures get exactly one new frame per call, parented at the
environment they captured, never at the caller's: that is what makes scoping
lexical. Anything else in operator position yields the NOT_A_FUNCTION
sentinel.
"""

import logging

from minilisp import LispValue, EvaluatorFn
from minilisp.errors import not_a_function
from minilisp.types.builtin import Builtin
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: LispValue,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate the closure body in a frame binding its params to `args`.

    Params and args are paired positionally with no arity check.
    """
    new_env = fn.bind_arguments(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    proc: LispValue,
    args: LispValue,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if isinstance(proc, Builtin):
        return proc(args, env)
    elif isinstance(proc, Closure):
        return apply_closure(proc, args, evaluate_fn)
    logger.debug("cannot apply non-procedure %r", proc)
    return not_a_function()
