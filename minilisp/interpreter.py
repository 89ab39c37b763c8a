from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.builtin.env_builtin import make_global_environment
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import to_string
from minilisp.reader.parser import parse_all
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil


class Interpreter:
    """
    Reads and evaluates minilisp code against one global environment.
    Definitions persist across calls; separate instances share nothing.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else make_global_environment()

    def evaluate(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last result (Nil if none)."""
        result: LispValue = Nil
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result

    def eval_to_string(self, code: str) -> str:
        return to_string(self.eval(code))
