"""User-defined procedure representation for minilisp."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression
from minilisp.types.environment import Environment


class Closure:
    """A first-class procedure: formal parameter list, body and captured env.

    The environment is held by reference, never copied, so bindings added to
    the defining frame after the closure was built are visible to it.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from minilisp.printer import to_string
        with StringIO() as buffer:
            buffer.write("(lambda ")
            buffer.write(to_string(self.params))
            buffer.write(" ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    def bind_arguments(self, args: SExpression) -> Environment:
        """Return the call frame binding params to args, parented at self.env."""
        return Environment.extend(self.params, args, self.env)
