from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from minilisp import LispValue

if TYPE_CHECKING:
    from minilisp.types.environment import Environment

BuiltinFn = Callable[[LispValue, "Environment"], LispValue]


class Builtin:
    """A predefined procedure backed by a Python function `fn(args, env)`."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: LispValue, env: Environment) -> LispValue:
        return self.fn(args, env)

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"
