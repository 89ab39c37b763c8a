"""Runtime environment for minilisp.

An Environment is one frame of bindings plus an `outer` link to its parent.
The frame keeps two ordinary Lisp lists, `symbols` and `values`, in lock-step
and ordered most-recently-bound first. Binding never overwrites: it conses a
new entry onto the front of both lists, so a later binding of the same symbol
shadows the earlier one while both stay in the frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from minilisp import LispValue
from minilisp.errors import undefined
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol

_MISSING = object()


class Environment:
    """One frame of symbol/value bindings chained to its lexical parent."""

    __slots__ = ("symbols", "values", "outer")

    def __init__(
        self,
        symbols: LispValue = Nil,
        values: LispValue = Nil,
        outer: Optional[Environment] = None,
    ):
        self.symbols: LispValue = symbols
        self.values: LispValue = values
        self.outer: Environment | None = outer

    @classmethod
    def extend(cls, params: LispValue, args: LispValue, outer: Environment) -> Environment:
        """Build a call frame that binds `params` positionally to `args`.

        The two lists are used as the frame as they are. No arity check is
        made: surplus arguments are never reached by lookup, and a parameter
        without an argument reads as Nil.
        """
        return cls(params, args, outer)

    def bind(self, symbol: LispValue, value: LispValue) -> LispValue:
        """Add a binding to this frame, shadowing any earlier one, and return `value`."""
        self.symbols = Pair(symbol, self.symbols)
        self.values = Pair(value, self.values)
        return value

    def _find_in_frame(self, symbol: Symbol) -> LispValue:
        symbols, values = self.symbols, self.values
        while isinstance(symbols, Pair):
            candidate = symbols.head
            if isinstance(candidate, Symbol) and candidate == symbol:
                return values.head if isinstance(values, Pair) else Nil
            symbols = symbols.tail
            values = values.tail if isinstance(values, Pair) else Nil
        return _MISSING

    def lookup(self, symbol: LispValue) -> LispValue:
        """Return the innermost value bound to `symbol`, or the UNDEFINED sentinel."""
        if isinstance(symbol, Symbol):
            for env in self.chain():
                value = env._find_in_frame(symbol)
                if value is not _MISSING:
                    return value
        return undefined()

    def chain(self) -> Iterator[Environment]:
        """Yield this environment and each of its parents, innermost first."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def bindings(self) -> Iterator[tuple[LispValue, LispValue]]:
        """Yield (symbol, value) pairs of this frame in lookup order."""
        symbols, values = self.symbols, self.values
        while isinstance(symbols, Pair):
            yield symbols.head, values.head if isinstance(values, Pair) else Nil
            symbols = symbols.tail
            values = values.tail if isinstance(values, Pair) else Nil

    def __len__(self) -> int:
        return sum(1 for _ in self.bindings())

    def __bool__(self) -> bool:
        return True

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.bindings():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging."""
        chain = []
        for env in self.chain():
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
        return f"<Environment chain: {' -> '.join(chain)}>"
