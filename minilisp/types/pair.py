"""Cons cell, the only structural value.

Lists are right-nested chains of Pairs ending in Nil. Equality is identity:
two Pairs built separately are never equal, whatever they contain.
"""

from __future__ import annotations

from minilisp import LispValue


class Pair:
    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: LispValue):
        self.head: LispValue = head
        self.tail: LispValue = tail

    def __repr__(self) -> str:
        from minilisp.printer import to_string
        return f"Pair{to_string(self)}"
