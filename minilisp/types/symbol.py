from __future__ import annotations
import sys


class Symbol:
    """A name. Two Symbols are equal when their text is equal.

    Reading the same name twice gives two distinct Symbol objects, so
    compare with ``==`` and never with ``is``.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Shared string storage; equality below still compares text
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
