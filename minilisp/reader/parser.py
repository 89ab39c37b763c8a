"""
  Lisp Reader

- Single pass, recursive descent, one character of lookahead.
- Builds minilisp values directly:

    - ()            -> Nil
    - (a b c)       -> Pair chain ending in Nil
    - (a b . c)     -> Pair chain ending in c
    - 'x            -> (quote x)
    - "text"        -> str, no escape processing
    - 42, -1.5e3    -> float (anything C strtod would take in full,
                       including inf, nan and 0x1Ap0 style hex)
    - anything else -> Symbol

The reader never raises. End of input reads as Nil, an unclosed list reads as
the part that was seen, and a stray ')' reads as Nil without being consumed.
"""

from __future__ import annotations

import math
import re
from typing import Iterator

from minilisp import SExpression
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol
from minilisp.values import make_list, make_number, make_string, make_symbol


NUMBER_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"  # decimal
    r"|[+-]?(?:inf(?:inity)?|nan)",  # specials
    re.IGNORECASE | re.ASCII,
)
HEX_NUMBER_RE = re.compile(
    r"[+-]?0x(?:[0-9a-f]+(?:\.[0-9a-f]+)?|\.[0-9a-f]+)(?:p[+-]?\d+)?",
    re.IGNORECASE | re.ASCII,
)

QUOTE = "quote"
DELIMITERS = "()"


def read_atom_text(text: str) -> SExpression:
    """Number if the whole token is numeric, otherwise a Symbol."""
    if NUMBER_RE.fullmatch(text):
        return make_number(float(text))
    if HEX_NUMBER_RE.fullmatch(text):
        try:
            return make_number(float.fromhex(text))
        except OverflowError:
            # Out of range saturates to infinity, as strtod does
            return make_number(-math.inf if text.startswith("-") else math.inf)
    return make_symbol(text)


class Reader:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        """The character `offset` places ahead, or '' past the end."""
        i = self.pos + offset
        return self.source[i] if i < len(self.source) else ""

    def advance(self) -> str:
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def skip_whitespace(self) -> None:
        while self.peek().isspace():
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_whitespace()
        return self.pos >= len(self.source)

    def read_expr(self) -> SExpression:
        self.skip_whitespace()
        ch = self.peek()
        if not ch:
            return Nil
        if ch == "(":
            return self._read_list()
        if ch == "'":
            self.advance()
            return make_list(make_symbol(QUOTE), self.read_expr())
        if ch == '"':
            return self._read_string()
        return self._read_atom()

    def _at_dot(self) -> bool:
        # A lone '.' followed by whitespace or ')' marks a dotted tail
        if self.peek() != ".":
            return False
        nxt = self.peek(1)
        return nxt == ")" or (nxt != "" and nxt.isspace())

    def _read_list(self) -> SExpression:
        self.advance()  # consume '('
        self.skip_whitespace()
        if self.peek() == ")":
            self.advance()
            return Nil

        first: SExpression = Nil
        last: Pair | None = None
        while self.peek() not in (")", ""):
            elem = self.read_expr()
            self.skip_whitespace()

            if self._at_dot():
                self.advance()  # consume '.'
                rest = self.read_expr()
                self.skip_whitespace()
                if self.peek() == ")":
                    self.advance()
                if last is None:
                    return Pair(elem, rest)
                last.tail = Pair(elem, rest)
                return first

            cell = Pair(elem, Nil)
            if last is None:
                first = cell
            else:
                last.tail = cell
            last = cell
            self.skip_whitespace()

        if self.peek() == ")":
            self.advance()
        return first

    def _read_string(self) -> SExpression:
        self.advance()  # consume opening '"'
        start = self.pos
        while self.peek() not in ('"', ""):
            self.pos += 1
        text = self.source[start:self.pos]
        if self.peek() == '"':
            self.advance()
            return make_string(text)
        # Unterminated: keep the raw characters, opening quote included
        return make_symbol('"' + text)

    def _read_atom(self) -> SExpression:
        start = self.pos
        while True:
            ch = self.peek()
            if not ch or ch.isspace() or ch in DELIMITERS:
                break
            self.pos += 1
        if self.pos == start:
            return Nil
        return read_atom_text(self.source[start:self.pos])

    def parse_all(self) -> Iterator[SExpression]:
        """Yield every expression left in the source; stray ')' are skipped."""
        while not self.at_end():
            if self.peek() == ")":
                self.advance()
                continue
            yield self.read_expr()


def parse(text: str) -> SExpression:
    """Read one expression from the start of `text`; the rest is ignored."""
    return Reader(text).read_expr()


def parse_all(text: str) -> Iterator[SExpression]:
    return Reader(text).parse_all()
