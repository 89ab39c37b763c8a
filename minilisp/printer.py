"""Textual rendering of minilisp values.

The output is s-expression syntax: lists space separated, ` . ` before a
non-list tail, integral numbers without a fractional part. Procedures render
as `#<closure>` / `#<primitive>` and so do not read back.
"""
from __future__ import annotations

import math
from io import StringIO

from minilisp import LispValue
from minilisp.types.builtin import Builtin
from minilisp.types.closure import Closure
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol

CLOSURE_TAG = "#<closure>"
PRIMITIVE_TAG = "#<primitive>"


def format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return format(value, "g")


def _write(value: LispValue, buffer: StringIO) -> None:
    if value is Nil:
        buffer.write("()")
    elif isinstance(value, float):
        buffer.write(format_number(value))
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, str):
        buffer.write(f'"{value}"')
    elif isinstance(value, Closure):
        buffer.write(CLOSURE_TAG)
    elif isinstance(value, Builtin):
        buffer.write(PRIMITIVE_TAG)
    elif isinstance(value, Pair):
        buffer.write("(")
        current: LispValue = value
        while True:
            _write(current.head, buffer)
            current = current.tail
            if isinstance(current, Pair):
                buffer.write(" ")
                continue
            if current is not Nil:
                buffer.write(" . ")
                _write(current, buffer)
            break
        buffer.write(")")
    else:
        buffer.write(str(value))


def to_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def print_value(value: LispValue, file=None) -> None:
    print(to_string(value), file=file)
