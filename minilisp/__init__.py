# Core type aliases for minilisp's data model.
# Atoms use plain Python types where one fits: float for Number, str for String.
# Symbol, Pair, Closure and Builtin are small classes under minilisp.types, and
# the empty list is the single Nil instance.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the distinction is for the reader of the code.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
