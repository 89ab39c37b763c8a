"""
Interactive read-eval-print loop for minilisp.

Lines are accumulated until the parentheses balance, then the input is read
as one expression, evaluated in the session's global environment and
rendered. `exit` or `quit` on a fresh line ends the session, as does end of
input; `help` prints example expressions.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from minilisp.interpreter import Interpreter
from minilisp.printer import to_string
from minilisp.reader.parser import parse
from minilisp import config

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")
HELP_COMMAND = "help"

BANNER = """\
=====================================
  LISP Interpreter REPL
  Type 'exit' or 'quit' to exit
  Type 'help' for examples
=====================================

"""

HELP_TEXT = """
Example expressions:
Numbers and symbols:
  42                                   ; Self-evaluating number
  (set x 10)                           ; Bind variable
  x                                    ; Lookup variable

Arithmetic:
  (+ 2 3)                              ; 5
  (* (+ 1 2) (- 5 2))                  ; 9
  (/ 10 3)                             ; 3.33333
  (% 17 5)                             ; 2

Comparison:
  (< 5 10)                             ; T
  (>= 10 10)                           ; T
  (eq 7 7)                             ; T

Quote:
  (quote (a b c))                      ; (a b c) - unevaluated
  '(a b c)                             ; Same as above

Conditionals:
  (if (> 5 3) 'yes 'no)                ; yes
  (and (> 5 3) (< 2 4))                ; T - short-circuits
  (or (< 5 3) (> 8 6))                 ; T - short-circuits
  (cond ((< 5 3) 'first)
        ((> 5 3) 'second)
        (T 'third))                    ; second

User-defined functions:
  (define square (x) (* x x))          ; Define function
  (square 7)                           ; 49
  (define fact (n)
    (if (<= n 1) 1
      (* n (fact (- n 1)))))           ; Recursive factorial
  (fact 5)                             ; 120

Lambda functions:
  ((lambda (x) (* x 2)) 5)             ; 10
  (set double (lambda (x) (* x 2)))    ; Assign lambda
  (double 8)                           ; 16

List operations:
  (cons 1 '(2 3))                      ; (1 2 3)
  (car '(a b c))                       ; a
  (cdr '(a b c))                       ; (b c)

"""


def is_balanced(text: str) -> bool:
    """True once every '(' outside a string literal has been closed.

    A surplus ')' also counts as complete: the reader stops there anyway.
    """
    depth = 0
    in_string = False
    for i, ch in enumerate(text):
        if ch == '"' and (i == 0 or text[i - 1] != "\\"):
            in_string = not in_string
        if in_string:
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return True
    return depth == 0


def is_blank(text: str) -> bool:
    return not text or text.isspace()


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompts: Optional[tuple[str, str]] = None,
    ):
        # Keep a single interpreter so definitions persist across inputs
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt, self.continuation_prompt = prompts or config.get_prompts()

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_expression(self) -> Optional[str]:
        """Read lines until the input balances. None at end of input."""
        buffer = ""
        first_line = True
        while True:
            self.write(self.prompt if first_line else self.continuation_prompt)
            line = self.stdin.readline()
            if not line:
                return None
            if first_line:
                command = line.strip()
                if command in EXIT_COMMANDS or command == HELP_COMMAND:
                    return command
                first_line = False
            buffer += line
            if is_balanced(buffer):
                return buffer

    def eval_and_render(self, text: str) -> str:
        # Reading and printing recurse on nesting depth too
        try:
            return to_string(self.interp.evaluate(parse(text)))
        except RecursionError:
            logger.error("recursion too deep while handling %r", text.strip()[:60])
            return "Error: maximum recursion depth exceeded"

    def run(self) -> None:
        self.write(BANNER)
        while True:
            text = self.read_expression()
            if text is None or text in EXIT_COMMANDS:
                self.write("Goodbye!\n")
                break
            if text == HELP_COMMAND:
                self.write(HELP_TEXT)
                continue
            if is_blank(text):
                continue
            self.write(self.eval_and_render(text) + "\n\n")
