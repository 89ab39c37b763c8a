import io

import pytest

from minilisp import __main__ as cli
from minilisp import config
from minilisp.errors import UNDEFINED
from minilisp.interpreter import Interpreter
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


def test_eval_returns_last_result():
    interp = Interpreter()
    assert interp.eval("(set x 2) (* x 21)") == 42.0


def test_eval_of_blank_code_is_nil():
    assert Interpreter().eval("   ") is Nil


def test_interpreters_are_independent():
    a, b = Interpreter(), Interpreter()
    a.eval("(set x 1)")
    assert a.eval("x") == 1.0
    assert b.eval("x") == Symbol(UNDEFINED)


def test_eval_to_string():
    interp = Interpreter()
    assert interp.eval_to_string("'(1 . 2)") == "(1 . 2)"
    assert interp.eval_to_string("(define sq (x) (* x x)) (sq 12)") == "144"


def test_program_with_several_definitions():
    source = """
    (define fib (n)
      (cond ((< n 2) n)
            (T (+ (fib (- n 1)) (fib (- n 2))))))
    (fib 10)
    """
    assert Interpreter().eval(source) == 55.0


# -----------------------------------------------------
# Command line
# -----------------------------------------------------

@pytest.fixture
def quiet_logging(monkeypatch):
    monkeypatch.setattr(config, "configure_logging", lambda level=None, stream=None: None)


def test_run_script_prints_each_result(tmp_path):
    program = tmp_path / "prog.lisp"
    program.write_text("(set x 5)\n(* x x)\n'(a . b)\n")
    out = io.StringIO()
    assert cli.run_script(program, print_results=True, out=out) == 0
    assert out.getvalue() == "5\n25\n(a . b)\n"


def test_run_script_is_silent_by_default(tmp_path):
    program = tmp_path / "prog.lisp"
    program.write_text("(+ 1 2)")
    out = io.StringIO()
    assert cli.run_script(program, out=out) == 0
    assert out.getvalue() == ""


def test_main_runs_a_program(tmp_path, capsys, quiet_logging):
    program = tmp_path / "prog.lisp"
    program.write_text("(define sq (x) (* x x)) (sq 9)")
    assert cli.main([str(program), "--print"]) == 0
    assert capsys.readouterr().out == "#<closure>\n81\n"


def test_main_reports_missing_file(tmp_path, capsys, quiet_logging):
    assert cli.main([str(tmp_path / "missing.lisp")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_main_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--log-level", "chatty"])


def test_runaway_recursion_in_a_script_exits_nonzero(tmp_path, quiet_logging):
    program = tmp_path / "loop.lisp"
    program.write_text("(define loop (n) (loop n)) (loop 1)")
    assert cli.run_script(program) == 1


def test_main_reports_undecodable_file(tmp_path, capsys, quiet_logging):
    program = tmp_path / "latin1.lisp"
    program.write_bytes(b"(quote caf\xe9)")
    assert cli.main([str(program)]) == 1
    assert "cannot decode" in capsys.readouterr().err


def test_main_reports_bad_recursion_limit_setting(tmp_path, capsys, monkeypatch, quiet_logging):
    monkeypatch.setenv("MINILISP_RECURSION_LIMIT", "lots")
    assert cli.main([str(tmp_path / "prog.lisp")]) == 1
    assert "MINILISP_RECURSION_LIMIT must be an integer" in capsys.readouterr().err


def test_main_reports_bad_log_level_setting(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("MINILISP_LOG_LEVEL", "chatty")
    assert cli.main([str(tmp_path / "prog.lisp")]) == 1
    assert "unknown log level 'CHATTY'" in capsys.readouterr().err
