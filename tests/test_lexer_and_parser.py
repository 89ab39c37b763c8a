import math

import pytest
from hypothesis import given, strategies as st

from minilisp.printer import to_string
from minilisp.reader.parser import parse, parse_all, Reader
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol
from minilisp.values import eq, head, tail, cadr


@pytest.mark.parametrize(
    "source, expected",
    [
        ("42", "42"),
        ("-1.5", "-1.5"),
        ("abc", "abc"),
        ('"hi there"', '"hi there"'),
        ("(a b c)", "(a b c)"),
        ("(a (b c) d)", "(a (b c) d)"),
        ("(a\n\t b)", "(a b)"),
        ("'a", "(quote a)"),
        ("'(1 2)", "(quote (1 2))"),
        ("(1 . 2)", "(1 . 2)"),
        ("(1 2 . 3)", "(1 2 . 3)"),
        ("(1 . (2 3))", "(1 2 3)"),
        ("(a .b)", "(a .b)"),
        ("(. 2)", "(. 2)"),
        ("()", "()"),
        ("1e3", "1000"),
        ("12abc", "12abc"),
        ("a b c", "a"),
        ('(f "a b" c)', '(f "a b" c)'),
        ("(a b", "(a b)"),
        ("((a", "((a))"),
        (")", "()"),
    ]
)
def test_parser(source, expected):
    assert to_string(parse(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("42", 42.0),
        ("+7", 7.0),
        ("1.", 1.0),
        (".5", 0.5),
        ("-2e-2", -0.02),
        ("0x1A", 26.0),
        ("-0x10", -16.0),
        ("inf", math.inf),
        ("-Infinity", -math.inf),
        ("0x1p2000", math.inf),
        ("-0x1p99999", -math.inf),
        ("0x1p-99999", 0.0),
    ]
)
def test_numbers(source, expected):
    result = parse(source)
    assert isinstance(result, float)
    assert result == expected


def test_nan_reads_as_number():
    assert math.isnan(parse("nan"))


def test_oversized_hex_inside_a_list_saturates():
    expr = parse("(+ 0x1p2000 1)")
    assert cadr(expr) == math.inf
    assert to_string(expr) == "(+ inf 1)"


@pytest.mark.parametrize("source", ["+", "-", ".", "1e", "1_000", "0x", "x1", "1.2.3", "١٢", "٣.٥", "0x١"])
def test_non_numbers_read_as_symbols(source):
    assert parse(source) == Symbol(source)


def test_dotted_pair_has_atom_tail():
    p = parse("(1 . 2)")
    assert isinstance(p, Pair)
    assert p.head == 1.0
    assert p.tail == 2.0


def test_quote_sugar():
    q = parse("'x")
    assert head(q) == Symbol("quote")
    assert cadr(q) == Symbol("x")
    assert tail(tail(q)) is Nil


def test_strings_have_no_escapes():
    assert parse('"(a)"') == "(a)"
    assert parse(r'"a\n"') == "a\\n"
    assert parse('""') == ""


def test_unterminated_string_reads_as_symbol():
    assert parse('"abc') == Symbol('"abc')


def test_empty_input_and_empty_list_are_both_nil():
    # Known ambiguity: blank input cannot be told apart from ()
    assert parse("") is Nil
    assert parse("   \n") is Nil
    assert parse("()") is Nil
    assert parse("( )") is Nil


def test_parse_all_reads_every_expression():
    exprs = list(parse_all("1 (a) 'b"))
    assert len(exprs) == 3
    assert exprs[0] == 1.0
    assert to_string(exprs[1]) == "(a)"
    assert to_string(exprs[2]) == "(quote b)"


def test_parse_all_skips_stray_close_parens():
    assert list(parse_all(") 1 )")) == [1.0]
    assert list(parse_all("   ")) == []


def test_reader_stops_after_one_expression():
    reader = Reader("(a) rest")
    assert to_string(reader.read_expr()) == "(a)"
    assert not reader.at_end()
    assert reader.read_expr() == Symbol("rest")
    assert reader.at_end()


def _same_shape(a, b):
    if isinstance(a, Pair) and isinstance(b, Pair):
        return _same_shape(a.head, b.head) and _same_shape(a.tail, b.tail)
    return eq(a, b)


@pytest.mark.parametrize(
    "source",
    ["(1 2 3)", "(a (b (c)) d)", '("x" 1.5 sym)', "(1 . 2)", "((a . b) c . d)", "(quote (x))", "(() ())"],
)
def test_print_then_read_round_trip(source):
    first = parse(source)
    second = parse(to_string(first))
    assert _same_shape(first, second)
    assert first is not second
    assert not eq(first, second)


@given(st.text(max_size=200))
def test_parser_no_crash(source):
    parse(source)
    list(parse_all(source))


def test_round_trip_keeps_only_six_significant_digits():
    # Numbers print with %g, so longer mantissas come back rounded
    first = parse("(1.23456789 0.5)")
    assert to_string(first) == "(1.23457 0.5)"
    second = parse(to_string(first))
    assert not eq(first.head, second.head)
    assert eq(cadr(first), cadr(second))
