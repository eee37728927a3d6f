import pytest
from hypothesis import given, strategies as st

from sigma.types.errors import SigmaRecursionError, SigmaSyntaxError
from sigma.types.integer import I64_MAX
from sigma.types.symbol import Symbol
from sigma.reader.parser import lex, read, TokenStream, SYMBOL_CHARS
from sigma.printer import to_lisp_string


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("42", [("number", "42")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("(+ 1 2)", [("lparen", "("), ("symbol", "+"), ("number", "1"), ("number", "2"), ("rparen", ")")]),
        ("  \n list-one\n", [("symbol", "list-one")]),
        ("(1)", [("lparen", "("), ("number", "1"), ("rparen", ")")]),
        ("()", [("lparen", "("), ("rparen", ")")]),
        ("-5", [("symbol", "-5")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("5", 5),
        ("123456789", 123456789),
        ("007", 7),
        ("foo", Symbol("foo")),
        ("list-one", Symbol("list-one")),
        ("+", Symbol("+")),
        ("()", []),
        ("(1 2 3)", [1, 2, 3]),
        ("(+ 1 2 3)", [Symbol("+"), 1, 2, 3]),
        ("(1 (2 3 (4 5)))", [1, [2, 3, [4, 5]]]),
        ("( 1\n2 )", [1, 2]),
        (str(I64_MAX), I64_MAX),
        ("0" * 5000 + "1", 1),
        ("0" * 30 + str(I64_MAX), I64_MAX),
    ]
)
def test_parser(source, expected):
    result = read(source)
    assert result == [expected]


def test_read_multiple_top_level_forms():
    forms = read("5 5 5 5")
    assert forms == [5, 5, 5, 5]

    forms = read("(define foobar 15)\nfoobar")
    assert forms == [[Symbol("define"), Symbol("foobar"), 15], Symbol("foobar")]


@pytest.mark.parametrize("source", ["", "   ", "\n\n", " \t\r\n"])
def test_blank_input_reads_nothing(source):
    assert read(source) == []


def test_token_stream_returns_none_at_end():
    stream = TokenStream(lex("x"))
    assert stream.parse_expr() == Symbol("x")
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source,message",
    [
        ("(1 2", "unterminated list"),
        ("((1) (2)", "unterminated list"),
        ("(", "unterminated list"),
        (")", "unexpected character: )"),
        ("(1))", "unexpected character: )"),
        ("é", "unexpected character: é"),
        ("(a λ)", "unexpected character: λ"),
        ("12abc", "error parsing number: 12abc"),
        ("9223372036854775808", "error parsing number: 9223372036854775808 out of range"),
        ("1" * 5000, f"error parsing number: {'1' * 5000} out of range"),
        ("1" * 20, f"error parsing number: {'1' * 20} out of range"),
    ]
)
def test_parse_errors(source, message):
    with pytest.raises(SigmaSyntaxError) as excinfo:
        read(source)
    assert excinfo.value.message == message


def test_unexpected_character_reports_position():
    with pytest.raises(SigmaSyntaxError) as excinfo:
        read("(a b\n  #? é)")
    assert excinfo.value.position == 10


def test_deep_nesting_is_a_sigma_error():
    with pytest.raises(SigmaRecursionError):
        read("(" * 100_000 + ")" * 100_000)


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(alphabet=SYMBOL_CHARS, min_size=1, max_size=10).filter(
    lambda s: not s[0].isdigit()
).map(Symbol)

integer_strat = st.integers(min_value=0, max_value=I64_MAX)

sexpr_strat = st.recursive(
    st.one_of(symbol_strat, integer_strat),
    lambda children: st.lists(children, max_size=5),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexpr_strat)
def test_printed_form_reads_back(sexpr):
    assert read(to_lisp_string(sexpr)) == [sexpr]


@given(st.text(max_size=40))
def test_reader_fails_only_with_syntax_errors(source):
    try:
        read(source)
    except SigmaSyntaxError:
        pass
