import pytest
from hypothesis import given, strategies as st

from mlisp.errors import BadParse, LexError, ParseEOF, ParseError
from mlisp.reader.lexer import Token, lex, tokenize
from mlisp.reader.parser import ParseFailure, ParseSuccess, TokenStream, parse, parse_at, parse_atom
from mlisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("literal", "a")]),
        ("(+ 1 2)", [("lparen", "("), ("literal", "+"), ("literal", "1"), ("literal", "2"), ("rparen", ")")]),
        ("(a(b)c)", [("lparen", "("), ("literal", "a"), ("lparen", "("), ("literal", "b"),
                     ("rparen", ")"), ("literal", "c"), ("rparen", ")")]),
        ("  (\n foo\tbar )  ", [("lparen", "("), ("literal", "foo"), ("literal", "bar"), ("rparen", ")")]),
        ("())", [("lparen", "("), ("rparen", ")"), ("rparen", ")")]),
        ("!= <= -3.5e2", [("literal", "!="), ("literal", "<="), ("literal", "-3.5e2")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize("source", ["", "    ", "\n\t\r\n"])
def test_lexer_blank_input_has_no_tokens(source):
    assert tokenize(source) == []


def test_tokens_are_named_tuples():
    tok = tokenize("x")[0]
    assert tok == Token("literal", "x")
    assert tok.kind == "literal"
    assert tok.text == "x"


@pytest.mark.parametrize(
    "source,offset",
    [
        ("foo\x00bar", 3),
        ("(a \x07)", 3),
        ("\x1b", 0),
    ]
)
def test_lexer_rejects_control_characters(source, offset):
    with pytest.raises(LexError) as info:
        tokenize(source)
    assert info.value.offset == offset


word_strat = st.text(
    st.characters(categories=("Ll", "Lu", "Nd"), include_characters="+-*/=!._"),
    min_size=1, max_size=8,
)


@given(st.lists(word_strat, min_size=1, max_size=10))
def test_literals_adjacent_to_parens(words):
    source = "".join(f"({w})" for w in words)
    expected = []
    for w in words:
        expected += [("lparen", "("), ("literal", w), ("rparen", ")")]
    assert tokenize(source) == expected


# -------------------------------
# Parser
# -------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("+7", 7.0),
        ("foo", Symbol("foo")),
        ("1_000", Symbol("1_000")),
        ("1.2.3", Symbol("1.2.3")),
        ("(+ 1 2)", (Symbol("+"), 1.0, 2.0)),
        ("()", ()),
        ("((f))", ((Symbol("f"),),)),
        ("(+ (+ 2.5 9.3) (+ 2.5 9.3))", (Symbol("+"),
                                         (Symbol("+"), 2.5, 9.3),
                                         (Symbol("+"), 2.5, 9.3))),
    ]
)
def test_parser(source, expected):
    assert parse(tokenize(source)) == expected


def test_numbers_parse_as_floats():
    result = parse(tokenize("(1 x)"))
    assert type(result[0]) is float
    assert isinstance(result[1], Symbol)


@pytest.mark.parametrize(
    "source,error,message",
    [
        ("(1 2", BadParse, "Unclosed delimiter"),
        ("(", BadParse, "Unclosed delimiter"),
        ("((a) (b)", BadParse, "Unclosed delimiter"),
        (")", BadParse, "Unexpected ) encountered."),
        ("", ParseEOF, "EOF"),
    ]
)
def test_parse_failures(source, error, message):
    with pytest.raises(error) as info:
        parse(tokenize(source))
    assert isinstance(info.value, ParseError)
    assert str(info.value) == message


def test_parse_returns_only_the_first_root_expression():
    tokens = tokenize("(print 1) (print 2)")
    assert parse(tokens) == (Symbol("print"), 1.0)


def test_trailing_garbage_is_not_reported():
    assert parse(tokenize("1 ) ) (")) == 1.0


def test_parse_at_reports_next_index():
    tokens = tokenize("(+ 1 2)")
    assert parse_at(tokens, 0) == ParseSuccess(5, (Symbol("+"), 1.0, 2.0))
    assert parse_at(tokens, 1) == ParseSuccess(2, Symbol("+"))


def test_parse_at_failure_categories():
    tokens = tokenize("(+ 1 2)")
    end = parse_at(tokens, len(tokens))
    assert isinstance(end, ParseFailure)
    assert isinstance(end.error, ParseEOF)

    close = parse_at(tokens, 4)
    assert isinstance(close, ParseFailure)
    assert isinstance(close.error, BadParse)


def test_parse_at_reports_deep_nesting_as_failure():
    result = parse_at(tokenize("(" * 100000), 0)
    assert isinstance(result, ParseFailure)
    assert isinstance(result.error, BadParse)
    assert str(result.error) == "expression nested too deeply"

    with pytest.raises(BadParse):
        parse(tokenize("(" * 100000 + ")" * 100000))


def test_token_stream_advances_past_expression():
    stream = TokenStream(tokenize("(a b) c"))
    assert stream.parse_expr() == (Symbol("a"), Symbol("b"))
    assert stream.position == 4
    assert stream.parse_expr() == Symbol("c")
    assert stream.at_end()


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_float_literals_read_back(x):
    assert parse_atom(repr(x)) == x


@given(word_strat.filter(lambda s: not any(c.isdigit() for c in s)))
def test_non_numeric_words_are_symbols(word):
    # a few spellings of infinity/nan read as floats, like any float literal
    if word.lower().lstrip("+-") in ("inf", "infinity", "nan"):
        return
    assert parse_atom(word) == Symbol(word)
