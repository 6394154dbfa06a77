"""Tests for the Pratt parser."""

import pytest

from prattcalc.errors import ParseError
from prattcalc.node import (
    InfixExpression,
    IntegerLiteral,
    PrefixExpression,
    format_expression,
)
from prattcalc.parse import Parse, Precedence, parse_source
from prattcalc.token import TokenKind
from prattcalc.tokenize import Lexer


def parse(source):
    return Parse(Lexer(source)).parse()


def test_parser_primes_both_lookahead_slots():
    parser = Parse(Lexer("1+2"))
    assert parser.current.kind == TokenKind.Int
    assert parser.peek.kind == TokenKind.Plus


def test_integer_literal():
    node = parse("42")
    assert node == IntegerLiteral(42)
    assert node.token.literal == "42"


def test_prefix_expression():
    assert parse("-5") == PrefixExpression("-", IntegerLiteral(5))


def test_infix_expression():
    assert parse("1+2") == InfixExpression(IntegerLiteral(1), "+", IntegerLiteral(2))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1+2*3", "(1 + (2 * 3))"),
        ("1*2+3", "((1 * 2) + 3)"),
        ("1-2-3", "((1 - 2) - 3)"),
        ("8/4/2", "((8 / 4) / 2)"),
        ("-1+2", "((-1) + 2)"),
        ("-1-2", "((-1) - 2)"),
        ("--1", "(-(-1))"),
        ("2*-3", "(2 * (-3))"),
        ("1+2*3-4/5", "((1 + (2 * 3)) - (4 / 5))"),
    ],
)
def test_precedence_and_associativity(source, expected):
    assert format_expression(parse(source)) == expected


def test_precedence_ordering():
    assert Precedence.LOWEST < Precedence.SUM < Precedence.MUL < Precedence.PREFIX


@pytest.mark.parametrize("source", ["", "+", "*", "/", "%", "x", " 1"])
def test_no_prefix_rule_returns_none(source):
    parser = Parse(Lexer(source))
    assert parser.parse() is None
    assert len(parser.errors) == 1


def test_missing_right_operand():
    parser = Parse(Lexer("1+"))
    assert parser.parse() is None
    assert parser.errors[0].message == "expected an expression"
    assert parser.errors[0].location == 2


def test_missing_prefix_operand():
    parser = Parse(Lexer("-*2"))
    assert parser.parse() is None
    assert parser.errors[0].message == "no prefix parse rule for '*'"
    assert parser.errors[0].location == 1


def test_percent_stops_the_loop():
    parser = Parse(Lexer("5%2"))
    assert parser.parse() == IntegerLiteral(5)
    assert not parser.at_end()
    assert parser.peek.kind == TokenKind.Percent


def test_parse_source_rejects_trailing_tokens():
    with pytest.raises(ParseError) as excinfo:
        parse_source("5%2")
    assert excinfo.value.message == "unexpected '%'"
    assert excinfo.value.location == 1
    assert str(excinfo.value) == "5%2\n ^ unexpected '%'"


def test_parse_source_rejects_whitespace():
    with pytest.raises(ParseError) as excinfo:
        parse_source("1 +2")
    assert excinfo.value.message == "unexpected ' '"


def test_parse_source_empty():
    with pytest.raises(ParseError) as excinfo:
        parse_source("")
    assert str(excinfo.value) == "\n^ expected an expression"


def test_literal_longer_than_the_int_str_limit():
    node = parse("1" * 5000)
    assert node == IntegerLiteral((10**5000 - 1) // 9)


def test_format_long_flat_sum():
    text = format_expression(parse("+".join(["1"] * 3000)))
    assert text.startswith("(" * 2999 + "1 + 1)")
    assert text.endswith(" + 1)")


def test_deep_negation_reports_an_error():
    parser = Parse(Lexer("-" * 10000 + "1"))
    assert parser.parse() is None
    assert parser.errors[0].message == "expression is nested too deeply"
