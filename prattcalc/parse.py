import logging
from enum import IntEnum
from typing import Optional

from prattcalc.digits import parse_decimal
from prattcalc.errors import ParseError
from prattcalc.node import Expression, new_binary, new_number, new_unary
from prattcalc.token import Token, TokenKind, describe
from prattcalc.tokenize import Lexer

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    LOWEST = 0
    SUM = 1
    MUL = 2
    PREFIX = 3


PRECEDENCES = {
    TokenKind.Plus: Precedence.SUM,
    TokenKind.Minus: Precedence.SUM,
    TokenKind.Slash: Precedence.MUL,
    TokenKind.Asterisk: Precedence.MUL,
}


def precedence_of(token: Token) -> Precedence:
    return PRECEDENCES.get(token.kind, Precedence.LOWEST)


class Parse:
    """Pratt parser over the tokens of a single expression.

    ``current`` is the token being parsed and ``peek`` the one after it.
    Syntax failures make the parse functions return ``None``; the reason is
    appended to ``errors``.
    """

    lexer: Lexer
    current: Token
    peek: Token
    errors: list[ParseError]

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.errors = []
        self.peek = lexer.next_token()
        self.advance()

    def parse(self) -> Optional[Expression]:
        try:
            return self.parse_expression(Precedence.LOWEST)
        except RecursionError:
            return self.error(self.current, "expression is nested too deeply")

    def parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        match self.current.kind:
            case TokenKind.Int:
                left = self.parse_integer_literal()
            case TokenKind.Minus:
                left = self.parse_prefix_expression()
            case TokenKind.EndOfInput:
                return self.error(self.current, "expected an expression")
            case _:
                return self.error(
                    self.current,
                    f"no prefix parse rule for {describe(self.current)}",
                )

        while (
            left is not None
            and self.peek.kind != TokenKind.EndOfInput
            and precedence < precedence_of(self.peek)
        ):
            match self.peek.kind:
                case (
                    TokenKind.Plus
                    | TokenKind.Minus
                    | TokenKind.Slash
                    | TokenKind.Asterisk
                ):
                    self.advance()
                    left = self.parse_infix_expression(left)
                case _:
                    return left
        return left

    def parse_integer_literal(self) -> Optional[Expression]:
        token = self.current
        try:
            value = parse_decimal(token.literal)
        except ValueError:
            return self.error(token, f"could not parse {describe(token)} as integer")
        return new_number(value, token)

    def parse_prefix_expression(self) -> Optional[Expression]:
        token = self.current
        self.advance()
        operand = self.parse_expression(Precedence.PREFIX)
        if operand is None:
            return None
        return new_unary(operand, token)

    def parse_infix_expression(self, left: Expression) -> Optional[Expression]:
        token = self.current
        precedence = precedence_of(token)
        self.advance()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return new_binary(left, right, token)

    def at_end(self) -> bool:
        return self.peek.kind == TokenKind.EndOfInput

    def advance(self) -> None:
        self.current = self.peek
        self.peek = self.lexer.next_token()

    def error(self, token: Token, message: str) -> Optional[Expression]:
        logger.debug("syntax error at %d: %s", token.location, message)
        self.errors.append(ParseError(message, self.lexer.source, token.location))
        return None


def parse_source(source: str) -> Expression:
    """Parse ``source`` as one complete expression.

    Raises ParseError when no expression can be built or when tokens are left
    over after it (a stray ``%`` or a space, for instance).
    """
    parser = Parse(Lexer(source))
    node = parser.parse()
    if node is None:
        raise parser.errors[0]
    if not parser.at_end():
        token = parser.peek
        raise ParseError(f"unexpected {describe(token)}", source, token.location)
    return node
