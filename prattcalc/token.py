from dataclasses import dataclass, field
from enum import IntEnum


class TokenKind(IntEnum):
    Int = 1
    Plus = 2
    Minus = 3
    Asterisk = 4
    Slash = 5
    Percent = 6
    Illegal = 7
    EndOfInput = 8


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str
    location: int = field(default=0, compare=False)


def new_token(kind: TokenKind, source: str, start: int, end: int) -> Token:
    return Token(kind, source[start:end], start)


def describe(token: Token) -> str:
    if token.kind == TokenKind.EndOfInput:
        return "end of input"
    return repr(token.literal)
