from typing import Optional

from prattcalc.token import Token, TokenKind, new_token

OPERATORS = {
    "+": TokenKind.Plus,
    "-": TokenKind.Minus,
    "*": TokenKind.Asterisk,
    "/": TokenKind.Slash,
    "%": TokenKind.Percent,
}


def is_digit(char: Optional[str]) -> bool:
    # str.isdigit() also accepts things like "²"
    return char is not None and "0" <= char <= "9"


class Lexer:
    source: str
    index: int
    char: Optional[str]

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0
        self.char = source[0] if source else None

    def next_token(self) -> Token:
        start = self.index
        if self.char is None:
            return new_token(TokenKind.EndOfInput, self.source, start, start)
        if is_digit(self.char):
            while is_digit(self.char):
                self.advance()
            return new_token(TokenKind.Int, self.source, start, self.index)
        kind = OPERATORS.get(self.char, TokenKind.Illegal)
        self.advance()
        return new_token(kind, self.source, start, self.index)

    def advance(self) -> None:
        self.index += 1
        if self.index >= len(self.source):
            self.char = None
        else:
            self.char = self.source[self.index]
