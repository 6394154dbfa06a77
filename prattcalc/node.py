from dataclasses import dataclass, field
from typing import Optional

from prattcalc.digits import format_decimal
from prattcalc.token import Token


@dataclass(frozen=True)
class IntegerLiteral:
    value: int
    token: Optional[Token] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class PrefixExpression:
    operator: str
    operand: "Expression"
    token: Optional[Token] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class InfixExpression:
    left: "Expression"
    operator: str
    right: "Expression"
    token: Optional[Token] = field(default=None, compare=False, repr=False)


Expression = IntegerLiteral | PrefixExpression | InfixExpression


def new_number(value: int, token: Token) -> IntegerLiteral:
    return IntegerLiteral(value, token)


def new_unary(operand: Expression, token: Token) -> PrefixExpression:
    return PrefixExpression(token.literal, operand, token)


def new_binary(left: Expression, right: Expression, token: Token) -> InfixExpression:
    return InfixExpression(left, token.literal, right, token)


def format_expression(node: Expression) -> str:
    # Walked with an explicit stack; a long sum is as deep as it has terms.
    parts: list[str] = []
    stack: list[tuple[Expression, bool]] = [(node, False)]
    while stack:
        current, visited = stack.pop()
        match current:
            case IntegerLiteral(value=value):
                parts.append(format_decimal(value))
            case PrefixExpression(operator=operator, operand=operand):
                if visited:
                    parts.append(f"({operator}{parts.pop()})")
                else:
                    stack.extend([(current, True), (operand, False)])
            case InfixExpression(left=left, operator=operator, right=right):
                if visited:
                    right_text = parts.pop()
                    parts.append(f"({parts.pop()} {operator} {right_text})")
                else:
                    stack.extend([(current, True), (right, False), (left, False)])
            case _:
                raise TypeError(f"not an expression: {current!r}")
    return parts.pop()
