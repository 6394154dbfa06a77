import logging
from typing import Optional

from prattcalc.errors import EvaluationError, InvariantViolation
from prattcalc.node import (
    Expression,
    InfixExpression,
    IntegerLiteral,
    PrefixExpression,
    format_expression,
)
from prattcalc.parse import parse_source

logger = logging.getLogger(__name__)


def evaluate_expression(node: Expression, source: Optional[str] = None) -> int:
    """Reduce ``node`` to an int, left operand before right.

    Uses an explicit stack instead of recursion: the parser folds ``1+1+...``
    into a left-leaning tree as deep as the sum is long.
    """
    values: list[int] = []
    stack: list[tuple[Expression, bool]] = [(node, False)]
    while stack:
        current, visited = stack.pop()
        match current:
            case IntegerLiteral(value=value):
                values.append(value)
            case PrefixExpression(operator="-", operand=operand):
                if visited:
                    values.append(-values.pop())
                else:
                    stack.extend([(current, True), (operand, False)])
            case PrefixExpression(operator=operator):
                raise InvariantViolation(f"unexpected prefix operator: {operator!r}")
            case InfixExpression(left=left, right=right):
                if visited:
                    right_value = values.pop()
                    left_value = values.pop()
                    values.append(apply_infix(current, left_value, right_value, source))
                else:
                    stack.extend([(current, True), (right, False), (left, False)])
            case _:
                raise InvariantViolation(f"unexpected node: {current!r}")
    return values.pop()


def apply_infix(
    node: InfixExpression, left: int, right: int, source: Optional[str]
) -> int:
    match node.operator:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            if right == 0:
                location = node.token.location if node.token else 0
                raise EvaluationError("division by zero", source, location)
            return left // right
    raise InvariantViolation(f"unexpected infix operator: {node.operator!r}")


def evaluate(source: str) -> int:
    node = parse_source(source)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("parsed %r as %s", source, format_expression(node))
    return evaluate_expression(node, source)
