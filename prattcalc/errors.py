from typing import Optional


def error_message(expression: str, location: int, message: str) -> str:
    # Only the first line is echoed; the grammar has no newlines anyway.
    line = expression.splitlines()[0] if expression else ""
    location = max(0, min(location, len(line)))
    return f"{line}\n{' ' * location}^ {message}\n"


class PrattcalcError(Exception):
    """Base class for errors caused by the input expression."""

    def __init__(
        self, message: str, source: Optional[str] = None, location: int = 0
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.location = location

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        return error_message(self.source, self.location, self.message).rstrip("\n")


class ParseError(PrattcalcError):
    pass


class EvaluationError(PrattcalcError):
    pass


class InvariantViolation(RuntimeError):
    """The parser built a node the evaluator does not know how to reduce.

    Raised for bugs in prattcalc, never for bad input; the command-line
    front ends let it propagate.
    """
