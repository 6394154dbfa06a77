import logging
import sys
from typing import TextIO

import click

from prattcalc.digits import format_decimal
from prattcalc.errors import PrattcalcError
from prattcalc.evaluate import evaluate

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="PRATTCALC_LOG_LEVEL",
    show_default=True,
)
def main(filename: TextIO, output: TextIO, log_level: str):
    """Evaluate the arithmetic expression read from FILENAME (stdin by default)."""
    logging.basicConfig(level=log_level.upper(), stream=sys.stderr)
    expression = filename.read()
    if expression.endswith("\n"):
        expression = expression[:-1].removesuffix("\r")
    try:
        result = evaluate(expression)
    except PrattcalcError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    output.write(f"{format_decimal(result)}\n")


if __name__ == "__main__":
    main()
