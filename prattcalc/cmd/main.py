import typer

from prattcalc.digits import format_decimal
from prattcalc.errors import PrattcalcError
from prattcalc.evaluate import evaluate_expression
from prattcalc.node import format_expression
from prattcalc.parse import parse_source

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str,
    tree: bool = typer.Option(False, "--tree", help="Print the parsed tree."),
):
    try:
        node = parse_source(expression)
        if tree:
            typer.echo(format_expression(node))
            return
        typer.echo(format_decimal(evaluate_expression(node, expression)))
    except PrattcalcError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
