"""CLI for the yardcalc expression evaluator.

Usage:
    python -m yardcalc eval "2 + 3 * 4"          # Evaluate and print
    python -m yardcalc eval "2 ^ 3 ^ 2" --rpn    # Also print postfix form
    python -m yardcalc eval "(1 + 2" --json      # Machine-readable result
    python -m yardcalc rpn "(1 + 2) * 3"         # Postfix form only
    python -m yardcalc tokens "1.5 * (2 - 3)"    # Token table
    python -m yardcalc check                     # Regression suite
    python -m yardcalc repl                      # Evaluate stdin line by line
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from yardcalc.converter import to_postfix
from yardcalc.errors import EvalError
from yardcalc.evaluator import try_evaluate
from yardcalc.models import TokenKind
from yardcalc.regression import render_checks, run_checks
from yardcalc.settings import Settings
from yardcalc.tokenizer import format_tokens, tokenize

app = typer.Typer(
    name="yardcalc",
    help="Shunting-yard arithmetic expression evaluator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console(soft_wrap=True, highlight=False)

_QUIT_WORDS = ("quit", "exit")


def _print_error(e: EvalError) -> None:
    console.print(f"[red]{e.kind.value}:[/red] {escape(str(e))}", highlight=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline stages to stderr"),
) -> None:
    """Shunting-yard arithmetic expression evaluator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Infix expression, e.g. '2 + 3 * 4'"),
    show_rpn: bool = typer.Option(False, "--rpn", help="Also print the postfix form"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=1, help="Significant digits"),
) -> None:
    """Evaluate an expression."""
    settings = Settings.from_env()
    if precision is not None:
        settings.precision = precision

    result = try_evaluate(expression)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, allow_nan=False))
        if not result.ok:
            raise typer.Exit(1)
        return

    if show_rpn and result.postfix:
        out.print(f"rpn:    {result.postfix}", markup=False)

    if not result.ok:
        where = f" (at position {result.position})" if result.position is not None else ""
        console.print(f"[red]{result.error_kind}:[/red] {escape(result.message)}{where}", highlight=False)
        raise typer.Exit(1)

    value = settings.format_value(result.value)
    out.print(f"result: {value}" if show_rpn else value, markup=False)


@app.command("rpn")
def cmd_rpn(
    expression: str = typer.Argument(help="Infix expression to convert"),
) -> None:
    """Print the postfix (reverse Polish) form of an expression."""
    try:
        postfix = to_postfix(tokenize(expression))
    except EvalError as e:
        _print_error(e)
        raise typer.Exit(1)
    out.print(format_tokens(postfix), markup=False)


@app.command("tokens")
def cmd_tokens(
    expression: str = typer.Argument(help="Infix expression to tokenize"),
) -> None:
    """Show the tokens of an expression."""
    try:
        tokens = tokenize(expression)
    except EvalError as e:
        _print_error(e)
        raise typer.Exit(1)

    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("Kind", style="green")
    table.add_column("Text")
    table.add_column("Span", justify="right", style="dim")
    table.add_column("Value", justify="right")
    for t in tokens:
        value = repr(t.value) if t.kind is TokenKind.NUMBER else "--"
        table.add_row(t.kind.value, t.text, f"{t.start}:{t.end}", value)
    out.print(table)


@app.command("check")
def cmd_check(
    tolerance: Optional[float] = typer.Option(None, "--tolerance", "-t", min=0.0, help="Absolute tolerance"),
) -> None:
    """Run the built-in regression suite."""
    settings = Settings.from_env()
    if tolerance is not None:
        settings.tolerance = tolerance

    results = run_checks(tolerance=settings.tolerance)
    render_checks(results, out)
    if any(r.verdict != "pass" for r in results):
        raise typer.Exit(1)


@app.command("repl")
def cmd_repl() -> None:
    """Evaluate expressions from stdin, one per line, until EOF or 'quit'."""
    settings = Settings.from_env()
    for line in sys.stdin:
        expression = line.strip()
        if not expression:
            continue
        if expression in _QUIT_WORDS:
            break
        result = try_evaluate(expression)
        if result.ok:
            out.print(settings.format_value(result.value), markup=False)
        else:
            out.print(f"error: {result.error_kind}: {result.message}", markup=False)


if __name__ == "__main__":
    app()
