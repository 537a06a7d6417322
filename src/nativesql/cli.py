"""
Click-based CLI for nativesql.
"""

import json
import sys
from pathlib import Path
from typing import IO, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from . import __version__
from .application import CheckService, TranslateService
from .config import load_settings
from .domain.results import CommandResult

console = Console()


def _emit_json(result: CommandResult) -> None:
    print(json.dumps(result.as_json_dict()))


def _print_syntax_error(result: CommandResult) -> None:
    """Print a syntax error with a caret under the offending character."""
    data = result.data
    expected = f" (expected [cyan]{escape(data['expected'])}[/cyan])" if data["expected"] else ""
    console.print(f"[red]✗ Syntax error[/red] at position {data['position']}{expected}")
    console.print(f"  {escape(data['line'])}", highlight=False)
    console.print(f"  {' ' * data['column']}[red]^[/red]")


@click.group()
@click.version_option(version=__version__, prog_name="nativesql")
def cli() -> None:
    """nativesql CLI for translating escape syntax into native SQL"""
    pass


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path (default: stdout)",
)
@click.option(
    "--escape-processing/--no-escape-processing",
    default=None,
    help="Rewrite escape clauses (default: from settings, enabled)",
)
@click.option(
    "--split/--no-split",
    default=None,
    help="Treat SOURCE as a script and translate each statement separately",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="Settings file (default: ./nativesql.json if present)",
)
@click.option("--json", "json_output", is_flag=True, help="Print a machine-readable result")
def translate(
    source: IO[str],
    output: Optional[Path],
    escape_processing: Optional[bool],
    split: Optional[bool],
    config_path: Optional[Path],
    json_output: bool,
) -> None:
    """Translate escape clauses in SOURCE (default: stdin) into native SQL"""

    try:
        settings = load_settings(
            config_path, escape_processing=escape_processing, split_statements=split
        )
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        sys.exit(1)

    result = TranslateService().run(
        sql=source.read(),
        escape_processing=settings.escape_processing,
        split=settings.split_statements,
    )

    if json_output:
        _emit_json(result)
    elif not result.success:
        _print_syntax_error(result)

    if not result.success:
        sys.exit(1)

    statements = result.data["statements"]
    if settings.split_statements:
        sql_output = "".join(f"{statement};\n" for statement in statements)
    else:
        sql_output = statements[0]

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(sql_output, encoding="utf-8")
        if not json_output:
            console.print(f"[green]✓[/green] SQL written to {output}")
    elif not json_output:
        syntax = Syntax(sql_output, "sql", theme="monokai", line_numbers=False)
        console.print(syntax)


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--json", "json_output", is_flag=True, help="Print a machine-readable result")
def check(source: IO[str], json_output: bool) -> None:
    """Check escape clauses, literals and comments in SOURCE (default: stdin)"""

    result = CheckService().run(sql=source.read())

    if json_output:
        _emit_json(result)
    elif result.success:
        console.print("[green]✓ No escape syntax errors found[/green]")
    else:
        _print_syntax_error(result)

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    cli()
