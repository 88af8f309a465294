#!/usr/bin/env python3
"""Console script to turn a JSON condition set into a parameterized WHERE clause."""

import json
import sys
from typing import Annotated
from typing import Any

import sqlparse
import typer

from namerec.condsql.builder import WhereClauseBuilder
from namerec.condsql.config import BuilderConfig
from namerec.condsql.exceptions import ConditionError
from namerec.condsql.logging_config import configure_logging
from namerec.condsql.types import WhereClause

app = typer.Typer(help='Convert a JSON condition set into WHERE fragments and bound values.')


@app.command()
def convert(
    input_file: Annotated[
        typer.FileText | None,
        typer.Argument(help='Input file (defaults to stdin)'),
    ] = None,
    dialect: Annotated[
        str | None,
        typer.Option('--dialect', '-d', help='sqlglot dialect for identifier quoting (postgres, mysql, sqlite, etc.)'),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option('--format', '-f', help='Output format: sql or json'),
    ] = 'sql',
    pretty: Annotated[
        bool,
        typer.Option('--pretty/--no-pretty', help='Pretty print output'),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)'),
    ] = 'WARNING',
) -> None:
    """
    Convert a condition set into a WHERE clause.

    The input is a JSON object mapping column names to values:
    null checks for NULL, a list checks membership, an object with
    "_operator" and "_value" applies that operator, any other object
    holds conditions on dotted sub-columns.

    Examples:

        echo '{"status": ["new", "paid"], "total": {"_operator": ">", "_value": 10}}' | uv run conditions-to-sql

        uv run conditions-to-sql filters.json --dialect postgres --format json
    """
    configure_logging(log_level)

    input_text = (input_file.read() if input_file else sys.stdin.read()).strip()
    if not input_text:
        typer.echo('Error: No input provided', err=True)
        raise typer.Exit(1)

    try:
        conditions = json.loads(input_text)
    except json.JSONDecodeError as e:
        typer.echo(f'Error: Invalid JSON: {e}', err=True)
        raise typer.Exit(1)

    if not isinstance(conditions, dict):
        typer.echo(f'Error: Expected a JSON object, got {type(conditions).__name__}', err=True)
        raise typer.Exit(1)

    try:
        config = BuilderConfig(dialect=dialect)
    except ValueError as e:
        typer.echo(f'Error: {e}', err=True)
        raise typer.Exit(1)

    builder = WhereClauseBuilder(config)
    try:
        builder.add_conditions(conditions)
    except ConditionError as e:
        typer.echo(f'Error: Invalid conditions: {e!s}', err=True)
        if e.path:
            typer.echo(f'  at column: {e.path}', err=True)
        raise typer.Exit(1)

    clause = builder.build()
    if output_format.lower() == 'sql':
        typer.echo(_format_sql(clause, pretty))
    elif output_format.lower() == 'json':
        typer.echo(_format_json(clause.to_dict(), pretty))
    else:
        typer.echo(f'Error: Unknown format "{output_format}". Use "sql" or "json".', err=True)
        raise typer.Exit(1)


def _format_sql(clause: WhereClause, pretty: bool) -> str:
    """Render WHERE text followed by a comment listing the bound values."""
    params = f'-- params: {json.dumps(list(clause.values), default=str)}'
    if not clause:
        return params

    sql = f'WHERE {clause.sql}'
    if pretty:
        sql = sqlparse.format(sql, reindent=True, keyword_case='upper').strip()
    return f'{sql}\n{params}'


def _format_json(data: dict[str, Any], pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2, default=str)
    return json.dumps(data, default=str)


def main() -> None:
    """Entry point for the script."""
    app()


if __name__ == '__main__':
    main()
