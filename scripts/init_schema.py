"""
Schema bootstrap script for store-check.

Applies `db/init.sql` so the table the verification run writes to exists.
The statements are idempotent, so running the script twice is harmless.
"""

from __future__ import annotations

import sys
from pathlib import Path

import psycopg
import typer

from store_check.infrastructure.db_factory import build_dsn

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "db" / "init.sql"

app = typer.Typer(help="Create the record table in Postgres from db/init.sql.")


def _apply_schema(dsn: str, schema_path: Path) -> None:
    ddl = schema_path.read_text(encoding="utf-8")
    with psycopg.connect(dsn) as conn:
        with conn.cursor() as cur:
            cur.execute(ddl)
        conn.commit()


@app.command()
def main(
    dsn: str | None = typer.Option(
        None,
        "--dsn",
        help="Optional DSN override for Postgres.",
    ),
    schema: Path = typer.Option(
        DEFAULT_SCHEMA_PATH,
        "--schema",
        "-s",
        help="Path to the SQL file to apply.",
    ),
) -> None:
    """
    Apply the schema file to the configured database.
    """
    if not schema.exists():
        typer.echo(f"Schema file not found: {schema}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Applying {schema} ...")
    try:
        _apply_schema(build_dsn(dsn), schema)
    except psycopg.Error as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo("Schema ready.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
