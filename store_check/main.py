from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

import typer

from store_check.config import get_settings
from store_check.domain.models import Record
from store_check.errors import StoreError
from store_check.infrastructure.record_store import RecordStore
from store_check.reporter import print_records
from store_check.runner import VerificationRunner
from store_check.utils.logging import configure_logging

app = typer.Typer(help="Record store smoke-test CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"DB={settings.masked_target()} | table={settings.store_table} "
        f"entry={settings.store_entry_name!r} timeout={settings.db_connect_timeout}s"
    )


@app.command()
def run(
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Name of the record to create (default from settings).",
    ),
    dsn: Optional[str] = typer.Option(
        None,
        "--dsn",
        help="Optional DSN override for Postgres.",
    ),
) -> None:
    """
    Create one record, read all records back, and always disconnect.

    Store failures are logged and the command still exits with code 0.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    runner = VerificationRunner(store=RecordStore(conninfo=dsn), entry_name=name)
    runner.execute()


async def _fetch_records(dsn: Optional[str]) -> List[Record]:
    async with RecordStore(conninfo=dsn) as store:
        return await store.find_all()


@app.command()
def records(
    dsn: Optional[str] = typer.Option(
        None,
        "--dsn",
        help="Optional DSN override for Postgres.",
    ),
) -> None:
    """
    List every record in the store as a table.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        rows = asyncio.run(_fetch_records(dsn))
    except StoreError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    print_records(rows, table_name=settings.store_table)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
