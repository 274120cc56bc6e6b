from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from store_check.domain.models import Record


def build_records_table(records: Sequence[Record], table_name: str = "Test") -> Table:
    """
    Build a rich table listing records in id order.
    """
    table = Table(
        title=f"Records in {table_name!r}",
        box=box.ROUNDED,
        caption=f"{len(records):,} row(s)",
    )
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Created At", style="green")

    for record in sorted(records, key=lambda r: r.id):
        table.add_row(str(record.id), record.name, record.created_at.isoformat())
    return table


def print_records(
    records: Sequence[Record],
    table_name: str = "Test",
    console: Optional[Console] = None,
) -> None:
    """
    Render records as a rich table.
    """
    console = console or Console()

    if not records:
        console.print(f"[yellow]No records in {table_name!r}.[/yellow]")
        return

    console.print(build_records_table(records, table_name))


__all__ = ["build_records_table", "print_records"]
