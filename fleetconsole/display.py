"""Rich terminal rendering for the CLI."""

from typing import Any, Optional, Sequence

from rich.console import Console
from rich.table import Table

from fleetconsole.modules.export.writers import format_cell
from fleetconsole.modules.roles import RoleStore
from fleetconsole.shared.models import Pagination, User

console = Console()

MAX_COLUMNS = 7


def record_table(
    title: str,
    records: Sequence[dict[str, Any]],
    columns: Optional[Sequence[str]] = None,
) -> Table:
    """Build a table from opaque records, using the first record's keys."""
    if columns is None:
        columns = list(records[0].keys())[:MAX_COLUMNS] if records else []
    table = Table(title=title, show_lines=False)
    for column in columns:
        table.add_column(column, overflow="fold")
    for record in records:
        table.add_row(*(format_cell(record.get(c)) for c in columns))
    return table


def pagination_line(pagination: Pagination) -> str:
    return (
        f"Page {pagination.current_page} of {max(pagination.total_pages, 1)} "
        f"({pagination.total_items} items)"
    )


def print_user(user: User, roles: RoleStore) -> None:
    console.print(f"[bold]{user.full_name}[/bold] <{user.email}>")
    console.print(f"Role: {roles.role_name}")
    if roles.permissions:
        console.print(f"[dim]Permissions: {', '.join(sorted(roles.permissions))}[/dim]")
    else:
        console.print("[dim]Permissions: none[/dim]")
