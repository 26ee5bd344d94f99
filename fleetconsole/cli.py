"""
Fleet console command-line front end.

Logs in against the fleet API (or the demo accounts in development),
lists resource collections and exports them as CSV.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler
from rich.pretty import Pretty
from rich.prompt import Prompt

from fleetconsole.app import FleetConsole, create_console
from fleetconsole.display import console, pagination_line, print_user, record_table
from fleetconsole.modules.export import ExportFilters, export_records
from fleetconsole.shared.config import Settings, get_settings
from fleetconsole.shared.exceptions import FleetConsoleError

RESOURCES = ["vehicles", "drivers", "trips", "fuel", "maintenance", "alerts", "users"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleetconsole",
        description="Fleet management console for the fleet REST API",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in and store the session")
    login.add_argument("--email", "-e", required=True, help="Account email")
    login.add_argument("--password", "-p", help="Password (prompted when omitted)")

    sub.add_parser("logout", help="End the session")
    sub.add_parser("whoami", help="Show the logged-in user and permissions")
    sub.add_parser("dashboard", help="Show the dashboard overview")

    for name, help_text in (
        ("list", "List records of a resource"),
        ("export", "Export records of a resource as CSV"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("resource", choices=RESOURCES)
        cmd.add_argument("--status", help="Status filter")
        cmd.add_argument("--search", help="Search text")
        cmd.add_argument("--limit", type=int, default=20, help="Page size (default: 20)")
        cmd.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
        if name == "export":
            cmd.add_argument(
                "--output", "-o",
                type=Path,
                default=Path("."),
                help="Directory for the CSV file (default: current directory)",
            )

    return parser


def configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose or settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


async def _require_session(app: FleetConsole) -> bool:
    await app.start()
    if app.auth.is_authenticated or app.settings.data_source == "demo":
        return True
    console.print("[red]Error:[/red] Not logged in. Run `fleetconsole login` first.")
    return False


async def _login(app: FleetConsole, args: argparse.Namespace) -> int:
    password = args.password or Prompt.ask("Password", password=True, console=console)
    result = await app.auth.login({"email": args.email, "password": password})
    if not result.success:
        console.print(f"[red]Login failed:[/red] {result.message}")
        return 1
    console.print(f"[green]Logged in as {result.user.email}[/green]")
    return 0


async def _logout(app: FleetConsole) -> int:
    await app.start()
    await app.auth.logout()
    console.print("Logged out.")
    return 0


async def _whoami(app: FleetConsole) -> int:
    await app.start()
    if not app.auth.is_authenticated:
        console.print("Not logged in.")
        return 1
    print_user(app.require_user(), app.roles)
    return 0


async def _dashboard(app: FleetConsole) -> int:
    if not await _require_session(app):
        return 1
    overview = await app.resources.dashboard.get_overview()
    console.print(Pretty(overview.get("data", overview)))
    return 0


def _params(args: argparse.Namespace) -> dict:
    return {
        "search": args.search,
        "status": args.status,
        "limit": args.limit,
        "page": args.page,
    }


async def _list(app: FleetConsole, args: argparse.Namespace) -> int:
    if not await _require_session(app):
        return 1
    page = await app.records.list_records(args.resource, _params(args))
    if page.notice:
        console.print(f"[yellow]{page.notice}[/yellow]")
    if not page.records:
        console.print(f"No {args.resource} found.")
        return 0
    console.print(record_table(args.resource.title(), page.records))
    console.print(f"[dim]{pagination_line(page.pagination)}[/dim]")
    return 0


async def _export(app: FleetConsole, args: argparse.Namespace) -> int:
    if not await _require_session(app):
        return 1
    page = await app.records.list_records(args.resource, _params(args))
    if page.notice:
        console.print(f"[yellow]{page.notice}[/yellow]")
    filters = ExportFilters(status=args.status, search=args.search)
    path = export_records(page.records, args.resource, args.output, filters)
    console.print(f"[green]Exported {args.resource} to {path}[/green]")
    return 0


async def run(args: argparse.Namespace, settings: Optional[Settings] = None) -> int:
    async with create_console(settings) as app:
        try:
            if args.command == "login":
                return await _login(app, args)
            if args.command == "logout":
                return await _logout(app)
            if args.command == "whoami":
                return await _whoami(app)
            if args.command == "dashboard":
                return await _dashboard(app)
            if args.command == "list":
                return await _list(app, args)
            if args.command == "export":
                return await _export(app, args)
        except FleetConsoleError as e:
            console.print(f"[red]Error:[/red] {e.message}")
            return 1
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings, args.verbose)
    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
