"""Live session commands."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from ...errors import SessionStoreError
from ..context import build_store
from ..display import print_session, session_table, with_load_progress

console = Console()


@click.group()
def session() -> None:
    """Browse and manage live sessions.

    Sessions are read from <data-dir>/projects on every command; nothing
    is cached between runs.

    Examples:

        agent-sessions session list

        agent-sessions session list --search "auth flow"

        agent-sessions session show 3f2a
    """


@session.command("list")
@click.option("--limit", "-n", type=int, default=20, help="Max sessions to show (0 = all)")
@click.option("--search", "-s", "query", default="", help="Filter by ID, project, title or message text")
@click.option("--serial", is_flag=True, help="Load files one by one instead of in parallel")
@click.pass_context
def session_list(ctx: click.Context, limit: int, query: str, serial: bool) -> None:
    """List live sessions, newest first."""
    try:
        store, _ = build_store(ctx)
        if serial:
            sessions = store.list_sessions()
        else:
            sessions = with_load_progress(console, "Loading sessions", store.list_sessions_parallel)
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    sessions = store.search(sessions, query)
    if not sessions:
        console.print("[dim]No sessions found[/dim]")
        return

    console.print(session_table(sessions, "Sessions", limit or None))
    console.print(f"[dim]{len(sessions)} session(s) total[/dim]")


@session.command("show")
@click.argument("session_id")
@click.option("--last", "-l", "last", type=int, default=None, help="Only show the last N messages")
@click.option("--trash", "from_trash", is_flag=True, help="Look the session up in the trash")
@click.pass_context
def session_show(ctx: click.Context, session_id: str, last: Optional[int], from_trash: bool) -> None:
    """Show a session's details and messages."""
    try:
        store, _ = build_store(ctx)
        sessions = store.list_trash() if from_trash else store.list_sessions()
        s = store.find(sessions, session_id)
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    print_session(console, s, last)


@session.command("export")
@click.argument("session_id")
@click.option("--output", "-o", type=click.Path(file_okay=False), default=None, help="Export directory (default: from config)")
@click.pass_context
def session_export(ctx: click.Context, session_id: str, output: Optional[str]) -> None:
    """Export a session as a Markdown file."""
    try:
        store, config = build_store(ctx)
        s = store.find(store.list_sessions(), session_id)
        export_dir = Path(output) if output else config.resolved_export_path()
        path = store.export(s, export_dir)
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print(f"[green]Exported[/green] {s.display_name()} -> {path}")


@session.command("rename")
@click.argument("session_id")
@click.argument("title")
@click.pass_context
def session_rename(ctx: click.Context, session_id: str, title: str) -> None:
    """Give a session a custom title."""
    try:
        store, _ = build_store(ctx)
        s = store.find(store.list_sessions(), session_id)
        store.rename(s, title)
    except (ValueError, SessionStoreError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print(f"[green]Renamed[/green] {s.short_id} to [bold]{title.strip()}[/bold]")


@session.command("delete")
@click.argument("session_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def session_delete(ctx: click.Context, session_id: str, yes: bool) -> None:
    """Move a session to the trash (restore with 'trash restore')."""
    try:
        store, _ = build_store(ctx)
        s = store.find(store.list_sessions(), session_id)
        if not yes and not click.confirm(f"Move {s.display_name()} to trash?"):
            console.print("[dim]Cancelled[/dim]")
            return
        store.move_to_trash(s.project_name, s.id)
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print(f"[yellow]Moved to trash:[/yellow] {s.display_name()}")
