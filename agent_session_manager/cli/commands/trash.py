"""Trash commands: list, restore, purge, empty."""

import click
from rich.console import Console

from ...errors import SessionStoreError
from ..context import build_store
from ..display import session_table

console = Console()


@click.group()
def trash() -> None:
    """Manage soft-deleted sessions.

    Trashed sessions live in <data-dir>/trash until restored or removed.

    Examples:

        agent-sessions trash list

        agent-sessions trash restore 3f2a

        agent-sessions trash empty --yes
    """


@trash.command("list")
@click.pass_context
def trash_list(ctx: click.Context) -> None:
    """List trashed sessions, newest first."""
    try:
        store, _ = build_store(ctx)
        sessions = store.list_trash()
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    if not sessions:
        console.print("[dim]Trash is empty[/dim]")
        return

    console.print(session_table(sessions, "Trash"))
    console.print(f"[dim]{len(sessions)} session(s) in trash[/dim]")


@trash.command("restore")
@click.argument("session_id")
@click.pass_context
def trash_restore(ctx: click.Context, session_id: str) -> None:
    """Move a trashed session back to its project."""
    try:
        store, _ = build_store(ctx)
        s = store.find(store.list_trash(), session_id)
        store.restore(s)
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print(f"[green]Restored:[/green] {s.display_name()}")


@trash.command("purge")
@click.argument("session_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def trash_purge(ctx: click.Context, session_id: str, yes: bool) -> None:
    """Permanently delete one trashed session."""
    try:
        store, _ = build_store(ctx)
        s = store.find(store.list_trash(), session_id)
        if not yes and not click.confirm(f"Permanently delete {s.display_name()}?"):
            console.print("[dim]Cancelled[/dim]")
            return
        store.delete_permanently(s)
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print(f"[red]Deleted:[/red] {s.display_name()}")


@trash.command("empty")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def trash_empty(ctx: click.Context, yes: bool) -> None:
    """Permanently delete everything in the trash."""
    try:
        store, _ = build_store(ctx)
        if not yes and not click.confirm("Permanently delete all trashed sessions?"):
            console.print("[dim]Cancelled[/dim]")
            return
        removed = store.empty_trash()
    except SessionStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print(f"[red]Emptied trash[/red] ({removed} session(s) removed)")
