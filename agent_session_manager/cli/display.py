"""CLI display helpers: session tables, message transcripts, load progress."""

from typing import Callable, List, Optional, TypeVar

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..types import Session

T = TypeVar("T")

ROLE_STYLES = {
    "user": "bold cyan",
    "assistant": "bold green",
}


def format_size(size: int) -> str:
    """Human-readable byte count (``812 B``, ``4.2 KB``, ``1.3 MB``)."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_timestamp(iso: str) -> str:
    """``2025-06-15T10:30:12.123+00:00`` -> ``2025-06-15 10:30``."""
    if not iso:
        return "-"
    return iso[:16].replace("T", " ")


def _truncate(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


def session_table(sessions: List[Session], title: str, limit: Optional[int] = None) -> Table:
    """Build a rich table listing sessions."""
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Project")
    table.add_column("Title")
    table.add_column("Msgs", justify="right")
    table.add_column("Entries", justify="right", style="dim")
    table.add_column("Size", justify="right", style="dim")
    table.add_column("Updated", style="dim")

    shown = sessions[:limit] if limit else sessions
    for s in shown:
        table.add_row(
            s.short_id,
            _truncate(s.display_project_name(), 30),
            _truncate(s.slug or "-", 30),
            str(len(s.messages)),
            str(s.total_entries),
            format_size(s.size),
            format_timestamp(s.updated_at),
        )
    return table


def print_session(console: Console, session: Session, max_messages: Optional[int] = None) -> None:
    """Print a session header followed by its messages."""
    console.print(f"[bold]Session:[/bold] {session.id}")
    if session.slug:
        console.print(f"[bold]Title:[/bold] {session.slug}")
    console.print(f"[bold]Project:[/bold] {session.project_path}")
    if session.created_at:
        console.print(f"[bold]Created:[/bold] {session.created_at}")
    console.print(f"[bold]Updated:[/bold] {session.updated_at or '-'}")
    console.print(
        f"[bold]Entries:[/bold] {session.total_entries} "
        f"({len(session.messages)} messages, {format_size(session.size)})"
    )

    messages = session.messages
    if max_messages:
        messages = messages[-max_messages:]
    for message in messages:
        style = ROLE_STYLES.get(message.role, "bold")
        console.print(Panel(Markdown(message.content), title=message.role, title_align="left", border_style=style))


def with_load_progress(console: Console, description: str, load: Callable[[Callable[[int, int], None]], T]) -> T:
    """Run a progress-reporting load behind a transient progress bar."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(description, total=None)

        def on_progress(done: int, total: int) -> None:
            progress.update(task, completed=done, total=total)

        return load(on_progress)
