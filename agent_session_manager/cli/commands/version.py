"""Version command."""

import click
from rich.console import Console
from rich.table import Table

from ... import __version__
from ..context import build_store

console = Console()


@click.command()
@click.option("--paths", is_flag=True, help="Also show the data, trash and export directories")
@click.pass_context
def version(ctx: click.Context, paths: bool) -> None:
    """Show Agent Session Manager version.

    Examples:

        agent-sessions version

        agent-sessions version --paths
    """
    console.print(f"[bold]Agent Session Manager[/bold] v{__version__}")

    if paths:
        store, config = build_store(ctx)
        table = Table(title="Locations")
        table.add_column("Kind", style="cyan")
        table.add_column("Path")
        table.add_column("Exists")
        for kind, path in (
            ("projects", store.projects_dir),
            ("trash", store.trash_dir),
            ("exports", config.resolved_export_path()),
        ):
            exists = "[green]✓[/green]" if path.exists() else "[red]✗[/red]"
            table.add_row(kind, str(path), exists)
        console.print()
        console.print(table)
