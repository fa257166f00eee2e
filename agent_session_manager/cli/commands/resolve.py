"""Slug resolution command."""

import click
from rich.console import Console

from ...sessions import encode_path
from ..context import build_store

console = Console()


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("slug")
@click.option("--encode", is_flag=True, help="Treat the argument as a path and print its slug")
@click.pass_context
def resolve(ctx: click.Context, slug: str, encode: bool) -> None:
    """Resolve a project directory slug to its real path.

    Examples:

        agent-sessions resolve -- -home-box-git-my-project

        agent-sessions resolve --encode /home/box/git/my-project
    """
    if encode:
        click.echo(encode_path(slug))
        return

    store, _ = build_store(ctx)
    path = store.resolve_project_path(slug)
    if path is None:
        console.print(f"[yellow]unresolved:[/yellow] {slug}")
        raise SystemExit(1)
    click.echo(path)
