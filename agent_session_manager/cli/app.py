"""Agent Session Manager CLI application."""

import logging
import os
from pathlib import Path

import click
from rich.console import Console

from .. import __version__
from ..config import CONFIG_DIR_ENV, default_config_dir

console = Console()

CONFIG_ENV = "AGENT_SESSIONS_CONFIG"


def find_config() -> str | None:
    """
    Find config file using standard priority order:

    1. AGENT_SESSIONS_CONFIG environment variable
    2. $AGENT_CONFIG_DIR/config.yaml
    3. ~/.config/agent-session-manager/config.yaml (user config)

    Returns None if no config found.
    """
    # 1. Environment variable (highest priority)
    env_config = os.environ.get(CONFIG_ENV)
    if env_config:
        path = Path(env_config)
        if path.exists():
            return str(path)

    # 2./3. Config directory (env override or user default)
    config_file = default_config_dir() / "config.yaml"
    if config_file.exists():
        return str(config_file)

    return None


@click.group()
@click.version_option(version=__version__, prog_name="agent-sessions")
@click.option("--config", "-c", type=click.Path(exists=True), help="Config file path")
@click.option("--no-config", is_flag=True, help="Disable config auto-loading")
@click.option("--data-dir", "-d", type=click.Path(file_okay=False), help="Claude data directory (default: $CLAUDE_DATA_DIR or ~/.claude)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--debug", is_flag=True, help="Debug mode")
@click.pass_context
def cli(ctx: click.Context, config: str, no_config: bool, data_dir: str, verbose: bool, debug: bool) -> None:
    """Agent Session Manager: browse and curate Claude Code sessions.

    Reads the JSONL conversation logs under <data-dir>/projects and keeps
    soft-deleted sessions under <data-dir>/trash.

    Config file locations (in priority order):

        1. -c/--config PATH (explicit)

        2. AGENT_SESSIONS_CONFIG env var

        3. $AGENT_CONFIG_DIR/config.yaml

        4. ~/.config/agent-session-manager/config.yaml

    Examples:

        agent-sessions session list --search auth

        agent-sessions session export 3f2a --output ./exports

        agent-sessions trash empty --yes
    """
    ctx.ensure_object(dict)

    # Determine config file
    if no_config:
        config = None
    elif config is None:
        config = find_config()
        if config and verbose:
            console.print(f"[dim]Using config: {config}[/dim]")

    log_level = None
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO

    ctx.obj["config"] = config
    ctx.obj["data_dir"] = data_dir
    ctx.obj["log_level"] = log_level
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug


# Import and register commands
from .commands import resolve, session, trash, version  # noqa: E402

cli.add_command(session.session)
cli.add_command(trash.trash)
cli.add_command(resolve.resolve)
cli.add_command(version.version)
