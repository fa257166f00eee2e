"""Markdown export of a loaded session."""

import logging
import re
from pathlib import Path
from typing import List

from ..errors import ExportError
from ..types import Session

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME = re.compile(r"[^A-Za-z0-9._-]+")

_ROLE_HEADINGS = {
    "user": "User",
    "assistant": "Assistant",
}


def export_filename(session: Session) -> str:
    """``<project>_<short-id>.md`` with filesystem-unsafe characters replaced."""
    project = _UNSAFE_FILENAME.sub("_", session.display_project_name()).strip("_") or "session"
    return f"{project}_{session.short_id}.md"


def render_markdown(session: Session) -> str:
    """Render a session as a Markdown document."""
    title = session.slug or session.display_project_name()
    lines: List[str] = [
        f"# {title}",
        "",
        f"- **Project:** {session.project_path}",
        f"- **Session:** {session.id}",
    ]
    if session.created_at:
        lines.append(f"- **Created:** {session.created_at}")
    if session.updated_at:
        lines.append(f"- **Updated:** {session.updated_at}")
    lines.append(f"- **Entries:** {session.total_entries} ({len(session.messages)} messages)")
    lines.extend(["", "---", ""])

    for message in session.messages:
        heading = _ROLE_HEADINGS.get(message.role, message.role.capitalize())
        lines.extend([f"## {heading}", "", message.content, ""])

    return "\n".join(lines).rstrip() + "\n"


def export_session(session: Session, export_dir: Path) -> Path:
    """Write a session to ``export_dir`` as Markdown.

    Returns:
        Path of the written file

    Raises:
        ExportError: If the directory or file cannot be written
    """
    export_dir = Path(export_dir)
    target = export_dir / export_filename(session)
    try:
        # Encoded up front so a failure never leaves a partial file
        data = render_markdown(session).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ExportError(f"Cannot export session {session.id}: {exc}") from exc
    try:
        export_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise ExportError(f"Cannot export session {session.id} to {target}: {exc}") from exc

    logger.info(f"Exported session {session.id} to {target}")
    return target
