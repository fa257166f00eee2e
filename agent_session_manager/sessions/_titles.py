"""Custom session titles, stored the way Claude Code's /rename stores them.

A rename appends one entry to the session's own JSONL file:
    {"type":"custom-title","customTitle":"...","sessionId":"..."}

The title is picked up by the loader on the next load; the latest entry wins.
"""

import json
import logging
from pathlib import Path

from ..errors import SessionStoreError

logger = logging.getLogger(__name__)


def custom_title_entry(session_id: str, title: str) -> str:
    """Serialize a custom-title entry as one JSONL line (no newline)."""
    return json.dumps(
        {"type": "custom-title", "customTitle": title, "sessionId": session_id},
        ensure_ascii=False,
    )


def append_custom_title(jsonl_path: Path, session_id: str, title: str) -> None:
    """Append a custom-title entry to a session file.

    Raises:
        ValueError: If the title is empty
        SessionStoreError: If the file cannot be written
    """
    title = title.strip()
    if not title:
        raise ValueError("Session title must not be empty")
    try:
        line = (custom_title_entry(session_id, title) + "\n").encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SessionStoreError(f"Cannot rename session {session_id}: {exc}") from exc

    try:
        with open(jsonl_path, "rb") as f:
            f.seek(0, 2)
            needs_newline = f.tell() > 0
            if needs_newline:
                f.seek(-1, 2)
                needs_newline = f.read(1) != b"\n"

        with open(jsonl_path, "ab") as f:
            if needs_newline:
                f.write(b"\n")
            f.write(line)
    except OSError as exc:
        raise SessionStoreError(f"Cannot rename session {session_id}: {exc}") from exc

    logger.info(f"Renamed session {session_id} to {title!r}")
