"""Filesystem session store for Claude Code conversation logs.

Usage:
    from agent_session_manager.sessions import SessionStore

    store = SessionStore(Path.home() / ".claude")
    sessions = store.list_sessions_parallel()
    store.move_to_trash(sessions[0].project_name, sessions[0].id)
"""

from ._export import export_session, render_markdown
from ._loader import SessionLoader
from ._messages import (
    clean_message_content,
    count_entries,
    extract_custom_title,
    extract_messages,
    is_noise_message,
)
from ._paths import PathResolver, encode_path, resolve_slug
from ._search import filter_sessions, find_session
from ._store import SessionStore
from ._titles import append_custom_title
from ._trash import TrashManager

__all__ = [
    "SessionStore",
    "SessionLoader",
    "TrashManager",
    "PathResolver",
    "encode_path",
    "resolve_slug",
    "clean_message_content",
    "count_entries",
    "extract_custom_title",
    "extract_messages",
    "is_noise_message",
    "append_custom_title",
    "export_session",
    "render_markdown",
    "filter_sessions",
    "find_session",
]
