"""
Agent Session Manager: browse and curate local Claude Code sessions.

Locates the JSONL conversation logs Claude Code keeps under
``~/.claude/projects``, parses them into clean Session/Message values, and
manages a trash tree for soft deletion.

Basic Usage:
    from pathlib import Path
    from agent_session_manager import SessionStore

    store = SessionStore(Path.home() / ".claude")
    for session in store.list_sessions():
        print(session.display_name(), len(session.messages))

Trash Lifecycle:
    store.move_to_trash(session.project_name, session.id)
    trashed = store.find(store.list_trash(), session.id)
    store.restore(trashed)
"""

__version__ = "0.3.0"

from .config import ManagerConfig
from .errors import (
    AmbiguousSessionError,
    ExportError,
    SessionNotFoundError,
    SessionStoreError,
    TrashError,
)
from .sessions import PathResolver, SessionLoader, SessionStore, TrashManager
from .types import Message, Session

__all__ = [
    "__version__",
    "ManagerConfig",
    "Message",
    "Session",
    "SessionStore",
    "SessionLoader",
    "TrashManager",
    "PathResolver",
    "SessionStoreError",
    "SessionNotFoundError",
    "AmbiguousSessionError",
    "TrashError",
    "ExportError",
]
