"""
Exceptions raised by the session store.

Exception Hierarchy:
    SessionStoreError (base)
    ├── SessionNotFoundError (no session matches an ID or prefix)
    │   └── AmbiguousSessionError (prefix matches several sessions)
    ├── TrashError (move, restore, purge or empty failed)
    └── ExportError (export file could not be written)

Parse errors never surface: bad lines and unreadable files are skipped
during loading. Slugs that cannot be resolved are not errors either.
"""


class SessionStoreError(Exception):
    """Base exception for all session store errors."""


class SessionNotFoundError(SessionStoreError):
    """Raised when no session matches the requested ID."""

    def __init__(self, session_id: str, message: str | None = None) -> None:
        self.session_id = session_id
        super().__init__(message or f"No session found matching: {session_id}")


class AmbiguousSessionError(SessionNotFoundError):
    """Raised when a session ID prefix matches more than one session."""

    def __init__(self, prefix: str, matches: list[str]) -> None:
        self.prefix = prefix
        self.matches = matches
        shown = ", ".join(matches[:10])
        if len(matches) > 10:
            shown += f", ... and {len(matches) - 10} more"
        super().__init__(
            prefix,
            f"Session ID prefix '{prefix}' is ambiguous ({len(matches)} matches): {shown}",
        )


class TrashError(SessionStoreError):
    """Raised when a session file cannot be moved, restored or removed."""


class ExportError(SessionStoreError):
    """Raised when a session cannot be exported."""
