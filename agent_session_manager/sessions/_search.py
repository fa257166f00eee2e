"""Session list filtering and ID lookup."""

from typing import Iterable, List

from ..errors import AmbiguousSessionError, SessionNotFoundError
from ..types import Session


def session_matches(session: Session, query: str) -> bool:
    """Case-insensitive substring match on ID, project, title and message text."""
    q = query.lower()
    fields = (session.id, session.project_name, session.project_path, session.slug or "")
    if any(q in field.lower() for field in fields):
        return True
    return any(q in message.content.lower() for message in session.messages)


def filter_sessions(sessions: Iterable[Session], query: str) -> List[Session]:
    """Keep sessions matching query; an empty query keeps everything."""
    query = query.strip()
    if not query:
        return list(sessions)
    return [s for s in sessions if session_matches(s, query)]


def find_session(sessions: Iterable[Session], prefix: str) -> Session:
    """Find one session by exact ID or unique ID prefix.

    Raises:
        SessionNotFoundError: If nothing matches
        AmbiguousSessionError: If the prefix matches several sessions
    """
    sessions = list(sessions)
    exact = [s for s in sessions if s.id == prefix]
    if len(exact) == 1:
        return exact[0]

    match = exact or [s for s in sessions if s.id.startswith(prefix)]
    if not match:
        raise SessionNotFoundError(prefix)
    if len(match) > 1:
        raise AmbiguousSessionError(prefix, [f"{s.project_name}/{s.id}" for s in match])
    return match[0]
