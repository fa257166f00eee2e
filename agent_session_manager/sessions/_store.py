"""Session store facade over a Claude data root.

The root is passed in explicitly; nothing here reads configuration or the
environment. Every list call re-reads the filesystem, there is no cache.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from ..config import ManagerConfig
from ..types import Session
from ._export import export_session
from ._loader import ProgressCallback, SessionLoader
from ._paths import PathResolver
from ._search import filter_sessions, find_session
from ._titles import append_custom_title
from ._trash import TrashManager


class SessionStore:
    """Lists, resolves, renames, exports and trashes Claude Code sessions.

    Layout under ``data_dir``:
        projects/<slug>/<id>.jsonl   live sessions
        trash/<slug>/<id>.jsonl      soft-deleted sessions
    """

    def __init__(
        self,
        data_dir: Path,
        max_workers: Optional[int] = None,
        resolver: Optional[PathResolver] = None,
    ):
        self.data_dir = Path(data_dir)
        self.projects_dir = self.data_dir / "projects"
        self.trash_dir = self.data_dir / "trash"
        self._resolver = resolver or PathResolver()
        self._live = SessionLoader(
            self.projects_dir,
            resolver=self._resolver,
            exclude=[self.trash_dir],
            max_workers=max_workers,
        )
        self._trashed = SessionLoader(
            self.trash_dir,
            resolver=self._resolver,
            max_workers=max_workers,
        )
        self._trash = TrashManager(self.projects_dir, self.trash_dir)

    @classmethod
    def from_config(cls, config: ManagerConfig) -> "SessionStore":
        """Build a store from configuration; env overrides are resolved here, once."""
        return cls(config.resolved_data_dir(), max_workers=config.load_workers or None)

    # --- listing -----------------------------------------------------------

    def list_sessions(self) -> List[Session]:
        """All live sessions, newest first."""
        return self._live.load_all()

    def list_sessions_parallel(self, on_progress: Optional[ProgressCallback] = None) -> List[Session]:
        """All live sessions loaded on a thread pool, newest first."""
        return self._live.load_all_parallel(on_progress)

    def list_trash(self) -> List[Session]:
        """All trashed sessions, newest first."""
        return self._trashed.load_all()

    def resolve_project_path(self, slug: str) -> Optional[str]:
        """Best-effort real path for a project slug, None if unresolved."""
        return self._resolver.resolve(slug)

    @staticmethod
    def search(sessions: Iterable[Session], query: str) -> List[Session]:
        return filter_sessions(sessions, query)

    @staticmethod
    def find(sessions: Iterable[Session], prefix: str) -> Session:
        return find_session(sessions, prefix)

    # --- mutations ---------------------------------------------------------

    def move_to_trash(self, project: str, session_id: str) -> Path:
        return self._trash.move_to_trash(project, session_id)

    def restore(self, session: Session) -> Path:
        return self._trash.restore(session)

    def delete_permanently(self, session: Session) -> None:
        self._trash.delete_permanently(session)

    def empty_trash(self) -> int:
        return self._trash.empty_trash()

    def rename(self, session: Session, title: str) -> None:
        """Append a custom title; visible on the next load."""
        path = session.jsonl_path or self._trash.live_path(session.project_name, session.id)
        append_custom_title(path, session.id, title)

    def export(self, session: Session, export_dir: Path) -> Path:
        return export_session(session, export_dir)
