"""Claude Code session file discovery and loading.

Claude Code stores sessions at:
    <root>/projects/<slug>/<session-id>.jsonl

Soft-deleted sessions live in a mirror tree:
    <root>/trash/<slug>/<session-id>.jsonl

One file is one Session. Files are read whole, then parsed, so a file being
written by another process yields at worst one skipped session.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..errors import SessionStoreError
from ..types import Session
from ._messages import count_entries, extract_custom_title, extract_messages
from ._paths import PathResolver

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def _iso(timestamp: Optional[float]) -> str:
    if timestamp is None:
        return ""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


class SessionLoader:
    """Builds Session values from every ``*.jsonl`` under a projects root.

    The same loader serves the live tree and the trash tree; ``exclude``
    keeps a nested trash directory out of a live scan.
    """

    def __init__(
        self,
        projects_dir: Path,
        resolver: Optional[PathResolver] = None,
        exclude: Iterable[Path] = (),
        max_workers: Optional[int] = None,
    ):
        self._projects_dir = Path(projects_dir)
        self._resolver = resolver or PathResolver()
        self._exclude = {Path(p).resolve() for p in exclude}
        self._max_workers = max_workers or None

    @property
    def projects_dir(self) -> Path:
        return self._projects_dir

    def discover(self) -> List[Path]:
        """List session files in discovery order (sorted project, then file name).

        Raises:
            SessionStoreError: If the projects root exists but cannot be listed
        """
        if not self._projects_dir.exists():
            return []

        try:
            project_dirs = sorted(self._projects_dir.iterdir())
        except OSError as exc:
            raise SessionStoreError(f"Cannot list {self._projects_dir}: {exc}") from exc

        files: List[Path] = []
        for project_dir in project_dirs:
            if not project_dir.is_dir():
                continue
            if project_dir.resolve() in self._exclude:
                continue
            try:
                files.extend(sorted(p for p in project_dir.glob("*.jsonl") if p.is_file()))
            except OSError as exc:
                logger.debug(f"Skipping unreadable project {project_dir}: {exc}")
        return files

    def load_file(self, path: Path) -> Session:
        """Parse one session file.

        Raises:
            OSError: If the file cannot be read or stat'ed
        """
        content = path.read_text(encoding="utf-8", errors="replace")
        stat = path.stat()

        project_name = path.parent.name
        project_path = self._resolver.resolve(project_name) or project_name

        return Session(
            id=path.stem,
            project_name=project_name,
            project_path=project_path,
            created_at=_iso(getattr(stat, "st_birthtime", None)),
            updated_at=_iso(stat.st_mtime),
            size=stat.st_size,
            total_entries=count_entries(content),
            messages=tuple(extract_messages(content)),
            jsonl_path=path,
            slug=extract_custom_title(content),
        )

    def _load_or_skip(self, path: Path) -> Optional[Session]:
        try:
            return self.load_file(path)
        except (OSError, ValueError) as exc:
            logger.debug(f"Skipping session file {path}: {exc}")
            return None

    @staticmethod
    def _collect(results: Iterable[Optional[Session]]) -> List[Session]:
        sessions = [s for s in results if s is not None]
        # Newest first; sort is stable so ties keep discovery order
        sessions.sort(key=lambda s: s.updated_at, reverse=True)
        return sessions

    def load_all(self) -> List[Session]:
        """Load every session sequentially, newest first."""
        return self._collect(self._load_or_skip(path) for path in self.discover())

    def load_all_parallel(self, on_progress: Optional[ProgressCallback] = None) -> List[Session]:
        """Load every session with one thread-pool task per file.

        Blocks until all workers are done, then reports ``(total, total)``
        to on_progress exactly once.
        """
        paths = self.discover()
        total = len(paths)
        logger.debug(f"Loading {total} session file(s) from {self._projects_dir}")

        if paths:
            with ThreadPoolExecutor(
                max_workers=self._max_workers, thread_name_prefix="session_loader"
            ) as pool:
                results = list(pool.map(self._load_or_skip, paths))
        else:
            results = []

        if on_progress is not None:
            on_progress(total, total)
        return self._collect(results)
