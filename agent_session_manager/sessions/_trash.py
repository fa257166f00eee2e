"""Soft-delete lifecycle for session files.

Trashing renames ``projects/<slug>/<id>.jsonl`` to ``trash/<slug>/<id>.jsonl``;
restoring renames it back. The disk is the only source of truth: callers
reload (or update their own lists) after a successful operation.
"""

import logging
import shutil
from pathlib import Path

from ..errors import TrashError
from ..types import Session

logger = logging.getLogger(__name__)


def _session_file(root: Path, project: str, session_id: str) -> Path:
    return root / project / f"{session_id}.jsonl"


class TrashManager:
    """Moves session files between the live tree and the trash tree."""

    def __init__(self, projects_dir: Path, trash_dir: Path):
        self.projects_dir = Path(projects_dir)
        self.trash_dir = Path(trash_dir)

    def live_path(self, project: str, session_id: str) -> Path:
        return _session_file(self.projects_dir, project, session_id)

    def trash_path(self, project: str, session_id: str) -> Path:
        return _session_file(self.trash_dir, project, session_id)

    @staticmethod
    def _move(source: Path, target: Path) -> None:
        if not source.is_file():
            raise TrashError(f"Session file not found: {source}")
        if target.exists():
            raise TrashError(f"Refusing to overwrite existing session file {target}")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise TrashError(f"Cannot create directory {target.parent}: {exc}") from exc
        try:
            source.rename(target)
        except OSError as exc:
            raise TrashError(f"Cannot move {source} to {target}: {exc}") from exc

    def move_to_trash(self, project: str, session_id: str) -> Path:
        """Move a live session file into the trash.

        Returns:
            The session file's new path

        Raises:
            TrashError: If the source is missing or the move fails
        """
        source = self.live_path(project, session_id)
        target = self.trash_path(project, session_id)
        self._move(source, target)
        logger.info(f"Moved session {project}/{session_id} to trash")
        return target

    def restore(self, session: Session) -> Path:
        """Move a trashed session back into the live tree.

        Raises:
            TrashError: If the trashed file is missing or the move fails
        """
        source = self.trash_path(session.project_name, session.id)
        target = self.live_path(session.project_name, session.id)
        self._move(source, target)
        logger.info(f"Restored session {session.project_name}/{session.id}")
        return target

    def delete_permanently(self, session: Session) -> None:
        """Delete one session's backing file. Irreversible.

        Raises:
            TrashError: If the file cannot be removed
        """
        path = session.jsonl_path or self.trash_path(session.project_name, session.id)
        try:
            path.unlink()
        except OSError as exc:
            raise TrashError(f"Cannot delete {path}: {exc}") from exc
        logger.info(f"Deleted session file {path}")

    def count(self) -> int:
        """Number of session files currently in the trash."""
        if not self.trash_dir.is_dir():
            return 0
        return sum(1 for _ in self.trash_dir.glob("*/*.jsonl"))

    def empty_trash(self) -> int:
        """Remove the whole trash tree. Irreversible.

        Returns:
            Number of session files that were in the trash

        Raises:
            TrashError: If anything could not be removed; the remainder stays
        """
        if not self.trash_dir.exists():
            return 0
        removed = self.count()
        try:
            shutil.rmtree(self.trash_dir)
        except OSError as exc:
            raise TrashError(f"Cannot empty trash {self.trash_dir}: {exc}") from exc
        logger.info(f"Emptied trash ({removed} session file(s))")
        return removed
