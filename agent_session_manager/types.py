"""
Agent Session Manager type definitions.

This module contains the public value types produced by the session store.
Values are created fresh on every load and never mutated in place.
"""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath


@dataclass(frozen=True)
class Message:
    """A sanitized conversation message."""
    role: str  # "user" | "assistant" | "unknown"
    content: str


@dataclass(frozen=True)
class Session:
    """One recorded conversation, backed by exactly one JSONL file.

    Identity is ``(project_name, id)``; it survives a trash/restore cycle,
    only the containing root of ``jsonl_path`` changes.
    """
    id: str
    project_name: str  # raw slug of the project directory
    project_path: str  # resolved absolute path, or the slug if unresolved
    created_at: str = ""  # ISO 8601, "" when the platform has no birth time
    updated_at: str = ""  # ISO 8601
    size: int = 0
    total_entries: int = 0
    messages: tuple[Message, ...] = ()
    jsonl_path: Path | None = None
    slug: str | None = None  # custom title

    @property
    def key(self) -> tuple[str, str]:
        return (self.project_name, self.id)

    @property
    def short_id(self) -> str:
        return self.id[:8]

    @property
    def is_resolved(self) -> bool:
        """True if project_path was matched against the real filesystem."""
        return self.project_path != self.project_name

    def display_project_name(self) -> str:
        """Short project label for lists.

        The last component of the resolved path, or the slug without its
        surrounding hyphens when resolution failed.
        """
        if self.is_resolved:
            pure = PureWindowsPath if "\\" in self.project_path else PurePosixPath
            name = pure(self.project_path).name
            if name:
                return name
        return self.project_name.strip("-")

    def display_name(self) -> str:
        """``project [title] (short-id)``; the title part only if renamed."""
        if self.slug:
            return f"{self.display_project_name()} [{self.slug}] ({self.short_id})"
        return f"{self.display_project_name()} ({self.short_id})"
