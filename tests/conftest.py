"""Shared fixtures: an isolated Claude data root with fixture sessions."""

import json
import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest


def session_lines(
    messages: Sequence[tuple[str, str]],
    session_id: str = "sess",
    custom_title: Optional[str] = None,
) -> list[str]:
    """JSONL lines the way Claude Code writes them: user text as a string,
    assistant text as content blocks."""
    lines = []
    for i, (role, text) in enumerate(messages):
        if role == "assistant":
            content = [{"type": "text", "text": text}]
        else:
            content = text
        lines.append(json.dumps({
            "type": role,
            "message": {"role": role, "content": content},
            "uuid": f"test-uuid-{i:03d}",
        }))
    if custom_title:
        lines.append(json.dumps({
            "type": "custom-title",
            "customTitle": custom_title,
            "sessionId": session_id,
        }))
    return lines


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty Claude data root (holds projects/ and trash/)."""
    root = tmp_path / "claude"
    root.mkdir()
    return root


@pytest.fixture
def write_session(data_dir: Path) -> Callable[..., Path]:
    """Factory writing ``<data_dir>/<tree>/<slug>/<id>.jsonl``."""

    def _write(
        slug: str,
        session_id: str,
        messages: Sequence[tuple[str, str]] = (("user", "Hello"),),
        custom_title: Optional[str] = None,
        tree: str = "projects",
        extra_lines: Sequence[str] = (),
    ) -> Path:
        project_dir = data_dir / tree / slug
        project_dir.mkdir(parents=True, exist_ok=True)
        lines = session_lines(messages, session_id, custom_title) + list(extra_lines)
        path = project_dir / f"{session_id}.jsonl"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
