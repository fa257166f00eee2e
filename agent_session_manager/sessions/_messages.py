"""Message extraction and sanitizing for Claude Code JSONL content.

Each JSONL line is one entry. Only ``user`` and ``assistant`` entries become
messages; everything else (progress events, file-history snapshots, queue
operations, custom titles) only counts toward the entry total.

Message text goes through a fixed cleaning pipeline that turns Claude Code's
inline markup (slash-command wrappers, local command output, task
notifications) into plain Markdown, then drops what is left as pure noise.
"""

import json
import re
from typing import Any, Iterator, List, Optional

from ..types import Message

_RE_CAVEAT = re.compile(r"<local-command-caveat>.*?</local-command-caveat>\n?", re.DOTALL)
_RE_TASK = re.compile(r"<task-notification>(.*?)</task-notification>", re.DOTALL)
_RE_COMMAND = re.compile(
    r"<command-name>(.*?)</command-name>.*?<command-args>(.*?)</command-args>",
    re.DOTALL,
)
_RE_STDOUT = re.compile(r"<local-command-stdout>(.*?)</local-command-stdout>", re.DOTALL)
_RE_TAG = re.compile(r"<[^>]+>")
# Real escape sequences, plus the bare "[0m" remnants left when ESC was lost
_RE_ANSI = re.compile(r"\x1b\[[0-9;]*[mGKHFABCDsuJr]|\[[0-9;]+m")
_RE_BLANK_LINES = re.compile(r"\n{3,}")
_RE_FENCED_BLOCK = re.compile(r"```(?:(?!```).)*```", re.DOTALL)

_MESSAGE_TYPES = ("user", "assistant")


def _is_utf8_text(entry: Any) -> bool:
    """False if a decoded entry holds lone surrogates from ``\\ud800``-style escapes."""
    try:
        json.dumps(entry, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _iter_entries(content: str) -> Iterator[Any]:
    """Yield every line of content that parses as JSON.

    Lines nested too deeply to decode and lines escaping unpaired
    surrogates are malformed and skipped like any other bad line.
    """
    for line in content.split("\n"):
        line = line.strip()
        if not line:
            continue
        try:
            entry = json.loads(line)
        except (json.JSONDecodeError, RecursionError):
            continue
        if "\\u" in line and not _is_utf8_text(entry):
            continue
        yield entry


def strip_ansi(text: str) -> str:
    return _RE_ANSI.sub("", text)


def _xml_inner(text: str, tag: str) -> Optional[str]:
    open_tag, close_tag = f"<{tag}>", f"</{tag}>"
    start = text.find(open_tag)
    end = text.find(close_tag)
    if start < 0 or end < 0:
        return None
    start += len(open_tag)
    if end < start:
        return None
    return text[start:end].strip()


def _task_replacement(match: re.Match) -> str:
    inner = match.group(1)
    summary = _xml_inner(inner, "summary") or "?"
    status = _xml_inner(inner, "status") or "?"
    return f"> **[Task {status}]** {summary}"


def _command_replacement(match: re.Match) -> str:
    name = match.group(1).strip()
    args = match.group(2).strip()
    if args:
        return f"`{name} {args}`"
    return f"`{name}`"


def _stdout_replacement(match: re.Match) -> str:
    inner = strip_ansi(match.group(1)).strip()
    if not inner:
        return ""
    return f"\n```\n{inner}\n```\n"


def clean_message_content(content: str) -> str:
    """Turn raw message text into display Markdown.

    Order matters: wrappers with meaningful inner text are rewritten before
    the catch-all tag stripper runs.
    """
    text = _RE_CAVEAT.sub("", content)
    text = _RE_TASK.sub(_task_replacement, text)
    text = _RE_COMMAND.sub(_command_replacement, text)
    text = _RE_STDOUT.sub(_stdout_replacement, text)
    text = _RE_TAG.sub("", text)
    text = strip_ansi(text)
    text = _RE_BLANK_LINES.sub("\n\n", text)
    return text.strip()


def is_noise_message(text: str) -> bool:
    """True for cleaned text that carries no conversation.

    A bare slash command (`` `/model` ``) or a lone fenced code block holding
    command output with no narrative around it.
    """
    t = text.strip()
    if not t:
        return True
    if len(t) > 2 and t.startswith("`") and t.endswith("`"):
        inner = t[1:-1]
        if inner.startswith("/") and "\n" not in inner and "`" not in inner:
            return True
    if _RE_FENCED_BLOCK.fullmatch(t):
        return True
    return False


def _entry_text(message: dict) -> Optional[str]:
    content = message.get("content")
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, dict) and block.get("type") == "text":
                text = block.get("text")
                if isinstance(text, str):
                    parts.append(text)
        return "\n".join(parts)
    return None


def extract_messages(content: str) -> List[Message]:
    """Parse JSONL content into sanitized, noise-free messages in file order."""
    messages: List[Message] = []
    for entry in _iter_entries(content):
        if not isinstance(entry, dict) or entry.get("type") not in _MESSAGE_TYPES:
            continue

        msg = entry.get("message")
        if not isinstance(msg, dict):
            continue

        raw = _entry_text(msg)
        if raw is None:
            continue

        text = clean_message_content(raw)
        if is_noise_message(text):
            continue

        role = msg.get("role")
        if not isinstance(role, str) or not role:
            role = "unknown"
        messages.append(Message(role=role, content=text))

    return messages


def count_entries(content: str) -> int:
    """Count every line that is valid JSON, whatever its type."""
    return sum(1 for _ in _iter_entries(content))


def extract_custom_title(content: str) -> Optional[str]:
    """Return the session's custom title set via rename, if any.

    Renames append a new ``custom-title`` entry, so the last one wins.
    """
    title = None
    for entry in _iter_entries(content):
        if isinstance(entry, dict) and entry.get("type") == "custom-title":
            value = entry.get("customTitle")
            if isinstance(value, str) and value:
                title = value
    return title
