"""Slug <-> filesystem path mapping.

Claude Code names project directories by flattening the working directory:
    /home/box/git/my-project -> -home-box-git-my-project
    C:\\Users\\box\\app      -> C--Users-box-app

The encoding is lossy (a hyphen in the slug may have been a separator, a
dot, or a real hyphen), so decoding walks the live filesystem and greedily
consumes the longest run of tokens that names an existing directory.

Known limitation: siblings whose names overlap token boundaries (``a`` and
``a-b`` under the same parent, slug ``a-b-c``) resolve to whichever longer
candidate exists first; there is no backtracking.
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_ENCODED_CHARS = re.compile(r"[/\\:.]")


def encode_path(path: Path | str) -> str:
    """Encode a path the way Claude Code names its project directories.

    /home/box/git/project     -> -home-box-git-project
    /home/box/.config/nvim    -> -home-box--config-nvim
    """
    return _ENCODED_CHARS.sub("-", str(path))


def split_slug(slug: str, windows: bool = False) -> tuple[Optional[str], list[str]]:
    """Split a slug into an optional drive root and its path tokens.

    On Windows, ``C--Users-box`` yields ``("C:\\", ["Users", "box"])``.
    Otherwise the leading hyphen (the root separator) is dropped and the
    root is None.
    """
    if windows:
        tokens = slug.split("-")
        if len(tokens) >= 2 and len(tokens[0]) == 1 and tokens[0].isalpha() and tokens[1] == "":
            return f"{tokens[0].upper()}:\\", tokens[2:]
    if slug.startswith("-"):
        slug = slug[1:]
    if not slug:
        return None, []
    return None, slug.split("-")


class PathResolver:
    """Reconstructs real directory paths from project slugs.

    Resolution never raises: a slug without a matching directory chain
    resolves to None, and callers display the slug instead.
    """

    def __init__(self, root: Optional[Path] = None, windows: Optional[bool] = None):
        self._windows = os.name == "nt" if windows is None else windows
        self._root = root

    def _children(self, directory: Path) -> list[str]:
        try:
            return [entry.name for entry in os.scandir(directory) if entry.is_dir()]
        except OSError as exc:
            logger.debug(f"Cannot list {directory}: {exc}")
            return []

    @staticmethod
    def _match(candidate: str, names: list[str]) -> Optional[str]:
        if candidate in names:
            return candidate
        for name in names:
            if name.replace(".", "-") == candidate:
                return name
        return None

    def resolve(self, slug: str) -> Optional[str]:
        """Resolve a slug to an absolute path string, or None if unresolved."""
        drive, tokens = split_slug(slug, self._windows)
        if self._root is not None:
            current = self._root
        elif drive is not None:
            current = Path(drive)
        else:
            current = Path(os.path.abspath(os.sep))

        pos = 0
        while pos < len(tokens):
            names = self._children(current)
            if not names:
                return None
            for end in range(len(tokens), pos, -1):
                match = self._match("-".join(tokens[pos:end]), names)
                if match is not None:
                    current = current / match
                    pos = end
                    break
            else:
                logger.debug(f"Slug {slug!r} unresolved below {current}")
                return None

        return str(current)


def resolve_slug(slug: str, root: Optional[Path] = None) -> Optional[str]:
    """Convenience wrapper around PathResolver(root).resolve(slug)."""
    return PathResolver(root=root).resolve(slug)
