import os
from pathlib import Path

from loguru import logger
from pydantic import BaseModel


class FileCacheStats(BaseModel, frozen=True):
    files_checked: int
    files_loaded: int


def is_within(root: Path, relative_path: str) -> bool:
    """True if `relative_path` resolved against `root` stays inside it.

    Absolute paths and `..` segments that leave the root are rejected.
    """
    full_path = Path(os.path.normpath(root / relative_path))
    return full_path == root or root in full_path.parents


class FileCache:
    """Lazy, memoized file access scoped to one working directory.

    Create one per pipeline run: the working tree may change between runs.
    Entries are keyed by the normalized absolute path, so `./a.py` and
    `a.py` share an entry. A cached `None` means the file is absent or
    unreadable. Paths outside the working directory are never read.
    """

    def __init__(self, working_dir: str | Path):
        self.working_dir = Path(os.path.abspath(working_dir))
        self._content: dict[Path, str | None] = {}
        self._lines: dict[Path, list[str]] = {}

    def resolve(self, relative_path: str) -> Path:
        return Path(os.path.normpath(self.working_dir / relative_path))

    def exists(self, relative_path: str) -> bool:
        if not is_within(self.working_dir, relative_path):
            logger.debug("Outside working directory: {}", relative_path)
            return False

        full_path = self.resolve(relative_path)

        if full_path in self._content:
            return self._content[full_path] is not None

        if full_path.is_file():
            # Content is loaded on first read, not here.
            return True

        self._content[full_path] = None
        logger.debug("File not found: {}", full_path)
        return False

    def get_content(self, relative_path: str) -> str | None:
        if not is_within(self.working_dir, relative_path):
            logger.debug("Outside working directory: {}", relative_path)
            return None

        full_path = self.resolve(relative_path)

        if full_path in self._content:
            return self._content[full_path]

        try:
            content = full_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read {}: {}", full_path, e)
            content = None

        self._content[full_path] = content
        return content

    def get_lines(self, relative_path: str) -> list[str] | None:
        full_path = self.resolve(relative_path)

        if full_path in self._lines:
            return self._lines[full_path]

        content = self.get_content(relative_path)
        if content is None:
            return None

        lines = content.split("\n")
        self._lines[full_path] = lines
        return lines

    def get_line_count(self, relative_path: str) -> int | None:
        lines = self.get_lines(relative_path)
        return len(lines) if lines is not None else None

    def get_stats(self) -> FileCacheStats:
        loaded = sum(1 for content in self._content.values() if content is not None)
        return FileCacheStats(files_checked=len(self._content), files_loaded=loaded)
