"""Recently used files and a text document bound to at most one file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import Union

PathArg = Union[str, "PathLike[str]"]

DEFAULT_LIMIT = 10


class NoFileError(Exception):
    """Raised when a document is saved but no file is attached to it."""


class RecentFiles:
    """An ordered list of recently opened paths, bounded by ``limit``."""

    def __init__(self, paths: Iterable[PathArg] = (), limit: int = DEFAULT_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._paths: list[str] = [str(path) for path in paths if str(path)]

    def add(self, path: PathArg) -> None:
        """Record ``path``; the oldest entry is dropped once the list is full."""
        path = str(path)
        if len(self._paths) >= self.limit:
            self._paths.pop(0)
        if path not in self._paths:
            self._paths.append(path)

    def clear(self) -> None:
        self._paths.clear()

    def __contains__(self, path: object) -> bool:
        if isinstance(path, PathLike):
            path = str(path)
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def to_list(self) -> list[str]:
        return list(self._paths)

    def __repr__(self) -> str:
        return f"RecentFiles({self._paths!r}, limit={self.limit})"


def _read_text(path: str) -> str:
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def _write_text(path: str, text: str) -> None:
    Path(path).write_bytes(text.encode("utf-8"))


class TextDocument:
    """Editable text that can be opened from, and saved to, a single file."""

    def __init__(self, text: str = "", recent: RecentFiles | None = None) -> None:
        self.text = text
        self.recent = recent if recent is not None else RecentFiles()
        self.opened_file = ""

    def open(self, path: PathArg) -> str:
        """Load ``path`` into the document and remember it as recent."""
        path = str(path)
        self.text = _read_text(path)
        self.opened_file = path
        self.recent.add(path)
        return self.text

    def save(self) -> str:
        """Write the text to the opened file and return its path."""
        if not self.opened_file:
            raise NoFileError("no file is open; use save_as")
        _write_text(self.opened_file, self.text)
        return self.opened_file

    def save_as(self, path: PathArg) -> str:
        """Write the text to ``path`` and make it the opened file."""
        path = str(path)
        _write_text(path, self.text)
        self.opened_file = path
        return path

    def close(self) -> None:
        """Detach the document from its file, keeping the text."""
        self.opened_file = ""

    def open_from_recent(self, path: PathArg) -> str:
        """Reopen a path that is in the recent list."""
        path = str(path)
        if path not in self.recent:
            raise ValueError(f"not a recent file: {path}")
        self.text = _read_text(path)
        self.opened_file = path
        return self.text

    def clear_recent(self) -> None:
        self.recent.clear()