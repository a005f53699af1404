"""Two side-by-side text panes, each bound to its own file and recent list."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from cutetools.recent import PathArg, RecentFiles, TextDocument


class Pane(Enum):
    """Which of the two panes an operation applies to."""

    FIRST = "first"
    SECOND = "second"


def _as_recent(value: RecentFiles | Iterable[PathArg] | None) -> RecentFiles:
    if value is None:
        return RecentFiles()
    if isinstance(value, RecentFiles):
        return value
    return RecentFiles(value)


class PairedSession:
    """A pair of text documents edited together, such as source and encoded text."""

    def __init__(
        self,
        recent_first: RecentFiles | Iterable[PathArg] | None = None,
        recent_second: RecentFiles | Iterable[PathArg] | None = None,
    ) -> None:
        self.documents: dict[Pane, TextDocument] = {
            Pane.FIRST: TextDocument(recent=_as_recent(recent_first)),
            Pane.SECOND: TextDocument(recent=_as_recent(recent_second)),
        }

    def open(self, pane: Pane, path: PathArg) -> str:
        """Load ``path`` into ``pane`` and return its text."""
        return self.documents[Pane(pane)].open(path)

    def save(self, pane: Pane) -> str:
        """Write ``pane`` back to its file; raises NoFileError when it has none."""
        return self.documents[Pane(pane)].save()

    def save_as(self, pane: Pane, path: PathArg) -> str:
        """Write ``pane`` to ``path`` and bind it to that file."""
        return self.documents[Pane(pane)].save_as(path)

    def close(self, pane: Pane | None = None) -> None:
        """Detach a file; ``pane`` is only needed when both panes have one."""
        first = self.documents[Pane.FIRST]
        second = self.documents[Pane.SECOND]
        if not first.opened_file:
            second.close()
        elif not second.opened_file:
            first.close()
        else:
            if pane is None:
                raise ValueError("both panes have files; choose which to close")
            self.documents[Pane(pane)].close()

    def opened_file_name(self) -> str:
        """Both opened paths joined by a space."""
        return (
            self.documents[Pane.FIRST].opened_file
            + " "
            + self.documents[Pane.SECOND].opened_file
        )

    def recent_files(self) -> list[str]:
        """Recent paths of the first pane followed by those of the second."""
        return (
            self.documents[Pane.FIRST].recent.to_list()
            + self.documents[Pane.SECOND].recent.to_list()
        )

    def open_from_recent(self, path: PathArg) -> Pane:
        """Reopen a recent path in the pane whose list holds it."""
        path = str(path)
        for pane in (Pane.FIRST, Pane.SECOND):
            document = self.documents[pane]
            if path in document.recent:
                document.open_from_recent(path)
                return pane
        raise ValueError(f"not a recent file: {path}")

    def clear_recent(self) -> None:
        for document in self.documents.values():
            document.clear_recent()