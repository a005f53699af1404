"""Back and forward history of the files shown in a preview."""

from __future__ import annotations

from cutetools.recent import PathArg


class PreviewHistory:
    """Two stacks of visited paths, with consecutive duplicates collapsed."""

    def __init__(self) -> None:
        self.previous_stack: list[str] = []
        self.next_stack: list[str] = []

    @staticmethod
    def _push(stack: list[str], path: str) -> None:
        if stack and stack[-1] == path:
            return
        stack.append(path)

    def visit(self, path: PathArg) -> None:
        """Record ``path`` as the file now shown."""
        self._push(self.previous_stack, str(path))

    def previous(self) -> str | None:
        """Step back; return the path to show, or None when there is nowhere to go."""
        if len(self.previous_stack) <= 1:
            return None
        self._push(self.next_stack, self.previous_stack.pop())
        return self.previous_stack[-1]

    def next(self) -> str | None:
        """Step forward; return the path to show, or None when there is nowhere to go."""
        if not self.next_stack:
            return None
        self._push(self.previous_stack, self.next_stack[-1])
        return self.next_stack.pop()

    def current(self) -> str | None:
        """The path at the top of the back history."""
        return self.previous_stack[-1] if self.previous_stack else None