"""Clipboards used for cut, copy and paste inside the editor."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

__all__ = ["ClipboardMode", "Clipboard", "LocalClipboard", "get_local_clipboard"]


class ClipboardMode(enum.Enum):
    """How clipboard content is inserted when pasted."""

    NORMAL = enum.auto()
    """As direct content at the cursor position."""
    LINES = enum.auto()
    """As whole lines below or above the current one."""


class Clipboard(ABC):
    """Storage for one piece of cut or copied text and its paste mode."""

    @abstractmethod
    def set(self, content: str, mode: ClipboardMode) -> None:
        """Replace the clipboard content."""

    @abstractmethod
    def get(self) -> tuple[str, ClipboardMode]:
        """Return the content and the mode it should be pasted with."""

    def clear(self) -> None:
        """Empty the clipboard."""
        self.set("", ClipboardMode.NORMAL)

    def __len__(self) -> int:
        return len(self.get()[0])


class LocalClipboard(Clipboard):
    """A clipboard that lives only inside the application."""

    def __init__(self) -> None:
        self._content = ""
        self._mode = ClipboardMode.NORMAL

    def __repr__(self) -> str:
        return f"LocalClipboard({self._content!r}, {self._mode.name})"

    def set(self, content: str, mode: ClipboardMode) -> None:
        self._content = content
        self._mode = mode

    def get(self) -> tuple[str, ClipboardMode]:
        return self._content, self._mode


def get_local_clipboard() -> Clipboard:
    """Create a new, empty application-local clipboard."""
    return LocalClipboard()