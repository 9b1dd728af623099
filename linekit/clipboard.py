"""Clipboards that hold cut text together with how it should be pasted."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class ClipboardMode(Enum):
    """How clipboard content is inserted when pasted."""

    NORMAL = "normal"
    """As direct content at the cursor position."""
    LINES = "lines"
    """As whole lines above or below the current one."""


class Clipboard(ABC):
    """Storage for cut and copied text."""

    @abstractmethod
    def set(self, content: str, mode: ClipboardMode) -> None:
        """Store ``content`` to be pasted in ``mode``."""

    @abstractmethod
    def get(self) -> tuple[str, ClipboardMode]:
        """Return the stored content and its paste mode."""

    def clear(self) -> None:
        """Empty the clipboard."""
        self.set("", ClipboardMode.NORMAL)

    def __len__(self) -> int:
        return len(self.get()[0])


class LocalClipboard(Clipboard):
    """A clipboard that lives only inside this process."""

    def __init__(self) -> None:
        self._content = ""
        self._mode = ClipboardMode.NORMAL

    def set(self, content: str, mode: ClipboardMode) -> None:
        self._content = content
        self._mode = mode

    def get(self) -> tuple[str, ClipboardMode]:
        return self._content, self._mode


def get_default_clipboard() -> Clipboard:
    """Return the clipboard an editor uses when none is given."""
    return LocalClipboard()