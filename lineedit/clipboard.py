"""Clipboards for cut, copy and paste inside the editor."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = ["ClipboardMode", "Clipboard", "LocalClipboard", "get_local_clipboard"]


class ClipboardMode(enum.Enum):
    """How clipboard content is put back into the buffer."""

    NORMAL = "normal"
    """As direct content at the cursor position."""
    LINES = "lines"
    """As whole lines above or below the cursor's line."""


class Clipboard(ABC):
    """Something that holds cut or copied text together with its paste mode."""

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
        """Length of the stored content in UTF-8 bytes."""
        return len(self.get()[0].encode("utf-8", "surrogatepass"))


@dataclass
class LocalClipboard(Clipboard):
    """A clipboard that lives only inside this process."""

    content: str = ""
    mode: ClipboardMode = ClipboardMode.NORMAL

    def set(self, content: str, mode: ClipboardMode) -> None:
        self.content = content
        self.mode = mode

    def get(self) -> tuple[str, ClipboardMode]:
        return self.content, self.mode


def get_local_clipboard() -> Clipboard:
    """Create a fresh, empty process-local clipboard."""
    return LocalClipboard()