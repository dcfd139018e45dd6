"""A linear undo/redo history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

__all__ = ["EditStack"]

T = TypeVar("T")


@dataclass
class EditStack(Generic[T]):
    """History of values with a pointer to the current one.

    ``factory`` builds the initial (empty) value. The stack starts out with
    that single value, unless ``entries`` and ``index`` are given.
    """

    factory: Callable[[], T] = field(compare=False, repr=False)
    entries: Optional[list[T]] = None
    index: int = 0

    def __post_init__(self) -> None:
        if self.entries is None:
            self.entries = [self.factory()]
        if not 0 <= self.index < len(self.entries):
            raise ValueError(
                f"index {self.index} is outside the stack of {len(self.entries)} entries"
            )

    def undo(self) -> T:
        """Step back one entry (staying on the first one) and return it."""
        self.index = max(self.index - 1, 0)
        return self.entries[self.index]

    def redo(self) -> T:
        """Step forward one entry (staying on the last one) and return it."""
        self.index = min(self.index + 1, len(self.entries) - 1)
        return self.entries[self.index]

    def insert(self, value: T) -> None:
        """Add ``value`` after the current entry, dropping any undone entries."""
        del self.entries[self.index + 1 :]
        self.entries.append(value)
        self.index += 1

    def reset(self) -> None:
        """Return to the initial state holding a single fresh value."""
        self.entries = [self.factory()]
        self.index = 0

    def current(self) -> T:
        """The entry currently pointed to."""
        return self.entries[self.index]