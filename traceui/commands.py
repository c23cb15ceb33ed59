"""Commands, command providers and the filtering logic of the command palette."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass
class NormalCommand:
    """A command shown in the palette, matched against the user's input."""

    primary_label: str
    secondary_label: str = ""
    category: str = ""
    color: Any = None
    shortcut: str = ""
    aliases: Sequence[str] = ()
    fn: Optional[Callable[[], Any]] = None

    def filter(self, text: str) -> bool:
        """Report whether every whitespace-separated word of text occurs in the command.

        A word matches if it is a case-insensitive substring of the primary label,
        the secondary label, the category or any alias.
        """
        haystacks = [
            self.primary_label.lower(),
            self.secondary_label.lower(),
            self.category.lower(),
            *(alias.lower() for alias in self.aliases),
        ]
        return all(
            any(word in haystack for haystack in haystacks)
            for word in (w.lower() for w in text.split())
        )

    def link(self) -> Any:
        """Run the command's function and return the action it produces."""
        if self.fn is None:
            raise ValueError(f"command {self.primary_label!r} has no action")
        return self.fn()


@dataclass
class MultiCommandProvider:
    """Concatenates several command sequences into one."""

    providers: list[Sequence[Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return sum(len(provider) for provider in self.providers)

    def __getitem__(self, index: int) -> Any:
        total = len(self)
        if index < 0:
            index += total
        if not 0 <= index < total:
            raise IndexError("command index out of range")
        for provider in self.providers:
            size = len(provider)
            if index < size:
                return provider[index]
            index -= size
        raise IndexError("command index out of range")


class CommandPalette:
    """Selection state of the command palette: filtering and keyboard navigation."""

    def __init__(self, commands: Sequence[Any] = ()) -> None:
        self._commands: Sequence[Any] = commands
        self._text = ""
        self._filtered: list[int] = []
        self._active = 0
        self._refilter()

    def _refilter(self) -> None:
        if self._text == "":
            self._filtered = list(range(len(self._commands)))
        else:
            self._filtered = [
                i for i in range(len(self._commands)) if self._commands[i].filter(self._text)
            ]
        self._clamp()

    def _clamp(self) -> None:
        if self._active > len(self._filtered) - 1:
            self._active = max(0, len(self._filtered) - 1)

    @property
    def text(self) -> str:
        """The current input text."""
        return self._text

    @property
    def active(self) -> int:
        """Position of the highlighted command within the filtered commands."""
        return self._active

    def set(self, commands: Sequence[Any]) -> None:
        """Replace the available commands and filter them by the current text."""
        self._commands = commands
        self._refilter()

    def update_text(self, text: str) -> None:
        """Set the input text and filter the commands by it."""
        self._text = text
        self._refilter()

    def filtered(self) -> list[int]:
        """Return the indices of the commands that match the current text."""
        return list(self._filtered)

    def active_command(self) -> Optional[Any]:
        """Return the highlighted command, or None if no command matches."""
        self._clamp()
        if not 0 <= self._active < len(self._filtered):
            return None
        return self._commands[self._filtered[self._active]]

    def move_up(self) -> None:
        """Highlight the previous command, wrapping to the last one."""
        self._active -= 1
        if self._active < 0:
            self._active = len(self._filtered) - 1

    def move_down(self) -> None:
        """Highlight the next command, wrapping to the first one."""
        self._active += 1
        if self._active >= len(self._filtered):
            self._active = 0