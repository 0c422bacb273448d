"""
Value types shared by the suggestion pipeline.

Suggestions travel through the pipeline as plain strings (title, then an
optional body separated by a blank line). :class:`Suggestion` is the
structured view of such a string used for display, and
:class:`SelectionOutcome` is the terminal decision produced by the
interactive selection loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class DiffPayload:
    """A captured unified diff and whether it came from the index."""

    text: str
    staged: bool

    def is_empty(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class Suggestion:
    """One candidate commit message."""

    title: str
    body: Optional[str] = None

    @classmethod
    def from_text(cls, text: str) -> "Suggestion":
        """Split a flat suggestion on its first blank-line separator."""
        parts = text.split("\n\n", 1)
        title = parts[0].strip()
        body = parts[1].strip() if len(parts) > 1 and parts[1].strip() else None
        return cls(title=title, body=body)

    def render(self) -> str:
        if self.body:
            return f"{self.title}\n\n{self.body}"
        return self.title


class Selection(Enum):
    CHOSEN = "chosen"
    EDIT = "edit"
    QUIT = "quit"


@dataclass(frozen=True)
class SelectionOutcome:
    """Result of the selection loop: a 0-based index, an edit request or quit."""

    kind: Selection
    index: Optional[int] = None

    @classmethod
    def chosen(cls, index: int) -> "SelectionOutcome":
        return cls(Selection.CHOSEN, index)

    @classmethod
    def edit(cls) -> "SelectionOutcome":
        return cls(Selection.EDIT)

    @classmethod
    def quit(cls) -> "SelectionOutcome":
        return cls(Selection.QUIT)
