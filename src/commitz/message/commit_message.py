"""
Data model for a composed commit message.

A :class:`CommitMessage` holds the fields of a Conventional Commit
message before rendering. Rendering and parsing live in
:mod:`commitz.message.composer`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from commitz.analysis.change_types import ChangeType


@dataclass(frozen=True)
class CommitMessage:
    """Representation of a commit message.

    Attributes
    ----------
    type : ChangeType
        The Conventional Commit type.
    summary : str
        One-line description. Must not be empty.
    scope : Optional[str]
        Subsystem shown in parentheses, if any.
    emoji : str
        Glyph prefix including its trailing space, or ``""``.
    body : Optional[str]
        Free text placed after a blank line.
    """

    type: ChangeType
    summary: str
    scope: Optional[str] = None
    emoji: str = ""
    body: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.summary or not self.summary.strip():
            raise ValueError("Commit summary must not be empty")

    @property
    def header(self) -> str:
        from commitz.message.composer import compose

        return compose(self.emoji, self.type, self.scope, self.summary)

    def render(self) -> str:
        from commitz.message.composer import append_body

        return append_body(self.header, self.body)

    def with_body(self, body: Optional[str]) -> "CommitMessage":
        return replace(self, body=body)
