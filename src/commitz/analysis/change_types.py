"""
Conventional Commit change types.

The set of types is closed: commitz never invents new tags at runtime.
Each member carries a human readable label (shown in the interactive
type list) and an optional glyph that is prefixed to the message header
when emoji output is enabled.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class ChangeType(str, Enum):
    """Conventional Commit type tag."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Short description of what the type is used for."""
        return _LABELS[self]

    @property
    def glyph(self) -> str:
        """Decorative prefix including its trailing space, or ``""``."""
        return _GLYPHS.get(self, "")

    @classmethod
    def parse(cls, text: str) -> "ChangeType":
        """Convert a tag such as ``"Feat "`` into a :class:`ChangeType`.

        Raises
        ------
        ValueError
            If ``text`` does not name one of the known types.
        """
        tag = (text or "").strip().lower()
        try:
            return cls(tag)
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown commit type '{text}' (expected one of: {known})") from None


_LABELS: Dict[ChangeType, str] = {
    ChangeType.FEAT: "A new feature",
    ChangeType.FIX: "A bug fix",
    ChangeType.DOCS: "Documentation only changes",
    ChangeType.STYLE: "Formatting, white-space, missing semicolons",
    ChangeType.REFACTOR: "A code change that neither fixes a bug nor adds a feature",
    ChangeType.PERF: "A code change that improves performance",
    ChangeType.TEST: "Adding missing tests or correcting existing tests",
    ChangeType.BUILD: "Changes to the build system or dependencies",
    ChangeType.CI: "Changes to CI configuration files and scripts",
    ChangeType.CHORE: "Other changes that don't modify src or test files",
}

# build and ci have no glyph
_GLYPHS: Dict[ChangeType, str] = {
    ChangeType.FEAT: "✨ ",
    ChangeType.FIX: "🐛 ",
    ChangeType.DOCS: "📝 ",
    ChangeType.REFACTOR: "♻️ ",
    ChangeType.TEST: "✅ ",
    ChangeType.CHORE: "🧹 ",
    ChangeType.STYLE: "💄 ",
    ChangeType.PERF: "⚡ ",
}
