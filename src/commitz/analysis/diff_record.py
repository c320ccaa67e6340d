"""
Parsing helpers for staged diff text.

A :class:`DiffRecord` is built once per invocation from the output of
``git diff --cached``. Only two things are derived from the raw text:
the ordered list of touched files and the substantive added lines. The
parsing never raises; malformed or binary input simply yields empty
lists.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

NO_FILE_SENTINEL = "/dev/null"
MIN_LINE_LENGTH = 3
COMMENT_PREFIXES: Tuple[str, ...] = ("#", "//", "/*", "*", "--", "<!--")


def extract_files(diff_text: str) -> List[str]:
    """Return touched file paths in first-occurrence order.

    Header lines (``+++`` / ``---``) are scanned and their second
    whitespace-delimited field is taken as the path. The ``a/`` and
    ``b/`` prefixes added by git are stripped and ``/dev/null`` is
    skipped.
    """
    files: List[str] = []
    seen = set()
    for line in (diff_text or "").splitlines():
        if not line.startswith(("+++", "---")):
            continue
        fields = line.split()
        if len(fields) < 2:
            continue
        path = fields[1]
        if path == NO_FILE_SENTINEL:
            continue
        if path.startswith(("a/", "b/")):
            path = path[2:]
        if path and path not in seen:
            seen.add(path)
            files.append(path)
    return files


def is_substantive(content: str) -> bool:
    """Return True if an added line carries more than a comment or a stub."""
    stripped = content.strip()
    if len(stripped) <= MIN_LINE_LENGTH:
        return False
    return not stripped.startswith(COMMENT_PREFIXES)


def extract_added_lines(diff_text: str) -> List[str]:
    """Return the content of substantive ``+`` lines, without the marker."""
    added = []
    for line in (diff_text or "").splitlines():
        if not line.startswith("+") or line.startswith("+++"):
            continue
        content = line[1:]
        if is_substantive(content):
            added.append(content)
    return added


def basename_without_extension(path: str) -> str:
    """``src/auth/login.py`` -> ``login``."""
    return os.path.splitext(os.path.basename(path))[0]


@dataclass(frozen=True)
class DiffRecord:
    """Staged diff text plus the fields derived from it.

    Attributes
    ----------
    text : str
        Raw output of ``git diff --cached``.
    files : List[str]
        Touched paths, insertion order, duplicates removed.
    added_lines : List[str]
        Substantive added lines (longer than a few characters and not
        comment-only).
    """

    text: str
    files: List[str] = field(default_factory=list)
    added_lines: List[str] = field(default_factory=list)

    @classmethod
    def from_diff(cls, diff_text: str) -> "DiffRecord":
        text = diff_text or ""
        return cls(
            text=text,
            files=extract_files(text),
            added_lines=extract_added_lines(text),
        )

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    @property
    def first_basename(self) -> Optional[str]:
        """Base name of the first touched file, or None if no file was found."""
        if not self.files:
            return None
        return basename_without_extension(self.files[0]) or None
