"""
Rendering and parsing of Conventional Commit messages.

All functions here are pure. The header format is::

    <emoji><type>(<scope>): <summary>

with ``(<scope>)`` omitted when there is no scope and ``<emoji>`` being
either empty or a glyph followed by a space. An optional body follows
the header after one blank line.
"""

from __future__ import annotations

import re
from typing import Optional

from commitz.analysis.change_types import ChangeType
from commitz.message.commit_message import CommitMessage

SUMMARY_MIN_LENGTH = 3
SUMMARY_MAX_LENGTH = 72

HEADER_RE = re.compile(
    r"^(?P<emoji>[^\w]*?)"
    r"(?P<type>" + "|".join(re.escape(member.value) for member in ChangeType) + r")"
    r"(?:\((?P<scope>[^:(]*)\))?"
    r": (?P<summary>.+)$"
)


def compose(emoji: str, change_type: ChangeType, scope: Optional[str], summary: str) -> str:
    """Render the header line of a commit message."""
    tag = ChangeType(change_type).value
    if scope:
        return f"{emoji or ''}{tag}({scope}): {summary}"
    return f"{emoji or ''}{tag}: {summary}"


def append_body(header: str, body: Optional[str]) -> str:
    """Append ``body`` after a blank line, unless it is blank."""
    text = (body or "").strip()
    if text:
        return f"{header}\n\n{text}"
    return header


def emoji_for(change_type: ChangeType, enabled: bool) -> str:
    return ChangeType(change_type).glyph if enabled else ""


def validate_summary(summary: str) -> Optional[str]:
    """Return an error message if ``summary`` has an unacceptable length."""
    length = len((summary or "").strip())
    if length < SUMMARY_MIN_LENGTH:
        return f"Summary must be at least {SUMMARY_MIN_LENGTH} characters long"
    if length > SUMMARY_MAX_LENGTH:
        return f"Summary must be at most {SUMMARY_MAX_LENGTH} characters long ({length} given)"
    return None


def parse_message(text: str) -> CommitMessage:
    """Parse a rendered message back into a :class:`CommitMessage`.

    Raises
    ------
    ValueError
        If the first line is not a Conventional Commit header.
    """
    header, _, rest = (text or "").partition("\n")
    match = HEADER_RE.match(header)
    if match is None:
        raise ValueError(f"Not a conventional commit header: {header!r}")
    body = rest.strip() or None
    return CommitMessage(
        type=ChangeType(match.group("type")),
        summary=match.group("summary"),
        scope=match.group("scope") or None,
        emoji=match.group("emoji"),
        body=body,
    )
