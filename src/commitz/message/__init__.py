"""
Commit message composition.

See :mod:`commitz.message.composer` for the rendering rules.
"""

from .commit_message import CommitMessage  # noqa: F401
from .composer import append_body, compose, emoji_for, parse_message, validate_summary  # noqa: F401
