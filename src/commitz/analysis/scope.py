"""
Scope helpers.

The scope shown in ``type(scope): summary`` is guessed from the branch
name (``feature/login-page`` -> ``feature``). For the interactive scope
list a few more candidates are derived from the touched paths.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


def extract_scope(branch_name: Optional[str]) -> Optional[str]:
    """Return the text before the first ``/`` of a branch name.

    Returns None when the branch has no ``/`` or the prefix is blank.
    """
    branch = (branch_name or "").strip()
    if "/" not in branch:
        return None
    prefix = branch.split("/", 1)[0].strip()
    return prefix or None


def candidate_scopes(files: Iterable[str]) -> List[str]:
    """Top-level directories of the touched files, unique and in order."""
    scopes: List[str] = []
    for path in files:
        parts = [part for part in path.split("/") if part]
        if len(parts) < 2:
            continue
        top = parts[0]
        if top not in scopes:
            scopes.append(top)
    return scopes
