"""
Git client implementation for commitz.

This module wraps the three Git operations the commit assistant needs:
reading the staged diff, reading the current branch, and creating a
commit. Every subprocess call goes through :meth:`GitClient._run` so
that unit tests can mock it easily. Commands are attempted exactly
once; failures are surfaced as :class:`GitError`.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when a Git command fails or Git is not available."""

    pass


class GitClient:
    """Client for interacting with a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached. ``.git`` may be a file for worktrees and
        submodules, so only existence is checked.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(
        self,
        args: List[str],
        check: bool = True,
        input_text: Optional[str] = None,
    ) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If Git cannot be executed, or if the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                input=input_text,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",  # binary diffs must not break decoding
            )
        except OSError as exc:
            logger.error("Unable to execute git: %s", exc)
            raise GitError(f"Unable to execute git: {exc}") from exc

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(
                result.stderr.strip()
                or result.stdout.strip()
                or f"git {args[0]} exited with status {result.returncode}"
            )
        return result

    # ------------------------------------------------------------------
    # Diff and branch
    # ------------------------------------------------------------------
    def get_staged_diff(self) -> str:
        """Return the output of ``git diff --cached``.

        An empty string means nothing is staged.

        Raises
        ------
        GitError
            If the diff cannot be produced.
        """
        result = self._run(["diff", "--cached"], check=True)
        return result.stdout

    def get_current_branch(self) -> str:
        """Return the current branch name, or ``""`` if it cannot be read.

        A detached HEAD also yields ``""``. Failure here is never fatal:
        the scope simply cannot be derived from the branch.
        """
        try:
            result = self._run(["branch", "--show-current"], check=True)
        except GitError as exc:
            logger.debug("Could not determine current branch: %s", exc)
            return ""
        return result.stdout.strip()

    # ------------------------------------------------------------------
    # Committing
    # ------------------------------------------------------------------
    def commit(self, message: str) -> str:
        """Create a commit from the staged changes with ``message``.

        The message is passed on stdin (``git commit -F -``) so that
        multi-line bodies survive unchanged. Git's standard output is
        returned for display.

        Raises
        ------
        GitError
            If the commit is rejected, e.g. by a hook.
        """
        result = self._run(["commit", "-F", "-"], check=True, input_text=message)
        return result.stdout
