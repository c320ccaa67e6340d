"""
Version control integration.

Only Git is supported. See :mod:`commitz.vcs.git_client`.
"""

from .git_client import GitClient, GitError  # noqa: F401
