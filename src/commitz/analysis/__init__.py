"""
Staged diff analysis.

This package classifies a staged diff into a Conventional Commit type
and proposes a summary and scope. See
:mod:`commitz.analysis.change_classifier` for the rule chains and
:mod:`commitz.analysis.diff_record` for the diff parsing.
"""

from .change_classifier import Analysis, analyze, classify, suggest_summary  # noqa: F401
from .change_types import ChangeType  # noqa: F401
from .diff_record import DiffRecord, extract_files  # noqa: F401
from .scope import candidate_scopes, extract_scope  # noqa: F401
