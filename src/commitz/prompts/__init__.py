"""
Prompt implementations for the review step.

See :mod:`commitz.prompts.prompter`.
"""

from .prompter import DefaultPrompter, InteractivePrompter, Prompter  # noqa: F401
