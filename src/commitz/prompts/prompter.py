"""
Operator interaction for the review step.

The CLI runs one review sequence (type, scope, emoji, summary, body,
confirmation) against a :class:`Prompter`. Two implementations exist:

* :class:`DefaultPrompter` answers every question with its default, so
  the heuristic suggestions are used unchanged.
* :class:`InteractivePrompter` asks the operator through click prompts.

Cancelling an interactive prompt (Ctrl-C or end of input) raises
:class:`click.Abort`; the CLI turns that into a neutral exit.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

import click


logger = logging.getLogger(__name__)

# A validator returns an error message, or None if the value is acceptable.
Validator = Callable[[str], Optional[str]]

# (value, description) pairs shown in a selection list.
Choice = Tuple[str, str]


class Prompter(ABC):
    """Capability interface used by the review sequence."""

    interactive = False

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        """Return one of the choice values."""

    @abstractmethod
    def confirm(self, message: str, default: bool = True) -> bool:
        """Return the answer to a yes/no question."""

    @abstractmethod
    def text(
        self,
        message: str,
        default: str = "",
        validate: Optional[Validator] = None,
        multiline: bool = False,
    ) -> str:
        """Return free text entered by the operator."""


class DefaultPrompter(Prompter):
    """Non-interactive prompter: every question gets its default answer."""

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        return default

    def confirm(self, message: str, default: bool = True) -> bool:
        return default

    def text(
        self,
        message: str,
        default: str = "",
        validate: Optional[Validator] = None,
        multiline: bool = False,
    ) -> str:
        return default


class InteractivePrompter(Prompter):
    """Prompter that delegates to click's terminal prompts."""

    interactive = True

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        """Show a numbered list and return the value the operator picked.

        The default entry is pre-selected; pressing Enter accepts it.
        """
        if not choices:
            raise ValueError("select() needs at least one choice")
        values = [value for value, _ in choices]
        default_index = values.index(default) + 1 if default in values else 1

        click.echo(f"\n{message}")
        width = max(len(value) for value in values)
        for idx, (value, description) in enumerate(choices, start=1):
            marker = ">" if idx == default_index else " "
            line = f" {marker} {idx:>2}. {value.ljust(width)}"
            if description:
                line += f"  {click.style(description, dim=True)}"
            click.echo(line)

        picked = click.prompt(
            "   Select",
            type=click.IntRange(1, len(values)),
            default=default_index,
            show_default=True,
        )
        logger.debug("Selected %r for %r", values[picked - 1], message)
        return values[picked - 1]

    def confirm(self, message: str, default: bool = True) -> bool:
        return click.confirm(f"\n{message}", default=default)

    def text(
        self,
        message: str,
        default: str = "",
        validate: Optional[Validator] = None,
        multiline: bool = False,
    ) -> str:
        if multiline:
            return self._multiline(message)
        while True:
            value = click.prompt(
                f"\n{message}",
                default=default,
                show_default=bool(default),
                type=str,
            ).strip()
            error = validate(value) if validate is not None else None
            if error is None:
                return value
            click.echo(click.style(f"⚠ {error}", fg="yellow"))

    @staticmethod
    def _multiline(message: str) -> str:
        """Read lines until an empty line follows some text (or two in a row)."""
        click.echo(f"\n{message} (press Enter twice to finish):")
        lines: List[str] = []
        empty_count = 0
        while True:
            line = click.prompt("", default="", show_default=False, prompt_suffix="  ")
            if line.strip():
                empty_count = 0
                lines.append(line)
                continue
            empty_count += 1
            if empty_count >= 2 or (lines and empty_count >= 1):
                break
        return "\n".join(lines).strip()
