"""
Command line interface for commitz.

This module defines the ``main`` function which is used as the entry
point when executing the ``commitz`` command. It reads the staged diff,
runs the classifier, lets the operator review the proposal (or accepts
it as is), and creates the commit.

Exit codes:

* 0 - commit created, nothing staged, dry run, or cancelled by the operator
* 1 - not a Git repository, Git failure, invalid settings, commit rejected
* 2 - invalid command line usage (reported by click)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import click

from commitz import __version__
from commitz.analysis.change_classifier import Analysis, analyze, suggest_summary
from commitz.analysis.change_types import ChangeType
from commitz.analysis.scope import candidate_scopes, extract_scope
from commitz.config.loader import ConfigError, load_config
from commitz.config.settings import Settings, build_settings
from commitz.message.commit_message import CommitMessage
from commitz.message.composer import emoji_for, validate_summary
from commitz.prompts.prompter import DefaultPrompter, InteractivePrompter, Prompter
from commitz.vcs.git_client import GitClient, GitError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

NO_SCOPE = "(none)"
CUSTOM_SCOPE = "(custom)"
MAX_LISTED_FILES = 5


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✓ {message}", fg="green"))


def print_warning(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}⚠ {message}", fg="yellow"))


def print_error(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✗ {message}", fg="red"), err=True)


def print_message_box(title: str, message: str) -> None:
    """Print a commit message inside a frame."""
    click.echo(f"\n{click.style(title, fg='green', bold=True)}")
    click.echo("   ┌" + "─" * 74 + "┐")
    for line in message.splitlines() or [""]:
        display_line = line[:72]
        click.echo(f"   │ {click.style(display_line.ljust(72), fg='cyan')} │")
    click.echo("   └" + "─" * 74 + "┘")


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def show_staged_changes(analysis: Analysis) -> None:
    """List the touched files and the suggested header."""
    files = analysis.record.files
    print_success(f"Found {len(files)} staged file{'s' if len(files) != 1 else ''}")
    for path in files[:MAX_LISTED_FILES]:
        print_info(path, indent=1)
    if len(files) > MAX_LISTED_FILES:
        print_info(f"... and {len(files) - MAX_LISTED_FILES} more", indent=1)
    print_info(f"Suggested type: {click.style(analysis.type.value, fg='cyan', bold=True)}")


def _scope_choices(default_scope: Optional[str], files: List[str]) -> List[tuple]:
    choices = [(NO_SCOPE, "no scope")]
    seen = set()
    if default_scope:
        choices.append((default_scope, "from branch name"))
        seen.add(default_scope)
    for candidate in candidate_scopes(files):
        if candidate not in seen:
            choices.append((candidate, "top-level directory"))
            seen.add(candidate)
    choices.append((CUSTOM_SCOPE, "enter a scope"))
    return choices


def _validate_scope(value: str) -> Optional[str]:
    if any(char in value for char in ":()"):
        return "Scope must not contain ':', '(' or ')'"
    return None


def review_message(
    analysis: Analysis,
    default_scope: Optional[str],
    settings: Settings,
    prompter: Prompter,
) -> CommitMessage:
    """Run the review sequence and return the final message.

    With a :class:`DefaultPrompter` every step keeps the suggestion, so
    this is also the non-interactive path.

    Raises
    ------
    click.Abort
        If the operator cancels a prompt.
    """
    type_choices = [(member.value, member.label) for member in ChangeType]
    change_type = ChangeType(
        prompter.select("Select the type of change:", type_choices, default=analysis.type.value)
    )
    suggested_summary = analysis.summary
    if change_type != analysis.type:
        suggested_summary = suggest_summary(analysis.record.text, change_type)

    picked_scope = prompter.select(
        "Select a scope:",
        _scope_choices(default_scope, analysis.record.files),
        default=default_scope or NO_SCOPE,
    )
    if picked_scope == CUSTOM_SCOPE:
        scope: Optional[str] = prompter.text(
            "Scope (leave empty for none)", default=default_scope or "", validate=_validate_scope
        ) or None
    elif picked_scope == NO_SCOPE:
        scope = None
    else:
        scope = picked_scope

    use_emoji = prompter.confirm("Prefix the message with an emoji?", default=settings.emoji)

    summary = prompter.text(
        "Commit summary", default=suggested_summary, validate=validate_summary
    )
    body = prompter.text("Add optional description", default="", multiline=True)

    return CommitMessage(
        type=change_type,
        summary=summary,
        scope=scope,
        emoji=emoji_for(change_type, use_emoji),
        body=body or None,
    )


def _find_repository(start: Path) -> Path:
    repo_root = GitClient.find_repo_root(start)
    if repo_root is None:
        print_error("Not a git repository (or any of the parent directories).")
        click.echo("Make sure you are in a git repository and have staged changes.")
        raise click.exceptions.Exit(EXIT_FAILURE)
    logger.debug("Repository root: %s", repo_root)
    return repo_root


@click.command()
@click.option(
    "-t",
    "--type",
    "type_name",
    type=click.Choice([member.value for member in ChangeType], case_sensitive=False),
    help="Commit type to use instead of the detected one.",
)
@click.option("-s", "--scope", help="Scope to use instead of the one derived from the branch name.")
@click.option("-e", "--emoji", is_flag=True, help="Prefix the message with an emoji for its type.")
@click.option("-d", "--dry-run", is_flag=True, help="Preview the commit message without committing.")
@click.option("-i", "--interactive", is_flag=True, help="Review type, scope and summary interactively.")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="commitz")
def main(
    type_name: Optional[str],
    scope: Optional[str],
    emoji: bool,
    dry_run: bool,
    interactive: bool,
    verbose: bool,
) -> None:
    """Smart commit message generator.

    Inspects the staged changes, proposes a Conventional Commit message
    and creates the commit.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    ctx = click.get_current_context(silent=True)

    try:
        try:
            file_config = load_config()
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_FAILURE)

        settings = build_settings(
            file_config,
            type_name=type_name,
            scope=scope,
            emoji=emoji,
            dry_run=dry_run,
            interactive=interactive,
            verbose=verbose,
        )
        logger.debug("Settings: %s", settings)

        client = GitClient(_find_repository(Path.cwd()))

        try:
            diff_text = client.get_staged_diff()
        except GitError as exc:
            print_error(f"Error getting git diff: {exc}")
            click.echo("Make sure you are in a git repository and have staged changes.")
            raise click.exceptions.Exit(EXIT_FAILURE)

        if not diff_text.strip():
            print_warning("No staged changes found.")
            click.echo("Please stage your changes with 'git add' before generating a commit message.")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        analysis = analyze(diff_text, settings.type_override)
        default_scope = settings.scope_override or extract_scope(client.get_current_branch())

        prompter: Prompter = InteractivePrompter() if settings.interactive else DefaultPrompter()

        try:
            if prompter.interactive:
                show_staged_changes(analysis)
            message = review_message(analysis, default_scope, settings, prompter).render()

            if settings.dry_run:
                print_message_box("Proposed commit message:", message)
                print_warning("[DRY RUN] Commit not created")
                raise click.exceptions.Exit(EXIT_SUCCESS)

            print_message_box("Commit message:", message)
            if not prompter.confirm("Proceed with commit?", default=True):
                print_warning("Commit cancelled.")
                raise click.exceptions.Exit(EXIT_SUCCESS)
        except click.Abort:
            click.echo("")
            print_warning("Commit cancelled.")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        try:
            output = client.commit(message)
        except GitError as exc:
            print_error(f"Commit failed: {exc}")
            raise click.exceptions.Exit(EXIT_FAILURE)

        if output.strip():
            click.echo(output.rstrip())
        print_success("Commit successful! 🎉")
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_FAILURE)
