"""
Immutable run settings.

:class:`Settings` is built once at startup from the command line flags
and the optional settings file, then passed explicitly to every stage
of the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from commitz.analysis.change_types import ChangeType


@dataclass(frozen=True)
class Settings:
    emoji: bool = False
    interactive: bool = False
    dry_run: bool = False
    verbose: bool = False
    type_override: Optional[ChangeType] = None
    scope_override: Optional[str] = None


def build_settings(
    file_config: Mapping[str, Any],
    *,
    type_name: Optional[str] = None,
    scope: Optional[str] = None,
    emoji: bool = False,
    dry_run: bool = False,
    interactive: bool = False,
    verbose: bool = False,
) -> Settings:
    """Merge command line flags over the settings file values.

    Boolean flags can only switch a feature on; the file provides the
    default when a flag is absent. A blank ``scope`` counts as absent.
    """
    scope_override = scope.strip() if scope and scope.strip() else None
    return Settings(
        emoji=emoji or bool(file_config.get("emoji", False)),
        interactive=interactive or bool(file_config.get("interactive", False)),
        dry_run=dry_run,
        verbose=verbose,
        type_override=ChangeType.parse(type_name) if type_name else None,
        scope_override=scope_override,
    )
