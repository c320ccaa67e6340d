"""
Heuristics for classifying staged changes into Conventional Commit types.

The classifier looks at the whole staged diff and picks a single commit
type using a short chain of substring rules. A second chain, keyed on
the chosen type, proposes a summary line. Both chains are ordered
``(predicate, result)`` pairs evaluated with early exit, so they stay
deterministic and trivially unit testable. Misclassifications are
accepted: the operator can always override the suggestion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from commitz.analysis.change_types import ChangeType
from commitz.analysis.diff_record import DiffRecord


logger = logging.getLogger(__name__)


TEST_MARKERS: Tuple[str, ...] = (
    "test/",
    "tests/",
    "_test.go",
    "_test.py",
    ".test.js",
    ".test.ts",
    ".spec.js",
    ".spec.ts",
)
DOCS_MARKERS: Tuple[str, ...] = ("README", ".md", "docs/")
FIX_KEYWORDS: Tuple[str, ...] = ("fix", "bug")
FEAT_KEYWORDS: Tuple[str, ...] = ("feat", "add ", "new ")
DEPENDENCY_MARKERS: Tuple[str, ...] = (
    "go.mod",
    "go.sum",
    "requirements.txt",
    "package.json",
    "pyproject.toml",
    "cargo.toml",
)


def _contains_any(text: str, needles: Sequence[str]) -> bool:
    return any(needle in text for needle in needles)


# Predicates receive (raw_text, lowered_text).
_ClassifyRule = Tuple[Callable[[str, str], bool], ChangeType]

CLASSIFY_RULES: Tuple[_ClassifyRule, ...] = (
    (lambda raw, low: _contains_any(raw, TEST_MARKERS), ChangeType.TEST),
    (lambda raw, low: _contains_any(raw, DOCS_MARKERS), ChangeType.DOCS),
    (lambda raw, low: _contains_any(low, FIX_KEYWORDS), ChangeType.FIX),
    (lambda raw, low: _contains_any(low, FEAT_KEYWORDS), ChangeType.FEAT),
)
DEFAULT_TYPE = ChangeType.CHORE


def classify(diff_text: str) -> ChangeType:
    """Classify staged diff text into a Conventional Commit type.

    Parameters
    ----------
    diff_text : str
        Output of ``git diff --cached``. May be empty or contain binary
        noise.

    Returns
    -------
    ChangeType
        The type of the first matching rule, ``chore`` if none match.

    Notes
    -----
    Rule order is fixed: test paths win over documentation markers,
    which win over fix keywords, which win over feature keywords. A file
    named ``bugfix_report.md`` is therefore classified as ``docs``.
    """
    raw = diff_text or ""
    lowered = raw.lower()
    for predicate, change_type in CLASSIFY_RULES:
        if predicate(raw, lowered):
            logger.debug("Classified staged changes as '%s'", change_type)
            return change_type
    logger.debug("No classification rule matched; using '%s'", DEFAULT_TYPE)
    return DEFAULT_TYPE


# Summary rules receive (lowered_text, basename) where basename may be None.
# A result containing "{basename}" is formatted with the touched file name.
_SummaryRule = Tuple[Callable[[str, Optional[str]], bool], str]


def _always(low: str, basename: Optional[str]) -> bool:
    return True


def _has_file(low: str, basename: Optional[str]) -> bool:
    return basename is not None


def _mentions(*needles: str) -> Callable[[str, Optional[str]], bool]:
    def predicate(low: str, basename: Optional[str]) -> bool:
        return _contains_any(low, needles)

    return predicate


SUMMARY_RULES: Dict[ChangeType, Tuple[_SummaryRule, ...]] = {
    ChangeType.FEAT: (
        (_mentions("interactive"), "add interactive mode"),
        (_mentions("api"), "add API endpoints"),
        (_has_file, "add {basename} functionality"),
        (_always, "add new feature"),
    ),
    ChangeType.FIX: (
        (_mentions("bug", "error"), "fix bug in error handling"),
        (_has_file, "fix issue in {basename}"),
        (_always, "fix bug"),
    ),
    ChangeType.DOCS: (
        (_mentions("readme"), "update README documentation"),
        (_always, "update documentation"),
    ),
    ChangeType.REFACTOR: (
        (_has_file, "refactor {basename}"),
        (_always, "refactor code structure"),
    ),
    ChangeType.TEST: ((_always, "add/update tests"),),
    ChangeType.BUILD: (
        (_mentions(*DEPENDENCY_MARKERS), "update dependencies"),
        (_always, "update build configuration"),
    ),
    ChangeType.CI: ((_always, "update CI configuration"),),
    ChangeType.STYLE: ((_always, "improve code formatting"),),
    ChangeType.PERF: ((_always, "improve performance"),),
    ChangeType.CHORE: (
        (_mentions("cleanup"), "cleanup code"),
        (_always, "update project files"),
    ),
}


def suggest_summary(diff_text: str, change_type: ChangeType) -> str:
    """Propose a summary line for ``change_type`` based on the diff.

    The suggestion is keyed on the lower-cased diff content and on the
    base name (no directory, no extension) of the first touched file.
    It is only a starting point; the caller may replace it.
    """
    return _summary_for(DiffRecord.from_diff(diff_text), change_type)


def _summary_for(record: DiffRecord, change_type: ChangeType) -> str:
    lowered = record.text.lower()
    basename = record.first_basename
    for predicate, template in SUMMARY_RULES[ChangeType(change_type)]:
        if predicate(lowered, basename):
            return template.format(basename=basename)
    # Every rule chain ends with an unconditional entry.
    raise AssertionError(f"No summary rule for {change_type}")


@dataclass(frozen=True)
class Analysis:
    """Result of running the classifier over one staged diff."""

    record: DiffRecord
    type: ChangeType
    summary: str


def analyze(diff_text: str, type_override: Optional[ChangeType] = None) -> Analysis:
    """Classify the diff and suggest a summary in a single pass.

    When ``type_override`` is given the classifier result is replaced
    before the summary is chosen, so the summary matches the final type.
    """
    record = DiffRecord.from_diff(diff_text)
    change_type = type_override if type_override is not None else classify(record.text)
    summary = _summary_for(record, change_type)
    logger.debug(
        "Analysis: type=%s summary=%r files=%d added_lines=%d",
        change_type,
        summary,
        len(record.files),
        len(record.added_lines),
    )
    return Analysis(record=record, type=change_type, summary=summary)
