"""Commit type inference from staged diff text.

The classifier is a heuristic: an ordered list of (predicate, type) rules
evaluated first-match-wins over keyword hits and added/removed line counts.
"""

from dataclasses import dataclass
from typing import Callable

from commitgenius.styles.constants import DEFAULT_COMMIT_TYPE, CommitType


@dataclass(frozen=True)
class DiffStats:
    """Signals extracted once from a diff for the classification rules.

    Attributes:
        lowered: The diff text lower-cased, used for keyword matching only.
        additions: Number of added lines (excluding "+++" file headers).
        deletions: Number of removed lines (excluding "---" file headers).
    """

    lowered: str
    additions: int
    deletions: int

    @classmethod
    def from_diff(cls, diff: str) -> "DiffStats":
        additions, deletions = count_diff_lines(diff)
        return cls(lowered=diff.lower(), additions=additions, deletions=deletions)


def count_diff_lines(diff: str) -> tuple[int, int]:
    """Count added and removed lines in a unified diff.

    Args:
        diff: Raw unified diff text.

    Returns:
        Tuple of (additions, deletions).
    """
    additions = 0
    deletions = 0
    for line in diff.split("\n"):
        if line.startswith("+") and not line.startswith("+++"):
            additions += 1
        elif line.startswith("-") and not line.startswith("---"):
            deletions += 1
    return additions, deletions


def _contains(*keywords: str) -> Callable[[DiffStats], bool]:
    def predicate(stats: DiffStats) -> bool:
        return any(keyword in stats.lowered for keyword in keywords)

    return predicate


def _mostly_additions(stats: DiffStats) -> bool:
    return stats.additions > stats.deletions * 2


# Order is significant: the first matching rule decides the type
CLASSIFICATION_RULES: list[tuple[Callable[[DiffStats], bool], CommitType]] = [
    (_contains("test", "spec"), CommitType.TEST),
    (_contains("readme", "doc", "comment"), CommitType.DOCS),
    (_contains("package.json", "webpack", "build"), CommitType.BUILD),
    (_contains("ci", "github/workflows"), CommitType.CI),
    (_mostly_additions, CommitType.FEAT),
    (_contains("fix", "bug", "error"), CommitType.FIX),
]


def infer_commit_type(diff: str) -> CommitType:
    """Infer a conventional commit type from diff content.

    Args:
        diff: Raw unified diff text (may be empty).

    Returns:
        The type of the first matching rule, or feat if none matches.
    """
    stats = DiffStats.from_diff(diff)
    for predicate, commit_type in CLASSIFICATION_RULES:
        if predicate(stats):
            return commit_type
    return DEFAULT_COMMIT_TYPE
