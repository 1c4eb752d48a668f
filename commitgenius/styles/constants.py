"""Constants for commitgenius styles module.

Contains:
- CommitType: The fixed conventional commit type vocabulary
- COMMIT_TYPE_DESCRIPTIONS: Human-readable description for each type (help text only)
- MAX_HEADER_LENGTH: Maximum length of a conventional commit header line
- TRUNCATION_MARKER: Marker appended to truncated subjects
"""

from enum import Enum


class CommitType(Enum):
    """Conventional commit types."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"

    @property
    def description(self) -> str:
        """Human-readable description of the commit type."""
        return COMMIT_TYPE_DESCRIPTIONS[self]


COMMIT_TYPE_DESCRIPTIONS = {
    CommitType.FEAT: "A new feature",
    CommitType.FIX: "A bug fix",
    CommitType.DOCS: "Documentation only changes",
    CommitType.STYLE: "Changes that do not affect the meaning of the code (white-space, formatting, etc)",
    CommitType.REFACTOR: "A code change that neither fixes a bug nor adds a feature",
    CommitType.PERF: "A code change that improves performance",
    CommitType.TEST: "Adding missing tests or correcting existing tests",
    CommitType.BUILD: "Changes that affect the build system or external dependencies",
    CommitType.CI: "Changes to our CI configuration files and scripts",
    CommitType.CHORE: "Other changes that don't modify src or test files",
    CommitType.REVERT: "Reverts a previous commit",
}

DEFAULT_COMMIT_TYPE = CommitType.FEAT

# Header line budget: type + (scope) + ": " + subject
MAX_HEADER_LENGTH = 72

TRUNCATION_MARKER = "..."
