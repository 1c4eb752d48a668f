"""Conventional Commits style renderer for commitgenius.

Format:
    <type>(<scope>): <subject>

    <body>
"""

from typing import Optional, Union

from commitgenius.styles.constants import (
    DEFAULT_COMMIT_TYPE,
    MAX_HEADER_LENGTH,
    TRUNCATION_MARKER,
    CommitType,
)


def resolve_commit_type(value: Union[CommitType, str, None]) -> CommitType:
    """Map a user-supplied type onto the commit type vocabulary.

    Args:
        value: A CommitType, an exact lower-case type name, or None.

    Returns:
        The matching CommitType, or feat when absent or not an exact
        vocabulary entry ("FIX" and " fix" are not).
    """
    if isinstance(value, CommitType):
        return value
    if not value:
        return DEFAULT_COMMIT_TYPE
    try:
        return CommitType(value)
    except ValueError:
        return DEFAULT_COMMIT_TYPE


def build_header_prefix(commit_type: CommitType, scope: Optional[str] = None) -> str:
    """Build the "type(scope): " or "type: " header prefix."""
    if scope:
        return f"{commit_type.value}({scope}): "
    return f"{commit_type.value}: "


def fit_subject(subject: str, prefix: str, max_header_length: int = MAX_HEADER_LENGTH) -> str:
    """Truncate the subject so that prefix + subject fits the header budget.

    Args:
        subject: Single-line subject text.
        prefix: The header prefix the subject will follow.
        max_header_length: Maximum header length.

    Returns:
        The subject unchanged if it fits, otherwise truncated with the
        truncation marker. Empty when the prefix leaves no room at all.
    """
    if len(prefix) + len(subject) <= max_header_length:
        return subject

    budget = max_header_length - len(prefix) - len(TRUNCATION_MARKER)
    if budget < 0:
        return ""
    return subject[:budget] + TRUNCATION_MARKER


def render_conventional(
    message: str,
    commit_type: Union[CommitType, str, None] = None,
    scope: Optional[str] = None,
) -> str:
    """Render a commit message in Conventional Commits style.

    The first line of the message becomes the subject; any remaining lines
    are kept verbatim as the body after a blank line.

    Args:
        message: Subject line, optionally followed by body lines.
        commit_type: Commit type; unknown or missing types fall back to feat.
        scope: Optional scope, used only when non-empty.

    Returns:
        Formatted commit message whose header never exceeds MAX_HEADER_LENGTH.
    """
    resolved_type = resolve_commit_type(commit_type)
    prefix = build_header_prefix(resolved_type, scope)

    lines = message.strip().split("\n")
    subject = lines[0].strip()

    body = "\n".join(lines[1:]).strip()
    if body:
        body = "\n\n" + body

    subject = fit_subject(subject, prefix)

    # Degenerate scopes can make the prefix alone overflow the budget
    header = (prefix + subject)[:MAX_HEADER_LENGTH]

    return header + body
