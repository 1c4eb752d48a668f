"""Commit message formatting and rendering."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from commitgenius.cleaning import clean_commit_message
from commitgenius.config import DEFAULT_MAX_SUBJECT_LENGTH
from commitgenius.styles import infer_commit_type, render_conventional


class FormatOptions(BaseModel):
    """User formatting options for turning a completion into a commit message.

    Attributes:
        use_conventional: Whether to render a "type(scope): subject" header.
        commit_type: Explicit commit type. Inferred from the diff when absent.
        scope: Optional conventional commit scope.
        max_subject_length: Length budget for the cleaned subject.
    """

    use_conventional: bool = False
    commit_type: Optional[str] = None
    scope: Optional[str] = None
    max_subject_length: int = Field(DEFAULT_MAX_SUBJECT_LENGTH, ge=10)

    @field_validator("commit_type")
    @classmethod
    def blank_type_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty type as not provided; anything else is matched verbatim."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("scope")
    @classmethod
    def blank_scope_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty or whitespace-only scopes as not provided."""
        if v is None or not v.strip():
            return None
        return v.strip()


def render_commit_message(raw_completion: str, diff: str, options: Optional[FormatOptions] = None) -> str:
    """Turn a raw model completion into the final commit message.

    Args:
        raw_completion: Unconstrained text from the model.
        diff: The staged diff, used to infer the type when none is given.
        options: Formatting options. Defaults to plain (non-conventional) output.

    Returns:
        The final commit message, ready to display or commit. Empty when
        the completion held no usable subject, even in conventional mode.
    """
    options = options or FormatOptions()

    subject = clean_commit_message(raw_completion, options.max_subject_length)

    # A header without a subject is not a commit message
    if not subject or not options.use_conventional:
        return subject

    commit_type = options.commit_type or infer_commit_type(diff)
    return render_conventional(subject, commit_type, options.scope)
