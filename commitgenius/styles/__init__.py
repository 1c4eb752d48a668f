"""Conventional commit types, type inference and header formatting.

This package provides:
- constants: CommitType enum, COMMIT_TYPE_DESCRIPTIONS, MAX_HEADER_LENGTH
- inference: DiffStats, CLASSIFICATION_RULES, infer_commit_type
- conventional: resolve_commit_type, render_conventional
"""

# Constants
from commitgenius.styles.constants import (
    COMMIT_TYPE_DESCRIPTIONS,
    DEFAULT_COMMIT_TYPE,
    MAX_HEADER_LENGTH,
    TRUNCATION_MARKER,
    CommitType,
)

# Inference
from commitgenius.styles.inference import (
    CLASSIFICATION_RULES,
    DiffStats,
    count_diff_lines,
    infer_commit_type,
)

# Renderer
from commitgenius.styles.conventional import (
    build_header_prefix,
    fit_subject,
    render_conventional,
    resolve_commit_type,
)


__all__ = [
    # Constants
    "CommitType",
    "COMMIT_TYPE_DESCRIPTIONS",
    "DEFAULT_COMMIT_TYPE",
    "MAX_HEADER_LENGTH",
    "TRUNCATION_MARKER",
    # Inference
    "DiffStats",
    "CLASSIFICATION_RULES",
    "count_diff_lines",
    "infer_commit_type",
    # Renderer
    "build_header_prefix",
    "fit_subject",
    "render_conventional",
    "resolve_commit_type",
]
