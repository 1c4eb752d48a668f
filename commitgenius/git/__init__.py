"""Git capability for commitgenius.

This package provides:
- exceptions: GitError, NotARepositoryError, NoStagedChangesError
- runner: _run_git_command, get_git_dir, is_git_repository
- staging: get_staged_files, has_staged_changes, get_staged_diff, commit
"""

# Exceptions
from commitgenius.git.exceptions import (
    GitError,
    NoStagedChangesError,
    NotARepositoryError,
)

# Runner utilities
from commitgenius.git.runner import (
    _run_git_command,
    get_git_dir,
    is_git_repository,
)

# Staging utilities
from commitgenius.git.staging import (
    commit,
    get_staged_diff,
    get_staged_files,
    has_staged_changes,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "get_git_dir",
    "is_git_repository",
    # Staging
    "get_staged_files",
    "has_staged_changes",
    "get_staged_diff",
    "commit",
]
