"""Staged changes inspection and committing.

Contains:
- get_staged_files: List staged file paths
- has_staged_changes: Check whether anything is staged
- get_staged_diff: Get the staged unified diff
- commit: Commit the staged changes with a message
"""

from commitgenius.git.exceptions import NoStagedChangesError
from commitgenius.git.runner import _run_git_command


def get_staged_files() -> list[str]:
    """Get list of staged file paths.

    Returns:
        List of staged file paths.
    """
    output = _run_git_command(["diff", "--staged", "--name-only"])
    if not output:
        return []
    return output.split("\n")


def has_staged_changes() -> bool:
    """Check if there are staged changes.

    Returns:
        True if at least one file is staged.
    """
    return bool(get_staged_files())


def get_staged_diff() -> str:
    """Get the staged diff.

    Returns:
        The staged unified diff.

    Raises:
        NoStagedChangesError: If there are no staged changes.
    """
    diff = _run_git_command(["diff", "--staged"])

    if not diff:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    return diff


def commit(message: str) -> str:
    """Commit staged changes with the given message.

    The message is passed on stdin, so it needs no shell quoting.

    Args:
        message: The full commit message.

    Returns:
        The stdout of git commit.

    Raises:
        GitError: If the commit fails.
    """
    return _run_git_command(["commit", "-F", "-"], input_text=message)
