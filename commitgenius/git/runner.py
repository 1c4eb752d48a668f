"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- is_git_repository: Check whether the working directory is inside a work tree
- get_git_dir: Get the absolute path of the git directory
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitgenius.git.exceptions import GitError, NotARepositoryError


def _run_git_command(args: list[str], input_text: Optional[str] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        input_text: Optional text passed to git on stdin.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            input=input_text,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def is_git_repository() -> bool:
    """Check if the current directory is inside a git work tree.

    Returns:
        True if inside a work tree, False otherwise (including when git is missing).
    """
    try:
        return _run_git_command(["rev-parse", "--is-inside-work-tree"]) == "true"
    except GitError:
        return False


def get_git_dir() -> Path:
    """Get the absolute path of the repository's git directory.

    Returns:
        Path to the git directory (usually <repo>/.git).

    Raises:
        NotARepositoryError: If not in a git repository.
    """
    try:
        return Path(_run_git_command(["rev-parse", "--absolute-git-dir"]))
    except GitError:
        raise NotARepositoryError("Not in a git repository. Please run this command from within a git repo.")
