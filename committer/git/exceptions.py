"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NotAGitRepositoryError: Raised outside a git working tree
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    code = "ERR_GIT_COMMAND_FAILED"


class NotAGitRepositoryError(GitError):
    """Raised when the current directory is not inside a git work tree."""

    code = "ERR_NOT_GIT_REPO"
