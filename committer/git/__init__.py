"""Git collaborator for committer.

This package wraps the git subprocess calls the commit flow needs:
- exceptions: GitError, NotAGitRepositoryError
- runner: _run_git_command, _git_succeeds
- repo: predicates (is_repository, has_staged_changes, is_dirty),
        payloads (get_diff, get_stats) and actions (stage_all, commit,
        push, tag, push_tags)
"""

from committer.git.exceptions import (
    GitError,
    NotAGitRepositoryError,
)

from committer.git.runner import (
    _run_git_command,
    _git_succeeds,
)

from committer.git.repo import (
    is_repository,
    has_staged_changes,
    is_dirty,
    stage_all,
    get_diff,
    get_stats,
    commit,
    push,
    tag,
    push_tags,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotAGitRepositoryError",
    # Runner
    "_run_git_command",
    "_git_succeeds",
    # Repo
    "is_repository",
    "has_staged_changes",
    "is_dirty",
    "stage_all",
    "get_diff",
    "get_stats",
    "commit",
    "push",
    "tag",
    "push_tags",
]
