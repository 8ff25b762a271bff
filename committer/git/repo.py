"""Working tree queries and actions used by the commit flow.

Contains:
- is_repository, has_staged_changes, is_dirty: predicates
- stage_all, commit, push, tag, push_tags: actions
- get_diff, get_stats: staged change payloads
"""

from committer.git.runner import _git_succeeds, _run_git_command


def is_repository() -> bool:
    """Check whether the current directory is inside a git work tree."""
    return _git_succeeds(["rev-parse", "--is-inside-work-tree"])


def has_staged_changes() -> bool:
    """Check for staged but uncommitted changes.

    `git diff --staged --quiet` exits non-zero when the index differs from HEAD.
    """
    return not _git_succeeds(["diff", "--staged", "--quiet"])


def is_dirty() -> bool:
    """Check for changes not yet staged, including untracked files."""
    if not _git_succeeds(["diff", "--quiet"]):
        return True
    untracked = _run_git_command(["ls-files", "--others", "--exclude-standard"])
    return bool(untracked)


def stage_all() -> None:
    """Stage every change in the work tree (new, modified and deleted files)."""
    _run_git_command(["add", "--all"])


def get_diff() -> str:
    """Get the staged diff without context lines.

    Returns:
        The raw `git diff --staged --unified=0` output.
    """
    return _run_git_command(["diff", "--staged", "--unified=0"], strip=False)


def get_stats() -> str:
    """Get per-file insertion/deletion statistics of the staged changes."""
    return _run_git_command(["diff", "--cached", "--stat"], strip=False)


def commit(message: str) -> str:
    """Commit the staged changes.

    Args:
        message: The full commit message.

    Returns:
        git's summary output.
    """
    return _run_git_command(["commit", "-m", message])


def push() -> None:
    """Push commits to the default remote."""
    _run_git_command(["push"])


def tag(name: str) -> None:
    """Create a lightweight tag on HEAD.

    Args:
        name: The tag name.
    """
    _run_git_command(["tag", name])


def push_tags() -> None:
    """Push all tags to the default remote."""
    _run_git_command(["push", "--tags"])
