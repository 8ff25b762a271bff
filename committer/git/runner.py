"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
- _git_succeeds: Run a git command and report whether it exited with 0
"""

import subprocess

from committer.git.exceptions import GitError
from committer.logging_utils import get_logger

logger = get_logger(__name__)


def _run_git_command(args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from stdout.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    return result.stdout.strip() if strip else result.stdout


def _git_succeeds(args: list[str]) -> bool:
    """Run a git command whose exit status is the answer.

    Args:
        args: List of arguments to pass to git.

    Returns:
        True if git exited with status 0.

    Raises:
        GitError: If git is not installed.
    """
    logger.debug("Checking: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return result.returncode == 0
