"""Git state query operations.

Read-only git commands used while releasing. All functions use
push_release.utils.shell.run() and raise GitError on failure.
"""

import shlex
from pathlib import Path

from push_release.exceptions import GitError
from push_release.utils.shell import ShellError, run


def get_current_branch(cwd: Path | None = None) -> str:
    """Get the name of the current git branch.

    Anything written to stderr counts as a failure, matching how the
    branch guard has always treated ``git rev-parse`` warnings.

    Args:
        cwd: Working directory (defaults to current directory)

    Returns:
        Current branch name, or "HEAD" when detached

    Raises:
        GitError: If unable to determine current branch
    """
    try:
        result = run(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd, check=True)
    except ShellError as e:
        raise GitError(
            "Cannot determine current branch.",
            details=str(e),
            fix_hint="Ensure you are in a git repository with at least one commit",
        ) from e

    if result.stderr.strip():
        raise GitError(
            "Cannot determine current branch.",
            details=result.stderr.strip(),
        )
    return result.stdout.strip()


def describe(options: str = "", cwd: Path | None = None) -> str:
    """Run ``git describe`` and return its trimmed output.

    Args:
        options: Extra arguments, shell-quoted (e.g. "--tags --always")
        cwd: Working directory (defaults to current directory)

    Raises:
        GitError: If git describe fails
    """
    try:
        result = run(["git", "describe", *shlex.split(options)], cwd=cwd, check=True)
    except ShellError as e:
        raise GitError(
            "Can not get a version number using `git describe`",
            details=str(e),
            fix_hint="Create a tag first or adjust 'gitDescribeOptions'",
        ) from e
    return result.stdout.strip()
