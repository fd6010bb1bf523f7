"""Git state modification operations.

This module provides the git operations a release performs. All functions
use push_release.utils.shell.run() with argument lists, so messages reach
git verbatim, and raise GitError on failures.
"""

from pathlib import Path

from push_release.exceptions import GitError
from push_release.utils.shell import ShellError, run


def add(paths: list[str], cwd: Path | None = None) -> None:
    """Stage paths.

    Args:
        paths: Paths or pathspecs passed to git add
        cwd: Working directory (defaults to current directory)

    Raises:
        GitError: If git add fails
    """
    try:
        run(["git", "add", *paths], cwd=cwd, check=True)
    except ShellError as e:
        raise GitError(
            "Can not add files",
            details=e.stderr or str(e),
            fix_hint="Check the 'addFiles' option",
        ) from e


def commit(message: str, flags: list[str] | None = None, cwd: Path | None = None) -> None:
    """Create a git commit.

    Args:
        message: Commit message
        flags: Arguments placed before -m (e.g. ["-a"])
        cwd: Working directory (defaults to current directory)

    Raises:
        GitError: If commit fails or there is nothing to commit
    """
    try:
        run(["git", "commit", *(flags or []), "-m", message], cwd=cwd, check=True)
    except ShellError as e:
        raise GitError(
            "Can not create the commit",
            details=e.stderr or e.stdout or str(e),
            fix_hint="Ensure there are changes to commit. Run 'git status' to check.",
        ) from e


def tag(name: str, message: str | None = None, cwd: Path | None = None) -> None:
    """Create an annotated git tag.

    Args:
        name: Tag name (e.g., "v1.0.12")
        message: Tag annotation message (defaults to tag name if None)
        cwd: Working directory (defaults to current directory)

    Raises:
        GitError: If tag creation fails or tag already exists
    """
    tag_message = message if message is not None else name
    try:
        run(["git", "tag", "-a", name, "-m", tag_message], cwd=cwd, check=True)
    except ShellError as e:
        raise GitError(
            f"Can not create the tag '{name}'",
            details=e.stderr or str(e),
            fix_hint=f"Ensure tag '{name}' doesn't already exist. Run 'git tag -d {name}' to delete it first.",
        ) from e


def push(remote: str = "origin", tags: bool = False, cwd: Path | None = None) -> None:
    """Push the current branch, or all tags, to a remote.

    Args:
        remote: Remote name (default: "origin")
        tags: Push tags instead of commits
        cwd: Working directory (defaults to current directory)

    Raises:
        GitError: If push fails
    """
    cmd = ["git", "push", remote]
    if tags:
        cmd.append("--tags")
    try:
        run(cmd, cwd=cwd, check=True)
    except ShellError as e:
        raise GitError(
            f"Can not push to {remote}",
            details=e.stderr or str(e),
            fix_hint="Ensure remote exists and you have push access. Check network connectivity.",
        ) from e
