"""Git operations used by the push task.

All operations use push_release.utils.shell.run() for command execution
and raise GitError on failures.
"""

from push_release.git.operations import add, commit, push, tag
from push_release.git.queries import describe, get_current_branch

__all__ = [
    # Query operations
    "get_current_branch",
    "describe",
    # Modification operations
    "add",
    "commit",
    "tag",
    "push",
]
