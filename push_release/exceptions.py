"""Exception hierarchy for push-release.

Every fatal condition raised while running a release task derives from
ReleaseError. The CLI turns the exit_code of the raised error into the
process exit status:
- 1: General error
- 2: Configuration error
- 3: Validation error
- 4: Git error
- 5: Publish error
- 9: Version bump error
"""


class ReleaseError(Exception):
    """Base exception for all release errors.

    Each subclass defines an exit_code for CLI error reporting.
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        details: str | None = None,
        fix_hint: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Brief error message
            details: Detailed explanation of what went wrong
            fix_hint: Suggested command or action to fix the issue
        """
        super().__init__(message)
        self.message = message
        self.details = details
        self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"\nDetails: {self.details}")
        if self.fix_hint:
            parts.append(f"\nFix: {self.fix_hint}")
        return "".join(parts)


class ConfigurationError(ReleaseError):
    """Configuration errors.

    Raised when:
    - An explicitly given config file does not exist
    - Config file has invalid syntax (YAML/TOML)
    - Option values fail validation
    - An unknown task is requested
    - No version can be read for a commit-only run
    """

    exit_code = 2


class ValidationError(ReleaseError):
    """Invalid semantic version or increment kind."""

    exit_code = 3


class GitError(ReleaseError):
    """Git command failures.

    Raised when:
    - The current branch cannot be determined
    - git describe fails
    - Staging, committing, tagging or pushing fails
    """

    exit_code = 4


class PublishError(ReleaseError):
    """npm publish failures."""

    exit_code = 5


class VersionBumpError(ReleaseError):
    """Version rewrite failures.

    Raised when:
    - A target file has no version to bump
    - A target file cannot be read or written
    """

    exit_code = 9
