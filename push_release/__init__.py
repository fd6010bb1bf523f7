"""Version bump, commit, tag, push and npm publish automation."""

__version__ = "0.1.0"

from push_release.exceptions import (
    ConfigurationError,
    GitError,
    PublishError,
    ReleaseError,
    ValidationError,
    VersionBumpError,
)

__all__ = [
    "__version__",
    "ReleaseError",
    "ConfigurationError",
    "ValidationError",
    "GitError",
    "PublishError",
    "VersionBumpError",
]
