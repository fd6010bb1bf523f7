"""Utility modules for push-release."""

from push_release.utils.manifest import (
    VERSION_PATTERN,
    VersionRewrite,
    find_version,
    read_version,
    rewrite_version,
)
from push_release.utils.shell import ShellError, run, strip_ansi
from push_release.utils.version import (
    BUMP_TYPES,
    SEMVER_PATTERN,
    BumpType,
    SemVer,
    bump_version,
    compare_versions,
    increment_version,
    is_valid_version,
    normalize_version,
    parse_version,
)

__all__ = [
    # Shell utilities
    "run",
    "strip_ansi",
    "ShellError",
    # Version utilities
    "SemVer",
    "parse_version",
    "is_valid_version",
    "compare_versions",
    "increment_version",
    "bump_version",
    "normalize_version",
    "BumpType",
    "BUMP_TYPES",
    "SEMVER_PATTERN",
    # Manifest rewriting
    "VERSION_PATTERN",
    "VersionRewrite",
    "find_version",
    "read_version",
    "rewrite_version",
]
