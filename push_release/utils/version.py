"""Semantic version parsing, comparison and incrementing.

Versions follow MAJOR.MINOR.PATCH[-prerelease][+build]. A leading 'v' is
accepted on input and dropped on output. Incrementing follows the usual
semver rules, including the prerelease family of increments:

    >>> increment_version('1.2.3', 'patch')
    '1.2.4'
    >>> increment_version('1.2.3-beta.1', 'patch')
    '1.2.3'
    >>> increment_version('1.2.3-beta.1', 'prerelease')
    '1.2.3-beta.2'
"""

import re
from dataclasses import dataclass, replace
from functools import total_ordering
from typing import Literal

from push_release.exceptions import ValidationError

BumpType = Literal[
    "major", "minor", "patch", "premajor", "preminor", "prepatch", "prerelease"
]

BUMP_TYPES: tuple[str, ...] = (
    "major",
    "minor",
    "patch",
    "premajor",
    "preminor",
    "prepatch",
    "prerelease",
)

_IDENT = r"[0-9A-Za-z-]+"
_NUM = r"0|[1-9]\d*"

SEMVER_PATTERN = re.compile(
    rf"^v?(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<prerelease>{_IDENT}(?:\.{_IDENT})*))?"
    rf"(?:\+(?P<build>{_IDENT}(?:\.{_IDENT})*))?$"
)

PrereleaseId = int | str


def _parse_identifier(part: str) -> PrereleaseId:
    return int(part) if part.isdigit() else part


@total_ordering
@dataclass(frozen=True)
class SemVer:
    """A parsed semantic version.

    Ordering follows semver precedence; build metadata is ignored.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[PrereleaseId, ...] = ()
    build: tuple[str, ...] = ()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(p) for p in self.prerelease)
        return text

    def _key(self) -> tuple:
        # A release sorts after every prerelease of the same core version
        if not self.prerelease:
            pre: tuple = ((2, 0, ""),)
        else:
            pre = tuple(
                (0, p, "") if isinstance(p, int) else (1, 0, p)
                for p in self.prerelease
            )
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "SemVer") -> bool:
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def parse_version(version_str: str) -> SemVer:
    """Parse a semantic version string.

    Args:
        version_str: Version string to parse (e.g., '1.2.3', 'v1.2.3-rc.1')

    Returns:
        Parsed SemVer

    Raises:
        ValidationError: If the string is not a semantic version
    """
    if not version_str or not version_str.strip():
        raise ValidationError(
            "Empty version string",
            details="Version string cannot be empty or whitespace",
            fix_hint="Provide a valid semantic version (e.g., '1.2.3')",
        )

    match = SEMVER_PATTERN.match(version_str.strip())
    if not match:
        raise ValidationError(
            f"Invalid version format: '{version_str}'",
            details="Version must follow semantic versioning: MAJOR.MINOR.PATCH[-prerelease][+build]",
            fix_hint="Use format like '1.2.3' or '1.2.3-beta.1'",
        )

    prerelease = match.group("prerelease")
    build = match.group("build")
    return SemVer(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=tuple(_parse_identifier(p) for p in prerelease.split("."))
        if prerelease
        else (),
        build=tuple(build.split(".")) if build else (),
    )


def is_valid_version(version_str: str) -> bool:
    """Check if a version string is a valid semantic version.

    Examples:
        >>> is_valid_version('1.2.3')
        True
        >>> is_valid_version('v1.2.3-alpha')
        True
        >>> is_valid_version('1.2')
        False
    """
    if not version_str or not version_str.strip():
        return False
    return SEMVER_PATTERN.match(version_str.strip()) is not None


def compare_versions(v1: str, v2: str) -> int:
    """Compare two semantic version strings.

    Returns:
        -1 if v1 < v2, 0 if equal in precedence, 1 if v1 > v2

    Raises:
        ValidationError: If either version string is invalid
    """
    version1 = parse_version(v1)
    version2 = parse_version(v2)

    if version1 < version2:
        return -1
    elif version1 > version2:
        return 1
    else:
        return 0


def _bump_prerelease(version: SemVer) -> SemVer:
    if not version.prerelease:
        return replace(version, prerelease=(0,))

    parts = list(version.prerelease)
    for index in range(len(parts) - 1, -1, -1):
        part = parts[index]
        if isinstance(part, int):
            parts[index] = part + 1
            return replace(version, prerelease=tuple(parts))
    parts.append(0)
    return replace(version, prerelease=tuple(parts))


def _bump_patch(version: SemVer) -> SemVer:
    # 1.2.3-rc.1 -> 1.2.3: the prerelease already points at the next patch
    if version.prerelease:
        return replace(version, prerelease=())
    return replace(version, patch=version.patch + 1)


def increment_version(current: str, bump_type: str) -> str:
    """Increment a version according to semantic versioning rules.

    Args:
        current: Current version string
        bump_type: One of BUMP_TYPES

    Returns:
        New version string without prefix or build metadata

    Raises:
        ValidationError: If current is invalid or bump_type is unknown

    Examples:
        >>> increment_version('1.2.3', 'minor')
        '1.3.0'
        >>> increment_version('2.0.0-rc.1', 'major')
        '2.0.0'
        >>> increment_version('1.2.3', 'premajor')
        '2.0.0-0'
    """
    if bump_type not in BUMP_TYPES:
        raise ValidationError(
            f"Unknown increment kind: '{bump_type}'",
            details=f"Supported kinds: {', '.join(BUMP_TYPES)}",
            fix_hint="Use e.g. 'push:minor' or 'push:git'",
        )

    version = replace(parse_version(current), build=())

    if bump_type == "major":
        if version.minor or version.patch or not version.prerelease:
            version = replace(version, major=version.major + 1)
        version = replace(version, minor=0, patch=0, prerelease=())
    elif bump_type == "minor":
        if version.patch or not version.prerelease:
            version = replace(version, minor=version.minor + 1)
        version = replace(version, patch=0, prerelease=())
    elif bump_type == "patch":
        version = _bump_patch(version)
    elif bump_type == "premajor":
        version = replace(
            version, major=version.major + 1, minor=0, patch=0, prerelease=()
        )
        version = _bump_prerelease(version)
    elif bump_type == "preminor":
        version = replace(version, minor=version.minor + 1, patch=0, prerelease=())
        version = _bump_prerelease(version)
    elif bump_type == "prepatch":
        version = _bump_prerelease(_bump_patch(replace(version, prerelease=())))
    else:
        if not version.prerelease:
            version = _bump_patch(version)
        version = _bump_prerelease(version)

    return str(version)


def bump_version(current: str, bump_type: str | None) -> str:
    """Compute the next version from an increment kind or explicit version.

    An empty bump_type means 'patch'. Anything that is not a known
    increment kind must be a valid version and is returned normalized.

    Examples:
        >>> bump_version('1.2.3', None)
        '1.2.4'
        >>> bump_version('1.2.3', '2.0.0')
        '2.0.0'
    """
    kind = bump_type or "patch"
    if kind in BUMP_TYPES:
        return increment_version(current, kind)

    if is_valid_version(kind):
        return normalize_version(kind)

    raise ValidationError(
        f"Invalid increment kind or version: '{kind}'",
        details=f"Use one of {', '.join(BUMP_TYPES)}, 'git', or an explicit version",
        fix_hint="Use e.g. 'push:minor', 'push:git' or 'push:2.0.0'",
    )


def normalize_version(version_str: str) -> str:
    """Normalize a version string by removing prefix, whitespace and build metadata.

    Examples:
        >>> normalize_version('v1.2.3')
        '1.2.3'
        >>> normalize_version(' 1.2.3-rc.1+sha.5 ')
        '1.2.3-rc.1'
    """
    return str(parse_version(version_str))


__all__ = [
    "SemVer",
    "BumpType",
    "BUMP_TYPES",
    "SEMVER_PATTERN",
    "parse_version",
    "is_valid_version",
    "compare_versions",
    "increment_version",
    "bump_version",
    "normalize_version",
]
