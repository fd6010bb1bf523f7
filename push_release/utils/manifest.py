"""Version rewriting inside manifest text.

The version is located with a deliberately loose pattern so that any text
manifest works (package.json, bower.json, setup.cfg, a JS constant...):
the word ``version`` (case-insensitive), an optional closing quote, a ':'
or '=' separator and a quoted value made of letters, digits, dots and
hyphens. Only the first match in a file is considered.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path

from push_release.exceptions import VersionBumpError
from push_release.utils.version import bump_version

VERSION_PATTERN = re.compile(
    r"(\bversion['\"]?\s*[:=]\s*['\"])([\da-z.-]+)(['\"])",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class VersionRewrite:
    """Result of rewriting the version in a piece of text."""

    content: str
    previous: str
    version: str


def find_version(content: str) -> str | None:
    """Return the first version value in content, or None."""
    match = VERSION_PATTERN.search(content)
    return match.group(2) if match else None


def rewrite_version(
    content: str,
    bump_type: str | None = None,
    forced_version: str | None = None,
) -> VersionRewrite | None:
    """Replace the first version value in content.

    Args:
        content: Text to rewrite
        bump_type: Increment kind or explicit version (empty means patch)
        forced_version: Version to write verbatim (e.g. from git describe),
            bypassing the increment

    Returns:
        VersionRewrite, or None when content holds no version

    Raises:
        ValidationError: If the current value cannot be incremented
    """
    match = VERSION_PATTERN.search(content)
    if match is None:
        return None

    previous = match.group(2)
    version = forced_version or bump_version(previous, bump_type)
    start, end = match.span(2)
    return VersionRewrite(
        content=content[:start] + version + content[end:],
        previous=previous,
        version=version,
    )


def read_version(path: Path) -> str | None:
    """Read the persisted version of a manifest file.

    JSON files use their top-level ``version`` field; other files use the
    first VERSION_PATTERN match.

    Raises:
        VersionBumpError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise VersionBumpError(
            f"Can not read {path}",
            details=str(e),
            fix_hint="Check the 'files' option",
        ) from e

    if path.suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise VersionBumpError(
                f"Invalid JSON in {path}",
                details=str(e),
            ) from e
        version = data.get("version") if isinstance(data, dict) else None
        return str(version) if version is not None else None

    return find_version(text)
