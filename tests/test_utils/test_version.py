"""Tests for semantic version parsing, ordering and increments.

Tests cover:
- parse_version() and is_valid_version() on valid and invalid input
- Precedence ordering (compare_versions)
- Every increment kind, including the prerelease family
- bump_version() with empty kinds and explicit versions
"""

import pytest

from push_release.exceptions import ValidationError
from push_release.utils.version import (
    SemVer,
    bump_version,
    compare_versions,
    increment_version,
    is_valid_version,
    normalize_version,
    parse_version,
)


class TestParseVersion:
    """Tests for parse_version()."""

    def test_parse_release(self) -> None:
        assert parse_version("1.2.3") == SemVer(1, 2, 3)

    def test_parse_prefix_prerelease_and_build(self) -> None:
        version = parse_version("v1.2.3-rc.1+build.5")
        assert (version.major, version.minor, version.patch) == (1, 2, 3)
        assert version.prerelease == ("rc", 1)
        assert version.build == ("build", "5")
        assert str(version) == "1.2.3-rc.1"

    @pytest.mark.parametrize("value", ["", "   ", "1.2", "1.2.3.4", "01.2.3", "latest"])
    def test_parse_invalid_raises(self, value: str) -> None:
        with pytest.raises(ValidationError):
            parse_version(value)

    def test_is_valid_version(self) -> None:
        assert is_valid_version("1.0.0")
        assert is_valid_version("v2.0.0-alpha")
        assert not is_valid_version("1.0")
        assert not is_valid_version("")


class TestCompareVersions:
    """Tests for semver precedence."""

    def test_precedence_chain(self) -> None:
        """Versions from the semver precedence example sort in order."""
        chain = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
            "1.0.1",
            "1.1.0",
            "2.0.0",
        ]
        for lower, higher in zip(chain, chain[1:]):
            assert compare_versions(lower, higher) == -1, f"{lower} < {higher}"
            assert compare_versions(higher, lower) == 1, f"{higher} > {lower}"

    def test_build_metadata_ignored(self) -> None:
        assert compare_versions("1.0.0+a", "1.0.0+b") == 0


class TestIncrementVersion:
    """Tests for increment_version()."""

    @pytest.mark.parametrize(
        ("current", "kind", "expected"),
        [
            ("1.2.3", "major", "2.0.0"),
            ("1.2.3", "minor", "1.3.0"),
            ("1.2.3", "patch", "1.2.4"),
            ("0.0.0", "patch", "0.0.1"),
            ("1.2.3+build.7", "patch", "1.2.4"),
            ("v1.2.3", "minor", "1.3.0"),
            ("1.2.3-beta.1", "patch", "1.2.3"),
            ("1.2.0-beta", "minor", "1.2.0"),
            ("1.2.1-beta", "minor", "1.3.0"),
            ("2.0.0-rc.1", "major", "2.0.0"),
            ("2.1.0-rc.1", "major", "3.0.0"),
            ("1.2.3", "premajor", "2.0.0-0"),
            ("1.2.3", "preminor", "1.3.0-0"),
            ("1.2.3", "prepatch", "1.2.4-0"),
            ("1.2.3-beta.1", "prepatch", "1.2.4-0"),
            ("1.2.3", "prerelease", "1.2.4-0"),
            ("1.2.3-beta.1", "prerelease", "1.2.3-beta.2"),
            ("1.2.3-beta", "prerelease", "1.2.3-beta.0"),
            ("1.2.3-0", "prerelease", "1.2.3-1"),
        ],
    )
    def test_increment(self, current: str, kind: str, expected: str) -> None:
        assert increment_version(current, kind) == expected

    @pytest.mark.parametrize(
        "current", ["0.0.0", "1.2.3", "1.0.0-alpha", "1.2.3-beta.1", "9.9.9+meta"]
    )
    @pytest.mark.parametrize("kind", ["major", "minor", "patch", "prerelease"])
    def test_increment_is_strictly_greater(self, current: str, kind: str) -> None:
        """Every increment moves the version strictly forward."""
        assert compare_versions(increment_version(current, kind), current) == 1

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            increment_version("1.2.3", "huge")
        assert "huge" in exc_info.value.message

    def test_invalid_current_raises(self) -> None:
        with pytest.raises(ValidationError):
            increment_version("not-a-version", "patch")


class TestBumpVersion:
    """Tests for bump_version()."""

    def test_empty_kind_means_patch(self) -> None:
        assert bump_version("1.2.3", None) == "1.2.4"
        assert bump_version("1.2.3", "") == "1.2.4"

    def test_explicit_version_is_used(self) -> None:
        assert bump_version("1.2.3", "4.0.0") == "4.0.0"

    def test_explicit_version_is_normalized(self) -> None:
        assert bump_version("1.2.3", "v3.1.0+sha.1") == "3.1.0"

    def test_garbage_kind_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            bump_version("1.2.3", "foo")
        assert exc_info.value.exit_code == 3

    def test_normalize_version(self) -> None:
        assert normalize_version(" v1.2.3-rc.1+sha.5 ") == "1.2.3-rc.1"
