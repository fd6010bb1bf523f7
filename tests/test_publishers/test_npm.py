"""Unit tests for push_release.publishers.npm module.

Tests for NPMPublisher:
- command() builds npm publish with the dist-tag
- publish() success, failure and dry run
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

from push_release.publishers.base import PublishContext, PublishStatus
from push_release.publishers.npm import NPMPublisher
from push_release.utils.shell import ShellError


def _context(project_dir: Path, **kwargs: object) -> PublishContext:
    return PublishContext(
        project_root=project_dir,
        version="1.0.1",
        tag="Release v1.0.1",
        **kwargs,  # type: ignore[arg-type]
    )


class TestNPMPublisher:
    """Tests for NPMPublisher.publish()."""

    def test_command(self, project_dir: Path) -> None:
        assert NPMPublisher().command(_context(project_dir)) == [
            "npm",
            "publish",
            "--tag",
            "Release v1.0.1",
        ]

    def test_publish_success(self, project_dir: Path) -> None:
        with patch(
            "push_release.publishers.npm.run",
            return_value=MagicMock(stdout="+ test-package@1.0.1"),
        ) as mock_run:
            result = NPMPublisher().publish(_context(project_dir))

        assert result.status == PublishStatus.SUCCESS
        assert result.tag == "Release v1.0.1"
        assert result.details == "+ test-package@1.0.1"
        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["cwd"] == project_dir

    def test_publish_failure(self, project_dir: Path) -> None:
        error = ShellError("npm publish", 1, "", "npm ERR! 403 Forbidden")
        with patch("push_release.publishers.npm.run", side_effect=error):
            result = NPMPublisher().publish(_context(project_dir))

        assert result.status == PublishStatus.FAILED
        assert result.message == "Publishing to npm failed"
        assert "403" in (result.details or "")

    def test_dry_run_skips(self, project_dir: Path) -> None:
        with patch("push_release.publishers.npm.run") as mock_run:
            result = NPMPublisher().publish(_context(project_dir, dry_run=True))

        assert result.status == PublishStatus.SKIPPED
        assert "npm publish --tag 'Release v1.0.1'" in result.message
        mock_run.assert_not_called()
