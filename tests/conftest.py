"""Pytest fixtures for push-release tests.

Provides common fixtures for:
- Temporary project directories
- Git repository setup
- A Node.js project with package.json
- A reporter writing to an in-memory console
"""

import io
import json
import os
import subprocess
from collections.abc import Generator
from pathlib import Path

import pytest
from rich.console import Console

from push_release.reporting import Reporter


def git(cwd: Path, *args: str) -> str:
    """Run a git command in cwd and return its trimmed stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def temp_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary directory for tests.

    Yields:
        Path to temporary directory
    """
    yield tmp_path
    # Cleanup handled by pytest's tmp_path


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a temporary project directory.

    Returns:
        Path to project directory
    """
    project = temp_dir / "test-project"
    project.mkdir()
    return project


@pytest.fixture
def git_repo(project_dir: Path) -> Path:
    """Create a git repository on branch 'main' in the project directory.

    Returns:
        Path to git repository
    """
    git(project_dir, "init")
    git(project_dir, "symbolic-ref", "HEAD", "refs/heads/main")
    git(project_dir, "config", "user.email", "test@test.com")
    git(project_dir, "config", "user.name", "Test User")
    git(project_dir, "config", "commit.gpgsign", "false")
    git(project_dir, "config", "tag.gpgsign", "false")
    return project_dir


@pytest.fixture
def package_json(project_dir: Path) -> Path:
    """Write a package.json at version 1.0.0 (no git repository).

    Returns:
        Path to package.json
    """
    path = project_dir / "package.json"
    path.write_text(
        json.dumps({"name": "test-package", "version": "1.0.0"}, indent=2) + "\n"
    )
    return path


@pytest.fixture
def nodejs_project(git_repo: Path) -> Path:
    """Create a committed Node.js project with package.json.

    Returns:
        Path to project directory
    """
    package = {
        "name": "test-package",
        "version": "1.0.0",
        "description": "Test package",
        "main": "index.js",
        "scripts": {
            "test": "echo 'test'",
        },
    }
    (git_repo / "package.json").write_text(json.dumps(package, indent=2) + "\n")
    (git_repo / "index.js").write_text("module.exports = {};\n")

    git(git_repo, "add", ".")
    git(git_repo, "commit", "-m", "Initial commit")

    return git_repo


@pytest.fixture
def console_output() -> io.StringIO:
    """Buffer receiving everything the test reporter prints."""
    return io.StringIO()


@pytest.fixture
def reporter(console_output: io.StringIO) -> Reporter:
    """Reporter with verbose output, printing to console_output."""
    console = Console(file=console_output, width=200, color_system=None)
    return Reporter(console=console, verbose=True)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Temporarily clean environment variables.

    Removes PUSH_RELEASE_* environment variables during test.
    """
    old_env = {}
    for key in list(os.environ.keys()):
        if key.startswith("PUSH_RELEASE_"):
            old_env[key] = os.environ.pop(key)

    yield

    os.environ.update(old_env)
