"""Subprocess execution for git and npm commands.

Provides:
- ANSI escape code stripping (keeps version strings and branch names clean)
- ShellError carrying the full command result on failure
- Optional timeout (none by default: a hung command blocks the task)
"""

import os
import re
import shlex
import subprocess
from pathlib import Path


class ShellError(Exception):
    """Exception raised when a shell command fails.

    Attributes:
        cmd: The command that failed
        returncode: Exit code of the failed command
        stdout: Standard output (ANSI stripped)
        stderr: Standard error (ANSI stripped)
    """

    def __init__(
        self,
        cmd: str,
        returncode: int,
        stdout: str,
        stderr: str,
    ) -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command failed with exit code {returncode}: {cmd}")

    def __str__(self) -> str:
        parts = [f"Command failed: {self.cmd}"]
        parts.append(f"Exit code: {self.returncode}")
        if self.stderr:
            parts.append(f"Stderr: {self.stderr}")
        if self.stdout:
            parts.append(f"Stdout: {self.stdout}")
        return "\n".join(parts)


# ESC[...m, ESC[...;...m, OSC and other control sequences
ANSI_PATTERN = re.compile(
    r"\x1b\[[0-9;]*[a-zA-Z]|\x1b\][^\x07]*\x07|\x1b[PX^_][^\x1b]*\x1b\\"
)

CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences and control characters from text.

    Args:
        text: Input text potentially containing ANSI codes

    Returns:
        Clean text with all ANSI sequences removed
    """
    if not text:
        return ""
    result = ANSI_PATTERN.sub("", text)
    result = CONTROL_CHARS_PATTERN.sub("", result)
    return result


def format_command(cmd: list[str]) -> str:
    """Render an argument list as a copy-pasteable shell line."""
    return shlex.join(cmd)


def run(
    cmd: str | list[str],
    cwd: Path | None = None,
    capture: bool = True,
    check: bool = True,
    timeout: int | None = None,
    env: dict[str, str] | None = None,
    strip_output: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a command without a shell.

    Args:
        cmd: Command to execute (string or list of arguments)
        cwd: Working directory for the command
        capture: Whether to capture stdout/stderr
        check: Whether to raise ShellError on non-zero exit
        timeout: Maximum execution time in seconds (None waits forever)
        env: Additional environment variables
        strip_output: Whether to strip ANSI codes from output

    Returns:
        CompletedProcess with stdout/stderr (ANSI stripped if requested)

    Raises:
        ShellError: If the command fails (or cannot be started) and check=True
        subprocess.TimeoutExpired: If command exceeds timeout
    """
    cmd_list = shlex.split(cmd) if isinstance(cmd, str) else list(cmd)

    merged_env = {**os.environ}
    if env:
        merged_env.update(env)

    try:
        result = subprocess.run(
            cmd_list,
            cwd=cwd,
            capture_output=capture,
            text=True,
            timeout=timeout,
            env=merged_env,
        )
    except FileNotFoundError as e:
        # Missing executable behaves like a failed command
        if not check:
            raise
        raise ShellError(
            cmd=format_command(cmd_list),
            returncode=127,
            stdout="",
            stderr=str(e),
        ) from e

    if capture and strip_output:
        result.stdout = strip_ansi(result.stdout) if result.stdout else ""
        result.stderr = strip_ansi(result.stderr) if result.stderr else ""

    if check and result.returncode != 0:
        raise ShellError(
            cmd=format_command(cmd_list),
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

    return result
