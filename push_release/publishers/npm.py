"""npm registry publisher.

Runs ``npm publish --tag <tag>`` in the project root. Authentication is
left to npm itself (~/.npmrc or OIDC in CI).
"""

from typing import ClassVar

from push_release.publishers.base import PublishContext, PublishResult
from push_release.utils.shell import ShellError, format_command, run


class NPMPublisher:
    """Publisher for the npm registry."""

    name: ClassVar[str] = "npm"
    display_name: ClassVar[str] = "npm Registry"

    def command(self, context: PublishContext) -> list[str]:
        return ["npm", "publish", "--tag", context.tag]

    def publish(self, context: PublishContext) -> PublishResult:
        """Publish the package in context.project_root.

        Args:
            context: Publish context with version and dist-tag

        Returns:
            PublishResult indicating success or failure
        """
        cmd = self.command(context)

        if context.dry_run:
            return PublishResult.skipped(
                message=f"Would run: {format_command(cmd)} (dry run)",
            )

        try:
            result = run(cmd, cwd=context.project_root, capture=True, check=True)
        except ShellError as e:
            return PublishResult.failed(
                message="Publishing to npm failed",
                details=f"Exit code: {e.returncode}\n{e.stderr or e.stdout}",
            )

        return PublishResult.success(
            message=f"Published to npm with tag: {context.tag}",
            tag=context.tag,
            details=result.stdout or None,
        )
