"""Option resolution from task-name mode tokens.

The second colon argument of the push task (``push:minor:bump-only``)
selects a shortcut that forces some options regardless of configuration.
"""

from enum import Enum

from push_release.config.models import PushOptions
from push_release.reporting import Reporter


class ReleaseMode(str, Enum):
    """Mode tokens understood by the push task."""

    BUMP_ONLY = "bump-only"
    COMMIT_ONLY = "commit-only"
    PUSH_RELEASE = "push-release"
    PUSH_PUBLISH = "push-publish"


def resolve_options(
    options: PushOptions,
    mode: str | None = None,
    reporter: Reporter | None = None,
) -> PushOptions:
    """Apply a mode token on top of configured options.

    Rules, later ones overriding earlier ones:
    - bump-only: no add, commit, tag or push
    - commit-only: no version bump
    - push-release: publish to npm; every other mode except push-publish
      turns npm publishing off
    - push-publish: publish to npm and nothing else

    Unknown tokens are not an error; they only skip the overrides.

    Args:
        options: Defaults merged with configured overrides
        mode: Mode token or None
        reporter: Receives a verbose line per recognized mode

    Returns:
        A new PushOptions instance
    """
    updates: dict[str, bool] = {}

    def note(message: str) -> None:
        if reporter is not None:
            reporter.verbose(message)

    if mode == ReleaseMode.BUMP_ONLY.value:
        note("Only incrementing the version.")
        updates.update(add=False, commit=False, create_tag=False, push=False)

    if mode == ReleaseMode.COMMIT_ONLY.value:
        note("Only committing/tagging/pushing.")
        updates["bump_version"] = False

    if mode == ReleaseMode.PUSH_RELEASE.value:
        note("Pushing and publishing to npm.")
        updates["npm"] = True
    else:
        updates["npm"] = False

    if mode == ReleaseMode.PUSH_PUBLISH.value:
        note("Publishing to npm.")
        updates.update(
            bump_version=False,
            add=False,
            commit=False,
            create_tag=False,
            push=False,
            npm=True,
        )

    return options.model_copy(update=updates)
