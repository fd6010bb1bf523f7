"""Release workflow orchestration.

Builds the ordered step queue of one push invocation and runs it:
1. Branch guard
2. Version from git describe
3. Version bump in files (and config mirrors)
4. Version read (when not bumping)
5. git add
6. git commit
7. git tag
8. git push (commits, then tags)
9. npm publish

Steps run strictly in order. Each returns a StepResult; the first failed
result aborts the run by raising its error. Completed steps are never
rolled back.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from push_release import git
from push_release.config.models import PushOptions
from push_release.config.store import ConfigStore
from push_release.exceptions import (
    ConfigurationError,
    PublishError,
    ReleaseError,
    VersionBumpError,
)
from push_release.publishers.base import PublishContext, PublishStatus
from push_release.publishers.npm import NPMPublisher
from push_release.reporting import Reporter
from push_release.utils.manifest import read_version, rewrite_version
from push_release.utils.shell import format_command

GIT_BUMP = "git"


@dataclass
class StepResult:
    """Result of a workflow step."""

    success: bool
    message: str
    details: str | None = None
    error: ReleaseError | None = None

    @classmethod
    def ok(cls, message: str, details: str | None = None) -> "StepResult":
        return cls(success=True, message=message, details=details)

    @classmethod
    def failed(cls, error: ReleaseError) -> "StepResult":
        return cls(
            success=False,
            message=error.message,
            details=error.details,
            error=error,
        )


@dataclass
class ReleaseState:
    """Values produced by earlier steps and read by later ones.

    Owned by a single ReleaseWorkflow.run() call.
    """

    version: str | None = None
    git_version: str | None = None
    bumped_files: list[str] = field(default_factory=list)


@dataclass
class ReleaseStep:
    """A queued step: a short name, a display title and its action."""

    name: str
    title: str
    action: Callable[[ReleaseState], StepResult]


@dataclass
class ReleaseOutcome:
    """Summary of a completed run."""

    version: str | None
    steps: list[str]
    warnings: list[str]


@dataclass
class ReleaseWorkflow:
    """One invocation of the push task with resolved options."""

    options: PushOptions
    bump_type: str | None = None
    project_root: Path = field(default_factory=Path.cwd)
    store: ConfigStore = field(default_factory=ConfigStore)
    reporter: Reporter = field(default_factory=Reporter)
    dry_run: bool = False

    def plan(self) -> list[ReleaseStep]:
        """Build the step queue from the resolved options."""
        opts = self.options
        queue: list[ReleaseStep] = []

        def queue_if(
            condition: bool,
            name: str,
            title: str,
            action: Callable[[ReleaseState], StepResult],
        ) -> None:
            if condition:
                queue.append(ReleaseStep(name, title, action))

        queue_if(
            bool(opts.release_branch) and (opts.npm or opts.commit or opts.push),
            "branch",
            "Checking release branch",
            self.check_branch,
        )
        queue_if(
            opts.bump_version and self.bump_type == GIT_BUMP,
            "git-version",
            "Reading version from git describe",
            self.describe_version,
        )
        queue_if(opts.bump_version, "bump", "Bumping version", self.bump_files)
        queue_if(
            not opts.bump_version,
            "read-version",
            "Reading current version",
            self.read_current_version,
        )
        queue_if(opts.add, "add", "Staging files", self.stage)
        queue_if(opts.commit, "commit", "Committing changes", self.commit)
        queue_if(opts.create_tag, "tag", "Creating tag", self.create_tag)
        queue_if(opts.push, "push", f"Pushing to {opts.push_to}", self.push)
        queue_if(opts.npm, "publish", "Publishing to npm", self.publish)
        return queue

    def run(self) -> ReleaseOutcome:
        """Execute the queue.

        Returns:
            ReleaseOutcome with the released version, executed step names
            and the warnings emitted during this run

        Raises:
            ReleaseError: The error of the first failing step
        """
        state = ReleaseState()
        first_warning = len(self.reporter.warnings)
        executed: list[str] = []

        for step in self.plan():
            self.reporter.step(step.title)
            try:
                result = step.action(state)
            except ReleaseError as e:
                result = StepResult.failed(e)

            if not result.success:
                self.reporter.error(result.message)
                raise result.error or ReleaseError(result.message, result.details)

            executed.append(step.name)
            self.reporter.ok(result.message)
            if result.details:
                self.reporter.verbose(result.details)

        return ReleaseOutcome(
            version=state.version,
            steps=executed,
            warnings=self.reporter.warnings[first_warning:],
        )

    def _path(self, file: str) -> Path:
        return self.project_root / file

    def _require_version(self, state: ReleaseState) -> str:
        if not state.version:
            raise ConfigurationError(
                "No version was resolved for this release",
                fix_hint="List at least one file in the 'files' option",
            )
        return state.version

    def _would(self, cmd: list[str]) -> StepResult:
        return StepResult.ok(f"Would run: {format_command(cmd)} (dry run)")

    def check_branch(self, state: ReleaseState) -> StepResult:
        """Compare the current branch with the allowed release branches.

        A mismatch only warns, so releases from other branches stay possible.
        """
        current = git.get_current_branch(cwd=self.project_root)
        for branch in reversed(self.options.release_branches()):
            self.reporter.verbose(f"<{branch}> - <{current}>")
            if branch == current:
                return StepResult.ok(f"On release branch {current}")

        self.reporter.warn("The current branch is not in the list of release branches.")
        return StepResult.ok(f"Continuing on branch {current}")

    def describe_version(self, state: ReleaseState) -> StepResult:
        state.git_version = git.describe(
            self.options.git_describe_options, cwd=self.project_root
        )
        return StepResult.ok(f"git describe reports {state.git_version}")

    def bump_files(self, state: ReleaseState) -> StepResult:
        """Rewrite the version in every configured file."""
        files = self.options.files
        for idx, file in enumerate(files):
            path = self._path(file)
            try:
                content = path.read_text(encoding="utf-8")
            except OSError as e:
                raise VersionBumpError(
                    f"Can not read {file}",
                    details=str(e),
                    fix_hint="Check the 'files' option",
                ) from e

            rewrite = rewrite_version(content, self.bump_type, state.git_version)
            if rewrite is None:
                raise VersionBumpError(
                    f"Can not find a version to bump in {file}",
                    fix_hint='Add a field like "version": "1.0.0" to the file',
                )

            version = rewrite.version
            if not self.dry_run:
                try:
                    path.write_text(rewrite.content, encoding="utf-8")
                except OSError as e:
                    raise VersionBumpError(f"Can not write {file}", details=str(e)) from e
            state.bumped_files.append(file)

            location = f" (in {file})" if len(files) > 1 else ""
            self.reporter.ok(f"Version bumped to {version}{location}")

            if state.version is None:
                state.version = version
            elif state.version != version:
                self.reporter.warn("Bumping multiple files with different versions!")

            if idx < len(self.options.update_configs):
                self._mirror_version(self.options.update_configs[idx], version)

        if self.dry_run:
            return StepResult.ok(f"Would write version {state.version} (dry run)")
        return StepResult.ok(f"Version is now {state.version}")

    def _mirror_version(self, name: str, version: str) -> None:
        if not name:
            return
        entry = self.store.get(name)
        if not isinstance(entry, dict):
            self.reporter.warn(f'Can not update "{name}" config, it does not exist!')
            return
        entry["version"] = version
        self.store.set(name, entry)
        self.reporter.ok(f"{name}'s version updated")

    def read_current_version(self, state: ReleaseState) -> StepResult:
        """Recover the version without bumping.

        The first config mirror wins over the first file.
        """
        if self.options.update_configs:
            name = self.options.update_configs[0]
            entry = self.store.get(name)
            version = entry.get("version") if isinstance(entry, dict) else None
            if not version:
                raise ConfigurationError(
                    f'Can not read the version from "{name}" config',
                    fix_hint=f"Define '{name}' with a 'version' key in the config section",
                )
            state.version = str(version)
            return StepResult.ok(f"Version {state.version} (from {name} config)")

        if not self.options.files:
            raise ConfigurationError(
                "No file to read the version from",
                fix_hint="List at least one file in the 'files' option",
            )
        file = self.options.files[0]
        version = read_version(self._path(file))
        if not version:
            raise ConfigurationError(
                f"Can not read the version from {file}",
                fix_hint='Add a field like "version": "1.0.0" to the file',
            )
        state.version = version
        return StepResult.ok(f"Version {state.version} (from {file})")

    def stage(self, state: ReleaseState) -> StepResult:
        paths = self.options.add_files
        if self.dry_run:
            return self._would(["git", "add", *paths])
        git.add(paths, cwd=self.project_root)
        return StepResult.ok(f'Added files: "{" ".join(paths)}"')

    def commit(self, state: ReleaseState) -> StepResult:
        message = self.options.render(self.options.commit_message, self._require_version(state))
        flags = self.options.commit_files
        if self.dry_run:
            return self._would(["git", "commit", *flags, "-m", message])
        git.commit(message, flags, cwd=self.project_root)
        return StepResult.ok(f'Committed as "{message}"')

    def create_tag(self, state: ReleaseState) -> StepResult:
        version = self._require_version(state)
        name = self.options.render(self.options.tag_name, version)
        message = self.options.render(self.options.tag_message, version)
        if self.dry_run:
            return self._would(["git", "tag", "-a", name, "-m", message])
        git.tag(name, message, cwd=self.project_root)
        return StepResult.ok(f'Tagged as "{name}"')

    def push(self, state: ReleaseState) -> StepResult:
        remote = self.options.push_to
        if self.dry_run:
            return StepResult.ok(
                f"Would run: git push {remote} && git push {remote} --tags (dry run)"
            )
        git.push(remote, cwd=self.project_root)
        git.push(remote, tags=True, cwd=self.project_root)
        return StepResult.ok(f"Pushed to {remote}")

    def publish(self, state: ReleaseState) -> StepResult:
        """Publish to npm under the rendered npmTag.

        %VERSION% is substituted in the dist-tag; older releases of this
        task passed the raw template to npm.
        """
        version = self._require_version(state)
        tag = self.options.render(self.options.npm_tag, version)
        if tag != self.options.npm_tag:
            self.reporter.verbose(f"npm dist-tag rendered as {tag!r}")

        context = PublishContext(
            project_root=self.project_root,
            version=version,
            tag=tag,
            dry_run=self.dry_run,
        )
        result = NPMPublisher().publish(context)
        if result.status == PublishStatus.FAILED:
            raise PublishError(
                result.message,
                details=result.details,
                fix_hint="Check 'npm whoami' and the package name/version",
            )
        return StepResult.ok(result.message, result.details)
