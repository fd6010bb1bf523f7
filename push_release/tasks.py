"""Named tasks and the sequential task queue.

Tasks are invoked with colon-separated specs: ``push:minor:bump-only`` runs
the ``push`` task with the arguments ``["minor", "bump-only"]``. Aliases
only enqueue a ``push`` spec with a fixed mode token.

Every task of one run shares the same configuration store, so a config
entry mirrored by one push is visible to the tasks queued after it.
"""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from push_release.config.models import TaskConfig
from push_release.config.store import ConfigStore
from push_release.exceptions import ConfigurationError
from push_release.modes import ReleaseMode, resolve_options
from push_release.reporting import Reporter
from push_release.workflow import ReleaseOutcome, ReleaseWorkflow


@dataclass(frozen=True)
class TaskSpec:
    """A parsed task invocation."""

    name: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, spec: str) -> "TaskSpec":
        """Split ``name:arg1:arg2`` into a TaskSpec.

        Empty segments are kept, so ``push::commit-only`` has an empty
        increment kind.
        """
        name, *args = spec.split(":")
        return cls(name=name, args=tuple(args))

    def arg(self, index: int) -> str | None:
        """Argument at index, or None when missing or empty."""
        if index < len(self.args) and self.args[index]:
            return self.args[index]
        return None

    def __str__(self) -> str:
        return ":".join((self.name, *self.args))


@dataclass
class TaskContext:
    """Everything a task needs while it runs."""

    config: TaskConfig
    store: ConfigStore
    reporter: Reporter
    runner: "TaskRunner"
    project_root: Path
    dry_run: bool = False
    outcomes: list[ReleaseOutcome] = field(default_factory=list)


TaskFunction = Callable[[TaskContext, TaskSpec], None]


@dataclass(frozen=True)
class Task:
    name: str
    description: str
    function: TaskFunction


class TaskRegistry:
    """Registry of named tasks."""

    _tasks: ClassVar[dict[str, Task]] = {}

    @classmethod
    def register(cls, name: str, description: str) -> Callable[[TaskFunction], TaskFunction]:
        """Register a task function under name.

        Can be used as a decorator:
            @TaskRegistry.register("push", "Increment the version...")
            def push_task(context, spec):
                ...

        Raises:
            ValueError: If another function is already registered under name
        """

        def decorator(function: TaskFunction) -> TaskFunction:
            existing = cls._tasks.get(name)
            if existing is not None and existing.function is not function:
                raise ValueError(f"Task '{name}' is already registered")
            cls._tasks[name] = Task(name, description, function)
            return function

        return decorator

    @classmethod
    def get(cls, name: str) -> Task | None:
        return cls._tasks.get(name)

    @classmethod
    def list_registered(cls) -> list[Task]:
        return list(cls._tasks.values())


class TaskRunner:
    """Runs task specs one at a time, in order.

    Specs enqueued by a running task (aliases do this) run right after
    that task, before the rest of the queue. The first error stops the
    queue.
    """

    def __init__(
        self,
        config: TaskConfig | None = None,
        reporter: Reporter | None = None,
        project_root: Path | None = None,
        dry_run: bool = False,
    ) -> None:
        if config is None:
            config = TaskConfig()
        self.queue: deque[TaskSpec] = deque()
        self._running = False
        self._inserted: list[TaskSpec] = []
        self.context = TaskContext(
            config=config,
            store=ConfigStore(config.config),
            reporter=reporter or Reporter(),
            runner=self,
            project_root=project_root or Path.cwd(),
            dry_run=dry_run,
        )

    def enqueue(self, spec: str | TaskSpec) -> None:
        parsed = TaskSpec.parse(spec) if isinstance(spec, str) else spec
        if self._running:
            self._inserted.append(parsed)
        else:
            self.queue.append(parsed)

    def run(self, specs: list[str] | None = None) -> list[ReleaseOutcome]:
        """Run the given specs and everything they enqueue.

        Every given spec is checked against the registry before the first
        task runs. After an error the queue is emptied, so the runner can
        be reused.

        Returns:
            Outcomes of every push task that ran

        Raises:
            ConfigurationError: If a spec names an unknown task
            ReleaseError: The first fatal error of any task
        """
        parsed = [TaskSpec.parse(spec) for spec in specs or []]
        for spec in parsed:
            self._resolve(spec)
        for spec in parsed:
            self.enqueue(spec)

        try:
            while self.queue:
                spec = self.queue.popleft()
                task = self._resolve(spec)
                self.context.reporter.task(str(spec))
                self._running = True
                try:
                    task.function(self.context, spec)
                finally:
                    self._running = False
                self.queue.extendleft(reversed(self._inserted))
                self._inserted.clear()
        finally:
            self.queue.clear()
            self._inserted.clear()

        return self.context.outcomes

    def _resolve(self, spec: TaskSpec) -> Task:
        task = TaskRegistry.get(spec.name)
        if task is None:
            known = ", ".join(t.name for t in TaskRegistry.list_registered())
            raise ConfigurationError(
                f"Task '{spec.name}' not found",
                details=f"Available tasks: {known}",
                fix_hint="Run 'push-release tasks' to list tasks",
            )
        return task


@TaskRegistry.register("push", "Increment the version, commit, tag and push.")
def push_task(context: TaskContext, spec: TaskSpec) -> None:
    """Resolve options for this invocation and run the release workflow."""
    options = resolve_options(
        context.config.options,
        mode=spec.arg(1),
        reporter=context.reporter,
    )
    workflow = ReleaseWorkflow(
        options=options,
        bump_type=spec.arg(0),
        project_root=context.project_root,
        store=context.store,
        reporter=context.reporter,
        dry_run=context.dry_run,
    )
    context.outcomes.append(workflow.run())


def _alias(mode: ReleaseMode) -> TaskFunction:
    def forward(context: TaskContext, spec: TaskSpec) -> None:
        context.runner.enqueue(TaskSpec("push", (spec.arg(0) or "", mode.value)))

    return forward


TaskRegistry.register("push-only", "Increment the version only.")(
    _alias(ReleaseMode.BUMP_ONLY)
)


@TaskRegistry.register(
    "push-commit", "Add, commit, tag, push without incrementing the version."
)
def push_commit_task(context: TaskContext, spec: TaskSpec) -> None:
    context.runner.enqueue(TaskSpec("push", ("", ReleaseMode.COMMIT_ONLY.value)))


TaskRegistry.register(
    "push-release", "Bump version, add, commit, tag, push and publish to npm."
)(_alias(ReleaseMode.PUSH_RELEASE))

TaskRegistry.register("push-publish", "Just publish to npm.")(
    _alias(ReleaseMode.PUSH_PUBLISH)
)
