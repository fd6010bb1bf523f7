"""Pydantic v2 configuration models.

These models provide:
- Type-safe option loading with defaults for every field
- camelCase option names (``bumpVersion``) alongside snake_case ones
- Environment variable override support on the root model
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

VERSION_TOKEN = "%VERSION%"


class PushOptions(BaseModel):
    """Options of the ``push`` task.

    Resolved once per task invocation; instances are frozen, so mode
    shortcuts produce a new copy instead of mutating shared options.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    bump_version: bool = Field(
        default=True,
        alias="bumpVersion",
        description="Rewrite the version in 'files'",
    )
    files: list[str] = Field(
        default_factory=lambda: ["package.json"],
        description="Files whose version is bumped, in order",
    )
    update_configs: list[str] = Field(
        default_factory=list,
        alias="updateConfigs",
        description="Config entries mirroring the version, paired with 'files' by position",
    )
    release_branch: bool | str | list[str] = Field(
        default=False,
        alias="releaseBranch",
        description="Branch name(s) releases are expected from",
    )
    add: bool = Field(default=True, description="Stage 'addFiles' before committing")
    add_files: list[str] = Field(
        default_factory=lambda: ["."],
        alias="addFiles",
        description="Paths passed to git add",
    )
    commit: bool = Field(default=True, description="Create a release commit")
    commit_message: str = Field(
        default=f"Release v{VERSION_TOKEN}",
        alias="commitMessage",
        description="Commit message template",
    )
    commit_files: list[str] = Field(
        default_factory=lambda: ["-a"],
        alias="commitFiles",
        description="Arguments passed to git commit before -m",
    )
    create_tag: bool = Field(
        default=True,
        alias="createTag",
        description="Create an annotated tag",
    )
    tag_name: str = Field(
        default=f"v{VERSION_TOKEN}",
        alias="tagName",
        description="Tag name template",
    )
    tag_message: str = Field(
        default=f"Version {VERSION_TOKEN}",
        alias="tagMessage",
        description="Tag annotation template",
    )
    push: bool = Field(default=True, description="Push commits and tags")
    push_to: str = Field(
        default="origin",
        alias="pushTo",
        description="Remote to push to",
    )
    npm: bool = Field(default=False, description="Publish to the npm registry")
    npm_tag: str = Field(
        default=f"Release v{VERSION_TOKEN}",
        alias="npmTag",
        description="Dist-tag template for npm publish",
    )
    git_describe_options: str = Field(
        default="--tags --always --abbrev=1 --dirty=-d",
        alias="gitDescribeOptions",
        description="Arguments for git describe when bumping with 'git'",
    )

    @field_validator("push_to")
    @classmethod
    def validate_push_to(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("pushTo must name a remote")
        return v

    def release_branches(self) -> list[str]:
        """Allowed release branches as a list.

        A single string becomes a one-element list. A bare boolean names
        no branch at all.
        """
        if isinstance(self.release_branch, bool):
            return []
        if isinstance(self.release_branch, str):
            return [self.release_branch]
        return list(self.release_branch)

    def render(self, template: str, version: str) -> str:
        """Substitute the version token in a message template."""
        return template.replace(VERSION_TOKEN, version)

    @classmethod
    def field_keys(cls, options: Mapping[str, Any]) -> dict[str, Any]:
        """Rename camelCase option keys to field names.

        A mapping that sets an option under both names is left as is, so
        validation still rejects it.
        """
        aliases = {
            field.alias: name
            for name, field in cls.model_fields.items()
            if field.alias
        }
        result: dict[str, Any] = {}
        for key, value in options.items():
            name = aliases.get(key, key)
            if name != key and name in options:
                name = key
            result[name] = value
        return result


class TaskConfig(BaseSettings):
    """Root configuration for a push-release run.

    ``options`` overrides the push task defaults; ``config`` holds named
    configuration entries that ``updateConfigs`` can mirror the version
    into.

    Supports environment variable overrides with PUSH_RELEASE_ prefix.
    Example: PUSH_RELEASE_OPTIONS__PUSH_TO=upstream

    Environment variables win over values passed in (the config file),
    so an option set in both places takes the environment value.
    """

    options: PushOptions = Field(default_factory=PushOptions)
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Named configuration entries",
    )

    model_config = {
        "env_prefix": "PUSH_RELEASE_",
        "env_nested_delimiter": "__",
    }

    def __init__(self, **values: Any) -> None:
        # Env keys arrive as field names; fold camelCase file keys into
        # them before both sources are merged.
        options = values.get("options")
        if isinstance(options, Mapping):
            values["options"] = PushOptions.field_keys(options)
        super().__init__(**values)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings
