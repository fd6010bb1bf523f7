"""Unit tests for the configuration models.

Tests cover:
- PushOptions defaults
- camelCase and snake_case option names
- Immutability and unknown option rejection
- releaseBranch normalization and template rendering
- TaskConfig environment overrides
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from push_release.config.models import VERSION_TOKEN, PushOptions, TaskConfig


class TestPushOptionsDefaults:
    """Tests for PushOptions default values."""

    def test_defaults(self) -> None:
        options = PushOptions()
        assert options.bump_version is True
        assert options.files == ["package.json"]
        assert options.update_configs == []
        assert options.release_branch is False
        assert options.add is True
        assert options.add_files == ["."]
        assert options.commit is True
        assert options.commit_message == "Release v%VERSION%"
        assert options.commit_files == ["-a"]
        assert options.create_tag is True
        assert options.tag_name == "v%VERSION%"
        assert options.tag_message == "Version %VERSION%"
        assert options.push is True
        assert options.push_to == "origin"
        assert options.npm is False
        assert options.npm_tag == "Release v%VERSION%"
        assert options.git_describe_options == "--tags --always --abbrev=1 --dirty=-d"

    def test_list_defaults_are_not_shared(self) -> None:
        assert PushOptions().files is not PushOptions().files


class TestPushOptionsNames:
    """Tests for option name handling."""

    def test_camel_case_names(self) -> None:
        options = PushOptions(
            bumpVersion=False, commitMessage="v%VERSION%", pushTo="upstream"
        )
        assert options.bump_version is False
        assert options.commit_message == "v%VERSION%"
        assert options.push_to == "upstream"

    def test_snake_case_names(self) -> None:
        options = PushOptions(create_tag=False, npm_tag="next")
        assert options.create_tag is False
        assert options.npm_tag == "next"

    def test_dump_by_alias_round_trips(self) -> None:
        options = PushOptions(updateConfigs=["pkg"], releaseBranch=["main"])
        dumped = options.model_dump(by_alias=True)
        assert dumped["updateConfigs"] == ["pkg"]
        assert PushOptions(**dumped) == options

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PushOptions(bumpVerison=False)

    def test_options_are_frozen(self) -> None:
        options = PushOptions()
        with pytest.raises(PydanticValidationError):
            options.npm = True  # type: ignore[misc]

    def test_empty_remote_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PushOptions(pushTo="  ")


class TestReleaseBranches:
    """Tests for PushOptions.release_branches()."""

    def test_string_becomes_list(self) -> None:
        assert PushOptions(releaseBranch="main").release_branches() == ["main"]

    def test_list_kept(self) -> None:
        options = PushOptions(releaseBranch=["main", "release"])
        assert options.release_branches() == ["main", "release"]

    @pytest.mark.parametrize("value", [True, False])
    def test_boolean_names_no_branch(self, value: bool) -> None:
        assert PushOptions(releaseBranch=value).release_branches() == []


class TestRender:
    def test_render_replaces_token(self) -> None:
        options = PushOptions()
        assert options.render(options.commit_message, "1.2.3") == "Release v1.2.3"

    def test_render_replaces_every_occurrence(self) -> None:
        template = f"{VERSION_TOKEN} ({VERSION_TOKEN})"
        assert PushOptions().render(template, "2.0.0") == "2.0.0 (2.0.0)"

    def test_render_without_token(self) -> None:
        assert PushOptions().render("latest", "2.0.0") == "latest"


class TestTaskConfig:
    """Tests for the root TaskConfig model."""

    def test_defaults(self, clean_env: None) -> None:
        config = TaskConfig()
        assert config.options == PushOptions()
        assert config.config == {}

    def test_from_mapping(self, clean_env: None) -> None:
        config = TaskConfig(
            options={"updateConfigs": ["pkg"]},
            config={"pkg": {"version": "1.0.0"}},
        )
        assert config.options.update_configs == ["pkg"]
        assert config.config["pkg"]["version"] == "1.0.0"

    def test_env_override(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PUSH_RELEASE_OPTIONS__PUSH_TO", "upstream")
        config = TaskConfig()
        assert config.options.push_to == "upstream"

    def test_env_beats_camel_case_file_key(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PUSH_RELEASE_OPTIONS__PUSH_TO", "upstream")
        config = TaskConfig(options={"pushTo": "origin2", "npm": True})
        assert config.options.push_to == "upstream"
        assert config.options.npm is True

    def test_env_beats_snake_case_file_key(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PUSH_RELEASE_OPTIONS__COMMIT_MESSAGE", "chore: %VERSION%")
        config = TaskConfig(options={"commit_message": "Release %VERSION%"})
        assert config.options.commit_message == "chore: %VERSION%"

    def test_both_names_in_one_mapping_rejected(self, clean_env: None) -> None:
        with pytest.raises(PydanticValidationError):
            TaskConfig(options={"pushTo": "a", "push_to": "b"})


class TestFieldKeys:
    def test_aliases_become_field_names(self) -> None:
        assert PushOptions.field_keys({"pushTo": "x", "files": ["a.json"]}) == {
            "push_to": "x",
            "files": ["a.json"],
        }

    def test_unknown_keys_kept(self) -> None:
        assert PushOptions.field_keys({"bumpVerison": False}) == {"bumpVerison": False}
