"""Configuration file loading utilities.

Supports loading configuration from YAML and TOML files with:
- Automatic format detection
- A ``[tool.push-release]`` table inside pyproject.toml
- Error reporting with file location
- Built-in defaults when no file exists
"""

import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from push_release.config.models import TaskConfig
from push_release.exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

SEARCH_PATHS = [
    "config/push_release.yml",
    "config/push_release.yaml",
    "push_release.yml",
    "push_release.yaml",
    "push_release.toml",
    "pyproject.toml",
]

PYPROJECT_TABLE = "push-release"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed YAML as dictionary

    Raises:
        ConfigurationError: If file cannot be read or parsed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            fix_hint="Create the file or use 'push-release init-config' to generate one",
        ) from None
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {path}",
            details=str(e),
            fix_hint="Check YAML syntax at the indicated line",
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in {path}",
            details=f"Expected a mapping at the top level, got {type(data).__name__}",
        )
    return data


def load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML configuration file.

    For pyproject.toml only the ``[tool.push-release]`` table is returned.

    Raises:
        ConfigurationError: If file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            fix_hint="Create the file or use 'push-release init-config' to generate one",
        ) from None
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in {path}",
            details=str(e),
            fix_hint="Check TOML syntax at the indicated line",
        ) from e

    if path.name == "pyproject.toml":
        table: dict[str, Any] = data.get("tool", {}).get(PYPROJECT_TABLE, {})
        return table
    return data


def find_config(project_root: Path) -> Path | None:
    """Return the first configuration file found in SEARCH_PATHS.

    A pyproject.toml only counts when it carries a [tool.push-release] table.
    """
    for search_path in SEARCH_PATHS:
        candidate = project_root / search_path
        if not candidate.exists():
            continue
        if candidate.name == "pyproject.toml" and not load_toml(candidate):
            continue
        return candidate
    return None


def load_config(
    path: Path | None = None,
    project_root: Path | None = None,
) -> TaskConfig:
    """Load configuration from file.

    Without an explicit path the SEARCH_PATHS are tried in order; when none
    exists the built-in defaults are used.

    Args:
        path: Explicit path to config file
        project_root: Project root directory (defaults to cwd)

    Returns:
        Validated TaskConfig instance

    Raises:
        ConfigurationError: If an explicit config is missing, or a config is invalid
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path: Path | None = None
    if path:
        config_path = Path(path)
        if not config_path.is_absolute():
            config_path = project_root / config_path
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                fix_hint="Run 'push-release init-config' to create a configuration file",
            )
    else:
        config_path = find_config(project_root)

    if config_path is None:
        data: dict[str, Any] = {}
    elif config_path.suffix in (".yml", ".yaml"):
        data = load_yaml(config_path)
    elif config_path.suffix == ".toml":
        data = load_toml(config_path)
    else:
        raise ConfigurationError(
            f"Unsupported config format: {config_path.suffix}",
            fix_hint="Use .yml, .yaml, or .toml extension",
        )

    try:
        return TaskConfig(**data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_path or 'environment'}",
            details=str(e),
            fix_hint="Check the option names and value types",
        ) from e
