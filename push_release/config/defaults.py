"""Default configuration generation.

Writes a YAML configuration listing every push option with its default
value, with ``files`` pre-filled from the manifests found in the project.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from push_release.config.models import PushOptions
from push_release.exceptions import ConfigurationError

# Manifests commonly carrying a "version" field, in preferred bump order
KNOWN_MANIFESTS = [
    "package.json",
    "bower.json",
    "component.json",
    "composer.json",
    "manifest.json",
]


def detect_manifests(project_root: Path) -> list[str]:
    """Return the known manifests present in project_root."""
    return [name for name in KNOWN_MANIFESTS if (project_root / name).is_file()]


def generate_default_config(project_root: Path) -> dict[str, Any]:
    """Build the default configuration document.

    Args:
        project_root: Project root directory

    Returns:
        Mapping with an ``options`` section (camelCase keys) and an empty
        ``config`` section
    """
    options = PushOptions().model_dump(by_alias=True)
    manifests = detect_manifests(project_root)
    if manifests:
        options["files"] = manifests
    return {"options": options, "config": {}}


def generate_config_header() -> str:
    """Generate the YAML header comment."""
    now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
    return f"""# ============================================================================
# push-release configuration
# ============================================================================
# Generated on {now}
#
# %VERSION% in commitMessage, tagName, tagMessage and npmTag is replaced
# with the released version.
# ============================================================================

"""


def write_default_config(output_path: Path, project_root: Path | None = None) -> None:
    """Generate and write the default configuration file.

    Args:
        output_path: Path to write configuration
        project_root: Project root directory (defaults to cwd)

    Raises:
        ConfigurationError: If file cannot be written
    """
    if project_root is None:
        project_root = Path.cwd()

    config = generate_default_config(project_root)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(generate_config_header())
            f.write("# Options of the push task\n")
            f.write(
                yaml.safe_dump(
                    {"options": config["options"]},
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                )
            )
            f.write("\n# Named entries that updateConfigs can mirror the version into\n")
            f.write("config: {}\n")
    except PermissionError:
        raise ConfigurationError(
            f"Permission denied writing config to {output_path}",
            fix_hint="Check file permissions or use a different location",
        ) from None
    except OSError as e:
        raise ConfigurationError(
            f"Failed to write config to {output_path}",
            details=str(e),
            fix_hint="Check disk space and path validity",
        ) from e
