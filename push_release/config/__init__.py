"""Configuration management for push-release."""

from push_release.config.loader import load_config
from push_release.config.models import VERSION_TOKEN, PushOptions, TaskConfig
from push_release.config.store import ConfigStore

__all__ = [
    "PushOptions",
    "TaskConfig",
    "ConfigStore",
    "VERSION_TOKEN",
    "load_config",
]
