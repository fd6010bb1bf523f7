"""Shared types for registry publishers."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PublishStatus(Enum):
    """Status of a publish operation."""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class PublishResult:
    """Result of a publish operation.

    Attributes:
        status: Overall status
        message: Brief description
        tag: Dist-tag the package was published under
        details: Extended information
    """

    status: PublishStatus
    message: str
    tag: str | None = None
    details: str | None = None

    @classmethod
    def success(
        cls, message: str, tag: str | None = None, details: str | None = None
    ) -> "PublishResult":
        return cls(status=PublishStatus.SUCCESS, message=message, tag=tag, details=details)

    @classmethod
    def failed(cls, message: str, details: str | None = None) -> "PublishResult":
        return cls(status=PublishStatus.FAILED, message=message, details=details)

    @classmethod
    def skipped(cls, message: str) -> "PublishResult":
        return cls(status=PublishStatus.SKIPPED, message=message)


@dataclass
class PublishContext:
    """Context passed to publishers.

    Contains all information publishers need to perform their operations.
    """

    project_root: Path
    version: str
    tag: str
    dry_run: bool = False
