"""Publisher modules for package registry publishing."""

from push_release.publishers.base import PublishContext, PublishResult, PublishStatus
from push_release.publishers.npm import NPMPublisher

__all__ = [
    "NPMPublisher",
    "PublishContext",
    "PublishResult",
    "PublishStatus",
]
