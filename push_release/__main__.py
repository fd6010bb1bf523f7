"""Allow running as ``python -m push_release``."""

from push_release.cli import app

app()
