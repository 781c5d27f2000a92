"""Path resolution for namematch storage."""

from __future__ import annotations

from pathlib import Path


class PathResolver:
    """Resolves paths for namematch storage.

    Storage layout:
        ~/.namematch/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to ~/.namematch.
        """
        self.base = base or Path.home() / ".namematch"

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"


# Default resolver instance
default_resolver = PathResolver()
