"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from namematch.infrastructure.config import MatchConfig

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity and other state.

    Uses singleton pattern to share state across all CLI commands.
    Assumes single-threaded CLI environment.
    """

    verbose: bool = False
    quiet: bool = False
    config: MatchConfig | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_config(self) -> MatchConfig:
        """Get config, loading and caching on first access.

        Returns:
            Loaded or default MatchConfig instance.
        """
        if self.config is None:
            from namematch.infrastructure.config import load_config

            self.config = load_config()

        assert self.config is not None  # Always set in the if block above
        return self.config

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None
