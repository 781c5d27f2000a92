"""Tests for the paths module."""

from __future__ import annotations

from pathlib import Path

from namematch.infrastructure.paths import PathResolver


class TestPathResolver:
    """Tests for PathResolver."""

    def test_default_base_is_in_home(self) -> None:
        """Default base should be ~/.namematch."""
        assert PathResolver().base == Path.home() / ".namematch"

    def test_custom_base(self, tmp_path: Path) -> None:
        """Custom base replaces the default."""
        assert PathResolver(base=tmp_path).base == tmp_path

    def test_global_config(self, tmp_path: Path) -> None:
        """Config file lives directly under the base."""
        assert PathResolver(base=tmp_path).global_config() == tmp_path / "config.json"

