"""Shared test fixtures for namematch tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import structlog

from namematch.cli.context import CLIContext
from namematch.infrastructure.paths import PathResolver

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    """Path resolver rooted in a temporary directory."""
    return PathResolver(base=tmp_path / ".namematch")


@pytest.fixture(autouse=True)
def isolated_config(resolver: PathResolver) -> Generator[PathResolver]:
    """Keep tests away from the user's real config file."""
    with patch("namematch.infrastructure.config.default_resolver", resolver):
        yield resolver


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None]:
    """Reset CLI context and logging configuration around each test."""
    CLIContext.reset()
    yield
    CLIContext.reset()
    structlog.reset_defaults()
