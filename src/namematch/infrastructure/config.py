"""Global configuration persistence.

Handles reading and writing config.json with schema versioning
and atomic write operations.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import structlog

from namematch.infrastructure.paths import PathResolver, default_resolver

__all__ = [
    "ConfigError",
    "MatchConfig",
    "load_config",
    "save_config",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: max_distance, use_substrings, json_logs
SCHEMA_VERSION = "1"

MAX_CONFIG_SIZE = 1 * 1024 * 1024


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class MatchConfig:
    """Immutable configuration for name matching.

    Attributes:
        max_distance: Default distance budget for suggestions. None derives
            it from the length of the name being looked up.
        use_substrings: Rank candidates with the substring-aware score.
        json_logs: Emit logs as JSON instead of console lines.
    """

    max_distance: int | None = None
    use_substrings: bool = False
    json_logs: bool = False


def save_config(config: MatchConfig, resolver: PathResolver | None = None) -> None:
    """Save configuration to a JSON file.

    Uses atomic write (temp file + rename) to prevent corruption.

    Args:
        config: Configuration to save.
        resolver: Path resolver (defaults to default_resolver).

    Raises:
        ConfigError: If saving fails.
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()
    data = _config_to_dict(config)

    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            tmp_path = Path(tmp.name)
            json.dump(data, tmp, indent=2)

        tmp_path.replace(path)

        logger.debug("config_saved", path=str(path))

    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to save config: {e}") from e


def load_config(resolver: PathResolver | None = None) -> MatchConfig:
    """Load configuration from a JSON file.

    Gracefully handles missing files, invalid JSON, and oversized files.
    Returns default config if file doesn't exist or is invalid.

    Args:
        resolver: Path resolver (defaults to default_resolver).

    Returns:
        MatchConfig instance (uses defaults if file missing or invalid).
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return MatchConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return MatchConfig()

        content = path.read_text(encoding="utf-8")
        data = json.loads(content)

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )
            # Still try to load - be forward-compatible

        return _dict_to_config(data)

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return MatchConfig()
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return MatchConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return MatchConfig()


def _config_to_dict(config: MatchConfig) -> dict[str, Any]:
    """Convert config to JSON-serializable dict with version field."""
    data = asdict(config)
    data["version"] = SCHEMA_VERSION
    return data


def _dict_to_config(data: dict[str, Any]) -> MatchConfig:
    """Convert dict to MatchConfig.

    Args:
        data: Dict from JSON.

    Returns:
        MatchConfig instance.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If max_distance is negative.
    """
    max_distance = data.get("max_distance")
    if max_distance is not None:
        # bool is an int subclass but never a valid distance
        if isinstance(max_distance, bool) or not isinstance(max_distance, int):
            raise TypeError(f"max_distance must be an integer, got {max_distance!r}")
        if max_distance < 0:
            raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    use_substrings = data.get("use_substrings", False)
    json_logs = data.get("json_logs", False)
    for name, value in (("use_substrings", use_substrings), ("json_logs", json_logs)):
        if not isinstance(value, bool):
            raise TypeError(f"{name} must be a boolean, got {value!r}")

    return MatchConfig(
        max_distance=max_distance,
        use_substrings=use_substrings,
        json_logs=json_logs,
    )
