"""Server configuration: the vault root plus optional YAML settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from obsidian_notes.constants import DEFAULT_EXCLUDE_PATTERNS, LOG_LEVEL
from obsidian_notes.data_models import VaultRoot

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ServerSettings:
    """Immutable settings handed to the dispatcher and resource catalog."""

    vault: VaultRoot
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    log_level: str = LOG_LEVEL


def _parse_exclude_patterns(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise ValueError("'exclude' must be a list of glob patterns")
    patterns: list[str] = []
    for entry in raw:
        if not isinstance(entry, str) or not entry.strip():
            raise ValueError(f"Invalid exclude pattern {entry!r}: expected a non-empty string")
        patterns.append(entry.strip())
    return tuple(patterns)


def _parse_log_level(raw: Any) -> str:
    if not isinstance(raw, str) or raw.strip().upper() not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log_level {raw!r}: expected one of {', '.join(VALID_LOG_LEVELS)}"
        )
    return raw.strip().upper()


def load_server_configuration(
    vault_path: str,
    config_path: Optional[Path] = None,
    log_level: Optional[str] = None,
) -> ServerSettings:
    """Build the server settings from the vault argument and an optional YAML file.

    The YAML file is a mapping with two optional keys::

        exclude:
          - node_modules/**
          - Templates/**
        log_level: DEBUG

    ``exclude`` replaces the default exclusion patterns.

    Args:
        vault_path: Vault directory as given on the command line. Its existence
            is not checked here; operations verify it on first access.
        config_path: Optional path to the YAML settings file.
        log_level: Optional level overriding the file and the default.

    Returns:
        The resulting :class:`ServerSettings`.

    Raises:
        FileNotFoundError: If ``config_path`` is given but does not exist.
        ValueError: If the vault path is empty or the file has an invalid structure.
    """
    vault = VaultRoot.from_string(vault_path)
    exclude_patterns = DEFAULT_EXCLUDE_PATTERNS
    level = LOG_LEVEL

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        if not isinstance(raw_config, dict):
            raise ValueError("Configuration file must contain a mapping at the top level")

        if "exclude" in raw_config:
            exclude_patterns = _parse_exclude_patterns(raw_config["exclude"])
        if "log_level" in raw_config:
            level = _parse_log_level(raw_config["log_level"])

        unknown = sorted(set(raw_config) - {"exclude", "log_level"})
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(map(str, unknown)))

    if log_level is not None:
        level = _parse_log_level(log_level)

    return ServerSettings(vault=vault, exclude_patterns=exclude_patterns, log_level=level)
