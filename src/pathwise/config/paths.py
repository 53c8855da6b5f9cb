"""Shared path utilities for configuration and log locations.

This module centralizes how pathwise discovers where its own files live.

Policy:
- Config: ``$XDG_CONFIG_HOME/pathwise/config.toml`` unless overridden by
  ``PATHWISE_CONFIG``.
- Logs: ``$XDG_STATE_HOME/pathwise/logs`` unless overridden by
  ``PATHWISE_LOG_DIR``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "PATHWISE_CONFIG"
_ENV_LOG_DIR: Final[str] = "PATHWISE_LOG_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_home(variable: str, fallback: str, env: Mapping[str, str] | None = None) -> Path:
    """Return an XDG base directory, falling back to the conventional location."""

    mapping = env if env is not None else os.environ
    value = (mapping.get(variable) or "").strip()
    if value:
        return Path(value)
    return Path.home() / fallback


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _xdg_home("XDG_CONFIG_HOME", ".config", env)
        / "pathwise"
        / "config.toml",
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_LOG_DIR,
        default_factory=lambda: _xdg_home("XDG_STATE_HOME", ".local/state", env)
        / "pathwise"
        / "logs",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return (default_log_dir(env) / "pathwise.log").resolve()


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
