"""Tests for configuration path resolution helpers."""

from pathlib import Path

from pathwise.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_config_path_prefers_environment_override(tmp_path: Path) -> None:
    override = tmp_path / "custom.toml"

    assert default_config_path({"PATHWISE_CONFIG": str(override)}) == override.resolve()


def test_config_path_follows_xdg_config_home(tmp_path: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path)}

    assert default_config_path(env) == (tmp_path / "pathwise" / "config.toml").resolve()


def test_default_log_paths(tmp_path: Path) -> None:
    """Default log locations should live under the XDG state directory."""

    env = {"XDG_STATE_HOME": str(tmp_path)}
    expected_dir = (tmp_path / "pathwise" / "logs").resolve()

    assert default_log_dir(env) == expected_dir
    assert default_log_file(env) == expected_dir / "pathwise.log"


def test_log_dir_override(tmp_path: Path) -> None:
    assert default_log_dir({"PATHWISE_LOG_DIR": str(tmp_path)}) == tmp_path.resolve()


def test_explicit_path_beats_environment(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"VAR": str(tmp_path / "env")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "explicit").resolve()


def test_blank_environment_value_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"VAR": "   "},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "default").resolve()
