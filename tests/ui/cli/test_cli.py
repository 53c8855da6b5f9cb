"""Tests for CLI functionality."""

from __future__ import annotations

import hashlib
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from pathwise.ui.cli.args import ArgumentParser
from pathwise.ui.cli.args.options import ChecksumArgs, InspectArgs, RelativeArgs
from pathwise.ui.cli.cli import CommandProcessor
from pathwise.ui.cli.commands import ChecksumCommand, InspectCommand, RelativeCommand, WhichCommand
from pathwise.ui.cli.models import ResultRow


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep CLI runs from installing handlers or writing log files.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock ``setup_logger``.
    """
    return mocker.patch("pathwise.ui.cli.args.parser.setup_logger")


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    """Create a mock logger.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock logger instance.
    """
    return mocker.patch("pathwise.ui.cli.cli.logger")


def test_parser_builds_typed_args(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["--quiet", "checksum", "a.txt", "b.txt", "--algorithm", "md5"])

    assert args == ChecksumArgs(
        command="checksum",
        paths=["a.txt", "b.txt"],
        algorithm="md5",
        verbose=False,
        quiet=True,
    )
    assert mock_setup_logger.call_args.kwargs["console_level"] == 40


def test_parser_relative_anchor() -> None:
    args = ArgumentParser.process_args(["relative", "/a/b/c.txt", "--to", "/a/x"])

    assert isinstance(args, RelativeArgs)
    assert args.anchor == "/a/x"


def test_parser_requires_a_subcommand() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args([])


def test_inspect_command_describes_components(tmp_path: Path) -> None:
    target = tmp_path / "archive.tar.gz"
    _ = target.write_bytes(b"x")

    rows = InspectCommand(InspectArgs("inspect", [str(target)], False, True)).execute()

    assert rows[0].fields["base"] == "archive.tar"
    assert rows[0].fields["ext"] == "gz"
    assert rows[0].fields["path"] == str(target)


def test_inspect_command_reports_empty_globs(tmp_path: Path) -> None:
    rows = InspectCommand(InspectArgs("inspect", [str(tmp_path / "*.none")], False, True)).execute()

    assert rows == [ResultRow(source=str(tmp_path / "*.none"), error="no matches")]


def test_relative_command(tmp_path: Path) -> None:
    args = RelativeArgs("relative", [str(tmp_path / "a" / "b.txt")], str(tmp_path / "c"), False, True)

    rows = RelativeCommand(args).execute()

    assert rows[0].fields["relative"] == "../a/b.txt"


def test_checksum_command_reports_missing_files(tmp_path: Path) -> None:
    present = tmp_path / "present.txt"
    _ = present.write_bytes(b"abc")
    args = ChecksumArgs("checksum", [str(present), str(tmp_path / "absent")], "sha256", False, True)

    rows = ChecksumCommand(args).execute()

    assert rows[0].fields["sha256"] == hashlib.sha256(b"abc").hexdigest()
    assert not rows[1].success


def test_which_command(mocker: MockerFixture) -> None:
    _ = mocker.patch("pathwise.ui.cli.commands.which.which", return_value=None)
    command = WhichCommand(mocker.Mock(names=["ghost"], quiet=True))

    rows = command.execute()

    assert rows == [ResultRow(source="ghost", error="not found on PATH")]


def test_process_command_succeeds(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    _ = target.write_bytes(b"abc")

    CommandProcessor.process_command(["--quiet", "checksum", str(target)])


def test_process_command_exits_on_failures(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["checksum", str(tmp_path / "missing")])

    assert exc_info.value.code == 1


def test_keyboard_interrupt_exits_130(mocker: MockerFixture, mock_logger: MagicMock) -> None:
    _ = mocker.patch(
        "pathwise.ui.cli.cli.ArgumentParser.process_args",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["inspect", "x"])

    assert exc_info.value.code == 130
    mock_logger.info.assert_called_once()


def test_unexpected_errors_are_logged(mocker: MockerFixture, mock_logger: MagicMock) -> None:
    _ = mocker.patch.object(InspectCommand, "collect", side_effect=RuntimeError("boom"))

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["inspect", "x"])

    assert exc_info.value.code == 1
    mock_logger.error.assert_called_once()
