"""Tests for CLI functionality."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from buildlog.config.config import Config
from buildlog.shared.records import FileRecord
from buildlog.ui.cli import CommandProcessor, main


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Create a directory with a couple of files."""

    _ = (tmp_path / "a.js").write_bytes(b"a")
    _ = (tmp_path / "b.css").write_bytes(b"bb")
    return tmp_path


@pytest.fixture(autouse=True)
def inert_setup(mocker: MockerFixture) -> None:
    """Keep configuration and log files out of the real repository."""

    mock_config = mocker.patch("buildlog.ui.cli.args.parser.Config")
    mock_config.load.return_value = Config()
    _ = mocker.patch("buildlog.ui.cli.args.parser.setup_logger")


def test_process_command_streams_every_file(source_dir: Path, mocker: MockerFixture) -> None:
    emitted: list[str] = []
    _ = mocker.patch(
        "buildlog.features.transform.logging_transform.LoggingTransform._log_line",
        side_effect=emitted.append,
    )

    passed = CommandProcessor.process_command([str(source_dir), "--no-loader", "--action", "edit"])

    assert passed == 2
    assert len(emitted) == 4
    assert "2 items" in emitted[-1]
    assert "1 byte" in emitted[1]


def test_process_command_honours_pattern(source_dir: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("buildlog.features.transform.logging_transform.LoggingTransform._log_line")

    passed = CommandProcessor.process_command(
        [str(source_dir), "--no-loader", "--pattern", "*.css"]
    )

    assert passed == 1


def test_unexpected_error_exits_with_one(source_dir: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("buildlog.ui.cli.cli.iter_file_records", side_effect=RuntimeError("boom"))
    mock_logger = mocker.patch("buildlog.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        _ = CommandProcessor.process_command([str(source_dir), "--no-loader"])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "boom")


def test_keyboard_interrupt_exits_with_130(source_dir: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("buildlog.ui.cli.cli.drain", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        _ = CommandProcessor.process_command([str(source_dir), "--no-loader"])

    assert excinfo.value.code == 130


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch("buildlog.ui.cli.cli.CommandProcessor.process_command", return_value=3)

    assert main() == 0
    process.assert_called_once_with()


def test_failing_source_still_stops_spinner(source_dir: Path, mocker: MockerFixture) -> None:
    """A read error mid-stream clears the spinner before the process exits."""

    spinner_cls = mocker.patch("buildlog.features.transform.logging_transform.SpinnerLoader")
    spinner = spinner_cls.return_value
    _ = mocker.patch("buildlog.features.transform.logging_transform.LoggingTransform._log_line")

    def _records(*_args: object, **_kwargs: object) -> Iterator[FileRecord]:
        spinner.start.assert_called_once_with()
        yield FileRecord(path=str(source_dir / "a.js"), contents=b"a")
        raise PermissionError("denied: b.css")

    _ = mocker.patch("buildlog.ui.cli.cli.iter_file_records", side_effect=_records)
    mock_logger = mocker.patch("buildlog.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        _ = CommandProcessor.process_command([str(source_dir)])

    assert excinfo.value.code == 1
    spinner.stop.assert_called_once_with()
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "denied: b.css")
