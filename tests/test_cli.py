"""Tests for the command-line entry points."""

import logging
import shutil

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from shared.cli import handle_errors
from shared.logger import get_logger, setup_logger
from stream_tools.cli import main
from stream_tools.event_demo.cli import main as demo_main
from stream_tools.event_demo.cli import run_demo
from stream_tools.event_demo.date_codec import Date
from stream_tools.request_converter.cli import main as convert_main
from stream_tools.request_converter.cli import transcode_request
from stream_tools.request_converter.converter import ConversionFormat, RequestConverter


@pytest.fixture
def workdir(tmp_path, monkeypatch, request_path):
    """Temporary working directory holding a copy of request.json."""
    shutil.copy(request_path, tmp_path / "request.json")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestTranscodeRequest:
    """Test the transcoding driver."""

    def test_prints_yaml_then_toml(self, workdir, capsys):
        """Test that both renderings are printed after their labels."""
        transcode_request()
        out = capsys.readouterr().out

        assert out.startswith("YAML:\ntype: success\n")
        assert "\nTOML:\n" in out
        assert out.index("YAML:") < out.index("TOML:")
        assert "client_price: 250" in out
        assert "client_price = 250" in out

    def test_no_partial_output(self, workdir, monkeypatch, capsys):
        """Test that nothing is printed when the TOML rendering fails."""
        original = RequestConverter.convert

        def convert(self, request, to_format, **kwargs):
            if to_format == ConversionFormat.TOML:
                raise ValueError("Failed to convert to toml")
            return original(self, request, to_format, **kwargs)

        monkeypatch.setattr(RequestConverter, "convert", convert)

        with pytest.raises(ValueError):
            transcode_request()

        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, monkeypatch):
        """Test that a missing request.json raises."""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(FileNotFoundError):
            transcode_request()


class TestRunDemo:
    """Test the event demo harness."""

    def test_output(self, capsys):
        """Test the serialized and deserialized lines."""
        restored = run_demo()
        lines = capsys.readouterr().out.splitlines()

        assert lines == [
            'Serialized JSON: {"name":"Concert","date":"15|11|2024"}',
            "Deserialized event: Event(name='Concert', date=Date(day=15, month=11, year=2024))",
        ]
        assert restored.date == Date(day=15, month=11, year=2024)

    def test_demo_command(self):
        """Test the event-demo command."""
        result = CliRunner().invoke(demo_main, [])

        assert result.exit_code == 0
        assert "Serialized JSON:" in result.output


class TestCommands:
    """Test the click commands."""

    def test_stream_tools_output_order(self, workdir):
        """Test the four output blocks in fixed order."""
        result = CliRunner().invoke(main, [])
        output = result.output

        assert result.exit_code == 0
        positions = [
            output.index("YAML:"),
            output.index("TOML:"),
            output.index("Serialized JSON:"),
            output.index("Deserialized event:"),
        ]
        assert positions == sorted(positions)

    def test_stream_tools_missing_file(self, tmp_path, monkeypatch):
        """Test that a missing request.json exits non-zero."""
        monkeypatch.chdir(tmp_path)

        result = CliRunner().invoke(main, [])

        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Serialized JSON:" not in result.output

    def test_stream_tools_invalid_request(self, workdir):
        """Test that a schema failure exits non-zero without partial output."""
        (workdir / "request.json").write_text('{"type": "failure"}', encoding="utf-8")

        result = CliRunner().invoke(main, [])

        assert result.exit_code == 1
        assert "YAML:" not in result.output

    def test_request_convert_command(self, workdir):
        """Test the request-convert command."""
        result = CliRunner().invoke(convert_main, ["--verbose"])

        assert result.exit_code == 0
        assert "TOML:" in result.output
        assert "Serialized JSON:" not in result.output


class TestHandleErrors:
    """Test the handle_errors decorator."""

    def test_unexpected_error_exits(self):
        """Test that stray exceptions become exit code 1."""

        @handle_errors
        def broken():
            raise RuntimeError("boom")

        with pytest.raises(SystemExit) as exc_info:
            broken()

        assert exc_info.value.code == 1

    def test_keyboard_interrupt_exits(self):
        """Test that Ctrl-C becomes exit code 130."""

        @handle_errors
        def interrupted():
            raise KeyboardInterrupt

        with pytest.raises(SystemExit) as exc_info:
            interrupted()

        assert exc_info.value.code == 130

    def test_system_exit_passes_through(self):
        """Test that explicit exits are preserved."""

        @handle_errors
        def done():
            raise SystemExit(3)

        with pytest.raises(SystemExit) as exc_info:
            done()

        assert exc_info.value.code == 3


class TestSetupLogger:
    """Test logging setup."""

    def test_configures_package_logger(self):
        """Test that the handler goes on the top-level package logger."""
        logger = setup_logger("stream_tools.request_converter.cli", level="DEBUG")

        assert logger.name == "stream_tools"
        assert logger.level == logging.DEBUG
        assert get_logger("stream_tools.request_converter.converter").getEffectiveLevel() == logging.DEBUG

    def test_no_duplicate_handlers(self):
        """Test that repeated setup keeps a single handler."""
        setup_logger("stream_tools.cli")
        logger = setup_logger("stream_tools.cli")

        assert len([h for h in logger.handlers if isinstance(h, RichHandler)]) == 1
