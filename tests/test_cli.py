"""Tests for the speech-mcp command line interface."""

import json
import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from speech_mcp.cli import speech_mcp
from speech_mcp.models import CommandResult


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


class TestSpeakCommand:
    def test_speak(self, runner, fake_backend):
        result = runner.invoke(speech_mcp, ['speak', 'Hello', '-v', 'Albert', '-r', '180'])

        assert result.exit_code == 0
        assert "Successfully spoke: Hello" in result.output
        assert fake_backend.argv == [["-v", "Albert", "-r", "180", "Hello"]]

    def test_speak_rate_out_of_range(self, runner, fake_backend):
        result = runner.invoke(speech_mcp, ['speak', 'Hello', '--rate', '900'])

        assert result.exit_code == 1
        assert "outside acceptable range" in result.output
        assert fake_backend.requests == []

    def test_speak_blank_text(self, runner, fake_backend):
        result = runner.invoke(speech_mcp, ['speak', '   '])

        assert result.exit_code == 1
        assert "cannot be empty" in result.output

    def test_speak_failure(self, runner, fake_backend):
        fake_backend.speak_result = CommandResult(
            success=False,
            error="Failed to execute speech synthesis: exit status 1",
        )

        result = runner.invoke(speech_mcp, ['speak', 'Hello'])

        assert result.exit_code == 1
        assert "Error: Failed to execute speech synthesis: exit status 1" in result.output


class TestVoicesCommand:
    def test_voices_table(self, runner, fake_backend, sample_catalog):
        fake_backend.voices_result = CommandResult(success=True, output=sample_catalog)

        result = runner.invoke(speech_mcp, ['voices'])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("Albert    ")
        assert "it_IT" in lines[1]
        assert lines[2].endswith("Hello! My name is Bad News.")

    def test_voices_json(self, runner, fake_backend, sample_catalog):
        fake_backend.voices_result = CommandResult(success=True, output=sample_catalog)

        result = runner.invoke(speech_mcp, ['voices', '--json'])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [v["locale"] for v in data["voices"]] == ["en_US", "it_IT", "en_US"]

    def test_voices_empty(self, runner, fake_backend):
        result = runner.invoke(speech_mcp, ['voices'])

        assert result.exit_code == 0
        assert "No voices found" in result.output

    def test_voices_failure(self, runner, fake_backend):
        fake_backend.voices_result = CommandResult(
            success=False,
            cancelled=True,
            error="Voice listing cancelled: deadline exceeded",
        )

        result = runner.invoke(speech_mcp, ['voices'])

        assert result.exit_code == 1
        assert "Voice listing cancelled: deadline exceeded" in result.output


class TestMainGroup:
    def test_no_subcommand_runs_server(self, runner):
        with patch("speech_mcp.server.main") as server_main:
            result = runner.invoke(speech_mcp, [])

        assert result.exit_code == 0
        server_main.assert_called_once()

    def test_version(self, runner):
        from speech_mcp.version import __version__

        result = runner.invoke(speech_mcp, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self, runner):
        result = runner.invoke(speech_mcp, ['--help'])

        assert result.exit_code == 0
        assert "speak" in result.output
        assert "voices" in result.output


class TestDebugFlag:
    """--debug must reach logging both for the server and for subcommands."""

    @pytest.fixture(autouse=True)
    def restore_logging(self, monkeypatch):
        from speech_mcp import config

        monkeypatch.setattr(config, "DEBUG", False)
        monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
        logger = logging.getLogger("speech-mcp")
        level = logger.level
        yield
        logger.setLevel(level)

    def test_debug_applies_to_server(self, runner):
        from speech_mcp.server import mcp

        levels = []

        def record_level(*args, **kwargs):
            levels.append(logging.getLogger("speech-mcp").level)

        with patch.object(mcp, "run", side_effect=record_level):
            result = runner.invoke(speech_mcp, ['--debug'])

        assert result.exit_code == 0
        assert levels == [logging.DEBUG]

    def test_server_defaults_to_info(self, runner):
        from speech_mcp.server import mcp

        levels = []

        def record_level(*args, **kwargs):
            levels.append(logging.getLogger("speech-mcp").level)

        with patch.object(mcp, "run", side_effect=record_level):
            result = runner.invoke(speech_mcp, [])

        assert result.exit_code == 0
        assert levels == [logging.INFO]

    def test_debug_applies_to_subcommands(self, runner, fake_backend):
        result = runner.invoke(speech_mcp, ['--debug', 'voices', '--json'])

        assert result.exit_code == 0
        assert logging.getLogger("speech-mcp").level == logging.DEBUG

    def test_subcommands_quiet_by_default(self, runner, fake_backend):
        result = runner.invoke(speech_mcp, ['speak', 'Hello'])

        assert result.exit_code == 0
        assert logging.getLogger("speech-mcp").level == logging.WARNING
