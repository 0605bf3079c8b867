"""Unit tests for main CLI entry point (main.py).

Tests the Typer CLI application using CliRunner.
"""

import logging
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest
from typer.testing import CliRunner

from src.cli.main import _configure_logging, app
from src.cli.models import ExitCode


runner = CliRunner()


class TestConfigureLogging:
    """Test cases for _configure_logging function."""

    @pytest.mark.parametrize("verbosity, level", [
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (5, logging.DEBUG),
    ])
    def test_verbosity_sets_level(self, verbosity, level):
        with patch('logging.getLogger') as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            _configure_logging(verbosity)

            mock_get_logger.assert_any_call("src")
            mock_logger.setLevel.assert_called_with(level)

    def test_logdir_creates_log_file(self, tmp_path):
        app_logger = logging.getLogger("src")
        before = list(app_logger.handlers)
        logdir = tmp_path / "logs"

        try:
            _configure_logging(1, str(logdir))
            log_files = list(logdir.glob("devto-sync_*.log"))
            assert len(log_files) == 1
        finally:
            for handler in app_logger.handlers[:]:
                if handler not in before:
                    handler.close()
                    app_logger.removeHandler(handler)


@patch('src.cli.main._configure_logging')
@patch('src.cli.main.OutputHandler')
@patch('src.cli.main.SyncCommand')
class TestMainCommand:
    """Test cases for the devto-sync command."""

    def _set_exit(self, mock_sync_cmd, code=ExitCode.SUCCESS):
        mock_instance = Mock()
        mock_instance.run.return_value = code
        mock_sync_cmd.return_value = mock_instance
        return mock_instance

    def test_defaults(self, mock_sync_cmd, mock_output, mock_logging):
        mock_instance = self._set_exit(mock_sync_cmd)

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.SUCCESS
        mock_instance.run.assert_called_once_with(source=Path("."), dry_run=False)
        mock_sync_cmd.assert_called_once_with(
            config_path=None, output_handler=mock_output.return_value
        )
        mock_output.assert_called_once_with(verbosity=0, no_color=False)

    @pytest.mark.parametrize("flag", ["--dry-run", "--dryrun", "-d"])
    def test_dry_run_flags(self, mock_sync_cmd, mock_output, mock_logging, flag):
        mock_instance = self._set_exit(mock_sync_cmd)

        runner.invoke(app, [flag])

        assert mock_instance.run.call_args.kwargs['dry_run'] is True

    @pytest.mark.parametrize("flag", ["--source", "-s"])
    def test_source_option(self, mock_sync_cmd, mock_output, mock_logging, flag):
        mock_instance = self._set_exit(mock_sync_cmd)

        runner.invoke(app, [flag, "posts"])

        assert mock_instance.run.call_args.kwargs['source'] == Path("posts")

    def test_config_option(self, mock_sync_cmd, mock_output, mock_logging):
        self._set_exit(mock_sync_cmd)

        runner.invoke(app, ["--config", "custom.yaml"])

        assert mock_sync_cmd.call_args.kwargs['config_path'] == "custom.yaml"

    def test_verbosity_and_no_color(self, mock_sync_cmd, mock_output, mock_logging):
        self._set_exit(mock_sync_cmd)

        runner.invoke(app, ["-v", "2", "--no-color", "--logdir", "logs"])

        mock_output.assert_called_once_with(verbosity=2, no_color=True)
        mock_logging.assert_called_once_with(2, "logs")

    @pytest.mark.parametrize("code", [
        ExitCode.GENERAL_ERROR,
        ExitCode.AUTH_ERROR,
        ExitCode.NETWORK_ERROR,
    ])
    def test_exit_code_is_propagated(self, mock_sync_cmd, mock_output, mock_logging, code):
        self._set_exit(mock_sync_cmd, code)

        result = runner.invoke(app, [])

        assert result.exit_code == code

    def test_version(self, mock_sync_cmd, mock_output, mock_logging):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "devto-sync version 0.1.0" in result.output
        mock_sync_cmd.assert_not_called()

    def test_unknown_option(self, mock_sync_cmd, mock_output, mock_logging):
        result = runner.invoke(app, ["--bogus"])

        assert result.exit_code != 0
        mock_sync_cmd.assert_not_called()
