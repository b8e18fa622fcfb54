"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from io import StringIO
from unittest.mock import patch

import pytest

from tribune.cli import cmd_info, cmd_preview, cmd_print, create_parser, main
from tribune.config import Settings
from tribune.errors import EmptyResultError, FetchError, PrintError


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "tribune"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_no_arguments(self) -> None:
        """Bare invocation parses with no command."""
        args = create_parser().parse_args([])
        assert args.command is None
        assert args.debug is False

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        args = create_parser().parse_args(["--debug", "preview"])
        assert args.debug is True
        assert args.command == "preview"

    @pytest.mark.parametrize("command", ["print", "preview", "info"])
    def test_subcommands(self, command: str) -> None:
        assert create_parser().parse_args([command]).command == command


class TestCmdPrint:
    """Tests for cmd_print function."""

    def test_success_returns_zero(self) -> None:
        """Successful run returns exit code 0."""
        args = argparse.Namespace(debug=False)
        with patch("tribune.cli.publish_edition") as mock_publish:
            mock_publish.return_value = "PAGE"
            assert cmd_print(args) == 0
            mock_publish.assert_called_once()
            assert mock_publish.call_args.kwargs == {}

    @pytest.mark.parametrize(
        "error",
        [
            FetchError("weather"),
            EmptyResultError("news", "no results"),
            PrintError("lp exited with status 1"),
        ],
    )
    def test_edition_error_returns_one(self, error: Exception) -> None:
        """Any run-aborting error returns exit code 1 and reports it."""
        args = argparse.Namespace(debug=False)
        with (
            patch("tribune.cli.publish_edition", side_effect=error),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_print(args) == 1
            assert str(error) in mock_stderr.getvalue()

    def test_debug_mode_prints_settings(self) -> None:
        """Debug mode prints settings without leaking keys."""
        args = argparse.Namespace(debug=True)
        with (
            patch("tribune.cli.get_settings", return_value=Settings(stocks_api_key="hush")),
            patch("tribune.cli.publish_edition"),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_print(args)
            output = mock_stdout.getvalue()
            assert "Settings" in output
            assert "hush" not in output


class TestCmdPreview:
    """Tests for cmd_preview function."""

    def test_writes_report_without_printing(self) -> None:
        args = argparse.Namespace(debug=False)
        with (
            patch("tribune.cli.publish_edition", return_value="THE PAGE\n") as mock_publish,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert cmd_preview(args) == 0
            assert mock_publish.call_args.kwargs == {"dry_run": True}
            assert mock_stdout.getvalue() == "THE PAGE\n"

    def test_error_returns_one(self) -> None:
        args = argparse.Namespace(debug=False)
        with (
            patch("tribune.cli.publish_edition", side_effect=FetchError("reddit (r/science)")),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_preview(args) == 1


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        assert cmd_info(argparse.Namespace()) == 0

    def test_hides_key_values(self) -> None:
        settings = Settings(stocks_api_key="hush", news_api_key=None)
        with (
            patch("tribune.cli.get_settings", return_value=settings),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
            assert "hush" not in output
            assert "API key set" in output
            assert "API key unset" in output
            assert "lp -d Canon_TS3500_series" in output


class TestMain:
    """Tests for main function."""

    def test_no_command_prints_edition(self) -> None:
        """Bare invocation runs the print command."""
        with patch("tribune.cli.cmd_print", return_value=0) as mock_cmd:
            assert main([]) == 0
            mock_cmd.assert_called_once()

    def test_preview_command_executes(self) -> None:
        with patch("tribune.cli.cmd_preview", return_value=0) as mock_cmd:
            assert main(["preview"]) == 0
            mock_cmd.assert_called_once()

    def test_failure_exit_code_propagates(self) -> None:
        with patch("tribune.cli.cmd_print", return_value=1):
            assert main(["print"]) == 1

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with patch("tribune.cli.create_parser") as mock_parser:
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(command="unknown")
            assert main([]) == 1
