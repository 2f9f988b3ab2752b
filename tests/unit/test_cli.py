"""
Tests for the touchbistro-mcp command-line interface.
"""

import json
from unittest.mock import AsyncMock, patch

import pytest

from touchbistro_mcp.__main__ import create_parser, main
from touchbistro_mcp.tools.dispatcher import TouchBistroTools


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No TOUCHBISTRO_* variables and no stray .env file."""
    for name in ("API_KEY", "VENUE_ID", "BASE_URL", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"TOUCHBISTRO_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


class TestParser:

    def test_no_command_defaults_to_none(self):
        args = create_parser().parse_args([])
        assert args.command is None

    @pytest.mark.parametrize("command", ["serve", "tools", "config"])
    def test_subcommands(self, command):
        assert create_parser().parse_args([command]).command == command

    def test_log_level_choices(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--log-level", "TRACE"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "touchbistro-mcp 1.0.0" in capsys.readouterr().out


class TestServeCommand:

    def test_missing_api_key_exits_nonzero_before_serving(self, clean_env, monkeypatch, capsys):
        monkeypatch.setenv("TOUCHBISTRO_VENUE_ID", "venue-123")

        with patch("touchbistro_mcp.server.create_server") as mock_create, \
             patch("touchbistro_mcp.server.serve", new_callable=AsyncMock) as mock_serve:
            exit_code = main(["serve"])

        assert exit_code == 1
        mock_create.assert_not_called()
        mock_serve.assert_not_called()
        assert "TOUCHBISTRO_API_KEY" in capsys.readouterr().err

    def test_missing_venue_exits_nonzero(self, clean_env, monkeypatch, capsys):
        monkeypatch.setenv("TOUCHBISTRO_API_KEY", "secret")

        with patch("touchbistro_mcp.server.serve", new_callable=AsyncMock) as mock_serve:
            exit_code = main([])

        assert exit_code == 1
        mock_serve.assert_not_called()
        assert "TOUCHBISTRO_VENUE_ID" in capsys.readouterr().err

    def test_serves_with_credentials(self, clean_env, monkeypatch):
        monkeypatch.setenv("TOUCHBISTRO_API_KEY", "secret")
        monkeypatch.setenv("TOUCHBISTRO_VENUE_ID", "venue-123")

        with patch("touchbistro_mcp.server.serve", new_callable=AsyncMock) as mock_serve:
            exit_code = main([])

        assert exit_code == 0
        mock_serve.assert_awaited_once()
        (tools,) = mock_serve.await_args.args
        assert isinstance(tools, TouchBistroTools)

    def test_env_file_is_read(self, clean_env, tmp_path):
        env_file = tmp_path / "touchbistro.env"
        env_file.write_text("TOUCHBISTRO_API_KEY=from-file\nTOUCHBISTRO_VENUE_ID=venue-9\n")

        with patch("touchbistro_mcp.server.serve", new_callable=AsyncMock) as mock_serve:
            exit_code = main(["--env-file", str(env_file), "serve"])

        assert exit_code == 0
        mock_serve.assert_awaited_once()


class TestUtilityCommands:

    def test_tools_prints_catalog(self, clean_env, capsys):
        assert main(["tools"]) == 0

        catalog = json.loads(capsys.readouterr().out)
        assert len(catalog) == 7
        assert catalog[4]["name"] == "create_reservation"
        assert catalog[4]["inputSchema"]["required"] == ["customerName", "partySize", "date", "time"]

    def test_config_masks_api_key(self, clean_env, monkeypatch, capsys):
        monkeypatch.setenv("TOUCHBISTRO_API_KEY", "supersecret-abcd")

        assert main(["config"]) == 0

        err = capsys.readouterr().err
        assert "supersecret" not in err
        assert "...abcd" in err
        assert "TOUCHBISTRO_VENUE_ID is not set" in err
