"""Tests for the command-line interface."""

import json
from typing import Any

import httpx
import pytest
import respx

from steamr import cli
from steamr.cli import main

NEWS_URL = "https://api.steampowered.com/ISteamNews/GetNewsForApp/v0002"
OWNED_GAMES_URL = "https://api.steampowered.com/IPlayerService/GetOwnedGames/v0001"


def read_output(capsys: pytest.CaptureFixture[str]) -> dict[str, Any]:
    """Parse the JSON document printed on stdout."""
    return json.loads(capsys.readouterr().out)  # type: ignore[no-any-return]


class TestCommands:
    """Tests for successful commands."""

    @respx.mock
    def test_news(
        self, capsys: pytest.CaptureFixture[str], game_news_response: dict[str, Any]
    ) -> None:
        """Test the news command prints the typed result."""
        route = respx.get(NEWS_URL).mock(
            return_value=httpx.Response(200, json=game_news_response)
        )

        main(["news", "10", "2", "100"])

        output = read_output(capsys)
        assert output["success"] is True
        assert output["command"] == "news"
        assert output["data"]["count"] == 1204
        assert output["data"]["game_news"][0]["news_id"] == "5124723283436985581"

        params = route.calls.last.request.url.params
        assert params["count"] == "2"
        assert params["maxlength"] == "100"

    @respx.mock
    def test_library_uses_configured_key(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
        owned_games_response: dict[str, Any],
    ) -> None:
        """Test that the key comes from the environment."""
        monkeypatch.setenv("STEAM_API_KEY", "cli_key")
        route = respx.get(OWNED_GAMES_URL).mock(
            return_value=httpx.Response(200, json=owned_games_response)
        )

        main(["library", "76561197960435530"])

        output = read_output(capsys)
        assert output["data"]["game_count"] == 2
        assert route.calls.last.request.url.params["key"] == "cli_key"

    def test_test_config(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that configuration is shown without the key itself."""
        monkeypatch.setenv("STEAM_API_KEY", "very_secret")

        main(["test-config"])

        captured = capsys.readouterr()
        output = json.loads(captured.out)
        assert output["data"]["api_key_configured"] is True
        assert "very_secret" not in captured.out


class TestFailures:
    """Tests for error handling and usage errors."""

    @respx.mock
    def test_unauthorized_prints_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that Steam errors become a failure document and exit code 1."""
        respx.get(OWNED_GAMES_URL).mock(return_value=httpx.Response(401))

        with pytest.raises(SystemExit) as exc_info:
            main(["library", "76561197960435530"])

        assert exc_info.value.code == 1
        output = read_output(capsys)
        assert output["success"] is False
        assert output["error"]["kind"] == "unauthorized"
        assert output["error"]["status_code"] == 401

    def test_invalid_count(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a non-numeric count is reported."""
        with pytest.raises(SystemExit) as exc_info:
            main(["news", "10", "many"])

        assert exc_info.value.code == 1
        assert read_output(capsys)["success"] is False

    def test_missing_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test usage is printed when arguments are missing."""
        with pytest.raises(SystemExit) as exc_info:
            main(["stats", "76561197960435530"])

        assert exc_info.value.code == 1
        assert "Usage: steamr" in capsys.readouterr().out

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unknown commands are rejected."""
        with pytest.raises(SystemExit) as exc_info:
            main(["ingest"])

        assert exc_info.value.code == 1
        assert "Unknown command: ingest" in capsys.readouterr().out

    def test_no_arguments(self) -> None:
        """Test that running without a command exits with an error."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1

    def test_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test help exits cleanly."""
        main(["--help"])

        assert "Commands:" in capsys.readouterr().out

    def test_keyboard_interrupt(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that Ctrl-C ends the command with exit code 130."""

        def interrupted() -> None:
            raise KeyboardInterrupt

        monkeypatch.setitem(cli.COMMANDS, "test-config", (0, interrupted))

        with pytest.raises(SystemExit) as exc_info:
            main(["test-config"])

        assert exc_info.value.code == 130
        assert "Interrupted by user" in capsys.readouterr().out
