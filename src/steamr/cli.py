"""
Command-line interface for steamr.

Calls a single Steam Web API endpoint and prints the typed result as JSON.
"""

import json
import sys
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from steamr.api import SteamClient, SteamError
from steamr.api.endpoints.news import DEFAULT_MAX_LENGTH, DEFAULT_NEWS_COUNT
from steamr.config import get_settings
from steamr.logger import get_logger, setup_logging


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: dict[str, Any] | str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(mode="json"), indent=2, default=str))


def cmd_test_config() -> None:
    """Show the effective configuration (without the API key itself)."""
    settings = get_settings()

    output = CLIOutput(
        success=True,
        command="test-config",
        data={
            "steam_base_url": settings.steam.base_url,
            "steam_timeout_seconds": settings.steam.timeout_seconds,
            "log_level": settings.logging.level,
            "log_format": settings.logging.format,
            "api_key_configured": settings.has_api_key,
        },
    )
    print_json(output)


def cmd_friends(steam_id: str) -> None:
    """List a user's friends."""
    with SteamClient.from_settings() as client:
        friends = client.get_friends(steam_id)

    output = CLIOutput(
        success=True,
        command="friends",
        data=[f.model_dump(mode="json") for f in friends],
    )
    print_json(output)


def cmd_library(steam_id: str) -> None:
    """List a user's owned games."""
    with SteamClient.from_settings() as client:
        library = client.get_library(steam_id)

    output = CLIOutput(
        success=True,
        command="library",
        data=library.model_dump(mode="json"),
    )
    print_json(output)


def cmd_news(
    app_id: str,
    news_count: int = DEFAULT_NEWS_COUNT,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> None:
    """Show the latest news for an app."""
    with SteamClient.from_settings() as client:
        news = client.get_game_news(app_id, news_count, max_length)

    output = CLIOutput(
        success=True,
        command="news",
        data=news.model_dump(mode="json"),
    )
    print_json(output)


def cmd_stats(steam_id: str, app_id: str) -> None:
    """Show a player's achievements and stats for an app."""
    with SteamClient.from_settings() as client:
        stats = client.get_player_stats(steam_id, app_id)

    output = CLIOutput(
        success=True,
        command="stats",
        data=stats.model_dump(mode="json"),
    )
    print_json(output)


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
steamr CLI
==========

Usage: steamr <command> [arguments]

Commands:
  test-config                          Show effective configuration
  friends <steam_id>                   List a user's friends
  library <steam_id>                   List a user's owned games
  news <app_id> [count] [max_length]   Show the latest news for an app
  stats <steam_id> <app_id>            Show a player's stats for an app

Environment:
  STEAM_API_KEY                        Steam Web API key (optional for 'news')
  LOG_LEVEL, LOG_FORMAT                Logging level and format (json|console)

Examples:
  steamr news 10 5 300
  STEAM_API_KEY=... steamr library 76561197960435530
"""
    print(usage)


# command -> (minimum positional args, handler)
COMMANDS: dict[str, tuple[int, Callable[..., None]]] = {
    "test-config": (0, cmd_test_config),
    "friends": (1, cmd_friends),
    "library": (1, cmd_library),
    "news": (1, cmd_news),
    "stats": (2, cmd_stats),
}


def _parse_news_args(args: list[str]) -> list[Any]:
    parsed: list[Any] = [args[0]]
    parsed.extend(int(a) for a in args[1:3])
    return parsed


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        print_usage()
        sys.exit(1)

    command, args = argv[0], argv[1:]

    if command in ("help", "--help", "-h"):
        print_usage()
        return

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print_usage()
        sys.exit(1)

    min_args, handler = COMMANDS[command]
    if len(args) < min_args:
        print(f"Error: {command} requires {min_args} argument(s)")
        print_usage()
        sys.exit(1)

    setup_logging()
    logger = get_logger(__name__, component="cli")
    logger.info("Running command", command=command, args=args)

    try:
        if command == "news":
            handler(*_parse_news_args(args))
        else:
            handler(*args[:min_args])

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except SteamError as e:
        logger.error("Steam API error", command=command, **e.to_dict())
        print_json(CLIOutput(success=False, command=command, error=e.to_dict()))
        sys.exit(1)
    except ValueError as e:
        print_json(CLIOutput(success=False, command=command, error=str(e)))
        sys.exit(1)


if __name__ == "__main__":
    main()
