"""
ISteamNews/GetNewsForApp endpoint.
"""

from typing import TYPE_CHECKING

from steamr.api.contracts import GameNews, GameNewsResponse
from steamr.api.endpoints.base import require_id, require_non_negative

if TYPE_CHECKING:
    from steamr.api.client import SteamClient

ENDPOINT_GAME_NEWS = "ISteamNews/GetNewsForApp/v0002"

DEFAULT_NEWS_COUNT = 5
DEFAULT_MAX_LENGTH = 300


def get_game_news(
    client: "SteamClient",
    app_id: str | int,
    news_count: int = DEFAULT_NEWS_COUNT,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> GameNews:
    """
    Get the latest news for an app.

    This endpoint doesn't require an API key. Steam applies
    ``max_length`` loosely (e.g. around hyperlinks), so article
    contents may exceed it.

    Args:
        client: Steam client, with or without an API key
        app_id: Steam application ID
        news_count: Number of articles to fetch
        max_length: Maximum length of each article's contents (0 = full)

    Returns:
        GameNews: Articles plus the total number available

    Raises:
        ValueError: If news_count or max_length is negative
    """
    game_news: GameNews = client.fetch(
        ENDPOINT_GAME_NEWS,
        [
            ("appid", require_id(app_id, "app_id")),
            ("count", require_non_negative(news_count, "news_count")),
            ("maxlength", require_non_negative(max_length, "max_length")),
        ],
        GameNewsResponse,
    )
    return game_news
