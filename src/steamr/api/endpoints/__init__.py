"""
Steam Web API endpoints.

One function per Steam API method, each taking a ``SteamClient``
as first argument. The same operations are available as client methods.
"""

from steamr.api.endpoints.friends import ENDPOINT_GET_FRIENDLIST, get_friends
from steamr.api.endpoints.library import ENDPOINT_OWNED_GAMES, get_library, get_owned_games
from steamr.api.endpoints.news import ENDPOINT_GAME_NEWS, get_game_news
from steamr.api.endpoints.stats import ENDPOINT_USER_STATS_FOR_GAME, get_player_stats

__all__ = [
    "ENDPOINT_GAME_NEWS",
    "ENDPOINT_GET_FRIENDLIST",
    "ENDPOINT_OWNED_GAMES",
    "ENDPOINT_USER_STATS_FOR_GAME",
    "get_friends",
    "get_game_news",
    "get_library",
    "get_owned_games",
    "get_player_stats",
]
