"""
steamr.

Typed, synchronous client binding for Valve's Steam Web API:
friend lists, owned games, game news and player stats.
"""

from steamr.api import (
    NoDataError,
    RequestFailedError,
    SteamClient,
    SteamError,
    SteamErrorKind,
    UnauthorizedError,
)
from steamr.api.contracts import (
    Achievement,
    Friend,
    Game,
    GameNews,
    Library,
    News,
    OwnedGames,
    PlayerStats,
    Stat,
    SteamRelationship,
)
from steamr.api.endpoints import (
    get_friends,
    get_game_news,
    get_library,
    get_owned_games,
    get_player_stats,
)
from steamr.config import Settings, get_settings
from steamr.logger import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    "Achievement",
    "Friend",
    "Game",
    "GameNews",
    "Library",
    "News",
    "NoDataError",
    "OwnedGames",
    "PlayerStats",
    "RequestFailedError",
    "Settings",
    "Stat",
    "SteamClient",
    "SteamError",
    "SteamErrorKind",
    "SteamRelationship",
    "UnauthorizedError",
    "__version__",
    "get_friends",
    "get_game_news",
    "get_library",
    "get_logger",
    "get_owned_games",
    "get_player_stats",
    "get_settings",
    "setup_logging",
]
