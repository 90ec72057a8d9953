"""
ISteamUserStats/GetUserStatsForGame endpoint.
"""

from typing import TYPE_CHECKING

from steamr.api.contracts import PlayerStats, PlayerStatsResponse
from steamr.api.endpoints.base import require_id

if TYPE_CHECKING:
    from steamr.api.client import SteamClient

ENDPOINT_USER_STATS_FOR_GAME = "ISteamUserStats/GetUserStatsForGame/v0002"


def get_player_stats(client: "SteamClient", steam_id: str | int, app_id: str | int) -> PlayerStats:
    """
    Get the achievements and stats of a player for one app.

    Args:
        client: Steam client carrying the API key
        steam_id: Steam ID of the player
        app_id: Steam application ID

    Returns:
        PlayerStats: Game name, unlocked achievements and stats
    """
    player_stats: PlayerStats = client.fetch(
        ENDPOINT_USER_STATS_FOR_GAME,
        [
            ("steamid", require_id(steam_id, "steam_id")),
            ("appid", require_id(app_id, "app_id")),
        ],
        PlayerStatsResponse,
    )
    return player_stats
