"""
IPlayerService/GetOwnedGames endpoint.
"""

from typing import TYPE_CHECKING

from steamr.api.contracts import Library, OwnedGamesResponse
from steamr.api.endpoints.base import require_id

if TYPE_CHECKING:
    from steamr.api.client import SteamClient

ENDPOINT_OWNED_GAMES = "IPlayerService/GetOwnedGames/v0001"


def get_library(client: "SteamClient", steam_id: str | int) -> Library:
    """
    Get all games owned by the user with the given Steam ID.

    App info and played free games are always included. A private
    library yields an empty ``Library``.

    Args:
        client: Steam client carrying the API key
        steam_id: Steam ID of the user

    Returns:
        Library: Game count and games

    Example:
        >>> lib = get_library(client, "76561197960435530")
        >>> [g.name for g in lib.games if g.playtime_forever > 60]
    """
    library: Library = client.fetch(
        ENDPOINT_OWNED_GAMES,
        [
            ("steamid", require_id(steam_id, "steam_id")),
            ("include_appInfo", "true"),
            ("include_played_free_games", "true"),
        ],
        OwnedGamesResponse,
    )
    return library


get_owned_games = get_library
