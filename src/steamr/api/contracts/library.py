"""
Data contracts for the IPlayerService/GetOwnedGames endpoint.
"""

from typing import Any, ClassVar

from pydantic import Field

from steamr.api.contracts.base import Envelope, SteamModel


class Game(SteamModel):
    """
    A game in a user's library.

    Two games are equal when they share an app ID, regardless of
    name or playtime.
    """

    app_id: int = Field(..., alias="appid", ge=0, description="Steam application ID")
    name: str = Field(default="", description="Name of the game")
    playtime_forever: int = Field(default=0, ge=0, description="Total playtime in minutes")
    playtime_windows_forever: int = Field(default=0, ge=0, description="Windows playtime in minutes")
    playtime_mac_forever: int = Field(default=0, ge=0, description="Mac playtime in minutes")
    playtime_linux_forever: int = Field(default=0, ge=0, description="Linux playtime in minutes")

    @property
    def playtime_hours(self) -> float:
        """Convert total playtime from minutes to hours."""
        return self.playtime_forever / 60

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.app_id == other.app_id

    def __hash__(self) -> int:
        return hash(self.app_id)

    def __str__(self) -> str:
        return f"Game: {self.name}, total time played: {self.playtime_forever}"


class Library(SteamModel):
    """Payload of the GetOwnedGames endpoint."""

    game_count: int = Field(default=0, ge=0, description="Number of games in the library")
    games: list[Game] = Field(default_factory=list)


# The endpoint is named after owned games; keep that name available too.
OwnedGames = Library


class OwnedGamesResponse(Envelope[Library]):
    """
    Wrapper for GetOwnedGames response.

    The API returns {"response": {"game_count": ..., "games": [...]}}
    and {"response": {}} for private libraries.
    """

    payload_type: ClassVar[type[Library]] = Library

    response: Library | None = Field(default=None, alias="response")
