"""
Data contracts for the ISteamUserStats/GetUserStatsForGame endpoint.
"""

from typing import ClassVar

from pydantic import Field

from steamr.api.contracts.base import Envelope, SteamModel


class Achievement(SteamModel):
    """A single unlocked achievement."""

    name: str


class Stat(SteamModel):
    """A named game statistic."""

    name: str
    value: int | float = Field(default=0)


class PlayerStats(SteamModel):
    """Payload of the GetUserStatsForGame endpoint."""

    game_name: str = Field(default="", alias="gameName", description="Name of the game")
    achievements: list[Achievement] = Field(default_factory=list)
    stats: list[Stat] = Field(default_factory=list)

    @property
    def achievement_names(self) -> list[str]:
        """Extract achievement names as simple list."""
        return [a.name for a in self.achievements]


class PlayerStatsResponse(Envelope[PlayerStats]):
    """Wrapper for GetUserStatsForGame response: {"playerstats": {...}}."""

    payload_type: ClassVar[type[PlayerStats]] = PlayerStats

    response: PlayerStats | None = Field(default=None, alias="playerstats")
