"""
Data contracts for Steam Web API responses.

Pydantic models describing each endpoint's envelope and payload.
JSON field names are mapped to Python names through field aliases.
"""

from steamr.api.contracts.base import Envelope, SteamModel
from steamr.api.contracts.friends import (
    Friend,
    FriendsList,
    FriendsResponse,
    SteamRelationship,
)
from steamr.api.contracts.library import Game, Library, OwnedGames, OwnedGamesResponse
from steamr.api.contracts.news import GameNews, GameNewsResponse, News
from steamr.api.contracts.stats import Achievement, PlayerStats, PlayerStatsResponse, Stat

__all__ = [
    "Achievement",
    "Envelope",
    "Friend",
    "FriendsList",
    "FriendsResponse",
    "Game",
    "GameNews",
    "GameNewsResponse",
    "Library",
    "News",
    "OwnedGames",
    "OwnedGamesResponse",
    "PlayerStats",
    "PlayerStatsResponse",
    "Stat",
    "SteamModel",
    "SteamRelationship",
]
