"""
Data contracts for the ISteamUser/GetFriendList endpoint.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar

from pydantic import Field

from steamr.api.contracts.base import Envelope, SteamModel


class SteamRelationship(str, Enum):
    """Relationship qualifiers returned by Steam."""

    FRIEND = "friend"


class Friend(SteamModel):
    """A Steam friend and its metadata."""

    steam_id: str = Field(..., alias="steamid", description="The friend's Steam ID")
    relationship: SteamRelationship = Field(..., description="Relationship to the user")
    friend_since: int = Field(..., description="Unix timestamp of when the friendship began")

    @property
    def friends_since_utc(self) -> datetime:
        """Friendship start as an aware UTC datetime."""
        return datetime.fromtimestamp(self.friend_since, tz=timezone.utc)

    def __str__(self) -> str:
        return f"Friend ID: {self.steam_id}, friends since {self.friend_since}"


class FriendsList(SteamModel):
    """Payload of the GetFriendList endpoint."""

    friends: list[Friend] = Field(default_factory=list)


class FriendsResponse(Envelope[FriendsList]):
    """
    Wrapper for GetFriendList response.

    The API returns {"friendslist": {"friends": [...]}}; the wrapper is
    missing entirely for profiles whose friend list is hidden.
    """

    payload_type: ClassVar[type[FriendsList]] = FriendsList

    response: FriendsList | None = Field(default=None, alias="friendslist")
