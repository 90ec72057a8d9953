"""
ISteamUser/GetFriendList endpoint.
"""

from typing import TYPE_CHECKING

from steamr.api.contracts import Friend, FriendsList, FriendsResponse
from steamr.api.endpoints.base import require_id

if TYPE_CHECKING:
    from steamr.api.client import SteamClient

ENDPOINT_GET_FRIENDLIST = "ISteamUser/GetFriendList/v0001"


def get_friends(client: "SteamClient", steam_id: str | int) -> list[Friend]:
    """
    Get all friends of the user with the given Steam ID.

    A profile whose friend list is hidden yields an empty list.

    Args:
        client: Steam client carrying the API key
        steam_id: Steam ID of the user

    Returns:
        list[Friend]: The user's friends

    Raises:
        UnauthorizedError: If the key is invalid or the profile is private
        RequestFailedError: If the request failed
        NoDataError: If the response doesn't match the expected shape

    Example:
        >>> for friend in get_friends(client, "76561197960435530"):
        ...     print(friend.steam_id, friend.friends_since_utc)
    """
    friends_list: FriendsList = client.fetch(
        ENDPOINT_GET_FRIENDLIST,
        [
            ("steamid", require_id(steam_id, "steam_id")),
            ("relationship", "friend"),
        ],
        FriendsResponse,
    )
    return list(friends_list.friends)
