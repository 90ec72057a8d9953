"""
Data contracts for the ISteamNews/GetNewsForApp endpoint.
"""

from datetime import datetime, timezone
from typing import ClassVar

from pydantic import Field

from steamr.api.contracts.base import Envelope, SteamModel


class News(SteamModel):
    """A single news article."""

    news_id: str = Field(..., alias="gid", description="News ID")
    title: str = Field(default="")
    url: str = Field(default="")
    author: str = Field(default="")
    contents: str = Field(default="", description="Article body, possibly truncated")
    date: int = Field(..., description="Unix timestamp of publication")
    feed_name: str = Field(default="", alias="feedname", description="Name of the feed")

    @property
    def published_at(self) -> datetime:
        """Publication date as an aware UTC datetime."""
        return datetime.fromtimestamp(self.date, tz=timezone.utc)


class GameNews(SteamModel):
    """Payload of the GetNewsForApp endpoint."""

    game_news: list[News] = Field(default_factory=list, alias="newsitems")
    count: int = Field(default=0, ge=0, description="Total news available for the app")


class GameNewsResponse(Envelope[GameNews]):
    """Wrapper for GetNewsForApp response: {"appnews": {...}}."""

    payload_type: ClassVar[type[GameNews]] = GameNews

    response: GameNews | None = Field(default=None, alias="appnews")
