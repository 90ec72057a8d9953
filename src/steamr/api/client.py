"""
Steam Web API client.

Holds the HTTP connection pool and the developer API key, issues
blocking GET requests, classifies the HTTP outcome and unwraps the
endpoint envelope into typed contracts. There is no retry
or rate limiting: every failure is raised to the caller immediately.
"""

from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from steamr.api.contracts import (
    Envelope,
    Friend,
    GameNews,
    Library,
    PlayerStats,
)
from steamr.api.endpoints import friends, library, news, stats
from steamr.api.errors import NoDataError, RequestFailedError, UnauthorizedError
from steamr.config import Settings, get_settings
from steamr.logger import get_logger, install_api_key_redaction

QueryParams = Sequence[tuple[str, str]]

UNAUTHORIZED_MESSAGE = (
    "Unauthorized. Either you have used an invalid API key, "
    "or the data you wanted to access is private"
)
BAD_STATUS_MESSAGE = (
    "Steam could not process your request. "
    "Double-check your provided parameters (Steam ID, app ID, ...)."
)
TRANSPORT_MESSAGE = "Something went wrong with your request"
MALFORMED_BODY_MESSAGE = "Steam returned a response that is not valid JSON"
NO_DATA_MESSAGE = "Steam returned no usable data for this request"

# httpx logs request URLs, key included, at INFO
install_api_key_redaction("httpx")


def classify_response(response: httpx.Response, endpoint: str) -> Any:
    """
    Turn an HTTP response into decoded JSON or a typed error.

    Args:
        response: Response returned by the transport
        endpoint: Endpoint URL, for error context

    Returns:
        Any: The decoded JSON body of a 200 response

    Raises:
        UnauthorizedError: On HTTP 401, regardless of body
        RequestFailedError: On any other non-200 status, or a non-JSON body
    """
    if response.status_code == httpx.codes.OK:
        try:
            return response.json()
        except ValueError as e:
            raise RequestFailedError(
                MALFORMED_BODY_MESSAGE,
                detail=str(e),
                endpoint=endpoint,
                status_code=response.status_code,
                original_error=e,
            ) from e

    if response.status_code == httpx.codes.UNAUTHORIZED:
        raise UnauthorizedError(
            UNAUTHORIZED_MESSAGE,
            endpoint=endpoint,
            status_code=response.status_code,
        )

    raise RequestFailedError(
        BAD_STATUS_MESSAGE,
        detail=f"HTTP {response.status_code}",
        endpoint=endpoint,
        status_code=response.status_code,
    )


class SteamClient:
    """
    Synchronous client for the Steam Web API.

    The client is cheap to share: after construction it only holds
    read-only state (key, base URL, connection pool).

    Example:
        >>> with SteamClient("an-api-key") as client:
        ...     lib = client.get_library("76561197960435530")
        ...     for game in lib.games:
        ...         print(game)
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Steam developer API key; empty for anonymous access
            base_url: Steam Web API base URL (uses settings if None)
            timeout: HTTP request timeout in seconds (uses settings if None)
            user_agent: User-Agent header (uses settings if None)
            http_client: Pre-built httpx client to use instead of creating one;
                it stays owned by the caller and is never closed here
        """
        if base_url is None or timeout is None or user_agent is None:
            steam_config = get_settings().steam
            base_url = base_url or steam_config.base_url
            timeout = timeout or steam_config.timeout_seconds
            user_agent = user_agent or steam_config.user_agent

        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._user_agent = user_agent
        self._client = http_client
        self._owns_client = http_client is None
        self._logger = get_logger(__name__, component="client")

        if not self._api_key:
            self._logger.warning(
                "Client created without an API key; only anonymous endpoints will work"
            )

    @classmethod
    def anonymous(cls, **kwargs: Any) -> "SteamClient":
        """Build a client without an API key."""
        return cls("", **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "SteamClient":
        """
        Build a client from configuration.

        Args:
            settings: Settings to use (loads cached settings if None)
            **kwargs: Overrides passed to the constructor

        Returns:
            SteamClient: Configured client
        """
        settings = settings or get_settings()
        kwargs.setdefault("base_url", settings.steam.base_url)
        kwargs.setdefault("timeout", settings.steam.timeout_seconds)
        kwargs.setdefault("user_agent", settings.steam.user_agent)
        return cls(settings.steam.api_key.get_secret_value(), **kwargs)

    @property
    def base_url(self) -> str:
        """Base URL endpoint paths are appended to."""
        return self._base_url

    @property
    def has_api_key(self) -> bool:
        """Whether requests carry a developer API key."""
        return bool(self._api_key)

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if not self._owns_client and self._client is not None:
            return self._client
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                headers={
                    "User-Agent": self._user_agent,
                    "Accept": "application/json",
                },
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client this instance created and release resources."""
        if not self._owns_client:
            return
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "SteamClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SteamClient(base_url={self._base_url!r}, has_api_key={self.has_api_key})"

    def url_for(self, path: str) -> str:
        """Build the full URL of an endpoint path."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def get_request(self, path: str, query: QueryParams) -> Any:
        """
        Send a GET request to a Steam endpoint and return its JSON body.

        The API key is always sent as the first ``key`` parameter, even
        when empty.

        Args:
            path: Endpoint path relative to the base URL
            query: Ordered endpoint-specific query parameters

        Returns:
            Any: Decoded JSON body

        Raises:
            UnauthorizedError: On HTTP 401
            RequestFailedError: On transport failure or unexpected status
        """
        url = self.url_for(path)
        if not self._api_key:
            self._logger.warning("Not using a valid API key. Is this on purpose?", url=url)

        params = [("key", self._api_key), *query]
        self._logger.debug("Making request", url=url, params=dict(query))

        try:
            response = self.client.get(url, params=params)
        except httpx.HTTPError as e:
            self._logger.error("Request failed", url=url, error=str(e))
            raise RequestFailedError(
                TRANSPORT_MESSAGE,
                detail=str(e) or type(e).__name__,
                endpoint=url,
                original_error=e,
            ) from e

        try:
            return classify_response(response, url)
        except UnauthorizedError:
            self._logger.warning("Unauthorized response", url=url)
            raise
        except RequestFailedError as e:
            self._logger.error(
                "Unexpected response",
                url=url,
                status_code=e.status_code,
                detail=e.detail,
            )
            raise

    def parse_response(self, raw_data: Any, envelope: type[Envelope[Any]], endpoint: str) -> Any:
        """
        Validate a decoded body against an envelope and unwrap its payload.

        Args:
            raw_data: Decoded JSON body
            envelope: Envelope model of the endpoint
            endpoint: Endpoint URL, for error context

        Returns:
            Any: The payload model, or an empty one when Steam sent none

        Raises:
            NoDataError: If the body doesn't match the envelope shape
        """
        try:
            wrapper = envelope.model_validate(raw_data)
        except PydanticValidationError as e:
            self._logger.warning(
                "Response validation failed",
                url=endpoint,
                envelope=envelope.__name__,
                errors=e.error_count(),
            )
            raise NoDataError(
                NO_DATA_MESSAGE,
                detail=str(e),
                endpoint=endpoint,
                original_error=e,
            ) from e

        if wrapper.response is None:
            self._logger.info(
                "Envelope carried no payload; returning empty result",
                url=endpoint,
                envelope=envelope.__name__,
            )
        return wrapper.unwrap()

    def fetch(self, path: str, query: QueryParams, envelope: type[Envelope[Any]]) -> Any:
        """Request an endpoint and return its unwrapped payload."""
        raw_data = self.get_request(path, query)
        return self.parse_response(raw_data, envelope, self.url_for(path))

    def get_friends(self, steam_id: str | int) -> list[Friend]:
        """Get all friends of the user with the given Steam ID."""
        return friends.get_friends(self, steam_id)

    def get_library(self, steam_id: str | int) -> Library:
        """Get all games owned by the user with the given Steam ID."""
        return library.get_library(self, steam_id)

    get_owned_games = get_library

    def get_game_news(
        self,
        app_id: str | int,
        news_count: int = news.DEFAULT_NEWS_COUNT,
        max_length: int = news.DEFAULT_MAX_LENGTH,
    ) -> GameNews:
        """Get the latest news for an app. Works without an API key."""
        return news.get_game_news(self, app_id, news_count, max_length)

    def get_player_stats(self, steam_id: str | int, app_id: str | int) -> PlayerStats:
        """Get a player's achievements and stats for one app."""
        return stats.get_player_stats(self, steam_id, app_id)
