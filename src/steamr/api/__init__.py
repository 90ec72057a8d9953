"""
Typed client for the Steam Web API.
"""

from steamr.api.client import SteamClient, classify_response
from steamr.api.errors import (
    NoDataError,
    RequestFailedError,
    SteamError,
    SteamErrorKind,
    UnauthorizedError,
)

__all__ = [
    "NoDataError",
    "RequestFailedError",
    "SteamClient",
    "SteamError",
    "SteamErrorKind",
    "UnauthorizedError",
    "classify_response",
]
