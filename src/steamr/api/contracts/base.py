"""
Shared building blocks for Steam Web API contracts.

Steam wraps every payload in an outer object keyed by an
endpoint-specific name, e.g. ``{"playerstats": {...}}``. An
``Envelope`` subclass declares that key as the alias of its
``response`` field and the payload model to fall back on.
"""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class SteamModel(BaseModel):
    """Base for immutable records populated from Steam JSON."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Envelope(BaseModel, Generic[PayloadT]):
    """
    Outer wrapper of a Steam response.

    Subclasses redeclare ``response`` with the endpoint's wrapper key as
    alias and set ``payload_type``. An absent or null payload unwraps
    to an empty ``payload_type()`` instance.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    payload_type: ClassVar[type[BaseModel]]

    response: Any = None

    def unwrap(self) -> PayloadT:
        """Return the inner payload, or an empty one when Steam sent none."""
        if self.response is None:
            return self.payload_type()  # type: ignore[return-value]
        return self.response  # type: ignore[no-any-return]
