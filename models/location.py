"""Physical or virtual placement of an environment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from models.errors import ValidationError


class LocationDomain(str, Enum):
    """Allowed values for a location's ``domain`` attribute."""

    physical = "physical"
    virtual = "virtual"


@dataclass(slots=True)
class Location:
    domain: LocationDomain
    exposure: Optional[str] = None
    disposition: Optional[str] = None
    name: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    ele: Optional[float] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "domain":
            try:
                value = LocationDomain(value)
            except ValueError as exc:
                raise ValidationError("Domain must be 'physical' or 'virtual'") from exc
        object.__setattr__(self, name, value)
