"""Measurement unit attached to a data value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from models.errors import ValidationError


@dataclass(slots=True)
class Unit:
    """A unit such as ``Celsius`` (symbol ``C``, type ``derivedSI``).

    ``type`` is kept as a free-form string; EEML lists ``basicSI``,
    ``derivedSI`` and ``contextDependentUnits`` among others.
    """

    name: str
    symbol: Optional[str] = None
    type: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Unit name is required")
