"""Pydantic schemas for the JSON form of an EEML environment."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from models.data import Data
from models.environment import Environment, EnvironmentStatus
from models.location import Location, LocationDomain
from models.unit import Unit


class UnitDocument(BaseModel):
    """Measurement unit of a data item."""

    name: str = Field(..., min_length=1)
    symbol: Optional[str] = None
    type: Optional[str] = None

    def to_unit(self) -> Unit:
        return Unit(self.name, symbol=self.symbol, type=self.type)

    @classmethod
    def from_unit(cls, unit: Unit) -> "UnitDocument":
        return cls(name=unit.name, symbol=unit.symbol, type=unit.type)


class LocationDocument(BaseModel):
    """Placement of the environment."""

    domain: LocationDomain
    exposure: Optional[str] = None
    disposition: Optional[str] = None
    name: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    ele: Optional[float] = None

    def to_location(self) -> Location:
        return Location(
            self.domain,
            exposure=self.exposure,
            disposition=self.disposition,
            name=self.name,
            lat=self.lat,
            lon=self.lon,
            ele=self.ele,
        )

    @classmethod
    def from_location(cls, location: Location) -> "LocationDocument":
        return cls(
            domain=location.domain,
            exposure=location.exposure,
            disposition=location.disposition,
            name=location.name,
            lat=location.lat,
            lon=location.lon,
            ele=location.ele,
        )


class DataDocument(BaseModel):
    """A single reading; ``id`` falls back to the item position when omitted."""

    value: float
    id: Optional[Union[int, str]] = None
    tags: List[str] = Field(default_factory=list)
    max_value: Optional[float] = None
    min_value: Optional[float] = None
    unit: Optional[UnitDocument] = None

    def to_data(self) -> Data:
        data = Data(self.value, id=self.id)
        data.tags.extend(self.tags)
        data.max_value = self.max_value
        data.min_value = self.min_value
        if self.unit is not None:
            data.unit = self.unit.to_unit()
        return data

    @classmethod
    def from_data(cls, data: Data) -> "DataDocument":
        return cls(
            value=data.value,
            id=data.id,
            tags=list(data.tags),
            max_value=data.max_value,
            min_value=data.min_value,
            unit=UnitDocument.from_unit(data.unit) if data.unit is not None else None,
        )


class EnvironmentDocument(BaseModel):
    """Full environment with its readings."""

    title: Optional[str] = None
    feed: Optional[str] = None
    status: Optional[EnvironmentStatus] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    location: Optional[LocationDocument] = None
    updated_at: Optional[datetime] = None
    creator: Optional[str] = None
    id: Optional[Union[int, str]] = None
    data: List[DataDocument] = Field(default_factory=list)

    def to_environment(self) -> Environment:
        environment = Environment()
        environment.title = self.title
        environment.feed = self.feed
        environment.status = self.status
        environment.description = self.description
        environment.icon = self.icon
        environment.website = self.website
        environment.email = self.email
        if self.location is not None:
            environment.location = self.location.to_location()
        environment.updated_at = self.updated_at
        environment.creator = self.creator
        environment.id = self.id
        for item in self.data:
            environment.append(item.to_data())
        return environment

    @classmethod
    def from_environment(cls, environment: Environment) -> "EnvironmentDocument":
        location = environment.location
        return cls(
            title=environment.title,
            feed=environment.feed,
            status=environment.status,
            description=environment.description,
            icon=environment.icon,
            website=environment.website,
            email=environment.email,
            location=LocationDocument.from_location(location) if location is not None else None,
            updated_at=environment.updated_at,
            creator=environment.creator,
            id=environment.id,
            data=[DataDocument.from_data(data) for data in environment],
        )
