"""Root aggregate of an EEML document."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Iterator, List, Optional, Union

from models.data import Data
from models.errors import ValidationError
from models.location import Location


class EnvironmentStatus(str, Enum):
    """Feed lifecycle states understood by EEML."""

    frozen = "frozen"
    live = "live"


class Environment:
    """An ordered collection of readings plus feed-level metadata.

    Items keep insertion order, which is also their order in the document.
    An environment may be empty while it is being assembled; only
    serialization requires at least one data item.
    """

    def __init__(self) -> None:
        self._data: List[Data] = []
        self.title: Optional[str] = None
        self.feed: Optional[str] = None
        self.description: Optional[str] = None
        self.icon: Optional[str] = None
        self.website: Optional[str] = None
        self.email: Optional[str] = None
        self.creator: Optional[str] = None
        self.id: Optional[Union[str, int]] = None
        self._status: Optional[EnvironmentStatus] = None
        self._location: Optional[Location] = None
        self._updated_at: Optional[datetime] = None

    def append(self, data: Data) -> None:
        if not isinstance(data, Data):
            raise TypeError("Only Data objects can be added to Environment objects")
        self._data.append(data)

    def size(self) -> int:
        return len(self._data)

    def at(self, index: int) -> Data:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Data:
        return self._data[index]

    def __iter__(self) -> Iterator[Data]:
        return iter(self._data)

    @property
    def status(self) -> Optional[EnvironmentStatus]:
        return self._status

    @status.setter
    def status(self, status: Optional[Union[EnvironmentStatus, str]]) -> None:
        if status is None:
            self._status = None
            return
        try:
            self._status = EnvironmentStatus(status)
        except ValueError as exc:
            raise ValidationError("Status must be 'frozen' or 'live'") from exc

    @property
    def location(self) -> Optional[Location]:
        return self._location

    @location.setter
    def location(self, location: Optional[Location]) -> None:
        if location is not None and not isinstance(location, Location):
            raise TypeError("location must be a Location")
        self._location = location

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @updated_at.setter
    def updated_at(self, updated_at: Optional[datetime]) -> None:
        if updated_at is not None and not isinstance(updated_at, datetime):
            raise TypeError("updated_at must be a datetime")
        self._updated_at = updated_at

    def touch(self) -> None:
        """Stamp the environment with the current UTC time."""
        self._updated_at = datetime.now(timezone.utc)

    def to_eeml(self, version: Optional[Union[str, int]] = None) -> str:
        """Render this environment as an EEML document."""
        from services.eeml_codec import serialize

        return serialize(self, version=version)

    @classmethod
    def from_eeml(cls, text: Union[str, bytes]) -> "Environment":
        """Build a new environment from EEML document text."""
        from services.eeml_codec import parse

        return parse(text)

    def __repr__(self) -> str:
        return f"Environment(title={self.title!r}, id={self.id!r}, size={len(self._data)})"
