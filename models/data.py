"""A single sensor reading inside an environment."""

from __future__ import annotations

from typing import List, Optional, Union

from models.unit import Unit


class Data:
    """One reading with its optional bounds, tags and unit.

    ``id`` stays ``None`` unless given explicitly; the serializer falls back
    to the item's position when writing the document.
    """

    def __init__(self, value: float, id: Optional[Union[int, str]] = None) -> None:
        self.value = value
        self.id = id
        self.tags: List[str] = []
        self.max_value: Optional[float] = None
        self.min_value: Optional[float] = None
        self._unit: Optional[Unit] = None

    @property
    def unit(self) -> Optional[Unit]:
        return self._unit

    @unit.setter
    def unit(self, unit: Optional[Unit]) -> None:
        if unit is not None and not isinstance(unit, Unit):
            raise TypeError("unit must be a Unit")
        self._unit = unit

    def __repr__(self) -> str:
        return f"Data(value={self.value!r}, id={self.id!r}, tags={self.tags!r})"
