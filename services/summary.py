"""Descriptive statistics over the readings of an environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from models.environment import Environment


@dataclass
class EnvironmentSummary:
    """Computed statistics for the data items of one environment."""

    data_count: int = 0
    min_value: float | None = None
    max_value: float | None = None
    mean_value: float | None = None
    per_tag_count: Dict[str, int] = field(default_factory=dict)
    units: List[str] = field(default_factory=list)


class Summarizer:
    """Pure summary component that can be unit tested in isolation."""

    def summarize(self, environment: Environment) -> EnvironmentSummary:
        summary = EnvironmentSummary()
        total = 0.0

        for data in environment:
            summary.data_count += 1
            value = float(data.value)
            total += value

            if summary.min_value is None or value < summary.min_value:
                summary.min_value = value
            if summary.max_value is None or value > summary.max_value:
                summary.max_value = value

            for tag in data.tags:
                summary.per_tag_count[tag] = summary.per_tag_count.get(tag, 0) + 1

            if data.unit is not None and data.unit.name not in summary.units:
                summary.units.append(data.unit.name)

        if summary.data_count:
            summary.mean_value = total / summary.data_count

        return summary
