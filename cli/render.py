from __future__ import annotations

from typing import Any, Iterable

import typer

from models.environment import Environment
from services.eeml_codec import format_number, format_timestamp
from services.summary import EnvironmentSummary


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        if value is not None:
            typer.echo(f"{key}: {value}")


def render_environment(environment: Environment, summary: EnvironmentSummary) -> None:
    echo_heading("Environment")
    updated_at = environment.updated_at
    echo_key_values(
        [
            ("id", environment.id),
            ("title", environment.title),
            ("status", environment.status.value if environment.status else None),
            ("feed", environment.feed),
            ("description", environment.description),
            ("website", environment.website),
            ("email", environment.email),
            ("creator", environment.creator),
            ("updated", format_timestamp(updated_at) if updated_at else None),
        ]
    )

    location = environment.location
    if location is not None:
        typer.echo()
        echo_heading("Location")
        echo_key_values(
            [
                ("domain", location.domain.value),
                ("exposure", location.exposure),
                ("disposition", location.disposition),
                ("name", location.name),
                ("lat", location.lat),
                ("lon", location.lon),
                ("ele", location.ele),
            ]
        )

    typer.echo()
    echo_heading("Summary")
    echo_key_values(
        [
            ("data_count", summary.data_count),
            ("min_value", summary.min_value),
            ("max_value", summary.max_value),
            ("mean_value", summary.mean_value),
        ]
    )
    if summary.units:
        typer.echo(f"units: {', '.join(summary.units)}")
    if summary.per_tag_count:
        typer.echo("per_tag_count:")
        for tag, count in summary.per_tag_count.items():
            typer.echo(f"  - {tag}: {count}")

    typer.echo()
    echo_heading("Data")
    if not summary.data_count:
        typer.echo("No data items.")
    for index, data in enumerate(environment):
        item_id = data.id if data.id is not None else index
        line = f"  - [{item_id}] {format_number(data.value)}"
        if data.unit is not None:
            line += f" {data.unit.symbol or data.unit.name}"
        if data.tags:
            line += f" ({', '.join(data.tags)})"
        typer.echo(line)
