"""Runway wind tables and preferred-runway selection."""

from __future__ import annotations

from airnav.analysis.wind import decompose
from airnav.models import PolarVector, Runway, RunwayWind


def runway_winds(wind: PolarVector, runways: list[Runway]) -> list[RunwayWind]:
    """Decompose a wind against every runway, in catalog order."""
    return [
        RunwayWind(runway=rwy, components=decompose(wind, rwy.heading_deg))
        for rwy in runways
    ]


def preferred_runway(wind: PolarVector, runways: list[Runway]) -> RunwayWind:
    """Pick the runway with the most headwind.

    Ties go to the smaller crosswind, then to the earlier catalog entry.
    """
    if not runways:
        raise ValueError("No runways to choose from")

    rows = runway_winds(wind, runways)
    best_idx = max(
        range(len(rows)),
        key=lambda i: (
            rows[i].components.headwind_kt,
            -abs(rows[i].components.crosswind_kt),
            -i,
        ),
    )
    return rows[best_idx]
