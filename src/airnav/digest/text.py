"""Plain text formatting for wind components and vectors."""

from __future__ import annotations

from airnav.models import Headwind, PolarVector, RightCross, RunwayWind, WindComponents


def format_components(wc: WindComponents) -> str:
    """One-line summary, e.g. 'Headwind 17.32 kt, left crosswind 10.00 kt'."""
    base = "Headwind" if isinstance(wc.base, Headwind) else "Tailwind"
    side = "right" if isinstance(wc.cross, RightCross) else "left"
    return f"{base} {wc.base.magnitude:.2f} kt, {side} crosswind {wc.cross.magnitude:.2f} kt"


def format_vector(v: PolarVector) -> str:
    """Direction (mod 360, three digits) and speed, e.g. '086° / 135.83 kt'."""
    return f"{v.direction % 360:03d}° / {v.speed:.2f} kt"


def format_runway_table(rows: list[RunwayWind], preferred: RunwayWind | None = None) -> str:
    """One line per runway; the preferred runway is marked with '*'."""
    lines = []
    for row in rows:
        marker = "*" if preferred is not None and row.runway == preferred.runway else " "
        lines.append(
            f"{marker} RWY {row.runway.name:<4} ({row.runway.heading_deg:03d}°)  "
            f"{format_components(row.components)}"
        )
    return "\n".join(lines)
