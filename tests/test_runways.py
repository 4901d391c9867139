"""Tests for runway wind tables and preferred runway selection."""

import pytest

from airnav.analysis.runways import preferred_runway, runway_winds
from airnav.models import Headwind, LeftCross, PolarVector, RightCross, Runway, Tailwind


def test_runway_winds_preserves_order(lfpb_runways):
    rows = runway_winds(PolarVector(direction=60, speed=25.0), lfpb_runways)
    assert [r.runway.name for r in rows] == ["03", "21", "07", "25"]


def test_runway_winds_components(lfpb_runways):
    """Each runway gets its own decomposition."""
    rows = runway_winds(PolarVector(direction=60, speed=25.0), lfpb_runways)
    by_name = {r.runway.name: r.components for r in rows}

    assert by_name["03"].base == Headwind(magnitude=21.65)
    assert by_name["03"].cross == RightCross(magnitude=12.5)
    assert by_name["21"].base == Tailwind(magnitude=21.65)
    assert by_name["21"].cross == LeftCross(magnitude=12.5)
    assert by_name["07"].base == Headwind(magnitude=24.62)
    assert by_name["07"].cross == LeftCross(magnitude=4.34)
    assert by_name["25"].base == Tailwind(magnitude=24.62)
    assert by_name["25"].cross == RightCross(magnitude=4.34)


def test_preferred_runway_most_headwind(lfpb_runways):
    best = preferred_runway(PolarVector(direction=60, speed=25.0), lfpb_runways)
    assert best.runway.name == "07"


def test_preferred_runway_tie_keeps_catalog_order():
    """Symmetric crosswinds tie; the first runway wins."""
    runways = [Runway(name="06", heading_deg=60), Runway(name="12", heading_deg=120)]
    best = preferred_runway(PolarVector(direction=90, speed=20.0), runways)
    assert best.runway.name == "06"


def test_preferred_runway_empty():
    with pytest.raises(ValueError):
        preferred_runway(PolarVector(direction=90, speed=20.0), [])


def test_runway_winds_empty():
    assert runway_winds(PolarVector(direction=90, speed=20.0), []) == []
