"""Shared test fixtures."""

from __future__ import annotations

import pytest

from airnav.models import Runway

RUNWAYS_YAML = """\
airfields:
  LFPB:
    name: Paris Le Bourget
    runways:
      - {name: "03", heading_deg: 30}
      - {name: "21", heading_deg: 210}
      - {name: "07", heading_deg: 70}
      - {name: "25", heading_deg: 250}
  EGTK:
    name: Oxford Kidlington
    runways:
      - {name: "01", heading_deg: 10}
      - {name: "19", heading_deg: 190}
"""


@pytest.fixture
def config_dir(tmp_path):
    """Config directory holding a small runways.yaml."""
    d = tmp_path / "config"
    d.mkdir()
    (d / "runways.yaml").write_text(RUNWAYS_YAML)
    return d


@pytest.fixture
def lfpb_runways():
    return [
        Runway(name="03", heading_deg=30),
        Runway(name="21", heading_deg=210),
        Runway(name="07", heading_deg=70),
        Runway(name="25", heading_deg=250),
    ]
