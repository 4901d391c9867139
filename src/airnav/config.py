"""Runway catalog loading from YAML."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from airnav.models import Runway

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"


def _resolve_config_dir(config_dir: Path | None) -> Path:
    """Explicit argument, then AIRNAV_CONFIG_DIR, then the bundled config/."""
    if config_dir is not None:
        return config_dir
    env_dir = os.environ.get("AIRNAV_CONFIG_DIR")
    return Path(env_dir) if env_dir else CONFIG_DIR


def _load_airfields(config_dir: Path | None) -> dict:
    runways_file = _resolve_config_dir(config_dir) / "runways.yaml"
    logger.debug("Loading runway catalog from %s", runways_file)

    with open(runways_file) as f:
        data = yaml.safe_load(f) or {}

    airfields = data.get("airfields", {}) or {}
    return {str(code).upper(): entry or {} for code, entry in airfields.items()}


def load_airfield_runways(icao: str, config_dir: Path | None = None) -> list[Runway]:
    """Load the runways of a named airfield from runways.yaml.

    Args:
        icao: Airfield key in runways.yaml (case-insensitive).
        config_dir: Override for config directory (testing).
    """
    airfields = _load_airfields(config_dir)
    key = icao.upper()
    if key not in airfields:
        available = ", ".join(airfields.keys())
        raise KeyError(f"Airfield '{icao}' not found. Available: {available}")

    return [Runway.model_validate(r) for r in airfields[key].get("runways") or []]


def list_airfields(config_dir: Path | None = None) -> list[str]:
    """List configured airfield codes."""
    return list(_load_airfields(config_dir).keys())
