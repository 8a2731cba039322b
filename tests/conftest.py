"""Pytest configuration and shared fixtures."""

import pytest

from solarsite.analysis.site_scoring import SiteScoringEngine


@pytest.fixture
def best_metrics() -> dict:
    """Metrics where every criterion sits at its best value."""
    return {
        "slope": 5.7,
        "ghi": 5.5,
        "temperature": 25.0,
        "elevation": 800.0,
        "landCover": 40,
        "proximityToLines": 2.0,
        "proximityToRoads": 1.0,
        "waterAvailability": 2.0,
        "soilStability": 100.0,
        "shading": 200.0,
        "dust": 0.1,
        "windSpeed": 20.0,
        "seismicRisk": 0.1,
        "floodRisk": 0.0,
    }


@pytest.fixture
def worst_metrics() -> dict:
    """Metrics where every criterion sits at its worst value."""
    return {
        "slope": 15.0,
        "ghi": 4.5,
        "temperature": 40.0,
        "elevation": 1600.0,
        "landCover": 10,
        "proximityToLines": 20.0,
        "proximityToRoads": 10.0,
        "waterAvailability": 15.0,
        "soilStability": 20.0,
        "shading": 100.0,
        "dust": 0.5,
        "windSpeed": 90.0,
        "seismicRisk": 0.4,
        "floodRisk": 5.0,
    }


@pytest.fixture
def engine() -> SiteScoringEngine:
    """Provide scoring engine with the default catalog."""
    return SiteScoringEngine()


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Isolate tests from user config files and reset the config singleton."""
    from solarsite.config import reset_config

    monkeypatch.delenv("SOLARSITE_CONFIG_PATH", raising=False)
    reset_config()
    yield
    reset_config()
