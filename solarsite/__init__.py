"""SolarSite - solar-farm site suitability scoring."""

__version__ = "0.1.0"
__author__ = "SolarSite Development Team"
__description__ = "Weighted decision-matrix scoring for solar-farm site selection"

from solarsite.analysis.site_scoring import SiteScoringEngine, evaluate_site
from solarsite.config import DEFAULT_CATALOG, get_config
from solarsite.types import (
    CriterionSpec,
    Decision,
    ScoredRow,
    ScoringPolicy,
    SiteReport,
)
from solarsite.utils.logging import configure_logging, get_logger

__all__ = [
    "SiteScoringEngine",
    "evaluate_site",
    "DEFAULT_CATALOG",
    "get_config",
    "CriterionSpec",
    "Decision",
    "ScoredRow",
    "ScoringPolicy",
    "SiteReport",
    "configure_logging",
    "get_logger",
]
