"""Configuration modules for SolarSite."""

from solarsite.config.criteria_config import DEFAULT_CATALOG, CriteriaCatalog
from solarsite.config.settings import (
    Config,
    LoggingConfig,
    ReportConfig,
    get_config,
    reset_config,
)

__all__ = [
    "DEFAULT_CATALOG",
    "CriteriaCatalog",
    "Config",
    "LoggingConfig",
    "ReportConfig",
    "get_config",
    "reset_config",
]
