"""Display-ready formatting of site reports."""

from __future__ import annotations

from typing import Any

from solarsite.config.settings import ReportConfig, get_config
from solarsite.types import ScoredRow, SiteReport

UNAVAILABLE_DISPLAY = "N/A"

# Units written directly after the number, without a space
_ATTACHED_UNITS = frozenset({"°"})


def _unit_suffix(unit: str) -> str:
    if not unit:
        return ""
    if unit in _ATTACHED_UNITS:
        return unit
    return f" {unit}"


def display_value(row: ScoredRow, decimals: int = 2) -> str:
    """Raw value with unit, e.g. "5.70°" or "12.00 km", or "N/A"."""
    if row.raw_value is None:
        return UNAVAILABLE_DISPLAY
    return f"{row.raw_value:.{decimals}f}{_unit_suffix(row.unit)}"


def format_row(row: ScoredRow, precision: ReportConfig) -> dict[str, Any]:
    """Format one decision-matrix row."""
    raw_value = None
    if row.raw_value is not None:
        raw_value = round(row.raw_value, precision.raw_precision)

    return {
        "key": row.key,
        "name": row.display_name,
        "raw_value": raw_value,
        "display_value": display_value(row, precision.raw_precision),
        "score": round(row.score, precision.score_precision),
        "weight_percent": round(row.weight * 100),
        "weighted_score": round(row.weighted_score, precision.weighted_precision),
    }


def format_report(
    report: SiteReport,
    precision: ReportConfig | None = None,
) -> dict[str, Any]:
    """Create a JSON-ready view of a report for presentation layers.

    Args:
        report: Evaluated site report
        precision: Rounding settings; defaults to the global config

    Returns:
        Dictionary with rows, total score, decision, and suggestions
    """
    if precision is None:
        precision = get_config().report

    return {
        "rows": [format_row(row, precision) for row in report.rows],
        "total_score": round(report.total_score, precision.total_precision),
        "decision": report.decision.value,
        "decision_label": report.decision.label,
        "suggestions": list(report.suggestions),
    }
