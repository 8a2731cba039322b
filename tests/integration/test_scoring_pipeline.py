"""End-to-end tests of the scoring pipeline."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from solarsite.analysis.report import format_report
from solarsite.analysis.site_scoring import NO_CONCERNS_MESSAGE, SiteScoringEngine
from solarsite.config.criteria_config import DEFAULT_CATALOG
from solarsite.types import Decision, ScoringPolicy


def test_best_site(engine, best_metrics):
    """Every criterion at its best gives a perfect Go with no concerns."""
    report = engine.evaluate(best_metrics, land_ownership=1)

    assert all(row.score == pytest.approx(10.0) for row in report.rows)
    assert report.total_score == pytest.approx(10.0)
    assert report.decision is Decision.GO
    assert report.suggestions == (NO_CONCERNS_MESSAGE,)
    assert format_report(report)["total_score"] == 10.0


def test_worst_site(engine, worst_metrics):
    """Every criterion at its worst gives NoGo with all suggestions."""
    report = engine.evaluate(worst_metrics, land_ownership=2)

    assert all(row.score <= 5.0 for row in report.rows)
    assert all(
        row.score <= 3.0 for row in report.rows
        if row.key != "landOwnership"
    )
    # 1 * 0.81 + 2 * 0.03 + 3 * 0.10 + 5 * 0.06
    assert report.total_score == pytest.approx(1.47)
    assert report.decision is Decision.NO_GO

    expected = tuple(
        c.suggestion for c in DEFAULT_CATALOG.criteria
        if c.policy is not ScoringPolicy.MANUAL_OWNERSHIP
    )
    assert report.suggestions == expected
    assert len(report.suggestions) == 14


def test_all_unavailable(engine, best_metrics):
    """A complete upstream failure degrades to a low score, not an error."""
    metrics = {key: None for key in best_metrics}
    report = engine.evaluate(metrics, land_ownership=1)

    assert report.total_score == pytest.approx(0.6)
    assert report.decision is Decision.NO_GO
    assert len(report.unavailable_keys) == 14
    assert len(report.rows) == 15
    assert len(report.suggestions) == 14


def test_typical_site(engine):
    """A mixed real-world site scores in the Review band."""
    metrics = {
        "slope": 8.2,
        "ghi": 5.1,
        "temperature": 31.0,
        "elevation": 420.0,
        "landCover": 20,
        "proximityToLines": 12.5,
        "proximityToRoads": 3.2,
        "waterAvailability": None,
        "soilStability": 65.0,
        "shading": 182.0,
        "dust": 0.22,
        "windSpeed": 28.0,
        "seismicRisk": 2,
        "floodRisk": 0.4,
    }
    report = engine.evaluate(metrics, land_ownership=2)

    assert 5.0 <= report.total_score < 7.0
    assert report.decision is Decision.REVIEW
    assert report.get_row("seismicRisk").score == 1.0
    assert report.unavailable_keys == ("waterAvailability",)
    assert DEFAULT_CATALOG.get("landCover").suggestion in report.suggestions
    assert DEFAULT_CATALOG.get("landOwnership").suggestion not in report.suggestions


def test_concurrent_requests(best_metrics, worst_metrics):
    """A shared engine serves parallel requests independently."""
    engine = SiteScoringEngine()
    jobs = [(best_metrics, 1), (worst_metrics, 2)] * 25

    with ThreadPoolExecutor(max_workers=8) as pool:
        reports = list(pool.map(lambda job: engine.evaluate(*job), jobs))

    for (metrics, _), report in zip(jobs, reports):
        expected = Decision.GO if metrics is best_metrics else Decision.NO_GO
        assert report.decision is expected
        assert len(report.rows) == 15


def test_inputs_not_mutated(engine, best_metrics):
    """Evaluation leaves the caller's mapping untouched."""
    snapshot = dict(best_metrics)
    engine.evaluate(best_metrics, land_ownership=1)
    assert best_metrics == snapshot
