"""Site scoring: normalize raw metrics, aggregate, classify, and assemble a report."""

from typing import Any, Iterable, Mapping, Optional

from solarsite.config.criteria_config import DEFAULT_CATALOG, CriteriaCatalog
from solarsite.processing.mcdm import DecisionMatrix
from solarsite.processing.normalizer import is_unavailable, score_criterion
from solarsite.types import Decision, ScoredRow, ScoringPolicy, SiteReport
from solarsite.utils.logging import get_logger
from solarsite.utils.validators import validate_land_ownership, validate_raw_metrics

logger = get_logger(__name__)

NO_CONCERNS_MESSAGE = (
    "Excellent site! No major concerns identified based on the parameters."
)


def assemble_report(
    rows: Iterable[ScoredRow],
    total_score: float,
    decision: Decision,
    suggestions: Iterable[str],
) -> SiteReport:
    """Compose the final report.

    An empty suggestion list is replaced by the single no-concerns message.
    """
    suggestions = tuple(suggestions) or (NO_CONCERNS_MESSAGE,)
    return SiteReport(
        rows=tuple(rows),
        total_score=total_score,
        decision=decision,
        suggestions=suggestions,
    )


class SiteScoringEngine:
    """Scores a site's raw metrics against a criteria catalog.

    The engine holds no per-request state; one instance can serve
    concurrent callers.
    """

    def __init__(self, catalog: CriteriaCatalog = DEFAULT_CATALOG):
        """Initialize scoring engine.

        Args:
            catalog: Criteria to score against
        """
        self.catalog = catalog

    def score_rows(
        self,
        metrics: Mapping[str, Optional[float]],
        land_ownership: int,
    ) -> tuple[ScoredRow, ...]:
        """Score every catalog criterion, in catalog order.

        Args:
            metrics: Validated raw metrics
            land_ownership: Manual ownership code

        Returns:
            One ScoredRow per criterion
        """
        rows = []

        for criterion in self.catalog.criteria:
            if criterion.policy is ScoringPolicy.MANUAL_OWNERSHIP:
                raw_value = land_ownership
            else:
                raw_value = metrics[criterion.key]

            if is_unavailable(raw_value):
                raw_value = None
                logger.warning(
                    "Metric unavailable, scoring as 0",
                    criterion=criterion.key,
                )
            else:
                raw_value = float(raw_value)

            rows.append(ScoredRow(
                key=criterion.key,
                display_name=criterion.display_name,
                unit=criterion.unit,
                raw_value=raw_value,
                score=score_criterion(criterion, raw_value),
                weight=criterion.weight,
                suggestion=criterion.suggestion,
            ))

        return tuple(rows)

    def evaluate(
        self,
        metrics: Mapping[str, Any],
        land_ownership: int,
    ) -> SiteReport:
        """Evaluate a site and produce its decision report.

        Args:
            metrics: Raw metric key -> number, or None when unavailable
            land_ownership: Manual ownership code (1 = government, other = private)

        Returns:
            SiteReport with rows, total score, decision, and suggestions

        Raises:
            InvalidInputError: If metrics or the ownership code are malformed
        """
        validate_raw_metrics(metrics, self.catalog.automatic_keys())
        validate_land_ownership(land_ownership)

        rows = self.score_rows(metrics, land_ownership)
        total_score, suggestions = DecisionMatrix.aggregate(rows)
        decision = DecisionMatrix.classify(total_score)

        logger.info(
            "Site evaluated",
            total_score=round(total_score, 2),
            decision=decision.value,
            suggestions=len(suggestions),
            unavailable=sum(1 for row in rows if not row.evaluated),
        )

        return assemble_report(rows, total_score, decision, suggestions)


def evaluate_site(
    metrics: Mapping[str, Any],
    land_ownership: int,
    catalog: CriteriaCatalog = DEFAULT_CATALOG,
) -> SiteReport:
    """Evaluate a site with a one-off engine.

    Args:
        metrics: Raw metric key -> number, or None when unavailable
        land_ownership: Manual ownership code
        catalog: Criteria to score against

    Returns:
        SiteReport
    """
    return SiteScoringEngine(catalog).evaluate(metrics, land_ownership)
