"""Weighted decision-matrix aggregation and go/no-go classification."""

import math
from typing import Sequence

from solarsite.types import Decision, ScoredRow
from solarsite.utils.logging import get_logger

logger = get_logger(__name__)

# Rows scoring strictly below this contribute their suggestion
SUGGESTION_THRESHOLD = 5.0

GO_THRESHOLD = 7.0
REVIEW_THRESHOLD = 5.0


class DecisionMatrix:
    """Weighted-sum decision matrix over scored criteria."""

    @staticmethod
    def weighted_sum(rows: Sequence[ScoredRow]) -> float:
        """Sum score x weight over all rows.

        Uses an exactly rounded sum, so the result does not depend on row order.

        Args:
            rows: Scored decision-matrix rows

        Returns:
            Total weighted score
        """
        total = math.fsum(row.weighted_score for row in rows)

        logger.debug(
            "Weighted sum computed",
            num_rows=len(rows),
            total_score=total,
        )

        return total

    @staticmethod
    def collect_suggestions(rows: Sequence[ScoredRow]) -> tuple[str, ...]:
        """Collect improvement suggestions for underperforming rows.

        Args:
            rows: Scored rows in catalog order

        Returns:
            Distinct suggestion texts in row order
        """
        suggestions: list[str] = []
        for row in rows:
            if row.score >= SUGGESTION_THRESHOLD or not row.suggestion:
                continue
            if row.suggestion not in suggestions:
                suggestions.append(row.suggestion)
        return tuple(suggestions)

    @staticmethod
    def classify(total_score: float) -> Decision:
        """Map a total score onto a decision band.

        Lower band bounds are inclusive: 7 is Go, 5 is Review.
        """
        if total_score >= GO_THRESHOLD:
            return Decision.GO
        if total_score >= REVIEW_THRESHOLD:
            return Decision.REVIEW
        return Decision.NO_GO

    @staticmethod
    def aggregate(rows: Sequence[ScoredRow]) -> tuple[float, tuple[str, ...]]:
        """Compute the total score and suggestion list for a set of rows.

        Args:
            rows: Scored rows in catalog order

        Returns:
            Tuple of (total_score, suggestions)
        """
        total_score = DecisionMatrix.weighted_sum(rows)
        suggestions = DecisionMatrix.collect_suggestions(rows)
        return total_score, suggestions
