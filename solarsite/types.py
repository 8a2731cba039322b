"""Type definitions and data models for SolarSite."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class ScoringPolicy(str, Enum):
    """How a criterion's raw value is mapped onto the suitability scale."""

    LINEAR_THRESHOLD = "linear_threshold"
    ELEVATION_RANGE = "elevation_range"
    LAND_COVER_CATEGORY = "land_cover_category"
    MANUAL_OWNERSHIP = "manual_ownership"


class Decision(str, Enum):
    """Go/no-go outcome derived from the total weighted score."""

    GO = "Go"
    REVIEW = "Review"
    NO_GO = "NoGo"

    @property
    def label(self) -> str:
        """Short label shown to end users."""
        return _DECISION_LABELS[self]


_DECISION_LABELS = {
    Decision.GO: "Yes",
    Decision.REVIEW: "Review",
    Decision.NO_GO: "No",
}


class Thresholds(BaseModel):
    """Raw values mapping to the best (10) and worst (1) scores."""

    model_config = ConfigDict(frozen=True)

    best: float = Field(..., description="Raw value scoring 10")
    worst: float = Field(..., description="Raw value scoring 1")

    @model_validator(mode="after")
    def endpoints_differ(self) -> "Thresholds":
        """Ensure the interpolation interval is not empty."""
        if self.best == self.worst:
            raise ValueError("best and worst thresholds must differ")
        return self


class CriterionSpec(BaseModel):
    """Single scored criterion in the catalog."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Raw metric field name")
    display_name: str
    weight: float = Field(..., ge=0, description="Relative importance")
    unit: str = ""
    policy: ScoringPolicy = ScoringPolicy.LINEAR_THRESHOLD
    thresholds: Optional[Thresholds] = None
    higher_is_better: bool = True
    suggestion: str = ""

    @model_validator(mode="after")
    def thresholds_match_policy(self) -> "CriterionSpec":
        """Linear criteria need oriented thresholds; other policies take none."""
        if self.policy is not ScoringPolicy.LINEAR_THRESHOLD:
            if self.thresholds is not None:
                raise ValueError(
                    f"{self.key}: thresholds only apply to linear_threshold criteria"
                )
            return self

        if self.thresholds is None:
            raise ValueError(f"{self.key}: linear_threshold criteria need thresholds")

        best, worst = self.thresholds.best, self.thresholds.worst
        if self.higher_is_better and best < worst:
            raise ValueError(
                f"{self.key}: best must exceed worst when higher values are better"
            )
        if not self.higher_is_better and best > worst:
            raise ValueError(
                f"{self.key}: best must be below worst when lower values are better"
            )
        return self


class ScoredRow(BaseModel):
    """One row of the decision matrix."""

    model_config = ConfigDict(frozen=True)

    key: str
    display_name: str
    unit: str = ""
    raw_value: Optional[float] = Field(None, description="None when unavailable")
    score: float = Field(..., ge=0, le=10)
    weight: float = Field(..., ge=0)
    suggestion: str = ""

    @computed_field
    @property
    def weighted_score(self) -> float:
        """Contribution of this row to the total score."""
        return self.score * self.weight

    @property
    def evaluated(self) -> bool:
        """True if a raw value was available for scoring."""
        return self.raw_value is not None


class SiteReport(BaseModel):
    """Scored decision matrix with its summary."""

    model_config = ConfigDict(frozen=True)

    rows: tuple[ScoredRow, ...]
    total_score: float
    decision: Decision
    suggestions: tuple[str, ...]

    def get_row(self, key: str) -> Optional[ScoredRow]:
        """Return the row for a criterion key, or None."""
        for row in self.rows:
            if row.key == key:
                return row
        return None

    @property
    def unavailable_keys(self) -> tuple[str, ...]:
        """Keys of criteria that could not be evaluated."""
        return tuple(row.key for row in self.rows if not row.evaluated)
