"""Criteria catalog for solar-farm site scoring."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from solarsite.exceptions import ConfigurationError
from solarsite.types import CriterionSpec, ScoringPolicy, Thresholds


class CriteriaCatalog(BaseModel):
    """Ordered, read-only set of scored criteria."""

    model_config = ConfigDict(frozen=True)

    criteria: tuple[CriterionSpec, ...]

    @model_validator(mode="after")
    def keys_unique(self) -> "CriteriaCatalog":
        """Ensure no two criteria share a key."""
        keys = [c.key for c in self.criteria]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"Duplicate criterion keys: {duplicates}")
        return self

    def __len__(self) -> int:
        return len(self.criteria)

    def get(self, key: str) -> Optional[CriterionSpec]:
        """Get criterion by key.

        Args:
            key: Criterion identifier

        Returns:
            CriterionSpec or None if not in the catalog
        """
        for criterion in self.criteria:
            if criterion.key == key:
                return criterion
        return None

    def keys(self) -> list[str]:
        """All criterion keys in catalog order."""
        return [c.key for c in self.criteria]

    def automatic_keys(self) -> list[str]:
        """Keys whose raw values come from the data acquisition pipeline."""
        return [
            c.key for c in self.criteria
            if c.policy is not ScoringPolicy.MANUAL_OWNERSHIP
        ]

    def total_weight(self) -> float:
        """Sum of all criterion weights."""
        return sum(c.weight for c in self.criteria)

    def validate_weights(self) -> None:
        """Ensure weights sum to 1.0.

        Raises:
            ConfigurationError: If the total is outside [0.99, 1.01]
        """
        total = self.total_weight()
        if not 0.99 <= total <= 1.01:
            raise ConfigurationError(
                "Criterion weights must sum to 1.0",
                details={"total": round(total, 6)},
            )


# Default configuration
DEFAULT_CATALOG = CriteriaCatalog(
    criteria=(
        CriterionSpec(
            key="slope",
            display_name="Slope",
            weight=0.20,
            unit="°",
            thresholds=Thresholds(best=5.7, worst=15),
            higher_is_better=False,
            suggestion=(
                "Look for flatter terrain. High slopes increase construction "
                "costs and complexity."
            ),
        ),
        CriterionSpec(
            key="ghi",
            display_name="Sunlight (GHI)",
            weight=0.15,
            unit="kWh/m²/day",
            thresholds=Thresholds(best=5.5, worst=4.5),
            higher_is_better=True,
            suggestion=(
                "Site has lower than ideal solar irradiance. Consider areas with "
                "higher GHI for better energy yield."
            ),
        ),
        CriterionSpec(
            key="temperature",
            display_name="Avg. Temperature",
            weight=0.07,
            unit="°C",
            thresholds=Thresholds(best=25, worst=40),
            higher_is_better=False,
            suggestion=(
                "High average temperatures can reduce panel efficiency. Cooler "
                "sites are preferable."
            ),
        ),
        CriterionSpec(
            key="elevation",
            display_name="Elevation",
            weight=0.03,
            unit="m",
            policy=ScoringPolicy.ELEVATION_RANGE,
            suggestion=(
                "Site is outside the optimal elevation range (50-1500m), which "
                "can affect logistics and grid connection."
            ),
        ),
        CriterionSpec(
            key="landCover",
            display_name="Land Cover",
            weight=0.10,
            policy=ScoringPolicy.LAND_COVER_CATEGORY,
            suggestion=(
                "Current land cover (e.g., forest, built-up area) may require "
                "significant clearing or preparation."
            ),
        ),
        CriterionSpec(
            key="proximityToLines",
            display_name="Proximity to Grid",
            weight=0.10,
            unit="km",
            thresholds=Thresholds(best=2, worst=20),
            higher_is_better=False,
            suggestion=(
                "Site is far from existing transmission lines, which will "
                "significantly increase grid connection costs."
            ),
        ),
        CriterionSpec(
            key="proximityToRoads",
            display_name="Proximity to Roads",
            weight=0.05,
            unit="km",
            thresholds=Thresholds(best=1, worst=10),
            higher_is_better=False,
            suggestion=(
                "Poor road access will complicate logistics, transport, and "
                "construction."
            ),
        ),
        CriterionSpec(
            key="waterAvailability",
            display_name="Water Availability",
            weight=0.05,
            unit="km",
            thresholds=Thresholds(best=2, worst=15),
            higher_is_better=False,
            suggestion=(
                "Site is far from a water source, which is needed for panel "
                "cleaning and construction."
            ),
        ),
        CriterionSpec(
            key="soilStability",
            display_name="Soil Stability (Depth)",
            weight=0.05,
            unit="cm",
            thresholds=Thresholds(best=100, worst=20),
            higher_is_better=True,
            suggestion=(
                "Shallow soil depth may complicate foundation work for panel "
                "mountings."
            ),
        ),
        CriterionSpec(
            key="shading",
            display_name="Shading (Hillshade)",
            weight=0.05,
            thresholds=Thresholds(best=200, worst=100),
            higher_is_better=True,
            suggestion=(
                "Terrain analysis indicates potential shading from nearby hills, "
                "which will reduce energy output."
            ),
        ),
        CriterionSpec(
            key="dust",
            display_name="Dust (Aerosol Index)",
            weight=0.03,
            thresholds=Thresholds(best=0.1, worst=0.5),
            higher_is_better=False,
            suggestion=(
                "High dust levels will require more frequent panel cleaning, "
                "increasing maintenance costs."
            ),
        ),
        CriterionSpec(
            key="windSpeed",
            display_name="Wind Speed",
            weight=0.02,
            unit="km/h",
            thresholds=Thresholds(best=20, worst=90),
            higher_is_better=False,
            suggestion=(
                "Site experiences high wind speeds, requiring more robust and "
                "expensive mounting structures."
            ),
        ),
        CriterionSpec(
            key="seismicRisk",
            display_name="Seismic Risk (PGA)",
            weight=0.02,
            unit="g",
            thresholds=Thresholds(best=0.1, worst=0.4),
            higher_is_better=False,
            suggestion=(
                "High seismic risk requires specialized engineering for "
                "foundations and structures."
            ),
        ),
        CriterionSpec(
            key="floodRisk",
            display_name="Flood Risk",
            weight=0.02,
            unit="ha",
            thresholds=Thresholds(best=0, worst=5),
            higher_is_better=False,
            suggestion=(
                "A portion of the site is in a flood-prone area, posing a risk "
                "to equipment."
            ),
        ),
        CriterionSpec(
            key="landOwnership",
            display_name="Land Ownership",
            weight=0.06,
            policy=ScoringPolicy.MANUAL_OWNERSHIP,
            suggestion=(
                "Private land ownership can lead to longer acquisition times and "
                "higher costs compared to government land."
            ),
        ),
    )
)
