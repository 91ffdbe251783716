"""Immutable result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from co2calc.models.enums import (
    HealthImpactRating,
    HeatWaveResilience,
    SDGAlignmentRating,
    SustainabilityRating,
)


@dataclass(frozen=True)
class ImprovementProfile:
    """One roof improvement category and when it starts saving."""

    category: str
    full_annual_saving: float
    start_year: int
    allocation_pct: float

    @property
    def annual_saving(self) -> float:
        return self.full_annual_saving * (self.allocation_pct / 100)


@dataclass(frozen=True)
class TimelineSeries:
    """Sampled CO2 curves; co2_improved[0] is the initial CO2."""

    years: tuple[float, ...]
    co2_natural: tuple[float, ...]
    co2_improved: tuple[float, ...]

    @property
    def points(self) -> int:
        return len(self.years)


@dataclass(frozen=True)
class NeutralityResult:
    improved_year: Optional[float]
    natural_year: Optional[float]


@dataclass(frozen=True)
class EconomicsResult:
    estimated_cost: float
    simple_payback_years: Optional[float]
    roi_10yr: Optional[float]


@dataclass(frozen=True)
class IntensityResult:
    carbon_per_sqm: float
    reduction_per_euro: Optional[float]


@dataclass(frozen=True)
class CalculationResult:
    """Top-level result of the standard timeline calculation."""

    configuration: dict[str, Any]
    timeline: TimelineSeries
    neutrality: NeutralityResult
    annual_savings: float
    ten_year_savings: float
    economics: EconomicsResult
    intensity: IntensityResult
    summary: dict[str, str]


@dataclass(frozen=True)
class SustainabilityScore:
    value: float
    rating: SustainabilityRating


@dataclass(frozen=True)
class EnvironmentalImpact:
    plant_absorption: float
    years_to_neutrality: float
    solar_energy_savings_percentage: float
    heating_reduction_percentage: float
    water_reduction_percentage: float
    total_annual_co2_reduction: float


@dataclass(frozen=True)
class SocialImpact:
    metrics: dict[str, float]
    social_impact_score: float


@dataclass(frozen=True)
class HealthImpact:
    metrics: dict[str, float]
    health_impact_score: float
    heat_wave_resilience: HeatWaveResilience


@dataclass(frozen=True)
class SDGAlignment:
    sdgs_addressed: list[str]
    sdg_alignment_score: float
    rating: SDGAlignmentRating


@dataclass(frozen=True)
class EnhancedEconomics:
    estimated_cost: float
    annual_economic_benefit: float
    simple_payback_years: Optional[float]
    roi_10yr: Optional[float]


@dataclass(frozen=True)
class Projections:
    """Cumulative totals over integer years 0..N."""

    years: tuple[int, ...]
    cumulative_co2_reduction: tuple[float, ...]
    cumulative_economic_benefit: tuple[float, ...]


@dataclass(frozen=True)
class EnhancedCalculationResult:
    configuration: dict[str, Any]
    environmental_impact: EnvironmentalImpact
    social_impact: SocialImpact
    health_impact: HealthImpact
    sdg_alignment: SDGAlignment
    sustainability: SustainabilityScore
    economics: EnhancedEconomics
    projections: Projections
    summary: dict[str, str]


@dataclass(frozen=True)
class HealthImpactAssessment:
    """Exposure-scaled health effects of the green share of a roof."""

    green_roof_area: float
    green_view_percentage: float
    stress_reduction_percentage: float
    hypertension_reduction: float
    mortality_reduction: float
    productivity_increase: float
    sick_days_reduction: float
    health_impact_score: float
    health_impact_rating: HealthImpactRating


@dataclass(frozen=True)
class HealthEconomicBenefit:
    productivity_value_per_employee: float
    sick_day_savings: float
    total_economic_benefit: float
    roi_percentage: Optional[float]


@dataclass(frozen=True)
class HealthImpactReport:
    roof_area: float
    roof_division: dict[str, float]
    employees: int
    building_occupants: int
    health: HealthImpactAssessment
    economic_benefits: HealthEconomicBenefit
    summary: dict[str, str]


@dataclass(frozen=True)
class SDGDetail:
    name: str
    description: str
    contribution: str


@dataclass(frozen=True)
class SDGSuggestion:
    sdg: str
    suggestion: str


@dataclass(frozen=True)
class SDGRecommendations:
    current_alignment: str
    suggestions: list[SDGSuggestion] = field(default_factory=list)


@dataclass(frozen=True)
class SDGReport:
    company_name: str
    project_name: str
    roof_division: dict[str, float]
    sdgs_addressed: list[SDGDetail]
    sdg_alignment_score: float
    alignment_rating: SustainabilityRating
    recommendations: SDGRecommendations


@dataclass(frozen=True)
class BatchItem:
    building_id: Union[str, int]
    neutrality: NeutralityResult
    annual_savings: float
    ten_year_savings: float
    economics: EconomicsResult


@dataclass(frozen=True)
class BatchResult:
    batch_size: int
    items: list[BatchItem]


@dataclass(frozen=True)
class ScenarioMetrics:
    """Headline numbers for one named scenario in a comparison."""

    scenario_name: str
    neutrality_years: Optional[float]
    annual_savings: float
    ten_year_savings: float
    estimated_cost: float
    payback_years: Optional[float]
    roi_10yr: Optional[float]


@dataclass(frozen=True)
class BestScenario:
    scenario_name: str
    value: Optional[float]


@dataclass(frozen=True)
class ComparisonResult:
    scenarios: list[ScenarioMetrics]
    best_scenarios: dict[str, BestScenario]
    summary: dict[str, str]


@dataclass(frozen=True)
class SalesSummary:
    """Rounded, customer-facing digest of a standard calculation."""

    project: dict[str, Any]
    key_metrics: dict[str, Any]
    economics: dict[str, Any]
    summary: dict[str, str]
