"""Social and health scoring."""

from __future__ import annotations

from typing import Mapping, Optional

from co2calc.engine.economics import roi_percentage
from co2calc.engine.result import (
    HealthEconomicBenefit,
    HealthImpactAssessment,
)
from co2calc.models.enums import HealthImpactRating, HeatWaveResilience
from co2calc.reference.schema import HealthResearchConstants, ReferenceTables

GREEN_AREAS = "Green Areas"
HEAT_WAVE_THRESHOLD_C = 25


def social_impact_score(
    social_metrics: Mapping[str, float], tables: ReferenceTables
) -> float:
    """Weighted mean of the social metrics; unknown metrics use the default weight."""
    total_weight = 0.0
    weighted = 0.0
    for metric, value in social_metrics.items():
        weight = tables.social_weight(metric)
        weighted += value * weight
        total_weight += weight
    if total_weight == 0:
        return 0.0
    return weighted / total_weight


def health_impact_score(hypertension_reduction: float, mortality_reduction: float) -> float:
    return (hypertension_reduction + mortality_reduction) / 2


def heat_wave_resilience(heat_wave_temperature: float) -> HeatWaveResilience:
    if heat_wave_temperature > HEAT_WAVE_THRESHOLD_C:
        return HeatWaveResilience.IMPROVED
    return HeatWaveResilience.STANDARD


def health_impact_rating(score: float) -> HealthImpactRating:
    """Map a health impact score to a rating.

    >= 30 -> TRANSFORMATIVE
    >= 20 -> SIGNIFICANT
    >= 10 -> MODERATE
    >= 5  -> MODEST
    <  5  -> MINIMAL
    """
    if score >= 30:
        return HealthImpactRating.TRANSFORMATIVE
    if score >= 20:
        return HealthImpactRating.SIGNIFICANT
    if score >= 10:
        return HealthImpactRating.MODERATE
    if score >= 5:
        return HealthImpactRating.MODEST
    return HealthImpactRating.MINIMAL


def green_roof_area(roof_area: float, roof_division: Mapping[str, float]) -> float:
    if roof_area <= 0:
        raise ValueError("Roof area must be positive")
    return roof_area * roof_division.get(GREEN_AREAS, 0.0) / 100


def assess_health(
    roof_area: float,
    roof_division: Mapping[str, float],
    green_view_percentage: float,
    research: HealthResearchConstants,
) -> HealthImpactAssessment:
    """Scale the research constants by green coverage and view exposure.

    Mortality depends on coverage only; every other effect also scales with
    the share of occupants who can see the green area.
    """
    if not (0 <= green_view_percentage <= 100):
        raise ValueError(
            f"green_view_percentage must be 0-100, got {green_view_percentage}"
        )
    green_area = green_roof_area(roof_area, roof_division)
    coverage = green_area / roof_area
    exposure = coverage * (green_view_percentage / 100)

    stress = research.stress_reduction * exposure
    hypertension = research.hypertension_reduction * exposure
    mortality = research.mortality_reduction * coverage
    productivity = research.productivity_increase * exposure
    sick_days = research.sick_days_reduction * exposure

    score = (stress + hypertension + mortality + productivity + sick_days) / 5
    return HealthImpactAssessment(
        green_roof_area=green_area,
        green_view_percentage=green_view_percentage,
        stress_reduction_percentage=stress,
        hypertension_reduction=hypertension,
        mortality_reduction=mortality,
        productivity_increase=productivity,
        sick_days_reduction=sick_days,
        health_impact_score=score,
        health_impact_rating=health_impact_rating(score),
    )


def health_economic_benefit(
    assessment: HealthImpactAssessment,
    employees: int,
    research: HealthResearchConstants,
) -> HealthEconomicBenefit:
    """Translate productivity and sick-day effects into euros per year."""
    if employees < 0:
        raise ValueError("employees cannot be negative")
    productivity_value = research.avg_salary * (assessment.productivity_increase / 100)
    sick_day_savings = (
        research.avg_sick_day_cost * (assessment.sick_days_reduction / 100) * employees
    )
    total = productivity_value * employees + sick_day_savings

    green_cost = assessment.green_roof_area * research.green_roof_cost_per_sqm
    roi: Optional[float] = roi_percentage(total, green_cost)
    return HealthEconomicBenefit(
        productivity_value_per_employee=productivity_value,
        sick_day_savings=sick_day_savings,
        total_economic_benefit=total,
        roi_percentage=roi,
    )
