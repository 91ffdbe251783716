"""Composite sustainability score."""

from __future__ import annotations

from co2calc.engine.result import SustainabilityScore
from co2calc.models.enums import SustainabilityRating
from co2calc.reference.schema import SustainabilityWeights


def environmental_component(
    total_annual_co2_reduction: float,
    start_co2: float,
    weights: SustainabilityWeights,
) -> float:
    """Annual reduction relative to a fixed share of the initial CO2.

    Not clamped: reductions larger than that share score above 100.
    """
    if start_co2 <= 0:
        raise ValueError("Initial CO2 must be positive")
    return total_annual_co2_reduction / (start_co2 * weights.environmental_baseline_fraction)


def sustainability_rating(score: float) -> SustainabilityRating:
    """Map a 0-100 score to the seven-tier rating.

    >= 90 -> OUTSTANDING
    >= 80 -> EXCELLENT
    >= 70 -> VERY_GOOD
    >= 60 -> GOOD
    >= 50 -> SATISFACTORY
    >= 40 -> ACCEPTABLE
    <  40 -> NEEDS_IMPROVEMENT
    """
    if score >= 90:
        return SustainabilityRating.OUTSTANDING
    if score >= 80:
        return SustainabilityRating.EXCELLENT
    if score >= 70:
        return SustainabilityRating.VERY_GOOD
    if score >= 60:
        return SustainabilityRating.GOOD
    if score >= 50:
        return SustainabilityRating.SATISFACTORY
    if score >= 40:
        return SustainabilityRating.ACCEPTABLE
    return SustainabilityRating.NEEDS_IMPROVEMENT


def compose_sustainability(
    total_annual_co2_reduction: float,
    start_co2: float,
    social_score: float,
    health_score: float,
    sdg_score: float,
    weights: SustainabilityWeights,
) -> SustainabilityScore:
    """Score = 0.4 x env + 0.3 x social + 0.2 x health + 0.1 x SDG"""
    env = environmental_component(total_annual_co2_reduction, start_co2, weights)
    value = (
        env * weights.environmental
        + social_score * weights.social
        + health_score * weights.health
        + sdg_score * weights.sdg
    )
    return SustainabilityScore(value=value, rating=sustainability_rating(value))
