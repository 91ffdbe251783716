"""Cost, payback and return calculations.

All monetary values are in euros. Cost factors come from the injected
reference tables; categories without a listed price use the default.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping, Optional

from co2calc.engine.result import EconomicsResult, IntensityResult, TimelineSeries
from co2calc.reference.schema import EconomicConstants, ReferenceTables

logger = logging.getLogger(__name__)

ROI_HORIZON_YEARS = 10


def estimate_cost(
    roof_area: float,
    roof_division: Mapping[str, float],
    tables: ReferenceTables,
) -> float:
    """Cost = sum(area x share/100 x cost_per_sqm[category])"""
    if roof_area <= 0:
        raise ValueError("Roof area must be positive")
    return sum(
        roof_area * (pct / 100) * tables.cost_for(category)
        for category, pct in roof_division.items()
    )


def simple_payback_years(
    estimated_cost: float, total_annual_savings: float
) -> Optional[float]:
    """Payback = cost / annual savings; None when nothing is saved."""
    if total_annual_savings == 0:
        logger.warning("Total annual savings is zero; payback is not applicable")
        return None
    return estimated_cost / total_annual_savings


def ten_year_index(points: int, years_to_calculate: float) -> int:
    """Sample index nearest year 10, clamped to the last sample."""
    if points <= 0:
        raise ValueError("Points must be positive")
    if years_to_calculate <= 0:
        raise ValueError("Years to calculate must be positive")
    index = math.floor(points / years_to_calculate * ROI_HORIZON_YEARS)
    return min(index, points - 1)


def ten_year_savings(timeline: TimelineSeries, years_to_calculate: float) -> float:
    """CO2 avoided by year 10: natural minus improved at the year-10 sample."""
    idx = ten_year_index(timeline.points, years_to_calculate)
    return timeline.co2_natural[idx] - timeline.co2_improved[idx]


def roi_percentage(benefit: float, estimated_cost: float) -> Optional[float]:
    if estimated_cost == 0:
        logger.warning("Estimated cost is zero; ROI is not applicable")
        return None
    return (benefit / estimated_cost) * 100


def calculate_economics(
    roof_area: float,
    roof_division: Mapping[str, float],
    annual_savings: Mapping[str, float],
    co2_saved_10yr: float,
    tables: ReferenceTables,
) -> EconomicsResult:
    cost = estimate_cost(roof_area, roof_division, tables)
    total = sum(annual_savings.values())
    return EconomicsResult(
        estimated_cost=cost,
        simple_payback_years=simple_payback_years(cost, total),
        roi_10yr=roi_percentage(co2_saved_10yr, cost),
    )


def carbon_intensity(
    start_co2: float,
    roof_area: float,
    co2_saved_10yr: float,
    estimated_cost: float,
) -> IntensityResult:
    reduction_per_euro = (
        co2_saved_10yr / estimated_cost if estimated_cost != 0 else None
    )
    return IntensityResult(
        carbon_per_sqm=start_co2 / roof_area,
        reduction_per_euro=reduction_per_euro,
    )


def annual_economic_benefit(
    solar_reduction: float,
    heating_reduction: float,
    water_collected: float,
    social_impact_score: float,
    health_impact_score: float,
    constants: EconomicConstants,
) -> float:
    """Yearly value of carbon, electricity, water, productivity and health gains.

    Solar CO2 reduction is converted to a kWh equivalent; productivity and
    health scores are valued per 1% per employee.
    """
    electricity_savings = solar_reduction * constants.kwh_per_kg_solar_reduction

    carbon_benefit = (solar_reduction + heating_reduction) * constants.co2_price_per_kg
    electricity_benefit = electricity_savings * constants.electricity_price_per_kwh
    water_benefit = water_collected * constants.water_price_per_m3
    productivity_benefit = (
        social_impact_score * constants.productivity_value * constants.employees / 100
    )
    health_benefit = (
        health_impact_score * constants.health_cost_savings * constants.employees / 100
    )

    return (
        carbon_benefit
        + electricity_benefit
        + water_benefit
        + productivity_benefit
        + health_benefit
    )
