"""CO2 timeline simulation with and without roof improvements.

The natural curve is a closed-form exponential decay evaluated on the
year grid. The improved curve is a left fold over the same grid: each
sample takes one step of natural decay from its predecessor, subtracts the
per-sample share of every active improvement's saving, and is floored at
zero.
"""

from __future__ import annotations

import logging
import math
from itertools import accumulate
from typing import Iterable, Mapping

import numpy as np

from co2calc.engine.result import ImprovementProfile, TimelineSeries

logger = logging.getLogger(__name__)


def initial_co2(gwp_roof: float, roof_area: float) -> float:
    """Initial_CO2 = GWP_roof x roof_area"""
    if roof_area <= 0:
        raise ValueError("Roof area must be positive")
    if gwp_roof <= 0:
        raise ValueError("GWP_roof must be positive")
    return gwp_roof * roof_area


def build_improvement_profiles(
    roof_division: Mapping[str, float],
    full_savings: Mapping[str, float],
    improvement_years: Mapping[str, int],
) -> tuple[ImprovementProfile, ...]:
    """One profile per scheduled category.

    A scheduled category with no share of the roof saves nothing; a category
    with a share but no start year never activates.
    """
    return tuple(
        ImprovementProfile(
            category=category,
            full_annual_saving=full_savings.get(category, 0.0),
            start_year=start_year,
            allocation_pct=roof_division.get(category, 0.0),
        )
        for category, start_year in improvement_years.items()
    )


def efficiency(years_active: float, degradation: float) -> float:
    """Remaining effectiveness of an improvement, floored at 0."""
    if degradation < 0:
        raise ValueError("Efficiency degradation cannot be negative")
    return max(0.0, 1 - degradation * years_active)


def year_grid(years_to_calculate: float, points: int) -> np.ndarray:
    """`points` evenly spaced years on [0, years_to_calculate] inclusive."""
    if years_to_calculate <= 0:
        raise ValueError("Years to calculate must be positive")
    if points <= 0:
        raise ValueError("Points must be positive")
    return np.linspace(0.0, float(years_to_calculate), points)


def natural_decline(
    start_co2: float,
    years: np.ndarray,
    decline_rate: float,
    climate_factor: float,
) -> np.ndarray:
    """CO2_natural(t) = initial x exp(-decline_rate x t x climate_factor)"""
    return start_co2 * np.exp(-decline_rate * years * climate_factor)


def improved_decline(
    start_co2: float,
    years: Iterable[float],
    decline_rate: float,
    climate_factor: float,
    profiles: tuple[ImprovementProfile, ...],
    efficiency_degradation: float,
    points: int,
) -> list[float]:
    """Fold natural decay and active savings over the year grid."""
    step_decay = math.exp(-decline_rate * climate_factor)
    years = list(years)

    def step(previous: float, year: float) -> float:
        value = previous * step_decay
        for profile in profiles:
            if year >= profile.start_year:
                eff = efficiency(year - profile.start_year, efficiency_degradation)
                value -= (profile.annual_saving * eff) / points * climate_factor
        return max(0.0, value)

    return list(accumulate(years[1:], step, initial=start_co2))


def simulate_timeline(
    start_co2: float,
    decline_rate: float,
    climate_factor: float,
    profiles: tuple[ImprovementProfile, ...],
    efficiency_degradation: float,
    years_to_calculate: int = 50,
    points: int = 1000,
) -> TimelineSeries:
    """Build the year grid and both CO2 curves."""
    if not (0 <= decline_rate < 1):
        raise ValueError("Decline rate must be between 0 and 1")

    years = year_grid(years_to_calculate, points)
    natural = natural_decline(start_co2, years, decline_rate, climate_factor)
    improved = improved_decline(
        start_co2,
        years.tolist(),
        decline_rate,
        climate_factor,
        profiles,
        efficiency_degradation,
        points,
    )

    logger.debug(
        "Simulated %d samples over %s years (climate factor %.2f)",
        points,
        years_to_calculate,
        climate_factor,
    )
    return TimelineSeries(
        years=tuple(years.tolist()),
        co2_natural=tuple(natural.tolist()),
        co2_improved=tuple(improved),
    )
