"""Neutrality-crossing detection on sampled CO2 curves."""

from __future__ import annotations

from typing import Optional, Sequence

from co2calc.engine.result import NeutralityResult, TimelineSeries


def find_neutrality_year(
    years: Sequence[float],
    values: Sequence[float],
) -> Optional[float]:
    """Year of the first sample at or below zero, or None within the horizon.

    The reported year is the grid year of that sample; there is no
    interpolation between samples.
    """
    if len(years) != len(values):
        raise ValueError(
            f"years and values must have the same length, got {len(years)} and {len(values)}"
        )
    for year, value in zip(years, values):
        if value <= 0:
            return year
    return None


def analyze_neutrality(timeline: TimelineSeries) -> NeutralityResult:
    return NeutralityResult(
        improved_year=find_neutrality_year(timeline.years, timeline.co2_improved),
        natural_year=find_neutrality_year(timeline.years, timeline.co2_natural),
    )
