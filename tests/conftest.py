"""Shared test fixtures for the co2calc test suite."""

import pytest

from co2calc.engine.calculator import CalculationEngine
from co2calc.models.parameters import CalculationParameters
from co2calc.reference.loader import get_default_reference_tables

EQUAL_SPLIT = {
    "Green Areas": 25,
    "Solar Power": 25,
    "Water Management": 25,
    "Social Impact": 25,
}

FULL_SAVINGS = {
    "Green Areas": 1347.98,
    "Solar Power": 12142.5,
    "Water Management": 1441.25,
    "Social Impact": 4180.0,
}


@pytest.fixture
def tables():
    return get_default_reference_tables()


@pytest.fixture
def engine(tables):
    return CalculationEngine(tables=tables)


@pytest.fixture
def reference_roof() -> dict:
    """2776 m² office roof split evenly across the four improvement categories."""
    return {
        "roof_area": 2776,
        "GWP_roof": 3.33,
        "decline_rate": 0.03,
        "roof_division": dict(EQUAL_SPLIT),
        "full_savings": dict(FULL_SAVINGS),
        "improvement_years": {
            "Green Areas": 0,
            "Solar Power": 1,
            "Water Management": 2,
            "Social Impact": 3,
        },
        "climate_zone": "temperate",
        "efficiency_degradation": 0.005,
        "years_to_calculate": 50,
        "points": 1000,
    }


@pytest.fixture
def reference_params(reference_roof) -> CalculationParameters:
    return CalculationParameters.model_validate(reference_roof)


@pytest.fixture
def single_garden_roof() -> dict:
    """Tiny roof with one category and no natural decline, easy to hand-check.

    initial = 1.0 * 100 = 100; each of 10 steps subtracts 1000 / 11 ≈ 90.909.
    """
    return {
        "roof_area": 100,
        "GWP_roof": 1.0,
        "decline_rate": 0.0,
        "roof_division": {"Green Areas": 100},
        "full_savings": {"Green Areas": 1000.0},
        "improvement_years": {"Green Areas": 0},
        "efficiency_degradation": 0.0,
        "years_to_calculate": 10,
        "points": 11,
    }
