"""Pydantic models for calculation inputs.

Every model validates eagerly so that a bad request is rejected before any
simulation step runs. Validation errors surface as
``pydantic.ValidationError`` (a ``ValueError``) carrying the same
human-readable messages the formula functions use.
"""

from __future__ import annotations

import math
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from co2calc.models.enums import ClimateZone

DIVISION_TOLERANCE = 0.01


def _default_division() -> dict[str, float]:
    return {
        "Green Areas": 25.0,
        "Solar Power": 25.0,
        "Water Management": 25.0,
        "Social Impact": 25.0,
    }


def validate_division(division: dict[str, float]) -> dict[str, float]:
    """Check that roof division percentages are non-negative and sum to 100."""
    for category, pct in division.items():
        if not math.isfinite(pct):
            raise ValueError(
                f"Roof division percentage for '{category}' must be a finite number"
            )
        if pct < 0:
            raise ValueError(
                f"Roof division percentage for '{category}' cannot be negative"
            )
    total = sum(division.values())
    if abs(total - 100) > DIVISION_TOLERANCE:
        raise ValueError("Roof division percentages must sum to 100%")
    return division


class _RoofInputs(BaseModel):
    """Fields shared by every pipeline that starts from a physical roof."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    roof_area: float = Field(default=2776.0, description="Roof area in m²")
    gwp_roof: float = Field(
        default=3.33,
        alias="GWP_roof",
        description="Global-warming-potential coefficient per m²",
    )
    roof_division: dict[str, float] = Field(default_factory=_default_division)

    @field_validator("roof_area")
    @classmethod
    def area_positive(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError("Roof area must be positive")
        return v

    @field_validator("gwp_roof")
    @classmethod
    def gwp_positive(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError("GWP_roof must be positive")
        return v

    @field_validator("roof_division")
    @classmethod
    def division_sums_to_100(cls, v: dict[str, float]) -> dict[str, float]:
        return validate_division(v)

    @property
    def initial_co2(self) -> float:
        return self.gwp_roof * self.roof_area


class CalculationParameters(_RoofInputs):
    """Input for the standard timeline calculation."""

    decline_rate: float = Field(default=0.03, description="Annual natural decline rate")
    full_savings: dict[str, float] = Field(
        default_factory=lambda: {
            "Green Areas": 1347.98,
            "Solar Power": 12142.5,
            "Water Management": 1441.25,
            "Social Impact": 4180.0,
        },
        description="kg CO2e/yr per category at 100% allocation",
    )
    improvement_years: dict[str, int] = Field(
        default_factory=lambda: {
            "Green Areas": 0,
            "Solar Power": 1,
            "Water Management": 2,
            "Social Impact": 3,
        },
        description="Year each improvement becomes active",
    )
    climate_zone: ClimateZone = ClimateZone.TEMPERATE
    efficiency_degradation: float = Field(
        default=0.005, description="Annual loss of improvement efficiency"
    )
    years_to_calculate: int = 50
    points: int = 1000

    @field_validator("decline_rate")
    @classmethod
    def decline_rate_in_range(cls, v: float) -> float:
        if v < 0 or v >= 1:
            raise ValueError("Decline rate must be between 0 and 1")
        return v

    @field_validator("efficiency_degradation")
    @classmethod
    def degradation_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Efficiency degradation cannot be negative")
        return v

    @field_validator("years_to_calculate")
    @classmethod
    def years_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Years to calculate must be positive")
        return v

    @field_validator("points")
    @classmethod
    def points_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Points must be positive")
        return v

    @field_validator("improvement_years")
    @classmethod
    def start_years_non_negative(cls, v: dict[str, int]) -> dict[str, int]:
        for category, year in v.items():
            if year < 0:
                raise ValueError(
                    f"Improvement year for '{category}' cannot be negative"
                )
        return v

    @model_validator(mode="after")
    def savings_cover_division(self) -> CalculationParameters:
        missing = sorted(set(self.roof_division) - set(self.full_savings))
        if missing:
            raise ValueError(f"No full savings value for categories: {missing}")
        return self

    def annual_savings(self) -> dict[str, float]:
        """Savings per category scaled by its share of the roof."""
        return {
            category: self.full_savings[category] * (pct / 100)
            for category, pct in self.roof_division.items()
        }


class HealthMetrics(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    hypertension_reduction: float = 6.77
    heat_wave_temperature: float = 28.0
    mortality_reduction: float = 15.0


def _default_social_metrics() -> dict[str, float]:
    return {
        "social_network": 11.08,
        "trust": 11.08,
        "reciprocity": 11.08,
        "safety_wellbeing": 9.86,
        "social_equity": 9.83,
        "happiness": 22.6,
        "stress_reduction": 39.4,
        "quality_of_life": 35.3,
    }


def _default_sdg_focus() -> list[str]:
    return [
        "Zero Hunger",
        "Good Health and Well-being",
        "Clean Water and Sanitation",
        "Affordable and Clean Energy",
        "Decent Work and Economic Growth",
        "Climate Action",
        "Life on Land",
        "Partnerships for the Goals",
    ]


class EnhancedCalculationParameters(_RoofInputs):
    """Input for the enhanced environmental/social/health/SDG calculation."""

    plant_absorption: float = Field(default=1347.976, gt=0)
    energy_emission: float = Field(default=64095.68, gt=0)
    solar_emission: float = Field(default=1747.13, ge=0)
    solar_reduction: float = Field(default=12142.5, ge=0)
    heating_original: float = Field(default=16720.0, gt=0)
    heating_reduced: float = Field(default=12540.0, ge=0)
    water_emission: float = Field(default=6849.81, gt=0)
    water_mitigated: float = Field(default=1441.254, ge=0)
    water_collected: float = Field(default=427.0, ge=0)
    social_metrics: dict[str, float] = Field(default_factory=_default_social_metrics)
    health_metrics: HealthMetrics = Field(default_factory=HealthMetrics)
    sdg_focus: list[str] = Field(default_factory=_default_sdg_focus)
    years_to_calculate: int = Field(default=50, gt=0)

    @property
    def heating_reduction(self) -> float:
        return self.heating_original - self.heating_reduced


class HealthImpactParameters(BaseModel):
    """Input for the exposure-scaled health impact assessment."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    roof_area: float
    roof_division: dict[str, float]
    employees: int = Field(default=50, ge=0)
    building_occupants: int = Field(default=100, ge=0)
    green_view_percentage: float = Field(default=60.0, ge=0, le=100)

    @field_validator("roof_area")
    @classmethod
    def area_positive(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError("Roof area must be positive")
        return v

    @field_validator("roof_division")
    @classmethod
    def percentages_in_range(cls, v: dict[str, float]) -> dict[str, float]:
        for category, pct in v.items():
            if not (0 <= pct <= 100):
                raise ValueError(
                    f"Roof division percentage for '{category}' must be 0-100, got {pct}"
                )
        return v


class SDGReportParameters(BaseModel):
    """Input for the standalone SDG alignment report."""

    model_config = ConfigDict(frozen=True)

    roof_division: dict[str, float]
    sdg_focus: list[str]
    company_name: str = "Your Company"
    project_name: str = "Roof Improvement Project"


class BuildingInput(BaseModel):
    """One building in a batch run; extra keys are calculation parameters."""

    model_config = ConfigDict(frozen=True, extra="allow")

    building_id: Union[str, int]

    def calculation_overrides(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class ScenarioInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    parameters: CalculationParameters
