"""Pydantic models for the reference lookup tables.

The tables (climate factors, cost per m², social weights, research
constants, SDG catalog) are loaded once from JSON and handed read-only to
every engine component.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from co2calc.models.enums import ClimateZone

SDG_COUNT = 17


class SDGEntry(BaseModel):
    """One UN Sustainable Development Goal and how a roof project serves it."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    contribution: Optional[str] = None

    @property
    def populated(self) -> bool:
        return self.description is not None and self.contribution is not None


class HealthResearchConstants(BaseModel):
    """Research-based percentages at full green coverage and full view."""

    model_config = ConfigDict(frozen=True)

    stress_reduction: float = Field(default=39.4, ge=0)
    hypertension_reduction: float = Field(default=6.77, ge=0)
    mortality_reduction: float = Field(default=15.0, ge=0)
    productivity_increase: float = Field(default=22.6, ge=0)
    sick_days_reduction: float = Field(default=12.3, ge=0)
    avg_salary: float = Field(default=50_000.0, ge=0)
    avg_sick_day_cost: float = Field(default=200.0, ge=0)
    green_roof_cost_per_sqm: float = Field(default=120.0, ge=0)


class EconomicConstants(BaseModel):
    """Conversion factors for the enhanced annual economic benefit."""

    model_config = ConfigDict(frozen=True)

    co2_price_per_kg: float = Field(default=0.05, ge=0)
    electricity_price_per_kwh: float = Field(default=0.25, ge=0)
    kwh_per_kg_solar_reduction: float = Field(default=0.5, ge=0)
    water_price_per_m3: float = Field(default=2.5, ge=0)
    productivity_value: float = Field(
        default=50.0, ge=0, description="Value of 1% productivity per employee"
    )
    health_cost_savings: float = Field(
        default=100.0, ge=0, description="Value of 1% health improvement per employee"
    )
    employees: int = Field(default=50, ge=0)


class SustainabilityWeights(BaseModel):
    model_config = ConfigDict(frozen=True)

    environmental: float = Field(default=0.4, ge=0, le=1.0)
    social: float = Field(default=0.3, ge=0, le=1.0)
    health: float = Field(default=0.2, ge=0, le=1.0)
    sdg: float = Field(default=0.1, ge=0, le=1.0)
    environmental_baseline_fraction: float = Field(
        default=0.1,
        gt=0,
        description="Share of initial CO2 that counts as a 100-point reduction",
    )

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> SustainabilityWeights:
        total = self.environmental + self.social + self.health + self.sdg
        if abs(total - 1.0) > 0.01:
            raise ValueError(
                f"Sustainability weights must sum to ~1.0, got {total:.3f}"
            )
        return self


class ReferenceTables(BaseModel):
    """Top-level reference configuration shared by all engine components."""

    model_config = ConfigDict(frozen=True)

    id: str
    version: str
    climate_factors: Mapping[ClimateZone, float]
    cost_per_sqm: Mapping[str, float]
    default_cost_per_sqm: float = Field(default=100.0, ge=0)
    social_weights: Mapping[str, float]
    default_social_weight: float = Field(default=0.1, gt=0)
    health: HealthResearchConstants = Field(default_factory=HealthResearchConstants)
    economics: EconomicConstants = Field(default_factory=EconomicConstants)
    sustainability: SustainabilityWeights = Field(default_factory=SustainabilityWeights)
    sdg_catalog: tuple[SDGEntry, ...] = Field(min_length=SDG_COUNT, max_length=SDG_COUNT)

    @field_validator("climate_factors")
    @classmethod
    def every_zone_has_positive_factor(
        cls, v: Mapping[ClimateZone, float]
    ) -> Mapping[ClimateZone, float]:
        missing = set(ClimateZone) - set(v)
        if missing:
            raise ValueError(
                f"climate_factors missing zones: {sorted(z.value for z in missing)}"
            )
        for zone, factor in v.items():
            if factor <= 0:
                raise ValueError(
                    f"climate factor for {zone.value} must be positive, got {factor}"
                )
        return MappingProxyType(dict(v))

    @field_validator("cost_per_sqm", "social_weights")
    @classmethod
    def values_non_negative(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        for key, value in v.items():
            if value < 0:
                raise ValueError(f"'{key}' cannot be negative, got {value}")
        return MappingProxyType(dict(v))

    @field_validator("sdg_catalog")
    @classmethod
    def sdg_names_unique(cls, v: tuple[SDGEntry, ...]) -> tuple[SDGEntry, ...]:
        names = [entry.name for entry in v]
        if len(set(names)) != len(names):
            raise ValueError("sdg_catalog names must be unique")
        return v

    def climate_factor(self, zone: ClimateZone | str) -> float:
        """Multiplier for a climate zone; unknown zones fall back to 1.0."""
        try:
            return self.climate_factors[ClimateZone(zone)]
        except ValueError:
            return 1.0

    def cost_for(self, category: str) -> float:
        return self.cost_per_sqm.get(category, self.default_cost_per_sqm)

    def social_weight(self, metric: str) -> float:
        return self.social_weights.get(metric, self.default_social_weight)

    def sdg(self, name: str) -> Optional[SDGEntry]:
        for entry in self.sdg_catalog:
            if entry.name == name:
                return entry
        return None

    def populated_sdgs(self) -> list[str]:
        """Names of catalog entries that carry roof-specific text, in catalog order."""
        return [entry.name for entry in self.sdg_catalog if entry.populated]
