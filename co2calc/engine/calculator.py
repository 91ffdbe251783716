"""Core calculation engine.

Takes validated roof parameters + reference tables -> produces immutable
result objects. The engine holds no per-request state; one instance can
serve any number of concurrent calculations.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from co2calc.config.settings import Settings
from co2calc.engine import economics, social_health, sdg, sustainability, timeline
from co2calc.engine.neutrality import analyze_neutrality
from co2calc.engine.result import (
    CalculationResult,
    EnhancedCalculationResult,
    EnhancedEconomics,
    EnvironmentalImpact,
    HealthImpact,
    HealthImpactReport,
    Projections,
    SDGAlignment,
    SDGReport,
    SocialImpact,
)
from co2calc.models.enums import ClimateZone
from co2calc.models.parameters import (
    CalculationParameters,
    EnhancedCalculationParameters,
    HealthImpactParameters,
    SDGReportParameters,
)
from co2calc.reference.loader import get_default_reference_tables, load_reference_tables
from co2calc.reference.schema import ReferenceTables

logger = logging.getLogger(__name__)

SIMPLE_GWP_ROOF = 3.0


def _fmt_money(value: float) -> str:
    return f"{value:,.2f}"


class CalculationEngine:
    """Stateless engine that runs roof CO2 and impact calculations."""

    def __init__(
        self,
        tables: Optional[ReferenceTables] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        if tables is None:
            if self.settings.reference_tables_path is not None:
                tables = load_reference_tables(self.settings.reference_tables_path)
            else:
                tables = get_default_reference_tables()
        self.tables = tables

    # ------------------------------------------------------------------
    # Standard timeline calculation
    # ------------------------------------------------------------------

    def calculate(
        self, params: Union[CalculationParameters, Mapping[str, Any]]
    ) -> CalculationResult:
        """Simulate both CO2 curves and derive neutrality, savings and economics."""
        if not isinstance(params, CalculationParameters):
            params = CalculationParameters.model_validate(params)

        climate_factor = self.tables.climate_factor(params.climate_zone)
        start_co2 = timeline.initial_co2(params.gwp_roof, params.roof_area)
        annual_savings = params.annual_savings()
        profiles = timeline.build_improvement_profiles(
            params.roof_division, params.full_savings, params.improvement_years
        )

        series = timeline.simulate_timeline(
            start_co2=start_co2,
            decline_rate=params.decline_rate,
            climate_factor=climate_factor,
            profiles=profiles,
            efficiency_degradation=params.efficiency_degradation,
            years_to_calculate=params.years_to_calculate,
            points=params.points,
        )
        neutrality = analyze_neutrality(series)

        co2_saved_10yr = economics.ten_year_savings(series, params.years_to_calculate)
        total_annual = sum(annual_savings.values())
        econ = economics.calculate_economics(
            params.roof_area,
            params.roof_division,
            annual_savings,
            co2_saved_10yr,
            self.tables,
        )
        intensity = economics.carbon_intensity(
            start_co2, params.roof_area, co2_saved_10yr, econ.estimated_cost
        )

        configuration = {
            "roof_area": params.roof_area,
            "GWP_roof": params.gwp_roof,
            "initial_co2": start_co2,
            "decline_rate": params.decline_rate,
            "roof_division": dict(params.roof_division),
            "full_savings": dict(params.full_savings),
            "improvement_years": dict(params.improvement_years),
            "annual_savings": annual_savings,
            "efficiency_degradation": params.efficiency_degradation,
            "climate_zone": params.climate_zone.value,
            "climate_factor": climate_factor,
        }

        logger.info(
            "Calculation complete: initial CO2 %.1f, neutrality %s, payback %s",
            start_co2,
            neutrality.improved_year,
            econ.simple_payback_years,
        )
        return CalculationResult(
            configuration=configuration,
            timeline=series,
            neutrality=neutrality,
            annual_savings=total_annual,
            ten_year_savings=co2_saved_10yr,
            economics=econ,
            intensity=intensity,
            summary=self._standard_summary(neutrality, econ),
        )

    def calculate_simple(
        self, roof_area: float, roof_division: Mapping[str, float]
    ) -> CalculationResult:
        """Run the standard calculation from area and division alone."""
        params = CalculationParameters(
            roof_area=roof_area,
            roof_division=dict(roof_division),
            GWP_roof=SIMPLE_GWP_ROOF,
            climate_zone=ClimateZone.TEMPERATE,
            efficiency_degradation=self.settings.default_efficiency_degradation,
            years_to_calculate=self.settings.default_years_to_calculate,
            points=self.settings.default_points,
        )
        return self.calculate(params)

    @staticmethod
    def _standard_summary(neutrality, econ) -> dict[str, str]:
        if neutrality.improved_year is not None:
            improved = (
                "CO2 neutrality with improvements is achieved in "
                f"{neutrality.improved_year:.1f} years."
            )
        else:
            improved = (
                "CO2 neutrality with improvements is not achieved within the timeframe."
            )
        if neutrality.natural_year is not None:
            natural = (
                "CO2 neutrality without improvements (natural decline) is achieved in "
                f"{neutrality.natural_year:.1f} years."
            )
        else:
            natural = (
                "CO2 neutrality without improvements (natural decline) is not achieved "
                "within the timeframe."
            )

        payback = (
            f"{econ.simple_payback_years:.1f} years"
            if econ.simple_payback_years is not None
            else "not applicable"
        )
        roi = f"{econ.roi_10yr:.1f}%" if econ.roi_10yr is not None else "not applicable"
        return {
            "neutrality_improved": improved,
            "neutrality_natural": natural,
            "economic_summary": (
                f"Estimated payback period is {payback} with a 10-year ROI of {roi}."
            ),
        }

    # ------------------------------------------------------------------
    # Enhanced environmental / social / health / SDG calculation
    # ------------------------------------------------------------------

    def calculate_enhanced(
        self, params: Union[EnhancedCalculationParameters, Mapping[str, Any]]
    ) -> EnhancedCalculationResult:
        """Combine environmental, social, health and SDG scores into one result."""
        if not isinstance(params, EnhancedCalculationParameters):
            params = EnhancedCalculationParameters.model_validate(params)

        start_co2 = timeline.initial_co2(params.gwp_roof, params.roof_area)
        heating_reduction = params.heating_reduction
        total_reduction = (
            params.plant_absorption
            + params.solar_reduction
            + heating_reduction
            + params.water_mitigated
        )
        environmental = EnvironmentalImpact(
            plant_absorption=params.plant_absorption,
            years_to_neutrality=start_co2 / params.plant_absorption,
            solar_energy_savings_percentage=(
                params.solar_reduction / params.energy_emission * 100
            ),
            heating_reduction_percentage=(
                heating_reduction / params.heating_original * 100
            ),
            water_reduction_percentage=(
                params.water_mitigated / params.water_emission * 100
            ),
            total_annual_co2_reduction=total_reduction,
        )

        social_score = social_health.social_impact_score(
            params.social_metrics, self.tables
        )
        health = params.health_metrics
        health_score = social_health.health_impact_score(
            health.hypertension_reduction, health.mortality_reduction
        )
        sdg_score = sdg.sdg_alignment_score(params.sdg_focus)
        composite = sustainability.compose_sustainability(
            total_annual_co2_reduction=total_reduction,
            start_co2=start_co2,
            social_score=social_score,
            health_score=health_score,
            sdg_score=sdg_score,
            weights=self.tables.sustainability,
        )

        cost = economics.estimate_cost(params.roof_area, params.roof_division, self.tables)
        benefit = economics.annual_economic_benefit(
            params.solar_reduction,
            heating_reduction,
            params.water_collected,
            social_score,
            health_score,
            self.tables.economics,
        )
        econ = EnhancedEconomics(
            estimated_cost=cost,
            annual_economic_benefit=benefit,
            simple_payback_years=economics.simple_payback_years(cost, benefit),
            roi_10yr=economics.roi_percentage(
                benefit * economics.ROI_HORIZON_YEARS, cost
            ),
        )

        years = tuple(range(params.years_to_calculate + 1))
        projections = Projections(
            years=years,
            cumulative_co2_reduction=tuple(total_reduction * y for y in years),
            cumulative_economic_benefit=tuple(benefit * y for y in years),
        )

        result = EnhancedCalculationResult(
            configuration={
                "roof_area": params.roof_area,
                "GWP_roof": params.gwp_roof,
                "initial_co2": start_co2,
                "roof_division": dict(params.roof_division),
            },
            environmental_impact=environmental,
            social_impact=SocialImpact(
                metrics=dict(params.social_metrics),
                social_impact_score=social_score,
            ),
            health_impact=HealthImpact(
                metrics=health.model_dump(),
                health_impact_score=health_score,
                heat_wave_resilience=social_health.heat_wave_resilience(
                    health.heat_wave_temperature
                ),
            ),
            sdg_alignment=SDGAlignment(
                sdgs_addressed=list(params.sdg_focus),
                sdg_alignment_score=sdg_score,
                rating=sdg.sdg_alignment_rating(sdg_score),
            ),
            sustainability=composite,
            economics=econ,
            projections=projections,
            summary=self._enhanced_summary(params, environmental, social_score, econ, composite),
        )
        logger.info(
            "Enhanced calculation complete: sustainability %.1f (%s)",
            composite.value,
            composite.rating.value,
        )
        return result

    @staticmethod
    def _enhanced_summary(params, environmental, social_score, econ, composite) -> dict[str, str]:
        health = params.health_metrics
        social_metrics = params.social_metrics
        payback = (
            f"{econ.simple_payback_years:.1f} years"
            if econ.simple_payback_years is not None
            else "not applicable"
        )
        social = f"Social benefits include {social_score:.1f}% improvement in social metrics"
        if "stress_reduction" in social_metrics and "quality_of_life" in social_metrics:
            social += (
                ", with notable improvements in stress reduction "
                f"({social_metrics['stress_reduction']}%) and quality of life "
                f"({social_metrics['quality_of_life']}%)"
            )
        return {
            "environmental": (
                f"The roof improvements will absorb {environmental.plant_absorption:.2f} "
                "kg CO2e annually, achieving CO2 neutrality in "
                f"{environmental.years_to_neutrality:.1f} years. Energy consumption is "
                f"reduced by {environmental.solar_energy_savings_percentage:.1f}% through "
                f"solar power, heating by {environmental.heating_reduction_percentage:.1f}%, "
                f"and water impact by {environmental.water_reduction_percentage:.1f}%."
            ),
            "social": social + ".",
            "health": (
                f"Health benefits include {health.hypertension_reduction}% reduction in "
                f"hypertension risk and {health.mortality_reduction}% reduction in "
                "heat-related mortality."
            ),
            "economic": (
                f"With an estimated investment of {_fmt_money(econ.estimated_cost)} and "
                f"annual benefits of {_fmt_money(econ.annual_economic_benefit)}, the "
                f"payback period is {payback}."
            ),
            "sustainability": (
                f"Overall sustainability score is {composite.value:.1f}/100, rated as "
                f'"{composite.rating.value}".'
            ),
        }

    # ------------------------------------------------------------------
    # Health impact assessment
    # ------------------------------------------------------------------

    def assess_health_impact(
        self, params: Union[HealthImpactParameters, Mapping[str, Any]]
    ) -> HealthImpactReport:
        """Exposure-scaled health effects and their economic value."""
        if not isinstance(params, HealthImpactParameters):
            params = HealthImpactParameters.model_validate(params)

        research = self.tables.health
        assessment = social_health.assess_health(
            params.roof_area,
            params.roof_division,
            params.green_view_percentage,
            research,
        )
        benefit = social_health.health_economic_benefit(
            assessment, params.employees, research
        )

        summary = {
            "health": (
                "The green roof improvements will reduce stress by "
                f"{assessment.stress_reduction_percentage:.1f}%, hypertension risk by "
                f"{assessment.hypertension_reduction:.1f}%, and heat-related mortality by "
                f"{assessment.mortality_reduction:.1f}%."
            ),
            "productivity": (
                "Employee productivity is expected to increase by "
                f"{assessment.productivity_increase:.1f}%, with sick days reduced by "
                f"{assessment.sick_days_reduction:.1f}%."
            ),
            "economic": (
                "The total annual economic benefit is estimated at "
                f"{_fmt_money(benefit.total_economic_benefit)} through productivity "
                "gains and reduced sick days."
            ),
        }
        logger.info(
            "Health impact assessed: score %.2f (%s)",
            assessment.health_impact_score,
            assessment.health_impact_rating.value,
        )
        return HealthImpactReport(
            roof_area=params.roof_area,
            roof_division=dict(params.roof_division),
            employees=params.employees,
            building_occupants=params.building_occupants,
            health=assessment,
            economic_benefits=benefit,
            summary=summary,
        )

    # ------------------------------------------------------------------
    # SDG report
    # ------------------------------------------------------------------

    def sdg_report(
        self, params: Union[SDGReportParameters, Mapping[str, Any]]
    ) -> SDGReport:
        """Describe addressed SDGs, rate the alignment and suggest gaps to close."""
        if not isinstance(params, SDGReportParameters):
            params = SDGReportParameters.model_validate(params)

        score = sdg.sdg_alignment_score(params.sdg_focus)
        return SDGReport(
            company_name=params.company_name,
            project_name=params.project_name,
            roof_division=dict(params.roof_division),
            sdgs_addressed=sdg.describe_sdgs(params.sdg_focus, self.tables),
            sdg_alignment_score=score,
            alignment_rating=sdg.sdg_report_rating(score),
            recommendations=sdg.sdg_recommendations(params.sdg_focus, self.tables),
        )
