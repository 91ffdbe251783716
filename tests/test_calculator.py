"""Integration tests for the calculation engine."""

import math

import pytest

from co2calc.config.settings import Settings
from co2calc.engine.calculator import CalculationEngine
from co2calc.models.enums import (
    HealthImpactRating,
    HeatWaveResilience,
    SDGAlignmentRating,
    SustainabilityRating,
)


class TestStandardCalculation:
    def test_configuration_echo(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        config = result.configuration
        assert config["initial_co2"] == pytest.approx(9244.08)
        assert config["GWP_roof"] == 3.33
        assert config["climate_zone"] == "temperate"
        assert config["climate_factor"] == 1.0
        assert config["annual_savings"]["Solar Power"] == pytest.approx(3035.625)

    def test_annual_savings_total(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        # 336.995 + 3035.625 + 360.3125 + 1045
        assert result.annual_savings == pytest.approx(4777.9325)

    def test_timeline_shape(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        series = result.timeline
        assert series.points == 1000
        assert len(series.co2_natural) == len(series.co2_improved) == 1000
        assert series.years[-1] == pytest.approx(50.0)
        assert series.co2_improved[0] == series.co2_natural[0] == pytest.approx(9244.08)

    def test_improved_never_above_natural(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        for improved, natural in zip(result.timeline.co2_improved, result.timeline.co2_natural):
            assert improved <= natural + 1e-9

    def test_neutrality(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        # Improvements reach zero within the horizon; natural decay alone never does
        assert result.neutrality.improved_year is not None
        assert 0 < result.neutrality.improved_year < 10
        assert result.neutrality.natural_year is None
        assert "not achieved" in result.summary["neutrality_natural"]

    def test_ten_year_savings_read_at_sample_200(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        series = result.timeline
        assert result.ten_year_savings == pytest.approx(
            series.co2_natural[200] - series.co2_improved[200]
        )

    def test_economics(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        assert result.economics.estimated_cost == pytest.approx(485_800)
        assert result.economics.simple_payback_years == pytest.approx(485_800 / 4777.9325)
        assert result.economics.roi_10yr == pytest.approx(
            result.ten_year_savings / 485_800 * 100
        )
        assert "101.7 years" in result.summary["economic_summary"]

    def test_intensity(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        assert result.intensity.carbon_per_sqm == pytest.approx(3.33)
        assert result.intensity.reduction_per_euro == pytest.approx(
            result.ten_year_savings / 485_800
        )

    def test_accepts_model_instance(self, engine, reference_params, reference_roof):
        assert engine.calculate(reference_params) == engine.calculate(reference_roof)

    def test_deterministic(self, engine, reference_roof):
        assert engine.calculate(reference_roof) == engine.calculate(reference_roof)

    def test_hand_checkable_single_garden(self, engine, single_garden_roof):
        result = engine.calculate(single_garden_roof)
        # 100 - 1000 / 11 on the first step, floored at zero on the second
        assert result.timeline.co2_improved[1] == pytest.approx(100 - 1000 / 11)
        assert result.neutrality.improved_year == pytest.approx(2.0)
        assert result.neutrality.natural_year is None

    def test_tropical_accelerates_neutrality(self, engine, reference_roof):
        temperate = engine.calculate(reference_roof)
        tropical = engine.calculate({**reference_roof, "climate_zone": "tropical"})
        assert tropical.configuration["climate_factor"] == 1.2
        assert tropical.neutrality.improved_year < temperate.neutrality.improved_year

    def test_zero_savings_payback_not_applicable(self, engine, reference_roof):
        params = {
            **reference_roof,
            "full_savings": {k: 0.0 for k in reference_roof["full_savings"]},
        }
        result = engine.calculate(params)
        assert result.economics.simple_payback_years is None
        assert result.neutrality.improved_year is None
        assert "not applicable" in result.summary["economic_summary"]

    def test_invalid_division_rejected(self, engine, reference_roof):
        params = {**reference_roof, "roof_division": {"Green Areas": 50, "Solar Power": 40}}
        with pytest.raises(ValueError, match="sum to 100%"):
            engine.calculate(params)

    def test_nan_division_rejected_before_simulation(self, engine, reference_roof):
        params = {**reference_roof, "roof_division": {"Green Areas": float("nan")}}
        with pytest.raises(ValueError):
            engine.calculate(params)

    def test_infinite_area_rejected(self, engine, reference_roof):
        with pytest.raises(ValueError, match="finite number"):
            engine.calculate({**reference_roof, "roof_area": float("inf")})

    def test_no_nan_in_results(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        for value in result.timeline.co2_improved + result.timeline.co2_natural:
            assert not math.isnan(value)


class TestSimpleCalculation:
    def test_uses_fixed_gwp_and_temperate(self, engine):
        result = engine.calculate_simple(2000, {"Green Areas": 50, "Solar Power": 50})
        assert result.configuration["initial_co2"] == pytest.approx(6000)
        assert result.configuration["climate_zone"] == "temperate"
        assert result.timeline.points == 1000

    def test_settings_drive_grid(self, tables):
        engine = CalculationEngine(
            tables=tables,
            settings=Settings(default_points=200, default_years_to_calculate=20),
        )
        result = engine.calculate_simple(1000, {"Green Areas": 100})
        assert result.timeline.points == 200
        assert result.timeline.years[-1] == pytest.approx(20.0)


class TestEnhancedCalculation:
    def test_environmental_impact(self, engine):
        result = engine.calculate_enhanced({})
        env = result.environmental_impact
        # 9244.08 / 1347.976
        assert env.years_to_neutrality == pytest.approx(6.8577, rel=1e-4)
        assert env.solar_energy_savings_percentage == pytest.approx(12142.5 / 64095.68 * 100)
        assert env.heating_reduction_percentage == pytest.approx(25.0)
        assert env.total_annual_co2_reduction == pytest.approx(19111.73)

    def test_scores_and_ratings(self, engine):
        result = engine.calculate_enhanced({})
        assert result.social_impact.social_impact_score == pytest.approx(19.1075)
        assert result.health_impact.health_impact_score == pytest.approx(10.885)
        assert result.health_impact.heat_wave_resilience == HeatWaveResilience.IMPROVED
        assert result.sdg_alignment.sdg_alignment_score == pytest.approx(8 / 17 * 100)
        assert result.sdg_alignment.rating == SDGAlignmentRating.MODERATE
        assert result.sustainability.value == pytest.approx(20.885, rel=1e-3)
        assert result.sustainability.rating == SustainabilityRating.NEEDS_IMPROVEMENT

    def test_economics(self, engine):
        result = engine.calculate_enhanced({})
        # 816.125 + 1517.8125 + 1067.5 + 477.6875 + 544.25
        assert result.economics.annual_economic_benefit == pytest.approx(4423.375)
        assert result.economics.estimated_cost == pytest.approx(485_800)
        assert result.economics.simple_payback_years == pytest.approx(485_800 / 4423.375)
        assert result.economics.roi_10yr == pytest.approx(44_233.75 / 485_800 * 100)

    def test_projections_are_linear(self, engine):
        result = engine.calculate_enhanced({"years_to_calculate": 5})
        proj = result.projections
        assert proj.years == (0, 1, 2, 3, 4, 5)
        assert proj.cumulative_co2_reduction[0] == 0
        assert proj.cumulative_co2_reduction[3] == pytest.approx(3 * 19111.73)

    def test_summary_sections(self, engine):
        result = engine.calculate_enhanced({})
        assert set(result.summary) == {
            "environmental",
            "social",
            "health",
            "economic",
            "sustainability",
        }
        assert "485,800.00" in result.summary["economic"]
        assert "Needs Improvement" in result.summary["sustainability"]

    def test_non_positive_absorption_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.calculate_enhanced({"plant_absorption": 0})


class TestHealthImpactAssessment:
    def test_example_roof(self, engine):
        report = engine.assess_health_impact(
            {
                "roof_area": 2776,
                "roof_division": {"Green Areas": 25, "Solar Power": 75},
                "employees": 50,
                "green_view_percentage": 60,
            }
        )
        assert report.health.health_impact_score == pytest.approx(3.1821)
        assert report.health.health_impact_rating == HealthImpactRating.MINIMAL
        assert report.economic_benefits.total_economic_benefit == pytest.approx(84_934.5)
        assert report.building_occupants == 100
        assert "84,934.50" in report.summary["economic"]

    def test_view_percentage_out_of_range(self, engine):
        with pytest.raises(ValueError):
            engine.assess_health_impact(
                {"roof_area": 100, "roof_division": {"Green Areas": 100}, "green_view_percentage": 101}
            )


class TestSDGReport:
    def test_four_goal_report(self, engine):
        report = engine.sdg_report(
            {
                "roof_division": {"Green Areas": 100},
                "sdg_focus": [
                    "Good Health and Well-being",
                    "Clean Water and Sanitation",
                    "Affordable and Clean Energy",
                    "Climate Action",
                ],
            }
        )
        assert report.sdg_alignment_score == pytest.approx(23.53, abs=0.01)
        assert report.alignment_rating == SustainabilityRating.NEEDS_IMPROVEMENT
        assert len(report.sdgs_addressed) == 4
        assert report.company_name == "Your Company"
        assert len(report.recommendations.suggestions) == 3

    def test_unknown_goal_kept_with_fallback_text(self, engine):
        report = engine.sdg_report(
            {"roof_division": {}, "sdg_focus": ["Quality Education"]}
        )
        assert report.sdgs_addressed[0].description == "No description available"
