"""Tests for batch runs, scenario comparison and sales digests."""

import pytest

from co2calc.engine.comparison import (
    compare_scenarios,
    find_best_scenario,
    run_batch,
    sales_summary,
)
from co2calc.engine.result import ScenarioMetrics


def _metrics(name, neutrality=5.0, roi=10.0, payback=20.0):
    return ScenarioMetrics(
        scenario_name=name,
        neutrality_years=neutrality,
        annual_savings=100.0,
        ten_year_savings=1000.0,
        estimated_cost=50_000.0,
        payback_years=payback,
        roi_10yr=roi,
    )


class TestRunBatch:
    def test_building_values_override_common(self, engine, reference_roof):
        common = {k: v for k, v in reference_roof.items() if k != "roof_area"}
        result = run_batch(
            engine,
            [
                {"building_id": "HQ", "roof_area": 2776},
                {"building_id": "Depot", "roof_area": 1000, "climate_zone": "arid"},
            ],
            common,
        )
        assert result.batch_size == 2
        hq, depot = result.items
        assert hq.building_id == "HQ"
        assert hq.economics.estimated_cost == pytest.approx(485_800)
        # 1000 m² * 25% * (120 + 350 + 80 + 150)
        assert depot.economics.estimated_cost == pytest.approx(175_000)

    def test_matches_single_calculation(self, engine, reference_roof):
        result = run_batch(engine, [{"building_id": "A", **reference_roof}])
        single = engine.calculate(reference_roof)
        assert result.items[0].neutrality == single.neutrality
        assert result.items[0].ten_year_savings == single.ten_year_savings

    def test_numeric_building_id(self, engine, reference_roof):
        result = run_batch(engine, [{"building_id": 7, **reference_roof}])
        assert result.items[0].building_id == 7

    def test_empty_batch_rejected(self, engine):
        with pytest.raises(ValueError, match="must not be empty"):
            run_batch(engine, [])

    def test_missing_building_id_rejected(self, engine):
        with pytest.raises(ValueError, match="building_id"):
            run_batch(engine, [{"roof_area": 100}])


class TestFindBestScenario:
    def test_minimize(self):
        scenarios = [_metrics("A", neutrality=8.0), _metrics("B", neutrality=4.0)]
        best = find_best_scenario(scenarios, "neutrality_years", minimize=True)
        assert best.scenario_name == "B"
        assert best.value == 4.0

    def test_maximize(self):
        scenarios = [_metrics("A", roi=12.0), _metrics("B", roi=3.0)]
        assert find_best_scenario(scenarios, "roi_10yr", minimize=False).scenario_name == "A"

    def test_none_never_wins(self):
        scenarios = [_metrics("A", neutrality=None), _metrics("B", neutrality=30.0)]
        best = find_best_scenario(scenarios, "neutrality_years", minimize=True)
        assert best.scenario_name == "B"

    def test_tie_keeps_earlier(self):
        scenarios = [_metrics("A"), _metrics("B")]
        assert find_best_scenario(scenarios, "payback_years", minimize=True).scenario_name == "A"


class TestCompareScenarios:
    def test_picks_best_per_metric(self, engine, reference_roof):
        solar_heavy = {
            **reference_roof,
            "roof_division": {
                "Green Areas": 10,
                "Solar Power": 70,
                "Water Management": 10,
                "Social Impact": 10,
            },
        }
        result = compare_scenarios(
            engine,
            [
                {"name": "Balanced", "parameters": reference_roof},
                {"name": "Solar heavy", "parameters": solar_heavy},
            ],
        )
        assert [s.scenario_name for s in result.scenarios] == ["Balanced", "Solar heavy"]
        assert result.best_scenarios["annual_savings"].scenario_name == "Solar heavy"
        assert result.best_scenarios["cost"].scenario_name == "Balanced"
        assert set(result.summary) == {
            "recommendation",
            "fastest_neutrality",
            "highest_savings",
            "best_payback",
        }

    def test_requires_two_scenarios(self, engine, reference_roof):
        with pytest.raises(ValueError, match="At least two scenarios"):
            compare_scenarios(engine, [{"name": "Only", "parameters": reference_roof}])

    def test_requires_name_and_parameters(self, engine, reference_roof):
        with pytest.raises(ValueError, match="name and parameters"):
            compare_scenarios(
                engine,
                [{"name": "A", "parameters": reference_roof}, {"parameters": reference_roof}],
            )


class TestSalesSummary:
    def test_rounded_digest(self, engine, reference_roof):
        result = engine.calculate(reference_roof)
        summary = sales_summary(result, building_address="Keizersgracht 1")
        assert summary.project["initial_co2_impact"] == 9244
        assert summary.project["building_address"] == "Keizersgracht 1"
        assert summary.project["company_id"] == "Not specified"
        assert summary.key_metrics["annual_co2_savings"] == 4778
        assert summary.economics["estimated_cost"] == 485_800
        assert summary.economics["payback_years"] == 101.7
        assert "485,800" in summary.summary["economic"]

    def test_years_saved_unknown_without_natural_neutrality(self, engine, reference_roof):
        summary = sales_summary(engine.calculate(reference_roof))
        assert summary.key_metrics["years_saved"] is None
        assert "cannot be fully quantified" in summary.summary["improvement"]
