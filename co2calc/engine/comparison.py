"""Multi-building batches, scenario comparison and sales digests.

These wrappers run the standard calculation once per item and condense the
results; they add no modelling of their own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from co2calc.engine.result import (
    BatchItem,
    BatchResult,
    BestScenario,
    CalculationResult,
    ComparisonResult,
    SalesSummary,
    ScenarioMetrics,
)
from co2calc.models.parameters import BuildingInput, ScenarioInput

if TYPE_CHECKING:
    from co2calc.engine.calculator import CalculationEngine

logger = logging.getLogger(__name__)

# metric -> True when lower is better
_COMPARED_METRICS = {
    "neutrality": ("neutrality_years", True),
    "annual_savings": ("annual_savings", False),
    "ten_year_savings": ("ten_year_savings", False),
    "cost": ("estimated_cost", True),
    "payback": ("payback_years", True),
    "roi": ("roi_10yr", False),
}


def run_batch(
    engine: CalculationEngine,
    buildings: Sequence[Mapping[str, Any]],
    common_parameters: Optional[Mapping[str, Any]] = None,
) -> BatchResult:
    """Calculate every building; building values override the common ones."""
    if not buildings:
        raise ValueError("Buildings array is required and must not be empty")

    common = dict(common_parameters or {})
    validated: list[BuildingInput] = []
    for building in buildings:
        if not building.get("building_id"):
            raise ValueError("Each building must have a building_id")
        validated.append(BuildingInput.model_validate(building))

    items: list[BatchItem] = []
    for building in validated:
        merged = {**common, **building.calculation_overrides()}
        result = engine.calculate(merged)
        items.append(
            BatchItem(
                building_id=building.building_id,
                neutrality=result.neutrality,
                annual_savings=result.annual_savings,
                ten_year_savings=result.ten_year_savings,
                economics=result.economics,
            )
        )

    logger.info("Batch complete: %d buildings", len(items))
    return BatchResult(batch_size=len(items), items=items)


def find_best_scenario(
    scenarios: Sequence[ScenarioMetrics],
    attribute: str,
    minimize: bool,
) -> Optional[BestScenario]:
    """Best scenario for one metric; a missing value never beats a present one.

    Ties keep the earlier scenario.
    """
    if not scenarios:
        return None

    best = scenarios[0]
    for candidate in scenarios[1:]:
        value = getattr(candidate, attribute)
        current = getattr(best, attribute)
        if value is None:
            continue
        if current is None or (value < current if minimize else value > current):
            best = candidate

    return BestScenario(scenario_name=best.scenario_name, value=getattr(best, attribute))


def _metrics(name: str, result: CalculationResult) -> ScenarioMetrics:
    return ScenarioMetrics(
        scenario_name=name,
        neutrality_years=result.neutrality.improved_year,
        annual_savings=result.annual_savings,
        ten_year_savings=result.ten_year_savings,
        estimated_cost=result.economics.estimated_cost,
        payback_years=result.economics.simple_payback_years,
        roi_10yr=result.economics.roi_10yr,
    )


def _comparison_summary(best: Mapping[str, BestScenario]) -> dict[str, str]:
    roi = best["roi"]
    neutrality = best["neutrality"]
    savings = best["ten_year_savings"]
    payback = best["payback"]

    summary = {
        "recommendation": (
            f'Based on the comparison, "{roi.scenario_name}" provides the best overall '
            f"return on investment at {roi.value:.1f}%."
            if roi.value is not None
            else "Return on investment could not be determined for any scenario."
        ),
        "fastest_neutrality": (
            f'"{neutrality.scenario_name}" achieves CO2 neutrality fastest in '
            f"{neutrality.value:.1f} years."
            if neutrality.value is not None
            else "None of the scenarios achieve CO2 neutrality within the calculation timeframe."
        ),
        "highest_savings": (
            f'"{savings.scenario_name}" provides the highest 10-year CO2 savings at '
            f"{savings.value:.1f} units."
        ),
        "best_payback": (
            f'"{payback.scenario_name}" has the shortest payback period at '
            f"{payback.value:.1f} years."
            if payback.value is not None
            else "None of the scenarios has a defined payback period."
        ),
    }
    return summary


def compare_scenarios(
    engine: CalculationEngine,
    scenarios: Sequence[Mapping[str, Any]],
) -> ComparisonResult:
    """Run each named scenario and pick the best one per metric."""
    if not scenarios or len(scenarios) < 2:
        raise ValueError("At least two scenarios are required for comparison")

    inputs: list[ScenarioInput] = []
    for scenario in scenarios:
        if not scenario.get("name") or scenario.get("parameters") is None:
            raise ValueError("Each scenario must have a name and parameters")
        inputs.append(ScenarioInput.model_validate(scenario))

    metrics = [_metrics(s.name, engine.calculate(s.parameters)) for s in inputs]
    best = {
        key: find_best_scenario(metrics, attribute, minimize)
        for key, (attribute, minimize) in _COMPARED_METRICS.items()
    }

    logger.info("Compared %d scenarios", len(metrics))
    return ComparisonResult(
        scenarios=metrics,
        best_scenarios=best,
        summary=_comparison_summary(best),
    )


def _round1(value: Optional[float]) -> Optional[float]:
    return round(value, 1) if value is not None else None


def sales_summary(
    result: CalculationResult,
    building_address: Optional[str] = None,
    company_id: Optional[str] = None,
) -> SalesSummary:
    """Condense a standard result into rounded figures for a sales conversation."""
    config = result.configuration
    improved = result.neutrality.improved_year
    natural = result.neutrality.natural_year
    econ = result.economics

    years_saved = natural - improved if natural is not None and improved is not None else None
    payback = _round1(econ.simple_payback_years)
    payback_text = f"{payback:.1f} years" if payback is not None else "not applicable"

    return SalesSummary(
        project={
            "roof_area": config["roof_area"],
            "initial_co2_impact": round(config["initial_co2"]),
            "roof_division": config["roof_division"],
            "building_address": building_address or "Not specified",
            "company_id": company_id or "Not specified",
        },
        key_metrics={
            "years_to_neutrality": _round1(improved),
            "years_saved": _round1(years_saved),
            "annual_co2_savings": round(result.annual_savings),
            "ten_year_co2_savings": round(result.ten_year_savings),
        },
        economics={
            "estimated_cost": round(econ.estimated_cost),
            "payback_years": payback,
            "roi_10yr": _round1(econ.roi_10yr),
        },
        summary={
            "neutrality": (
                f"CO2 neutrality achieved in {improved:.1f} years"
                if improved is not None
                else "CO2 neutrality not achieved within the timeframe"
            ),
            "improvement": (
                f"Improvements accelerate neutrality by {years_saved:.1f} years"
                if years_saved is not None
                else "Improvement impact cannot be fully quantified within the timeframe"
            ),
            "economic": (
                f"Investment of {round(econ.estimated_cost):,} with payback in {payback_text}"
            ),
        },
    )
