"""Convert engine results to JSON-ready dicts.

Key names follow the public response format so a calling layer can return
these dicts unchanged.
"""

from __future__ import annotations

from dataclasses import asdict
from enum import Enum
from typing import Any

from co2calc.engine.result import (
    BatchResult,
    CalculationResult,
    ComparisonResult,
    EnhancedCalculationResult,
    HealthImpactReport,
    SalesSummary,
    SDGReport,
)


def _plain(value: Any) -> Any:
    """Recursively replace enums with their values and tuples with lists."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_plain(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def calculation_result_to_dict(result: CalculationResult) -> dict:
    """Convert CalculationResult to a serializable dict."""
    return _plain({
        "configuration": result.configuration,
        "timeline": {
            "years": result.timeline.years,
            "co2_with_improvements": result.timeline.co2_improved,
            "co2_natural_decline": result.timeline.co2_natural,
        },
        "neutrality": {
            "with_improvements": result.neutrality.improved_year,
            "natural_decline": result.neutrality.natural_year,
        },
        "savings": {
            "annual": result.annual_savings,
            "ten_year": result.ten_year_savings,
        },
        "economics": {
            "estimated_cost": result.economics.estimated_cost,
            "simple_payback_years": result.economics.simple_payback_years,
            "roi_10yr": result.economics.roi_10yr,
        },
        "intensity": {
            "carbon_per_sqm": result.intensity.carbon_per_sqm,
            "reduction_per_euro": result.intensity.reduction_per_euro,
        },
        "summary": result.summary,
    })


def simple_result_to_dict(result: CalculationResult) -> dict:
    """Condensed view returned for the area-and-division-only calculation."""
    return {
        "years_to_neutrality": result.neutrality.improved_year,
        "annual_savings": result.annual_savings,
        "ten_year_savings": result.ten_year_savings,
        "estimated_cost": result.economics.estimated_cost,
        "simple_payback_years": result.economics.simple_payback_years,
        "roi_10yr": result.economics.roi_10yr,
    }


def enhanced_result_to_dict(result: EnhancedCalculationResult) -> dict:
    """Convert EnhancedCalculationResult to a serializable dict."""
    sdg = result.sdg_alignment
    return _plain({
        "configuration": result.configuration,
        "environmental_impact": asdict(result.environmental_impact),
        "social_impact": asdict(result.social_impact),
        "health_impact": asdict(result.health_impact),
        "sdg_alignment": {
            "sdgs_addressed": sdg.sdgs_addressed,
            "sdg_alignment_score": sdg.sdg_alignment_score,
            "alignment_rating": sdg.rating,
        },
        "sustainability": {
            "sustainability_score": result.sustainability.value,
            "rating": result.sustainability.rating,
        },
        "economics": asdict(result.economics),
        "projections": asdict(result.projections),
        "summary": result.summary,
    })


def health_report_to_dict(report: HealthImpactReport) -> dict:
    health = report.health
    return _plain({
        "roof_configuration": {
            "roof_area": report.roof_area,
            "roof_division": report.roof_division,
            "green_roof_area": health.green_roof_area,
            "green_view_percentage": health.green_view_percentage,
        },
        "building_occupancy": {
            "employees": report.employees,
            "building_occupants": report.building_occupants,
            "percentage_with_green_view": health.green_view_percentage,
        },
        "health_impacts": {
            "stress_reduction_percentage": health.stress_reduction_percentage,
            "hypertension_reduction": health.hypertension_reduction,
            "mortality_reduction": health.mortality_reduction,
            "productivity_increase": health.productivity_increase,
            "sick_days_reduction": health.sick_days_reduction,
            "health_impact_score": health.health_impact_score,
            "health_impact_rating": health.health_impact_rating,
        },
        "economic_benefits": asdict(report.economic_benefits),
        "summary": report.summary,
    })


def sdg_report_to_dict(report: SDGReport) -> dict:
    return _plain({
        "company_name": report.company_name,
        "project_name": report.project_name,
        "roof_division": report.roof_division,
        "sdg_alignment": {
            "sdgs_addressed": [asdict(d) for d in report.sdgs_addressed],
            "sdg_alignment_score": report.sdg_alignment_score,
            "alignment_rating": report.alignment_rating,
        },
        "recommendations": asdict(report.recommendations),
    })


def batch_result_to_dict(result: BatchResult) -> dict:
    return {
        "batch_size": result.batch_size,
        "results": [
            {
                "building_id": item.building_id,
                "results": {
                    "neutrality": {
                        "with_improvements": item.neutrality.improved_year,
                        "natural_decline": item.neutrality.natural_year,
                    },
                    "savings": {
                        "annual": item.annual_savings,
                        "ten_year": item.ten_year_savings,
                    },
                    "economics": asdict(item.economics),
                },
            }
            for item in result.items
        ],
    }


def comparison_result_to_dict(result: ComparisonResult) -> dict:
    return {
        "scenarios": [asdict(s) for s in result.scenarios],
        "best_scenarios": {k: asdict(v) for k, v in result.best_scenarios.items()},
        "summary": result.summary,
    }


def sales_summary_to_dict(summary: SalesSummary) -> dict:
    return asdict(summary)
