from enum import Enum


class ClimateZone(str, Enum):
    TEMPERATE = "temperate"
    TROPICAL = "tropical"
    ARID = "arid"
    CONTINENTAL = "continental"
    POLAR = "polar"


class CalculationType(str, Enum):
    SIMPLE = "simple"
    STANDARD = "standard"
    ENHANCED = "enhanced"
    SALES = "sales"
    BATCH = "batch"
    COMPARISON = "comparison"
    SDG_REPORT = "sdg-report"
    HEALTH_IMPACT = "health-impact"


class SustainabilityRating(str, Enum):
    """Seven-tier scale shared by the sustainability score and the SDG report."""

    OUTSTANDING = "Outstanding"
    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    SATISFACTORY = "Satisfactory"
    ACCEPTABLE = "Acceptable"
    NEEDS_IMPROVEMENT = "Needs Improvement"


class SDGAlignmentRating(str, Enum):
    """Five-tier scale used by the enhanced calculation."""

    EXCEPTIONAL = "Exceptional"
    STRONG = "Strong"
    GOOD = "Good"
    MODERATE = "Moderate"
    LIMITED = "Limited"


class HealthImpactRating(str, Enum):
    TRANSFORMATIVE = "Transformative"
    SIGNIFICANT = "Significant"
    MODERATE = "Moderate"
    MODEST = "Modest"
    MINIMAL = "Minimal"


class HeatWaveResilience(str, Enum):
    IMPROVED = "Improved"
    STANDARD = "Standard"
