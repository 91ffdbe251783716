"""SDG alignment scoring, ratings and gap recommendations."""

from __future__ import annotations

from typing import Sequence

from co2calc.engine.result import SDGDetail, SDGRecommendations, SDGSuggestion
from co2calc.engine.sustainability import sustainability_rating
from co2calc.models.enums import SDGAlignmentRating, SustainabilityRating
from co2calc.reference.schema import SDG_COUNT, ReferenceTables

MAX_SUGGESTIONS = 3
NO_DESCRIPTION = "No description available"
NO_CONTRIBUTION = "No contribution details available"


def sdg_alignment_score(addressed: Sequence[str]) -> float:
    """Share of the 17 goals addressed, as a percentage capped at 100."""
    return min(100.0, (len(addressed) / SDG_COUNT) * 100)


def sdg_alignment_rating(score: float) -> SDGAlignmentRating:
    """Five-tier rating used by the enhanced calculation.

    >= 90 -> EXCEPTIONAL
    >= 70 -> STRONG
    >= 50 -> GOOD
    >= 30 -> MODERATE
    <  30 -> LIMITED
    """
    if score >= 90:
        return SDGAlignmentRating.EXCEPTIONAL
    if score >= 70:
        return SDGAlignmentRating.STRONG
    if score >= 50:
        return SDGAlignmentRating.GOOD
    if score >= 30:
        return SDGAlignmentRating.MODERATE
    return SDGAlignmentRating.LIMITED


def sdg_report_rating(score: float) -> SustainabilityRating:
    """Seven-tier rating used by the standalone SDG report."""
    return sustainability_rating(score)


def describe_sdgs(addressed: Sequence[str], tables: ReferenceTables) -> list[SDGDetail]:
    details: list[SDGDetail] = []
    for name in addressed:
        entry = tables.sdg(name)
        details.append(
            SDGDetail(
                name=name,
                description=(entry.description if entry and entry.description else NO_DESCRIPTION),
                contribution=(entry.contribution if entry and entry.contribution else NO_CONTRIBUTION),
            )
        )
    return details


def sdg_recommendations(
    addressed: Sequence[str], tables: ReferenceTables
) -> SDGRecommendations:
    """Suggest up to three roof-relevant goals the project does not address yet."""
    pct = round((len(addressed) / SDG_COUNT) * 100)
    current = (
        f"The project currently addresses {len(addressed)} out of {SDG_COUNT} SDGs "
        f"({pct}% alignment)."
    )

    not_addressed = [name for name in tables.populated_sdgs() if name not in addressed]
    if not not_addressed:
        return SDGRecommendations(
            current_alignment=current,
            suggestions=[
                SDGSuggestion(
                    sdg="All SDGs",
                    suggestion=(
                        "Excellent work! Your project already addresses all the key "
                        "SDGs relevant to roof improvements."
                    ),
                )
            ],
        )

    return SDGRecommendations(
        current_alignment=current,
        suggestions=[
            SDGSuggestion(
                sdg=name,
                suggestion=(
                    f"Consider incorporating elements that address {name} "
                    "to improve SDG alignment."
                ),
            )
            for name in not_addressed[:MAX_SUGGESTIONS]
        ],
    )
