from __future__ import annotations

from typing import Mapping

from .types import MatchAnalysis

STRENGTH_THRESHOLD = 80
IMPROVEMENT_THRESHOLD = 60

_STRENGTHS = (
    ("skillsMatch", "Excellent skills match for this position"),
    ("experienceMatch", "Experience level aligns well with job requirements"),
    ("educationMatch", "Educational background meets job requirements"),
)

_IMPROVEMENTS = (
    ("skillsMatch", "Consider developing skills mentioned in job requirements"),
    ("experienceMatch", "Gain more relevant work experience"),
    ("locationMatch", "Consider remote work options or relocation"),
)

# (minimum skills+experience, recommendation), checked top-down
_RECOMMENDATION_TIERS = (
    (160, "Excellent match! Apply immediately."),
    (120, "Good match. Consider applying with a strong cover letter."),
    (80, "Moderate match. Focus on addressing skill gaps first."),
)
_LOW_MATCH = "Low match. Consider similar roles that better fit your profile."


def generate_analysis(breakdown: Mapping[str, float]) -> MatchAnalysis:
    """
    Rule-based explanation of the raw breakdown (pre-weighting, pre-penalty).
    Missing dimensions read as 0.
    """
    strengths = [msg for key, msg in _STRENGTHS if breakdown.get(key, 0) >= STRENGTH_THRESHOLD]
    improvements = [msg for key, msg in _IMPROVEMENTS if breakdown.get(key, 0) < IMPROVEMENT_THRESHOLD]

    core = breakdown.get("skillsMatch", 0) + breakdown.get("experienceMatch", 0)
    recommendation = _LOW_MATCH
    for minimum, msg in _RECOMMENDATION_TIERS:
        if core >= minimum:
            recommendation = msg
            break

    return MatchAnalysis(
        strengths=strengths,
        improvements=improvements,
        recommendations=[recommendation],
    )
