from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from smartscore.models import Job


class InvalidMatchInputError(ValueError):
    """Raised when score() is handed something that is not a job / profile record."""


@dataclass(frozen=True)
class MatchAnalysis:
    strengths: List[str]
    improvements: List[str]
    recommendations: List[str]

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class MatchResult:
    total_score: int
    # Raw 0-100 per dimension, before weighting and the completeness multiplier
    breakdown: Dict[str, float]
    weights: Dict[str, float]
    profile_completeness: int
    completeness_multiplier: float
    analysis: MatchAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "breakdown": dict(self.breakdown),
            "weights": dict(self.weights),
            "profileCompleteness": self.profile_completeness,
            "completenessMultiplier": self.completeness_multiplier,
            "analysis": self.analysis.to_dict(),
        }


@dataclass(frozen=True)
class ScoredJob:
    job: Job
    result: MatchResult

    @property
    def score(self) -> int:
        return self.result.total_score
