from .engine import WEIGHTS, profile_completeness, rank_jobs, score
from .types import InvalidMatchInputError, MatchAnalysis, MatchResult, ScoredJob

__all__ = [
    "score",
    "rank_jobs",
    "profile_completeness",
    "WEIGHTS",
    "MatchResult",
    "MatchAnalysis",
    "ScoredJob",
    "InvalidMatchInputError",
]
