from __future__ import annotations

import math
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from smartscore.models import CandidateProfile, Job

from .analysis import generate_analysis
from .scoring import (
    company_size_match_score,
    education_match_score,
    experience_match_score,
    industry_match_score,
    job_type_match_score,
    location_match_score,
    salary_match_score,
    skills_match_score,
)
from .types import InvalidMatchInputError, MatchResult, ScoredJob


# Must sum to 1.00
WEIGHTS: Dict[str, float] = {
    "skillsMatch": 0.30,
    "experienceMatch": 0.25,
    "educationMatch": 0.15,
    "locationMatch": 0.10,
    "salaryMatch": 0.08,
    "industryMatch": 0.05,
    "jobTypeMatch": 0.04,
    "companySizeMatch": 0.03,
}

# A profile this sparse still keeps 30% of its weighted score
MIN_COMPLETENESS_MULTIPLIER = 0.30

_FIELD_POINTS = 10


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def profile_completeness(profile: CandidateProfile) -> int:
    """
    Percentage of ten profile fields that are populated, 10 points each.
    Required half: skills, experience, education, location, expected salary, preferred industries.
    Optional half: summary, projects, certifications, job preferences.
    """
    populated = [
        # required
        bool(profile.technical_skills),
        profile.experience_years is not None,
        bool(profile.education),
        bool(profile.location),
        profile.expected_salary is not None,
        bool(profile.preferred_industries),
        # optional
        bool(profile.summary),
        bool(profile.projects),
        bool(profile.certifications),
        profile.job_preferences is not None,
    ]
    score = sum(_FIELD_POINTS for p in populated if p)
    max_score = _FIELD_POINTS * len(populated)
    return round_half_up(score / max_score * 100)


def _coerce_job(job: Any) -> Job:
    if isinstance(job, Job):
        return job
    if isinstance(job, Mapping):
        return Job.from_dict(job)
    raise InvalidMatchInputError(f"job must be a Job or a mapping, got {type(job).__name__}")


def _coerce_profile(profile: Any) -> CandidateProfile:
    if isinstance(profile, CandidateProfile):
        return profile
    if isinstance(profile, Mapping):
        return CandidateProfile.from_dict(profile)
    raise InvalidMatchInputError(f"profile must be a CandidateProfile or a mapping, got {type(profile).__name__}")


def _dimension_scorers(skill_keywords: Optional[Sequence[str]]) -> List[Tuple[str, Callable[[Job, CandidateProfile], float]]]:
    return [
        ("skillsMatch", lambda j, p: skills_match_score(j, p, keywords=skill_keywords)),
        ("experienceMatch", experience_match_score),
        ("educationMatch", education_match_score),
        ("locationMatch", location_match_score),
        ("salaryMatch", salary_match_score),
        ("industryMatch", industry_match_score),
        ("jobTypeMatch", job_type_match_score),
        ("companySizeMatch", company_size_match_score),
    ]


def score(job: Any, profile: Any, *, skill_keywords: Optional[Sequence[str]] = None) -> MatchResult:
    """
    Smart Score for one (job, profile) pair.

    Accepts the dataclasses or raw camelCase mappings. Pure: no I/O, no shared
    state, inputs are never mutated. Missing or wrong-typed fields fall back to
    the neutral/low defaults of each dimension; only a non-record job/profile raises.
    """
    j = _coerce_job(job)
    p = _coerce_profile(profile)

    breakdown = {name: scorer(j, p) for name, scorer in _dimension_scorers(skill_keywords)}

    raw_total = sum(breakdown[name] * weight for name, weight in WEIGHTS.items())

    completeness = profile_completeness(p)
    multiplier = max(MIN_COMPLETENESS_MULTIPLIER, completeness / 100)

    total = round_half_up(raw_total * multiplier)
    total = max(0, min(100, total))

    return MatchResult(
        total_score=total,
        breakdown=breakdown,
        weights=dict(WEIGHTS),
        profile_completeness=completeness,
        completeness_multiplier=round(multiplier, 2),
        analysis=generate_analysis(breakdown),
    )


def rank_jobs(
        profile: Any,
        jobs: Iterable[Any],
        top_n: Optional[int] = None,
        *,
        skill_keywords: Optional[Sequence[str]] = None,
) -> List[ScoredJob]:
    """
    Score every job for one profile, highest first. The sort is stable, so
    equal scores keep the order the jobs came in.
    """
    p = _coerce_profile(profile)
    scored = []
    for job in jobs:
        j = _coerce_job(job)
        scored.append(ScoredJob(job=j, result=score(j, p, skill_keywords=skill_keywords)))
    scored.sort(key=lambda x: x.score, reverse=True)
    return scored if top_n is None else scored[:top_n]
