from __future__ import annotations

from typing import List, Optional, Sequence

from smartscore import config
from smartscore.core.parsing import (
    ExperienceRange,
    experience_range_from_bounds,
    highest_education_level,
    parse_experience_range,
    parse_salary_range,
    required_education_level,
)
from smartscore.core.text_processing import (
    extract_known_skills,
    location_segments,
    normalize_text,
    normalized_terms,
)
from smartscore.models import CandidateProfile, Job

# Neutral-score policy shared by every scorer:
# - job side unspecified          -> NEUTRAL (no opinion either way)
# - job specifies, profile lacks  -> a low, dimension-specific score (a real mismatch)
NEUTRAL = 50.0


def clamp_score(x: float) -> float:
    return 0.0 if x < 0.0 else (100.0 if x > 100.0 else float(x))


# --- Skills ---

def job_skills(job: Job, keywords: Optional[Sequence[str]] = None) -> List[str]:
    """Explicit `skills` field, else dictionary terms found in requirements (or description)."""
    if job.skills:
        return list(job.skills)
    kw = config.SKILL_KEYWORDS if keywords is None else keywords
    return extract_known_skills(job.requirements or job.description or "", kw)


def skills_match_score(job: Job, profile: CandidateProfile, *, keywords: Optional[Sequence[str]] = None) -> float:
    """
    80% for overlap (either side's normalized skill contains the other), 20% bonus for exact matches.

    Known weakness: overlap is substring-based, so "java" overlaps "javascript".
    """
    required = normalized_terms(job_skills(job, keywords))
    if not required:
        return NEUTRAL

    have = normalized_terms(profile.technical_skills)
    if not have:
        return 5.0

    have_set = set(have)
    overlap = sum(1 for r in required if any(h in r or r in h for h in have))
    exact = sum(1 for r in required if r in have_set)

    n = float(len(required))
    return clamp_score(min(100.0, (overlap / n) * 80 + (exact / n) * 20))


# --- Experience ---

def job_experience_range(job: Job) -> ExperienceRange:
    """Explicit experience text, then structured min/max years, then the description."""
    rng = parse_experience_range(job.experience)
    if rng.is_known:
        return rng
    rng = experience_range_from_bounds(job.experience_years_min, job.experience_years_max)
    if rng.is_known:
        return rng
    return parse_experience_range(job.description)


def experience_match_score(job: Job, profile: CandidateProfile) -> float:
    rng = job_experience_range(job)
    if not rng.is_known:
        return NEUTRAL

    years = profile.experience_years
    if years is None:
        return 10.0

    min_required = rng.min_years or 0.0
    if years == 0:
        # Entry-level roles still prefer some experience
        return 30.0 if min_required == 0 else 10.0

    max_required = rng.max_years or (min_required + 3)

    if min_required <= years <= max_required:
        return 100.0
    if years > max_required:
        return clamp_score(max(70.0, 100 - (years - max_required) * 5))
    return clamp_score(max(10.0, 80 - (min_required - years) * 15))


# --- Education ---

def job_education_level(job: Job) -> int:
    level = required_education_level(job.education_level)
    if level:
        return level
    return required_education_level(job.requirements or job.description or "")


def education_match_score(job: Job, profile: CandidateProfile) -> float:
    job_level = job_education_level(job)
    if job_level == 0:
        return NEUTRAL

    user_level = highest_education_level(profile.education)
    if user_level == 0:
        return 15.0

    if user_level >= job_level:
        # Slight penalty for over-qualification
        return clamp_score(100 - (user_level - job_level) * 5)
    return clamp_score(max(20.0, 80 - (job_level - user_level) * 20))


# --- Location ---

def location_match_score(job: Job, profile: CandidateProfile) -> float:
    job_loc = normalize_text(job.location)

    if normalize_text(job.work_mode) == "remote" or "remote" in job_loc:
        return 100.0

    if not job_loc:
        return NEUTRAL

    user_loc = normalize_text(profile.location)
    if not user_loc:
        return 20.0

    if job_loc == user_loc:
        return 100.0

    job_parts = location_segments(job.location or "")
    user_parts = location_segments(profile.location or "")

    # first segment ~ city
    if job_parts[0] and job_parts[0] == user_parts[0]:
        return 90.0

    # second segment ~ state / region
    if len(job_parts) > 1 and len(user_parts) > 1 and job_parts[1] and job_parts[1] == user_parts[1]:
        return 70.0

    return 40.0


# --- Salary ---

def salary_match_score(job: Job, profile: CandidateProfile) -> float:
    midpoint = parse_salary_range(job.salary, job.salary_min, job.salary_max).midpoint
    if not midpoint:
        return NEUTRAL

    expectation = profile.expected_salary
    if not expectation:
        return NEUTRAL

    if expectation <= midpoint:
        return 100.0

    gap_pct = (expectation - midpoint) / expectation * 100
    return clamp_score(max(20.0, 100 - gap_pct))


# --- Preferences ---

def industry_match_score(job: Job, profile: CandidateProfile) -> float:
    industry = normalize_text(job.industry)
    preferred = normalized_terms(profile.preferred_industries)
    if not industry or not preferred:
        return NEUTRAL
    return 100.0 if industry in preferred else 30.0


def job_type_match_score(job: Job, profile: CandidateProfile) -> float:
    job_type = normalize_text(job.job_type)
    preferred = normalized_terms(profile.preferred_job_types)
    if not job_type or not preferred:
        return NEUTRAL
    return 100.0 if job_type in preferred else 25.0


def company_size_match_score(job: Job, profile: CandidateProfile) -> float:
    size = normalize_text(job.company_size)
    preferred = normalize_text(profile.preferred_company_size)
    if not size or not preferred:
        return NEUTRAL
    return 100.0 if size == preferred else 30.0
