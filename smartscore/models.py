from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from smartscore.core.text_processing import normalize_whitespace, split_skills
from smartscore.core.parsing import parse_money, parse_years


# Records arrive as loosely-typed camelCase mappings (the JSON store, API payloads).
# from_dict() is the one place shapes get coerced; everything downstream sees
# canonical types. Wrong-typed values become "absent", never an exception.


def _text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, str):
        return None
    t = normalize_whitespace(value)
    return t or None


def _first_text(data: Mapping[str, Any], *keys: str) -> Optional[str]:
    for k in keys:
        t = _text(data.get(k))
        if t is not None:
            return t
    return None


def _identity(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    t = str(value).strip()
    return t or None


def _entries(value: Any) -> Tuple[Any, ...]:
    """Non-empty list items (strings trimmed); a bare non-empty string becomes a single entry."""
    if isinstance(value, str):
        t = normalize_whitespace(value)
        return (t,) if t else ()
    if not isinstance(value, (list, tuple)):
        return ()
    out = []
    for item in value:
        if isinstance(item, str):
            item = normalize_whitespace(item)
        if item is None or item == "" or (isinstance(item, (list, tuple, Mapping)) and not item):
            continue
        out.append(item)
    return tuple(out)


def _education_entries(value: Any) -> Tuple[str, ...]:
    """
    Education may be "Master's in CS", ["BSc", "MSc"], or
    [{"degree": "Bachelor of Science", "field": "CS", "institution": ...}, ...].
    """
    out = []
    for item in _entries(value):
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Mapping):
            parts = [_text(item.get(k)) for k in ("degree", "level", "field")]
            joined = " ".join(p for p in parts if p)
            if not joined:
                # {"institution": "MIT"} names no level but is still an education entry
                joined = " ".join(t for t in (_text(v) for v in item.values()) if t)
            if joined:
                out.append(joined)
    return tuple(out)


@dataclass(frozen=True)
class JobPreferences:
    job_types: Tuple[str, ...] = ()
    company_size: Optional[str] = None
    # Keys we do not score on (preferred roles, notice period, ...) still make the
    # preferences object "non-empty" for completeness purposes.
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Optional["JobPreferences"]:
        """None for a missing, wrong-typed, or empty preferences object."""
        if not isinstance(data, Mapping) or not data:
            return None
        return cls(
            job_types=split_skills(data.get("jobTypes")),
            company_size=_text(data.get("companySize")),
            extras={k: v for k, v in data.items() if k not in ("jobTypes", "companySize")},
        )


@dataclass(frozen=True)
class Job:
    """
    A job posting as the matcher sees it. Every field is optional except identity;
    None / () mean "unspecified", never zero or false.
    """
    job_id: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    skills: Tuple[str, ...] = ()

    experience: Optional[str] = None
    experience_years_min: Optional[float] = None
    experience_years_max: Optional[float] = None
    education_level: Optional[str] = None

    location: Optional[str] = None
    work_mode: Optional[str] = None  # "remote" | "hybrid" | "onsite"

    salary: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None

    industry: Optional[str] = None
    job_type: Optional[str] = None
    company_size: Optional[str] = None

    is_active: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Job":
        is_active = data.get("isActive")
        return cls(
            job_id=_identity(data.get("id")),
            title=_text(data.get("title")),
            company=_first_text(data, "companyName", "company"),
            description=_text(data.get("description")),
            requirements=_text(data.get("requirements")),
            skills=split_skills(data.get("skills")),
            experience=_text(data.get("experience")),
            experience_years_min=parse_years(data.get("experienceYearsMin")),
            experience_years_max=parse_years(data.get("experienceYearsMax")),
            education_level=_text(data.get("educationLevel")),
            location=_text(data.get("location")),
            work_mode=_text(data.get("workMode")),
            salary=_text(data.get("salary")),
            salary_min=parse_money(data.get("salaryMin")),
            salary_max=parse_money(data.get("salaryMax")),
            industry=_text(data.get("industry")),
            job_type=_first_text(data, "jobType", "type", "employmentType"),
            company_size=_text(data.get("companySize")),
            # The JSON store writes 1/0; absent means active.
            is_active=is_active is None or bool(is_active),
        )


@dataclass(frozen=True)
class CandidateProfile:
    """
    A candidate as the matcher sees it, in canonical form:
    experience is a year count, education a tuple of entries, money a float.
    """
    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None

    technical_skills: Tuple[str, ...] = ()
    experience_years: Optional[float] = None
    education: Tuple[str, ...] = ()
    location: Optional[str] = None
    expected_salary: Optional[float] = None
    preferred_industries: Tuple[str, ...] = ()
    job_preferences: Optional[JobPreferences] = None
    job_type: Optional[str] = None  # older records keep the job-type preference at the top level

    summary: Optional[str] = None
    projects: Tuple[Any, ...] = ()
    certifications: Tuple[Any, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CandidateProfile":
        location = _first_text(data, "location", "address")
        if location is None:
            parts = [_text(data.get(k)) for k in ("city", "state", "country")]
            location = ", ".join(p for p in parts if p) or None

        name = _text(data.get("name"))
        if name is None:
            parts = [_text(data.get(k)) for k in ("firstName", "lastName")]
            name = " ".join(p for p in parts if p) or None

        return cls(
            user_id=_identity(data.get("id")),
            name=name,
            email=_text(data.get("email")),
            technical_skills=split_skills(data.get("technicalSkills")) or split_skills(data.get("skills")),
            experience_years=parse_years(data.get("experience")),
            education=_education_entries(data.get("education")),
            location=location,
            expected_salary=parse_money(data.get("expectedSalary")),
            preferred_industries=split_skills(data.get("preferredIndustries")),
            job_preferences=JobPreferences.from_dict(data.get("jobPreferences")),
            job_type=_text(data.get("jobType")),
            summary=_text(data.get("summary")),
            projects=_entries(data.get("projects")),
            certifications=_entries(data.get("certifications")),
        )

    @property
    def preferred_job_types(self) -> Tuple[str, ...]:
        if self.job_preferences and self.job_preferences.job_types:
            return self.job_preferences.job_types
        return (self.job_type,) if self.job_type else ()

    @property
    def preferred_company_size(self) -> Optional[str]:
        return self.job_preferences.company_size if self.job_preferences else None

    def with_summary(self, summary: str) -> "CandidateProfile":
        return replace(self, summary=_text(summary))
