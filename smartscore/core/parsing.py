from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from smartscore.core.text_processing import normalize_text

# All helpers here are total: any input (str, number, None, wrong type) yields a
# value or an "unknown" sentinel. Scorers map the sentinel to their neutral/low branch.


@dataclass(frozen=True)
class ExperienceRange:
    min_years: Optional[float] = None
    max_years: Optional[float] = None

    @property
    def is_known(self) -> bool:
        # (0, 0) carries no requirement either
        return bool(self.min_years) or bool(self.max_years)


@dataclass(frozen=True)
class SalaryRange:
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None

    @property
    def midpoint(self) -> Optional[float]:
        if self.min_amount is None and self.max_amount is None:
            return None
        if self.min_amount is None:
            return self.max_amount
        hi = self.max_amount if self.max_amount is not None else self.min_amount * 1.5
        return (self.min_amount + hi) / 2


# --- Experience ---

_YEARS = r"(?:years?|yrs?)\b"
_RANGE_RE = re.compile(r"(\d+)[\s-]*(?:to|-)\s*(\d+)?\s*" + _YEARS, re.IGNORECASE)
_SINGLE_RE = re.compile(r"(\d+)\s*(\+)?\s*" + _YEARS, re.IGNORECASE)
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")

_LEVEL_RANGES = (
    (("entry", "junior"), ExperienceRange(0, 2)),
    (("mid", "intermediate"), ExperienceRange(2, 5)),
    (("senior", "lead"), ExperienceRange(5, 10)),
)


def parse_experience_range(text: object) -> ExperienceRange:
    """
    "3-5 years" / "3 to 5 years" -> (3, 5)   (missing upper bound -> min + 2)
    "5+ years"                     -> (5, 10)
    "2 years"                      -> (2, 3)
    level words: entry/junior (0, 2), mid/intermediate (2, 5), senior/lead (5, 10)
    anything else                  -> ExperienceRange()
    """
    if not isinstance(text, str) or not text.strip():
        return ExperienceRange()

    m = _RANGE_RE.search(text)
    if m:
        lo = int(m.group(1))
        hi = int(m.group(2)) if m.group(2) else lo + 2
        return ExperienceRange(float(lo), float(hi))

    m = _SINGLE_RE.search(text)
    if m:
        years = int(m.group(1))
        return ExperienceRange(float(years), float(years + 5 if m.group(2) else years + 1))

    words = set(normalize_text(text).split())
    for level_words, rng in _LEVEL_RANGES:
        if words.intersection(level_words):
            return rng

    return ExperienceRange()


def experience_range_from_bounds(min_years: object, max_years: object) -> ExperienceRange:
    return ExperienceRange(_non_negative(min_years), _non_negative(max_years))


def parse_years(value: object) -> Optional[float]:
    """
    Candidate experience as a year count.
    None / "" / wrong type -> None (no data). Text without digits -> 0.0 (stated, but no years).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _non_negative(value)
    if isinstance(value, str):
        if not value.strip():
            return None
        m = _NUMBER_RE.search(value)
        return float(m.group(0)) if m else 0.0
    return None


def _non_negative(value: object) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    v = float(value)
    if math.isnan(v) or math.isinf(v) or v < 0:
        return None
    return v


# --- Education ---

# Ordered scale. "ph d" is what "Ph.D." normalizes to.
EDUCATION_LEVELS = (
    ("high school", 1),
    ("diploma", 2),
    ("bachelor", 3),
    ("master", 4),
    ("phd", 5),
    ("ph d", 5),
    ("doctorate", 5),
)

# Plural / possessive ("masters", "bachelor s") still count; "mastering", "diplomatic" do not.
_EDUCATION_RES = [(re.compile(r"\b" + re.escape(kw) + r"(?:s\b|\b)"), level) for kw, level in EDUCATION_LEVELS]


def education_levels_in(text: object) -> List[int]:
    normalized = normalize_text(text)
    if not normalized:
        return []
    return [level for rx, level in _EDUCATION_RES if rx.search(normalized)]


def required_education_level(text: object) -> int:
    """Lowest level a job mentions (its minimum bar); 0 when none."""
    levels = education_levels_in(text)
    return min(levels) if levels else 0


def highest_education_level(entries: Iterable[str]) -> int:
    """Highest level across a candidate's education entries; 0 when none."""
    best = 0
    for entry in entries or []:
        for level in education_levels_in(entry):
            best = max(best, level)
    return best


# --- Money / salary ---

_MONEY_RE = re.compile(r"(\$\s*)?(\d[\d,]*(?:\.\d+)?)(?:\s*([km])\b)?", re.IGNORECASE)
_RANGE_SEP_RE = re.compile(r"\s*(?:-|–|to)\s*", re.IGNORECASE)
_RETIREMENT_PLAN_RE = re.compile(r"\b401\s*\(?k\)?", re.IGNORECASE)
_SUFFIX = {"k": 1_000.0, "m": 1_000_000.0}


def money_amounts(text: str) -> List[float]:
    """
    "$50,000 - $70,000"       -> [50000.0, 70000.0]
    "80k"                     -> [80000.0]
    "$100-120k"               -> [100000.0, 120000.0]
    "$90,000 plus 401k match" -> [90000.0]

    After the first amount, only "$"-prefixed amounts or the far end of a
    range ("-" / "to") count. Other numbers in the text (benefits, PTO) are skipped.
    """
    if not isinstance(text, str):
        return []
    text = _RETIREMENT_PLAN_RE.sub(" ", text)

    out: List[float] = []
    prev_end = -1
    prev_raw = 0.0
    prev_suffixed = False
    for m in _MONEY_RE.finditer(text):
        try:
            raw = float(m.group(2).replace(",", ""))
        except ValueError:
            continue
        if raw <= 0:
            continue

        suffix = (m.group(3) or "").lower()
        joined = bool(out) and _RANGE_SEP_RE.fullmatch(text[prev_end:m.start()]) is not None
        if out and not (m.group(1) or joined):
            continue

        multiplier = _SUFFIX.get(suffix, 1.0)
        # "$100-120k": the suffix covers both ends of the range
        if joined and suffix and not prev_suffixed and prev_raw < 1000 and prev_raw < raw:
            out[-1] = prev_raw * multiplier

        out.append(raw * multiplier)
        prev_end = m.end()
        prev_raw = raw
        prev_suffixed = bool(suffix)
    return out


def parse_money(value: object) -> Optional[float]:
    """A single positive amount from a number or text; None otherwise."""
    if isinstance(value, str):
        amounts = money_amounts(value)
        return amounts[0] if amounts else None
    v = _non_negative(value)
    return v if v else None


def parse_salary_range(
        salary_text: Optional[str],
        salary_min: Optional[float],
        salary_max: Optional[float],
) -> SalaryRange:
    """
    Free-text `salary` wins over `salaryMin` for the lower bound; an explicit
    `salaryMax` wins over a second amount found in the text.
    """
    amounts = money_amounts(salary_text) if salary_text else []
    lo = amounts[0] if amounts else parse_money(salary_min)
    hi = parse_money(salary_max) or (amounts[1] if len(amounts) > 1 else None)

    # Guard: swapped ranges
    if lo is not None and hi is not None and hi < lo:
        lo, hi = hi, lo

    return SalaryRange(lo, hi)
