from __future__ import annotations

import pytest

from smartscore.core.parsing import (
    ExperienceRange,
    SalaryRange,
    education_levels_in,
    experience_range_from_bounds,
    highest_education_level,
    money_amounts,
    parse_experience_range,
    parse_money,
    parse_salary_range,
    parse_years,
    required_education_level,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3-5 years", ExperienceRange(3, 5)),
        ("3 - 5 years of experience", ExperienceRange(3, 5)),
        ("2 to 4 years", ExperienceRange(2, 4)),
        ("5+ years", ExperienceRange(5, 10)),
        ("At least 2 years in a similar role", ExperienceRange(2, 3)),
        ("Entry-level", ExperienceRange(0, 2)),
        ("Junior developer", ExperienceRange(0, 2)),
        ("Mid-level", ExperienceRange(2, 5)),
        ("Senior", ExperienceRange(5, 10)),
        ("Tech lead", ExperienceRange(5, 10)),
    ],
)
def test_parse_experience_range_patterns(text, expected) -> None:
    assert parse_experience_range(text) == expected


def test_parse_experience_range_unknown_inputs() -> None:
    for value in (None, "", "   ", "Great culture", 5, ["3 years"]):
        rng = parse_experience_range(value)
        assert rng == ExperienceRange()
        assert not rng.is_known


def test_level_words_match_whole_words_only() -> None:
    # "leadership" must not read as "lead"
    assert not parse_experience_range("Strong leadership skills").is_known


def test_experience_range_from_bounds() -> None:
    assert experience_range_from_bounds(2, None) == ExperienceRange(2, None)
    assert experience_range_from_bounds("2", -1) == ExperienceRange()
    assert not experience_range_from_bounds(0, 0).is_known


def test_parse_years_is_total() -> None:
    assert parse_years(5) == 5.0
    assert parse_years(2.5) == 2.5
    assert parse_years("4 years") == 4.0
    assert parse_years("about 2.5 yrs") == 2.5
    assert parse_years("fresher") == 0.0
    assert parse_years("") is None
    assert parse_years("   ") is None
    assert parse_years(None) is None
    assert parse_years(True) is None
    assert parse_years(-3) is None
    assert parse_years({"years": 3}) is None


def test_education_scale_detection() -> None:
    assert education_levels_in("High school diploma") == [1, 2]
    assert education_levels_in("Ph.D. in Physics") == [5]
    assert education_levels_in("Graph design") == []
    assert education_levels_in(None) == []


def test_required_education_level_takes_the_minimum_bar() -> None:
    assert required_education_level("Bachelor's or Master's degree required") == 3
    assert required_education_level("PhD preferred") == 5
    assert required_education_level("Any degree") == 0


def test_highest_education_level_takes_the_best_entry() -> None:
    assert highest_education_level(["High School", "Master of Science"]) == 4
    assert highest_education_level(["Bootcamp"]) == 0
    assert highest_education_level([]) == 0


def test_money_amounts() -> None:
    assert money_amounts("$50,000 - $70,000") == [50000.0, 70000.0]
    assert money_amounts("80k") == [80000.0]
    assert money_amounts("2.5M USD") == [2500000.0]
    assert money_amounts("Negotiable") == []
    assert money_amounts(None) == []


def test_parse_money() -> None:
    assert parse_money(95000) == 95000.0
    assert parse_money("$95,000") == 95000.0
    assert parse_money(0) is None
    assert parse_money("competitive") is None
    assert parse_money(False) is None


def test_salary_midpoint_defaults_max_to_one_and_a_half_min() -> None:
    assert parse_salary_range(None, 50000, None).midpoint == 62500
    assert parse_salary_range(None, 50000, 70000).midpoint == 60000


def test_salary_text_wins_over_min_field() -> None:
    rng = parse_salary_range("$60,000 - $70,000", 10000, None)
    assert rng == SalaryRange(60000, 70000)


def test_salary_only_max_uses_max_as_midpoint() -> None:
    assert parse_salary_range(None, None, 80000).midpoint == 80000


def test_salary_swapped_range_is_repaired() -> None:
    assert parse_salary_range(None, 90000, 60000) == SalaryRange(60000, 90000)


def test_salary_unknown() -> None:
    assert parse_salary_range(None, None, None).midpoint is None
    assert parse_salary_range("DOE", None, None).midpoint is None


def test_salary_range_sharing_one_suffix() -> None:
    rng = parse_salary_range("$100-120k", None, None)
    assert rng == SalaryRange(100000, 120000)
    assert rng.midpoint == 110000
    assert money_amounts("80 to 100k") == [80000.0, 100000.0]


def test_salary_text_ignores_benefit_numbers() -> None:
    assert parse_salary_range("$90,000 plus 401k match", None, None) == SalaryRange(90000, None)
    assert money_amounts("$90,000 base, 401(k), 5 weeks PTO") == [90000.0]


def test_education_keywords_need_a_word_ending() -> None:
    assert required_education_level("Experience mastering React and TypeScript") == 0
    assert education_levels_in("Diplomatic communication") == []
    assert education_levels_in("Masters degree") == [4]
    assert required_education_level("Bachelor's degree") == 3
