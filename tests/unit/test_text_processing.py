from __future__ import annotations

from smartscore.config import DEFAULT_SKILL_KEYWORDS
from smartscore.core.text_processing import (
    contains_term,
    extract_known_skills,
    location_segments,
    normalize_text,
    normalized_terms,
    split_skills,
)


def test_normalize_text_lowercases_and_replaces_punctuation() -> None:
    assert normalize_text("  Node.JS,   React!! ") == "node js react"
    assert normalize_text("UI/UX\tDesign\n") == "ui ux design"


def test_normalize_text_is_idempotent() -> None:
    samples = ["Python.", "  C++ / C# ", "Ph.D. in Physics", "São Paulo, SP", "full-time", "!!!"]
    for s in samples:
        once = normalize_text(s)
        assert normalize_text(once) == once


def test_normalize_text_non_string_is_empty() -> None:
    assert normalize_text(None) == ""
    assert normalize_text(42) == ""
    assert normalize_text(["python"]) == ""


def test_split_skills_accepts_text_and_lists() -> None:
    assert split_skills("Python, SQL, ,  AWS ") == ("Python", "SQL", "AWS")
    assert split_skills(["Python", 3, "  Go  ", ""]) == ("Python", "Go")
    assert split_skills(None) == ()
    assert split_skills({"python": True}) == ()


def test_normalized_terms_drops_items_that_normalize_to_nothing() -> None:
    assert normalized_terms(["Python", "!!!", " ", "Node.js"]) == ["python", "node js"]


def test_contains_term_is_whole_word() -> None:
    assert contains_term("strong javascript skills", "javascript")
    assert not contains_term("strong javascript skills", "java")
    assert contains_term("project management and scrum", "project management")
    assert not contains_term("", "python")
    assert not contains_term("python", "")


def test_extract_known_skills_preserves_dictionary_order() -> None:
    text = "We use Docker daily. Python experience required, plus SQL."
    assert extract_known_skills(text, DEFAULT_SKILL_KEYWORDS) == ["Python", "SQL", "Docker"]


def test_extract_known_skills_does_not_confuse_java_with_javascript() -> None:
    found = extract_known_skills("Strong JavaScript skills", DEFAULT_SKILL_KEYWORDS)
    assert "JavaScript" in found
    assert "Java" not in found


def test_extract_known_skills_respects_custom_dictionary() -> None:
    assert extract_known_skills("Terraform and Go on GCP", ["Go", "Terraform", "Rust"]) == ["Go", "Terraform"]
    assert extract_known_skills("", DEFAULT_SKILL_KEYWORDS) == []


def test_location_segments_split_before_normalizing() -> None:
    assert location_segments("Austin, TX, USA") == ["austin", "tx", "usa"]
    assert location_segments("New York") == ["new york"]
    assert location_segments("") == []
