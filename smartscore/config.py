# smartscore/config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Tuple

# --- Skill extraction dictionary ---

# Used only when a job has no explicit `skills` field: skills are then pulled
# out of the requirements/description text by looking for these terms.
# Coverage here directly bounds skills-match accuracy for such jobs.
DEFAULT_SKILL_KEYWORDS: Tuple[str, ...] = (
    "JavaScript", "Python", "Java", "React", "Node.js", "SQL", "MongoDB",
    "HTML", "CSS", "Angular", "Vue.js", "PHP", "C++", "C#", ".NET",
    "AWS", "Docker", "Kubernetes", "Git", "Agile", "Scrum",
    "Project Management", "Data Analysis", "Machine Learning", "AI",
    "Photoshop", "Illustrator", "Figma", "Sketch", "UI/UX",
)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_keyword_list(raw: str | None) -> Tuple[str, ...]:
    """
    Parses: "Python, Go ,Rust,,Terraform" -> ("Python", "Go", "Rust", "Terraform")
    """
    if not raw:
        return ()
    items = []
    for part in raw.split(","):
        part = part.strip()
        if part:
            items.append(part)
    return tuple(items)


# Override with a comma-separated list, e.g. SMARTSCORE_SKILL_KEYWORDS="Go,Rust,Terraform"
SKILL_KEYWORDS: Tuple[str, ...] = (
        _parse_keyword_list(os.environ.get("SMARTSCORE_SKILL_KEYWORDS"))
        or DEFAULT_SKILL_KEYWORDS
)

# --- Record store ---

# Directory holding jobs.json and users.json (lists of raw camelCase records).
SMARTSCORE_DATA_DIR: str = os.environ.get("SMARTSCORE_DATA_DIR", "").strip() or ".smartscore"

# --- CLI defaults ---

TOP_K: int = _env_int("SMARTSCORE_TOP_K", 10)

# How much resume text becomes the profile summary when the profile has none.
RESUME_SUMMARY_CHARS: int = _env_int("SMARTSCORE_RESUME_SUMMARY_CHARS", 600)


def default_data_dir() -> Path:
    return Path(SMARTSCORE_DATA_DIR)
