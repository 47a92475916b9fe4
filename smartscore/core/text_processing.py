from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

# NOTE: Every text comparison in matching (skills, industries, job types, company
# size, locations, education, experience level words) goes through normalize_text.
# Both sides of a comparison must be normalized the same way or the substring
# skill overlap silently breaks.

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: object) -> str:
    """
    Deterministic normalization used on both sides of every comparison.

    - lowercase
    - every non-word character becomes a space ("node.js" -> "node js")
    - whitespace collapsed to single spaces, trimmed

    Non-string input normalizes to "". Idempotent: normalize_text(normalize_text(x)) == normalize_text(x).
    """
    if not isinstance(text, str) or not text:
        return ""
    t = _NON_WORD_RE.sub(" ", text.lower())
    t = _WHITESPACE_RE.sub(" ", t)
    return t.strip()


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def split_skills(raw: object) -> Tuple[str, ...]:
    """
    Skills arrive either as comma-separated text ("Python, SQL") or as a list.
    Returns trimmed, non-empty entries in their original order.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        parts: Iterable[object] = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        parts = raw
    else:
        return ()
    out: List[str] = []
    for p in parts:
        if not isinstance(p, str):
            continue
        s = normalize_whitespace(p)
        if s:
            out.append(s)
    return tuple(out)


def normalized_terms(items: Iterable[str]) -> List[str]:
    """Normalize each item, dropping the ones that normalize to nothing."""
    out: List[str] = []
    for it in items or []:
        n = normalize_text(it)
        if n:
            out.append(n)
    return out


def contains_term(normalized_haystack: str, normalized_term: str) -> bool:
    """Whole-word / whole-phrase containment over already-normalized text."""
    if not normalized_term or not normalized_haystack:
        return False
    return f" {normalized_term} " in f" {normalized_haystack} "


def extract_known_skills(text: str, keywords: Sequence[str]) -> List[str]:
    """
    Skills from the keyword dictionary that appear in free text.
    Preserves dictionary order; returns the dictionary spelling.
    """
    normalized = normalize_text(text)
    if not normalized:
        return []
    found: List[str] = []
    for kw in keywords:
        if contains_term(normalized, normalize_text(kw)):
            found.append(kw)
    return found


def location_segments(location: str) -> List[str]:
    """
    Comma segments of a location, each normalized.
    "Austin, TX, USA" -> ["austin", "tx", "usa"]

    Splits BEFORE normalizing: normalize_text turns commas into spaces.
    """
    if not isinstance(location, str) or not location:
        return []
    return [normalize_text(part) for part in location.split(",")]
