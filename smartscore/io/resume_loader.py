from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from smartscore.core.text_processing import normalize_whitespace
from smartscore.models import CandidateProfile


@dataclass(frozen=True)
class LoadedResume:
    text: str
    source: str  # "text" | "pdf" | "none"
    path: Optional[str] = None


def load_resume_text(*, resume_text_path: Optional[str], resume_pdf_path: Optional[str]) -> LoadedResume:
    """
    Load resume content locally.
    Precedence:
      1) resume_text_path (.txt)
      2) resume_pdf_path (.pdf)
      3) none
    Best-effort: failures return source='none' and empty text (caller keeps the profile as-is).
    """
    if resume_text_path:
        p = Path(resume_text_path)
        try:
            return LoadedResume(text=p.read_text(encoding="utf-8"), source="text", path=str(p))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"[SmartScore] WARNING: could not read resume text {p}: {exc}", file=sys.stderr)
            return LoadedResume(text="", source="none", path=str(p))

    if resume_pdf_path:
        p = Path(resume_pdf_path)
        try:
            reader = PdfReader(str(p))
            parts = []
            for page in reader.pages:
                t = page.extract_text() or ""
                if t.strip():
                    parts.append(t)
            text = "\n".join(parts).strip()
            if not text:
                return LoadedResume(text="", source="none", path=str(p))
            return LoadedResume(text=text, source="pdf", path=str(p))
        except (OSError, PyPdfError) as exc:
            print(f"[SmartScore] WARNING: could not read resume PDF {p}: {exc}", file=sys.stderr)
            return LoadedResume(text="", source="none", path=str(p))

    return LoadedResume(text="", source="none", path=None)


def apply_resume_summary(profile: CandidateProfile, resume: LoadedResume, *, max_chars: int) -> CandidateProfile:
    """
    A profile without a summary borrows the opening of the resume.
    An existing summary always wins.
    """
    if profile.summary or not resume.text:
        return profile
    text = normalize_whitespace(resume.text)
    if max_chars > 0 and len(text) > max_chars:
        text = text[:max_chars].rsplit(" ", 1)[0] or text[:max_chars]
    return profile.with_summary(text)
