from pathlib import Path

from pypdf import PdfWriter

from smartscore.io.resume_loader import LoadedResume, apply_resume_summary, load_resume_text
from smartscore.models import CandidateProfile


def test_text_resume_wins_over_pdf(tmp_path: Path) -> None:
    txt = tmp_path / "resume.txt"
    txt.write_text("Python engineer, 6 years.", encoding="utf-8")

    loaded = load_resume_text(resume_text_path=str(txt), resume_pdf_path=str(tmp_path / "ignored.pdf"))

    assert loaded.source == "text"
    assert loaded.text == "Python engineer, 6 years."


def test_no_paths_means_no_resume() -> None:
    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=None)
    assert loaded == LoadedResume(text="", source="none", path=None)


def test_missing_text_file_warns_and_returns_none(tmp_path: Path, capsys) -> None:
    loaded = load_resume_text(resume_text_path=str(tmp_path / "nope.txt"), resume_pdf_path=None)

    assert loaded.source == "none"
    assert "could not read resume text" in capsys.readouterr().err


def test_unreadable_pdf_warns_and_returns_none(tmp_path: Path, capsys) -> None:
    pdf = tmp_path / "broken.pdf"
    pdf.write_bytes(b"this is not a pdf")

    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=str(pdf))

    assert loaded.source == "none"
    assert "could not read resume PDF" in capsys.readouterr().err


def test_pdf_without_text_returns_none(tmp_path: Path) -> None:
    pdf = tmp_path / "blank.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    with pdf.open("wb") as fh:
        writer.write(fh)

    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=str(pdf))

    assert loaded.source == "none"
    assert loaded.text == ""


def test_apply_resume_summary_fills_empty_summary_only() -> None:
    resume = LoadedResume(text="Backend   developer\nfocused on data.", source="text")

    filled = apply_resume_summary(CandidateProfile(), resume, max_chars=600)
    assert filled.summary == "Backend developer focused on data."

    kept = apply_resume_summary(CandidateProfile(summary="Mine"), resume, max_chars=600)
    assert kept.summary == "Mine"


def test_apply_resume_summary_truncates_on_word_boundary() -> None:
    resume = LoadedResume(text="alpha beta gamma delta", source="text")
    p = apply_resume_summary(CandidateProfile(), resume, max_chars=13)
    assert p.summary == "alpha beta"


def test_apply_resume_summary_without_resume_is_a_no_op() -> None:
    profile = CandidateProfile(name="Ana")
    assert apply_resume_summary(profile, LoadedResume(text="", source="none"), max_chars=600) is profile
