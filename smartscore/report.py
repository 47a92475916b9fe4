from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from smartscore import config
from smartscore.io.resume_loader import apply_resume_summary, load_resume_text
from smartscore.matching.engine import rank_jobs
from smartscore.matching.types import MatchResult
from smartscore.models import CandidateProfile, Job
from smartscore.store import JsonRecordStore, RecordNotFoundError, RecordStore, default_store

_BREAKDOWN_LABELS = (
    ("skillsMatch", "skills"),
    ("experienceMatch", "experience"),
    ("educationMatch", "education"),
    ("locationMatch", "location"),
    ("salaryMatch", "salary"),
    ("industryMatch", "industry"),
    ("jobTypeMatch", "job type"),
    ("companySizeMatch", "company size"),
)


@dataclass(frozen=True)
class RankedMatch:
    job: Job
    result: MatchResult

    def to_dict(self) -> Dict[str, Any]:
        j = self.job
        r = self.result
        return {
            "id": j.job_id,
            "title": j.title,
            "company": j.company or "Unknown Company",
            "location": j.location,
            "type": j.job_type,
            "description": j.description,
            "requirements": j.requirements,
            "salary": j.salary,
            "salaryMin": j.salary_min,
            "salaryMax": j.salary_max,
            "experience": j.experience,
            "smartScore": {
                "score": r.total_score,
                "percentage": r.total_score,
                "breakdown": dict(r.breakdown),
                "matchAnalysis": r.analysis.to_dict(),
                "profileCompleteness": r.profile_completeness,
                "completenessMultiplier": r.completeness_multiplier,
            },
        }


@dataclass(frozen=True)
class SmartScoreReport:
    user_id: Optional[str]
    user_name: Optional[str]
    user_email: Optional[str]
    total_jobs: int
    skipped: int
    matches: List[RankedMatch]
    duration_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "jobs": [m.to_dict() for m in self.matches],
            "totalJobs": self.total_jobs,
            "skipped": self.skipped,
            "user": {
                "id": self.user_id,
                "name": self.user_name,
                "email": self.user_email,
            },
            "duration_ms": self.duration_ms,
        }


def run_smart_score(
        *,
        profile: CandidateProfile,
        jobs: Iterable[Any],
        top_k: Optional[int] = None,
        skill_keywords: Optional[Sequence[str]] = None,
) -> SmartScoreReport:
    """
    Score every job for one candidate and return them best-first.

    Each job is scored on its own: a record that is not a job is skipped with a
    warning instead of failing the whole batch.
    """
    start = time.time()

    usable: List[Any] = []
    skipped = 0
    for idx, job in enumerate(jobs):
        if isinstance(job, (Job, Mapping)):
            usable.append(job)
            continue
        skipped += 1
        print(f"[SmartScore] WARNING: skipping job #{idx}: not a job record ({type(job).__name__})", file=sys.stderr)

    ranked = rank_jobs(profile, usable, top_n=top_k, skill_keywords=skill_keywords)

    duration_ms = int((time.time() - start) * 1000)

    return SmartScoreReport(
        user_id=profile.user_id,
        user_name=profile.name,
        user_email=profile.email,
        total_jobs=len(usable),
        skipped=skipped,
        matches=[RankedMatch(job=s.job, result=s.result) for s in ranked],
        duration_ms=duration_ms,
    )


def _fmt(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.1f}"


def print_human_summary(report: SmartScoreReport) -> None:
    print("\n=== SmartScore ===")
    who = report.user_name or report.user_id or "local profile"
    print(f"User: {who}")
    print(f"Jobs scored: {report.total_jobs} | Skipped: {report.skipped}")
    print(f"Duration: {report.duration_ms}ms")

    if not report.matches:
        print("\nNo jobs available for Smart Score analysis.")
        return

    first = report.matches[0].result
    print(f"Profile completeness: {first.profile_completeness}% (x{first.completeness_multiplier:.2f})")

    print("\nTop Matches:")
    for idx, m in enumerate(report.matches, start=1):
        j = m.job
        r = m.result
        title = j.title or "(untitled)"
        company = j.company or "Unknown Company"
        loc = f" — {j.location}" if j.location else ""
        print(f"\n{idx}) {title} @ {company}{loc}")
        print(f"   score: {r.total_score}")
        parts = [f"{label} {_fmt(r.breakdown[key])}" for key, label in _BREAKDOWN_LABELS if key in r.breakdown]
        print(f"   breakdown: {', '.join(parts)}")
        if r.analysis.strengths:
            print(f"   strengths: {'; '.join(r.analysis.strengths)}")
        if r.analysis.improvements:
            print(f"   improvements: {'; '.join(r.analysis.improvements)}")
        for rec in r.analysis.recommendations:
            print(f"   recommendation: {rec}")


def _read_json(path: Path, what: str) -> Any:
    if not path.exists():
        print(f"\n[SmartScore] {what} file not found: {path}", file=sys.stderr)
        raise SystemExit(2)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        print(f"\n[SmartScore] {what} file is not valid JSON: {path} ({exc})", file=sys.stderr)
        raise SystemExit(2)


def _load_profile(args: argparse.Namespace, store: RecordStore) -> CandidateProfile:
    if args.profile:
        data = _read_json(Path(args.profile), "Profile")
        if not isinstance(data, dict):
            print(f"\n[SmartScore] Profile file must hold a JSON object: {args.profile}", file=sys.stderr)
            raise SystemExit(2)
        return CandidateProfile.from_dict(data)

    if args.user_id:
        try:
            return store.get_profile(args.user_id)
        except RecordNotFoundError as exc:
            print(f"\n[SmartScore] {exc} (data dir: {store.base_dir})", file=sys.stderr)
            raise SystemExit(2)

    print("\n[SmartScore] Pass --profile <file> or --user-id <id>.", file=sys.stderr)
    raise SystemExit(2)


def _load_jobs(args: argparse.Namespace, store: RecordStore) -> List[Any]:
    if args.jobs:
        data = _read_json(Path(args.jobs), "Jobs")
        if not isinstance(data, list):
            print(f"\n[SmartScore] Jobs file must hold a JSON list: {args.jobs}", file=sys.stderr)
            raise SystemExit(2)
        records: List[Any] = data
        if args.job_id:
            records = [r for r in records if isinstance(r, dict) and str(r.get("id")) == str(args.job_id)]
            if not records:
                print(f"\n[SmartScore] Job not found: {args.job_id} (in {args.jobs})", file=sys.stderr)
                raise SystemExit(2)
        if args.active_only:
            records = [r for r in records if not isinstance(r, dict) or Job.from_dict(r).is_active]
        return records

    if args.job_id:
        try:
            return [store.get_job(args.job_id)]
        except RecordNotFoundError as exc:
            print(f"\n[SmartScore] {exc} (data dir: {store.base_dir})", file=sys.stderr)
            raise SystemExit(2)

    return list(store.load_jobs(active_only=args.active_only))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SmartScore: rank job postings for a candidate profile")
    parser.add_argument("--user-id", default="", help="Candidate id in users.json")
    parser.add_argument("--profile", type=str, default="", help="Path to a candidate profile JSON object (instead of --user-id)")
    parser.add_argument("--jobs", type=str, default="", help="Path to a JSON list of jobs (instead of the data dir)")
    parser.add_argument("--job-id", default="", help="Score a single job")
    parser.add_argument("--data-dir", type=str, default="", help="Directory holding jobs.json and users.json (default: SMARTSCORE_DATA_DIR)")
    parser.add_argument("--top-k", type=int, default=config.TOP_K, help="How many matches to show (0 = all)")
    parser.add_argument("--active-only", action="store_true", help="Skip jobs marked inactive")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    parser.add_argument("--resume-text", type=str, default="", help="Optional path to resume .txt (fills an empty summary)")
    parser.add_argument("--resume-pdf", type=str, default="", help="Optional path to resume .pdf (fills an empty summary)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    store = JsonRecordStore(Path(args.data_dir)) if args.data_dir else default_store()
    profile = _load_profile(args, store)
    jobs = _load_jobs(args, store)

    loaded = load_resume_text(
        resume_text_path=args.resume_text or None,
        resume_pdf_path=args.resume_pdf or None,
    )
    profile = apply_resume_summary(profile, loaded, max_chars=config.RESUME_SUMMARY_CHARS)

    report = run_smart_score(
        profile=profile,
        jobs=jobs,
        top_k=args.top_k if args.top_k > 0 else None,
    )

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print_human_summary(report)
        print("\nJSON Output:")
        print(json.dumps(report.to_dict(), indent=2))


if __name__ == "__main__":
    main()
