from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Protocol

from smartscore import config
from smartscore.models import CandidateProfile, Job


class RecordNotFoundError(LookupError):
    pass


class RecordStore(Protocol):
    base_dir: Path

    def load_jobs(self, *, active_only: bool = False) -> List[Job]:
        ...

    def get_job(self, job_id: str) -> Job:
        ...

    def get_profile(self, user_id: str) -> CandidateProfile:
        ...


class JsonRecordStore:
    """
    Read-only access to the job board's JSON files.

    Layout:
      <base_dir>/
        jobs.json  -> [ {"id": 1, "title": ..., "skills": "Python, SQL", ...}, ... ]
        users.json -> [ {"id": 7, "technicalSkills": [...], "experience": "4 years", ...}, ... ]

    Ids compare as strings, so 7 and "7" name the same record.
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir
        self.jobs_path = base_dir / "jobs.json"
        self.users_path = base_dir / "users.json"

    def _read_records(self, path: Path) -> List[Dict[str, Any]]:
        if not path.exists():
            return []

        raw_text = path.read_text(encoding="utf-8").strip()
        if not raw_text:
            return []

        data = json.loads(raw_text)
        if not isinstance(data, list):
            raise ValueError(f"{path.name} must hold a JSON list of records")
        return [r for r in data if isinstance(r, dict)]

    def load_jobs(self, *, active_only: bool = False) -> List[Job]:
        jobs = [Job.from_dict(r) for r in self._read_records(self.jobs_path)]
        if active_only:
            jobs = [j for j in jobs if j.is_active]
        return jobs

    def get_job(self, job_id: str) -> Job:
        wanted = str(job_id).strip()
        for record in self._read_records(self.jobs_path):
            if str(record.get("id")) == wanted:
                return Job.from_dict(record)
        raise RecordNotFoundError(f"Job not found: {job_id}")

    def get_profile(self, user_id: str) -> CandidateProfile:
        wanted = str(user_id).strip()
        for record in self._read_records(self.users_path):
            if str(record.get("id")) == wanted:
                return CandidateProfile.from_dict(record)
        raise RecordNotFoundError(f"User not found: {user_id}")


def default_store() -> JsonRecordStore:
    return JsonRecordStore(config.default_data_dir())
