"""Job corpus loading.

Records arrive from an external job store and are frequently incomplete or
malformed. Incomplete records are fine (the Matcher degrades gracefully);
malformed ones are dropped here, one at a time, with a warning.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.matching.models import Job
from src.utils.logging import get_logger

logger = get_logger(__name__)


class CorpusError(ValueError):
    """Raised when a job corpus cannot be used at all."""


def parse_jobs(records: Iterable[Any]) -> list[Job]:
    """Validate raw job records, skipping any that are malformed."""
    jobs: list[Job] = []
    skipped = 0

    for index, record in enumerate(records):
        if isinstance(record, Job):
            jobs.append(record)
            continue
        if not isinstance(record, dict):
            skipped += 1
            logger.warning("Skipping job record #%d: not a mapping", index)
            continue
        try:
            jobs.append(Job.model_validate(record))
        except ValidationError as exc:
            skipped += 1
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'job'}: {err['msg']}"
                for err in exc.errors()
            )
            logger.warning(
                "Skipping job record #%d (id=%s): %s",
                index,
                record.get("id", "?"),
                errors,
            )

    if skipped:
        logger.info("Loaded %d job(s), skipped %d malformed record(s)", len(jobs), skipped)
    return jobs


def _records_from_payload(data: Any, path: Path) -> list[Any]:
    # jobs.json: either a bare list or {"jobs": [...]}; a single job object is
    # also accepted.
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if isinstance(data.get("jobs"), list):
            return data["jobs"]
        return [data]
    raise CorpusError(f"Invalid job corpus payload: {path}")


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CorpusError(f"Invalid JSON in job corpus: {path}") from e


def load_jobs(path: Path | str) -> list[Job]:
    """Load jobs from a JSON file or a directory of JSON files.

    Supported inputs:
    - A JSON list of job objects
    - A ``{"jobs": [...]}`` payload
    - A directory containing ``*.json`` files (searched recursively)

    Raises:
        FileNotFoundError: ``path`` does not exist.
        CorpusError: A file is not valid JSON or has an unexpected shape.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Job corpus not found: {path}")

    if path.is_dir():
        records: list[Any] = []
        for json_path in sorted(path.rglob("*.json")):
            records.extend(_records_from_payload(_read_json(json_path), json_path))
    else:
        records = _records_from_payload(_read_json(path), path)

    return parse_jobs(records)
