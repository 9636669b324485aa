"""
Best-effort view of the service's job result.

A successful /jobs response looks like:

    {"ok": true, "job": {"jobId": "...", "status": "queued", "createdAt": "...",
                         "updatedAt": "...", "inputHash": "...", "artifacts": []}}

The CLI always prints the body verbatim; this view only feeds log messages,
so anything unexpected yields None instead of an error.
"""

import json
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class JobArtifact:
    kind: str
    path: str


@dataclass
class JobResult:
    """Job metadata returned by the service."""

    job_id: str
    status: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    input_hash: Optional[str] = None
    artifacts: List[JobArtifact] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in ("done", "failed")


def parse_job_result(body: bytes) -> Optional[JobResult]:
    """
    Extract job metadata from a response body.

    Accepts both the enveloped form ({"ok": ..., "job": {...}}) and a bare job
    object. Returns None if the body is not JSON or lacks jobId/status.
    """
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError):
        return None

    if not isinstance(data, dict):
        return None
    job = data.get("job", data)
    if not isinstance(job, dict):
        return None

    job_id = job.get("jobId")
    status = job.get("status")
    if not isinstance(job_id, str) or not isinstance(status, str):
        return None

    artifacts = [
        JobArtifact(kind=str(a.get("kind")), path=str(a.get("path")))
        for a in job.get("artifacts") or []
        if isinstance(a, dict)
    ]
    error = job.get("error")

    return JobResult(
        job_id=job_id,
        status=status,
        created_at=job.get("createdAt"),
        updated_at=job.get("updatedAt"),
        input_hash=job.get("inputHash"),
        artifacts=artifacts,
        error_message=error.get("message") if isinstance(error, dict) else None,
    )
