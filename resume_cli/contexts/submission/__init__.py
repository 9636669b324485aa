"""
Submission Context

Responsibilities:
- Serializes the resolved request to its wire form
- Performs one synchronous HTTP exchange with the compilation service
- Classifies the outcome (success, service error, transport error)

Owns: HTTP client configuration, wire format, outcome classification
Never: Reads input files or retries requests
"""

from resume_cli.contexts.submission.job_result import JobResult, parse_job_result
from resume_cli.contexts.submission.submitter import (
    SubmissionOutcome,
    check_health,
    serialize_request,
    submit_job,
)

__all__ = [
    "JobResult",
    "parse_job_result",
    "SubmissionOutcome",
    "check_health",
    "serialize_request",
    "submit_job",
]
