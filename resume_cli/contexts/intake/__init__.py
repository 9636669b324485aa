"""
Intake Context

Responsibilities:
- Validates the resume path and job description source flags
- Reads the resume and checks it is well-formed JSON
- Builds the canonical JobSubmissionRequest

Owns: Input validation, request assembly
Never: Touches the network
"""

from resume_cli.contexts.intake.request_data_structure import (
    CompilePreferences,
    InlineText,
    JobDescription,
    JobSubmissionRequest,
    UrlReference,
)
from resume_cli.contexts.intake.resolver import resolve_request

__all__ = [
    "CompilePreferences",
    "InlineText",
    "JobDescription",
    "JobSubmissionRequest",
    "UrlReference",
    "resolve_request",
]
