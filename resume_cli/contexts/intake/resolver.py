"""
Input resolution for job submission.

Validates the CLI inputs in a fixed order and assembles a JobSubmissionRequest.
The first failure aborts resolution, so nothing reaches the network unless
every input is usable.
"""

from pathlib import Path
from typing import Optional, Union

from resume_cli.contexts.intake.json_syntax import check_json_syntax
from resume_cli.contexts.intake.logger import _log_debug, _log_info
from resume_cli.contexts.intake.request_data_structure import (
    CompilePreferences,
    InlineText,
    JobDescription,
    JobSubmissionRequest,
    UrlReference,
)
from resume_cli.exceptions import (
    ConflictingArguments,
    FileReadError,
    InvalidJSON,
    MissingArgument,
)

PathLike = Union[str, Path]


def read_document_bytes(path: PathLike) -> bytes:
    """
    Read a file as raw bytes.

    Raises:
        FileReadError: On any file-system failure (missing, directory, permissions)
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise FileReadError(path, e) from e
    _log_debug(f"Read {len(raw)} bytes from {path}")
    return raw


def validate_json_document(path: PathLike, raw: bytes) -> None:
    """
    Check that raw bytes hold exactly one well-formed JSON value.

    Nothing is decoded into Python objects, so deep nesting and very long
    numbers are accepted. Bytes must be UTF-8 without a byte-order mark, and
    NaN/Infinity literals are rejected since other JSON parsers (including
    the service's) do not accept them.

    Raises:
        InvalidJSON: If decoding or parsing fails
    """
    try:
        check_json_syntax(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidJSON(path, e) from e


def _has_value(value: Optional[PathLike]) -> bool:
    return value is not None and str(value) != ""


def resolve_job_description(
    jd_url: Optional[str] = None,
    jd_text_path: Optional[PathLike] = None,
) -> JobDescription:
    """
    Build the job description variant for whichever source was supplied.

    URLs are passed through untouched; the service fetches and validates them.
    Text files are decoded as UTF-8 with invalid sequences replaced.
    """
    if _has_value(jd_url):
        return UrlReference(url=jd_url)

    raw = read_document_bytes(jd_text_path)
    return InlineText(text=raw.decode("utf-8", errors="replace"))


def resolve_request(
    resume_path: Optional[PathLike],
    jd_url: Optional[str] = None,
    jd_text_path: Optional[PathLike] = None,
) -> JobSubmissionRequest:
    """
    Validate inputs and assemble the canonical job submission request.

    Validation order:
        1. resume path present
        2. exactly one of jd_url / jd_text_path
        3. resume file readable
        4. resume bytes are well-formed JSON
        5-6. job description variant (reading the text file if given)
        7. request with default preferences

    Args:
        resume_path: Path to the JSON resume
        jd_url: Job description URL
        jd_text_path: Path to a plain-text job description

    Returns:
        JobSubmissionRequest carrying the resume bytes exactly as read

    Raises:
        MissingArgument: resume or job description source absent
        ConflictingArguments: both job description sources given
        FileReadError: resume or job description file unreadable
        InvalidJSON: resume is not well-formed JSON
    """
    if not _has_value(resume_path):
        raise MissingArgument("resume")

    has_url = _has_value(jd_url)
    has_text = _has_value(jd_text_path)
    if not has_url and not has_text:
        raise MissingArgument("jd")
    if has_url and has_text:
        raise ConflictingArguments("jd")

    resume_bytes = read_document_bytes(resume_path)
    validate_json_document(resume_path, resume_bytes)

    job_description = resolve_job_description(jd_url, jd_text_path)

    request = JobSubmissionRequest(
        resume=resume_bytes,
        job_description=job_description,
        preferences=CompilePreferences(),
    )
    _log_info(f"Resolved request: resume={resume_path}, jd={request.jd_kind}")
    return request
