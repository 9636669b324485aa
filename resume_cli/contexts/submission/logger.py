"""
Submission context logger.

Provides logging interface for submission context with automatic [submit] prefix.
All submission modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from resume_cli.utils.config import ClientSettings
from resume_cli.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[submit]"


def setup_submission_logger(
    settings: ClientSettings, context_name: str = "submit", verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for a submission run.

    Args:
        settings: Resolved client settings (log_dir and api_base are used)
        context_name: Log file stem
        verbose: Show INFO messages on stderr

    Returns:
        Path to log file, or None if file logging is disabled
    """
    log_dir = Path(settings.log_dir) if settings.log_dir else None
    return _setup_logger(
        context_name=context_name,
        log_dir=log_dir,
        extra_provenance={"API base": settings.api_base, "Timeout": f"{settings.timeout}s"},
        console_level="INFO" if verbose else "WARNING",
    )


# Wrapper functions with automatic [submit] prefix


def _log_info(message: str) -> None:
    """Log info message with [submit] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [submit] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [submit] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [submit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_request_start(method: str, url: str, body_size: int) -> None:
    """Log the outgoing request."""
    _log_info(f"{method} {url}")
    _log_debug(f"  Body: {body_size} bytes")


def log_outcome(outcome, elapsed_time: float) -> None:
    """
    Log a completed exchange.

    Args:
        outcome: SubmissionOutcome from submit_job() or check_health()
        elapsed_time: Seconds spent on the exchange
    """
    if outcome.ok:
        _log_success(f"Service answered {outcome.status_code} ({elapsed_time:.2f}s)")
    else:
        # Error output is printed by the CLI; keep the log entry off the console
        _log_debug(f"Service answered {outcome.status_code} ({elapsed_time:.2f}s)")
    _log_debug(f"  Response body: {len(outcome.body)} bytes")

    if outcome.body:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nRESPONSE BODY:\n{'=' * 80}\n"
            f"{outcome.body.decode('utf-8', errors='replace')}\n"
        )


def log_job_result(job) -> None:
    """
    Log the job metadata the service returned.

    Args:
        job: JobResult from parse_job_result()
    """
    state = "finished" if job.is_terminal else "pending"
    _log_info(f"Job {job.job_id} is {job.status} ({state})")
    if job.input_hash:
        _log_debug(f"  Input hash: {job.input_hash}")
    for artifact in job.artifacts:
        _log_info(f"  Artifact ({artifact.kind}): {artifact.path}")
    if job.error_message:
        _log_warning(f"Job {job.job_id} reported: {job.error_message}")


def log_failure(error: Exception) -> None:
    """Record a failed run; the one-line diagnostic itself is printed by the CLI."""
    _log_debug(f"{type(error).__name__}: {error}")
