#!/usr/bin/env python3
"""
Resume Job Submission CLI

Submits a resume compilation job to the compilation service.

Commands:
    resume-submit - Validate inputs and POST a job to <api>/jobs
    resume-health - Check that the service answers on <api>/health

Examples:\n

    resume-submit --resume resume.json --jd https://jobs.example.com/123

    resume-submit --resume resume.json --jdText jd.txt --api http://localhost:3001

    resume-health --api http://localhost:3001
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resume_cli.contexts.intake import resolve_request
from resume_cli.contexts.submission import check_health, parse_job_result, submit_job
from resume_cli.contexts.submission.logger import (
    log_failure,
    log_job_result,
    setup_submission_logger,
)
from resume_cli.exceptions import SubmissionError
from resume_cli.utils.config import DEFAULT_API_BASE, ClientSettings, load_settings

app = typer.Typer(
    help="Submit a resume compilation job to the compilation service",
    add_completion=False,
)

health_app = typer.Typer(
    help="Check that the compilation service is reachable",
    add_completion=False,
)

ApiOption = Annotated[
    Optional[str],
    typer.Option(
        "--api",
        help="Base URL of the compilation service",
        show_default=DEFAULT_API_BASE,
    ),
]
TimeoutOption = Annotated[
    Optional[float],
    typer.Option(
        "--timeout",
        help="Request timeout in seconds",
        show_default="30",
    ),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        help="YAML file with client settings (api_base, timeout, follow_redirects, log_dir)",
    ),
]


def _fail(error: SubmissionError) -> None:
    """Print a one-line diagnostic and exit with the error's code."""
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=error.exit_code)


def _configure(
    config: Optional[Path],
    api: Optional[str],
    timeout: Optional[float],
    context_name: str,
    verbose: bool = False,
) -> ClientSettings:
    """Resolve settings and set up logging; settings errors exit before any sink exists."""
    try:
        settings = load_settings(config, api_base=api, timeout=timeout)
    except SubmissionError as e:
        _fail(e)
    setup_submission_logger(settings, context_name=context_name, verbose=verbose)
    return settings


@app.command()
def submit(
    resume: Annotated[
        str,
        typer.Option("--resume", help="Path to resume JSON (required)"),
    ] = "",
    jd: Annotated[
        str,
        typer.Option("--jd", help="Job description URL"),
    ] = "",
    jd_text: Annotated[
        str,
        typer.Option("--jdText", "--jd-text", help="Path to file containing job description text"),
    ] = "",
    api: ApiOption = None,
    timeout: TimeoutOption = None,
    config: ConfigOption = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show progress messages on stderr"),
    ] = False,
):
    """
    Submit a resume and job description for compilation.

    Exactly one of --jd or --jdText must be given. On success the service's
    response body is printed to stdout unchanged.

    Examples:\n

        $ resume-submit --resume resume.json --jd https://jobs.example.com/123

        $ resume-submit --resume resume.json --jdText jd.txt
    """
    settings = _configure(config, api, timeout, context_name="submit", verbose=verbose)

    try:
        request = resolve_request(resume, jd_url=jd, jd_text_path=jd_text)
        outcome = submit_job(request, settings).raise_for_status()
    except SubmissionError as e:
        log_failure(e)
        _fail(e)

    typer.echo(outcome.body)

    job = parse_job_result(outcome.body)
    if job is not None:
        log_job_result(job)


@health_app.command()
def health(
    api: ApiOption = None,
    timeout: TimeoutOption = None,
    config: ConfigOption = None,
):
    """
    Ping the service's health endpoint and print its response.
    """
    settings = _configure(config, api, timeout, context_name="health")

    try:
        outcome = check_health(settings).raise_for_status()
    except SubmissionError as e:
        log_failure(e)
        _fail(e)

    typer.echo(outcome.body)


if __name__ == "__main__":
    app()
