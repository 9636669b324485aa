"""
Job submission over HTTP.

Serializes a JobSubmissionRequest and POSTs it once to <api_base>/jobs.
No retries: a transport failure raises TransportError, a completed exchange
becomes a SubmissionOutcome whatever its status code.
"""

import json
import time
from dataclasses import dataclass
from typing import Optional

import httpx

from resume_cli.contexts.intake.request_data_structure import JobSubmissionRequest
from resume_cli.contexts.submission.logger import _log_debug, log_outcome, log_request_start
from resume_cli.exceptions import ServiceError, TransportError
from resume_cli.utils.config import ClientSettings

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    A completed HTTP exchange with the service.

    Attributes:
        status_code: HTTP status returned by the service
        body: Full response body, untouched
    """

    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> "SubmissionOutcome":
        """Raise ServiceError for status codes of 300 and above, else return self."""
        if not self.ok:
            raise ServiceError(self.status_code, self.body)
        return self


def _dump_json(value) -> bytes:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def serialize_request(request: JobSubmissionRequest) -> bytes:
    """
    Encode a request as the JSON body expected by POST /jobs.

    The resume bytes were validated when the request was resolved and are
    spliced in as-is, so the service receives the document exactly as it
    appears on disk.

    Returns:
        UTF-8 body: {"resume": <raw>, "jd": {...}, "prefs": {...}}
    """
    return b"".join(
        [
            b'{"resume":',
            request.resume,
            b',"jd":',
            _dump_json(request.job_description.to_wire()),
            b',"prefs":',
            _dump_json(request.preferences.to_wire()),
            b"}",
        ]
    )


def endpoint_url(api_base: str, path: str) -> str:
    """Join the service base URL and an endpoint path without doubling slashes."""
    return f"{api_base.rstrip('/')}/{path.lstrip('/')}"


def jobs_url(api_base: str) -> str:
    return endpoint_url(api_base, "jobs")


def _build_client(
    settings: ClientSettings, transport: Optional[httpx.BaseTransport] = None
) -> httpx.Client:
    """Create the HTTP client; transport is injectable so tests avoid real sockets."""
    return httpx.Client(
        timeout=settings.timeout,
        follow_redirects=settings.follow_redirects,
        transport=transport,
    )


def _exchange(
    method: str,
    url: str,
    settings: ClientSettings,
    transport: Optional[httpx.BaseTransport] = None,
    body: Optional[bytes] = None,
) -> SubmissionOutcome:
    headers = {"Content-Type": JSON_CONTENT_TYPE} if body is not None else None
    log_request_start(method, url, len(body) if body is not None else 0)

    start = time.time()
    try:
        with _build_client(settings, transport) as client:
            response = client.request(method, url, content=body, headers=headers)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        _log_debug(f"Transport failure after {time.time() - start:.2f}s: {e!r}")
        raise TransportError(e) from e

    outcome = SubmissionOutcome(status_code=response.status_code, body=response.content)
    log_outcome(outcome, time.time() - start)
    return outcome


def submit_job(
    request: JobSubmissionRequest,
    settings: ClientSettings,
    transport: Optional[httpx.BaseTransport] = None,
) -> SubmissionOutcome:
    """
    POST a job submission request to the service.

    Args:
        request: Resolved request
        settings: Client settings (api_base, timeout, redirect policy)
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests)

    Returns:
        SubmissionOutcome for any completed exchange; call raise_for_status()
        to turn a status of 300 or more into ServiceError

    Raises:
        TransportError: If no response was obtained
    """
    return _exchange(
        "POST",
        jobs_url(settings.api_base),
        settings,
        transport=transport,
        body=serialize_request(request),
    )


def check_health(
    settings: ClientSettings,
    transport: Optional[httpx.BaseTransport] = None,
) -> SubmissionOutcome:
    """
    GET <api_base>/health.

    Raises:
        TransportError: If no response was obtained
    """
    return _exchange("GET", endpoint_url(settings.api_base, "health"), settings, transport=transport)
