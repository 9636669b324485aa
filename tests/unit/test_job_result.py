"""Unit tests for the job result view used in log messages."""

import pytest

from resume_cli.contexts.submission import parse_job_result


@pytest.mark.unit
def test_enveloped_job():
    body = (
        b'{"ok":true,"job":{"jobId":"6f1c","status":"queued",'
        b'"createdAt":"2026-10-19T10:00:00.000Z","updatedAt":"2026-10-19T10:00:00.000Z",'
        b'"inputHash":"ab12cd34ef56","artifacts":[{"kind":"pdf","path":"out/6f1c.pdf"}]}}'
    )

    job = parse_job_result(body)

    assert job.job_id == "6f1c"
    assert job.status == "queued"
    assert job.input_hash == "ab12cd34ef56"
    assert job.artifacts[0].kind == "pdf"
    assert job.is_terminal is False


@pytest.mark.unit
def test_bare_job_with_error():
    job = parse_job_result(b'{"jobId":"x","status":"failed","error":{"message":"boom"}}')

    assert job.error_message == "boom"
    assert job.is_terminal is True


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [b"", b"not json", b"[1, 2]", b'{"ok":true}', b'{"job": "abc"}', b'{"jobId": 3, "status": "queued"}'],
)
def test_unrecognized_body(body):
    assert parse_job_result(body) is None


@pytest.mark.unit
def test_deeply_nested_body_is_unrecognized():
    depth = 100000
    assert parse_job_result(b'{"job":' + b"[" * depth + b"]" * depth + b"}") is None
