"""
Error taxonomy for job submission.

Every failure that ends a CLI invocation derives from SubmissionError so the
entry points can catch one type, print its message and exit with its code.
"""

from pathlib import Path
from typing import Optional, Union

# Human-readable flag names for argument errors
FLAG_LABELS = {
    "resume": "--resume",
    "jd": "--jd (URL) or --jdText (file)",
}


class SubmissionError(Exception):
    """Base class for all terminal errors of a submission run."""

    exit_code = 1


class MissingArgument(SubmissionError):
    """A required flag was not supplied (or was supplied empty)."""

    def __init__(self, name: str):
        self.name = name
        if name == "jd":
            message = f"either {FLAG_LABELS['jd']} is required"
        else:
            message = f"{FLAG_LABELS.get(name, '--' + name)} is required"
        super().__init__(message)


class ConflictingArguments(SubmissionError):
    """Mutually exclusive flags were both supplied."""

    def __init__(self, name: str):
        self.name = name
        if name == "jd":
            message = "provide only one of --jd or --jdText"
        else:
            message = f"conflicting values supplied for --{name}"
        super().__init__(message)


class FileReadError(SubmissionError):
    """
    Reading an input file failed.

    Attributes:
        path: File that could not be read
        cause: Underlying OSError
    """

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else cause
        super().__init__(f"cannot read {path}: {reason}")


class InvalidJSON(SubmissionError):
    """
    The resume document is not well-formed JSON.

    Attributes:
        path: Resume file
        cause: Decoding error raised while validating
    """

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{path} is not valid JSON: {cause}")


class TransportError(SubmissionError):
    """No response was obtained from the service (DNS, TCP, TLS, timeout, bad URL)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        # httpx timeouts can carry an empty message
        reason = str(cause) or type(cause).__name__
        super().__init__(f"cannot reach service: {reason}")


class ServiceError(SubmissionError):
    """
    The service completed the exchange with a status code of 300 or more.

    The body is kept as raw bytes and never interpreted.
    """

    def __init__(self, status_code: int, body: bytes):
        self.status_code = status_code
        self.body = body
        text = body.decode("utf-8", errors="replace")
        super().__init__(f"service returned {status_code}:\n{text}")


class ConfigError(SubmissionError):
    """Client settings could not be loaded or were ill-typed."""

    def __init__(self, message: str, source: Optional[Path] = None):
        self.source = source
        if source is not None:
            message = f"{message} (from {source})"
        super().__init__(message)
