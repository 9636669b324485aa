"""
Job submission request data structures.

The canonical in-memory request produced by the resolver and consumed by the
submitter. The job description is a closed union of two variants and the
compile preferences are a fixed, typed structure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

DEFAULT_TEMPLATE = "one_page_v1"
DEFAULT_SCORING_MODEL = "keyword_alignment_v1"


@dataclass(frozen=True)
class UrlReference:
    """Job description the service fetches itself."""

    url: str

    def to_wire(self) -> Dict[str, Any]:
        return {"type": "url", "url": self.url}


@dataclass(frozen=True)
class InlineText:
    """Job description text supplied by the caller."""

    text: str

    def to_wire(self) -> Dict[str, Any]:
        return {"type": "text", "text": self.text}


JobDescription = Union[UrlReference, InlineText]


@dataclass(frozen=True)
class CompilePreferences:
    """Template and scoring model the service should apply."""

    template: str = DEFAULT_TEMPLATE
    scoring_model: str = DEFAULT_SCORING_MODEL

    def to_wire(self) -> Dict[str, Any]:
        return {"template": self.template, "scoringModel": self.scoring_model}


@dataclass(frozen=True)
class JobSubmissionRequest:
    """
    Payload sent to the service's /jobs endpoint.

    Attributes:
        resume: Raw bytes of the resume file, already validated as JSON
        job_description: Exactly one UrlReference or InlineText
        preferences: Compiled-in defaults
    """

    resume: bytes
    job_description: JobDescription
    preferences: CompilePreferences = field(default_factory=CompilePreferences)

    def __post_init__(self):
        if not isinstance(self.job_description, (UrlReference, InlineText)):
            raise TypeError(
                "job_description must be UrlReference or InlineText, "
                f"got {type(self.job_description).__name__}"
            )

    @property
    def jd_kind(self) -> str:
        """Wire tag of the job description variant ("url" or "text")."""
        return self.job_description.to_wire()["type"]
