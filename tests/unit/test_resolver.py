"""Unit tests for input resolution."""

import json

import pytest

from resume_cli.contexts.intake import (
    CompilePreferences,
    InlineText,
    JobSubmissionRequest,
    UrlReference,
    resolve_request,
)
from resume_cli.contexts.intake.resolver import validate_json_document
from resume_cli.exceptions import (
    ConflictingArguments,
    FileReadError,
    InvalidJSON,
    MissingArgument,
    SubmissionError,
)

JD_URL = "https://jobs.example.com/planet-express/delivery-boy"


class TestArgumentValidation:
    """Flag presence and exclusivity checks run before any file is read."""

    @pytest.mark.unit
    @pytest.mark.parametrize("resume_path", ["", None])
    def test_missing_resume(self, resume_path):
        with pytest.raises(MissingArgument) as exc_info:
            resolve_request(resume_path, jd_url=JD_URL)
        assert exc_info.value.name == "resume"

    @pytest.mark.unit
    @pytest.mark.parametrize("jd_url, jd_text_path", [(None, None), ("", ""), ("", None)])
    def test_missing_job_description(self, resume_file, jd_url, jd_text_path):
        with pytest.raises(MissingArgument) as exc_info:
            resolve_request(resume_file, jd_url=jd_url, jd_text_path=jd_text_path)
        assert exc_info.value.name == "jd"

    @pytest.mark.unit
    def test_missing_job_description_checked_before_resume_read(self, tmp_path):
        """A nonexistent resume still reports the missing jd flag first."""
        with pytest.raises(MissingArgument) as exc_info:
            resolve_request(tmp_path / "nope.json")
        assert exc_info.value.name == "jd"

    @pytest.mark.unit
    def test_both_job_descriptions_conflict(self, resume_file, jd_file):
        with pytest.raises(ConflictingArguments) as exc_info:
            resolve_request(resume_file, jd_url=JD_URL, jd_text_path=jd_file)
        assert exc_info.value.name == "jd"
        assert "only one of --jd or --jdText" in str(exc_info.value)

    @pytest.mark.unit
    def test_all_errors_share_exit_code(self):
        assert MissingArgument("jd").exit_code == 1
        assert issubclass(ConflictingArguments, SubmissionError)


class TestResumeDocument:
    """Resume file reading and JSON validation."""

    @pytest.mark.unit
    def test_resume_not_found(self, tmp_path):
        missing = tmp_path / "missing.json"
        with pytest.raises(FileReadError) as exc_info:
            resolve_request(missing, jd_url=JD_URL)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert str(missing) in str(exc_info.value)

    @pytest.mark.unit
    def test_resume_is_directory(self, tmp_path):
        with pytest.raises(FileReadError):
            resolve_request(tmp_path, jd_url=JD_URL)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "content",
        [
            b'{"name":}',
            b"",
            b'{"a": 1} {"b": 2}',
            b'{"score": NaN}',
            b"\xef\xbb\xbf{}",
            b'{"name": "\xff"}',
        ],
        ids=["missing-value", "empty", "trailing-data", "nan", "bom", "invalid-utf8"],
    )
    def test_invalid_json(self, tmp_path, content):
        path = tmp_path / "resume.json"
        path.write_bytes(content)
        with pytest.raises(InvalidJSON) as exc_info:
            resolve_request(path, jd_url=JD_URL)
        assert exc_info.value.path == path
        assert "is not valid JSON" in str(exc_info.value)

    @pytest.mark.unit
    def test_invalid_json_checked_before_jd_file(self, tmp_path):
        """The jd text file is never read when the resume is invalid."""
        path = tmp_path / "resume.json"
        path.write_bytes(b'{"name":}')
        with pytest.raises(InvalidJSON):
            resolve_request(path, jd_text_path=tmp_path / "missing.txt")

    @pytest.mark.unit
    def test_any_json_value_is_accepted(self):
        """Only well-formedness is checked, not resume structure."""
        validate_json_document("resume.json", b"[1, 2, 3]")
        validate_json_document("resume.json", b'  "just a string"\n')

    @pytest.mark.unit
    def test_deeply_nested_resume_accepted(self, tmp_path):
        content = b'{"sections":' + b"[" * 3000 + b"]" * 3000 + b"}"
        path = tmp_path / "resume.json"
        path.write_bytes(content)

        request = resolve_request(path, jd_url=JD_URL)

        assert request.resume == content

    @pytest.mark.unit
    def test_too_deeply_nested_resume_rejected(self, tmp_path):
        path = tmp_path / "resume.json"
        path.write_bytes(b"[" * 20000 + b"]" * 20000)

        with pytest.raises(InvalidJSON, match="max nesting depth"):
            resolve_request(path, jd_url=JD_URL)

    @pytest.mark.unit
    def test_long_number_accepted(self, tmp_path):
        """Numbers are matched, not converted, so digit-count limits do not apply."""
        content = b'{"id": ' + b"7" * 5000 + b', "gpa": 3.' + b"9" * 5000 + b"}"
        path = tmp_path / "resume.json"
        path.write_bytes(content)

        assert resolve_request(path, jd_url=JD_URL).resume == content

    @pytest.mark.unit
    def test_resume_bytes_preserved(self, tmp_path):
        """Formatting, key order and escapes survive untouched."""
        content = b'{ "z": 1,\n\t"a": "caf\\u00e9",  "n": 1.50 }\r\n'
        path = tmp_path / "resume.json"
        path.write_bytes(content)

        request = resolve_request(path, jd_url=JD_URL)

        assert request.resume == content


class TestJobDescription:
    """Variant selection for the job description source."""

    @pytest.mark.unit
    def test_url_reference(self, resume_file):
        request = resolve_request(resume_file, jd_url=JD_URL)

        assert request.job_description == UrlReference(url=JD_URL)
        assert request.jd_kind == "url"
        assert request.resume == resume_file.read_bytes()

    @pytest.mark.unit
    def test_url_is_not_validated(self, resume_file):
        request = resolve_request(resume_file, jd_url="not a url")
        assert request.job_description == UrlReference(url="not a url")

    @pytest.mark.unit
    def test_inline_text(self, resume_file, jd_file):
        request = resolve_request(resume_file, jd_text_path=jd_file)

        assert isinstance(request.job_description, InlineText)
        assert request.job_description.text == jd_file.read_text(encoding="utf-8")
        assert request.jd_kind == "text"

    @pytest.mark.unit
    def test_inline_text_not_json_validated(self, resume_file, tmp_path):
        jd_path = tmp_path / "jd.txt"
        jd_path.write_bytes(b'{"this is": not json')
        request = resolve_request(resume_file, jd_text_path=jd_path)
        assert request.job_description.text == '{"this is": not json'

    @pytest.mark.unit
    def test_inline_text_invalid_utf8_replaced(self, resume_file, tmp_path):
        jd_path = tmp_path / "jd.txt"
        jd_path.write_bytes(b"Senior \xff Engineer")
        request = resolve_request(resume_file, jd_text_path=jd_path)
        assert request.job_description.text == "Senior � Engineer"

    @pytest.mark.unit
    def test_jd_text_file_not_found(self, resume_file, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(FileReadError) as exc_info:
            resolve_request(resume_file, jd_text_path=missing)
        assert exc_info.value.path == missing


class TestRequestStructure:
    """The assembled request and its fixed preferences."""

    @pytest.mark.unit
    def test_default_preferences(self, resume_file):
        request = resolve_request(resume_file, jd_url=JD_URL)

        assert request.preferences == CompilePreferences()
        assert request.preferences.to_wire() == {
            "template": "one_page_v1",
            "scoringModel": "keyword_alignment_v1",
        }

    @pytest.mark.unit
    def test_rejects_untyped_job_description(self):
        with pytest.raises(TypeError):
            JobSubmissionRequest(resume=b"{}", job_description={"type": "url", "url": JD_URL})

    @pytest.mark.unit
    def test_request_is_immutable(self, resume_file):
        request = resolve_request(resume_file, jd_url=JD_URL)
        with pytest.raises(AttributeError):
            request.resume = b"{}"

    @pytest.mark.unit
    def test_resume_parses_like_file_contents(self, resume_file):
        request = resolve_request(resume_file, jd_url=JD_URL)
        assert json.loads(request.resume) == json.loads(resume_file.read_bytes())
