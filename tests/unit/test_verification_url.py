"""Unit tests for verification URL and result serialization."""

from urllib.parse import parse_qs, urlparse
from uuid import uuid4

from perioscan.application.dto.verification_dto import VerificationResult
from perioscan.application.services.verification_url import build_verification_url
from perioscan.domain.value_objects import VerificationReason


def test_verification_url_format() -> None:
    doc_id = uuid4()
    url = build_verification_url("https://perioscan.example/v1/reports/", doc_id, "ab" * 32, "ABCD2345")
    assert url == f"https://perioscan.example/v1/reports/verify/{doc_id}?hash={'ab' * 32}&code=ABCD2345"


def test_verification_url_round_trips_query() -> None:
    url = build_verification_url("http://localhost:8000/v1/evidence-reports", "x", "h" * 64, "CODE2345")
    parsed = urlparse(url)
    assert parsed.path == "/v1/evidence-reports/verify/x"
    assert parse_qs(parsed.query) == {"hash": ["h" * 64], "code": ["CODE2345"]}


def test_failure_to_dict_includes_details() -> None:
    result = VerificationResult.failure(
        VerificationReason.CONTENT_MISMATCH, expected_hash="a", current_hash="b"
    )
    assert result.to_dict() == {
        "valid": False,
        "reason": "ContentMismatch",
        "message": VerificationReason.CONTENT_MISMATCH.message,
        "expectedHash": "a",
        "currentHash": "b",
    }


def test_success_to_dict_omits_unset_fields() -> None:
    result = VerificationResult(valid=True, signed_by={"id": "u1"}, signature_date="d", age="a")
    assert result.to_dict() == {
        "valid": True,
        "signedBy": {"id": "u1"},
        "signatureDate": "d",
        "age": "a",
    }
