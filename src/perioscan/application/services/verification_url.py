"""Verification URL convention shared with PDF exports."""

from urllib.parse import urlencode
from uuid import UUID


def build_verification_url(
    base_url: str, document_id: UUID | str, content_hash: str, verification_code: str
) -> str:
    """{base_url}/verify/{document_id}?hash={content_hash}&code={verification_code}"""
    query = urlencode({"hash": content_hash, "code": verification_code})
    return f"{base_url.rstrip('/')}/verify/{document_id}?{query}"
