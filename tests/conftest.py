"""Pytest fixtures for PerioScan tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from perioscan.application.services.signature_engine import SignatureEngine
from perioscan.domain.entities import DigitalSignature, DocumentVersion, SignableDocument, Signer
from perioscan.domain.value_objects import DocumentKind, DocumentStatus
from perioscan.infrastructure.signing.jwt_signer import JWTTokenSigner

TEST_SECRET = "test-signing-secret-0123456789abcdef"


# --- Fake repositories ---


class FakeSignableDocumentRepository:
    """In-memory signable document repository."""

    def __init__(self, kind: DocumentKind) -> None:
        self.kind = kind
        self._by_id: dict[UUID, SignableDocument] = {}

    def add(self, document: SignableDocument) -> SignableDocument:
        self._by_id[document.id] = document
        return document

    async def get_by_id(self, document_id: UUID) -> SignableDocument | None:
        return self._by_id.get(document_id)

    async def update(self, document: SignableDocument) -> SignableDocument | None:
        current = self._by_id.get(document.id)
        if not current or current.status == DocumentStatus.SIGNED:
            return None
        self._by_id[document.id] = document
        return document

    async def set_status(
        self, document_id: UUID, status: DocumentStatus, expected_status: DocumentStatus
    ) -> bool:
        doc = self._by_id.get(document_id)
        if not doc or doc.status != expected_status:
            return False
        self._by_id[document_id] = replace(doc, status=status)
        return True

    async def apply_signature(self, document_id: UUID, signature: DigitalSignature) -> bool:
        doc = self._by_id.get(document_id)
        if not doc or doc.status != DocumentStatus.FINALIZED or doc.digital_signature:
            return False
        self._by_id[document_id] = replace(
            doc, status=DocumentStatus.SIGNED, digital_signature=signature
        )
        return True


class FakeDocumentVersionRepository:
    """In-memory version history."""

    def __init__(self) -> None:
        self._store: list[DocumentVersion] = []

    async def append(self, version: DocumentVersion) -> DocumentVersion:
        self._store.append(version)
        return version

    async def list_by_document(self, document_id: UUID) -> list[DocumentVersion]:
        return [v for v in self._store if v.document_id == document_id]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.reports = FakeSignableDocumentRepository(DocumentKind.REPORT)
        self.evidence_reports = FakeSignableDocumentRepository(DocumentKind.EVIDENCE_REPORT)
        self.versions = FakeDocumentVersionRepository()

    def documents(self, kind: DocumentKind) -> FakeSignableDocumentRepository:
        if kind == DocumentKind.EVIDENCE_REPORT:
            return self.evidence_reports
        return self.reports

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


# --- Builders ---


def make_document(
    *,
    kind: DocumentKind = DocumentKind.REPORT,
    status: DocumentStatus = DocumentStatus.FINALIZED,
    expert_responsible: str = "u1",
    content: str = "Findings: fracture observed.",
    conclusion: str | None = "Consistent with trauma.",
    document_id: UUID | None = None,
    **kwargs,
) -> SignableDocument:
    now = datetime.now(UTC)
    if kind == DocumentKind.EVIDENCE_REPORT:
        kwargs.setdefault("findings", "Enamel fracture on tooth 11.")
        kwargs.setdefault("evidence_id", uuid4())
    return SignableDocument(
        id=document_id or uuid4(),
        kind=kind,
        title="Laudo odontolegal",
        content=content,
        conclusion=conclusion,
        expert_responsible=expert_responsible,
        status=status,
        created_at=now,
        updated_at=now,
        **kwargs,
    )


def make_signer(role: str = "perito", user_id: str = "u1") -> Signer:
    return Signer(id=user_id, name="Dr. X", email="x@y.com", role=role)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager yielding the same FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def token_signer() -> JWTTokenSigner:
    return JWTTokenSigner(TEST_SECRET)


@pytest.fixture
def engine(token_signer: JWTTokenSigner) -> SignatureEngine:
    return SignatureEngine(token_signer)


@pytest.fixture
def signer() -> Signer:
    return make_signer()


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - returns True by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    return mock
