"""PostgreSQL signable document repository (report / evidence_report tables)."""

from datetime import UTC, datetime
from uuid import UUID

from psycopg import AsyncConnection

from perioscan.domain.entities import DigitalSignature, SignableDocument
from perioscan.domain.value_objects import DocumentKind, DocumentStatus

_TABLES = {
    DocumentKind.REPORT: "report",
    DocumentKind.EVIDENCE_REPORT: "evidence_report",
}

# Reports have no findings / evidence link; select NULLs to keep one row shape.
_EVIDENCE_COLUMNS = {
    DocumentKind.REPORT: "NULL, NULL",
    DocumentKind.EVIDENCE_REPORT: "findings, evidence_id",
}


def _select_columns(kind: DocumentKind) -> str:
    return (
        "id, title, content, conclusion, methodology, "
        f"{_EVIDENCE_COLUMNS[kind]}, "
        "expert_responsible, status, created_at, updated_at, "
        "signed_by, signature_date, signature_data, content_hash, verification_code"
    )


class PostgresSignableDocumentRepository:
    """Signable document repository implementation, one instance per kind."""

    def __init__(self, conn: AsyncConnection, kind: DocumentKind) -> None:
        self._conn = conn
        self._kind = kind
        self._table = _TABLES[kind]

    async def get_by_id(self, document_id: UUID) -> SignableDocument | None:
        """Get document by id."""
        cur = await self._conn.execute(
            f"SELECT {_select_columns(self._kind)} FROM {self._table} WHERE id = %s",
            (document_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return self._row_to_document(r)

    async def update(self, document: SignableDocument) -> SignableDocument | None:
        """Update editable fields. Signed rows are never touched; returns None then."""
        document.updated_at = datetime.now(UTC)
        assignments = ["title=%s", "content=%s", "conclusion=%s", "methodology=%s"]
        params: list[object] = [
            document.title,
            document.content,
            document.conclusion,
            document.methodology,
        ]
        if self._kind == DocumentKind.EVIDENCE_REPORT:
            assignments.append("findings=%s")
            params.append(document.findings)
        assignments.append("updated_at=%s")
        params.extend([document.updated_at, document.id, DocumentStatus.SIGNED.value])
        cur = await self._conn.execute(
            f"UPDATE {self._table} SET {', '.join(assignments)} WHERE id=%s AND status <> %s",
            tuple(params),
        )
        if cur.rowcount != 1:
            return None
        return document

    async def set_status(
        self, document_id: UUID, status: DocumentStatus, expected_status: DocumentStatus
    ) -> bool:
        """Conditional status transition."""
        cur = await self._conn.execute(
            f"UPDATE {self._table} SET status=%s, updated_at=NOW() WHERE id=%s AND status=%s",
            (status.value, document_id, expected_status.value),
        )
        return cur.rowcount == 1

    async def apply_signature(self, document_id: UUID, signature: DigitalSignature) -> bool:
        """Store signature and mark signed, guarded on finalized + unsigned."""
        cur = await self._conn.execute(
            f"UPDATE {self._table} SET status=%s, signed_by=%s, signature_date=%s, "
            "signature_data=%s, content_hash=%s, verification_code=%s, updated_at=NOW() "
            "WHERE id=%s AND status=%s AND signature_data IS NULL",
            (
                DocumentStatus.SIGNED.value,
                signature.signed_by,
                signature.signature_date,
                signature.signature_data,
                signature.content_hash,
                signature.verification_code,
                document_id,
                DocumentStatus.FINALIZED.value,
            ),
        )
        return cur.rowcount == 1

    def _row_to_document(self, r: tuple) -> SignableDocument:
        signature = None
        if r[13]:
            signature = DigitalSignature(
                signed_by=r[11],
                signature_date=r[12],
                signature_data=r[13],
                content_hash=r[14],
                verification_code=r[15],
            )
        return SignableDocument(
            id=r[0],
            kind=self._kind,
            title=r[1],
            content=r[2],
            conclusion=r[3],
            methodology=r[4],
            findings=r[5],
            evidence_id=r[6],
            expert_responsible=r[7],
            status=DocumentStatus(r[8]),
            created_at=r[9],
            updated_at=r[10],
            digital_signature=signature,
        )
