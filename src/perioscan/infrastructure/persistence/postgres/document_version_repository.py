"""PostgreSQL document version repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from perioscan.domain.entities import DocumentVersion
from perioscan.domain.value_objects import DocumentStatus


class PostgresDocumentVersionRepository:
    """Append-only document_version table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, version: DocumentVersion) -> DocumentVersion:
        """Insert version snapshot."""
        await self._conn.execute(
            "INSERT INTO document_version "
            "(id, document_id, content, conclusion, findings, status, modified_by, modified_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                version.id,
                version.document_id,
                version.content,
                version.conclusion,
                version.findings,
                version.status.value,
                version.modified_by,
                version.modified_at,
            ),
        )
        return version

    async def list_by_document(self, document_id: UUID) -> list[DocumentVersion]:
        """Versions of a document, oldest first."""
        cur = await self._conn.execute(
            "SELECT id, document_id, content, conclusion, findings, status, modified_by, modified_at "
            "FROM document_version WHERE document_id = %s ORDER BY modified_at",
            (document_id,),
        )
        rows = await cur.fetchall()
        return [
            DocumentVersion(
                id=r[0],
                document_id=r[1],
                content=r[2],
                conclusion=r[3],
                findings=r[4],
                status=DocumentStatus(r[5]),
                modified_by=r[6],
                modified_at=r[7],
            )
            for r in rows
        ]
