"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from perioscan.domain.value_objects import DocumentKind
from perioscan.infrastructure.persistence.postgres.document_version_repository import (
    PostgresDocumentVersionRepository,
)
from perioscan.infrastructure.persistence.postgres.signable_document_repository import (
    PostgresSignableDocumentRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._reports = PostgresSignableDocumentRepository(self._conn, DocumentKind.REPORT)
        self._evidence_reports = PostgresSignableDocumentRepository(
            self._conn, DocumentKind.EVIDENCE_REPORT
        )
        self._versions = PostgresDocumentVersionRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def reports(self) -> PostgresSignableDocumentRepository:
        return self._reports

    @property
    def evidence_reports(self) -> PostgresSignableDocumentRepository:
        return self._evidence_reports

    @property
    def versions(self) -> PostgresDocumentVersionRepository:
        return self._versions

    def documents(self, kind: DocumentKind) -> PostgresSignableDocumentRepository:
        if kind == DocumentKind.EVIDENCE_REPORT:
            return self._evidence_reports
        return self._reports

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
