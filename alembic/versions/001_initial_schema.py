"""Initial schema - report, evidence_report, document_version.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_STATUSES = "status IN ('rascunho', 'finalizado', 'assinado')"


def _signature_columns() -> list[sa.Column]:
    return [
        sa.Column("signed_by", sa.String(255), nullable=True),
        sa.Column("signature_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("signature_data", sa.Text(), nullable=True),
        sa.Column("content_hash", sa.String(64), nullable=True),
        sa.Column("verification_code", sa.String(8), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "report",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("conclusion", sa.Text(), nullable=True),
        sa.Column("methodology", sa.Text(), nullable=True),
        sa.Column("case_id", sa.UUID(), nullable=True),
        sa.Column("expert_responsible", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="rascunho"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        *_signature_columns(),
        sa.CheckConstraint(_STATUSES, name="ck_report_status"),
    )
    op.create_index("ix_report_case_id", "report", ["case_id"])

    op.create_table(
        "evidence_report",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("findings", sa.Text(), nullable=False),
        sa.Column("conclusion", sa.Text(), nullable=True),
        sa.Column("methodology", sa.Text(), nullable=True),
        sa.Column("evidence_id", sa.UUID(), nullable=False),
        sa.Column("case_id", sa.UUID(), nullable=True),
        sa.Column("expert_responsible", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="rascunho"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        *_signature_columns(),
        sa.CheckConstraint(_STATUSES, name="ck_evidence_report_status"),
    )
    op.create_index("ix_evidence_report_evidence_id", "evidence_report", ["evidence_id"])

    # Shared by both kinds; ids are UUIDs so no collision.
    op.create_table(
        "document_version",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("conclusion", sa.Text(), nullable=True),
        sa.Column("findings", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("modified_by", sa.String(255), nullable=False),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_document_version_document_id", "document_version", ["document_id"])


def downgrade() -> None:
    op.drop_index("ix_document_version_document_id", table_name="document_version")
    op.drop_table("document_version")
    op.drop_index("ix_evidence_report_evidence_id", table_name="evidence_report")
    op.drop_table("evidence_report")
    op.drop_index("ix_report_case_id", table_name="report")
    op.drop_table("report")
