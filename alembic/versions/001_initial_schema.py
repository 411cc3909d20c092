"""Initial schema - role, role_permission, user_role.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "role_permission",
        sa.Column("role_id", sa.String(255), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("permission", sa.String(255), primary_key=True),
    )

    # No foreign key on role_id: a deleted role leaves a stale reference that reads as "no role".
    op.create_table(
        "user_role",
        sa.Column("user_id", sa.String(255), primary_key=True),
        sa.Column("role_id", sa.String(255), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_role_role_id", "user_role", ["role_id"])


def downgrade() -> None:
    op.drop_index("ix_user_role_role_id", table_name="user_role")
    op.drop_table("user_role")
    op.drop_table("role_permission")
    op.drop_table("role")
