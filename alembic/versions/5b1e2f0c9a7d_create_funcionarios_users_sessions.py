"""create funcionarios, users and auth_sessions

Revision ID: 5b1e2f0c9a7d
Revises:
Create Date: 2026-10-19 10:12:03.118204
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "5b1e2f0c9a7d"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "funcionarios",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("empresa_id", sa.Integer(), nullable=True),
        sa.Column("nome", sa.String(255), nullable=False),
        sa.Column("cpf", sa.String(14), nullable=False),
        sa.Column("rg", sa.String(20), nullable=True),
        sa.Column("data_nascimento", sa.Date(), nullable=True),
        sa.Column("funcao", sa.String(100), nullable=True),
        sa.Column("data_admissao", sa.Date(), nullable=True),
        sa.Column("ctps_numero", sa.String(20), nullable=True),
        sa.Column("ctps_serie", sa.String(20), nullable=True),
        sa.Column("pis", sa.String(20), nullable=True),
        sa.Column("telefone", sa.String(20), nullable=True),
        sa.Column("whatsapp", sa.String(50), nullable=True),
        sa.Column("email", sa.String(100), nullable=True),
        sa.Column("endereco", sa.Text(), nullable=True),
        sa.Column("cidade", sa.String(100), nullable=True),
        sa.Column("estado", sa.String(2), nullable=True),
        sa.Column("cep", sa.String(10), nullable=True),
        sa.Column("ativo", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("supervisor", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.UniqueConstraint("cpf", name="uq_funcionarios_cpf"),
    )
    op.create_index("ix_funcionarios_funcao", "funcionarios", ["funcao"])

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_external_id", "users", ["external_id"], unique=True)

    op.create_table(
        "auth_sessions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("token_hash", sa.String(64), nullable=False),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_seen_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_auth_sessions_token_hash", "auth_sessions", ["token_hash"], unique=True)
    op.create_index("ix_auth_sessions_expires_at", "auth_sessions", ["expires_at"])


def downgrade() -> None:
    op.drop_index("ix_auth_sessions_expires_at", table_name="auth_sessions")
    op.drop_index("ix_auth_sessions_token_hash", table_name="auth_sessions")
    op.drop_table("auth_sessions")
    op.drop_index("ix_users_external_id", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_funcionarios_funcao", table_name="funcionarios")
    op.drop_table("funcionarios")
