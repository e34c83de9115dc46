"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 001_foundation (Alembic Migration)

Responsibilities:
  - Crear el esquema completo desde cero (migración fundacional).
  - users: identidad (username/email únicos, rol admin|user).
  - profiles: 1:1 con users (user_id único, ON DELETE CASCADE), items
    anidados y social_links en JSONB.
  - translations: memo de traducciones, único por
    (hash, source_language, target_language).

Collaborators:
  - PostgreSQL 16+
  - infrastructure/repositories/postgres (usa este esquema como contrato)

Policy:
  - Migración BASELINE. Downgrade borra las tablas (solo dev).
  - Convención de nombres (constraints / indexes):
      pk_<tabla>                         - Primary keys
      uq_<tabla>_<col>                   - Unique constraints
      ix_<tabla>_<col>                   - Indexes
      fk_<tabla>_<col>__<ref_tabla>      - Foreign keys
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001_foundation"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def _jsonb(name: str, default: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.JSONB,
        nullable=False,
        server_default=sa.text(f"'{default}'::jsonb"),
    )


def _text(name: str) -> sa.Column:
    return sa.Column(name, sa.Text, nullable=False, server_default=sa.text("''"))


def upgrade() -> None:
    # =========================================================
    # 1) IDENTITY (users)
    # =========================================================
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column(
            "role",
            sa.String(50),
            nullable=False,
            server_default=sa.text("'user'"),
        ),
        sa.Column(
            "is_active",
            sa.Boolean,
            nullable=False,
            server_default=sa.text("true"),
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("role IN ('admin', 'user')", name="ck_users_role"),
    )

    # =========================================================
    # 2) PROFILES (1:1 con users)
    # =========================================================
    op.create_table(
        "profiles",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        _text("name"),
        _text("title"),
        _text("bio"),
        _text("location"),
        _text("contact_email"),
        _text("phone"),
        _jsonb("skills", "[]"),
        _jsonb("languages", "[]"),
        _jsonb("experience", "[]"),
        _jsonb("social_links", "{}"),
        sa.Column("profile_image_url", sa.Text, nullable=True),
        sa.Column("header_image_url", sa.Text, nullable=True),
        sa.Column("cv_view_url", sa.Text, nullable=True),
        sa.Column("cv_download_url", sa.Text, nullable=True),
        sa.Column("cv_file_url", sa.Text, nullable=True),
        _jsonb("settings", "{}"),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("user_id", name="pk_profiles"),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_profiles_user_id__users",
            ondelete="CASCADE",
        ),
    )

    # =========================================================
    # 3) TRANSLATIONS (memo, nunca expira)
    # =========================================================
    op.create_table(
        "translations",
        sa.Column(
            "id",
            sa.BigInteger,
            sa.Identity(always=False),
            nullable=False,
        ),
        sa.Column("hash", sa.String(64), nullable=False),
        sa.Column("source_language", sa.String(8), nullable=False),
        sa.Column("target_language", sa.String(8), nullable=False),
        sa.Column("original_text", sa.Text, nullable=False),
        sa.Column("translated_text", sa.Text, nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_translations"),
    )
    # R: la unicidad del triple es la que resuelve escrituras concurrentes.
    op.create_index(
        "uq_translations_hash_languages",
        "translations",
        ["hash", "source_language", "target_language"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("uq_translations_hash_languages", table_name="translations")
    op.drop_table("translations")
    op.drop_table("profiles")
    op.drop_table("users")
