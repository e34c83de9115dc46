"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 002_projects (Alembic Migration)

Responsibilities:
  - Crear tabla projects (N:1 con users, ON DELETE CASCADE).
  - Índice (user_id, sort_order) para el listado ordenado del portfolio.
  - Unique parcial (user_id, source_id) para imports de GitHub: el mismo
    repo no se importa dos veces.
  - CHECK constraint para source_type (solo valores válidos del enum).

Collaborators:
  - PostgreSQL 16+ (UUID, JSONB, CHECK, índices parciales)
  - domain.entities (Project, ProjectSourceType)
  - infrastructure/repositories/postgres/project.py
============================================================
"""

from typing import Sequence, Union

from alembic import op

# ============================================================
# Alembic identifiers
# ============================================================
revision: str = "002_projects"
down_revision: Union[str, None] = "001_foundation"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# ============================================================
# Constants
# ============================================================
_TABLE = "projects"
_ALLOWED_SOURCE_TYPES = ("manual", "github", "external")


def upgrade() -> None:
    """
    Crea la tabla projects con índices y constraints.
    """
    source_types_check = ", ".join(f"'{s}'" for s in _ALLOWED_SOURCE_TYPES)

    op.execute(
        f"""
        CREATE TABLE {_TABLE} (
            id                    UUID PRIMARY KEY,
            user_id               UUID NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            title                 TEXT NOT NULL,
            description           TEXT NOT NULL DEFAULT '',
            detailed_description  TEXT NOT NULL DEFAULT '',
            image_url             TEXT NULL,
            project_url           TEXT NULL,
            github_url            TEXT NULL,
            technologies          JSONB NOT NULL DEFAULT '[]'::jsonb,
            featured              BOOLEAN NOT NULL DEFAULT false,
            sort_order            INTEGER NOT NULL DEFAULT 0,
            is_imported           BOOLEAN NOT NULL DEFAULT false,
            source_type           VARCHAR(20) NOT NULL DEFAULT 'manual',
            source_id             VARCHAR(255) NULL,
            is_visible            BOOLEAN NOT NULL DEFAULT true,
            created_at            TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at            TIMESTAMPTZ NOT NULL DEFAULT now(),

            CONSTRAINT ck_{_TABLE}_source_type
                CHECK (source_type IN ({source_types_check}))
        )
    """
    )

    # Índice para el listado ordenado por usuario
    op.execute(
        f"CREATE INDEX ix_{_TABLE}_user_sort_order ON {_TABLE} (user_id, sort_order)"
    )

    # Unique: no importar dos veces el mismo repo de GitHub
    op.execute(
        f"CREATE UNIQUE INDEX uq_{_TABLE}_user_github_source "
        f"ON {_TABLE} (user_id, source_id) "
        f"WHERE source_type = 'github' AND source_id IS NOT NULL"
    )


def downgrade() -> None:
    """Elimina tabla projects y sus índices."""
    op.execute(f"DROP TABLE IF EXISTS {_TABLE} CASCADE")
