"""create_movies_table

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:44.205113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def upgrade():
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=20), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("genre", sa.String(length=20), nullable=False),
        sa.Column("release_date", sa.DateTime(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_movies_id", "movies", ["id"])

def downgrade():
    op.drop_index("ix_movies_id", table_name="movies")
    op.drop_table("movies")
