"""
Create the cats table
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_create_cats"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "cats",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("image", sa.Text, nullable=False),
        sa.Column("count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("issfw", sa.Boolean, nullable=True),
        sa.Column("vote", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column(
            "created_at", sa.TIMESTAMP, server_default=sa.text("CURRENT_TIMESTAMP")
        ),
        sa.Column(
            "updated_at", sa.TIMESTAMP, server_default=sa.text("CURRENT_TIMESTAMP")
        ),
    )
    op.create_index("idx_cats_count", "cats", ["count"])
    op.create_index("idx_cats_issfw", "cats", ["issfw"])


def downgrade():
    op.drop_index("idx_cats_issfw", table_name="cats")
    op.drop_index("idx_cats_count", table_name="cats")
    op.drop_table("cats")
