"""create job_listings

Revision ID: 001_job_listings
Revises:
Create Date: 2026-10-19

Creates the job_listings table. Company metadata lives on each listing:
  • company_name (indexed): exact-match lookups for profiles and counts
  • company_slug (nullable, indexed): generated once by the slug backfill
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "001_job_listings"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "job_listings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="publish"),
        sa.Column("filled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("company_slug", sa.String(length=255), nullable=True),
        sa.Column("company_location", sa.String(length=255), nullable=True),
        sa.Column("company_industry", sa.String(length=255), nullable=True),
        sa.Column("company_size", sa.String(length=50), nullable=True),
        sa.Column("company_description", sa.Text(), nullable=True),
        sa.Column("company_tagline", sa.String(length=255), nullable=True),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_job_listings_status", "job_listings", ["status"])
    op.create_index("ix_job_listings_company_name", "job_listings", ["company_name"])
    op.create_index("ix_job_listings_company_slug", "job_listings", ["company_slug"])
    op.create_index("ix_job_listings_created_at", "job_listings", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_job_listings_created_at", table_name="job_listings")
    op.drop_index("ix_job_listings_company_slug", table_name="job_listings")
    op.drop_index("ix_job_listings_company_name", table_name="job_listings")
    op.drop_index("ix_job_listings_status", table_name="job_listings")
    op.drop_table("job_listings")
