"""Initial migration: news_articles, gallery_items, information_pages, contact_info.

Revision ID: 001
Revises: None
Create Date: 2026-10-17
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "news_articles",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("summary", sa.Text, nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_news_articles_category_published_at", "news_articles", ["category", "published_at"])
    op.create_index("ix_news_articles_featured_published_at", "news_articles", ["is_featured", "published_at"])

    op.create_table(
        "gallery_items",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=True),
        sa.Column("taken_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_gallery_items_created_at", "gallery_items", ["created_at"])

    op.create_table(
        "information_pages",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("slug", sa.Text(), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("page_type", sa.String(20), nullable=False),
        sa.Column("is_published", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("meta_description", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("uq_information_pages_slug", "information_pages", ["slug"], unique=True)
    op.create_index("ix_information_pages_published_title", "information_pages", ["is_published", "title"])

    op.create_table(
        "contact_info",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("department", sa.Text(), nullable=False),
        sa.Column("contact_type", sa.String(20), nullable=False),
        sa.Column("label", sa.Text(), nullable=False),
        sa.Column("value", sa.Text, nullable=False),
        sa.Column("is_primary", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("display_order", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("display_order >= 0", name="ck_contact_info_display_order_non_negative"),
    )
    op.create_index("ix_contact_info_department_order", "contact_info", ["department", "display_order"])


def downgrade() -> None:
    op.drop_table("contact_info")
    op.drop_table("information_pages")
    op.drop_table("gallery_items")
    op.drop_table("news_articles")
