"""Initial schema – users, portfolio settings and all content tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

Creates every table the SQL storage backend uses, including the
skills → skills_categories foreign key with ON DELETE CASCADE.
The default admin and settings rows are not inserted here; the application
creates them on startup (initialize_database).
"""

from alembic import op
import sqlalchemy as sa

# Alembic revision identifiers
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # -- users ----------------------------------------------------------
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False, unique=True),
        # passlib pbkdf2_sha256 hash, salt embedded
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_users_username", "users", ["username"])

    # -- portfolio_settings ---------------------------------------------
    op.create_table(
        "portfolio_settings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("primary", sa.String(50), nullable=False),
        sa.Column("variant", sa.String(50), nullable=False),
        sa.Column("appearance", sa.String(20), nullable=False),
        sa.Column("radius", sa.Integer(), nullable=False),
        sa.Column("site_title", sa.String(100), nullable=False),
        sa.Column("logo", sa.String(255), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )

    # -- skills_categories / skills -------------------------------------
    op.create_table(
        "skills_categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("icon", sa.String(50), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column(
            "category_id",
            sa.Integer(),
            sa.ForeignKey("skills_categories.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_skills_category_id", "skills", ["category_id"])

    # -- education / experiences ----------------------------------------
    op.create_table(
        "education",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("degree", sa.String(150), nullable=False),
        sa.Column("institution", sa.String(150), nullable=False),
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column("period", sa.String(50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("courses", sa.JSON(), nullable=False),
        sa.Column("achievements", sa.Text(), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_table(
        "experiences",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("company", sa.String(150), nullable=False),
        sa.Column("period", sa.String(50), nullable=True),
        sa.Column("responsibilities", sa.JSON(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
    )

    # -- projects ---------------------------------------------------------
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("period", sa.String(50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("technologies", sa.JSON(), nullable=False),
        sa.Column("image", sa.String(255), nullable=True),
        sa.Column("demo_link", sa.String(255), nullable=True),
        sa.Column("code_link", sa.String(255), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    # Public listing sorts by display order
    op.create_index("ix_projects_display_order", "projects", ["display_order"])

    # -- open_source_contributions ----------------------------------------
    op.create_table(
        "open_source_contributions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("link", sa.String(255), nullable=True),
        sa.Column("link_text", sa.String(100), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
    )

    # -- about_content / contact_info (single row each) -------------------
    op.create_table(
        "about_content",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("journey_text", sa.Text(), nullable=True),
        sa.Column("quote", sa.Text(), nullable=True),
        sa.Column("expertise_items", sa.JSON(), nullable=False),
        sa.Column("traits", sa.JSON(), nullable=False),
    )
    op.create_table(
        "contact_info",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(150), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("location", sa.String(150), nullable=True),
        sa.Column("github", sa.String(255), nullable=True),
        sa.Column("linkedin", sa.String(255), nullable=True),
        sa.Column("stackoverflow", sa.String(255), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("contact_info")
    op.drop_table("about_content")
    op.drop_table("open_source_contributions")
    op.drop_index("ix_projects_display_order", table_name="projects")
    op.drop_table("projects")
    op.drop_table("experiences")
    op.drop_table("education")
    op.drop_index("ix_skills_category_id", table_name="skills")
    op.drop_table("skills")
    op.drop_table("skills_categories")
    op.drop_table("portfolio_settings")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
