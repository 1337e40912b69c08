# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Initial admission database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2025-06-02

Creates the domains and students tables based on the SQLAlchemy models
in src/infrastructure/database/models/admission.py.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create admission tables."""
    # ==========================================================================
    # 1. domains table
    # ==========================================================================
    op.create_table(
        "domains",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("program", sa.String(120), nullable=False),
        sa.Column("batch", sa.String(50), nullable=True),
        sa.Column("capacity", sa.Integer, nullable=True),
        sa.Column("exam_name", sa.String(120), nullable=True),
        sa.Column("cutoff_marks", sa.Numeric(5, 2), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint(
            "capacity IS NULL OR (capacity >= 0 AND capacity <= 150)",
            name="ck_domains_capacity_range",
        ),
        sa.CheckConstraint(
            "cutoff_marks IS NULL OR (cutoff_marks >= 0 AND cutoff_marks <= 100)",
            name="ck_domains_cutoff_range",
        ),
    )

    # ==========================================================================
    # 2. students table
    # ==========================================================================
    op.create_table(
        "students",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("roll_number", sa.String(50), unique=True, nullable=False),
        sa.Column("first_name", sa.String(120), nullable=False),
        sa.Column("last_name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column(
            "domain_id",
            sa.Integer,
            sa.ForeignKey("domains.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("join_year", sa.Integer, nullable=False),
        sa.Column("exam_marks", sa.Numeric(5, 2), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint(
            "exam_marks >= 0 AND exam_marks <= 100",
            name="ck_students_exam_marks_range",
        ),
    )
    op.create_index("ix_students_domain_id", "students", ["domain_id"])
    op.create_index("ix_students_join_year", "students", ["join_year"])
    # Active-by-domain listing
    op.create_index("ix_students_domain_active", "students", ["domain_id", "is_active"])


def downgrade() -> None:
    """Drop admission tables."""
    op.drop_index("ix_students_domain_active", table_name="students")
    op.drop_index("ix_students_join_year", table_name="students")
    op.drop_index("ix_students_domain_id", table_name="students")
    op.drop_table("students")
    op.drop_table("domains")
