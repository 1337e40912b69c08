# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain and Student models.

Both entities are plain data holders. Roll numbers and activation flags are
computed by the admission engine before the rows are flushed.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database.models.base import Base, TimestampMixin


class Domain(Base, TimestampMixin):
    """A capacity-limited academic program offering.

    ``capacity`` and ``cutoff_marks`` are optional. An unset capacity means
    unlimited seats; an unset cutoff means every student with marks is
    eligible.
    """

    __tablename__ = "domains"
    __table_args__ = (
        CheckConstraint(
            "capacity IS NULL OR (capacity >= 0 AND capacity <= 150)",
            name="ck_domains_capacity_range",
        ),
        CheckConstraint(
            "cutoff_marks IS NULL OR (cutoff_marks >= 0 AND cutoff_marks <= 100)",
            name="ck_domains_cutoff_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    program: Mapped[str] = mapped_column(String(120), nullable=False)
    batch: Mapped[str | None] = mapped_column(String(50), nullable=True)
    capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    exam_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    cutoff_marks: Mapped[float | None] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Domain {self.id}: {self.program}>"


class Student(Base, TimestampMixin):
    """An admitted student.

    ``roll_number`` is assigned once at admission and never rewritten.
    ``is_active`` is derived state owned by the seat allocator.
    """

    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint(
            "exam_marks >= 0 AND exam_marks <= 100",
            name="ck_students_exam_marks_range",
        ),
        Index("ix_students_domain_active", "domain_id", "is_active"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    roll_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    domain_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("domains.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    join_year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    exam_marks: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    domain: Mapped[Domain] = relationship(
        "Domain",
        lazy="joined",
        innerjoin=True,
    )

    def __repr__(self) -> str:
        return f"<Student {self.id}: {self.roll_number}>"
