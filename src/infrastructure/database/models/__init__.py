# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SQLAlchemy ORM models for the admission database.

Models:
    Domain: A capacity-limited academic program offering.
    Student: An admission record bound to exactly one domain.
"""

from src.infrastructure.database.models.base import Base, TimestampMixin
from src.infrastructure.database.models.admission import Domain, Student

__all__ = [
    "Base",
    "TimestampMixin",
    "Domain",
    "Student",
]
