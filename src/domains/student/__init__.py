# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student domain package.

This package provides management of admitted students:
- Student lookup and listing
- Student updates with seat recompute
- Student removal
"""

from src.domains.student.service import (
    DomainNotFoundError,
    EmailAlreadyExistsError,
    StudentNotFoundError,
    StudentService,
    StudentServiceError,
)

__all__ = [
    "StudentService",
    "StudentServiceError",
    "StudentNotFoundError",
    "DomainNotFoundError",
    "EmailAlreadyExistsError",
]
