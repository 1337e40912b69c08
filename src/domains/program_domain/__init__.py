# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Program domain package.

This package provides management of capacity-limited program offerings:
- Domain CRUD
- Seat recompute on capacity/cutoff change
- Update and delete impact previews
"""

from src.domains.program_domain.service import (
    DomainNotFoundError,
    DomainService,
    DomainServiceError,
)

__all__ = [
    "DomainService",
    "DomainServiceError",
    "DomainNotFoundError",
]
