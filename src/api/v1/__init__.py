# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

This package contains all v1 API endpoint definitions.
Each module provides a FastAPI router for a specific resource.

Modules:
    domains: Program domain endpoints (CRUD, impact previews, recompute).
    students: Student endpoints (admission, listing, update, delete).
"""

from fastapi import APIRouter

from src.api.v1 import domains, students

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

router.include_router(domains.router, prefix="/domains", tags=["Domains"])
router.include_router(students.router, prefix="/students", tags=["Students"])

__all__ = ["router"]
