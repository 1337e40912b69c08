# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def mock_db():
    """Create mock database session."""
    db = AsyncMock()
    db.add = MagicMock()
    db.add_all = MagicMock()
    db.delete = AsyncMock()
    db.flush = AsyncMock()
    db.commit = AsyncMock()
    db.refresh = AsyncMock()
    db.execute = AsyncMock()
    return db


@pytest.fixture
def make_domain():
    """Factory for in-memory domain records."""

    def _make(
        domain_id: int = 1,
        program: str = "B.Tech CSE",
        capacity: int | None = None,
        cutoff_marks: float | None = None,
        **extra: Any,
    ) -> SimpleNamespace:
        return SimpleNamespace(
            id=domain_id,
            program=program,
            batch=extra.get("batch", "2024"),
            capacity=capacity,
            exam_name=extra.get("exam_name", "JEE"),
            cutoff_marks=cutoff_marks,
        )

    return _make


@pytest.fixture
def make_student():
    """Factory for in-memory student records."""

    def _make(
        student_id: int | None,
        first_name: str,
        last_name: str = "",
        exam_marks: float | None = 50.0,
        is_active: bool = True,
        **extra: Any,
    ) -> SimpleNamespace:
        return SimpleNamespace(
            id=student_id,
            first_name=first_name,
            last_name=last_name,
            exam_marks=exam_marks,
            is_active=is_active,
            roll_number=extra.get("roll_number"),
            email=extra.get("email", f"{first_name.lower()}{student_id}@example.com"),
            domain_id=extra.get("domain_id", 1),
            join_year=extra.get("join_year", 2024),
        )

    return _make
