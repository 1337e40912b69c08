# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest fixtures for database integration tests.

Provides a real database engine and session. Tests run against a
throwaway SQLite file by default; set TEST_DATABASE_URL to run them
against PostgreSQL instead.
"""

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.infrastructure.database.models import Domain, Student
from src.infrastructure.database.models.base import Base


@pytest.fixture
def db_url(tmp_path) -> str:
    """Get database URL for tests."""
    return os.environ.get(
        "TEST_DATABASE_URL",
        f"sqlite+aiosqlite:///{tmp_path / 'admissions_test.db'}",
    )


@pytest_asyncio.fixture(scope="function")
async def db_engine(db_url: str):
    """Create async engine with a fresh schema."""
    engine = create_async_engine(db_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session configured like the application's."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def add_domain(db_session):
    """Insert a domain row."""

    async def _add(
        program: str = "B.Tech CSE",
        capacity: int | None = None,
        cutoff_marks: float | None = None,
    ) -> Domain:
        domain = Domain(
            program=program,
            batch="2024",
            capacity=capacity,
            exam_name="JEE",
            cutoff_marks=cutoff_marks,
        )
        db_session.add(domain)
        await db_session.flush()
        return domain

    return _add


@pytest.fixture
def add_student(db_session):
    """Insert a student row with an explicit roll number."""

    async def _add(
        domain: Domain,
        roll_number: str,
        first_name: str,
        exam_marks: float = 50.0,
        join_year: int = 2024,
        is_active: bool = True,
        email: str | None = None,
    ) -> Student:
        student = Student(
            roll_number=roll_number,
            first_name=first_name,
            last_name="Test",
            email=email or f"{roll_number.lower()}@example.com",
            domain_id=domain.id,
            join_year=join_year,
            exam_marks=exam_marks,
            is_active=is_active,
        )
        db_session.add(student)
        await db_session.flush()
        return student

    return _add
