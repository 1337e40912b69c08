# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure for the admission service.

This package provides SQLAlchemy async connections, ORM models and the
repositories the admission engine reads and writes through.

Example:
    from src.infrastructure.database import get_session, DomainRepository

    async with get_session() as session:
        domain = await DomainRepository(session).get_by_id(1)
"""

from src.infrastructure.database.connection import (
    DatabaseError,
    check_database_connection,
    close_database,
    get_engine,
    get_session,
    get_sessionmaker,
    init_database,
)
from src.infrastructure.database.repositories import (
    DomainRepository,
    StudentRepository,
)

__all__ = [
    # Connection
    "DatabaseError",
    "check_database_connection",
    "close_database",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_database",
    # Repositories
    "DomainRepository",
    "StudentRepository",
]
