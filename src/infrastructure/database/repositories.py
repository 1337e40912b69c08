# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data access for domains and students.

Repositories stage changes on the session (add/delete/flush) and never
commit. The calling service owns the unit of work and commits once.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.models import Domain, Student


class DomainRepository:
    """Domain table access.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, domain_id: int, for_update: bool = False) -> Domain | None:
        """Get a domain by primary key.

        Args:
            domain_id: Domain identifier.
            for_update: Lock the row until the transaction ends. Used to
                serialize admissions into the same domain.

        Returns:
            Domain if found, None otherwise.
        """
        query = select(Domain).where(Domain.id == domain_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Domain]:
        result = await self.db.execute(select(Domain).order_by(Domain.id))
        return list(result.scalars().all())

    async def exists(self, domain_id: int) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(Domain).where(Domain.id == domain_id)
        )
        return (result.scalar() or 0) > 0

    async def count_active_students(self, domain_id: int) -> int:
        """Live count of seat-holding students in a domain."""
        result = await self.db.execute(
            select(func.count())
            .select_from(Student)
            .where(Student.domain_id == domain_id, Student.is_active.is_(True))
        )
        return result.scalar() or 0

    async def add(self, domain: Domain) -> Domain:
        self.db.add(domain)
        await self.db.flush()
        return domain

    async def delete(self, domain: Domain) -> None:
        await self.db.delete(domain)
        await self.db.flush()


class StudentRepository:
    """Student table access.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, student_id: int) -> Student | None:
        result = await self.db.execute(select(Student).where(Student.id == student_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Student | None:
        result = await self.db.execute(
            select(Student).where(func.lower(Student.email) == email.lower())
        )
        return result.scalars().first()

    async def list_all(self) -> list[Student]:
        result = await self.db.execute(select(Student).order_by(Student.id))
        return list(result.scalars().all())

    async def list_by_domain(self, domain_id: int) -> list[Student]:
        """Every student of a domain, active or not."""
        result = await self.db.execute(
            select(Student).where(Student.domain_id == domain_id).order_by(Student.id)
        )
        return list(result.scalars().all())

    async def list_active_by_domain(self, domain_id: int) -> list[Student]:
        result = await self.db.execute(
            select(Student)
            .where(Student.domain_id == domain_id, Student.is_active.is_(True))
            .order_by(Student.id)
        )
        return list(result.scalars().all())

    async def find_by_roll_prefix_and_year(
        self,
        roll_base: str,
        join_year: int,
    ) -> list[Student]:
        """Students whose roll number starts with ``roll_base`` in ``join_year``.

        Args:
            roll_base: Degree prefix plus 4-digit year, e.g. ``BT2024``.
            join_year: Join year that must also match the column.

        Returns:
            Matching students. Callers still validate the roll number shape.
        """
        result = await self.db.execute(
            select(Student).where(
                Student.roll_number.startswith(roll_base, autoescape=True),
                Student.join_year == join_year,
            )
        )
        return list(result.scalars().all())

    async def add(self, student: Student) -> Student:
        self.db.add(student)
        await self.db.flush()
        return student

    async def add_all(self, students: list[Student]) -> None:
        self.db.add_all(students)
        await self.db.flush()

    async def delete(self, student: Student) -> None:
        await self.db.delete(student)
        await self.db.flush()

    async def delete_all(self, students: list[Student]) -> None:
        for student in students:
            await self.db.delete(student)
        await self.db.flush()
