# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student service for managing admitted students.

This module provides the StudentService class for:
- Student lookup and listing
- Student updates (name, email, join year, marks, domain)
- Student removal

Roll numbers are never rewritten after admission.
"""

from __future__ import annotations

import logging
from typing import Literal

from sqlalchemy.ext.asyncio import AsyncSession

from src.domains.admission.activation import ActivationService
from src.domains.admission.seat_allocator import SeatAllocator
from src.infrastructure.database.models import Domain, Student
from src.infrastructure.database.repositories import (
    DomainRepository,
    StudentRepository,
)
from src.models.student import StudentResponse, StudentUpdateRequest

logger = logging.getLogger(__name__)

RecomputeScope = Literal["domain", "record"]


class StudentServiceError(Exception):
    """Base exception for student service errors."""

    pass


class StudentNotFoundError(StudentServiceError):
    """Raised when student is not found."""

    pass


class DomainNotFoundError(StudentServiceError):
    """Raised when the target domain is not found."""

    pass


class EmailAlreadyExistsError(StudentServiceError):
    """Raised when another student already uses the email."""

    pass


class StudentService:
    """Service for managing students.

    Attributes:
        db: Async database session.
        recompute_scope: ``domain`` re-runs seat allocation over the
            affected domains after an update; ``record`` only re-checks the
            edited student against its domain's cutoff.
    """

    def __init__(
        self,
        db: AsyncSession,
        recompute_scope: RecomputeScope = "domain",
    ) -> None:
        """Initialize student service.

        Args:
            db: Async database session.
            recompute_scope: Seat recompute scope after an update.
        """
        self.db = db
        self.recompute_scope = recompute_scope
        self.domains = DomainRepository(db)
        self.students = StudentRepository(db)
        self.activation = ActivationService(db)

    async def get_student(self, student_id: int) -> StudentResponse:
        """Get student details.

        Raises:
            StudentNotFoundError: If student not found.
        """
        student = await self._get_student(student_id)
        return self._to_response(student)

    async def list_students(self) -> list[StudentResponse]:
        """List every student across all domains."""
        students = await self.students.list_all()
        return [self._to_response(s) for s in students]

    async def list_active_by_domain(self, domain_id: int) -> list[StudentResponse]:
        """List the seat-holding students of a domain."""
        students = await self.students.list_active_by_domain(domain_id)
        return [self._to_response(s) for s in students]

    async def update_student(
        self,
        student_id: int,
        request: StudentUpdateRequest,
    ) -> StudentResponse:
        """Update a student's editable fields.

        The student's own flag is re-checked against the (possibly new)
        domain's cutoff. With the ``domain`` scope the target domain, and the
        previous domain when the student moved, are then fully reallocated.

        Args:
            student_id: Student identifier.
            request: New field values.

        Returns:
            Updated student response.

        Raises:
            StudentNotFoundError: If student not found.
            DomainNotFoundError: If the target domain does not exist.
            EmailAlreadyExistsError: If another student uses the email.
        """
        student = await self._get_student(student_id)
        previous_domain_id = student.domain_id

        locked = await self._lock_domains(previous_domain_id, request.domain_id)
        target = locked.get(request.domain_id)
        if target is None:
            raise DomainNotFoundError(f"Domain {request.domain_id} not found")

        if request.email.lower() != student.email.lower():
            holder = await self.students.get_by_email(request.email)
            if holder is not None and holder.id != student.id:
                raise EmailAlreadyExistsError(
                    f"A student with email {request.email} already exists"
                )

        domain_changed = previous_domain_id != target.id

        student.first_name = request.first_name
        student.last_name = request.last_name
        student.email = request.email
        student.join_year = request.join_year
        student.exam_marks = request.exam_marks
        student.domain = target
        student.domain_id = target.id
        student.is_active = SeatAllocator.for_domain(target).provisional_active(
            request.exam_marks
        )
        await self.students.add(student)

        if self.recompute_scope == "domain":
            await self.activation.recompute(target.id, domain=target)
            if domain_changed:
                await self.activation.recompute(
                    previous_domain_id,
                    domain=locked.get(previous_domain_id),
                )

        await self.db.commit()
        await self.db.refresh(student)

        logger.info(
            "Updated student: id=%s, roll_number=%s, domain=%s->%s, marks=%s, active=%s",
            student.id,
            student.roll_number,
            previous_domain_id,
            target.id,
            student.exam_marks,
            student.is_active,
        )

        return self._to_response(student)

    async def delete_student(self, student_id: int) -> None:
        """Delete a student and hand the freed seat to the next in rank.

        Raises:
            StudentNotFoundError: If student not found.
        """
        student = await self._get_student(student_id)
        domain_id = student.domain_id
        locked = await self._lock_domains(domain_id)

        await self.students.delete(student)
        await self.activation.recompute(domain_id, domain=locked.get(domain_id))
        await self.db.commit()

        logger.info(
            "Deleted student: id=%s, roll_number=%s, domain=%s",
            student_id,
            student.roll_number,
            domain_id,
        )

    async def _lock_domains(self, *domain_ids: int) -> dict[int, Domain]:
        """Lock domain rows in ascending id order.

        Every transaction that locks more than one domain takes the locks in
        the same order, so two concurrent moves in opposite directions queue
        up instead of deadlocking.

        Returns:
            Locked domains by id. Missing ids are left out.
        """
        locked: dict[int, Domain] = {}
        for domain_id in sorted(set(domain_ids)):
            domain = await self.domains.get_by_id(domain_id, for_update=True)
            if domain is not None:
                locked[domain_id] = domain
        return locked

    async def _get_student(self, student_id: int) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If not found.
        """
        student = await self.students.get_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student {student_id} not found")
        return student

    def _to_response(self, student: Student) -> StudentResponse:
        """Convert student to response DTO."""
        return StudentResponse(
            id=student.id,
            roll_number=student.roll_number,
            first_name=student.first_name,
            last_name=student.last_name,
            email=student.email,
            domain_id=student.domain_id,
            domain_program=student.domain.program,
            join_year=student.join_year,
            exam_marks=student.exam_marks,
            is_active=student.is_active,
        )
