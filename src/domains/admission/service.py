# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admission service for admitting students into domains.

This module provides the AdmissionService class for:
- Roll number allocation within the department's reserved range
- Student creation with a provisional activation flag
- Whole-domain seat recompute after every admission
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.domains.admission import roll_number
from src.domains.admission.activation import ActivationService
from src.domains.admission.seat_allocator import SeatAllocator
from src.infrastructure.database.models import Domain, Student
from src.infrastructure.database.repositories import (
    DomainRepository,
    StudentRepository,
)
from src.models.student import StudentAdmissionRequest, StudentResponse

logger = logging.getLogger(__name__)


class AdmissionServiceError(Exception):
    """Base exception for admission service errors."""

    pass


class DomainNotFoundError(AdmissionServiceError):
    """Raised when the target domain is not found."""

    pass


class SeatRangeExhaustedError(AdmissionServiceError):
    """Raised when a department's sequence band is full for a join year."""

    pass


class EmailAlreadyExistsError(AdmissionServiceError):
    """Raised when another student already uses the email."""

    pass


class AdmissionService:
    """Service for admitting students.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize admission service.

        Args:
            db: Async database session.
        """
        self.db = db
        self.domains = DomainRepository(db)
        self.students = StudentRepository(db)
        self.activation = ActivationService(db)

    async def admit_student(self, request: StudentAdmissionRequest) -> StudentResponse:
        """Admit a student into a domain.

        The domain row is locked for the duration of the transaction so
        concurrent admissions into the same domain cannot compute the same
        next sequence.

        Args:
            request: Admission request data.

        Returns:
            The created student. ``is_active`` reflects the state after the
            whole-domain recompute.

        Raises:
            DomainNotFoundError: If the domain does not exist.
            SeatRangeExhaustedError: If the department range is full.
            EmailAlreadyExistsError: If the email is already taken.
        """
        domain = await self.domains.get_by_id(request.domain_id, for_update=True)
        if domain is None:
            raise DomainNotFoundError(f"Domain {request.domain_id} not found")

        if await self.students.get_by_email(request.email) is not None:
            raise EmailAlreadyExistsError(
                f"A student with email {request.email} already exists"
            )

        rn = await self.allocate_roll_number(domain, request.join_year)

        student = Student(
            roll_number=rn,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            domain_id=domain.id,
            join_year=request.join_year,
            exam_marks=request.exam_marks,
            is_active=SeatAllocator.for_domain(domain).provisional_active(request.exam_marks),
        )
        await self.students.add(student)

        await self.activation.recompute(domain.id, domain=domain)

        await self.db.commit()
        await self.db.refresh(student)

        logger.info(
            "Admitted student: roll_number=%s, domain=%s, marks=%s, active=%s",
            student.roll_number,
            domain.id,
            student.exam_marks,
            student.is_active,
        )

        return self._to_response(student, domain)

    async def allocate_roll_number(self, domain: Domain, join_year: int) -> str:
        """Compute the next free roll number for a domain and join year.

        Existing roll numbers under the same base are scanned; the highest
        sequence inside the department range wins. Malformed or foreign roll
        numbers are skipped.

        Args:
            domain: Target domain (its program name drives the policy).
            join_year: Join year of the new student.

        Returns:
            The formatted roll number.

        Raises:
            SeatRangeExhaustedError: If the next sequence exceeds the range.
        """
        prefix = roll_number.degree_prefix(domain.program)
        band = roll_number.department_range(domain.program)
        base = roll_number.roll_base(prefix, join_year)

        existing = await self.students.find_by_roll_prefix_and_year(base, join_year)

        last_sequence = band.start - 1
        for student in existing:
            sequence = roll_number.parse_sequence(student.roll_number, base)
            if sequence is None:
                logger.warning(
                    "Skipping malformed roll number during allocation: %s (base=%s)",
                    student.roll_number,
                    base,
                )
                continue
            if band.covers(sequence) and sequence > last_sequence:
                last_sequence = sequence

        next_sequence = last_sequence + 1
        if next_sequence > band.end:
            raise SeatRangeExhaustedError(
                f"Seat range exhausted for department: {domain.program} "
                f"({base}, range {band.start}-{band.end})"
            )

        return roll_number.format_roll_number(prefix, join_year, next_sequence)

    def _to_response(self, student: Student, domain: Domain) -> StudentResponse:
        """Convert student to response DTO.

        Args:
            student: Student model instance.
            domain: The student's domain.

        Returns:
            StudentResponse DTO.
        """
        return StudentResponse(
            id=student.id,
            roll_number=student.roll_number,
            first_name=student.first_name,
            last_name=student.last_name,
            email=student.email,
            domain_id=domain.id,
            domain_program=domain.program,
            join_year=student.join_year,
            exam_marks=student.exam_marks,
            is_active=student.is_active,
        )
