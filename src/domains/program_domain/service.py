# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain service for managing capacity-limited program offerings.

This module provides the DomainService class for:
- Domain CRUD operations
- Seat recompute after capacity or cutoff changes
- Update and delete impact previews
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.domains.admission.activation import ActivationService
from src.domains.admission.seat_allocator import SeatAllocation, SeatAllocator
from src.infrastructure.database.models import Domain
from src.infrastructure.database.repositories import (
    DomainRepository,
    StudentRepository,
)
from src.models.domain import (
    ActivationResponse,
    DomainImpactResponse,
    DomainRequest,
    DomainResponse,
)

logger = logging.getLogger(__name__)

NO_UPDATE_IMPACT_MESSAGE = "No impact on students."
NO_DELETE_IMPACT_MESSAGE = "No students will be deleted."


class DomainServiceError(Exception):
    """Base exception for domain service errors."""

    pass


class DomainNotFoundError(DomainServiceError):
    """Raised when domain is not found."""

    pass


class DomainService:
    """Service for managing domains.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize domain service.

        Args:
            db: Async database session.
        """
        self.db = db
        self.domains = DomainRepository(db)
        self.students = StudentRepository(db)
        self.activation = ActivationService(db)

    async def list_domains(self) -> list[DomainResponse]:
        """List all domains with their live active-student counts."""
        domains = await self.domains.list_all()
        return [await self._to_response(d) for d in domains]

    async def get_domain(self, domain_id: int) -> DomainResponse:
        """Get domain details.

        Raises:
            DomainNotFoundError: If domain not found.
        """
        domain = await self._get_domain(domain_id)
        return await self._to_response(domain)

    async def create_domain(self, request: DomainRequest) -> DomainResponse:
        """Create a new domain.

        No students exist yet, so no allocation is needed.

        Args:
            request: Domain creation data.

        Returns:
            Created domain response.
        """
        domain = Domain(
            program=request.program,
            batch=request.batch,
            capacity=request.capacity,
            exam_name=request.exam_name,
            cutoff_marks=request.cutoff_marks,
        )
        await self.domains.add(domain)
        await self.db.commit()
        await self.db.refresh(domain)

        logger.info(
            "Created domain: id=%s, program=%s, capacity=%s, cutoff=%s",
            domain.id,
            domain.program,
            domain.capacity,
            domain.cutoff_marks,
        )

        return await self._to_response(domain)

    async def update_domain(
        self,
        domain_id: int,
        request: DomainRequest,
    ) -> DomainResponse:
        """Update a domain and reallocate its seats.

        Every student in the domain is re-ranked under the new capacity and
        cutoff. Students are never deleted by an update.

        Args:
            domain_id: Domain identifier.
            request: New field values.

        Returns:
            Updated domain response.

        Raises:
            DomainNotFoundError: If domain not found.
        """
        domain = await self._get_domain(domain_id, for_update=True)
        old_capacity, old_cutoff = domain.capacity, domain.cutoff_marks

        domain.program = request.program
        domain.batch = request.batch
        domain.capacity = request.capacity
        domain.exam_name = request.exam_name
        domain.cutoff_marks = request.cutoff_marks

        allocation = await self.activation.recompute(domain.id, domain=domain)

        await self.db.commit()
        await self.db.refresh(domain)

        logger.info(
            "Updated domain: id=%s, capacity=%s->%s, cutoff=%s->%s, active=%d",
            domain.id,
            old_capacity,
            domain.capacity,
            old_cutoff,
            domain.cutoff_marks,
            len(allocation.active),
        )

        return await self._to_response(domain)

    async def recompute_activation(self, domain_id: int) -> ActivationResponse:
        """Re-run seat allocation for a domain on demand.

        Raises:
            DomainNotFoundError: If domain not found.
        """
        domain = await self._get_domain(domain_id, for_update=True)
        allocation = await self.activation.recompute(domain.id, domain=domain)
        await self.db.commit()
        return self._to_activation_response(domain.id, allocation)

    async def get_update_impact(
        self,
        domain_id: int,
        request: DomainRequest,
    ) -> DomainImpactResponse:
        """Preview what an update would do to the domain's students.

        Nothing is modified. Warnings are emitted in this order:
        - capacity reduction: active students that would lose their seat
        - cutoff increase: students whose marks fall below the new cutoff
        - cutoff decrease: inactive students who would newly qualify
          (informational, not counted as affected)

        Args:
            domain_id: Domain identifier.
            request: Hypothetical new field values.

        Returns:
            Impact summary.

        Raises:
            DomainNotFoundError: If domain not found.
        """
        domain = await self._get_domain(domain_id)

        old_capacity, new_capacity = domain.capacity, request.capacity
        old_cutoff, new_cutoff = domain.cutoff_marks, request.cutoff_marks
        preview = SeatAllocator(capacity=new_capacity, cutoff=new_cutoff)

        students = await self.students.list_by_domain(domain_id)

        affected = 0
        messages: list[str] = []

        if old_capacity is not None and new_capacity is not None and new_capacity < old_capacity:
            displaced = preview.count_displaced(students)
            if displaced > 0:
                affected += displaced
                messages.append(
                    f"Warning: Capacity will be reduced from {old_capacity} to {new_capacity}. "
                    f"{displaced} student(s) with lower marks will be deactivated. "
                    "Students will be prioritized by highest marks, then by name (alphabetical)."
                )

        if old_cutoff is not None and new_cutoff is not None:
            if new_cutoff > old_cutoff:
                below = preview.count_below_cutoff(students)
                if below > 0:
                    affected += below
                    messages.append(
                        f"Warning: {below} student(s) will be disabled as their exam marks "
                        f"are below the new cutoff of {new_cutoff:.2f}."
                    )
            elif new_cutoff < old_cutoff:
                enabled = preview.count_newly_qualified(students)
                if enabled > 0:
                    messages.append(
                        f"Info: {enabled} previously disabled student(s) will be enabled as "
                        f"their exam marks now meet the new cutoff of {new_cutoff:.2f}."
                    )

        return DomainImpactResponse(
            domain_id=domain_id,
            affected_students_count=affected,
            message=" ".join(messages) if messages else NO_UPDATE_IMPACT_MESSAGE,
        )

    async def get_delete_impact(self, domain_id: int) -> DomainImpactResponse:
        """Preview how many students a delete would cascade to.

        Raises:
            DomainNotFoundError: If domain not found.
        """
        if not await self.domains.exists(domain_id):
            raise DomainNotFoundError(f"Domain {domain_id} not found")

        students = await self.students.list_by_domain(domain_id)
        count = len(students)

        message = NO_DELETE_IMPACT_MESSAGE
        if count > 0:
            message = (
                f"Warning: {count} student(s) will be permanently deleted "
                "along with this domain."
            )

        return DomainImpactResponse(
            domain_id=domain_id,
            affected_students_count=count,
            message=message,
        )

    async def delete_domain(self, domain_id: int) -> None:
        """Delete a domain and every student admitted into it.

        Raises:
            DomainNotFoundError: If domain not found.
        """
        domain = await self._get_domain(domain_id, for_update=True)

        students = await self.students.list_by_domain(domain_id)
        if students:
            await self.students.delete_all(students)

        await self.domains.delete(domain)
        await self.db.commit()

        logger.info(
            "Deleted domain: id=%s, program=%s, students_deleted=%d",
            domain_id,
            domain.program,
            len(students),
        )

    async def _get_domain(self, domain_id: int, for_update: bool = False) -> Domain:
        """Get domain by ID.

        Raises:
            DomainNotFoundError: If not found.
        """
        domain = await self.domains.get_by_id(domain_id, for_update=for_update)
        if domain is None:
            raise DomainNotFoundError(f"Domain {domain_id} not found")
        return domain

    async def _to_response(self, domain: Domain) -> DomainResponse:
        """Convert domain to response DTO with a live active count."""
        return DomainResponse(
            id=domain.id,
            program=domain.program,
            batch=domain.batch,
            capacity=domain.capacity,
            exam_name=domain.exam_name,
            cutoff_marks=domain.cutoff_marks,
            student_count=await self.domains.count_active_students(domain.id),
        )

    def _to_activation_response(
        self,
        domain_id: int,
        allocation: SeatAllocation,
    ) -> ActivationResponse:
        return ActivationResponse(
            domain_id=domain_id,
            active_student_ids=allocation.active_ids,
            inactive_student_ids=allocation.inactive_ids,
        )
