# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Whole-domain seat recomputation.

ActivationService.recompute() is the single entry point for re-deriving the
``is_active`` flags of a domain. It must run after any event that changes a
domain's capacity, its cutoff or its student membership:
- a new admission
- a domain update
- a student update that changes marks or domain
- a student deletion

It stages the changes on the session and leaves the commit to the caller so
the recompute lands in the same transaction as the triggering change.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.domains.admission.seat_allocator import SeatAllocation, SeatAllocator
from src.infrastructure.database.models import Domain
from src.infrastructure.database.repositories import (
    DomainRepository,
    StudentRepository,
)

logger = logging.getLogger(__name__)


class ActivationError(Exception):
    """Base exception for activation recompute errors."""

    pass


class DomainNotFoundError(ActivationError):
    """Raised when the domain to recompute does not exist."""

    pass


class ActivationService:
    """Recomputes seat activation for a domain.

    Attributes:
        db: Async database session.
        domains: Domain repository.
        students: Student repository.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize activation service.

        Args:
            db: Async database session.
        """
        self.db = db
        self.domains = DomainRepository(db)
        self.students = StudentRepository(db)

    async def recompute(
        self,
        domain_id: int,
        domain: Domain | None = None,
    ) -> SeatAllocation:
        """Re-run the seat allocator over a domain's full student set.

        Args:
            domain_id: Domain identifier.
            domain: Already-loaded domain (skips the lookup). Its current
                in-memory capacity and cutoff are used. Without it the
                domain row is loaded and locked.

        Returns:
            The applied SeatAllocation.

        Raises:
            DomainNotFoundError: If the domain does not exist.
        """
        if domain is None:
            domain = await self.domains.get_by_id(domain_id, for_update=True)
            if domain is None:
                raise DomainNotFoundError(f"Domain {domain_id} not found")

        students = await self.students.list_by_domain(domain_id)
        allocation = SeatAllocator.for_domain(domain).allocate(students)
        changed = allocation.apply()

        if changed:
            await self.students.add_all(students)

        logger.info(
            "Seat activation recomputed: domain=%s, capacity=%s, cutoff=%s, "
            "students=%d, active=%d, changed=%d",
            domain_id,
            domain.capacity,
            domain.cutoff_marks,
            len(students),
            len(allocation.active),
            changed,
        )

        return allocation
