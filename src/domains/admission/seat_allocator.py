# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Seat allocation for capacity-limited domains.

Given a domain's capacity and cutoff and its complete student set, the
allocator decides which students hold a seat (active) and which do not.

Rules:
- A student is eligible iff exam marks are recorded and either the domain
  has no cutoff or marks >= cutoff.
- Capacity unset or <= 0: every eligible student is active.
- Positive capacity: eligible students are ranked by marks descending, then
  by full name (first + last, case-insensitive) ascending, then by id; the
  first ``capacity`` are active.
- Ineligible students are always inactive.

The ranking is a total order, so the partition is deterministic and running
the allocator twice over unchanged data yields the same result.

Example:
    >>> allocator = SeatAllocator(capacity=2, cutoff=50.0)
    >>> allocation = allocator.allocate(students)
    >>> allocation.apply()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol, Sequence


class SeatHolder(Protocol):
    """Fields the allocator reads from a student record."""

    id: int | None
    first_name: str | None
    last_name: str | None
    exam_marks: float | None
    is_active: bool


class CapacityBound(Protocol):
    """Fields the allocator reads from a domain record."""

    capacity: int | None
    cutoff_marks: float | None


def is_eligible(exam_marks: float | None, cutoff: float | None) -> bool:
    """Check whether marks qualify under a cutoff.

    Args:
        exam_marks: Student marks, None when not recorded.
        cutoff: Domain cutoff, None when the domain has none.

    Returns:
        True if marks are recorded and meet the cutoff.
    """
    if exam_marks is None:
        return False
    return cutoff is None or exam_marks >= cutoff


def rank_key(student: SeatHolder) -> tuple:
    """Sort key: marks descending, name ascending, id ascending."""
    name = f"{student.first_name or ''}{student.last_name or ''}".lower()
    marks = student.exam_marks if student.exam_marks is not None else 0.0
    return (-marks, name, student.id is None, student.id or 0)


@dataclass(frozen=True)
class SeatAllocation:
    """Result of one allocation run.

    Attributes:
        active: Students holding a seat, in rank order.
        inactive: Everyone else (eligible overflow first, then ineligible).
    """

    active: tuple[SeatHolder, ...] = field(default_factory=tuple)
    inactive: tuple[SeatHolder, ...] = field(default_factory=tuple)

    @property
    def active_ids(self) -> list[int]:
        return [s.id for s in self.active if s.id is not None]

    @property
    def inactive_ids(self) -> list[int]:
        return [s.id for s in self.inactive if s.id is not None]

    def apply(self) -> int:
        """Write the partition onto the students' ``is_active`` flags.

        Returns:
            Number of students whose flag changed.
        """
        changed = 0
        for student in self.active:
            if student.is_active is not True:
                changed += 1
            student.is_active = True
        for student in self.inactive:
            if student.is_active is not False:
                changed += 1
            student.is_active = False
        return changed


class SeatAllocator:
    """Computes seat assignments for one domain configuration.

    Attributes:
        capacity: Seat limit, None or <= 0 for unlimited.
        cutoff: Minimum marks, None for no cutoff.
    """

    def __init__(self, capacity: int | None, cutoff: float | None) -> None:
        self.capacity = capacity
        self.cutoff = cutoff

    @classmethod
    def for_domain(cls, domain: CapacityBound) -> "SeatAllocator":
        return cls(capacity=domain.capacity, cutoff=domain.cutoff_marks)

    @property
    def is_capacity_limited(self) -> bool:
        return self.capacity is not None and self.capacity > 0

    def split_eligible(
        self,
        students: Iterable[SeatHolder],
    ) -> tuple[list[SeatHolder], list[SeatHolder]]:
        """Partition students into (eligible, ineligible) under the cutoff."""
        eligible: list[SeatHolder] = []
        ineligible: list[SeatHolder] = []
        for student in students:
            if is_eligible(student.exam_marks, self.cutoff):
                eligible.append(student)
            else:
                ineligible.append(student)
        return eligible, ineligible

    def allocate(self, students: Iterable[SeatHolder]) -> SeatAllocation:
        """Compute the active/inactive partition without mutating anything.

        Args:
            students: The domain's complete current student set.

        Returns:
            SeatAllocation; call ``apply()`` to write the flags.
        """
        eligible, ineligible = self.split_eligible(students)
        ranked = sorted(eligible, key=rank_key)

        if not self.is_capacity_limited:
            return SeatAllocation(active=tuple(ranked), inactive=tuple(ineligible))

        return SeatAllocation(
            active=tuple(ranked[: self.capacity]),
            inactive=tuple(ranked[self.capacity:]) + tuple(ineligible),
        )

    def provisional_active(self, exam_marks: float | None) -> bool:
        """Flag for a newcomer before the whole domain is reallocated.

        Only the cutoff is considered. Marks that were never recorded do not
        disqualify at this stage.
        """
        if self.cutoff is None or exam_marks is None:
            return True
        return exam_marks >= self.cutoff

    # ------------------------------------------------------------------
    # Impact previews (read-only)
    # ------------------------------------------------------------------

    def count_displaced(self, students: Sequence[SeatHolder]) -> int:
        """Currently active eligible students that would lose their seat.

        ``currently active - capacity``, floored at 0, counted over students
        eligible under this allocator's cutoff.
        """
        if not self.is_capacity_limited:
            return 0
        eligible, _ = self.split_eligible(students)
        currently_active = sum(1 for s in eligible if s.is_active)
        return max(0, currently_active - self.capacity)

    def count_below_cutoff(self, students: Sequence[SeatHolder]) -> int:
        """Students with missing marks or marks under the cutoff."""
        if self.cutoff is None:
            return 0
        return sum(1 for s in students if not is_eligible(s.exam_marks, self.cutoff))

    def count_newly_qualified(self, students: Sequence[SeatHolder]) -> int:
        """Currently inactive students whose marks meet the cutoff."""
        return sum(
            1
            for s in students
            if not s.is_active and s.exam_marks is not None and is_eligible(s.exam_marks, self.cutoff)
        )
