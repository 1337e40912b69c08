# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admission domain package.

This package provides the admission allocation engine:
- Roll number policy (degree prefix, department range, formatting)
- Seat allocation (capacity and cutoff driven activation)
- Whole-domain activation recompute
- Student admission workflow
"""

from src.domains.admission.activation import ActivationError, ActivationService
from src.domains.admission.roll_number import (
    DepartmentRange,
    degree_prefix,
    department_range,
    format_roll_number,
    parse_sequence,
    roll_base,
)
from src.domains.admission.seat_allocator import (
    SeatAllocation,
    SeatAllocator,
    is_eligible,
    rank_key,
)
from src.domains.admission.service import (
    AdmissionService,
    AdmissionServiceError,
    DomainNotFoundError,
    EmailAlreadyExistsError,
    SeatRangeExhaustedError,
)

__all__ = [
    # Roll numbers
    "DepartmentRange",
    "degree_prefix",
    "department_range",
    "roll_base",
    "format_roll_number",
    "parse_sequence",
    # Seat allocation
    "SeatAllocation",
    "SeatAllocator",
    "is_eligible",
    "rank_key",
    "ActivationService",
    "ActivationError",
    # Admission
    "AdmissionService",
    "AdmissionServiceError",
    "DomainNotFoundError",
    "SeatRangeExhaustedError",
    "EmailAlreadyExistsError",
]
