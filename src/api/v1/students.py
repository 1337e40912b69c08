# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student admission and management API endpoints.

This module provides endpoints for students:
- POST /admit - Admit a student into a domain
- GET / - List all students
- GET /domain/{domain_id} - List active students of a domain
- GET /{student_id} - Get student details
- PATCH /{student_id} - Update student
- DELETE /{student_id} - Delete student
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_app_settings, get_db
from src.core.config import Settings
from src.domains.admission.service import (
    AdmissionService,
    DomainNotFoundError as AdmissionDomainNotFoundError,
    EmailAlreadyExistsError as AdmissionEmailExistsError,
    SeatRangeExhaustedError,
)
from src.domains.student.service import (
    DomainNotFoundError as StudentDomainNotFoundError,
    EmailAlreadyExistsError as StudentEmailExistsError,
    StudentNotFoundError,
    StudentService,
)
from src.models.student import (
    StudentAdmissionRequest,
    StudentResponse,
    StudentUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_admission_service(db: AsyncSession) -> AdmissionService:
    """Get admission service instance.

    Args:
        db: Database session.

    Returns:
        Configured AdmissionService instance.
    """
    return AdmissionService(db=db)


def _get_student_service(db: AsyncSession, settings: Settings) -> StudentService:
    """Get student service instance.

    Args:
        db: Database session.
        settings: Application settings (recompute scope).

    Returns:
        Configured StudentService instance.
    """
    return StudentService(
        db=db,
        recompute_scope=settings.admission.student_update_recompute,
    )


@router.post(
    "/admit",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Admit student",
    description=(
        "Admit a student into a domain. A roll number is generated and seats "
        "in the domain are reallocated."
    ),
)
async def admit_student(
    data: StudentAdmissionRequest,
    db: AsyncSession = Depends(get_db),
) -> StudentResponse:
    """Admit a student.

    Args:
        data: Admission request.
        db: Database session.

    Returns:
        Created student response.

    Raises:
        HTTPException: If domain not found, range exhausted or email taken.
    """
    logger.info(
        "Admitting student: domain=%s, join_year=%s",
        data.domain_id,
        data.join_year,
    )

    service = _get_admission_service(db)

    try:
        return await service.admit_student(data)
    except AdmissionDomainNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SeatRangeExhaustedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AdmissionEmailExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get(
    "",
    response_model=list[StudentResponse],
    summary="List students",
)
async def list_students(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> list[StudentResponse]:
    """List all students."""
    service = _get_student_service(db, settings)
    return await service.list_students()


@router.get(
    "/domain/{domain_id}",
    response_model=list[StudentResponse],
    summary="List active students of a domain",
)
async def list_domain_students(
    domain_id: int,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> list[StudentResponse]:
    """List the seat-holding students of a domain."""
    service = _get_student_service(db, settings)
    return await service.list_active_by_domain(domain_id)


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Get student",
)
async def get_student(
    student_id: int,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> StudentResponse:
    """Get student details.

    Raises:
        HTTPException: If student not found.
    """
    service = _get_student_service(db, settings)

    try:
        return await service.get_student(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Update student",
)
async def update_student(
    student_id: int,
    data: StudentUpdateRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> StudentResponse:
    """Update a student.

    Args:
        student_id: Student identifier from the path.
        data: New field values; ``student_id`` must match the path.
        db: Database session.
        settings: Application settings.

    Returns:
        Updated student response.

    Raises:
        HTTPException: On id mismatch, missing student/domain or email clash.
    """
    if data.student_id != student_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Path studentId ({student_id}) does not match request body "
                f"studentId ({data.student_id})"
            ),
        )

    service = _get_student_service(db, settings)

    try:
        return await service.update_student(student_id, data)
    except (StudentNotFoundError, StudentDomainNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StudentEmailExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete student",
)
async def delete_student(
    student_id: int,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Delete a student.

    Raises:
        HTTPException: If student not found.
    """
    service = _get_student_service(db, settings)

    try:
        await service.delete_student(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)
