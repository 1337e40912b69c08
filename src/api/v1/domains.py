# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain management API endpoints.

This module provides endpoints for program domain management:
- GET / - List domains
- POST / - Create a domain
- GET /{domain_id} - Get domain details
- PATCH /{domain_id} - Update domain and reallocate seats
- POST /{domain_id}/impact - Preview the impact of an update
- GET /{domain_id}/delete-impact - Preview the impact of a delete
- DELETE /{domain_id} - Delete domain and its students
- POST /{domain_id}/recompute - Re-run seat allocation
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.domains.program_domain.service import DomainNotFoundError, DomainService
from src.models.domain import (
    ActivationResponse,
    DomainImpactResponse,
    DomainRequest,
    DomainResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> DomainService:
    """Get domain service instance.

    Args:
        db: Database session.

    Returns:
        Configured DomainService instance.
    """
    return DomainService(db=db)


def _not_found(e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "",
    response_model=list[DomainResponse],
    summary="List domains",
)
async def list_domains(
    db: AsyncSession = Depends(get_db),
) -> list[DomainResponse]:
    """List all domains with their active student counts."""
    service = _get_service(db)
    return await service.list_domains()


@router.post(
    "",
    response_model=DomainResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create domain",
)
async def create_domain(
    data: DomainRequest,
    db: AsyncSession = Depends(get_db),
) -> DomainResponse:
    """Create a new domain.

    Args:
        data: Domain creation request.
        db: Database session.

    Returns:
        Created domain response.
    """
    logger.info("Creating domain: program=%s", data.program)

    service = _get_service(db)
    return await service.create_domain(data)


@router.get(
    "/{domain_id}",
    response_model=DomainResponse,
    summary="Get domain",
)
async def get_domain(
    domain_id: int,
    db: AsyncSession = Depends(get_db),
) -> DomainResponse:
    """Get domain details.

    Raises:
        HTTPException: If domain not found.
    """
    service = _get_service(db)

    try:
        return await service.get_domain(domain_id)
    except DomainNotFoundError as e:
        raise _not_found(e)


@router.patch(
    "/{domain_id}",
    response_model=DomainResponse,
    summary="Update domain",
    description="Update a domain. Seats are reallocated under the new capacity and cutoff.",
)
async def update_domain(
    domain_id: int,
    data: DomainRequest,
    db: AsyncSession = Depends(get_db),
) -> DomainResponse:
    """Update a domain.

    Args:
        domain_id: Domain identifier.
        data: New field values.
        db: Database session.

    Returns:
        Updated domain response.

    Raises:
        HTTPException: If domain not found.
    """
    logger.info(
        "Updating domain: id=%s, capacity=%s, cutoff=%s",
        domain_id,
        data.capacity,
        data.cutoff_marks,
    )

    service = _get_service(db)

    try:
        return await service.update_domain(domain_id, data)
    except DomainNotFoundError as e:
        raise _not_found(e)


@router.post(
    "/{domain_id}/impact",
    response_model=DomainImpactResponse,
    summary="Preview update impact",
    description="Compute how an update would affect students without applying it.",
)
async def get_update_impact(
    domain_id: int,
    data: DomainRequest,
    db: AsyncSession = Depends(get_db),
) -> DomainImpactResponse:
    """Preview the impact of a domain update.

    Raises:
        HTTPException: If domain not found.
    """
    service = _get_service(db)

    try:
        return await service.get_update_impact(domain_id, data)
    except DomainNotFoundError as e:
        raise _not_found(e)


@router.get(
    "/{domain_id}/delete-impact",
    response_model=DomainImpactResponse,
    summary="Preview delete impact",
)
async def get_delete_impact(
    domain_id: int,
    db: AsyncSession = Depends(get_db),
) -> DomainImpactResponse:
    """Preview how many students a delete would remove.

    Raises:
        HTTPException: If domain not found.
    """
    service = _get_service(db)

    try:
        return await service.get_delete_impact(domain_id)
    except DomainNotFoundError as e:
        raise _not_found(e)


@router.delete(
    "/{domain_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete domain",
    description="Delete a domain. All of its students are permanently deleted.",
)
async def delete_domain(
    domain_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a domain and its students.

    Raises:
        HTTPException: If domain not found.
    """
    logger.info("Deleting domain: id=%s", domain_id)

    service = _get_service(db)

    try:
        await service.delete_domain(domain_id)
    except DomainNotFoundError as e:
        raise _not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{domain_id}/recompute",
    response_model=ActivationResponse,
    summary="Recompute seat activation",
)
async def recompute_activation(
    domain_id: int,
    db: AsyncSession = Depends(get_db),
) -> ActivationResponse:
    """Re-run seat allocation over the whole domain.

    Raises:
        HTTPException: If domain not found.
    """
    service = _get_service(db)

    try:
        return await service.recompute_activation(domain_id)
    except DomainNotFoundError as e:
        raise _not_found(e)
