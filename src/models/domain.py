# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain request and response models."""

from pydantic import BaseModel, ConfigDict, Field


class DomainRequest(BaseModel):
    """Create or update a domain.

    The same shape is used for create, update and update-impact preview.
    """

    program: str = Field(
        ...,
        min_length=1,
        max_length=120,
        description="Program name, encodes degree and department",
        examples=["Bachelor of Technology in CSE"],
    )
    batch: str | None = Field(None, max_length=50, description="Batch label", examples=["2024"])
    capacity: int | None = Field(
        None,
        ge=0,
        le=150,
        description="Maximum active students; unset means unlimited",
    )
    exam_name: str | None = Field(None, max_length=120, description="Qualifying exam name")
    cutoff_marks: float | None = Field(
        None,
        ge=0,
        le=100,
        description="Minimum marks for eligibility; unset means no cutoff",
    )

    model_config = ConfigDict(str_strip_whitespace=True)


class DomainResponse(BaseModel):
    """Domain details with the live active-student count."""

    id: int = Field(..., description="Domain ID")
    program: str = Field(..., description="Program name")
    batch: str | None = Field(None, description="Batch label")
    capacity: int | None = Field(None, description="Maximum active students")
    exam_name: str | None = Field(None, description="Qualifying exam name")
    cutoff_marks: float | None = Field(None, description="Cutoff marks")
    student_count: int = Field(0, description="Number of active students")

    model_config = ConfigDict(from_attributes=True)


class DomainImpactResponse(BaseModel):
    """Outcome preview of a domain update or delete."""

    domain_id: int = Field(..., description="Domain ID")
    affected_students_count: int = Field(..., description="Students affected by the change")
    message: str = Field(..., description="Human-readable summary")


class ActivationResponse(BaseModel):
    """Result of an explicit seat recompute."""

    domain_id: int = Field(..., description="Domain ID")
    active_student_ids: list[int] = Field(default_factory=list)
    inactive_student_ids: list[int] = Field(default_factory=list)
