# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student admission and management models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class StudentAdmissionRequest(BaseModel):
    """Admit a new student into a domain.

    Roll number and activation are assigned by the server.
    """

    first_name: str = Field(..., min_length=1, max_length=120, description="First name")
    last_name: str = Field(..., min_length=1, max_length=120, description="Last name")
    email: EmailStr = Field(..., description="Email address (unique)")
    domain_id: int = Field(..., gt=0, description="Target domain ID")
    join_year: int = Field(..., ge=2000, le=2100, description="Year of joining")
    exam_marks: float = Field(..., ge=0, le=100, description="Qualifying exam marks")

    model_config = ConfigDict(str_strip_whitespace=True)


class StudentUpdateRequest(BaseModel):
    """Update an existing student's editable fields."""

    student_id: int = Field(..., gt=0, description="Student ID, must match the path")
    first_name: str = Field(..., min_length=1, max_length=120, description="First name")
    last_name: str = Field(..., min_length=1, max_length=120, description="Last name")
    email: EmailStr = Field(..., description="Email address (unique)")
    domain_id: int = Field(..., gt=0, description="Domain ID")
    join_year: int = Field(..., ge=2000, le=2100, description="Year of joining")
    exam_marks: float = Field(..., ge=0, le=100, description="Qualifying exam marks")

    model_config = ConfigDict(str_strip_whitespace=True)


class StudentResponse(BaseModel):
    """Student details."""

    id: int = Field(..., description="Student ID")
    roll_number: str = Field(..., description="Generated roll number")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: str = Field(..., description="Email address")
    domain_id: int = Field(..., description="Domain ID")
    domain_program: str = Field(..., description="Program name of the domain")
    join_year: int = Field(..., description="Year of joining")
    exam_marks: float = Field(..., description="Qualifying exam marks")
    is_active: bool = Field(..., description="Whether the student holds a seat")
