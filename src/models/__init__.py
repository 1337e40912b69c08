# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pydantic request and response models.

Modules:
    domain: Domain CRUD and impact preview models.
    student: Admission and student management models.
"""
