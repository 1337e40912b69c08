# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for the admission backend.

This package contains domain services that encapsulate business logic.
Each domain module provides services that orchestrate operations
across the repositories.

Domains:
    admission: Roll number generation, seat allocation and admission.
    program_domain: Program domain management and impact previews.
    student: Student lookup, update and removal.
"""
