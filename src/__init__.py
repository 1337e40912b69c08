"""Admission Allocation Backend.

Admission of students into capacity-limited academic domains: roll number
allocation and seat activation.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
