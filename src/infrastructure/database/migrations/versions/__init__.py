# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admission database revisions.

Contains migrations for:
- domains: Program offerings with capacity and cutoff
- students: Admitted students with roll numbers and seat flags
"""
