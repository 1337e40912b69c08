# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Roll number policy.

A roll number has the shape ``{degree prefix}{4-digit join year}{3-digit
sequence}``, for example ``BT2024017``. The degree prefix and the numeric
band the sequence must fall into are both derived from the free-text program
name of the domain.

All functions here are pure.
"""

from typing import NamedTuple

SEQUENCE_WIDTH = 3
YEAR_WIDTH = 4

FALLBACK_DEGREE_PREFIX = "RN"

# Checked in order, first match wins. IM.Tech must precede M.Tech because
# "IM.TECH" contains "M.TECH".
_DEGREE_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("IM", ("IM.TECH", "IMTECH", "INTEGRATED MASTER OF TECHNOLOGY")),
    ("MT", ("M.TECH", "MASTER OF TECHNOLOGY")),
    ("BT", ("B.TECH", "BACHELOR OF TECHNOLOGY")),
    ("MS", ("M.SC", "MASTER OF SCIENCE")),
    ("PH", ("PH.D", "PHD", "DOCTOR OF PHILOSOPHY")),
    ("DP", ("DIPLOMA",)),
)


class DepartmentRange(NamedTuple):
    """Inclusive sequence band reserved for a department."""

    start: int
    end: int

    def covers(self, sequence: int) -> bool:
        return self.start <= sequence <= self.end

    @property
    def size(self) -> int:
        return self.end - self.start + 1


FALLBACK_DEPARTMENT_RANGE = DepartmentRange(900, 999)

_DEPARTMENT_RULES: tuple[tuple[str, DepartmentRange], ...] = (
    ("CSE", DepartmentRange(1, 200)),
    ("ECE", DepartmentRange(501, 600)),
    ("AIDS", DepartmentRange(701, 800)),
)


def degree_prefix(program: str) -> str:
    """Map a program name to its two-letter degree prefix.

    Matching is a case-insensitive substring test. Unrecognized degrees get
    the ``RN`` prefix rather than an error.

    Args:
        program: Free-text program name, e.g. "B.Tech CSE".

    Returns:
        One of IM, MT, BT, MS, PH, DP or RN.

    Example:
        >>> degree_prefix("Master of Technology in ECE")
        'MT'
    """
    normalized = program.upper()

    for prefix, markers in _DEGREE_RULES:
        if prefix == "MS" and normalized.startswith("MS"):
            return prefix
        if any(marker in normalized for marker in markers):
            return prefix

    return FALLBACK_DEGREE_PREFIX


def department_range(program: str) -> DepartmentRange:
    """Resolve the sequence band for the department named in a program.

    Args:
        program: Free-text program name.

    Returns:
        The department's inclusive range, or 900-999 when no known
        department code appears in the name.
    """
    normalized = program.upper()

    for code, band in _DEPARTMENT_RULES:
        if code in normalized:
            return band

    return FALLBACK_DEPARTMENT_RANGE


def roll_base(prefix: str, join_year: int) -> str:
    """Prefix followed by the zero-padded join year, e.g. ``BT2024``."""
    return f"{prefix}{join_year:0{YEAR_WIDTH}d}"


def format_roll_number(prefix: str, join_year: int, sequence: int) -> str:
    """Build a full roll number, e.g. ``BT2024017``."""
    return f"{roll_base(prefix, join_year)}{sequence:0{SEQUENCE_WIDTH}d}"


def parse_sequence(roll_number: str | None, base: str) -> int | None:
    """Extract the trailing sequence of a roll number under ``base``.

    Args:
        roll_number: Stored roll number, possibly foreign or malformed.
        base: Expected roll base (prefix + year).

    Returns:
        The sequence as an int, or None if the roll number does not have
        exactly ``len(base) + 3`` characters, does not start with ``base``,
        or has a non-digit tail.
    """
    if not roll_number or not roll_number.startswith(base):
        return None
    if len(roll_number) != len(base) + SEQUENCE_WIDTH:
        return None

    tail = roll_number[len(base):]
    if not (tail.isascii() and tail.isdigit()):
        return None
    return int(tail)
