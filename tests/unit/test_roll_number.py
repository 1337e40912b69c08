# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the roll number policy."""

import pytest

from src.domains.admission.roll_number import (
    FALLBACK_DEGREE_PREFIX,
    FALLBACK_DEPARTMENT_RANGE,
    DepartmentRange,
    degree_prefix,
    department_range,
    format_roll_number,
    parse_sequence,
    roll_base,
)


class TestDegreePrefix:
    """Tests for degree prefix resolution."""

    @pytest.mark.parametrize(
        "program, expected",
        [
            ("B.Tech CSE", "BT"),
            ("Bachelor of Technology in ECE", "BT"),
            ("M.Tech AIDS", "MT"),
            ("master of technology", "MT"),
            ("IM.Tech CSE", "IM"),
            ("IMTECH ECE", "IM"),
            ("Integrated Master of Technology", "IM"),
            ("M.Sc Physics", "MS"),
            ("Master of Science", "MS"),
            ("MS Data Science", "MS"),
            ("Ph.D CSE", "PH"),
            ("PhD in ECE", "PH"),
            ("Doctor of Philosophy", "PH"),
            ("Diploma in ECE", "DP"),
        ],
    )
    def test_known_degrees(self, program, expected):
        """Test each recognized degree maps to its prefix."""
        assert degree_prefix(program) == expected

    def test_integrated_wins_over_master(self):
        """Test IM.Tech is not misread as M.Tech."""
        assert degree_prefix("IM.TECH CSE") == "IM"

    def test_matching_is_case_insensitive(self):
        """Test lower-case program names are recognized."""
        assert degree_prefix("b.tech cse") == "BT"

    def test_unknown_degree_falls_back(self):
        """Test unrecognized programs get the RN prefix."""
        assert degree_prefix("Fine Arts") == FALLBACK_DEGREE_PREFIX
        assert FALLBACK_DEGREE_PREFIX == "RN"


class TestDepartmentRange:
    """Tests for department range resolution."""

    @pytest.mark.parametrize(
        "program, expected",
        [
            ("B.Tech CSE", DepartmentRange(1, 200)),
            ("M.Tech ECE", DepartmentRange(501, 600)),
            ("B.Tech AIDS", DepartmentRange(701, 800)),
            ("b.tech cse", DepartmentRange(1, 200)),
        ],
    )
    def test_known_departments(self, program, expected):
        """Test each recognized department maps to its band."""
        assert department_range(program) == expected

    def test_unknown_department_falls_back(self):
        """Test unrecognized departments get 900-999."""
        assert department_range("B.Tech Mechanical") == FALLBACK_DEPARTMENT_RANGE
        assert FALLBACK_DEPARTMENT_RANGE == DepartmentRange(900, 999)

    def test_range_covers_bounds(self):
        """Test the band is inclusive on both ends."""
        band = DepartmentRange(501, 600)

        assert band.covers(501)
        assert band.covers(600)
        assert not band.covers(500)
        assert not band.covers(601)
        assert band.size == 100


class TestRollNumberFormat:
    """Tests for roll number formatting and parsing."""

    def test_roll_base(self):
        """Test base is prefix plus four-digit year."""
        assert roll_base("BT", 2024) == "BT2024"

    def test_format_pads_sequence(self):
        """Test the sequence is zero-padded to three digits."""
        assert format_roll_number("BT", 2024, 1) == "BT2024001"
        assert format_roll_number("MT", 2023, 512) == "MT2023512"

    def test_parse_valid_sequence(self):
        """Test a well-formed roll number yields its sequence."""
        assert parse_sequence("BT2024017", "BT2024") == 17

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "BT2024",
            "BT20241",
            "BT20240001",
            "BT2024A17",
            "MT2024017",
            "BT2023017",
        ],
    )
    def test_parse_rejects_malformed(self, value):
        """Test malformed or foreign roll numbers are rejected."""
        assert parse_sequence(value, "BT2024") is None
