# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the domain and student repositories.

Queries run against a real database through the fixtures in conftest.py.
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from src.infrastructure.database.repositories import DomainRepository, StudentRepository

pytestmark = pytest.mark.integration


class TestSchema:
    """Tests for the created schema."""

    @pytest.mark.asyncio
    async def test_tables_created(self, db_session):
        """Verify the domains and students tables exist."""
        conn = await db_session.connection()
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert "domains" in tables
        assert "students" in tables

    @pytest.mark.asyncio
    async def test_duplicate_roll_number_rejected(self, db_session, add_domain, add_student):
        """Verify two students cannot share a roll number."""
        domain = await add_domain()
        await add_student(domain, "BT2024001", "Asha", email="asha@example.com")

        with pytest.raises(IntegrityError):
            await add_student(domain, "BT2024001", "Bala", email="bala@example.com")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, db_session, add_domain, add_student):
        """Verify two students cannot share an email."""
        domain = await add_domain()
        await add_student(domain, "BT2024001", "Asha", email="same@example.com")

        with pytest.raises(IntegrityError):
            await add_student(domain, "BT2024002", "Bala", email="same@example.com")


class TestDomainRepository:
    """Tests for DomainRepository."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, db_session, add_domain):
        """Test lookup by id, with and without a row lock."""
        domain = await add_domain(program="M.Tech ECE")
        repo = DomainRepository(db_session)

        assert (await repo.get_by_id(domain.id)).program == "M.Tech ECE"
        assert (await repo.get_by_id(domain.id, for_update=True)).id == domain.id
        assert await repo.get_by_id(domain.id + 100) is None

    @pytest.mark.asyncio
    async def test_exists(self, db_session, add_domain):
        """Test existence check."""
        domain = await add_domain()
        repo = DomainRepository(db_session)

        assert await repo.exists(domain.id) is True
        assert await repo.exists(domain.id + 100) is False

    @pytest.mark.asyncio
    async def test_count_active_students(self, db_session, add_domain, add_student):
        """Test only active students of the given domain are counted."""
        cse = await add_domain()
        ece = await add_domain(program="B.Tech ECE")
        await add_student(cse, "BT2024001", "A", is_active=True)
        await add_student(cse, "BT2024002", "B", is_active=False)
        await add_student(cse, "BT2024003", "C", is_active=True)
        await add_student(ece, "BT2024501", "D", is_active=True)

        repo = DomainRepository(db_session)

        assert await repo.count_active_students(cse.id) == 2
        assert await repo.count_active_students(ece.id) == 1

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_id(self, db_session, add_domain):
        """Test domains are listed in creation order."""
        first = await add_domain(program="B.Tech CSE")
        second = await add_domain(program="Diploma")

        domains = await DomainRepository(db_session).list_all()

        assert [d.id for d in domains] == [first.id, second.id]


class TestStudentRepository:
    """Tests for StudentRepository."""

    @pytest.mark.asyncio
    async def test_get_by_email_ignores_case(self, db_session, add_domain, add_student):
        """Test email lookup matches regardless of case."""
        domain = await add_domain()
        student = await add_student(domain, "BT2024001", "Asha", email="Asha.Rao@Example.com")
        repo = StudentRepository(db_session)

        assert (await repo.get_by_email("asha.rao@example.com")).id == student.id
        assert (await repo.get_by_email("ASHA.RAO@EXAMPLE.COM")).id == student.id
        assert await repo.get_by_email("other@example.com") is None

    @pytest.mark.asyncio
    async def test_list_by_domain_includes_inactive(self, db_session, add_domain, add_student):
        """Test the full domain listing returns active and inactive students."""
        cse = await add_domain()
        ece = await add_domain(program="B.Tech ECE")
        a = await add_student(cse, "BT2024001", "A", is_active=True)
        b = await add_student(cse, "BT2024002", "B", is_active=False)
        await add_student(ece, "BT2024501", "C")

        students = await StudentRepository(db_session).list_by_domain(cse.id)

        assert [s.id for s in students] == [a.id, b.id]

    @pytest.mark.asyncio
    async def test_list_active_by_domain(self, db_session, add_domain, add_student):
        """Test the active listing skips inactive students."""
        cse = await add_domain()
        a = await add_student(cse, "BT2024001", "A", is_active=True)
        await add_student(cse, "BT2024002", "B", is_active=False)

        students = await StudentRepository(db_session).list_active_by_domain(cse.id)

        assert [s.id for s in students] == [a.id]

    @pytest.mark.asyncio
    async def test_find_by_roll_prefix_and_year(self, db_session, add_domain, add_student):
        """Test the roll scan matches the base and the join year together."""
        domain = await add_domain()
        match = await add_student(domain, "BT2024001", "A", join_year=2024)
        await add_student(domain, "BT2024002", "B", join_year=2025)
        await add_student(domain, "BT2023001", "C", join_year=2024)
        await add_student(domain, "MT2024001", "D", join_year=2024)

        students = await StudentRepository(db_session).find_by_roll_prefix_and_year("BT2024", 2024)

        assert [s.id for s in students] == [match.id]

    @pytest.mark.asyncio
    async def test_find_by_roll_prefix_escapes_wildcards(self, db_session, add_domain, add_student):
        """Test LIKE wildcards in the base are matched literally."""
        domain = await add_domain()
        await add_student(domain, "BT2024001", "A", join_year=2024)

        repo = StudentRepository(db_session)

        assert await repo.find_by_roll_prefix_and_year("BT_024", 2024) == []
        assert await repo.find_by_roll_prefix_and_year("BT%", 2024) == []

    @pytest.mark.asyncio
    async def test_delete_all(self, db_session, add_domain, add_student):
        """Test bulk delete removes every given student."""
        domain = await add_domain()
        students = [
            await add_student(domain, "BT2024001", "A"),
            await add_student(domain, "BT2024002", "B"),
        ]
        repo = StudentRepository(db_session)

        await repo.delete_all(students)

        assert await repo.list_by_domain(domain.id) == []
