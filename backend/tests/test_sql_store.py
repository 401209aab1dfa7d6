"""
Finance Tracker Backend — SQL Store Tests
============================================

What:  Tests for SQLTransactionStore against a real SQLite database.
Why:   The store owns id generation, default dates, ordering and the
       table constraints the service relies on.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from finance_tracker.services.sql_store import SQLTransactionStore


def _document(**overrides) -> dict:
    document = {
        "description": "Coffee",
        "amount": 3.5,
        "category": "Food",
        "type": "expense",
    }
    document.update(overrides)
    return document


class TestInsert:

    @pytest.mark.asyncio
    async def test_insert_assigns_id_and_default_date(self, store):
        before = datetime.now(timezone.utc)

        tx = await store.insert(_document())

        assert isinstance(tx.id, UUID)
        assert tx.date is not None
        assert tx.date >= before

    @pytest.mark.asyncio
    async def test_insert_keeps_explicit_date(self, store):
        date = datetime(2024, 2, 1, tzinfo=timezone.utc)

        tx = await store.insert(_document(date=date))

        assert tx.date == date

    @pytest.mark.asyncio
    async def test_table_supplies_date_for_raw_insert(self, db_session, store):
        await db_session.execute(
            text(
                "INSERT INTO transactions (id, description, amount, category, type) "
                "VALUES (:id, 'Imported', 12.0, 'Misc', 'expense')"
            ),
            {"id": uuid4().hex},
        )
        await db_session.commit()

        [tx] = await store.find_all_sorted_by_date()

        assert tx.description == "Imported"
        assert tx.date is not None

    @pytest.mark.asyncio
    async def test_type_constraint_enforced(self, store):
        with pytest.raises(IntegrityError):
            await store.insert(_document(type="transfer"))

    @pytest.mark.asyncio
    async def test_session_usable_after_rejected_insert(self, store):
        with pytest.raises(IntegrityError):
            await store.insert(_document(description=None))

        tx = await store.insert(_document())
        assert tx.id is not None


class TestFindAll:

    @pytest.mark.asyncio
    async def test_empty_store(self, store):
        assert await store.find_all_sorted_by_date() == []

    @pytest.mark.asyncio
    async def test_sorted_by_date_descending(self, store):
        dates = [
            datetime(2024, 2, 1, tzinfo=timezone.utc),
            datetime(2024, 3, 15, tzinfo=timezone.utc),
            datetime(2024, 2, 2, tzinfo=timezone.utc),
        ]
        for i, date in enumerate(dates):
            await store.insert(_document(description=f"tx-{i}", date=date))

        result = await store.find_all_sorted_by_date()

        assert [tx.description for tx in result] == ["tx-1", "tx-2", "tx-0"]


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, store):
        tx = await store.insert(_document())

        updated = await store.find_by_id_and_update(str(tx.id), {"amount": 4.0})

        assert updated.id == tx.id
        assert updated.amount == 4.0
        assert updated.description == "Coffee"
        assert updated.category == "Food"

    @pytest.mark.asyncio
    async def test_update_ignores_id(self, store):
        tx = await store.insert(_document())

        updated = await store.find_by_id_and_update(str(tx.id), {"id": uuid4(), "category": "Drinks"})

        assert updated.id == tx.id
        assert updated.category == "Drinks"

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_none(self, store):
        assert await store.find_by_id_and_update(str(uuid4()), {"amount": 1.0}) is None

    @pytest.mark.asyncio
    async def test_update_malformed_id_returns_none(self, store):
        assert await store.find_by_id_and_update("tx123", {"amount": 1.0}) is None


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_removes_record(self, store):
        tx = await store.insert(_document())

        deleted = await store.find_by_id_and_delete(str(tx.id))

        assert deleted.id == tx.id
        assert await store.find_all_sorted_by_date() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_id_returns_none(self, store):
        await store.insert(_document())

        assert await store.find_by_id_and_delete(str(uuid4())) is None
        assert len(await store.find_all_sorted_by_date()) == 1

    @pytest.mark.asyncio
    async def test_changes_visible_to_other_sessions(self, store, session_factory):
        tx = await store.insert(_document())

        async with session_factory() as other:
            other_store = SQLTransactionStore(other)
            found = await other_store.find_all_sorted_by_date()

        assert [t.id for t in found] == [tx.id]
