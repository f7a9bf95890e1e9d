"""Tests for the subscriber repository."""

import pytest
from unittest.mock import MagicMock

from modules.billing.models import SubscriberRecord
from modules.billing.repository import SubscriberRepository


def make_row(**overrides):
    row = {
        "id": "sub-row-1",
        "user_id": "user-1",
        "email": "a@x.com",
        "stripe_customer_id": "cus_1",
        "stripe_subscription_id": "sub_1",
        "subscription_status": "active",
        "subscription_tier": "pro",
        "current_period_end": "2030-01-01T00:00:00+00:00",
        "updated_at": "2026-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def repository(db):
    return SubscriberRepository(db)


class TestGetByUserId:
    def test_found(self, db, repository):
        db.table.return_value.select.return_value.eq.return_value.execute.return_value = MagicMock(
            data=[make_row()]
        )

        record = repository.get_by_user_id("user-1")

        db.table.assert_called_with("subscribers")
        assert record.stripe_customer_id == "cus_1"
        assert record.current_period_end.year == 2030

    def test_not_found(self, db, repository):
        db.table.return_value.select.return_value.eq.return_value.execute.return_value = MagicMock(data=[])
        assert repository.get_by_user_id("user-1") is None


class TestInsert:
    def test_adds_owner_and_timestamp(self, db, repository):
        db.table.return_value.insert.return_value.execute.return_value = MagicMock(data=[make_row()])

        repository.insert("user-1", {"email": "a@x.com"})

        payload = db.table.return_value.insert.call_args.args[0]
        assert payload["user_id"] == "user-1"
        assert payload["email"] == "a@x.com"
        assert "updated_at" in payload


class TestUpdate:
    def test_guarded_by_updated_at(self, db, repository):
        record = SubscriberRecord(**make_row())
        guarded = db.table.return_value.update.return_value.eq.return_value.eq.return_value
        guarded.execute.return_value = MagicMock(data=[make_row(subscription_status="past_due")])

        updated = repository.update(record, {"subscription_status": "past_due"})

        assert updated.subscription_status == "past_due"
        db.table.return_value.update.return_value.eq.return_value.eq.assert_called_once_with(
            "updated_at", record.updated_at
        )

    def test_concurrent_change_is_overwritten(self, db, repository, caplog):
        record = SubscriberRecord(**make_row())
        first_eq = db.table.return_value.update.return_value.eq.return_value
        first_eq.eq.return_value.execute.return_value = MagicMock(data=[])
        first_eq.execute.return_value = MagicMock(data=[make_row(subscription_status="canceled")])

        with caplog.at_level("WARNING"):
            updated = repository.update(record, {"subscription_status": "canceled"})

        assert updated.subscription_status == "canceled"
        assert first_eq.execute.called
        assert "changed since it was read" in caplog.text

    def test_mark_inactive_clears_tier(self, db, repository):
        record = SubscriberRecord(**make_row())
        guarded = db.table.return_value.update.return_value.eq.return_value.eq.return_value
        guarded.execute.return_value = MagicMock(
            data=[make_row(subscription_status="inactive", subscription_tier=None, current_period_end=None)]
        )

        updated = repository.mark_inactive(record)

        payload = db.table.return_value.update.call_args.args[0]
        assert payload["subscription_status"] == "inactive"
        assert payload["subscription_tier"] is None
        assert payload["current_period_end"] is None
        assert updated.subscription_tier is None
