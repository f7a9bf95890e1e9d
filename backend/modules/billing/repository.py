"""
Subscriber repository for database access.

Encapsulates Supabase queries for the subscribers table. Only the
subscription reconciler reads or writes it.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository

from .models import SubscriberRecord, SubscriptionStatus

logger = logging.getLogger(__name__)

TABLE = "subscribers"


class SubscriberRepository(BaseRepository[SubscriberRecord]):
    """
    Repository for subscriber records (one row per user).

    Updates are guarded by an optimistic check on updated_at: a row that
    changed since it was read is reported and then overwritten, so
    concurrent reconciliations are visible in the logs instead of racing
    silently.
    """

    def get_by_user_id(self, user_id: str) -> Optional[SubscriberRecord]:
        """Get the subscriber record for a user, or None if there is none."""
        result = self._db.table(TABLE).select("*").eq("user_id", user_id).execute()
        row = self._first(result)
        return self._map_to_record(row) if row else None

    def insert(self, user_id: str, data: dict[str, Any]) -> SubscriberRecord:
        """
        Create the subscriber record for a user.

        Args:
            user_id: Owner of the record.
            data: Column values (email, stripe ids, status, tier, period end).

        Returns:
            The inserted record.
        """
        payload = {**data, "user_id": user_id, "updated_at": self._now()}
        result = self._db.table(TABLE).insert(payload).execute()
        return self._map_to_record(result.data[0])

    def update(self, record: SubscriberRecord, data: dict[str, Any]) -> SubscriberRecord:
        """
        Update an existing subscriber record.

        Args:
            record: The record as it was read before this update.
            data: Columns to change.

        Returns:
            The updated record.
        """
        payload = {**data, "updated_at": self._now()}

        query = self._db.table(TABLE).update(payload).eq("id", record.id)
        if record.updated_at is not None:
            query = query.eq("updated_at", record.updated_at)
        result = query.execute()

        if not result.data:
            logger.warning(
                f"Subscriber record {record.id} changed since it was read "
                f"(updated_at {record.updated_at}); overwriting with the latest provider state"
            )
            result = self._db.table(TABLE).update(payload).eq("id", record.id).execute()

        row = self._first(result)
        return self._map_to_record(row) if row else record.model_copy(update=data)

    def mark_inactive(self, record: SubscriberRecord) -> SubscriberRecord:
        """Mark a record inactive and clear its tier and period end."""
        return self.update(
            record,
            {
                "subscription_status": SubscriptionStatus.INACTIVE.value,
                "subscription_tier": None,
                "current_period_end": None,
            },
        )

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _map_to_record(row: dict[str, Any]) -> SubscriberRecord:
        return SubscriberRecord(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            email=row.get("email"),
            stripe_customer_id=row.get("stripe_customer_id"),
            stripe_subscription_id=row.get("stripe_subscription_id"),
            subscription_status=row.get("subscription_status"),
            subscription_tier=row.get("subscription_tier"),
            current_period_end=row.get("current_period_end"),
            updated_at=row.get("updated_at"),
        )
