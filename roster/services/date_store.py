# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Date store: the single source of truth for all logged dates."""

import datetime
import logging
import uuid
from collections.abc import Iterable

from roster.events import DATE_EVENTS, EventBus, EventHandler, EventPayload, StoreEvent
from roster.formatting import is_future_or_today
from roster.schemas.date_record import DateRecord

logger = logging.getLogger(__name__)


class DateStore:
    """In-memory, observable collection of date records.

    Records reference members by ID only; the store never checks that the
    member exists.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self._records: list[DateRecord] = []
        self.event_bus = event_bus or EventBus()

    def all(self) -> list[DateRecord]:
        """Get all records in store order (newest created first)."""
        return [record.model_copy(deep=True) for record in self._records]

    def for_member(self, member_id: uuid.UUID) -> list[DateRecord]:
        """Get the records logged for a member, in store order."""
        return [
            record.model_copy(deep=True)
            for record in self._records
            if record.member_id == member_id
        ]

    def by_id(self, record_id: uuid.UUID) -> DateRecord | None:
        """Get a record by ID, or None if it does not exist."""
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._records[index].model_copy(deep=True)

    def upcoming(
        self,
        member_id: uuid.UUID | None = None,
        today: datetime.date | None = None,
    ) -> list[DateRecord]:
        """Get records dated today or later, optionally for one member."""
        return [
            record
            for record in self._scope(member_id)
            if is_future_or_today(record.date, today)
        ]

    def past(
        self,
        member_id: uuid.UUID | None = None,
        today: datetime.date | None = None,
    ) -> list[DateRecord]:
        """Get records dated before today, optionally for one member."""
        return [
            record
            for record in self._scope(member_id)
            if not is_future_or_today(record.date, today)
        ]

    def create(self, record: DateRecord) -> DateRecord:
        """Insert a record at the front of the collection."""
        self._records.insert(0, record.model_copy(deep=True))
        logger.debug(f"Created date {record.id} for member {record.member_id}")
        self.event_bus.publish(StoreEvent.DATE_CREATED, self._event_data(record))
        return record

    def update(self, record: DateRecord) -> bool:
        """Replace the record with the same ID, keeping its position.

        Returns:
            False if no record with that ID exists
        """
        index = self._index_of(record.id)
        if index is None:
            logger.debug(f"Ignoring update for unknown date {record.id}")
            return False

        self._records[index] = record.model_copy(deep=True)
        self.event_bus.publish(StoreEvent.DATE_UPDATED, self._event_data(record))
        return True

    def delete(self, record_id: uuid.UUID) -> bool:
        """Remove a record.

        Returns:
            False if no record with that ID exists
        """
        index = self._index_of(record_id)
        if index is None:
            return False

        record = self._records.pop(index)
        logger.debug(f"Deleted date {record_id}")
        self.event_bus.publish(StoreEvent.DATE_DELETED, self._event_data(record))
        return True

    def delete_for_member(self, member_id: uuid.UUID) -> int:
        """Remove every record logged for a member.

        Returns:
            Number of records removed
        """
        doomed = [record.id for record in self._records if record.member_id == member_id]
        for record_id in doomed:
            self.delete(record_id)
        return len(doomed)

    def handle_member_deleted(self, payload: EventPayload) -> None:
        """Cascade a member deletion onto that member's dates."""
        removed = self.delete_for_member(payload.data["member_id"])
        if removed:
            logger.info(
                f"Removed {removed} dates of deleted member {payload.data['member_id']}"
            )

    def replace_all(self, records: Iterable[DateRecord]) -> None:
        """Replace the whole collection, keeping the given order."""
        self._records = [record.model_copy(deep=True) for record in records]
        self.event_bus.publish(StoreEvent.DATES_RESET, {"count": len(self._records)})

    def subscribe(self, handler: EventHandler, subscriber_id: str | None = None) -> None:
        """Subscribe a handler to every date change."""
        self.event_bus.subscribe_many(DATE_EVENTS, handler, subscriber_id)

    def unsubscribe(
        self, handler: EventHandler, subscriber_id: str | None = None
    ) -> None:
        """Remove a handler added with subscribe()."""
        for event_type in DATE_EVENTS:
            self.event_bus.unsubscribe(event_type, handler, subscriber_id)

    def __len__(self) -> int:
        return len(self._records)

    def _scope(self, member_id: uuid.UUID | None) -> list[DateRecord]:
        if member_id is None:
            return self.all()
        return self.for_member(member_id)

    def _index_of(self, record_id: uuid.UUID) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    @staticmethod
    def _event_data(record: DateRecord) -> dict[str, uuid.UUID]:
        return {"date_id": record.id, "member_id": record.member_id}
