# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member store: the single source of truth for all members."""

import logging
import uuid
from collections.abc import Iterable

from roster.events import MEMBER_EVENTS, EventBus, EventHandler, StoreEvent
from roster.models.enums import MemberType
from roster.schemas.member import Member

logger = logging.getLogger(__name__)


class MemberStore:
    """In-memory, observable collection of members.

    Members are kept newest-created first. Values go in and come out as
    copies, so the only way to change stored state is through the
    mutating methods, each of which publishes a store event.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self._members: list[Member] = []
        self.event_bus = event_bus or EventBus()

    def all(self) -> list[Member]:
        """Get all members in store order."""
        return [member.model_copy(deep=True) for member in self._members]

    def roster(self) -> list[Member]:
        """Get members that have made the roster."""
        return self._of_type(MemberType.ROSTER_MEMBER)

    def prospects(self) -> list[Member]:
        """Get members still being evaluated."""
        return self._of_type(MemberType.PROSPECT)

    def by_id(self, member_id: uuid.UUID) -> Member | None:
        """Get a member by ID, or None if it does not exist."""
        index = self._index_of(member_id)
        if index is None:
            return None
        return self._members[index].model_copy(deep=True)

    def create(self, member: Member) -> Member:
        """Insert a member at the front of the collection."""
        self._members.insert(0, member.model_copy(deep=True))
        logger.debug(f"Created member {member.id}")
        self.event_bus.publish(StoreEvent.MEMBER_CREATED, {"member_id": member.id})
        return member

    def update(self, member: Member) -> bool:
        """Replace the member with the same ID, keeping its position.

        Returns:
            False if no member with that ID exists
        """
        index = self._index_of(member.id)
        if index is None:
            logger.debug(f"Ignoring update for unknown member {member.id}")
            return False

        self._members[index] = member.model_copy(deep=True)
        logger.debug(f"Updated member {member.id}")
        self.event_bus.publish(StoreEvent.MEMBER_UPDATED, {"member_id": member.id})
        return True

    def delete(self, member_id: uuid.UUID) -> bool:
        """Remove a member.

        Returns:
            False if no member with that ID exists
        """
        index = self._index_of(member_id)
        if index is None:
            return False

        del self._members[index]
        logger.debug(f"Deleted member {member_id}")
        self.event_bus.publish(StoreEvent.MEMBER_DELETED, {"member_id": member_id})
        return True

    def replace_all(self, members: Iterable[Member]) -> None:
        """Replace the whole collection, keeping the given order."""
        self._members = [member.model_copy(deep=True) for member in members]
        self.event_bus.publish(
            StoreEvent.MEMBERS_RESET, {"count": len(self._members)}
        )

    def subscribe(self, handler: EventHandler, subscriber_id: str | None = None) -> None:
        """Subscribe a handler to every member change."""
        self.event_bus.subscribe_many(MEMBER_EVENTS, handler, subscriber_id)

    def unsubscribe(
        self, handler: EventHandler, subscriber_id: str | None = None
    ) -> None:
        """Remove a handler added with subscribe()."""
        for event_type in MEMBER_EVENTS:
            self.event_bus.unsubscribe(event_type, handler, subscriber_id)

    def __len__(self) -> int:
        return len(self._members)

    def _of_type(self, member_type: MemberType) -> list[Member]:
        return [
            member.model_copy(deep=True)
            for member in self._members
            if member.member_type == member_type
        ]

    def _index_of(self, member_id: uuid.UUID) -> int | None:
        for index, member in enumerate(self._members):
            if member.id == member_id:
                return index
        return None
