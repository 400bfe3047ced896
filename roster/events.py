# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Event bus for store change notifications."""

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class StoreEvent(str, Enum):
    """Store changes that views can subscribe to."""

    # Member events
    MEMBER_CREATED = "member.created"
    MEMBER_UPDATED = "member.updated"
    MEMBER_DELETED = "member.deleted"
    MEMBERS_RESET = "members.reset"

    # Date events
    DATE_CREATED = "date.created"
    DATE_UPDATED = "date.updated"
    DATE_DELETED = "date.deleted"
    DATES_RESET = "dates.reset"


MEMBER_EVENTS = (
    StoreEvent.MEMBER_CREATED,
    StoreEvent.MEMBER_UPDATED,
    StoreEvent.MEMBER_DELETED,
    StoreEvent.MEMBERS_RESET,
)

DATE_EVENTS = (
    StoreEvent.DATE_CREATED,
    StoreEvent.DATE_UPDATED,
    StoreEvent.DATE_DELETED,
    StoreEvent.DATES_RESET,
)


@dataclass
class EventPayload:
    """Payload for a store event."""

    event_type: StoreEvent
    timestamp: datetime
    data: dict[str, Any]


# Type alias for event handlers
EventHandler = Callable[[EventPayload], Any]


class EventBus:
    """Synchronous event bus shared by the stores.

    Handlers are called in subscription order right after the mutation
    that triggered them.
    """

    def __init__(self) -> None:
        """Initialize the event bus."""
        self._handlers: dict[StoreEvent, list[tuple[str | None, EventHandler]]] = (
            defaultdict(list)
        )

    def subscribe(
        self,
        event_type: StoreEvent,
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Subscribe to an event.

        Args:
            event_type: Event type to subscribe to
            handler: Function to call when event fires
            subscriber_id: ID of the subscriber (for tracking/unsubscribe)
        """
        self._handlers[event_type].append((subscriber_id, handler))
        logger.debug(
            f"Subscribed {subscriber_id or 'anonymous handler'} "
            f"to event {event_type.value}"
        )

    def subscribe_many(
        self,
        event_types: Iterable[StoreEvent],
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Subscribe one handler to several events."""
        for event_type in event_types:
            self.subscribe(event_type, handler, subscriber_id)

    def unsubscribe(
        self,
        event_type: StoreEvent,
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Unsubscribe from an event.

        Args:
            event_type: Event type to unsubscribe from
            handler: Handler function to remove
            subscriber_id: Subscriber ID used when subscribing
        """
        entry = (subscriber_id, handler)
        if entry in self._handlers[event_type]:
            self._handlers[event_type].remove(entry)

    def unsubscribe_subscriber(self, subscriber_id: str) -> None:
        """Remove all handlers registered under a subscriber ID."""
        for event_type in list(self._handlers.keys()):
            self._handlers[event_type] = [
                (sid, handler)
                for sid, handler in self._handlers[event_type]
                if sid != subscriber_id
            ]

        logger.debug(f"Unsubscribed all handlers for {subscriber_id}")

    def publish(self, event_type: StoreEvent, data: dict[str, Any]) -> None:
        """Publish an event to all subscribers.

        A failing handler is logged and does not stop the others.

        Args:
            event_type: Type of event
            data: Event data payload
        """
        payload = EventPayload(
            event_type=event_type,
            timestamp=datetime.now(),
            data=data,
        )

        for subscriber_id, handler in list(self._handlers.get(event_type, [])):
            try:
                handler(payload)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event_type.value} "
                    f"(subscriber: {subscriber_id}): {e}"
                )

    def get_subscriber_count(self, event_type: StoreEvent) -> int:
        """Get the number of subscribers for an event type."""
        return len(self._handlers.get(event_type, []))

