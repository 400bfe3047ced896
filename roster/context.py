# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Composition root holding the per-process stores."""

import logging
from dataclasses import dataclass

from roster.events import EventBus, StoreEvent
from roster.services.date_store import DateStore
from roster.services.member_store import MemberStore

logger = logging.getLogger(__name__)

CASCADE_SUBSCRIBER = "date-store-cascade"


@dataclass
class RosterContext:
    """The stores and the event bus they publish on.

    Build one per process and hand it to whatever needs the stores.
    """

    event_bus: EventBus
    members: MemberStore
    dates: DateStore


def build_context(cascade_member_deletes: bool = True) -> RosterContext:
    """Create empty stores sharing one event bus.

    Args:
        cascade_member_deletes: Remove a member's dates when the member is
            deleted. Without it, dates of deleted members are left orphaned.
    """
    event_bus = EventBus()
    context = RosterContext(
        event_bus=event_bus,
        members=MemberStore(event_bus),
        dates=DateStore(event_bus),
    )
    if cascade_member_deletes:
        event_bus.subscribe(
            StoreEvent.MEMBER_DELETED,
            context.dates.handle_member_deleted,
            CASCADE_SUBSCRIBER,
        )
    logger.debug("Built roster context")
    return context
