# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sample data used to seed the stores at startup."""

import datetime
import logging
import uuid
from decimal import Decimal

from roster.models.enums import (
    DateVibe,
    IntimacyLevel,
    MemberHealth,
    MemberSource,
    MemberType,
    ProspectStage,
)
from roster.schemas.date_record import DateRecord
from roster.schemas.member import Contact, Member
from roster.services.date_store import DateStore
from roster.services.member_store import MemberStore

logger = logging.getLogger(__name__)

SARAH_ID = uuid.UUID("1E2F3D4C-5B6A-7890-1234-567890ABCDEF")
JESSICA_ID = uuid.UUID("2A3B4C5D-6E7F-8901-2345-678901BCDEF0")
EMMA_ID = uuid.UUID("3B4C5D6E-7F8A-9012-3456-789012CDEF01")
MADISON_ID = uuid.UUID("4D5E6F7A-8B9C-0123-4567-89012DEFAB12")
OLIVIA_ID = uuid.UUID("5E6F7A8B-9C0D-1234-5678-90123EFABC23")


def _years_ago(now: datetime.datetime, years: int) -> datetime.date:
    today = now.date()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return today.replace(year=today.year - years, day=28)


def sample_members(now: datetime.datetime) -> list[Member]:
    """Build the sample roster members followed by the sample prospects."""

    def days_ago(days: int) -> datetime.datetime:
        return now - datetime.timedelta(days=days)

    def contact(**handles: str) -> Contact:
        return Contact(created_at=now, updated_at=now, **handles)

    return [
        Member(
            id=SARAH_ID,
            name="Sarah",
            avatar_url="https://example.com/sarah.jpg",
            birthday=_years_ago(now, 27),
            member_type=MemberType.ROSTER_MEMBER,
            upgraded_date=days_ago(45),
            last_interaction_date=days_ago(10),
            source=MemberSource.HINGE,
            stage=ProspectStage.MET,
            health=MemberHealth.ACTIVE,
            notes="Great chemistry, loves indie music, works in tech",
            contact=contact(
                instagram_handle="sarahsmith",
                snapchat_handle="ssmith22",
                phone_number="555-0123",
                address="50 West 4th Street, New York, NY, 10012",
            ),
            labels={"Foodie", "Tech", "Artsy"},
            created_at=now,
            updated_at=now,
        ),
        Member(
            id=JESSICA_ID,
            name="Jessica",
            avatar_url="https://example.com/jessica.jpg",
            birthday=_years_ago(now, 25),
            member_type=MemberType.ROSTER_MEMBER,
            upgraded_date=days_ago(30),
            last_interaction_date=days_ago(27),
            source=MemberSource.BUMBLE,
            stage=ProspectStage.MET,
            health=MemberHealth.BENCHED,
            notes="Taking it slow, great conversations",
            contact=contact(
                instagram_handle="jessicaj",
                tiktok_handle="jessj",
                phone_number="555-0456",
            ),
            labels={"Yoga", "Vegan", "Writer"},
            created_at=now,
            updated_at=now,
        ),
        Member(
            id=EMMA_ID,
            name="Emma",
            avatar_url="https://example.com/emma.jpg",
            member_type=MemberType.PROSPECT,
            source=MemberSource.MUTUAL_FRIENDS,
            stage=ProspectStage.TALKING,
            notes="Friend of Alex, seems interesting",
            contact=contact(
                instagram_handle="emmak",
                phone_number="555-0789",
                address="San Francisco",
            ),
            labels={"Friend of Friend", "Doctor"},
            created_at=now,
            updated_at=now,
        ),
        Member(
            id=MADISON_ID,
            name="Madison",
            avatar_url="https://example.com/madison.jpg",
            member_type=MemberType.PROSPECT,
            source=MemberSource.HINGE,
            stage=ProspectStage.SCHEDULED,
            notes="First date planned for next week at wine bar",
            contact=contact(instagram_handle="maddie_r", snapchat_handle="mads22"),
            labels={"Finance", "Gym"},
            created_at=now,
            updated_at=now,
        ),
        Member(
            id=OLIVIA_ID,
            name="Olivia",
            avatar_url="https://example.com/olivia.jpg",
            member_type=MemberType.PROSPECT,
            source=MemberSource.BAR,
            stage=ProspectStage.MATCHED,
            notes="Met at Warehouse, good initial conversation",
            contact=contact(instagram_handle="liv.smith"),
            labels={"Met IRL", "Bartender"},
            created_at=now,
            updated_at=now,
        ),
    ]


def sample_dates(now: datetime.datetime) -> list[DateRecord]:
    """Build the sample dates, all referencing sample roster members."""
    return [
        DateRecord(
            member_id=SARAH_ID,
            date=now - datetime.timedelta(days=7),
            vibe=DateVibe.AMAZING,
            intimacy_level=IntimacyLevel.OVERNIGHT,
            spent_amount=Decimal("85.00"),
            notes="Dinner at Italian place, then drinks at rooftop bar",
        ),
        DateRecord(
            member_id=SARAH_ID,
            date=now - datetime.timedelta(days=21),
            vibe=DateVibe.GOOD,
            intimacy_level=IntimacyLevel.HOOKUP,
            spent_amount=Decimal("40.00"),
            notes="Coffee and walk in the park, came over after",
        ),
        DateRecord(
            member_id=JESSICA_ID,
            date=now - datetime.timedelta(days=14),
            vibe=DateVibe.GOOD,
            intimacy_level=IntimacyLevel.KISSING,
            spent_amount=Decimal("60.00"),
            notes="Vegan restaurant and art gallery",
        ),
    ]


def load_sample_data(
    member_store: MemberStore,
    date_store: DateStore,
    now: datetime.datetime | None = None,
) -> None:
    """Replace the contents of both stores with the sample data set."""
    now = now or datetime.datetime.now()
    members = sample_members(now)
    dates = sample_dates(now)

    member_store.replace_all(members)
    date_store.replace_all(dates)
    logger.info(f"Loaded {len(members)} sample members and {len(dates)} sample dates")
