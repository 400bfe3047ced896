# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for the roster domain."""

from enum import Enum


class MemberType(str, Enum):
    """Member type enumeration.

    Type flow:
        PROSPECT → ROSTER_MEMBER (via upgrade, sets upgraded_date once)
    """

    PROSPECT = "prospect"
    ROSTER_MEMBER = "roster_member"


class SourceCategory(str, Enum):
    """Where-we-met category grouping member sources."""

    DATING_APPS = "Dating Apps"
    SOCIAL_MEDIA = "Social Media"
    IRL_SOCIAL = "IRL Social"
    IRL_DAILY = "IRL Daily Life"


class MemberSource(str, Enum):
    """Acquisition channel for a member."""

    # Online dating
    HINGE = "hinge"
    TINDER = "tinder"
    BUMBLE = "bumble"
    GRINDR = "grindr"
    FEELD = "feeld"
    RAYA = "raya"

    # Social networks
    INSTAGRAM = "instagram"
    SNAPCHAT = "snapchat"
    DISCORD = "discord"
    REDDIT = "reddit"

    # IRL - social
    BAR = "bar"
    CLUB = "club"
    CONCERT = "concert"
    FESTIVAL = "festival"
    PARTY = "party"
    WEDDING = "wedding"

    # IRL - daily life
    WORK = "work"
    SCHOOL = "school"
    GYM = "gym"
    CAFE = "cafe"
    GROCERY = "grocery"
    MUTUAL_FRIENDS = "mutual friends"

    @property
    def category(self) -> SourceCategory:
        """Category this source belongs to."""
        return SOURCE_CATEGORIES[self]


SOURCE_CATEGORIES: dict[MemberSource, SourceCategory] = {
    MemberSource.HINGE: SourceCategory.DATING_APPS,
    MemberSource.TINDER: SourceCategory.DATING_APPS,
    MemberSource.BUMBLE: SourceCategory.DATING_APPS,
    MemberSource.GRINDR: SourceCategory.DATING_APPS,
    MemberSource.FEELD: SourceCategory.DATING_APPS,
    MemberSource.RAYA: SourceCategory.DATING_APPS,
    MemberSource.INSTAGRAM: SourceCategory.SOCIAL_MEDIA,
    MemberSource.SNAPCHAT: SourceCategory.SOCIAL_MEDIA,
    MemberSource.DISCORD: SourceCategory.SOCIAL_MEDIA,
    MemberSource.REDDIT: SourceCategory.SOCIAL_MEDIA,
    MemberSource.BAR: SourceCategory.IRL_SOCIAL,
    MemberSource.CLUB: SourceCategory.IRL_SOCIAL,
    MemberSource.CONCERT: SourceCategory.IRL_SOCIAL,
    MemberSource.FESTIVAL: SourceCategory.IRL_SOCIAL,
    MemberSource.PARTY: SourceCategory.IRL_SOCIAL,
    MemberSource.WEDDING: SourceCategory.IRL_SOCIAL,
    MemberSource.WORK: SourceCategory.IRL_DAILY,
    MemberSource.SCHOOL: SourceCategory.IRL_DAILY,
    MemberSource.GYM: SourceCategory.IRL_DAILY,
    MemberSource.CAFE: SourceCategory.IRL_DAILY,
    MemberSource.GROCERY: SourceCategory.IRL_DAILY,
    MemberSource.MUTUAL_FRIENDS: SourceCategory.IRL_DAILY,
}


class ProspectStage(str, Enum):
    """Prospect pipeline position, meaningful while the member is a prospect."""

    MATCHED = "matched"  # Initial match/connection
    TALKING = "talking"  # Actively messaging
    SCHEDULED = "scheduled"  # First date planned
    MET = "met"  # Had at least one date
    CUT = "cut"  # Not moving forward


class MemberHealth(str, Enum):
    """Relationship status, meaningful while the member is on the roster."""

    ACTIVE = "active"
    BENCHED = "benched"  # Taking a break
    RETIRED = "retired"  # Ended on good terms

    @property
    def is_active(self) -> bool:
        """Active and benched members still count as active."""
        return self in (MemberHealth.ACTIVE, MemberHealth.BENCHED)


class DateVibe(str, Enum):
    """Subjective rating of a date."""

    AMAZING = "amazing"
    GOOD = "good"
    NEUTRAL = "neutral"
    AWKWARD = "awkward"
    BAD = "bad"


class IntimacyLevel(str, Enum):
    """How far a date went."""

    NONE = "none"
    KISSING = "kissing"
    HOOKUP = "hookup"
    OVERNIGHT = "overnight"


class DateWindow(str, Enum):
    """Read-time split of dates around today."""

    UPCOMING = "upcoming"  # today or later
    PAST = "past"
