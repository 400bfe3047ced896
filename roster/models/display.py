# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Presentation lookup tables (colors, icons, emoji) keyed by enum member."""

from dataclasses import dataclass

from roster.formatting import capitalized_first_letter
from roster.models.enums import (
    DateVibe,
    IntimacyLevel,
    MemberHealth,
    MemberSource,
    ProspectStage,
    SourceCategory,
)


@dataclass(frozen=True)
class StageDisplay:
    """Display attributes for a prospect stage."""

    color: str
    hex_color: str
    emoji: str


@dataclass(frozen=True)
class HealthDisplay:
    """Display attributes for a roster member's health."""

    color: str
    icon: str


STAGE_DISPLAY: dict[ProspectStage, StageDisplay] = {
    ProspectStage.MATCHED: StageDisplay("blue", "#007AFF", "✨"),
    ProspectStage.TALKING: StageDisplay("purple", "#AF52DE", "💬"),
    ProspectStage.SCHEDULED: StageDisplay("orange", "#FF9500", "🕒"),
    ProspectStage.MET: StageDisplay("green", "#34C759", "👋"),
    ProspectStage.CUT: StageDisplay("gray", "#8E8E93", "🗑️"),
}

HEALTH_DISPLAY: dict[MemberHealth, HealthDisplay] = {
    MemberHealth.ACTIVE: HealthDisplay("green", "circle.fill"),
    MemberHealth.BENCHED: HealthDisplay("yellow", "pause.fill"),
    MemberHealth.RETIRED: HealthDisplay("gray", "pause.fill"),
}

# Dating apps share the default heart
DEFAULT_SOURCE_EMOJI = "❤️"

SOURCE_EMOJI: dict[MemberSource, str] = {
    MemberSource.INSTAGRAM: "📸",
    MemberSource.SNAPCHAT: "👻",
    MemberSource.DISCORD: "🎮",
    MemberSource.REDDIT: "🤖",
    MemberSource.BAR: "🍺",
    MemberSource.CLUB: "🪩",
    MemberSource.CONCERT: "🎸",
    MemberSource.FESTIVAL: "🎪",
    MemberSource.PARTY: "🎉",
    MemberSource.WEDDING: "💒",
    MemberSource.WORK: "💼",
    MemberSource.SCHOOL: "📚",
    MemberSource.GYM: "💪",
    MemberSource.CAFE: "☕️",
    MemberSource.GROCERY: "🛒",
    MemberSource.MUTUAL_FRIENDS: "👥",
}

VIBE_PILL_TEXT: dict[DateVibe, str] = {
    DateVibe.AMAZING: "Amazing 🥰",
    DateVibe.GOOD: "Good ☺️",
    DateVibe.NEUTRAL: "Okay 😐",
    DateVibe.AWKWARD: "Awkward 🥲",
    DateVibe.BAD: "Bad 🤮",
}

INTIMACY_PILL_TEXT: dict[IntimacyLevel, str | None] = {
    IntimacyLevel.NONE: None,
    IntimacyLevel.KISSING: "Kissed 💋",
    IntimacyLevel.HOOKUP: "Hooked Up 🩵",
    IntimacyLevel.OVERNIGHT: "Stayed Over 🌙",
}


def source_emoji(source: MemberSource) -> str:
    """Get the emoji for a member source."""
    return SOURCE_EMOJI.get(source, DEFAULT_SOURCE_EMOJI)


def source_label(source: MemberSource) -> str:
    """Get the picker label for a source, e.g. ``"🍺 Bar"``."""
    return f"{source_emoji(source)} {capitalized_first_letter(source.value)}"


def stage_label(stage: ProspectStage) -> str:
    """Get the pill label for a stage, e.g. ``"💬 Talking"``."""
    return f"{STAGE_DISPLAY[stage].emoji} {capitalized_first_letter(stage.value)}"


def sources_for(category: SourceCategory) -> list[MemberSource]:
    """List the sources in a category, in declaration order."""
    return [source for source in MemberSource if source.category == category]
