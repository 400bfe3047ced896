# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain enumerations and their display tables."""

from roster.models.enums import (
    DateVibe,
    DateWindow,
    IntimacyLevel,
    MemberHealth,
    MemberSource,
    MemberType,
    ProspectStage,
    SourceCategory,
)

__all__ = [
    "DateVibe",
    "DateWindow",
    "IntimacyLevel",
    "MemberHealth",
    "MemberSource",
    "MemberType",
    "ProspectStage",
    "SourceCategory",
]
