# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from roster.schemas.date_record import (
    DateRecord,
    DateRecordCreate,
    DateRecordResponse,
    DateRecordUpdate,
)
from roster.schemas.member import (
    Contact,
    ContactData,
    Member,
    MemberDraft,
    MemberFormData,
    MemberResponse,
)

__all__ = [
    "Contact",
    "ContactData",
    "DateRecord",
    "DateRecordCreate",
    "DateRecordResponse",
    "DateRecordUpdate",
    "Member",
    "MemberDraft",
    "MemberFormData",
    "MemberResponse",
]
