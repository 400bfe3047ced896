# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from roster.services.date_store import DateStore
from roster.services.member_form import (
    CreatingMember,
    InvalidDraftError,
    MemberFormController,
    UpdatingMember,
)
from roster.services.member_store import MemberStore

__all__ = [
    "CreatingMember",
    "DateStore",
    "InvalidDraftError",
    "MemberFormController",
    "MemberStore",
    "UpdatingMember",
]
