# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Depends, Request

from roster.context import RosterContext
from roster.services.date_store import DateStore
from roster.services.member_store import MemberStore


def get_context(request: Request) -> RosterContext:
    """Get the per-process roster context created at startup."""
    return request.app.state.roster


def get_member_store(context: RosterContext = Depends(get_context)) -> MemberStore:
    """Get the member store."""
    return context.members


def get_date_store(context: RosterContext = Depends(get_context)) -> DateStore:
    """Get the date store."""
    return context.dates
