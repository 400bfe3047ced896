# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from roster.api.v1 import dates, members

api_router = APIRouter()

# Member routes
api_router.include_router(members.router, prefix="/members", tags=["members"])

# Date routes
api_router.include_router(dates.router, prefix="/dates", tags=["dates"])
