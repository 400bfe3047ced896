# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Date record API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status

from roster.api.deps import get_date_store, get_member_store
from roster.models.enums import DateWindow
from roster.schemas.date_record import (
    DateRecord,
    DateRecordCreate,
    DateRecordResponse,
    DateRecordUpdate,
)
from roster.services.date_store import DateStore
from roster.services.member_store import MemberStore

router = APIRouter()

# Fields that an update may not clear
REQUIRED_FIELDS = {"date", "vibe", "intimacy_level", "notes"}


def _get_record_or_404(dates: DateStore, date_id: uuid.UUID) -> DateRecord:
    record = dates.by_id(date_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Date not found",
        )
    return record


@router.get("", response_model=list[DateRecordResponse])
def list_dates(
    when: DateWindow | None = None,
    dates: DateStore = Depends(get_date_store),
) -> list[DateRecordResponse]:
    """List all dates, optionally only upcoming or only past ones."""
    if when == DateWindow.UPCOMING:
        records = dates.upcoming()
    elif when == DateWindow.PAST:
        records = dates.past()
    else:
        records = dates.all()
    return [DateRecordResponse.from_record(r) for r in records]


@router.post("", response_model=DateRecordResponse, status_code=status.HTTP_201_CREATED)
def create_date(
    data: DateRecordCreate,
    members: MemberStore = Depends(get_member_store),
    dates: DateStore = Depends(get_date_store),
) -> DateRecordResponse:
    """Log a date with an existing member."""
    if not members.by_id(data.member_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )

    record = DateRecord(**data.model_dump())
    dates.create(record)
    return DateRecordResponse.from_record(record)


@router.get("/{date_id}", response_model=DateRecordResponse)
def get_date(
    date_id: uuid.UUID,
    dates: DateStore = Depends(get_date_store),
) -> DateRecordResponse:
    """Get a specific date."""
    return DateRecordResponse.from_record(_get_record_or_404(dates, date_id))


@router.put("/{date_id}", response_model=DateRecordResponse)
def update_date(
    date_id: uuid.UUID,
    data: DateRecordUpdate,
    dates: DateStore = Depends(get_date_store),
) -> DateRecordResponse:
    """Update a date."""
    record = _get_record_or_404(dates, date_id)
    changes = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field not in REQUIRED_FIELDS
    }

    updated = DateRecord(
        **{**record.model_dump(exclude={"is_future_or_today"}), **changes}
    )
    dates.update(updated)
    return DateRecordResponse.from_record(updated)


@router.delete("/{date_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_date(
    date_id: uuid.UUID,
    dates: DateStore = Depends(get_date_store),
) -> Response:
    """Delete a date."""
    if not dates.delete(date_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Date not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
