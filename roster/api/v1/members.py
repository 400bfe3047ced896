# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status

from roster.api.deps import get_date_store, get_member_store
from roster.models.enums import DateWindow, MemberType
from roster.schemas.date_record import DateRecordResponse
from roster.schemas.member import Member, MemberFormData, MemberResponse
from roster.services.date_store import DateStore
from roster.services.member_form import (
    CreatingMember,
    MemberFormController,
    UpdatingMember,
)
from roster.services.member_store import MemberStore

router = APIRouter()


def _get_member_or_404(store: MemberStore, member_id: uuid.UUID) -> Member:
    member = store.by_id(member_id)
    if not member:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )
    return member


def _commit(form: MemberFormController) -> MemberResponse:
    if not form.validate():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Name is required",
        )
    return MemberResponse.from_member(form.commit())


@router.get("", response_model=list[MemberResponse])
def list_members(
    member_type: MemberType | None = None,
    store: MemberStore = Depends(get_member_store),
) -> list[MemberResponse]:
    """List members, optionally only the roster or only prospects."""
    if member_type == MemberType.ROSTER_MEMBER:
        members = store.roster()
    elif member_type == MemberType.PROSPECT:
        members = store.prospects()
    else:
        members = store.all()
    return [MemberResponse.from_member(m) for m in members]


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def create_member(
    data: MemberFormData,
    store: MemberStore = Depends(get_member_store),
) -> MemberResponse:
    """Create a new prospect or roster member."""
    form = MemberFormController(
        CreatingMember(data.member_type or MemberType.PROSPECT), store
    )
    form.apply(data)
    return _commit(form)


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: uuid.UUID,
    store: MemberStore = Depends(get_member_store),
) -> MemberResponse:
    """Get a specific member."""
    return MemberResponse.from_member(_get_member_or_404(store, member_id))


@router.put("/{member_id}", response_model=MemberResponse)
def update_member(
    member_id: uuid.UUID,
    data: MemberFormData,
    store: MemberStore = Depends(get_member_store),
) -> MemberResponse:
    """Update a member's profile.

    Note: member_type is ignored here, use the upgrade endpoint instead.
    """
    member = _get_member_or_404(store, member_id)
    form = MemberFormController(UpdatingMember(member), store)
    form.apply(data)
    return _commit(form)


@router.post("/{member_id}/upgrade", response_model=MemberResponse)
def upgrade_member(
    member_id: uuid.UUID,
    store: MemberStore = Depends(get_member_store),
) -> MemberResponse:
    """Move a prospect onto the roster.

    Members already on the roster are returned unchanged.
    """
    member = _get_member_or_404(store, member_id)
    form = MemberFormController(UpdatingMember(member), store)
    if not form.upgrade():
        return MemberResponse.from_member(member)
    return _commit(form)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_member(
    member_id: uuid.UUID,
    store: MemberStore = Depends(get_member_store),
) -> Response:
    """Delete a member along with their dates."""
    if not store.delete(member_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{member_id}/dates", response_model=list[DateRecordResponse])
def list_member_dates(
    member_id: uuid.UUID,
    when: DateWindow | None = None,
    store: MemberStore = Depends(get_member_store),
    dates: DateStore = Depends(get_date_store),
) -> list[DateRecordResponse]:
    """List a member's dates, optionally only upcoming or only past ones."""
    _get_member_or_404(store, member_id)
    if when == DateWindow.UPCOMING:
        records = dates.upcoming(member_id)
    elif when == DateWindow.PAST:
        records = dates.past(member_id)
    else:
        records = dates.for_member(member_id)
    return [DateRecordResponse.from_record(r) for r in records]
