# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member and contact schemas."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from roster.formatting import compute_age
from roster.models.display import HEALTH_DISPLAY, source_label, stage_label
from roster.models.enums import (
    MemberHealth,
    MemberSource,
    MemberType,
    ProspectStage,
    SourceCategory,
)

CONTACT_TEXT_FIELDS = (
    "instagram_handle",
    "snapchat_handle",
    "tiktok_handle",
    "phone_number",
    "address",
)


def _blank_to_none(value: object) -> object:
    """Treat empty strings as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class Contact(BaseModel):
    """Contact details owned by exactly one member."""

    model_config = ConfigDict(validate_assignment=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, frozen=True)
    instagram_handle: str | None = None
    snapchat_handle: str | None = None
    tiktok_handle: str | None = None
    phone_number: str | None = None
    address: str | None = None
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.now)

    @field_validator(*CONTACT_TEXT_FIELDS, mode="before")
    @classmethod
    def normalize_blank(cls, value: object) -> object:
        return _blank_to_none(value)


class MemberBase(BaseModel):
    """Fields shared by committed members and form drafts."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    avatar_url: str | None = None
    birthday: datetime.date | None = None
    member_type: MemberType = MemberType.PROSPECT
    upgraded_date: datetime.datetime | None = None
    last_interaction_date: datetime.datetime | None = None
    source: MemberSource = MemberSource.HINGE
    stage: ProspectStage = ProspectStage.MATCHED
    health: MemberHealth = MemberHealth.ACTIVE
    notes: str = ""
    contact: Contact = Field(default_factory=Contact)
    labels: set[str] = Field(default_factory=set)
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.now)

    @field_validator("avatar_url", mode="before")
    @classmethod
    def normalize_blank_url(cls, value: object) -> object:
        return _blank_to_none(value)

    @field_validator("labels")
    @classmethod
    def normalize_labels(cls, value: set[str]) -> set[str]:
        """Trim labels and drop empty ones."""
        return {label.strip() for label in value if label.strip()}


class MemberDraft(MemberBase):
    """Uncommitted, in-progress edit of a member."""


class Member(MemberBase):
    """A tracked person, either a prospect or a roster member."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def age(self) -> int | None:
        """Whole years since the birthday, None without one."""
        return compute_age(self.birthday)


class ContactData(BaseModel):
    """Contact fields accepted from a form submission."""

    instagram_handle: str | None = Field(None, max_length=100)
    snapchat_handle: str | None = Field(None, max_length=100)
    tiktok_handle: str | None = Field(None, max_length=100)
    phone_number: str | None = Field(None, max_length=50)
    address: str | None = None


class MemberFormData(BaseModel):
    """Schema for creating or updating a member through the form.

    Only fields that are explicitly set are copied onto the draft.
    """

    name: str | None = Field(None, max_length=200)
    avatar_url: str | None = None
    birthday: datetime.date | None = None
    member_type: MemberType | None = None
    last_interaction_date: datetime.datetime | None = None
    source: MemberSource | None = None
    stage: ProspectStage | None = None
    health: MemberHealth | None = None
    notes: str | None = None
    contact: ContactData | None = None
    labels: set[str] | None = None


class MemberResponse(Member):
    """Schema for member response, with display attributes resolved."""

    source_category: SourceCategory
    source_label: str
    stage_label: str
    health_color: str
    is_active: bool

    @classmethod
    def from_member(cls, member: Member) -> "MemberResponse":
        """Build a response from a committed member."""
        return cls(
            **member.model_dump(exclude={"age"}),
            source_category=member.source.category,
            source_label=source_label(member.source),
            stage_label=stage_label(member.stage),
            health_color=HEALTH_DISPLAY[member.health].color,
            is_active=member.health.is_active,
        )
