# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Date record schemas."""

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from roster.formatting import (
    is_future_or_today,
    long_date_string,
    relative_date_string,
)
from roster.models.display import INTIMACY_PILL_TEXT, VIBE_PILL_TEXT
from roster.models.enums import DateVibe, IntimacyLevel


class DateRecordBase(BaseModel):
    """Base date record schema."""

    date: datetime.datetime
    vibe: DateVibe = DateVibe.NEUTRAL
    intimacy_level: IntimacyLevel = IntimacyLevel.NONE
    spent_amount: Decimal | None = Field(None, ge=0)
    notes: str = ""


class DateRecord(DateRecordBase):
    """A logged date, referencing its member by id."""

    model_config = ConfigDict(validate_assignment=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, frozen=True)
    member_id: uuid.UUID = Field(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_future_or_today(self) -> bool:
        """Whether the date falls on today's calendar day or later."""
        return is_future_or_today(self.date)


class DateRecordCreate(DateRecordBase):
    """Schema for logging a date."""

    member_id: uuid.UUID


class DateRecordUpdate(BaseModel):
    """Schema for updating a date record.

    Note: member_id cannot be changed after creation.
    """

    date: datetime.datetime | None = None
    vibe: DateVibe | None = None
    intimacy_level: IntimacyLevel | None = None
    spent_amount: Decimal | None = Field(None, ge=0)
    notes: str | None = None


class DateRecordResponse(DateRecord):
    """Schema for date record response."""

    vibe_text: str
    intimacy_text: str | None
    relative_date: str
    long_date: str

    @classmethod
    def from_record(cls, record: DateRecord) -> "DateRecordResponse":
        """Build a response from a stored record."""
        return cls(
            **record.model_dump(exclude={"is_future_or_today"}),
            vibe_text=VIBE_PILL_TEXT[record.vibe],
            intimacy_text=INTIMACY_PILL_TEXT[record.intimacy_level],
            relative_date=relative_date_string(record.date),
            long_date=long_date_string(record.date),
        )
