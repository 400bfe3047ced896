# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Form draft controller for creating and editing members."""

import datetime
import logging
from collections.abc import Callable
from dataclasses import dataclass

from roster.formatting import capitalized_first_letter
from roster.models.enums import MemberType
from roster.schemas.member import Contact, Member, MemberBase, MemberDraft, MemberFormData
from roster.services.member_store import MemberStore

logger = logging.getLogger(__name__)

DRAFT_FIELDS = frozenset(MemberBase.model_fields)

# Draft fields that cannot be cleared from a form submission
REQUIRED_DRAFT_FIELDS = frozenset(
    {"name", "member_type", "source", "stage", "health", "notes", "labels"}
)


class InvalidDraftError(ValueError):
    """Raised when committing a draft that does not validate."""


@dataclass(frozen=True)
class CreatingMember:
    """Form mode for a brand-new member of the given type."""

    member_type: MemberType


@dataclass(frozen=True)
class UpdatingMember:
    """Form mode for editing an existing member."""

    member: Member


MemberFormMode = CreatingMember | UpdatingMember


class _ContactField:
    """Two-way accessor for an optional contact field.

    Reads give "" for a missing value; writing "" clears the field.
    """

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, controller: "MemberFormController | None", owner: type) -> object:
        if controller is None:
            return self
        return getattr(controller.draft.contact, self.name) or ""

    def __set__(self, controller: "MemberFormController", value: str | None) -> None:
        setattr(controller.draft.contact, self.name, value or None)


class MemberFormController:
    """Stages edits to a single member until they are committed.

    The mode is fixed at construction. The only state change it allows is
    upgrading a prospect to a roster member while updating.
    """

    address = _ContactField()
    phone_number = _ContactField()
    instagram_handle = _ContactField()
    snapchat_handle = _ContactField()
    tiktok_handle = _ContactField()

    def __init__(
        self,
        mode: MemberFormMode,
        store: MemberStore,
        clock: Callable[[], datetime.datetime] = datetime.datetime.now,
    ) -> None:
        self.mode = mode
        self.store = store
        self._clock = clock
        self.draft = self._initial_draft()

    @property
    def is_creating(self) -> bool:
        return isinstance(self.mode, CreatingMember)

    @property
    def title(self) -> str:
        """Form title, e.g. "New Prospect" or "Updating Profile"."""
        if isinstance(self.mode, CreatingMember):
            words = self.mode.member_type.value.split("_")
            return "New " + " ".join(capitalized_first_letter(w) for w in words)
        return "Updating Profile"

    def validate(self) -> bool:
        """Check the draft can be saved: the name must not be blank."""
        return bool(self.draft.name.strip())

    def upgrade(self) -> bool:
        """Promote an existing prospect to the roster.

        Only applies while updating a prospect; otherwise nothing changes.

        Returns:
            True if the draft was upgraded
        """
        if not isinstance(self.mode, UpdatingMember):
            return False
        if self.draft.member_type != MemberType.PROSPECT:
            return False

        self.draft.member_type = MemberType.ROSTER_MEMBER
        self.draft.upgraded_date = self._clock()
        return True

    def apply(self, data: MemberFormData) -> None:
        """Copy the fields set on a form submission onto the draft.

        member_type is never taken from a submission: it is fixed by the
        mode and only changes through upgrade().
        """
        for field in data.model_fields_set - {"contact", "member_type"}:
            value = getattr(data, field)
            if value is None and field in REQUIRED_DRAFT_FIELDS:
                continue
            setattr(self.draft, field, value)

        if data.contact is not None:
            for field in data.contact.model_fields_set:
                setattr(self, field, getattr(data.contact, field))

    def commit(self) -> Member:
        """Write the draft back to the member store.

        Raises:
            InvalidDraftError: If the draft does not validate
        """
        if not self.validate():
            raise InvalidDraftError("Member name must not be blank")

        now = self._clock()
        fields = self.draft.model_dump(include=DRAFT_FIELDS)

        if isinstance(self.mode, CreatingMember):
            fields.update(created_at=now, updated_at=now)
            member = Member(**fields)
            self.store.create(member)
            logger.info(f"Created {member.member_type.value} {member.id}")
            return member

        original = self.mode.member
        fields.update(created_at=original.created_at, updated_at=now)
        member = Member(id=original.id, **fields)
        if _contact_changed(original.contact, member.contact):
            member.contact.updated_at = now
        if not self.store.update(member):
            logger.warning(f"Member {member.id} no longer exists, update dropped")
        return member

    def _initial_draft(self) -> MemberDraft:
        if isinstance(self.mode, UpdatingMember):
            return MemberDraft(**self.mode.member.model_dump(include=DRAFT_FIELDS))

        now = self._clock()
        return MemberDraft(
            member_type=self.mode.member_type,
            contact=Contact(created_at=now, updated_at=now),
            created_at=now,
            updated_at=now,
        )


def _contact_changed(before: Contact, after: Contact) -> bool:
    ignored = {"created_at", "updated_at"}
    return before.model_dump(exclude=ignored) != after.model_dump(exclude=ignored)
